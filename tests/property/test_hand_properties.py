"""
Property-based Tests for Hand Evaluation - 牌型评估属性测试

Tests:
    test_evaluate_is_total: 任意5张不同的牌都能得到一个牌型
    test_evaluate_ignores_order: 评估结果与牌的顺序无关
    test_kicker_score_extends_category: 踢脚牌分数以牌型分数开头
"""

from typing import List

import pytest
from hypothesis import given, strategies as st

from five_card_poker.evaluator import HandEvaluator, HandRank, category_score, kicker_score
from tests.common import ALL_CARD_STRS, make_hand


five_card_strs = st.lists(st.sampled_from(ALL_CARD_STRS), min_size=5, max_size=5, unique=True)


@pytest.mark.property_test
@given(five_card_strs)
def test_evaluate_is_total(card_strs: List[str]):
    """Property test: 评估总能返回10种牌型之一"""
    hand = make_hand(card_strs)

    hand_rank = hand.evaluate()

    assert hand_rank in HandRank
    assert 1 <= hand.open() <= 10


@pytest.mark.property_test
@given(five_card_strs.flatmap(st.permutations))
def test_evaluate_ignores_order(card_strs: List[str]):
    """Property test: 打乱顺序不改变牌型"""
    dealt = make_hand(card_strs)
    reordered = make_hand(sorted(card_strs))

    assert dealt.evaluate() == reordered.evaluate()
    assert HandEvaluator().tiebreak_values(dealt.get_cards()) == \
        HandEvaluator().tiebreak_values(reordered.get_cards())


@pytest.mark.property_test
@given(five_card_strs)
def test_kicker_score_extends_category(card_strs: List[str]):
    """Property test: 踢脚牌分数的第一位就是牌型分数"""
    hand = make_hand(card_strs)

    assert kicker_score(hand)[0] == category_score(hand)
