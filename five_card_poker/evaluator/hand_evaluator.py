"""
五张牌牌型评估器.

按固定优先级识别牌型，并提供跨手牌比较用的计分策略.
"""

from collections import Counter
from typing import TYPE_CHECKING, Any, Callable, List, Sequence, Tuple

from ..core.card import Card
from ..core.enums import Rank
from ..core.exceptions import InvalidStateError
from .hand_rank import HandRank

if TYPE_CHECKING:
    from ..core.hand import Hand


HAND_SIZE = 5
ROYAL_RANKS = frozenset({Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE})
WHEEL_VALUES = [2, 3, 4, 5, 14]


class HandEvaluator:
    """
    五张牌牌型评估器.

    每种牌型只在更高牌型都不成立时才检查，返回第一个命中的牌型.

    Examples:
        >>> evaluator = HandEvaluator()
        >>> cards = [Card.from_str(s) for s in ("10♠", "J♠", "Q♠", "K♠", "A♠")]
        >>> evaluator.evaluate(cards)
        <HandRank.ROYAL_FLUSH: 10>
    """

    def evaluate(self, cards: Sequence[Card]) -> HandRank:
        """
        评估恰好5张牌的牌型.

        Args:
            cards: 恰好5张牌

        Returns:
            HandRank: 命中的最高牌型

        Raises:
            InvalidStateError: 当牌数不是5张时
        """
        self._require_five(cards)

        if self._is_royal_flush(cards):
            return HandRank.ROYAL_FLUSH
        if self._is_straight_flush(cards):
            return HandRank.STRAIGHT_FLUSH
        if self._is_four_of_a_kind(cards):
            return HandRank.FOUR_OF_A_KIND
        if self._is_full_house(cards):
            return HandRank.FULL_HOUSE
        if self._is_flush(cards):
            return HandRank.FLUSH
        if self._is_straight(cards):
            return HandRank.STRAIGHT
        if self._is_three_of_a_kind(cards):
            return HandRank.THREE_OF_A_KIND
        if self._is_two_pair(cards):
            return HandRank.TWO_PAIR
        if self._is_one_pair(cards):
            return HandRank.ONE_PAIR
        return HandRank.HIGH_CARD

    def tiebreak_values(self, cards: Sequence[Card]) -> Tuple[int, ...]:
        """
        计算同牌型比较用的关键牌值.

        点数先按出现次数、再按牌力降序排列；A-2-3-4-5顺子中A按1计.

        Args:
            cards: 恰好5张牌

        Returns:
            Tuple[int, ...]: 降序的关键牌值
        """
        self._require_five(cards)

        if self._is_wheel(cards):
            return (5, 4, 3, 2, 1)

        rank_counts = self._get_rank_counts(cards)
        ordered = sorted(rank_counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
        return tuple(int(rank) for rank, _ in ordered)

    def _require_five(self, cards: Sequence[Card]) -> None:
        if len(cards) != HAND_SIZE:
            raise InvalidStateError(f"手牌必须恰好{HAND_SIZE}张才能评估，实际: {len(cards)}")

    def _is_royal_flush(self, cards: Sequence[Card]) -> bool:
        return self._is_flush(cards) and {card.rank for card in cards} == ROYAL_RANKS

    def _is_straight_flush(self, cards: Sequence[Card]) -> bool:
        return self._is_flush(cards) and self._is_straight(cards)

    def _is_four_of_a_kind(self, cards: Sequence[Card]) -> bool:
        return 4 in self._get_rank_counts(cards).values()

    def _is_full_house(self, cards: Sequence[Card]) -> bool:
        counts = self._get_rank_counts(cards).values()
        return 3 in counts and 2 in counts

    def _is_flush(self, cards: Sequence[Card]) -> bool:
        return len({card.suit for card in cards}) == 1

    def _is_straight(self, cards: Sequence[Card]) -> bool:
        values = self._sorted_values(cards)
        is_run = all(values[i + 1] - values[i] == 1 for i in range(len(values) - 1))
        return is_run or values == WHEEL_VALUES

    def _is_wheel(self, cards: Sequence[Card]) -> bool:
        return self._sorted_values(cards) == WHEEL_VALUES

    def _is_three_of_a_kind(self, cards: Sequence[Card]) -> bool:
        return 3 in self._get_rank_counts(cards).values()

    def _is_two_pair(self, cards: Sequence[Card]) -> bool:
        return list(self._get_rank_counts(cards).values()).count(2) == 2

    def _is_one_pair(self, cards: Sequence[Card]) -> bool:
        return 2 in self._get_rank_counts(cards).values()

    def _sorted_values(self, cards: Sequence[Card]) -> List[int]:
        return sorted(card.strength for card in cards)

    def _get_rank_counts(self, cards: Sequence[Card]) -> Counter:
        return Counter(card.rank for card in cards)


ScoreStrategy = Callable[['Hand'], Any]


def category_score(hand: 'Hand') -> int:
    """默认计分策略: 只比较牌型分数，不比较踢脚牌"""
    return hand.open()


def kicker_score(hand: 'Hand') -> Tuple[int, ...]:
    """计分策略: 牌型分数相同时再按关键牌值比较"""
    return (hand.open(),) + HandEvaluator().tiebreak_values(hand.get_cards())
