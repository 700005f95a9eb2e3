"""
单局结果与最终排名DTO的单元测试。

测试Pydantic验证、描述文本和排名顺序。
"""

import pytest
from pydantic import ValidationError

from five_card_poker.core import Player
from five_card_poker.evaluator import HandRank
from five_card_poker.game import (
    HandSnapshot, RoundResult, PlayerStanding, build_hand_snapshot, build_standings
)
from tests.common import player_with_hand


def _snapshot(name: str, hand_rank: HandRank = HandRank.HIGH_CARD) -> HandSnapshot:
    return HandSnapshot(
        player_name=name,
        cards=["2♠", "5♥", "7♦", "9♣", "J♠"],
        hand_rank=hand_rank,
        score=hand_rank.score,
    )


class TestHandSnapshot:
    """测试亮牌快照。"""

    def test_build_from_player(self):
        player = player_with_hand("Alice", ["3♣", "3♦", "3♥", "8♠", "8♣"])

        snapshot = build_hand_snapshot(player)

        assert snapshot.player_name == "Alice"
        assert snapshot.cards == ["3♣", "3♦", "3♥", "8♠", "8♣"]
        assert snapshot.hand_rank == HandRank.FULL_HOUSE
        assert snapshot.score == HandRank.FULL_HOUSE.score
        assert snapshot.describe() == "Alice: [3♣, 3♦, 3♥, 8♠, 8♣] (葫芦)"

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            _snapshot("")

    def test_negative_score_rejected(self):
        with pytest.raises(ValidationError):
            HandSnapshot(player_name="A", cards=[], hand_rank=HandRank.HIGH_CARD, score=-1)


class TestRoundResult:
    """测试单局结果。"""

    def test_winner_result(self):
        hands = [_snapshot("A", HandRank.FLUSH), _snapshot("B")]

        result = RoundResult(round_number=3, hands=hands, winners=["A"], prize_per_winner=100)

        assert result.winner_names == ["A"]
        assert [hand.player_name for hand in result.winning_hands()] == ["A"]
        assert result.summary() == "第 3 局: 获胜者 A(同花)，各得 100"

    def test_draw_result(self):
        result = RoundResult(round_number=1, hands=[_snapshot("A")], is_draw=True)

        assert result.winners == []
        assert result.summary() == "第 1 局: 平局，无奖金"

    def test_unknown_winner_rejected(self):
        """测试获胜者必须出现在亮牌列表中。"""
        with pytest.raises(ValidationError, match="不在亮牌列表中"):
            RoundResult(round_number=1, hands=[_snapshot("A")], winners=["Z"])

    def test_draw_with_prize_rejected(self):
        with pytest.raises(ValidationError, match="平局不能发放奖金"):
            RoundResult(round_number=1, hands=[_snapshot("A")], is_draw=True, prize_per_winner=100)

    def test_round_number_starts_at_one(self):
        with pytest.raises(ValidationError):
            RoundResult(round_number=0, hands=[])


class TestStandings:
    """测试最终排名。"""

    def test_sorted_by_money_descending(self):
        players = [Player("A", 100), Player("B", 300), Player("C", 200)]

        standings = build_standings(players)

        assert [s.name for s in standings] == ["B", "C", "A"]
        assert [s.position for s in standings] == [1, 2, 3]

    def test_equal_money_keeps_seat_order(self):
        players = [Player("A", 100), Player("B", 100), Player("C", 500)]

        standings = build_standings(players)

        assert [s.name for s in standings] == ["C", "A", "B"]

    def test_counters_copied(self):
        player = Player("A", 100)
        player.record_win()
        player.record_lose()
        player.record_lose()

        standing = build_standings([player])[0]

        assert (standing.wins, standing.losses, standing.draws) == (1, 2, 0)

    def test_position_must_be_positive(self):
        with pytest.raises(ValidationError):
            PlayerStanding(position=0, name="A", money=0)
