"""
完整模拟的集成测试。

使用默认的4人牌桌进行100局，检查资金守恒和胜负统计。
"""

import random

import pytest

from five_card_poker.core import GameConfig
from five_card_poker.evaluator import kicker_score
from five_card_poker.game import Dealer, build_standings


@pytest.mark.integration
class TestFullGame:
    """测试完整的多局模拟。"""

    def _play(self, seed: int, score_strategy=None):
        config = GameConfig(random_seed=seed)
        players = config.create_players()
        kwargs = {} if score_strategy is None else {"score_strategy": score_strategy}
        dealer = Dealer(config, **kwargs)
        results = dealer.play_game(players, config.total_rounds)
        return config, players, results

    def test_hundred_rounds_money_conservation(self):
        """测试总资金等于初始资金加上所有发出的奖金。"""
        config, players, results = self._play(seed=2024)

        paid = sum(len(r.winners) * r.prize_per_winner for r in results)
        assert len(results) == 100
        assert sum(p.money for p in players) == config.initial_money * len(players) + paid
        assert all(p.money >= config.initial_money for p in players)

    def test_counters_sum_to_rounds(self):
        _, players, results = self._play(seed=7)

        for player in players:
            assert player.win_count + player.lose_count + player.draw_count == len(results)

        draws = sum(1 for r in results if r.is_draw)
        assert all(p.draw_count == draws for p in players)

    def test_each_round_has_a_result(self):
        _, players, results = self._play(seed=99)

        for result in results:
            assert len(result.hands) == len(players)
            if result.is_draw:
                assert result.winners == []
            else:
                assert 1 <= len(result.winners) < len(players)
                best = max(hand.score for hand in result.hands)
                assert all(hand.score == best for hand in result.winning_hands())

    def test_same_seed_same_game(self):
        _, players1, results1 = self._play(seed=123)
        _, players2, results2 = self._play(seed=123)

        assert [r.winners for r in results1] == [r.winners for r in results2]
        assert [p.money for p in players1] == [p.money for p in players2]

    def test_kicker_strategy_game(self):
        """测试踢脚牌策略下获胜者仍然持有最高牌型。"""
        config, players, results = self._play(seed=5, score_strategy=kicker_score)

        paid = sum(len(r.winners) * r.prize_per_winner for r in results)
        assert sum(p.money for p in players) == config.initial_money * len(players) + paid
        for result in results:
            if not result.is_draw:
                best = max(hand.score for hand in result.hands)
                assert all(hand.score == best for hand in result.winning_hands())

        standings = build_standings(players)
        assert [s.money for s in standings] == sorted((p.money for p in players), reverse=True)

    def test_reused_dealer_across_games(self):
        dealer = Dealer(rng=random.Random(1))
        players = GameConfig().create_players()

        dealer.play_game(players, 3)
        dealer.play_game(players, 2)

        for player in players:
            assert player.win_count + player.lose_count + player.draw_count == 5
