"""
五张牌扑克的庄家(Dealer)

负责一局游戏的完整流程: 新牌组 → 发牌 → 比牌 → 结算.
Dealer在局与局之间只保留当前牌组和阶段.
"""

import logging
import random
from typing import List, Optional, Sequence

from ..core.config import GameConfig
from ..core.deck import Deck
from ..core.enums import RoundPhase
from ..core.exceptions import InvalidArgumentError
from ..core.hand import Hand
from ..core.player import Player
from ..evaluator.hand_evaluator import HAND_SIZE, ScoreStrategy, category_score
from .results import RoundResult, build_hand_snapshot


class Dealer:
    """
    庄家类

    每局创建并洗好一副新牌，轮流给每位玩家发5张牌，
    比较牌型分数，向最高分的玩家发放固定奖金。
    """

    CARDS_PER_PLAYER = HAND_SIZE

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        score_strategy: ScoreStrategy = category_score,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化庄家

        Args:
            config: 游戏配置，为None时使用默认配置
            rng: 洗牌用的随机数生成器，为None时按config.random_seed创建
            score_strategy: 比牌计分策略，默认只比较牌型分数
            logger: 日志记录器，如果为None则创建默认记录器
        """
        self._config = config or GameConfig.default()
        self._rng = rng or random.Random(self._config.random_seed)
        self._score_strategy = score_strategy
        self._logger = logger or logging.getLogger(__name__)

        self._deck = Deck(self._rng)
        self._phase = RoundPhase.NEW_DECK

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def deck(self) -> Deck:
        return self._deck

    @property
    def phase(self) -> RoundPhase:
        return self._phase

    @property
    def prize_per_round(self) -> int:
        return self._config.prize_per_round

    def start_new_game(self) -> None:
        """丢弃旧牌组，创建并洗好一副新的52张牌"""
        self._deck = Deck(self._rng)
        self._deck.shuffle()
        self._phase = RoundPhase.NEW_DECK
        self._logger.debug(f"新牌组已洗好，剩余 {len(self._deck)} 张")

    def deal_cards(self, players: Sequence[Player]) -> None:
        """
        给每位玩家换上空手牌，然后轮流发牌

        每一轮按列表顺序给每位玩家发一张，共发5轮。

        Raises:
            EmptyDeckError: 当牌组中的牌不足时
        """
        for player in players:
            player.set_hand(Hand())

        for _ in range(self.CARDS_PER_PLAYER):
            for player in players:
                player.hand.add(self._deck.draw_card())

        self._phase = RoundPhase.DEALT
        self._logger.debug(f"已向 {len(players)} 名玩家发牌，牌组剩余 {len(self._deck)} 张")

    def determine_winners(self, players: Sequence[Player]) -> List[Player]:
        """
        找出分数最高的所有玩家

        Returns:
            所有并列最高分的玩家，保持输入顺序；没有玩家时返回空列表
        """
        if not players:
            return []

        scores = [self._score_strategy(player.hand) for player in players]
        best = max(scores)
        self._phase = RoundPhase.EVALUATED
        return [player for player, score in zip(players, scores) if score == best]

    def distribute_prize(self, winners: Sequence[Player], amount: int) -> None:
        """向每位获胜者发放奖金"""
        for winner in winners:
            winner.add_money(amount)

    def play_round(self, players: Sequence[Player], round_number: int) -> RoundResult:
        """
        进行一局完整的游戏

        Returns:
            本局结果
        """
        self._logger.info(f"\n=== 第 {round_number} 局 ===")
        self.start_new_game()
        self.deal_cards(players)

        hands = [build_hand_snapshot(player) for player in players]
        self._logger.info("玩家手牌:")
        for snapshot in hands:
            self._logger.info(snapshot.describe())

        winners = self.determine_winners(players)

        if len(winners) == len(players):
            self._logger.info("\n结果: 平局!")
            self._logger.info("奖金: 无")
            for player in players:
                player.record_draw()
            result = RoundResult(round_number=round_number, hands=hands, is_draw=True)
        else:
            prize = self.prize_per_round
            self._logger.info("\n获胜者:")
            for winner in winners:
                self._logger.info(f"  🏆 {winner.name} - {winner.hand.evaluate()} (+{prize})")
            for player in players:
                if any(player is winner for winner in winners):
                    player.record_win()
                else:
                    player.record_lose()
            self.distribute_prize(winners, prize)
            result = RoundResult(
                round_number=round_number,
                hands=hands,
                winners=[winner.name for winner in winners],
                prize_per_winner=prize,
            )

        self._phase = RoundPhase.SETTLED
        return result

    def play_game(self, players: Sequence[Player], rounds: int) -> List[RoundResult]:
        """
        连续进行多局游戏

        Args:
            players: 玩家列表，不能为空
            rounds: 局数，必须大于0

        Returns:
            每一局的结果

        Raises:
            InvalidArgumentError: 当玩家列表为空或局数不是正数时
        """
        if not players:
            raise InvalidArgumentError("没有玩家")
        if rounds <= 0:
            raise InvalidArgumentError(f"局数必须是正数: {rounds}")

        return [self.play_round(players, round_number) for round_number in range(1, rounds + 1)]
