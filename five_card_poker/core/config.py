"""
游戏配置相关类的实现
包含牌桌玩家、初始资金、局数和奖金设置
"""

from dataclasses import dataclass, field, replace
from typing import List, Optional

from .deck import FULL_DECK_SIZE
from .exceptions import GameConfigError
from .player import Player
from ..evaluator.hand_evaluator import HAND_SIZE


DEFAULT_PLAYER_NAMES = ["幸运儿", "扑克大师", "新手", "倒霉蛋"]
DEFAULT_INITIAL_MONEY = 10000
DEFAULT_TOTAL_ROUNDS = 100
DEFAULT_PRIZE_PER_ROUND = 100


@dataclass
class GameConfig:
    """
    游戏配置类
    包含所有模拟相关的设置参数
    """
    # 玩家设置
    player_names: List[str] = field(default_factory=lambda: list(DEFAULT_PLAYER_NAMES))
    initial_money: int = DEFAULT_INITIAL_MONEY      # 初始资金

    # 游戏规则设置
    total_rounds: int = DEFAULT_TOTAL_ROUNDS        # 总局数
    prize_per_round: int = DEFAULT_PRIZE_PER_ROUND  # 每局奖金

    # 调试和测试设置
    random_seed: Optional[int] = None   # 随机种子，用于可重现的游戏

    def __post_init__(self):
        """验证配置的有效性"""
        self._validate_basic_settings()
        self._validate_players()

    def _validate_basic_settings(self):
        """验证基础设置"""
        if self.initial_money < 0:
            raise GameConfigError(f"初始资金不能为负数: {self.initial_money}")

        if self.total_rounds <= 0:
            raise GameConfigError(f"总局数必须大于0: {self.total_rounds}")

        if self.prize_per_round < 0:
            raise GameConfigError(f"每局奖金不能为负数: {self.prize_per_round}")

    def _validate_players(self):
        """验证玩家设置"""
        if not self.player_names:
            raise GameConfigError("至少需要一名玩家")

        if any(not name or not name.strip() for name in self.player_names):
            raise GameConfigError("玩家名称不能为空")

        if len(self.player_names) != len(set(self.player_names)):
            raise GameConfigError("存在重复的玩家名称")

        if len(self.player_names) > self.max_players:
            raise GameConfigError(
                f"玩家数量({len(self.player_names)})超过一副牌的上限({self.max_players})")

    @property
    def max_players(self) -> int:
        """一副牌最多能支持的玩家数"""
        return FULL_DECK_SIZE // HAND_SIZE

    def create_players(self) -> List[Player]:
        """按配置创建玩家列表"""
        return [Player(name, self.initial_money) for name in self.player_names]

    def with_overrides(self, **changes) -> 'GameConfig':
        """返回替换部分字段后的新配置，会重新验证"""
        return replace(self, **changes)

    @classmethod
    def default(cls) -> 'GameConfig':
        """创建默认的4人牌桌配置"""
        return cls()
