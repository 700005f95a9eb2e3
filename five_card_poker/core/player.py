"""
玩家相关类的实现
包含资金管理、手牌持有和胜负统计
"""

from .hand import Hand
from .exceptions import InvalidArgumentError


def _is_amount(value) -> bool:
    """金额必须是整数（布尔值除外）"""
    return isinstance(value, int) and not isinstance(value, bool)


class Player:
    """
    扑克玩家类
    管理玩家的资金、手牌和胜/负/平局计数

    资金使用Python整数，没有溢出上限。
    """

    def __init__(self, name: str, money: int):
        """
        Args:
            name: 玩家名称，不能为空
            money: 初始资金，不能为负数

        Raises:
            InvalidArgumentError: 当名称为空或资金无效时
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError(f"玩家名称不能为空: {name!r}")
        if not _is_amount(money) or money < 0:
            raise InvalidArgumentError(f"初始资金不能为负数: {money!r}")

        self._name = name
        self._money = money
        self._hand = Hand()
        self._win_count = 0
        self._lose_count = 0
        self._draw_count = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def money(self) -> int:
        return self._money

    @property
    def hand(self) -> Hand:
        return self._hand

    @hand.setter
    def hand(self, hand: Hand) -> None:
        self.set_hand(hand)

    @property
    def win_count(self) -> int:
        return self._win_count

    @property
    def lose_count(self) -> int:
        return self._lose_count

    @property
    def draw_count(self) -> int:
        return self._draw_count

    def add_money(self, amount: int) -> None:
        """
        增加资金

        Raises:
            InvalidArgumentError: 当金额为负数或不是整数时
        """
        if not _is_amount(amount) or amount < 0:
            raise InvalidArgumentError(f"金额不能为负数: {amount!r}")
        self._money += amount

    def remove_money(self, amount: int) -> bool:
        """
        扣除资金

        Returns:
            扣除成功返回True；金额为负数或余额不足时返回False且不修改余额
        """
        if not _is_amount(amount) or amount < 0:
            return False
        if amount > self._money:
            return False
        self._money -= amount
        return True

    def set_hand(self, hand: Hand) -> None:
        """
        整体替换手牌

        Raises:
            InvalidArgumentError: 当hand为None时
        """
        if hand is None:
            raise InvalidArgumentError("手牌不能为None")
        self._hand = hand

    def record_win(self) -> None:
        self._win_count += 1

    def record_lose(self) -> None:
        self._lose_count += 1

    def record_draw(self) -> None:
        self._draw_count += 1

    def __str__(self) -> str:
        return (f"{self._name} (资金: {self._money}, "
                f"战绩: {self._win_count}胜 {self._lose_count}负 {self._draw_count}平)")

    def __repr__(self) -> str:
        return f"Player(name={self._name!r}, money={self._money})"
