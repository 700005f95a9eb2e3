"""
扑克牌数据结构

定义不可变的Card类，支持比较、排序、哈希和字符串解析.
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Tuple

from .enums import Suit, Rank
from .exceptions import InvalidArgumentError


@total_ordering
@dataclass(frozen=True, eq=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，先按点数、再按花色比较.

    Attributes:
        suit: 花色
        rank: 点数

    Examples:
        >>> card = Card(Suit.SPADES, Rank.ACE)
        >>> str(card)
        'A♠'
        >>> card.strength
        14
    """

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.

        Raises:
            InvalidArgumentError: 当花色或点数为空或类型无效时
        """
        if not isinstance(self.suit, Suit):
            raise InvalidArgumentError(f"花色必须是Suit类型，实际: {self.suit!r}")
        if not isinstance(self.rank, Rank):
            raise InvalidArgumentError(f"点数必须是Rank类型，实际: {self.rank!r}")

    @property
    def strength(self) -> int:
        """返回扑克牌力(2-14)"""
        return self.rank.strength

    @property
    def sort_key(self) -> Tuple[int, int]:
        """返回比较用的键: (牌力, 花色序号)"""
        return self.rank.strength, self.suit.order

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        """返回"点数符号+花色符号"格式，如"10♥" """
        return f"{self.rank.symbol}{self.suit.symbol}"

    def __repr__(self) -> str:
        return f"Card({self.suit.name}, {self.rank.name})"

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从字符串创建扑克牌对象.

        Args:
            card_str: 格式为"点数花色"，如"A♠"、"10h"、"Td"

        Returns:
            Card: 对应的扑克牌对象

        Raises:
            InvalidArgumentError: 当字符串格式无效时
        """
        if not isinstance(card_str, str) or len(card_str) < 2:
            raise InvalidArgumentError(f"卡牌字符串格式错误: {card_str!r}")

        rank_str, suit_str = card_str[:-1], card_str[-1]
        try:
            return cls(Suit.from_str(suit_str), Rank.from_str(rank_str))
        except (KeyError, ValueError) as e:
            raise InvalidArgumentError(f"无法解析卡牌字符串 '{card_str}': {e}") from e
