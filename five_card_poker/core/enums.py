"""
五张牌扑克的基础枚举定义
包含花色、点数和回合阶段
"""

from enum import Enum, IntEnum


class Suit(Enum):
    """扑克牌花色枚举，值为显示符号，声明顺序即比较顺序"""
    SPADES = "♠"      # 黑桃
    HEARTS = "♥"      # 红桃
    DIAMONDS = "♦"    # 方块
    CLUBS = "♣"       # 梅花

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """返回花色符号"""
        return self.value

    @property
    def order(self) -> int:
        """返回花色的声明序号，用作同点数卡牌的比较依据"""
        return _SUIT_ORDER[self]

    @classmethod
    def from_str(cls, suit_str: str) -> 'Suit':
        """从符号或字母(s/h/d/c)创建Suit对象"""
        suit_map = {
            "♠": cls.SPADES, "s": cls.SPADES,
            "♥": cls.HEARTS, "h": cls.HEARTS,
            "♦": cls.DIAMONDS, "d": cls.DIAMONDS,
            "♣": cls.CLUBS, "c": cls.CLUBS,
        }
        return suit_map[suit_str.lower()]


_SUIT_ORDER = {suit: index for index, suit in enumerate(Suit)}


class Rank(IntEnum):
    """扑克牌点数枚举，数值即牌力(2-14)"""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        return self.symbol

    @property
    def symbol(self) -> str:
        """返回点数的显示符号"""
        if self.value <= 10:
            return str(self.value)
        return {
            11: "J",
            12: "Q",
            13: "K",
            14: "A"
        }[self.value]

    @property
    def strength(self) -> int:
        """返回点数的牌力值"""
        return int(self.value)

    @classmethod
    def from_str(cls, rank_str: str) -> 'Rank':
        """从字符串创建Rank对象，支持"10"和"T"两种写法"""
        if rank_str.isdigit():
            return cls(int(rank_str))

        rank_map = {
            "T": cls.TEN,
            "J": cls.JACK,
            "Q": cls.QUEEN,
            "K": cls.KING,
            "A": cls.ACE
        }
        return rank_map[rank_str.upper()]


class RoundPhase(Enum):
    """单局游戏的阶段枚举"""
    NEW_DECK = "new_deck"      # 新牌组已就绪
    DEALT = "dealt"            # 已发牌
    EVALUATED = "evaluated"    # 已比牌
    SETTLED = "settled"        # 已结算
