"""
扑克牌组管理

定义Deck类，提供标准52张牌的洗牌和抽牌功能.
牌组一次性使用，抽完后需要创建新的牌组.
"""

import random
from typing import List, Optional, Tuple

from .card import Card
from .enums import Suit, Rank
from .exceptions import EmptyDeckError


FULL_DECK_SIZE = 52


class Deck:
    """
    表示一副扑克牌.

    构造时包含全部52张牌(花色×点数)，只会随着抽牌减少.
    使用可选的随机数生成器以支持确定性测试.

    Examples:
        >>> deck = Deck(random.Random(42))
        >>> deck.shuffle()
        >>> card = deck.draw_card()
        >>> len(deck)
        51
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        """
        初始化牌组.

        Args:
            rng: 随机数生成器，用于洗牌。为None时使用默认随机数生成器
        """
        self._rng = rng or random.Random()
        self._cards: List[Card] = [Card(suit, rank) for suit in Suit for rank in Rank]
        self._drawn_count = 0

    def shuffle(self) -> None:
        """随机打乱剩余牌的顺序，牌数不变."""
        self._rng.shuffle(self._cards)

    def draw_card(self) -> Card:
        """
        从牌组顶部抽一张牌.

        Returns:
            Card: 抽出的牌

        Raises:
            EmptyDeckError: 当牌组为空时
        """
        if not self._cards:
            raise EmptyDeckError("牌组已空，无法抽牌")
        self._drawn_count += 1
        return self._cards.pop(0)

    @property
    def is_empty(self) -> bool:
        """检查牌组是否为空"""
        return len(self._cards) == 0

    @property
    def remaining_count(self) -> int:
        """返回牌组中剩余的牌数"""
        return len(self._cards)

    @property
    def drawn_count(self) -> int:
        """返回已抽出的牌数"""
        return self._drawn_count

    def peek_cards(self) -> Tuple[Card, ...]:
        """按抽牌顺序返回剩余牌的只读快照"""
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self._cards)})"

    def __str__(self) -> str:
        return f"牌组剩余: {len(self._cards)} 张"
