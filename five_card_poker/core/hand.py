"""
玩家手牌的实现
最多持有5张牌，按加入顺序保存
"""

from typing import Iterator, List, Tuple

from .card import Card
from .exceptions import InvalidArgumentError, HandFullError
from ..evaluator.hand_evaluator import HandEvaluator, HAND_SIZE
from ..evaluator.hand_rank import HandRank


class Hand:
    """
    玩家手牌类
    管理手牌的加入、清空和牌型评估
    """

    MAX_CARDS = HAND_SIZE

    _evaluator = HandEvaluator()

    def __init__(self) -> None:
        self._cards: List[Card] = []

    def add(self, card: Card) -> None:
        """
        在手牌末尾加入一张牌

        Args:
            card: 要加入的牌

        Raises:
            InvalidArgumentError: 当card为None时
            HandFullError: 当手牌已有5张时
        """
        if card is None:
            raise InvalidArgumentError("卡牌不能为None")
        if self.is_full():
            raise HandFullError(f"手牌最多只能有{self.MAX_CARDS}张")
        self._cards.append(card)

    def clear(self) -> None:
        """清空手牌"""
        self._cards.clear()

    def get_cards(self) -> Tuple[Card, ...]:
        """返回手牌的只读快照，保持加入顺序"""
        return tuple(self._cards)

    @property
    def cards(self) -> Tuple[Card, ...]:
        return self.get_cards()

    def is_full(self) -> bool:
        """检查手牌是否已满5张"""
        return len(self._cards) == self.MAX_CARDS

    def evaluate(self) -> HandRank:
        """
        评估手牌牌型

        Returns:
            命中的最高牌型

        Raises:
            InvalidStateError: 当手牌不是恰好5张时
        """
        return self._evaluator.evaluate(self._cards)

    def open(self) -> int:
        """亮牌并返回牌型分数，分数越高牌越强"""
        return self.evaluate().score

    def compare_to(self, other: 'Hand') -> int:
        """
        按牌型分数比较两手牌，不比较踢脚牌

        Returns:
            1表示当前手牌更强，-1表示更弱，0表示相等
        """
        mine, theirs = self.open(), other.open()
        if mine == theirs:
            return 0
        return 1 if mine > theirs else -1

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.get_cards())

    def __str__(self) -> str:
        return "[" + ", ".join(str(card) for card in self._cards) + "]"

    def __repr__(self) -> str:
        return f"Hand({self})"
