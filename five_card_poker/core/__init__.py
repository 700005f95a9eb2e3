"""
核心基础组件模块
包含枚举、卡牌、牌组、手牌、玩家、配置等基础组件
"""

from .enums import Suit, Rank, RoundPhase
from .exceptions import (
    PokerGameError, InvalidArgumentError, InvalidStateError,
    HandFullError, EmptyDeckError, GameConfigError
)
from .card import Card
from .deck import Deck, FULL_DECK_SIZE
from .hand import Hand
from .player import Player
from .config import GameConfig

__all__ = [
    # 枚举类型
    'Suit', 'Rank', 'RoundPhase',

    # 卡牌相关
    'Card', 'Deck', 'Hand', 'FULL_DECK_SIZE',

    # 玩家相关
    'Player',

    # 配置相关
    'GameConfig',

    # 异常类型
    'PokerGameError', 'InvalidArgumentError', 'InvalidStateError',
    'HandFullError', 'EmptyDeckError', 'GameConfigError',
]
