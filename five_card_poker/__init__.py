#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
五张牌扑克模拟核心模块

模块结构：
- core: 核心基础组件（枚举、卡牌、牌组、手牌、玩家、配置、异常）
- evaluator: 牌力评估（牌型等级、评估器、计分策略）
- game: 游戏逻辑（庄家单局流程、结果数据对象）
- cli_game: 命令行入口
"""

from .core import (
    Suit, Rank, RoundPhase,
    Card, Deck, Hand, Player, GameConfig,
    PokerGameError, InvalidArgumentError, InvalidStateError,
    HandFullError, EmptyDeckError, GameConfigError
)

from .evaluator import (
    HandRank, HandEvaluator, category_score, kicker_score
)

from .game import (
    Dealer, HandSnapshot, RoundResult, PlayerStanding, build_standings
)

__version__ = "1.0.0"

__all__ = [
    # 核心基础组件
    'Suit', 'Rank', 'RoundPhase',
    'Card', 'Deck', 'Hand', 'Player', 'GameConfig',
    'PokerGameError', 'InvalidArgumentError', 'InvalidStateError',
    'HandFullError', 'EmptyDeckError', 'GameConfigError',

    # 牌力评估
    'HandRank', 'HandEvaluator', 'category_score', 'kicker_score',

    # 游戏逻辑
    'Dealer', 'HandSnapshot', 'RoundResult', 'PlayerStanding', 'build_standings',
]
