#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
测试通用模块初始化文件
导出测试中使用的通用函数
"""

from .test_helpers import (
    ALL_CARD_STRS,
    make_hand,
    player_with_hand,
    cards_from_strs,
)

__all__ = [
    'ALL_CARD_STRS',
    'make_hand',
    'player_with_hand',
    'cards_from_strs',
]
