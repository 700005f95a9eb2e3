"""
游戏逻辑模块
包含庄家的单局流程和结果数据对象
"""

from .dealer import Dealer
from .results import (
    HandSnapshot, RoundResult, PlayerStanding,
    build_hand_snapshot, build_standings
)

__all__ = [
    # 单局流程
    'Dealer',

    # 结果数据
    'HandSnapshot', 'RoundResult', 'PlayerStanding',
    'build_hand_snapshot', 'build_standings',
]
