# 五张牌牌型评估器模块
# 提供牌型识别和比较策略

from .hand_rank import HandRank, HAND_RANK_NAMES, get_hand_rank_name
from .hand_evaluator import (
    HandEvaluator, HAND_SIZE, ScoreStrategy, category_score, kicker_score
)

__all__ = [
    'HandRank',
    'HAND_RANK_NAMES',
    'get_hand_rank_name',
    'HandEvaluator',
    'HAND_SIZE',
    'ScoreStrategy',
    'category_score',
    'kicker_score',
]
