"""
Test Configuration - pytest配置文件

该文件提供测试的基础设施，包括：
- 手牌工厂fixture
- 可重现的随机数生成器
- 测试标记定义
"""

import random
from typing import Callable, List, Sequence

import pytest

from five_card_poker.core import Hand, Player
from tests.common import make_hand


@pytest.fixture
def hand_factory() -> Callable[[Sequence[str]], Hand]:
    """手牌工厂fixture"""
    return make_hand


@pytest.fixture
def seeded_rng() -> random.Random:
    """固定种子的随机数生成器fixture"""
    return random.Random(20240101)


@pytest.fixture
def four_players() -> List[Player]:
    """4名初始资金为10000的玩家"""
    return [Player(name, 10000) for name in ("幸运儿", "扑克大师", "新手", "倒霉蛋")]


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
