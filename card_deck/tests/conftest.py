"""
card_deck测试配置 - pytest配置文件

提供通用的测试fixture：
- 固定种子的随机数生成器
- 示例牌组
- 临时牌组文件路径
"""

import random

import pytest

from card_deck.core.deck import Deck


@pytest.fixture
def seeded_rng():
    """固定种子的随机数生成器fixture"""
    return random.Random(1234)


@pytest.fixture
def full_deck():
    """未洗牌的完整牌组fixture"""
    return Deck.new_deck()


@pytest.fixture
def sample_deck():
    """两张牌的示例牌组fixture"""
    return Deck(["Ace of Spades", "Two of Hearts"])


@pytest.fixture
def deck_file(tmp_path):
    """临时牌组文件路径fixture（文件尚未创建）"""
    return tmp_path / "deck.txt"


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
