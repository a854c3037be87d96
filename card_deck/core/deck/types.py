"""
牌组相关类型定义.

定义花色、点数枚举以及卡牌名称的类型别名.
"""

from enum import Enum
from typing import List

# 卡牌直接用名称字符串表示，如"Ace of Spades"
Card = str


class Suit(Enum):
    """
    花色枚举.

    顺序即建牌顺序：黑桃、方块、红桃、梅花.
    """

    SPADES = "Spades"      # 黑桃
    DIAMONDS = "Diamonds"  # 方块
    HEARTS = "Hearts"      # 红桃
    CLUBS = "Clubs"        # 梅花


class Value(Enum):
    """
    点数枚举.

    本牌组只包含A到4四种点数.
    """

    ACE = "Ace"
    TWO = "Two"
    THREE = "Three"
    FOUR = "Four"


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.

    Returns:
        List[Suit]: 按定义顺序排列的花色列表
    """
    return list(Suit)


def get_all_values() -> List[Value]:
    """
    获取所有点数.

    Returns:
        List[Value]: 按定义顺序排列的点数列表
    """
    return list(Value)
