"""
卡牌名称工具.

卡牌没有独立的类，统一用"<点数> of <花色>"格式的字符串表示.
"""

from typing import List

from .types import Card, Suit, Value, get_all_suits, get_all_values

CARD_NAME_SEPARATOR = " of "


def card_name(value: Value, suit: Suit) -> Card:
    """
    生成卡牌名称.

    Args:
        value: 点数
        suit: 花色

    Returns:
        Card: 形如"Ace of Spades"的卡牌名称

    Raises:
        TypeError: 当点数或花色类型无效时
    """
    if not isinstance(value, Value):
        raise TypeError(f"点数必须是Value类型，实际: {type(value)}")
    if not isinstance(suit, Suit):
        raise TypeError(f"花色必须是Suit类型，实际: {type(suit)}")
    return f"{value.value}{CARD_NAME_SEPARATOR}{suit.value}"


def all_card_names() -> List[Card]:
    """按花色优先、点数其次的顺序生成全部16张牌的名称."""
    return [
        card_name(value, suit)
        for suit in get_all_suits()
        for value in get_all_values()
    ]
