"""
牌组管理模块.

提供Deck类及卡牌名称、花色、点数等基础类型.
"""

from .card import all_card_names, card_name
from .deck import Deck, load_deck, new_deck
from .types import Card, Suit, Value

__all__ = [
    'Card', 'Suit', 'Value', 'Deck',
    'card_name', 'all_card_names', 'new_deck', 'load_deck',
]
