"""
card_deck - 一副16张扑克牌的建牌、洗牌、分牌与存取.
"""

__version__ = "1.0.0"

from .core.deck import Deck, load_deck, new_deck
from .core.exceptions import DeckError, DeckFileError

__all__ = ['Deck', 'new_deck', 'load_deck', 'DeckError', 'DeckFileError']
