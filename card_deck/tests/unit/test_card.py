"""
卡牌名称与类型的单元测试.
"""

import pytest

from card_deck.core.deck import Suit, Value, all_card_names, card_name
from card_deck.core.deck.types import get_all_suits, get_all_values


class TestTypes:
    """花色与点数枚举测试."""

    def test_suit_order(self):
        """测试花色顺序."""
        assert [s.value for s in get_all_suits()] == ["Spades", "Diamonds", "Hearts", "Clubs"]

    def test_value_order(self):
        """测试点数顺序."""
        assert [v.value for v in get_all_values()] == ["Ace", "Two", "Three", "Four"]


class TestCardName:
    """卡牌名称测试."""

    @pytest.mark.parametrize("value, suit, expected", [
        (Value.ACE, Suit.SPADES, "Ace of Spades"),
        (Value.FOUR, Suit.CLUBS, "Four of Clubs"),
        (Value.TWO, Suit.HEARTS, "Two of Hearts"),
    ])
    def test_card_name(self, value, suit, expected):
        """测试"<点数> of <花色>"格式."""
        assert card_name(value, suit) == expected

    def test_card_name_rejects_wrong_types(self):
        """测试参数类型错误时抛出TypeError."""
        with pytest.raises(TypeError):
            card_name("Ace", Suit.SPADES)
        with pytest.raises(TypeError):
            card_name(Value.ACE, "Spades")

    def test_all_card_names(self):
        """测试全部卡牌名称没有逗号且互不重复."""
        names = all_card_names()

        assert len(names) == 16
        assert len(set(names)) == 16
        assert all("," not in name for name in names)
