"""
牌组管理.

定义Deck类，提供建牌、洗牌、打印、分牌以及文件读写等操作.
"""

import logging
import random
import sys
from typing import Iterable, Iterator, List, Optional, TextIO, Tuple, Union, overload

from .card import all_card_names
from .persistence import PathLike, read_deck_text, write_deck_text
from .types import Card

CARD_SEPARATOR = ","

logger = logging.getLogger(__name__)


class Deck:
    """
    表示一副牌.

    按顺序保存卡牌名称，顺序即发牌和显示顺序.
    不对内容做任何校验，从文件加载后允许出现重复或任意字符串.
    使用可选的随机数生成器以支持确定性测试.

    Attributes:
        _cards: 当前牌组中的牌列表
        _rng: 随机数生成器

    Examples:
        >>> deck = Deck.new_deck()
        >>> len(deck)
        16
        >>> deck[0]
        'Ace of Spades'
        >>> hand, rest = deck.deal(5)
        >>> len(rest)
        11
    """

    def __init__(self, cards: Optional[Iterable[Card]] = None,
                 rng: Optional[random.Random] = None) -> None:
        """
        初始化牌组.

        Args:
            cards: 初始卡牌，会被复制；为None时创建空牌组
            rng: 洗牌用的随机数生成器；为None时每次洗牌新建一个
        """
        self._cards: List[Card] = list(cards) if cards is not None else []
        self._rng = rng

    @classmethod
    def new_deck(cls, rng: Optional[random.Random] = None) -> 'Deck':
        """
        创建一副完整的16张牌.

        顺序固定：花色优先、点数其次，第一张为"Ace of Spades"，最后一张为"Four of Clubs".

        Args:
            rng: 洗牌用的随机数生成器

        Returns:
            Deck: 未洗牌的新牌组
        """
        return cls(all_card_names(), rng=rng)

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """
        原地洗牌.

        使用Fisher-Yates洗牌算法，每个位置都可能与包括最后一位在内的任意位置交换.

        Args:
            rng: 本次使用的随机数生成器，优先于构造时传入的生成器
        """
        generator = rng or self._rng or random.Random()
        generator.shuffle(self._cards)
        logger.debug("洗牌完成，共 %d 张", len(self._cards))

    def deal(self, hand_size: int) -> Tuple['Deck', 'Deck']:
        """
        把牌组分成手牌和剩余牌.

        不修改原牌组，也不洗牌.

        Args:
            hand_size: 手牌张数

        Returns:
            Tuple[Deck, Deck]: (前hand_size张, 剩余的牌)

        Raises:
            IndexError: 当hand_size不在[0, len(deck)]范围内时
        """
        if not 0 <= hand_size <= len(self._cards):
            raise IndexError(
                f"Cannot deal {hand_size} cards from a deck of {len(self._cards)}"
            )
        hand = Deck(self._cards[:hand_size], rng=self._rng)
        remainder = Deck(self._cards[hand_size:], rng=self._rng)
        return hand, remainder

    def format_lines(self) -> List[str]:
        """
        按"<序号> <卡牌>"格式生成每一行，序号从0开始.

        Returns:
            List[str]: 每张牌一行
        """
        return [f"{index} {card}" for index, card in enumerate(self._cards)]

    def print_cards(self, file: Optional[TextIO] = None) -> None:
        """
        逐行打印牌组.

        Args:
            file: 输出流，默认为标准输出
        """
        out = file if file is not None else sys.stdout
        for line in self.format_lines():
            print(line, file=out)

    def to_str(self) -> str:
        """
        序列化为逗号分隔的字符串.

        Returns:
            str: 例如"Ace of Spades,Two of Hearts"，末尾没有分隔符
        """
        return CARD_SEPARATOR.join(self._cards)

    @classmethod
    def from_str(cls, text: str, rng: Optional[random.Random] = None) -> 'Deck':
        """
        从逗号分隔的字符串创建牌组.

        原样按逗号切分，不裁剪空白也不校验卡牌名称，空字符串得到一张空名称的牌.

        Args:
            text: 序列化后的牌组
            rng: 洗牌用的随机数生成器

        Returns:
            Deck: 解析出的牌组
        """
        return cls(text.split(CARD_SEPARATOR), rng=rng)

    def save_to_file(self, path: PathLike) -> None:
        """
        把牌组保存到文件，已存在的文件会被覆盖.

        Args:
            path: 文件路径

        Raises:
            DeckFileError: 当文件无法写入时
        """
        write_deck_text(path, self.to_str())
        logger.debug("保存牌组 %d 张", len(self._cards))

    @classmethod
    def from_file(cls, path: PathLike, rng: Optional[random.Random] = None) -> 'Deck':
        """
        从文件加载牌组.

        Args:
            path: 文件路径
            rng: 洗牌用的随机数生成器

        Returns:
            Deck: 文件中的牌组

        Raises:
            DeckFileError: 当文件无法读取时
        """
        deck = cls.from_str(read_deck_text(path), rng=rng)
        logger.debug("加载牌组 %d 张", len(deck))
        return deck

    @property
    def cards(self) -> List[Card]:
        """返回卡牌列表的副本"""
        return list(self._cards)

    @property
    def is_empty(self) -> bool:
        """检查牌组是否为空"""
        return len(self._cards) == 0

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    @overload
    def __getitem__(self, index: int) -> Card: ...

    @overload
    def __getitem__(self, index: slice) -> 'Deck': ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Card, 'Deck']:
        if isinstance(index, slice):
            return Deck(self._cards[index], rng=self._rng)
        return self._cards[index]

    def __eq__(self, other: object) -> bool:
        """
        判断两副牌是否相同.

        也可以直接与卡牌名称列表比较.
        """
        if isinstance(other, Deck):
            return self._cards == other._cards
        if isinstance(other, list):
            return self._cards == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_str()

    def __repr__(self) -> str:
        return f"Deck(cards={len(self._cards)})"


def new_deck(rng: Optional[random.Random] = None) -> Deck:
    """创建一副完整的16张牌，见Deck.new_deck"""
    return Deck.new_deck(rng=rng)


def load_deck(path: PathLike, rng: Optional[random.Random] = None) -> Deck:
    """从文件加载牌组，失败时抛出DeckFileError，见Deck.from_file"""
    return Deck.from_file(path, rng=rng)
