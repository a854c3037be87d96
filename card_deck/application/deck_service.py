"""
DeckService - 牌组应用服务

包装核心层的牌组操作，把异常转换为CommandResult/QueryResult，
由调用方决定失败时如何处理。
"""

import logging
import os
import random
from typing import Optional, Tuple

from .config_service import ConfigService, DeckConfig
from .types import CommandResult, QueryResult
from ..core.deck import Deck
from ..core.deck.persistence import PathLike
from ..core.exceptions import DeckFileError


class DeckService:
    """牌组应用服务"""

    def __init__(self, config_service: Optional[ConfigService] = None,
                 profile: str = "default"):
        """
        初始化牌组服务

        Args:
            config_service: 配置服务，如果为None则创建新实例
            profile: 使用的配置名
        """
        self.logger = logging.getLogger(__name__)
        self._config_service = config_service or ConfigService()

        config_result = self._config_service.get_deck_config(profile)
        self._config: DeckConfig = config_result.data if config_result.success else DeckConfig()

    @property
    def config(self) -> DeckConfig:
        """当前牌组配置"""
        return self._config

    def new_deck(self) -> QueryResult[Deck]:
        """创建一副未洗牌的完整牌组"""
        return QueryResult.success_result(Deck.new_deck())

    def shuffled_deck(self, seed: Optional[int] = None) -> QueryResult[Deck]:
        """
        创建并洗好一副完整牌组

        Args:
            seed: 随机种子，为None时使用配置中的种子

        Returns:
            查询结果，包含洗好的牌组
        """
        deck = Deck.new_deck()
        self.shuffle(deck, seed)
        return QueryResult.success_result(deck)

    def shuffle(self, deck: Deck, seed: Optional[int] = None) -> None:
        """用种子(或配置中的种子)原地洗牌，两者都没有时使用新的随机数生成器"""
        if seed is None:
            seed = self._config.random_seed
        rng = random.Random(seed) if seed is not None else random.Random()
        deck.shuffle(rng)

    def deal(self, deck: Deck, hand_size: Optional[int] = None) -> QueryResult[Tuple[Deck, Deck]]:
        """
        把牌组分为手牌和剩余牌

        Args:
            deck: 牌组
            hand_size: 手牌张数，为None时使用配置中的张数

        Returns:
            查询结果，包含(手牌, 剩余牌)
        """
        if hand_size is None:
            hand_size = self._config.hand_size
        try:
            return QueryResult.success_result(deck.deal(hand_size))
        except IndexError as e:
            self.logger.warning(f"分牌失败: {e}")
            return QueryResult.validation_error(str(e), error_code="INVALID_HAND_SIZE")

    def save_deck(self, deck: Deck, path: PathLike) -> CommandResult:
        """
        保存牌组到文件

        Args:
            deck: 牌组
            path: 文件路径

        Returns:
            命令结果
        """
        try:
            deck.save_to_file(path)
        except DeckFileError as e:
            self.logger.warning(f"保存牌组失败: {e}")
            return CommandResult.system_error(e.message, error_code="DECK_SAVE_FAILED")
        return CommandResult.success_result(
            f"Saved {len(deck)} cards to {os.fspath(path)}",
            data={'path': os.fspath(path), 'card_count': len(deck)}
        )

    def load_deck(self, path: PathLike) -> QueryResult[Deck]:
        """
        从文件加载牌组

        Args:
            path: 文件路径

        Returns:
            查询结果，包含加载的牌组
        """
        try:
            deck = Deck.from_file(path)
        except DeckFileError as e:
            self.logger.warning(f"加载牌组失败: {e}")
            return QueryResult.system_error(e.message, error_code="DECK_LOAD_FAILED")
        return QueryResult.success_result(deck, message=f"Loaded {len(deck)} cards")

