"""
ConfigService - 配置管理服务

集中管理牌组和日志配置，按配置名(profile)区分：
- default: 静默运行，只输出牌组
- debug: 输出DEBUG日志
"""

import logging
from typing import Dict, List, Optional
from dataclasses import dataclass
from enum import Enum

from .types import QueryResult

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigType(Enum):
    """配置类型枚举"""
    DECK = "deck"
    LOGGING = "logging"


@dataclass
class DeckConfig:
    """牌组配置"""
    hand_size: int = 5
    random_seed: Optional[int] = None   # 随机种子，用于可重现的洗牌

    def __post_init__(self):
        """验证配置的有效性"""
        if self.hand_size < 0:
            raise ValueError(f"手牌张数不能为负数: {self.hand_size}")


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'WARNING'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def __post_init__(self):
        """验证日志级别"""
        self.log_level = self.log_level.upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(f"无效的日志级别: {self.log_level}")

    @property
    def level(self) -> int:
        """返回logging模块的数值级别"""
        return getattr(logging, self.log_level)


class ConfigService:
    """配置管理服务"""

    def __init__(self):
        """初始化配置服务"""
        self.logger = logging.getLogger(__name__)
        self._configs: Dict[ConfigType, Dict[str, object]] = {}
        self._load_default_configs()

    def _load_default_configs(self):
        """加载默认配置"""
        self._configs[ConfigType.DECK] = {
            'default': DeckConfig(),
            'debug': DeckConfig(random_seed=42),
        }
        self._configs[ConfigType.LOGGING] = {
            'default': LoggingConfig(),
            'debug': LoggingConfig(log_level='DEBUG'),
        }
        self.logger.debug("默认配置加载完成")

    def _get_config(self, config_type: ConfigType, profile: str) -> QueryResult:
        config_profiles = self._configs.get(config_type, {})
        if profile not in config_profiles:
            self.logger.warning(f"未找到{config_type.value}配置 '{profile}'")
            return QueryResult.failure_result(
                f"Unknown profile '{profile}' for {config_type.value} config",
                error_code="CONFIG_PROFILE_NOT_FOUND"
            )
        return QueryResult.success_result(config_profiles[profile])

    def get_deck_config(self, profile: str = "default") -> QueryResult[DeckConfig]:
        """
        获取牌组配置

        Args:
            profile: 配置名

        Returns:
            查询结果，包含牌组配置
        """
        return self._get_config(ConfigType.DECK, profile)

    def get_logging_config(self, profile: str = "default") -> QueryResult[LoggingConfig]:
        """
        获取日志配置

        Args:
            profile: 配置名

        Returns:
            查询结果，包含日志配置
        """
        return self._get_config(ConfigType.LOGGING, profile)

    def list_available_profiles(self, config_type: ConfigType) -> QueryResult[List[str]]:
        """列出某类配置的全部配置名"""
        if config_type not in self._configs:
            return QueryResult.failure_result(
                f"配置类型 {config_type} 不存在",
                error_code="CONFIG_TYPE_NOT_FOUND"
            )
        return QueryResult.success_result(sorted(self._configs[config_type]))
