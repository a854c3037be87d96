"""
Application Layer - 应用服务层

在核心层之上提供结果对象风格的服务接口：
- DeckService: 建牌、洗牌、分牌、存取
- ConfigService: 牌组与日志配置
"""

from .types import CommandResult, QueryResult, ResultStatus
from .config_service import ConfigService, ConfigType, DeckConfig, LoggingConfig
from .deck_service import DeckService

__all__ = [
    'CommandResult', 'QueryResult', 'ResultStatus',
    'ConfigService', 'ConfigType', 'DeckConfig', 'LoggingConfig',
    'DeckService',
]
