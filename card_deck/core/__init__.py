"""
Core Module - 纯领域逻辑层

核心模块只依赖标准库，不能依赖应用层或UI层。

Modules:
    deck: 牌组、卡牌名称和文件读写
    exceptions: 牌组异常
"""

from .exceptions import DeckError, DeckFileError

__all__ = ['DeckError', 'DeckFileError']
