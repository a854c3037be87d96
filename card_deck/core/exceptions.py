"""
牌组异常定义.

核心层只负责抛出异常，由应用层决定如何处理.
"""

from typing import Optional


class DeckError(Exception):
    """牌组基础异常类"""
    pass


class DeckFileError(DeckError):
    """牌组文件读写异常"""

    def __init__(self, message: str, path: Optional[str] = None, operation: str = ""):
        super().__init__(message)
        self.message = message
        self.path = path
        self.operation = operation  # "load" | "save"
