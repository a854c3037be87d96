"""
Application Layer Types - 应用层类型定义

DeckService和ConfigService的返回值：
- CommandResult: 保存牌组等有副作用的操作
- QueryResult: 建牌、分牌、加载牌组、读取配置等返回数据的操作
"""

from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar
from enum import Enum, auto

T = TypeVar('T')


class ResultStatus(Enum):
    """操作结果状态"""
    SUCCESS = auto()
    FAILURE = auto()            # 配置不存在
    VALIDATION_ERROR = auto()   # 手牌张数超出范围
    SYSTEM_ERROR = auto()       # 牌组文件读写失败


@dataclass(frozen=True)
class CommandResult:
    """命令执行结果，data中记录保存路径和张数"""
    success: bool
    status: ResultStatus
    message: str = ""
    error_code: Optional[str] = None
    data: Optional[Dict[str, Any]] = None

    @classmethod
    def success_result(cls, message: str, data: Optional[Dict[str, Any]] = None) -> 'CommandResult':
        """创建成功结果"""
        return cls(success=True, status=ResultStatus.SUCCESS, message=message, data=data)

    @classmethod
    def system_error(cls, message: str, error_code: str) -> 'CommandResult':
        """创建文件读写失败结果"""
        return cls(
            success=False,
            status=ResultStatus.SYSTEM_ERROR,
            message=message,
            error_code=error_code
        )


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """查询结果，data为牌组、(手牌, 剩余牌)或配置对象"""
    success: bool
    status: ResultStatus
    data: Optional[T] = None
    message: str = ""
    error_code: Optional[str] = None

    @classmethod
    def success_result(cls, data: T, message: str = "") -> 'QueryResult[T]':
        """创建成功结果"""
        return cls(success=True, status=ResultStatus.SUCCESS, data=data, message=message)

    @classmethod
    def failure_result(cls, message: str, error_code: str,
                       status: ResultStatus = ResultStatus.FAILURE) -> 'QueryResult[T]':
        """创建失败结果"""
        return cls(success=False, status=status, message=message, error_code=error_code)

    @classmethod
    def validation_error(cls, message: str, error_code: str) -> 'QueryResult[T]':
        """创建验证错误结果"""
        return cls.failure_result(message, error_code, ResultStatus.VALIDATION_ERROR)

    @classmethod
    def system_error(cls, message: str, error_code: str) -> 'QueryResult[T]':
        """创建文件读写失败结果"""
        return cls.failure_result(message, error_code, ResultStatus.SYSTEM_ERROR)
