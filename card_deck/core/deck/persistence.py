"""
牌组文件读写.

文件内容为逗号分隔的卡牌名称，没有换行、引号或转义.
"""

import logging
import os
from typing import Union

from ..exceptions import DeckFileError

PathLike = Union[str, "os.PathLike[str]"]

FILE_ENCODING = "utf-8"
FILE_MODE = 0o666

logger = logging.getLogger(__name__)


def write_deck_text(path: PathLike, text: str) -> None:
    """
    把牌组文本写入文件.

    文件不存在时以0o666权限创建（受umask影响），存在时截断后覆盖.

    Args:
        path: 文件路径
        text: 要写入的完整内容

    Raises:
        DeckFileError: 当文件无法写入或内容无法编码为UTF-8时，此时已有文件保持不变
    """
    # 先编码再打开文件，编码失败时不会截断已有文件
    try:
        data = text.encode(FILE_ENCODING)
    except UnicodeEncodeError as e:
        raise DeckFileError(
            f"Cannot save deck to {os.fspath(path)}: deck is not encodable as {FILE_ENCODING}",
            path=os.fspath(path),
            operation="save",
        ) from e

    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
    except OSError as e:
        raise DeckFileError(
            f"Cannot save deck to {os.fspath(path)}: {e.strerror or e}",
            path=os.fspath(path),
            operation="save",
        ) from e
    logger.debug("写入牌组文件 %s (%d 字节)", os.fspath(path), len(data))


def read_deck_text(path: PathLike) -> str:
    """
    读取牌组文件的全部内容.

    Args:
        path: 文件路径

    Returns:
        str: 文件原始内容，不做任何裁剪

    Raises:
        DeckFileError: 当文件不存在、不可读或不是合法UTF-8时
    """
    try:
        with open(path, "r", encoding=FILE_ENCODING, newline="") as f:
            text = f.read()
    except OSError as e:
        raise DeckFileError(
            f"Cannot load deck from {os.fspath(path)}: {e.strerror or e}",
            path=os.fspath(path),
            operation="load",
        ) from e
    except UnicodeDecodeError as e:
        raise DeckFileError(
            f"Cannot load deck from {os.fspath(path)}: file is not valid {FILE_ENCODING}",
            path=os.fspath(path),
            operation="load",
        ) from e
    logger.debug("读取牌组文件 %s (%d 字节)", os.fspath(path), len(text))
    return text
