#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
tarcodec 工具函数

提供长路径拆分、块对齐计算等通用功能。
"""

from typing import Tuple

from .core.binary_io import BLOCK_SIZE
from .core.fields import ENCODE_ERRORS
from .exceptions import PathTooLongError

NAME_SIZE = 100
PREFIX_SIZE = 155
PATH_SEP = b'/'


def split_long_path(path: str, encoding: str = 'utf-8',
                    allow_split: bool = False) -> Tuple[bytes, bytes]:
    """
    拆分路径为 (prefix, name) 两段

    路径不超过 100 字节时 prefix 为空。否则在分隔符处拆分，
    分隔符留在 prefix 末尾，读取时直接拼接 prefix + name 即可还原。
    在满足 name <= 100 字节的前提下选择最靠前的分隔符，使 name 尽量长。

    拆分默认关闭: 头部使用 GNU 风格 magic ("ustar " + " \\0")，GNU tar
    等读取方把偏移 345 当作 atime/ctime 而不是 prefix，只会读到 name 段。
    仅在读取方同样使用本库时开启。

    Args:
        path: 完整路径 (不做规范化)
        encoding: 字符编码
        allow_split: 是否允许拆分，为 False (默认) 时超过 100 字节直接失败

    Returns:
        (prefix, name) 字节元组

    Raises:
        PathTooLongError: 无法放入 prefix (155) + name (100)

    Examples:
        >>> split_long_path("a/b.txt")
        (b'', b'a/b.txt')
        >>> split_long_path("d" * 120 + "/file.txt", allow_split=True)[1]
        b'file.txt'
    """
    data = path.encode(encoding, ENCODE_ERRORS)
    if len(data) <= NAME_SIZE:
        return b'', data
    if not allow_split or len(data) > PREFIX_SIZE + NAME_SIZE:
        raise PathTooLongError(path, len(data))

    # 分隔符位于 index 时 prefix = data[:index + 1]，要求 name 不超过 NAME_SIZE
    index = data.find(PATH_SEP, len(data) - NAME_SIZE - 1)
    # name 不能为空: 首字节为 NUL 的块会被当作结束块
    if index == -1 or index + 1 > PREFIX_SIZE or index + 1 == len(data):
        raise PathTooLongError(path, len(data))
    return data[:index + 1], data[index + 1:]


def join_long_path(prefix: bytes, name: bytes) -> bytes:
    """拼接 prefix 与 name，不插入分隔符"""
    return prefix + name


def padding_size(size: int) -> int:
    """
    内容之后需要的填充字节数

    Examples:
        >>> padding_size(5)
        507
        >>> padding_size(512)
        0
    """
    return (BLOCK_SIZE - size) % BLOCK_SIZE


def is_end_block(block: bytes) -> bool:
    """首字节为 NUL 的块视为归档结束"""
    return block[:1] == b'\x00'


def is_zero_block(block: bytes) -> bool:
    """完整的全零块"""
    return len(block) == BLOCK_SIZE and not any(block)
