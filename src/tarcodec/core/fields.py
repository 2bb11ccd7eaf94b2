#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
定宽字段编解码

头部块由三类字段组成:
- 字符串字段: NUL 结尾/填充，超长时保留末尾 width 字节
- 八进制数字字段: width - 1 位 ASCII 八进制数字 + 1 个 NUL
- 单字节字段: 文件类型标记，由 schema 解释
"""

from typing import Optional, Union

from ..exceptions import FieldOverflowError, NumberFormatError

# 字符串与字节互转时使用，保证任意字节都能经 str 无损往返
ENCODE_ERRORS = 'surrogateescape'

_OCTAL_DIGITS = frozenset(b'01234567')


# ==================== 字符串字段 ====================

def encode_string(value: Union[str, bytes], width: int,
                  encoding: str = 'utf-8') -> bytes:
    """
    编码字符串字段

    超出宽度时截断并保留末尾 width 字节，不足部分以 NUL 填充。

    Args:
        value: 字符串 (或已编码的字节)
        width: 字段宽度
        encoding: 字符编码

    Returns:
        恰好 width 字节

    Examples:
        >>> encode_string("abc", 5)
        b'abc\\x00\\x00'
        >>> encode_string("abcdef", 4)
        b'cdef'
    """
    if isinstance(value, str):
        value = value.encode(encoding, ENCODE_ERRORS)
    if len(value) > width:
        value = value[len(value) - width:]
    return value.ljust(width, b'\x00')


def decode_string(raw: bytes, encoding: str = 'utf-8') -> str:
    """
    解码字符串字段

    返回第一个 NUL 之前的内容，没有 NUL 时返回整个字段。
    """
    return raw.split(b'\x00', 1)[0].decode(encoding, ENCODE_ERRORS)


# ==================== 八进制字段 ====================

def encode_octal(value: int, width: int, field: str = '') -> bytes:
    """
    编码八进制数字字段

    Args:
        value: 非负整数
        width: 字段宽度 (含结尾 NUL)
        field: 字段名，用于错误信息

    Returns:
        恰好 width 字节

    Raises:
        FieldOverflowError: 数值超出 width - 1 位八进制的表示范围

    Examples:
        >>> encode_octal(0o644, 8)
        b'0000644\\x00'
    """
    digits = width - 1
    if value < 0 or value >= 8 ** digits:
        raise FieldOverflowError(field, value, width)
    return ('%0*o' % (digits, value)).encode('ascii') + b'\x00'


def decode_octal(raw: bytes, field: str = '', offset: Optional[int] = None) -> int:
    """
    解码八进制数字字段

    取第一个 NUL 之前的内容，去掉两端空格 (部分实现用前导空格右对齐，
    或用空格作结尾)，空字段与全空格字段视为 0。数字之间的空格不接受。

    Raises:
        NumberFormatError: 含有非八进制字符
    """
    text = raw.split(b'\x00', 1)[0].strip(b' ')
    if not text:
        return 0
    if not _OCTAL_DIGITS.issuperset(text):
        raise NumberFormatError(field, raw, offset)
    return int(text, 8)


def encode_checksum(value: int) -> bytes:
    """
    编码校验和字段

    格式: 6 位八进制 + NUL + 空格，共 8 字节。
    """
    if value < 0 or value >= 8 ** 6:
        raise FieldOverflowError('checksum', value, 7)
    return b'%06o\x00 ' % value
