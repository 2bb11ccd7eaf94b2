#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
tarcodec 异常定义

所有异常均继承自 TarError，便于统一捕获。
编解码过程中的任何错误都会中止当前调用，不做重试或自动修正。
"""

from typing import Optional


class TarError(Exception):
    """tarcodec 基础异常"""
    pass


def _at(offset: Optional[int]) -> str:
    return f" (偏移 {offset})" if offset is not None else ""


class FieldOverflowError(TarError):
    """
    数值字段溢出异常

    当数值的八进制表示超出字段宽度 (宽度 - 1 位数字) 时抛出。
    负数同样无法表示，也按溢出处理。
    """
    def __init__(self, field: str, value: int, width: int):
        self.field = field
        self.value = value
        self.width = width
        super().__init__(
            f"字段 '{field}' 溢出: 值 {value} 无法用 {width - 1} 位八进制表示"
        )


class NumberFormatError(TarError):
    """
    数字格式异常

    当八进制字段包含非八进制字符时抛出。
    """
    def __init__(self, field: str, raw: bytes, offset: Optional[int] = None):
        self.field = field
        self.raw = raw
        self.offset = offset
        super().__init__(
            f"字段 '{field}' 不是有效的八进制数: {raw!r}{_at(offset)}"
        )


class PathTooLongError(TarError):
    """
    路径过长异常

    当路径无法放入 name 字段，也无法在分隔符处拆分为 prefix + name 时抛出。
    """
    def __init__(self, path: str, length: int):
        self.path = path
        self.length = length
        super().__init__(f"路径过长 ({length} 字节)，无法写入头部: {path!r}")


class ChecksumMismatchError(TarError):
    """
    头部校验和不匹配异常

    无符号与有符号两种求和方式都与记录值不符时抛出。
    """
    def __init__(self, expected: int, unsigned: int, signed: int,
                 offset: Optional[int] = None):
        self.expected = expected
        self.unsigned = unsigned
        self.signed = signed
        self.offset = offset
        super().__init__(
            f"头部校验和失败{_at(offset)}: 记录值 {expected}, "
            f"实际 {unsigned} (无符号) / {signed} (有符号)"
        )


class TruncatedInputError(TarError):
    """
    输入截断异常

    当字节源剩余数据不足一个完整块或内容长度时抛出。
    """
    def __init__(self, expected: int, actual: int, offset: Optional[int] = None):
        self.expected = expected
        self.actual = actual
        self.offset = offset
        super().__init__(
            f"输入截断{_at(offset)}: 期望读取 {expected} 字节，实际只有 {actual} 字节"
        )


class InvalidEntryError(TarError):
    """
    条目不变量异常

    内容长度与头部记录的大小不一致，或非文件类型携带了内容时抛出。
    """
    pass


class InvalidFormatError(TarError):
    """
    格式无效异常

    仅用于严格结束块检查: 第二个结束块存在但不全为零。
    """
    def __init__(self, message: str, expected: Optional[str] = None,
                 actual: Optional[str] = None):
        self.expected = expected
        self.actual = actual
        if expected and actual:
            message = f"{message}: 期望 {expected}, 实际 {actual}"
        super().__init__(message)
