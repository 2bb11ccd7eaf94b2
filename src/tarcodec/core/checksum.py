#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
头部校验和算法

校验和为整个 512 字节头部块的字节和，计算时校验和字段 (偏移 148，8 字节)
一律视为 8 个 ASCII 空格。

历史上部分实现 (如旧版 Sun tar) 按有符号字节求和，
读取时两种算法任一匹配即视为有效。
"""

import struct
from abc import ABC, abstractmethod
from typing import Optional, Tuple

CHECKSUM_OFFSET = 148
CHECKSUM_SIZE = 8
_BLANK = b' ' * CHECKSUM_SIZE


def blank_checksum(block: bytes) -> bytes:
    """返回校验和字段被替换为空格后的块"""
    end = CHECKSUM_OFFSET + CHECKSUM_SIZE
    return block[:CHECKSUM_OFFSET] + _BLANK + block[end:]


class ChecksumAlgorithm(ABC):
    """
    校验和算法

    compute() 接收原始块，内部负责屏蔽校验和字段。
    """

    @property
    def display_name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def compute(self, block: bytes) -> int:
        pass

    def verify(self, block: bytes, expected: int) -> bool:
        return self.compute(block) == expected


class UnsignedChecksum(ChecksumAlgorithm):
    """标准算法: 按无符号字节求和"""

    @property
    def display_name(self) -> str:
        return "unsigned"

    def compute(self, block: bytes) -> int:
        return sum(blank_checksum(block))


class SignedChecksum(ChecksumAlgorithm):
    """兼容算法: 每个字节按 8 位有符号数求和"""

    @property
    def display_name(self) -> str:
        return "signed"

    def compute(self, block: bytes) -> int:
        data = blank_checksum(block)
        return sum(struct.unpack('%db' % len(data), data))


UNSIGNED = UnsignedChecksum()
SIGNED = SignedChecksum()

# 按尝试顺序排列
ALGORITHMS: Tuple[ChecksumAlgorithm, ...] = (UNSIGNED, SIGNED)


def header_checksum(block: bytes) -> int:
    """写入时使用的校验和 (无符号)"""
    return UNSIGNED.compute(block)


def match_checksum(block: bytes, expected: int) -> Optional[ChecksumAlgorithm]:
    """
    查找与记录值匹配的算法

    Args:
        block: 512 字节头部块
        expected: 头部中记录的校验和

    Returns:
        第一个匹配的算法，均不匹配时返回 None
    """
    for algorithm in ALGORITHMS:
        if algorithm.verify(block, expected):
            return algorithm
    return None
