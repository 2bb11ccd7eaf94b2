#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
tarcodec 核心模块

提供块 I/O 封装、定宽字段编解码、校验和算法与头部数据结构。
"""

from .binary_io import BLOCK_SIZE, BlockReader, BlockWriter
from .fields import (
    encode_string, decode_string, encode_octal, decode_octal, encode_checksum
)
from .checksum import (
    ChecksumAlgorithm, UnsignedChecksum, SignedChecksum,
    header_checksum, match_checksum
)
from .schema import FileType, OtherType, EntryType, TarHeader

__all__ = [
    "BLOCK_SIZE",
    "BlockReader",
    "BlockWriter",
    # 字段
    "encode_string",
    "decode_string",
    "encode_octal",
    "decode_octal",
    "encode_checksum",
    # 校验和
    "ChecksumAlgorithm",
    "UnsignedChecksum",
    "SignedChecksum",
    "header_checksum",
    "match_checksum",
    # 头部
    "FileType",
    "OtherType",
    "EntryType",
    "TarHeader",
]
