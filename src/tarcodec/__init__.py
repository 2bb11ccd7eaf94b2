#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
tarcodec - 零依赖的 USTAR 归档编解码库

在内存条目序列与逐字节一致的 tar 字节流之间转换。
"""

import logging

__version__ = "0.1.0"

# 异常类
from .exceptions import (
    TarError,
    FieldOverflowError,
    NumberFormatError,
    PathTooLongError,
    ChecksumMismatchError,
    TruncatedInputError,
    InvalidEntryError,
    InvalidFormatError,
)

# 头部
from .core import BLOCK_SIZE, FileType, OtherType, EntryType, TarHeader

# 归档
from .archive import (
    TarEntry,
    TarArchive,
    ArchiveWriter,
    ArchiveReader,
    ReaderState,
    encode_archive,
    decode_archive,
    iter_entries,
)

# 列表
from .listing import describe_entry, filter_entries, mode_string, type_char

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # 版本
    "__version__",
    # 异常
    "TarError",
    "FieldOverflowError",
    "NumberFormatError",
    "PathTooLongError",
    "ChecksumMismatchError",
    "TruncatedInputError",
    "InvalidEntryError",
    "InvalidFormatError",
    # 头部
    "BLOCK_SIZE",
    "FileType",
    "OtherType",
    "EntryType",
    "TarHeader",
    # 归档
    "TarEntry",
    "TarArchive",
    "ArchiveWriter",
    "ArchiveReader",
    "ReaderState",
    "encode_archive",
    "decode_archive",
    "iter_entries",
    # 列表
    "describe_entry",
    "filter_entries",
    "mode_string",
    "type_char",
]
