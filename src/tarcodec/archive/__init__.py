#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
tarcodec Archive

提供条目、归档的编码与解码功能。
"""

from .entry import TarEntry, content_size, read_entry, write_entry
from .writer import ArchiveWriter
from .reader import ArchiveReader, ReaderState
from .codec import TarArchive, encode_archive, decode_archive, iter_entries

__all__ = [
    "TarEntry",
    "content_size",
    "read_entry",
    "write_entry",
    "ArchiveWriter",
    "ArchiveReader",
    "ReaderState",
    "TarArchive",
    "encode_archive",
    "decode_archive",
    "iter_entries",
]
