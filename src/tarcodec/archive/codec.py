#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
内存归档编解码

在内存字节与条目序列之间转换，流式场景请直接使用
ArchiveWriter / ArchiveReader。
"""

import io
from dataclasses import dataclass
from typing import BinaryIO, Iterable, Iterator, List, Tuple, Union

from .entry import TarEntry
from .reader import ArchiveReader
from .writer import ArchiveWriter


def encode_archive(
    entries: Iterable[TarEntry],
    encoding: str = 'utf-8',
    split_long_names: bool = False
) -> bytes:
    """
    编码条目序列为归档字节

    结果长度总是 512 的倍数，并以两个全零块结尾。
    空序列得到 1024 个零字节。
    """
    buffer = io.BytesIO()
    with ArchiveWriter(buffer, encoding, split_long_names) as writer:
        writer.add_entries(entries)
    return buffer.getvalue()


def iter_entries(
    source: Union[BinaryIO, bytes, bytearray],
    encoding: str = 'utf-8',
    strict_eof: bool = False
) -> Iterator[TarEntry]:
    """惰性解码条目"""
    return iter(ArchiveReader(source, encoding, strict_eof))


def decode_archive(
    data: Union[BinaryIO, bytes, bytearray],
    encoding: str = 'utf-8',
    strict_eof: bool = False
) -> List[TarEntry]:
    """解码全部条目"""
    return list(iter_entries(data, encoding, strict_eof))


@dataclass(frozen=True)
class TarArchive:
    """
    有序条目序列

    顺序即磁盘顺序，除此之外没有其他约束。
    """
    entries: Tuple[TarEntry, ...] = ()

    def __post_init__(self):
        # 允许传入 list
        object.__setattr__(self, 'entries', tuple(self.entries))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[TarEntry]:
        return iter(self.entries)

    def names(self) -> List[str]:
        """所有条目路径"""
        return [entry.name for entry in self.entries]

    def pack(self, encoding: str = 'utf-8', split_long_names: bool = False) -> bytes:
        return encode_archive(self.entries, encoding, split_long_names)

    @classmethod
    def unpack(
        cls,
        data: Union[BinaryIO, bytes, bytearray],
        encoding: str = 'utf-8',
        strict_eof: bool = False
    ) -> 'TarArchive':
        return cls(tuple(iter_entries(data, encoding, strict_eof)))
