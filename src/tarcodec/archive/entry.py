#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
归档条目

TarEntry 将头部与内容字节绑定，write_entry() / read_entry()
负责内容的 512 字节对齐。
"""

import logging
from dataclasses import dataclass
from typing import Any

from ..core.binary_io import BLOCK_SIZE, BlockReader, BlockWriter
from ..core.schema import FileType, TarHeader
from ..exceptions import InvalidEntryError
from ..utils import padding_size

logger = logging.getLogger(__name__)


def content_size(header: TarHeader) -> int:
    """
    条目实际携带的内容长度

    只有普通文件和未知类型携带内容。目录、链接、设备等即使
    size 字段非零也按 0 处理 (部分平台会给目录写入非零 size)。
    """
    return header.size if header.file_type.has_content else 0


@dataclass(frozen=True)
class TarEntry:
    """
    归档条目 = 头部 + 内容

    构造时校验内容长度与头部一致。
    """
    header: TarHeader
    content: bytes = b''

    def __post_init__(self):
        expected = content_size(self.header)
        if len(self.content) != expected:
            raise InvalidEntryError(
                f"条目 '{self.header.name}' 内容长度 {len(self.content)} "
                f"与头部不符 (应为 {expected})"
            )

    @property
    def name(self) -> str:
        return self.header.name

    @property
    def file_type(self):
        return self.header.file_type

    # ==================== 便捷构造 ====================

    @classmethod
    def file(cls, name: str, content: bytes, **fields: Any) -> 'TarEntry':
        """构造普通文件条目，size 取内容长度"""
        header = TarHeader(name=name, size=len(content), **fields)
        return cls(header, content)

    @classmethod
    def directory(cls, name: str, mode: int = 0o755, **fields: Any) -> 'TarEntry':
        """构造目录条目"""
        header = TarHeader(name=name, mode=mode, file_type=FileType.DIRECTORY, **fields)
        return cls(header)

    @classmethod
    def symlink(cls, name: str, target: str, mode: int = 0o777, **fields: Any) -> 'TarEntry':
        """构造符号链接条目"""
        header = TarHeader(
            name=name, mode=mode, file_type=FileType.SYMBOLIC_LINK,
            link_target=target, **fields
        )
        return cls(header)

    @classmethod
    def hard_link(cls, name: str, target: str, **fields: Any) -> 'TarEntry':
        """构造硬链接条目"""
        header = TarHeader(
            name=name, file_type=FileType.HARD_LINK, link_target=target, **fields
        )
        return cls(header)


# ==================== 编解码 ====================

def write_entry(
    writer: BlockWriter,
    entry: TarEntry,
    encoding: str = 'utf-8',
    split_long_names: bool = False
) -> int:
    """
    写入一个条目: 头部块 + 内容 + 零填充

    内容长度恰为 512 的倍数时不追加填充。

    Returns:
        写入的字节数

    Raises:
        InvalidEntryError: 路径为空 (空 name 的头部会被读取方当作结束块)
        PathTooLongError: 路径无法放入头部
        FieldOverflowError: 数值字段溢出
    """
    if not entry.header.name:
        raise InvalidEntryError("条目路径不能为空")

    start = writer.position
    writer.write_bytes(entry.header.pack(encoding, split_long_names))
    writer.write_bytes(entry.content)
    writer.pad_to_block()

    logger.debug(
        "写入条目 %r (类型 %r, %d 字节)",
        entry.name, entry.file_type.tag, len(entry.content)
    )
    return writer.position - start


def read_entry(reader: BlockReader, encoding: str = 'utf-8') -> TarEntry:
    """
    读取一个条目，消费头部、内容与填充

    填充字节只跳过，不校验其值。

    Raises:
        TruncatedInputError: 数据不足
        NumberFormatError: 八进制字段格式错误
        ChecksumMismatchError: 校验和不匹配
    """
    offset = reader.position
    header = TarHeader.unpack(reader.read_bytes(BLOCK_SIZE), offset, encoding)

    size = content_size(header)
    if size != header.size:
        logger.debug("条目 %r 类型不携带内容，忽略 size=%d", header.name, header.size)
    content = reader.read_bytes(size)
    reader.skip(padding_size(size))

    logger.debug(
        "读取条目 %r (类型 %r, %d 字节, 偏移 %d)",
        header.name, header.file_type.tag, size, offset
    )
    return TarEntry(header, content)
