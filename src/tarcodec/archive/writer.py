#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
归档写入器

逐条写入条目，关闭时写入两个全零结束块。
"""

import logging
from typing import BinaryIO, Iterable

from ..core.binary_io import BLOCK_SIZE, BlockWriter
from .entry import TarEntry, write_entry

logger = logging.getLogger(__name__)

END_BLOCKS = 2


class ArchiveWriter:
    """
    归档写入器

    条目按添加顺序写入字节流，不缓存内容。
    不负责关闭底层文件对象。

    Example:
        >>> buf = io.BytesIO()
        >>> with ArchiveWriter(buf) as writer:
        ...     writer.add(TarEntry.file("a/b.txt", b"hello"))
    """

    def __init__(
        self,
        file: BinaryIO,
        encoding: str = 'utf-8',
        split_long_names: bool = False
    ):
        """
        初始化写入器

        Args:
            file: 以 'wb' 模式打开的文件对象
            encoding: 字符串字段编码
            split_long_names: 是否允许将超过 100 字节的路径拆分到 prefix 字段。
                默认关闭，GNU tar 会忽略 prefix，只解出路径的最后一段
        """
        self._writer = BlockWriter(file)
        self._encoding = encoding
        self._split_long_names = split_long_names
        self._entry_count = 0
        self._closed = False

    def add(self, entry: TarEntry) -> int:
        """
        写入单个条目

        Returns:
            写入的字节数

        Raises:
            ValueError: 写入器已关闭
        """
        if self._closed:
            raise ValueError("归档已关闭，无法继续写入")
        written = write_entry(
            self._writer, entry, self._encoding, self._split_long_names
        )
        self._entry_count += 1
        return written

    def add_entries(self, entries: Iterable[TarEntry]) -> int:
        """
        依次写入多个条目

        Returns:
            写入的条目数
        """
        count = 0
        for entry in entries:
            self.add(entry)
            count += 1
        return count

    def close(self) -> None:
        """写入结束块，重复调用无效果"""
        if self._closed:
            return
        self._writer.write_zeros(BLOCK_SIZE * END_BLOCKS)
        self._closed = True
        logger.debug(
            "归档写入完成: %d 个条目, %d 字节",
            self._entry_count, self._writer.position
        )

    @property
    def entry_count(self) -> int:
        return self._entry_count

    @property
    def bytes_written(self) -> int:
        return self._writer.position

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> 'ArchiveWriter':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is None:
            self.close()
        else:
            # 出错时不写结束块
            self._closed = True
