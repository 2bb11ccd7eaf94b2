#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
归档读取器

以生成器方式逐条读取条目，前一个头部解析完成后才读取下一个块。
"""

import io
import logging
from enum import Enum
from typing import BinaryIO, Iterator, Optional, Union

from ..core.binary_io import BLOCK_SIZE, BlockReader
from ..exceptions import InvalidFormatError, TarError, TruncatedInputError
from ..utils import is_end_block, is_zero_block
from .entry import TarEntry, read_entry

logger = logging.getLogger(__name__)


class ReaderState(Enum):
    """读取状态"""
    SCANNING = 'scanning'
    DONE = 'done'
    FAILED = 'failed'


class ArchiveReader:
    """
    归档读取器

    遇到首字节为 NUL 的块即视为结束 (只预览，不消费)。
    任何格式错误都会使读取器进入 FAILED 状态并向上抛出，不做部分恢复。
    """

    def __init__(
        self,
        source: Union[BinaryIO, bytes, bytearray],
        encoding: str = 'utf-8',
        strict_eof: bool = False
    ):
        """
        初始化读取器

        Args:
            source: 以 'rb' 模式打开的文件对象，或内存中的字节
            encoding: 字符串字段编码
            strict_eof: 是否要求两个完整的全零结束块
        """
        if isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(source)
        self._reader = BlockReader(source)
        self._encoding = encoding
        self._strict_eof = strict_eof
        self._state = ReaderState.SCANNING
        self._entry_count = 0

    def __iter__(self) -> Iterator[TarEntry]:
        return self.iter_entries()

    def iter_entries(self) -> Iterator[TarEntry]:
        """
        迭代所有条目 (生成器模式，内存友好)

        Yields:
            TarEntry

        Raises:
            TruncatedInputError: 数据不足
            NumberFormatError: 八进制字段格式错误
            ChecksumMismatchError: 校验和不匹配
            InvalidFormatError: 严格模式下结束块不全为零
        """
        while self._state is ReaderState.SCANNING:
            try:
                entry = self._next_entry()
            except TarError:
                self._state = ReaderState.FAILED
                raise
            if entry is None:
                self._state = ReaderState.DONE
                return
            self._entry_count += 1
            yield entry

    def _next_entry(self) -> Optional[TarEntry]:
        """读取下一个条目，到达结束块时返回 None"""
        block = self._reader.peek_bytes(BLOCK_SIZE)

        if not block:
            if self._strict_eof:
                raise TruncatedInputError(BLOCK_SIZE, 0, self._reader.position)
            logger.warning("字节流在偏移 %d 处结束，缺少结束块", self._reader.position)
            return None

        if is_end_block(block):
            logger.debug("偏移 %d 处检测到结束块", self._reader.position)
            if self._strict_eof:
                self._check_end_blocks()
            return None

        return read_entry(self._reader, self._encoding)

    def _check_end_blocks(self) -> None:
        """严格模式: 校验两个完整的全零块"""
        for index in range(2):
            offset = self._reader.position
            block = self._reader.read_bytes(BLOCK_SIZE)
            if not is_zero_block(block):
                raise InvalidFormatError(
                    f"偏移 {offset} 处的第 {index + 1} 个结束块无效",
                    expected="全零块",
                    actual="含非零字节"
                )

    @property
    def state(self) -> ReaderState:
        return self._state

    @property
    def entry_count(self) -> int:
        """已读取的条目数"""
        return self._entry_count

    @property
    def position(self) -> int:
        """当前读取位置"""
        return self._reader.position
