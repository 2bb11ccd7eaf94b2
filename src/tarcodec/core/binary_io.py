#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
块 I/O 封装

提供 BlockWriter 和 BlockReader 类，封装底层字节流操作，
使上层模块不需要直接操作文件指针。

字节流只要求支持 read() / write()，不要求可 seek，
因此管道、套接字和解压流都可以直接使用。
"""

from typing import BinaryIO

from ..exceptions import TruncatedInputError

BLOCK_SIZE = 512


class BlockWriter:
    """
    块写入器

    封装所有底层写操作，记录已写入的字节数，负责 512 字节对齐填充。
    """

    def __init__(self, file: BinaryIO):
        """
        初始化写入器

        Args:
            file: 以 'wb' 模式打开的文件对象 (或 BytesIO)
        """
        self._file = file
        self._position = 0

    @property
    def position(self) -> int:
        """当前写入位置"""
        return self._position

    def write_bytes(self, data: bytes) -> int:
        """
        写入原始字节

        Args:
            data: 要写入的字节

        Returns:
            写入的字节数
        """
        self._file.write(data)
        self._position += len(data)
        return len(data)

    def write_zeros(self, size: int) -> int:
        """写入 size 个零字节"""
        if size <= 0:
            return 0
        return self.write_bytes(b'\x00' * size)

    def pad_to_block(self) -> int:
        """
        用零字节填充到下一个块边界

        已位于块边界时不写入任何字节。

        Returns:
            填充的字节数
        """
        return self.write_zeros(-self._position % BLOCK_SIZE)


class BlockReader:
    """
    块读取器

    封装所有底层读操作。peek_bytes() 使用内部缓冲实现，
    不依赖文件对象的 seek()。
    """

    def __init__(self, file: BinaryIO):
        """
        初始化读取器

        Args:
            file: 以 'rb' 模式打开的文件对象 (或 BytesIO)
        """
        self._file = file
        self._position = 0
        self._buffer = b''

    @property
    def position(self) -> int:
        """当前读取位置"""
        return self._position

    def _fill(self, size: int) -> bytes:
        """从缓冲区和文件中凑齐最多 size 字节"""
        chunks = [self._buffer]
        length = len(self._buffer)
        while length < size:
            chunk = self._file.read(size - length)
            if not chunk:
                break
            chunks.append(chunk)
            length += len(chunk)
        self._buffer = b''
        return b''.join(chunks)

    def read_bytes(self, size: int) -> bytes:
        """
        读取指定字节数

        Args:
            size: 要读取的字节数

        Returns:
            读取的字节

        Raises:
            TruncatedInputError: 字节源不足请求的字节数
        """
        if size == 0:
            return b''
        data = self._fill(size)
        if len(data) < size:
            raise TruncatedInputError(size, len(data), self._position)
        self._buffer = data[size:]
        self._position += size
        return data[:size]

    def peek_bytes(self, size: int) -> bytes:
        """
        预览至多 size 字节 (不移动位置)

        字节源结束时返回的数据可能短于 size，由调用方判断。

        Args:
            size: 要预览的字节数

        Returns:
            预览的字节
        """
        data = self._fill(size)
        self._buffer = data
        return data[:size]

    def skip(self, size: int):
        """
        跳过指定字节 (不校验内容)

        Args:
            size: 要跳过的字节数

        Raises:
            TruncatedInputError: 字节源不足
        """
        self.read_bytes(size)
