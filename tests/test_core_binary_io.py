#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
块 I/O 测试
"""

import io

import pytest

from tarcodec.core.binary_io import BLOCK_SIZE, BlockReader, BlockWriter
from tarcodec.exceptions import TruncatedInputError


class TrickleStream(io.RawIOBase):
    """每次只返回少量字节的流 (模拟管道)"""

    def __init__(self, data: bytes, chunk: int = 7):
        self._data = data
        self._chunk = chunk

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        n = min(self._chunk, len(self._data))
        if size >= 0:
            n = min(n, size)
        result, self._data = self._data[:n], self._data[n:]
        return result


# ==================== BlockWriter 测试 ====================

class TestBlockWriter:
    """BlockWriter 测试"""

    def test_write_tracks_position(self):
        buf = io.BytesIO()
        writer = BlockWriter(buf)

        assert writer.write_bytes(b"hello") == 5
        assert writer.position == 5
        assert buf.getvalue() == b"hello"

    @pytest.mark.parametrize("written,padding", [
        (0, 0),
        (1, 511),
        (5, 507),
        (512, 0),
        (513, 511),
        (1023, 1),
    ])
    def test_pad_to_block(self, written, padding):
        buf = io.BytesIO()
        writer = BlockWriter(buf)
        writer.write_bytes(b"x" * written)

        assert writer.pad_to_block() == padding
        assert writer.position % BLOCK_SIZE == 0
        assert buf.getvalue()[written:] == bytes(padding)

    def test_write_zeros(self):
        buf = io.BytesIO()
        writer = BlockWriter(buf)

        assert writer.write_zeros(0) == 0
        assert writer.write_zeros(3) == 3
        assert buf.getvalue() == b"\x00\x00\x00"


# ==================== BlockReader 测试 ====================

class TestBlockReader:
    """BlockReader 测试"""

    def test_read_bytes(self):
        reader = BlockReader(io.BytesIO(b"abcdef"))

        assert reader.read_bytes(2) == b"ab"
        assert reader.read_bytes(4) == b"cdef"
        assert reader.position == 6

    def test_read_zero(self):
        reader = BlockReader(io.BytesIO(b""))
        assert reader.read_bytes(0) == b""

    def test_truncated(self):
        reader = BlockReader(io.BytesIO(b"abc"))
        reader.read_bytes(1)

        with pytest.raises(TruncatedInputError) as exc_info:
            reader.read_bytes(5)

        assert exc_info.value.expected == 5
        assert exc_info.value.actual == 2
        assert exc_info.value.offset == 1

    def test_peek_does_not_advance(self):
        reader = BlockReader(io.BytesIO(b"abcdef"))

        assert reader.peek_bytes(3) == b"abc"
        assert reader.position == 0
        assert reader.read_bytes(4) == b"abcd"
        assert reader.peek_bytes(10) == b"ef"
        assert reader.read_bytes(2) == b"ef"

    def test_peek_at_end(self):
        reader = BlockReader(io.BytesIO(b""))
        assert reader.peek_bytes(BLOCK_SIZE) == b""

    def test_skip(self):
        reader = BlockReader(io.BytesIO(b"abcdef"))
        reader.skip(4)

        assert reader.position == 4
        assert reader.read_bytes(2) == b"ef"

    def test_skip_past_end(self):
        reader = BlockReader(io.BytesIO(b"ab"))
        with pytest.raises(TruncatedInputError):
            reader.skip(3)

    def test_short_reads_are_reassembled(self):
        """底层流返回不足字节时继续读取"""
        data = bytes(range(256)) * 4
        reader = BlockReader(TrickleStream(data))

        assert reader.peek_bytes(BLOCK_SIZE) == data[:BLOCK_SIZE]
        assert reader.read_bytes(BLOCK_SIZE) == data[:BLOCK_SIZE]
        assert reader.read_bytes(BLOCK_SIZE) == data[BLOCK_SIZE:]
