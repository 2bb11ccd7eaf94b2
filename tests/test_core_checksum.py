#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
校验和算法测试
"""

import pytest

from tarcodec.core.checksum import (
    CHECKSUM_OFFSET,
    SIGNED,
    UNSIGNED,
    SignedChecksum,
    UnsignedChecksum,
    blank_checksum,
    header_checksum,
    match_checksum,
)


class TestBlankChecksum:
    """校验和字段屏蔽测试"""

    def test_field_replaced_with_spaces(self):
        block = bytes(512)
        blanked = blank_checksum(block)

        assert len(blanked) == 512
        assert blanked[CHECKSUM_OFFSET:CHECKSUM_OFFSET + 8] == b" " * 8
        assert blanked[:CHECKSUM_OFFSET] == bytes(CHECKSUM_OFFSET)
        assert blanked[CHECKSUM_OFFSET + 8:] == bytes(512 - CHECKSUM_OFFSET - 8)


class TestAlgorithms:
    """无符号 / 有符号求和测试"""

    def test_zero_block(self):
        """全零块只剩 8 个空格"""
        assert UnsignedChecksum().compute(bytes(512)) == 8 * 32
        assert SignedChecksum().compute(bytes(512)) == 8 * 32

    def test_checksum_field_ignored(self):
        """校验和字段的内容不影响结果"""
        a = bytes(512)
        b = a[:CHECKSUM_OFFSET] + b"\xff" * 8 + a[CHECKSUM_OFFSET + 8:]
        assert header_checksum(a) == header_checksum(b)

    def test_high_bytes_differ(self):
        """>= 0x80 的字节在两种算法下结果不同"""
        block = b"\x80" + bytes(511)
        assert UNSIGNED.compute(block) == 8 * 32 + 0x80
        assert SIGNED.compute(block) == 8 * 32 - 0x80

    def test_ascii_blocks_agree(self):
        block = b"abc" + bytes(509)
        assert UNSIGNED.compute(block) == SIGNED.compute(block)

    @pytest.mark.parametrize("algorithm,name", [
        (UNSIGNED, "unsigned"),
        (SIGNED, "signed"),
    ])
    def test_display_name(self, algorithm, name):
        assert algorithm.display_name == name


class TestMatchChecksum:
    """算法匹配测试"""

    def test_unsigned_preferred(self):
        block = b"abc" + bytes(509)
        assert match_checksum(block, header_checksum(block)) is UNSIGNED

    def test_signed_fallback(self):
        block = b"\xe4" + bytes(511)
        assert match_checksum(block, SIGNED.compute(block)) is SIGNED

    def test_no_match(self):
        block = b"abc" + bytes(509)
        assert match_checksum(block, header_checksum(block) + 1) is None
