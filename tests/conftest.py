#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
pytest 全局配置

提供共享 fixtures 和测试工具。
"""

import io

import pytest

from tarcodec import FileType, OtherType, TarEntry, TarHeader, encode_archive
from tarcodec.core.checksum import CHECKSUM_OFFSET, CHECKSUM_SIZE, header_checksum
from tarcodec.core.fields import encode_checksum


# ==================== 自定义 Markers ====================

def pytest_configure(config):
    """注册自定义 markers"""
    config.addinivalue_line("markers", "slow: 耗时较长的测试")


# ==================== 头部 Fixtures ====================

@pytest.fixture
def sample_header() -> TarHeader:
    """普通文件头部"""
    return TarHeader(
        name="a/b.txt",
        mode=0o644,
        owner_id=1000,
        group_id=100,
        size=5,
        mod_time=1700000000,
        owner_name="alice",
        group_name="users",
    )


@pytest.fixture
def sample_block(sample_header) -> bytes:
    """sample_header 编码后的 512 字节块"""
    return sample_header.pack()


@pytest.fixture
def patch_header():
    """
    修改头部块中的字节并重新计算校验和

    用于构造合法校验和下的异常字段。
    """
    def _patch(block: bytes, offset: int, data: bytes) -> bytes:
        block = block[:offset] + data + block[offset + len(data):]
        blanked = (
            block[:CHECKSUM_OFFSET] + b' ' * CHECKSUM_SIZE
            + block[CHECKSUM_OFFSET + CHECKSUM_SIZE:]
        )
        checksum = encode_checksum(header_checksum(blanked))
        return block[:CHECKSUM_OFFSET] + checksum + block[CHECKSUM_OFFSET + CHECKSUM_SIZE:]
    return _patch


# ==================== 条目 Fixtures ====================

@pytest.fixture
def sample_entries() -> list:
    """
    覆盖各种类型的条目集

    Returns:
        条目列表 (归档顺序)
    """
    return [
        TarEntry.directory("project/", mod_time=1600000000),
        TarEntry.file("project/hello.txt", b"hello", mod_time=1600000001),
        TarEntry.file("project/empty.bin", b""),
        TarEntry.file("project/block.bin", bytes(range(256)) * 2),
        TarEntry.symlink("project/link", "hello.txt"),
        TarEntry.hard_link("project/hard", "project/hello.txt"),
        TarEntry(TarHeader(
            name="dev/tty0",
            mode=0o620,
            file_type=FileType.CHARACTER_DEVICE,
            device_major=4,
            device_minor=0,
        )),
        TarEntry(TarHeader(name="dev/sda", file_type=FileType.BLOCK_DEVICE,
                           device_major=8, device_minor=1)),
        TarEntry(TarHeader(name="run/fifo", file_type=FileType.FIFO)),
        TarEntry(TarHeader(name="vendor.dat", size=3, file_type=OtherType(b'9')), b"xyz"),
        TarEntry.file("中文/文件.txt", "中文内容".encode("utf-8"),
                      owner_name="用户", group_name="组"),
    ]


@pytest.fixture
def sample_archive(sample_entries) -> bytes:
    """sample_entries 编码后的归档字节"""
    return encode_archive(sample_entries)


@pytest.fixture
def sample_stream(sample_archive) -> io.BytesIO:
    """sample_archive 的文件对象"""
    return io.BytesIO(sample_archive)
