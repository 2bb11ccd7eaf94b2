#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
USTAR 头部数据结构定义

定义文件类型 (FileType / OtherType) 与 512 字节头部块 TarHeader。
"""

import logging
import struct
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, Union

from .checksum import CHECKSUM_OFFSET, CHECKSUM_SIZE, SIGNED, header_checksum, match_checksum
from .fields import (
    decode_octal, decode_string, encode_checksum, encode_octal, encode_string,
)
from ..exceptions import ChecksumMismatchError, TruncatedInputError
from ..utils import join_long_path, split_long_path

logger = logging.getLogger(__name__)


# ==================== 常量定义 ====================

MAGIC = b'ustar '
VERSION = b' \x00'

# 字段偏移 (用于错误定位)
FIELD_OFFSETS: Dict[str, int] = {
    'name': 0,
    'mode': 100,
    'owner_id': 108,
    'group_id': 116,
    'size': 124,
    'mod_time': 136,
    'checksum': CHECKSUM_OFFSET,
    'file_type': 156,
    'link_target': 157,
    'magic': 257,
    'version': 263,
    'owner_name': 265,
    'group_name': 297,
    'device_major': 329,
    'device_minor': 337,
    'prefix': 345,
    'reserved': 500,
}


# ==================== 文件类型 ====================

class FileType(Enum):
    """
    已知的文件类型标记

    未知标记由 OtherType 保存原始字节，二者合起来构成 EntryType。
    """
    NORMAL = b'0'
    HARD_LINK = b'1'
    SYMBOLIC_LINK = b'2'
    CHARACTER_DEVICE = b'3'
    BLOCK_DEVICE = b'4'
    DIRECTORY = b'5'
    FIFO = b'6'

    @property
    def tag(self) -> bytes:
        return self.value

    @property
    def has_content(self) -> bool:
        """只有普通文件携带内容"""
        return self is FileType.NORMAL

    @classmethod
    def from_tag(cls, tag: bytes) -> 'EntryType':
        """
        解析类型标记

        b'\\0' 与 b'0' 都视为普通文件，其余未知字节返回 OtherType。
        """
        if tag == b'\x00':
            return cls.NORMAL
        try:
            return cls(tag)
        except ValueError:
            return OtherType(tag)


_KNOWN_TAGS = frozenset(t.value for t in FileType) | {b'\x00'}


@dataclass(frozen=True)
class OtherType:
    """
    未知/厂商扩展类型

    原样保存类型字节，保证往返不丢失信息。按普通文件处理内容。
    """
    tag: bytes

    def __post_init__(self):
        if len(self.tag) != 1:
            raise ValueError(f"类型标记必须为单字节: {self.tag!r}")
        if self.tag in _KNOWN_TAGS:
            raise ValueError(f"{self.tag!r} 是已知类型，请使用 FileType")

    @property
    def has_content(self) -> bool:
        return True


EntryType = Union[FileType, OtherType]


# ==================== 头部 ====================

@dataclass(frozen=True)
class TarHeader:
    """
    USTAR 头部 (512 bytes)

    布局:
        name[100] mode[8] uid[8] gid[8] size[12] mtime[12] chksum[8]
        typeflag[1] linkname[100] magic[6] version[2] uname[32] gname[32]
        devmajor[8] devminor[8] prefix[155] reserved[12]
    """
    FORMAT: ClassVar[str] = '100s8s8s8s12s12s8s1s100s6s2s32s32s8s8s155s12s'
    SIZE: ClassVar[int] = 512

    name: str
    mode: int = 0o644
    owner_id: int = 0
    group_id: int = 0
    size: int = 0
    mod_time: int = 0
    file_type: EntryType = FileType.NORMAL
    link_target: str = ''
    owner_name: str = ''
    group_name: str = ''
    device_major: int = 0
    device_minor: int = 0

    def pack(self, encoding: str = 'utf-8', split_long_names: bool = False) -> bytes:
        """
        序列化为 512 字节头部块

        Args:
            encoding: 字符串字段编码
            split_long_names: 是否允许将长路径拆分到 prefix 字段 (默认关闭，
                GNU 风格 magic 下其他实现不读取 prefix)

        Raises:
            PathTooLongError: 路径无法放入头部
            FieldOverflowError: 数值字段溢出
        """
        prefix, name = split_long_path(self.name, encoding, split_long_names)
        if prefix:
            logger.debug("拆分长路径: %r -> %r + %r", self.name, prefix, name)

        block = struct.pack(
            self.FORMAT,
            encode_string(name, 100),
            encode_octal(self.mode, 8, 'mode'),
            encode_octal(self.owner_id, 8, 'owner_id'),
            encode_octal(self.group_id, 8, 'group_id'),
            encode_octal(self.size, 12, 'size'),
            encode_octal(self.mod_time, 12, 'mod_time'),
            b' ' * CHECKSUM_SIZE,  # 计算前以空格占位
            self.file_type.tag,
            encode_string(self.link_target, 100, encoding),
            MAGIC,
            VERSION,
            encode_string(self.owner_name, 32, encoding),
            encode_string(self.group_name, 32, encoding),
            encode_octal(self.device_major, 8, 'device_major'),
            encode_octal(self.device_minor, 8, 'device_minor'),
            encode_string(prefix, 155),
            b'\x00' * 12,
        )

        checksum = encode_checksum(header_checksum(block))
        end = CHECKSUM_OFFSET + CHECKSUM_SIZE
        return block[:CHECKSUM_OFFSET] + checksum + block[end:]

    @classmethod
    def unpack(cls, data: bytes, offset: int = 0, encoding: str = 'utf-8') -> 'TarHeader':
        """
        从 512 字节头部块反序列化

        先校验校验和，再解析其余字段。

        Args:
            data: 头部块
            offset: 块在字节流中的绝对偏移 (用于错误定位)
            encoding: 字符串字段编码

        Raises:
            TruncatedInputError: 数据不足 512 字节
            NumberFormatError: 八进制字段格式错误
            ChecksumMismatchError: 校验和不匹配
        """
        if len(data) != cls.SIZE:
            raise TruncatedInputError(cls.SIZE, len(data), offset)

        def octal(field: str, raw: bytes) -> int:
            return decode_octal(raw, field, offset + FIELD_OFFSETS[field])

        values = struct.unpack(cls.FORMAT, data)

        # ========== 1. 校验和 ==========
        recorded = octal('checksum', values[6])
        algorithm = match_checksum(data, recorded)
        if algorithm is None:
            raise ChecksumMismatchError(
                recorded,
                header_checksum(data),
                SIGNED.compute(data),
                offset
            )
        if algorithm is SIGNED:
            logger.warning("偏移 %d 的头部仅在有符号求和下通过校验", offset)

        if values[9] != MAGIC:
            logger.debug("偏移 %d 的头部 magic 为 %r", offset, values[9])

        # ========== 2. 字段 ==========
        name = join_long_path(values[15].split(b'\x00', 1)[0],
                              values[0].split(b'\x00', 1)[0])
        return cls(
            name=decode_string(name, encoding),
            mode=octal('mode', values[1]),
            owner_id=octal('owner_id', values[2]),
            group_id=octal('group_id', values[3]),
            size=octal('size', values[4]),
            mod_time=octal('mod_time', values[5]),
            file_type=FileType.from_tag(values[7]),
            link_target=decode_string(values[8], encoding),
            owner_name=decode_string(values[11], encoding),
            group_name=decode_string(values[12], encoding),
            device_major=octal('device_major', values[13]),
            device_minor=octal('device_minor', values[14]),
        )
