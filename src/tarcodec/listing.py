#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
条目列表格式化

生成类似 `tar -tv` 的单行描述，只做字符串处理，不做任何输出。
"""

from datetime import datetime, timezone
from typing import Collection, Iterable, Iterator

from .archive.entry import TarEntry
from .core.schema import EntryType, FileType

_TYPE_CHARS = {
    FileType.HARD_LINK: 'h',
    FileType.SYMBOLIC_LINK: 'l',
    FileType.CHARACTER_DEVICE: 'c',
    FileType.BLOCK_DEVICE: 'b',
    FileType.DIRECTORY: 'd',
    FileType.FIFO: 'p',
}

TIME_FORMAT = '%Y-%m-%d %H:%M:%S'


def type_char(file_type: EntryType) -> str:
    """类型标记字符，普通文件与未知类型为 '-'"""
    return _TYPE_CHARS.get(file_type, '-')


def _triplet(mode: int, read: int, write: int, execute: int,
             special: int, char: str) -> str:
    r = 'r' if mode >> read & 1 else '-'
    w = 'w' if mode >> write & 1 else '-'
    x = mode >> execute & 1
    if mode >> special & 1:
        x = char if x else char.upper()
    else:
        x = 'x' if x else '-'
    return r + w + x


def mode_string(mode: int) -> str:
    """
    权限位字符串

    Examples:
        >>> mode_string(0o644)
        'rw-r--r--'
        >>> mode_string(0o4755)
        'rwsr-xr-x'
        >>> mode_string(0o1644)
        'rw-r--r-T'
    """
    return (
        _triplet(mode, 8, 7, 6, 11, 's')
        + _triplet(mode, 5, 4, 3, 10, 's')
        + _triplet(mode, 2, 1, 0, 9, 't')
    )


def describe_entry(entry: TarEntry, verbose: bool = False) -> str:
    """
    单行描述条目

    非详细模式只返回路径；详细模式格式为:
        <类型><权限> <属主> <属组> <大小> <修改时间 UTC> <路径><链接>
    属主/属组名为空时显示数字 ID。
    """
    header = entry.header
    if not verbose:
        return header.name

    owner = header.owner_name or str(header.owner_id)
    group = header.group_name or str(header.group_id)
    mtime = datetime.fromtimestamp(header.mod_time, tz=timezone.utc)

    if header.file_type is FileType.HARD_LINK:
        link = f" link to {header.link_target}"
    elif header.file_type is FileType.SYMBOLIC_LINK:
        link = f" -> {header.link_target}"
    else:
        link = ""

    return " ".join([
        type_char(header.file_type) + mode_string(header.mode),
        owner.ljust(7),
        group.ljust(7),
        str(header.size).rjust(11),
        mtime.strftime(TIME_FORMAT),
        header.name + link,
    ])


def filter_entries(entries: Iterable[TarEntry],
                   names: Collection[str]) -> Iterator[TarEntry]:
    """
    按路径过滤条目 (惰性)

    names 为空时保留全部条目。路径按原样比较，不做规范化。
    """
    wanted = frozenset(names)
    for entry in entries:
        if not wanted or entry.name in wanted:
            yield entry
