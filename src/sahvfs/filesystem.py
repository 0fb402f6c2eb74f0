#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
文件系统入口

把磁盘扫描、编码和解码串起来:

- from_path: 从磁盘目录加载
- from_archive: 从 data.sah 加载
- build / build_with_destination / build_to_paths: 写出头文件和数据文件
"""

import logging
import os
import tempfile
from typing import BinaryIO, Optional, Tuple, Union

from .archive.decoder import ArchiveDecoder
from .archive.encoder import ArchiveEncoder
from .core.scanner import EntryFilter, scan_directory
from .core.tree import Filesystem
from .hooks.base import ChecksumHook
from .exceptions import PathNotAFileError

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def from_path(path: PathLike,
              entry_filter: Optional[EntryFilter] = None) -> Filesystem:
    """
    从磁盘目录加载文件系统

    Args:
        path: 数据目录
        entry_filter: 条目过滤函数 (可选)

    Raises:
        PathNotADirectoryError: path 不是目录
    """
    return scan_directory(path, entry_filter)


def from_archive(header_path: PathLike) -> Filesystem:
    """
    从头文件加载文件系统

    Args:
        header_path: data.sah 路径

    Raises:
        PathNotAFileError: header_path 不是普通文件
        InvalidMagicValueError: 魔法数不匹配
        UnexpectedEofError: 头文件被截断
    """
    if not os.path.isfile(header_path):
        raise PathNotAFileError(header_path)

    with open(header_path, 'rb') as f:
        header = f.read()

    logger.debug("读取头文件 %s (%d 字节)", header_path, len(header))
    return ArchiveDecoder().decode(header)


def build_with_destination(
    fs: Filesystem,
    header: BinaryIO,
    data: BinaryIO,
    checksum_hook: Optional[ChecksumHook] = None
) -> None:
    """
    编码并写入指定的目标

    两个缓冲区都完整编码后才开始写入。

    Args:
        fs: 文件系统
        header: 头文件目标 (可写二进制对象)
        data: 数据文件目标 (可写二进制对象)
        checksum_hook: 校验算法钩子 (可选)
    """
    header_bytes, data_bytes = ArchiveEncoder(checksum_hook).encode(fs)
    header.write(header_bytes)
    data.write(data_bytes)


def build(
    fs: Filesystem,
    checksum_hook: Optional[ChecksumHook] = None
) -> Tuple[BinaryIO, BinaryIO]:
    """
    编码到临时文件

    临时文件关闭后自动删除，返回时已回到开头。

    Returns:
        (头文件, 数据文件)
    """
    header = tempfile.TemporaryFile()
    data = tempfile.TemporaryFile()
    try:
        build_with_destination(fs, header, data, checksum_hook)
    except BaseException:
        header.close()
        data.close()
        raise

    header.seek(0)
    data.seek(0)
    return header, data


def build_to_paths(
    fs: Filesystem,
    header_path: PathLike,
    data_path: PathLike,
    checksum_hook: Optional[ChecksumHook] = None
) -> None:
    """
    编码并写入指定路径

    先在内存中完成编码，编码失败时已有的目标文件保持不变。

    Args:
        fs: 文件系统
        header_path: data.sah 输出路径
        data_path: data.saf 输出路径
        checksum_hook: 校验算法钩子 (可选)
    """
    header_bytes, data_bytes = ArchiveEncoder(checksum_hook).encode(fs)

    with open(header_path, 'wb') as header, open(data_path, 'wb') as data:
        header.write(header_bytes)
        data.write(data_bytes)
    logger.debug("写出归档 %s / %s", header_path, data_path)
