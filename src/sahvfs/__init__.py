#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
SahVFS - 零依赖的 Shaiya data.sah / data.saf 归档编解码库

在磁盘目录树和 "头文件 + 数据文件" 两文件归档之间互相转换。
"""

__version__ = "0.1.0"
__author__ = "Virace"

# 异常类
from .exceptions import (
    SahError,
    PathNotADirectoryError,
    PathNotAFileError,
    InvalidFormatError,
    InvalidMagicValueError,
    UnexpectedEofError,
    UnsupportedEntryError,
    InvalidNameError,
    CorruptedDataError,
)

# 树模型
from .core import Filesystem, Folder, DirectFile, VirtualFile, scan_directory

# 编解码
from .archive import (
    ArchiveEncoder,
    ArchiveDecoder,
    DataFileReader,
    encode_filesystem,
    decode_filesystem,
)

# 入口
from .filesystem import (
    from_path,
    from_archive,
    build,
    build_with_destination,
    build_to_paths,
)

# 格式转换
from .converter import ArchiveJsonConverter

# Hooks
from .hooks import ChecksumHook, CksumHook, cksum

__all__ = [
    # 版本
    "__version__",
    # 异常
    "SahError",
    "PathNotADirectoryError",
    "PathNotAFileError",
    "InvalidFormatError",
    "InvalidMagicValueError",
    "UnexpectedEofError",
    "UnsupportedEntryError",
    "InvalidNameError",
    "CorruptedDataError",
    # 树模型
    "Filesystem",
    "Folder",
    "DirectFile",
    "VirtualFile",
    "scan_directory",
    # 编解码
    "ArchiveEncoder",
    "ArchiveDecoder",
    "DataFileReader",
    "encode_filesystem",
    "decode_filesystem",
    # 入口
    "from_path",
    "from_archive",
    "build",
    "build_with_destination",
    "build_to_paths",
    # 格式转换
    "ArchiveJsonConverter",
    # Hooks
    "ChecksumHook",
    "CksumHook",
    "cksum",
]
