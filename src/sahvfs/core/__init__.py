#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
SahVFS 核心模块

提供二进制 I/O 封装、头部结构、树模型和磁盘扫描。
"""

from .binary_io import BinaryReader, BinaryWriter
from .schema import (
    SahHeader, SAH_HEADER_MAGIC, HEADER_VERSION, ROOT_DIRECTORY_NAME,
    RESERVED_SIZE, FOOTER_SIZE
)
from .tree import (
    Filesystem, Folder, DirectFile, VirtualFile, DirectoryEntry, File,
    is_file, partition
)
from .scanner import scan_directory

__all__ = [
    "BinaryReader",
    "BinaryWriter",
    "SahHeader",
    "SAH_HEADER_MAGIC",
    "HEADER_VERSION",
    "ROOT_DIRECTORY_NAME",
    "RESERVED_SIZE",
    "FOOTER_SIZE",
    # 树模型
    "Filesystem",
    "Folder",
    "DirectFile",
    "VirtualFile",
    "DirectoryEntry",
    "File",
    "is_file",
    "partition",
    # 磁盘扫描
    "scan_directory",
]
