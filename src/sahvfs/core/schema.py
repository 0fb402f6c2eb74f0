#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
SahVFS 数据结构定义

定义 data.sah 头文件的格式常量和固定头部 SahHeader。
"""

from dataclasses import dataclass
from typing import ClassVar

from .binary_io import BinaryReader, BinaryWriter
from ..exceptions import InvalidMagicValueError


# ==================== 常量定义 ====================

# 头文件魔法数 (3 字节，无长度前缀，无结尾零字节)
SAH_HEADER_MAGIC = "SAH"

# 头文件格式版本
HEADER_VERSION = 0

# 根目录名称 (只写一次，不属于 Filesystem)
ROOT_DIRECTORY_NAME = "data"

# 版本号后的保留区 (含义未知，全零)
RESERVED_SIZE = 40

# 头文件结尾的填充 (全零)
FOOTER_SIZE = 8

# 单个文件描述中 offset/length/checksum 的格式
FILE_RECORD_FORMAT = '<QII'


# ==================== 文件头 ====================

@dataclass
class SahHeader:
    """
    data.sah 固定头部

    布局:
        [magic: 3s][version: u32][total_files: u32][reserved: 40 bytes]
        [root_name: 长度前缀字符串]

    之后紧跟递归目录体，文件末尾为 FOOTER_SIZE 个零字节。
    """
    MAGIC_SIZE: ClassVar[int] = 3
    FIXED_SIZE: ClassVar[int] = 3 + 4 + 4 + RESERVED_SIZE  # 51

    magic: str = SAH_HEADER_MAGIC
    version: int = HEADER_VERSION
    total_files: int = 0
    root_name: str = ROOT_DIRECTORY_NAME

    def write(self, writer: BinaryWriter) -> int:
        """序列化到写入器，返回写入字节数"""
        written = writer.write_bytes(self.magic.encode('latin-1'))
        written += writer.write_u32(self.version)
        written += writer.write_u32(self.total_files)
        written += writer.write_zeros(RESERVED_SIZE)
        written += writer.write_length_prefixed_string(self.root_name)
        return written

    @classmethod
    def read(cls, reader: BinaryReader,
             expected_magic: str = SAH_HEADER_MAGIC) -> 'SahHeader':
        """
        从读取器反序列化

        保留区直接跳过，不做解释。

        Raises:
            InvalidMagicValueError: 魔法数不匹配
            UnexpectedEofError: 数据不足
        """
        magic = reader.read_fixed_length_string(cls.MAGIC_SIZE, 'latin-1')
        if magic != expected_magic:
            raise InvalidMagicValueError(magic, expected_magic)

        version = reader.read_u32()
        total_files = reader.read_u32()
        reader.skip(RESERVED_SIZE)
        root_name = reader.read_length_prefixed_string()

        return cls(
            magic=magic,
            version=version,
            total_files=total_files,
            root_name=root_name
        )
