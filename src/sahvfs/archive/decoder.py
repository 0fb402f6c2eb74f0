#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
归档解码器

将 data.sah 头文件解析为由 Folder 和 VirtualFile 组成的 Filesystem。
不读取数据文件，也不校验 offset/checksum。
"""

import io
import logging
from typing import List, Tuple

from ..core.binary_io import BinaryReader, DEFAULT_ENCODING
from ..core.schema import SahHeader, FILE_RECORD_FORMAT
from ..core.tree import DirectoryEntry, Filesystem, Folder, VirtualFile

logger = logging.getLogger(__name__)


class ArchiveDecoder:
    """
    归档解码器

    唯一的结构性检查是数据长度: 缓冲区短于其声明的结构时
    抛出 UnexpectedEofError，不会返回部分结果。
    """

    def __init__(self, encoding: str = DEFAULT_ENCODING):
        self._encoding = encoding

    def read_header(self, header: bytes) -> SahHeader:
        """
        只解析固定头部

        Raises:
            InvalidMagicValueError: 魔法数不匹配
            UnexpectedEofError: 数据不足
        """
        return SahHeader.read(self._reader(header))

    def decode(self, header: bytes) -> Filesystem:
        """
        解码头文件

        版本号、文件总数和根目录名会被读取但不进入结果。

        Args:
            header: 完整的头文件字节

        Returns:
            Filesystem 实例

        Raises:
            InvalidMagicValueError: 魔法数不匹配
            UnexpectedEofError: 数据不足
        """
        return self.decode_with_header(header)[1]

    def decode_with_header(self, header: bytes) -> Tuple[SahHeader, Filesystem]:
        """解码头文件，同时返回固定头部"""
        reader = self._reader(header)
        sah_header = SahHeader.read(reader)
        contents = self._read_contents(reader)

        logger.debug(
            "解码完成: 版本 %d, 声明 %d 个文件, 目录体结束于 %d",
            sah_header.version, sah_header.total_files, reader.position
        )
        return sah_header, Filesystem(contents)

    def _reader(self, header: bytes) -> BinaryReader:
        return BinaryReader(io.BytesIO(header), self._encoding)

    def _read_contents(self, reader: BinaryReader) -> List[DirectoryEntry]:
        contents: List[DirectoryEntry] = []

        file_count = reader.read_u32()
        for _ in range(file_count):
            name = reader.read_length_prefixed_string()
            offset, length, checksum = reader.read_struct(FILE_RECORD_FORMAT)
            contents.append(VirtualFile(name, offset, length, checksum))

        folder_count = reader.read_u32()
        for _ in range(folder_count):
            name = reader.read_length_prefixed_string()
            contents.append(Folder(name, self._read_contents(reader)))

        return contents


def decode_filesystem(header: bytes) -> Filesystem:
    """使用默认设置解码头文件"""
    return ArchiveDecoder().decode(header)
