#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
归档编码器

将 Filesystem 序列化为 data.sah (头文件) 和 data.saf (数据文件) 两个字节缓冲区。
"""

import io
import logging
from typing import Optional, Tuple

from ..core.binary_io import BinaryWriter, DEFAULT_ENCODING
from ..core.schema import SahHeader, FOOTER_SIZE
from ..core.tree import (
    DirectFile, DirectoryEntry, File, Filesystem, VirtualFile, partition
)
from ..hooks.base import ChecksumHook
from ..hooks.checksum import CksumHook
from ..exceptions import InvalidFormatError, UnsupportedEntryError

logger = logging.getLogger(__name__)

MAX_FILE_LENGTH = 0xFFFFFFFF


class ArchiveEncoder:
    """
    归档编码器

    每一级目录的写出顺序:
        [文件数: u32]
        每个文件: [名称][offset: u64][length: u32][checksum: u32]
        [文件夹数: u32]
        每个文件夹: [名称][递归目录体]

    数据缓冲区只追加，文件一旦写入就不再移动，
    因此记录的 offset 始终有效。
    """

    def __init__(
        self,
        checksum_hook: Optional[ChecksumHook] = None,
        encoding: str = DEFAULT_ENCODING
    ):
        """
        初始化编码器

        Args:
            checksum_hook: 校验算法钩子 (默认 CRC-32/CKSUM)
            encoding: 名称编码
        """
        self._checksum_hook = checksum_hook or CksumHook()
        self._encoding = encoding

    def encode(self, fs: Filesystem) -> Tuple[bytes, bytes]:
        """
        编码文件系统

        Args:
            fs: 只包含 Folder 和 DirectFile 的文件系统

        Returns:
            (头文件字节, 数据文件字节)

        Raises:
            UnsupportedEntryError: 遇到 VirtualFile
            InvalidFormatError: 单个文件超过 u32 长度
            OSError: 读取磁盘文件失败
        """
        body = io.BytesIO()
        data = bytearray()
        total_files = self._write_contents(
            fs.contents, BinaryWriter(body, self._encoding), data
        )

        header = io.BytesIO()
        writer = BinaryWriter(header, self._encoding)
        SahHeader(total_files=total_files).write(writer)
        writer.write_bytes(body.getvalue())
        writer.write_zeros(FOOTER_SIZE)

        logger.debug(
            "编码完成: %d 个文件, 头文件 %d 字节, 数据 %d 字节",
            total_files, writer.position, len(data)
        )
        return header.getvalue(), bytes(data)

    def _write_contents(
        self,
        contents: Tuple[DirectoryEntry, ...],
        writer: BinaryWriter,
        data: bytearray
    ) -> int:
        """写出一级目录，返回该目录及所有子目录的文件总数"""
        files, folders = partition(contents)

        total_files = len(files)
        writer.write_u32(len(files))
        for file in files:
            self._write_file(file, writer, data)

        writer.write_u32(len(folders))
        for folder in folders:
            writer.write_length_prefixed_string(folder.name)
            total_files += self._write_contents(folder.contents, writer, data)

        return total_files

    def _write_file(self, file: File, writer: BinaryWriter,
                    data: bytearray) -> None:
        if isinstance(file, VirtualFile):
            # 虚拟文件没有可读的内容，写出会产生错误的 offset
            raise UnsupportedEntryError(file, "编码")
        if not isinstance(file, DirectFile):
            raise UnsupportedEntryError(file, "编码")

        with open(file.path, 'rb') as f:
            content = f.read()

        length = len(content)
        if length > MAX_FILE_LENGTH:
            raise InvalidFormatError(
                f"文件过大: {file.path}",
                expected=f"<= {MAX_FILE_LENGTH} 字节",
                actual=f"{length} 字节"
            )

        writer.write_length_prefixed_string(file.name)
        writer.write_u64(len(data))
        writer.write_u32(length)
        data += content
        writer.write_u32(self._checksum_hook.compute(content))


def encode_filesystem(
    fs: Filesystem,
    checksum_hook: Optional[ChecksumHook] = None
) -> Tuple[bytes, bytes]:
    """使用默认设置编码文件系统，返回 (头文件字节, 数据文件字节)"""
    return ArchiveEncoder(checksum_hook=checksum_hook).encode(fs)
