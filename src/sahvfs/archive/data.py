#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
数据文件读取器

同时持有头文件和数据文件的调用方，可以通过本模块
读取 VirtualFile 的内容、校验完整性，或把整个归档解包到磁盘。
支持 mmap 和传统文件读取模式。
"""

import logging
import mmap
import os
from typing import BinaryIO, List, Optional

from ..core.tree import Filesystem, Folder, VirtualFile, partition
from ..hooks.base import ChecksumHook
from ..hooks.checksum import CksumHook
from ..utils import join_path, safe_join
from ..exceptions import (
    CorruptedDataError, UnexpectedEofError, UnsupportedEntryError
)

logger = logging.getLogger(__name__)


class DataFileReader:
    """
    data.saf 读取器

    支持两种读取模式:
    - mmap 模式 (默认): 内存映射，直接切片
    - 传统模式: seek + read
    """

    def __init__(
        self,
        data_path: str,
        checksum_hook: Optional[ChecksumHook] = None,
        use_mmap: bool = True
    ):
        """
        初始化读取器

        Args:
            data_path: 数据文件路径
            checksum_hook: 校验算法钩子 (默认 CRC-32/CKSUM)
            use_mmap: 是否使用 mmap 模式
        """
        self._data_path = data_path
        self._checksum_hook = checksum_hook or CksumHook()
        self._file: Optional[BinaryIO] = open(data_path, 'rb')
        self._mmap: Optional[mmap.mmap] = None
        self._size = os.fstat(self._file.fileno()).st_size

        # 空文件无法映射
        if use_mmap and self._size > 0:
            try:
                self._mmap = mmap.mmap(self._file.fileno(), 0,
                                       access=mmap.ACCESS_READ)
            except BaseException:
                self._file.close()
                self._file = None
                raise

    @property
    def size(self) -> int:
        """数据文件大小"""
        return self._size

    @property
    def is_mmap(self) -> bool:
        return self._mmap is not None

    def _read_data(self, offset: int, length: int) -> bytes:
        """
        读取指定区间

        mmap 模式下直接切片，传统模式下 seek+read。
        """
        if offset + length > self._size:
            raise UnexpectedEofError(
                length, max(0, self._size - offset), offset
            )
        if self._mmap is not None:
            return self._mmap[offset:offset + length]
        self._file.seek(offset)
        return self._file.read(length)

    def read(self, file: VirtualFile, verify: bool = True,
             vfs_path: Optional[str] = None) -> bytes:
        """
        读取文件内容

        Args:
            file: 解码得到的虚拟文件
            verify: 是否校验数据完整性
            vfs_path: 完整虚拟路径，用于错误信息 (默认只有文件名)

        Returns:
            文件内容

        Raises:
            UnsupportedEntryError: 传入的不是 VirtualFile
            UnexpectedEofError: 数据文件长度不足
            CorruptedDataError: 校验失败
        """
        if not isinstance(file, VirtualFile):
            raise UnsupportedEntryError(file, "数据文件读取")

        data = self._read_data(file.offset, file.length)

        if verify and not self._checksum_hook.verify(data, file.checksum):
            raise CorruptedDataError(
                vfs_path or file.name, file.checksum,
                self._checksum_hook.compute(data)
            )
        return data

    def verify_all(self, fs: Filesystem) -> List[str]:
        """
        校验所有文件

        Returns:
            校验失败或越界的虚拟路径列表 (编码顺序)
        """
        failed = []
        for vfs_path, file in fs.walk():
            try:
                self.read(file, verify=True, vfs_path=vfs_path)
            except (CorruptedDataError, UnexpectedEofError) as e:
                logger.debug("校验失败 %s: %s", vfs_path, e)
                failed.append(vfs_path)
        return failed

    def extract_all(self, fs: Filesystem, output_dir: str,
                    verify: bool = True) -> int:
        """
        解包所有文件到指定目录

        空文件夹同样会被创建。解包结果可再次扫描并编码。
        开始写入前先检查全部名称，任何名称会落到 output_dir
        之外时整个解包被拒绝。

        Args:
            fs: 解码得到的文件系统
            output_dir: 输出目录
            verify: 是否校验数据完整性

        Returns:
            写出的文件数

        Raises:
            InvalidNameError: 名称为空、为 "." / ".." 或包含路径分隔符
        """
        output_dir = os.path.abspath(output_dir)
        _check_names(fs.contents, output_dir)

        os.makedirs(output_dir, exist_ok=True)
        count = self._extract_contents(fs.contents, output_dir, "", verify)

        logger.debug("解包完成: %d 个文件 -> %s", count, output_dir)
        return count

    def _extract_contents(self, contents, directory: str, prefix: str,
                          verify: bool) -> int:
        files, folders = partition(contents)

        count = 0
        for file in files:
            vfs_path = join_path(prefix, file.name)
            data = self.read(file, verify, vfs_path=vfs_path)
            with open(safe_join(directory, file.name), 'wb') as f:
                f.write(data)
            count += 1

        for folder in folders:
            local_dir = safe_join(directory, folder.name)
            os.makedirs(local_dir, exist_ok=True)
            count += self._extract_contents(
                folder.contents, local_dir,
                join_path(prefix, folder.name), verify
            )
        return count

    def close(self) -> None:
        """关闭文件"""
        if self._mmap is not None:
            self._mmap.close()
            self._mmap = None
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> 'DataFileReader':
        return self

    def __exit__(self, *args) -> None:
        self.close()


def _check_names(contents, directory: str) -> None:
    for entry in contents:
        safe_join(directory, entry.name)
        if isinstance(entry, Folder):
            _check_names(entry.contents,
                         os.path.join(directory, entry.name))
