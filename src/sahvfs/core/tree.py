#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
文件系统树模型

Filesystem 由有序的 DirectoryEntry 组成，DirectoryEntry 是以下三种之一:

- Folder: 名称 + 子条目
- DirectFile: 指向磁盘上真实文件的路径 (尚未打包)
- VirtualFile: 指向数据文件中一段字节的描述 (从归档解码得到)

所有节点均不可变，每个节点独占其子树，不存在父节点引用。
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Tuple, Union

from ..exceptions import UnsupportedEntryError
from ..utils import join_path, split_path


@dataclass(frozen=True)
class DirectFile:
    """磁盘上的真实文件，编码时才读取"""
    path: Path

    def __post_init__(self):
        object.__setattr__(self, 'path', Path(self.path))

    @property
    def name(self) -> str:
        """不含目录部分的文件名"""
        return self.path.name


@dataclass(frozen=True)
class VirtualFile:
    """
    归档中的文件记录

    内容位于数据文件的 [offset, offset + length) 区间。
    """
    name: str
    offset: int     # u64, 数据文件中的绝对位置
    length: int     # u32
    checksum: int   # u32, CRC-32/CKSUM

    @property
    def end(self) -> int:
        """内容结束位置 (不含)"""
        return self.offset + self.length


File = Union[DirectFile, VirtualFile]


@dataclass(frozen=True)
class Folder:
    """文件夹"""
    name: str
    contents: Tuple['DirectoryEntry', ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'contents', tuple(self.contents))


DirectoryEntry = Union[Folder, DirectFile, VirtualFile]


def is_file(entry: DirectoryEntry) -> bool:
    """
    判断条目是文件还是文件夹

    Raises:
        UnsupportedEntryError: 未知条目类型
    """
    if isinstance(entry, (DirectFile, VirtualFile)):
        return True
    if isinstance(entry, Folder):
        return False
    raise UnsupportedEntryError(entry, "目录条目")


def partition(
    contents: Tuple[DirectoryEntry, ...]
) -> Tuple[List[File], List[Folder]]:
    """
    将目录内容拆分为 (文件列表, 文件夹列表)

    两组各自保持原有相对顺序。归档格式要求同一目录下
    所有文件先于子文件夹写出。
    """
    files: List[File] = []
    folders: List[Folder] = []
    for entry in contents:
        if is_file(entry):
            files.append(entry)
        else:
            folders.append(entry)
    return files, folders


@dataclass(frozen=True)
class Filesystem:
    """
    文件系统根

    根本身没有名称，固定的根目录名只存在于头文件中。
    """
    contents: Tuple[DirectoryEntry, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'contents', tuple(self.contents))

    @property
    def total_files(self) -> int:
        """递归统计文件数"""
        return sum(1 for _ in self.walk())

    def walk(self) -> Iterator[Tuple[str, File]]:
        """
        迭代所有文件

        顺序与编码顺序一致: 每个目录先输出自身文件，再依次进入子文件夹。

        Yields:
            (虚拟路径, 文件) 元组
        """
        yield from _walk(self.contents, "")

    def iter_folders(self) -> Iterator[Tuple[str, Folder]]:
        """迭代所有文件夹 (先序)"""
        yield from _walk_folders(self.contents, "")

    def find(self, vfs_path: str) -> DirectoryEntry:
        """
        按虚拟路径查找条目

        同名条目取第一个。

        Raises:
            FileNotFoundError: 路径不存在
        """
        parts = split_path(vfs_path)
        if not parts:
            raise FileNotFoundError(f"路径不存在: {vfs_path}")

        contents = self.contents
        for depth, part in enumerate(parts):
            last = depth == len(parts) - 1
            for entry in contents:
                if entry.name != part:
                    continue
                if last:
                    return entry
                if isinstance(entry, Folder):
                    contents = entry.contents
                    break
            else:
                raise FileNotFoundError(f"路径不存在: {vfs_path}")

        raise FileNotFoundError(f"路径不存在: {vfs_path}")


def _walk(contents, prefix: str) -> Iterator[Tuple[str, File]]:
    files, folders = partition(contents)
    for file in files:
        yield join_path(prefix, file.name), file
    for folder in folders:
        yield from _walk(folder.contents, join_path(prefix, folder.name))


def _walk_folders(contents, prefix: str) -> Iterator[Tuple[str, Folder]]:
    for folder in partition(contents)[1]:
        path = join_path(prefix, folder.name)
        yield path, folder
        yield from _walk_folders(folder.contents, path)
