#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
磁盘扫描

递归遍历真实目录，生成由 Folder 和 DirectFile 组成的 Filesystem。
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Tuple, Union

from .tree import DirectFile, DirectoryEntry, Filesystem, Folder
from ..exceptions import PathNotADirectoryError

logger = logging.getLogger(__name__)

# 条目过滤函数: 接收本地路径，返回 False 时跳过该条目
EntryFilter = Callable[[Path], bool]


def scan_directory(
    root: Union[str, Path],
    entry_filter: Optional[EntryFilter] = None
) -> Filesystem:
    """
    从磁盘目录构建 Filesystem

    条目顺序与操作系统枚举顺序一致，不做排序。
    枚举或读取元数据时的 OSError 直接向上抛出，不会跳过。

    Args:
        root: 数据目录
        entry_filter: 条目过滤函数 (可选)

    Returns:
        Filesystem 实例

    Raises:
        PathNotADirectoryError: root 不是目录
        OSError: 枚举失败
    """
    root = Path(root)
    if not root.is_dir():
        raise PathNotADirectoryError(root)

    contents = _scan_contents(root, entry_filter)
    logger.debug("扫描完成: %s (%d 个顶层条目)", root, len(contents))
    return Filesystem(contents)


def _scan_contents(
    directory: Path,
    entry_filter: Optional[EntryFilter]
) -> Tuple[DirectoryEntry, ...]:
    entries = []
    for path in directory.iterdir():
        if entry_filter is not None and not entry_filter(path):
            continue
        if path.is_dir():
            entries.append(Folder(path.name, _scan_contents(path, entry_filter)))
        else:
            entries.append(DirectFile(path))
    return tuple(entries)
