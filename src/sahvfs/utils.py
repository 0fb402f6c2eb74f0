#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
SahVFS 工具函数

提供虚拟路径处理和名称校验等通用功能。
"""

import os
from typing import List

from .exceptions import InvalidNameError


# 路径分隔符 (名称中不允许出现)
PATH_SEPARATORS = ("/", "\\")

# 不能作为条目名称的特殊名称
RESERVED_NAMES = (".", "..")


def normalize_path(path: str) -> str:
    """
    虚拟路径规范化

    1. 反斜杠统一为正斜杠
    2. 合并连续斜杠
    3. 去除首尾斜杠

    Args:
        path: 原始路径

    Returns:
        规范化后的路径 (根路径为空字符串)

    Examples:
        >>> normalize_path("Item\\\\Model\\\\sword.3DC")
        'Item/Model/sword.3DC'
        >>> normalize_path("/Item//Model/")
        'Item/Model'
        >>> normalize_path("/")
        ''
    """
    path = path.replace("\\", "/")

    while "//" in path:
        path = path.replace("//", "/")

    return path.strip("/")


def split_path(path: str) -> List[str]:
    """
    拆分虚拟路径为各级名称

    Examples:
        >>> split_path("/Item/Model/sword.3DC")
        ['Item', 'Model', 'sword.3DC']
        >>> split_path("")
        []
    """
    normalized = normalize_path(path)
    if not normalized:
        return []
    return normalized.split("/")


def join_path(*parts: str) -> str:
    """拼接虚拟路径 (忽略空段)"""
    return "/".join(part for part in parts if part)


def validate_name(name: str) -> str:
    """
    校验条目名称

    名称不能为空，不能是 "." 或 ".."，也不能包含路径分隔符。
    解码和扫描不做此校验，只在把名称落到磁盘路径时使用。

    Returns:
        原名称

    Raises:
        InvalidNameError: 名称无效
    """
    if (not name or name in RESERVED_NAMES
            or any(sep in name for sep in PATH_SEPARATORS)):
        raise InvalidNameError(name)
    return name


def safe_join(directory: str, name: str) -> str:
    """
    把单级名称拼接到本地目录下

    结果必须仍位于 directory 之内。

    Args:
        directory: 绝对路径形式的本地目录
        name: 条目名称

    Raises:
        InvalidNameError: 名称无效或拼接结果越出 directory
    """
    validate_name(name)
    directory = os.path.abspath(directory)
    path = os.path.abspath(os.path.join(directory, name))
    try:
        inside = os.path.commonpath([directory, path]) == directory
    except ValueError:
        # 不同驱动器
        inside = False
    if not inside or path == directory:
        raise InvalidNameError(name)
    return path
