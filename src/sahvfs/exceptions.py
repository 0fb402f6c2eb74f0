#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
SahVFS 异常定义

所有异常均继承自 SahError，便于统一捕获。
部分异常同时继承对应的内置异常，方便按内置类型处理。
"""

from typing import Any, Optional


class SahError(Exception):
    """SahVFS 基础异常"""
    pass


class PathNotADirectoryError(SahError, NotADirectoryError):
    """
    路径不是目录

    从磁盘扫描文件系统时，根路径必须是目录。
    """
    def __init__(self, path: Any):
        self.path = path
        super().__init__(f"指定路径不是目录: {path}")


class PathNotAFileError(SahError):
    """
    路径不是普通文件

    从归档加载时，头文件路径必须是普通文件。
    """
    def __init__(self, path: Any):
        self.path = path
        super().__init__(f"指定路径不是文件: {path}")


class InvalidFormatError(SahError):
    """
    文件格式无效异常

    当字段值超出其二进制宽度或结构不符合预期时抛出。
    """
    def __init__(self, message: str, expected: Optional[str] = None,
                 actual: Optional[str] = None):
        self.expected = expected
        self.actual = actual
        if expected is not None and actual is not None:
            message = f"{message}: 期望 {expected}, 实际 {actual}"
        super().__init__(message)


class InvalidMagicValueError(InvalidFormatError):
    """
    魔法数无效

    头文件的前 3 个字节不是预期标识。actual 保存实际读到的内容。
    """
    def __init__(self, actual: str, expected: str = "SAH"):
        super().__init__("无效的魔法数", expected=repr(expected),
                         actual=repr(actual))
        self.expected = expected
        self.actual = actual


class UnexpectedEofError(SahError, EOFError):
    """
    数据提前结束

    缓冲区长度不足以容纳其声明的结构。
    """
    def __init__(self, expected: int, actual: int, position: int = 0):
        self.expected = expected
        self.actual = actual
        self.position = position
        super().__init__(
            f"文件结束: 在位置 {position} 期望读取 {expected} 字节，"
            f"实际只有 {actual} 字节"
        )


class UnsupportedEntryError(SahError, TypeError):
    """
    不支持的条目类型

    例如编码时遇到 VirtualFile (尚未落盘的归档条目)，
    或从数据文件读取 DirectFile。属于调用方前置条件错误。
    """
    def __init__(self, entry: Any, operation: str):
        self.entry = entry
        self.operation = operation
        super().__init__(
            f"{operation} 不支持条目类型 {type(entry).__name__}: {entry!r}"
        )


class InvalidNameError(SahError, ValueError):
    """
    名称无效

    条目名称无法安全落到磁盘: 为空、为 "." / ".."、包含路径分隔符，
    或拼接后越出目标目录。
    """
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"无效的名称: {name!r}")


class CorruptedDataError(SahError):
    """
    数据损坏异常

    从数据文件读取的内容与头文件中记录的校验值不一致。
    """
    def __init__(self, vfs_path: str, expected: int, actual: int):
        self.vfs_path = vfs_path
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"文件 '{vfs_path}' 校验失败: "
            f"期望 {expected:08x}, 实际 {actual:08x}"
        )
