#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
二进制 I/O 封装

提供 BinaryWriter 和 BinaryReader 类，封装所有底层读写操作，
使编码器和解码器不需要直接操作 struct 或文件指针。

所有整数均为 Little-Endian。
"""

import struct
from typing import BinaryIO, Tuple, Any

from ..exceptions import UnexpectedEofError


# 名称的默认编码。surrogateescape 保证非 UTF-8 字节可以原样往返。
DEFAULT_ENCODING = 'utf-8'
DEFAULT_ERRORS = 'surrogateescape'


class BinaryWriter:
    """
    二进制写入器

    封装所有底层写操作，提供类型化的写入方法。
    上层模块只需调用 write_u32() 等方法，无需关心 struct.pack 细节。
    """

    def __init__(self, file: BinaryIO, encoding: str = DEFAULT_ENCODING):
        """
        初始化写入器

        Args:
            file: 可写的二进制文件对象 (如 io.BytesIO)
            encoding: 字符串编码
        """
        self._file = file
        self._encoding = encoding
        self._position = 0

    @property
    def position(self) -> int:
        """当前写入位置"""
        return self._position

    # ==================== 原始写入 ====================

    def write_bytes(self, data: bytes) -> int:
        """
        写入原始字节

        Args:
            data: 要写入的字节

        Returns:
            写入的字节数
        """
        written = self._file.write(data)
        self._position += written
        return written

    def write_struct(self, fmt: str, *values: Any) -> int:
        """按 struct 格式写入"""
        data = struct.pack(fmt, *values)
        return self.write_bytes(data)

    def write_zeros(self, size: int) -> int:
        """写入 size 个零字节 (保留区/填充)"""
        return self.write_bytes(b'\x00' * size)

    # ==================== 类型化写入 ====================

    def write_u8(self, value: int) -> int:
        """写入无符号 8 位整数"""
        return self.write_struct('<B', value)

    def write_u32(self, value: int) -> int:
        """写入无符号 32 位整数 (Little-Endian)"""
        return self.write_struct('<I', value)

    def write_u64(self, value: int) -> int:
        """写入无符号 64 位整数 (Little-Endian)"""
        return self.write_struct('<Q', value)

    # ==================== 字符串写入 ====================

    def write_length_prefixed_string(self, s: str) -> int:
        """
        写入长度前缀字符串

        格式: [长度+1: u32][字节][0x00]

        长度字段包含结尾的零字节。

        Args:
            s: 要写入的字符串

        Returns:
            写入的总字节数 (4 + 字符串字节数 + 1)
        """
        encoded = s.encode(self._encoding, DEFAULT_ERRORS)
        written = self.write_u32(len(encoded) + 1)
        written += self.write_bytes(encoded)
        written += self.write_u8(0)
        return written


class BinaryReader:
    """
    二进制读取器

    封装所有底层读操作，提供类型化的读取方法。
    数据不足时统一抛出 UnexpectedEofError。
    """

    def __init__(self, file: BinaryIO, encoding: str = DEFAULT_ENCODING):
        """
        初始化读取器

        Args:
            file: 可读的二进制文件对象 (如 io.BytesIO)
            encoding: 字符串编码
        """
        self._file = file
        self._encoding = encoding
        self._position = file.tell()

    @property
    def position(self) -> int:
        """当前读取位置"""
        return self._position

    # ==================== 原始读取 ====================

    def read_bytes(self, size: int) -> bytes:
        """
        读取指定字节数

        Args:
            size: 要读取的字节数

        Returns:
            读取的字节

        Raises:
            UnexpectedEofError: 剩余数据不足请求的字节数
        """
        data = self._file.read(size)
        if len(data) < size:
            raise UnexpectedEofError(size, len(data), self._position)
        self._position += size
        return data

    def read_struct(self, fmt: str) -> Tuple[Any, ...]:
        """按 struct 格式读取"""
        size = struct.calcsize(fmt)
        data = self.read_bytes(size)
        return struct.unpack(fmt, data)

    # ==================== 类型化读取 ====================

    def read_u8(self) -> int:
        """读取无符号 8 位整数"""
        return self.read_struct('<B')[0]

    def read_u32(self) -> int:
        """读取无符号 32 位整数 (Little-Endian)"""
        return self.read_struct('<I')[0]

    def read_u64(self) -> int:
        """读取无符号 64 位整数 (Little-Endian)"""
        return self.read_struct('<Q')[0]

    # ==================== 字符串读取 ====================

    def read_fixed_length_string(self, length: int,
                                 encoding: str = None) -> str:
        """
        读取定长字符串

        读取恰好 length 个字节，丢弃其中所有零字节。

        Args:
            length: 字节数
            encoding: 覆盖默认编码 (魔法数使用 latin-1)

        Returns:
            解码后的字符串
        """
        data = self.read_bytes(length).replace(b'\x00', b'')
        return data.decode(encoding or self._encoding, DEFAULT_ERRORS)

    def read_length_prefixed_string(self) -> str:
        """
        读取长度前缀字符串

        格式: [长度: u32][字节...]

        与写入端不同，读取端不在第一个零字节处停止，
        而是丢弃长度范围内的所有零字节。

        Returns:
            解码后的字符串
        """
        length = self.read_u32()
        return self.read_fixed_length_string(length)

    # ==================== 位置控制 ====================

    def seek(self, position: int):
        """
        移动到指定位置

        Args:
            position: 目标位置
        """
        self._file.seek(position)
        self._position = position

    def skip(self, size: int):
        """
        跳过指定字节 (不校验内容)

        越过末尾不会报错，后续读取时才会抛出 UnexpectedEofError。
        """
        self.seek(self._position + size)
