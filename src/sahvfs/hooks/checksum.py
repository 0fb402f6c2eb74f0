#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
内置校验 Hook 实现

提供归档格式使用的 CRC-32/CKSUM 算法 (基于标准库)。
"""

import zlib

from .base import ChecksumHook


# 每个字节按位反转的映射表
_BIT_REVERSE = bytes(int('{:08b}'.format(i)[::-1], 2) for i in range(256))


def _reverse32(value: int) -> int:
    return int('{:032b}'.format(value)[::-1], 2)


def cksum(data: bytes) -> int:
    """
    计算 CRC-32/CKSUM

    参数: poly=0x04C11DB7, init=0, refin=False, refout=False,
    xorout=0xFFFFFFFF (不附加长度，与 POSIX cksum 命令不同)。

    zlib.crc32 是同一多项式的反射版本。把每个字节按位反转后
    交给 zlib 计算，再反转 32 位寄存器，即得到非反射结果。

    Args:
        data: 输入数据

    Returns:
        32 位校验值。空输入为 0xFFFFFFFF，b"123456789" 为 0x765E7680。
    """
    # zlib 内部会对初值和结果各取反一次，这里抵消为初值 0、无输出异或
    register = zlib.crc32(data.translate(_BIT_REVERSE), 0xFFFFFFFF) ^ 0xFFFFFFFF
    return _reverse32(register) ^ 0xFFFFFFFF


class CksumHook(ChecksumHook):
    """
    CRC-32/CKSUM 校验

    data.sah 中每个文件记录使用的校验算法，4 字节输出。
    """

    @property
    def display_name(self) -> str:
        return "crc32_cksum"

    def compute(self, data: bytes) -> int:
        return cksum(data)
