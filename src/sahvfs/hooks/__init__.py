#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
SahVFS Hook 系统

提供校验算法的可插拔接口。
"""

from .base import ChecksumHook
from .checksum import CksumHook, cksum

__all__ = [
    # 抽象基类
    "ChecksumHook",
    # 内置校验实现
    "CksumHook",
    "cksum",
]
