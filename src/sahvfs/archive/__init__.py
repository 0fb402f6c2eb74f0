#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
SahVFS Archive

提供头文件的编码/解码和数据文件的读取功能。
"""

from .encoder import ArchiveEncoder, encode_filesystem
from .decoder import ArchiveDecoder, decode_filesystem
from .data import DataFileReader

__all__ = [
    "ArchiveEncoder",
    "ArchiveDecoder",
    "DataFileReader",
    "encode_filesystem",
    "decode_filesystem",
]
