#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
pytest 全局配置

提供共享 fixtures 和测试工具。
"""

from pathlib import Path
from typing import Dict

import pytest

from sahvfs.core.tree import Folder, VirtualFile


# ==================== 参考实现 ====================

def reference_cksum(data: bytes) -> int:
    """逐位计算的 CRC-32/CKSUM (仅用于比对)"""
    crc = 0
    for byte in data:
        crc ^= byte << 24
        for _ in range(8):
            if crc & 0x80000000:
                crc = ((crc << 1) ^ 0x04C11DB7) & 0xFFFFFFFF
            else:
                crc = (crc << 1) & 0xFFFFFFFF
    return crc ^ 0xFFFFFFFF


Shape = Dict[str, object]


def disk_shape(directory: Path) -> Shape:
    """
    磁盘目录的结构

    文件映射为 (长度, 校验值)，文件夹映射为嵌套字典。
    """
    shape = {}
    for path in directory.iterdir():
        if path.is_dir():
            shape[path.name] = disk_shape(path)
        else:
            data = path.read_bytes()
            shape[path.name] = (len(data), reference_cksum(data))
    return shape


def decoded_shape(contents) -> Shape:
    """解码结果的结构，格式与 disk_shape 相同"""
    shape = {}
    for entry in contents:
        if isinstance(entry, Folder):
            shape[entry.name] = decoded_shape(entry.contents)
        elif isinstance(entry, VirtualFile):
            shape[entry.name] = (entry.length, entry.checksum)
        else:
            raise AssertionError(f"意外的条目: {entry!r}")
    return shape


def write_tree(root: Path, files: Dict[str, bytes], empty_dirs=()) -> Path:
    """按 {相对路径: 内容} 在 root 下创建文件"""
    for name, content in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
    for name in empty_dirs:
        (root / name).mkdir(parents=True, exist_ok=True)
    return root


# ==================== 基础 Fixtures ====================

@pytest.fixture
def sample_files(tmp_path) -> tuple:
    """
    创建测试目录树

    包含嵌套文件夹、空文件夹、零长度文件和二进制文件。

    Returns:
        (目录路径, 文件内容字典)
    """
    files = {
        "hero.txt": b"Hero data content",
        "empty.dat": b"",
        "Item/sword.3DC": bytes(range(256)) * 4,
        "Item/Model/shield.3DO": b"\x00\x01\x02\x03\x04\x05\x06\x07",
        "Item/Model/deep/leaf.txt": b"Deep nested file content",
        "Map/中文文件.txt": "这是中文内容测试".encode("utf-8"),
    }
    root = write_tree(tmp_path / "data", files,
                      empty_dirs=["EmptyFolder", "Item/Model/empty"])
    return root, files


@pytest.fixture
def scenario_dir(tmp_path) -> Path:
    """a.txt (4 字节 "DATA") + sub/b.bin (0 字节)"""
    return write_tree(tmp_path / "scenario", {
        "a.txt": b"DATA",
        "sub/b.bin": b"",
    })
