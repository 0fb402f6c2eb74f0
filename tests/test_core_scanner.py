#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
磁盘扫描测试
"""

import os

import pytest

from sahvfs.core.scanner import scan_directory
from sahvfs.core.tree import DirectFile, Folder
from sahvfs.exceptions import PathNotADirectoryError


class TestScanDirectory:
    """scan_directory 测试"""

    def test_not_a_directory(self, tmp_path):
        """根路径是文件"""
        path = tmp_path / "file.txt"
        path.write_bytes(b"x")
        with pytest.raises(PathNotADirectoryError) as exc_info:
            scan_directory(path)
        assert exc_info.value.path == path

    def test_missing_directory(self, tmp_path):
        """根路径不存在"""
        with pytest.raises(NotADirectoryError):
            scan_directory(tmp_path / "missing")

    def test_empty_directory(self, tmp_path):
        assert scan_directory(tmp_path).contents == ()

    def test_structure(self, sample_files):
        """文件夹和文件映射正确"""
        root, files = sample_files
        fs = scan_directory(root)

        names = {entry.name for entry in fs.contents}
        assert names == {"hero.txt", "empty.dat", "Item", "Map", "EmptyFolder"}

        empty = fs.find("EmptyFolder")
        assert isinstance(empty, Folder)
        assert empty.contents == ()

        leaf = fs.find("Item/Model/deep/leaf.txt")
        assert isinstance(leaf, DirectFile)
        assert leaf.path == root / "Item" / "Model" / "deep" / "leaf.txt"

        assert fs.total_files == len(files)

    def test_order_follows_enumeration(self, sample_files):
        """条目顺序与目录枚举顺序一致，不排序"""
        root, _ = sample_files
        fs = scan_directory(root)
        assert [entry.name for entry in fs.contents] == \
            [path.name for path in root.iterdir()]

    def test_accepts_str(self, sample_files):
        root, files = sample_files
        assert scan_directory(str(root)).total_files == len(files)

    def test_entry_filter(self, sample_files):
        """过滤函数返回 False 的条目被跳过"""
        root, _ = sample_files
        fs = scan_directory(root, entry_filter=lambda p: p.name != "Item")
        names = {entry.name for entry in fs.contents}
        assert "Item" not in names
        assert "hero.txt" in names

    @pytest.mark.skipif(os.name == "nt", reason="Windows 不允许名称中含反斜杠")
    def test_backslash_in_folder_name(self, tmp_path):
        """磁盘上的任意名称都能扫描"""
        (tmp_path / "weird\\name").mkdir()
        (tmp_path / "weird\\name" / "a.txt").write_bytes(b"a")

        fs = scan_directory(tmp_path)
        assert fs.contents == (
            Folder("weird\\name", [DirectFile(tmp_path / "weird\\name" / "a.txt")]),
        )

    def test_enumeration_error_propagates(self, tmp_path, monkeypatch):
        """枚举失败时直接抛出"""
        from pathlib import Path

        (tmp_path / "sub").mkdir()

        def broken_iterdir(self):
            raise PermissionError(f"denied: {self}")

        monkeypatch.setattr(Path, "iterdir", broken_iterdir)
        with pytest.raises(PermissionError):
            scan_directory(tmp_path)
