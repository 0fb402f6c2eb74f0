#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
树模型测试

测试 Folder / DirectFile / VirtualFile / Filesystem。
"""

import dataclasses
from pathlib import Path

import pytest

from sahvfs.core.tree import (
    DirectFile,
    Filesystem,
    Folder,
    VirtualFile,
    is_file,
    partition,
)
from sahvfs.exceptions import UnsupportedEntryError


def _vf(name: str, offset: int = 0, length: int = 0) -> VirtualFile:
    return VirtualFile(name, offset, length, 0)


@pytest.fixture
def nested_fs() -> Filesystem:
    """
    root
    ├── Item/ (Model/ (b.3DO), a.3DC)
    ├── x.txt
    └── Empty/
    """
    return Filesystem([
        Folder("Item", [
            Folder("Model", [_vf("b.3DO", 10, 5)]),
            _vf("a.3DC", 0, 10),
        ]),
        _vf("x.txt", 15, 1),
        Folder("Empty"),
    ])


class TestEntries:
    """条目类型测试"""

    def test_direct_file_name(self):
        """DirectFile 名称为最后一级路径"""
        file = DirectFile("some/dir/sword.3DC")
        assert file.name == "sword.3DC"
        assert isinstance(file.path, Path)

    def test_virtual_file_end(self):
        assert VirtualFile("a", 10, 5, 0).end == 15

    @pytest.mark.parametrize("name", ["", "a\\b", "..", "weird\\name"])
    def test_folder_name_not_validated(self, name):
        """构造时不校验名称 (解码和扫描必须接受任意名称)"""
        assert Folder(name).name == name

    def test_contents_become_tuple(self):
        folder = Folder("a", [_vf("x")])
        assert isinstance(folder.contents, tuple)

    def test_immutable(self):
        """节点不可变"""
        with pytest.raises(dataclasses.FrozenInstanceError):
            _vf("x").offset = 1


class TestPartition:
    """partition / is_file 测试"""

    def test_partition_keeps_order(self):
        """两组各自保持相对顺序"""
        a, b, c = _vf("a"), _vf("b"), DirectFile("c")
        f1, f2 = Folder("f1"), Folder("f2")

        files, folders = partition((f1, a, f2, b, c))

        assert files == [a, b, c]
        assert folders == [f1, f2]

    def test_is_file(self):
        assert is_file(_vf("a"))
        assert is_file(DirectFile("a"))
        assert not is_file(Folder("a"))

    def test_unknown_entry_type(self):
        """未知类型立即报错"""
        with pytest.raises(UnsupportedEntryError):
            is_file("not an entry")
        with pytest.raises(UnsupportedEntryError):
            partition((_vf("a"), 42))


class TestFilesystem:
    """Filesystem 测试"""

    def test_walk_order(self, nested_fs):
        """每个目录先文件后子文件夹"""
        paths = [path for path, _ in nested_fs.walk()]
        assert paths == ["x.txt", "Item/a.3DC", "Item/Model/b.3DO"]

    def test_iter_folders(self, nested_fs):
        paths = [path for path, _ in nested_fs.iter_folders()]
        assert paths == ["Item", "Item/Model", "Empty"]

    def test_total_files(self, nested_fs):
        assert nested_fs.total_files == 3
        assert Filesystem().total_files == 0

    def test_find(self, nested_fs):
        """按路径查找"""
        assert nested_fs.find("Item/Model/b.3DO").offset == 10
        assert nested_fs.find("/Item\\a.3DC").length == 10
        assert isinstance(nested_fs.find("Empty"), Folder)

    @pytest.mark.parametrize("path", ["", "missing", "Item/missing", "x.txt/a"])
    def test_find_missing(self, nested_fs, path):
        with pytest.raises(FileNotFoundError):
            nested_fs.find(path)

    def test_equality(self):
        """结构相同的树相等"""
        assert Filesystem([Folder("a", [_vf("x")])]) == \
            Filesystem((Folder("a", (_vf("x"),)),))
