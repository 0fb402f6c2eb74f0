#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
格式转换工具

把解码后的归档导出为 JSON 清单，便于查看和比对。
"""

import json
from typing import Any, Dict, List, Optional, Tuple

from .archive.decoder import ArchiveDecoder
from .core.schema import SahHeader
from .core.tree import DirectoryEntry, Filesystem, Folder, VirtualFile
from .exceptions import UnsupportedEntryError


class ArchiveJsonConverter:
    """
    归档和 JSON 互转 (当前只支持导出)

    JSON 格式:
    {
        "magic": "SAH",
        "version": 0,
        "root_name": "data",
        "total_files": 2,
        "contents": [
            {"type": "file", "name": "a.txt", "offset": 0,
             "length": 4, "checksum": "xxxxxxxx"},
            {"type": "folder", "name": "sub", "contents": [...]}
        ]
    }
    """

    @staticmethod
    def to_dict(fs: Filesystem,
                header: Optional[SahHeader] = None) -> Dict[str, Any]:
        """
        将文件系统转换为字典

        Args:
            fs: 解码得到的文件系统 (只含 VirtualFile)
            header: 固定头部 (可选，缺省时使用格式默认值)
        """
        header = header or SahHeader(total_files=fs.total_files)
        return {
            'magic': header.magic,
            'version': header.version,
            'root_name': header.root_name,
            'total_files': header.total_files,
            'contents': _entries_to_list(fs.contents),
        }

    @staticmethod
    def header_to_json(
        header_path: str,
        output_path: str,
        indent: int = 2
    ) -> None:
        """
        将 data.sah 转换为 JSON 文件

        Args:
            header_path: 头文件路径
            output_path: 输出 JSON 文件路径
            indent: JSON 缩进
        """
        with open(header_path, 'rb') as f:
            sah_header, fs = ArchiveDecoder().decode_with_header(f.read())

        data = ArchiveJsonConverter.to_dict(fs, sah_header)

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=indent)


def _entries_to_list(contents: Tuple[DirectoryEntry, ...]) -> List[Dict]:
    result = []
    for entry in contents:
        if isinstance(entry, Folder):
            result.append({
                'type': 'folder',
                'name': entry.name,
                'contents': _entries_to_list(entry.contents),
            })
        elif isinstance(entry, VirtualFile):
            result.append({
                'type': 'file',
                'name': entry.name,
                'offset': entry.offset,
                'length': entry.length,
                'checksum': f"{entry.checksum:08x}",
            })
        else:
            raise UnsupportedEntryError(entry, "JSON 导出")
    return result
