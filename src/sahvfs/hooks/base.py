#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Hook 基类定义

定义校验算法的抽象接口。
"""

from abc import ABC, abstractmethod


class ChecksumHook(ABC):
    """
    校验算法钩子

    头文件中每个文件的校验值固定为 u32，
    因此 compute() 必须返回 0 ~ 0xFFFFFFFF 之间的整数。
    """

    @property
    def display_name(self) -> str:
        """
        可读名称 (用于 JSON 显示)

        默认返回类名，子类可覆盖提供更友好的名称。
        """
        return type(self).__name__

    @abstractmethod
    def compute(self, data: bytes) -> int:
        """
        计算校验值

        Args:
            data: 要校验的数据

        Returns:
            32 位无符号整数
        """
        pass

    def verify(self, data: bytes, expected: int) -> bool:
        """
        验证校验值

        Args:
            data: 要校验的数据
            expected: 期望的校验值

        Returns:
            是否匹配
        """
        return self.compute(data) == expected
