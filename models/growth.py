#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
增长指标相关数据模型
"""

from dataclasses import dataclass
from typing import NamedTuple


class CountryKey(NamedTuple):
    """记录的复合键：(国家, 指标, 年份)"""
    name: str
    indicator: str
    year: int


@dataclass
class Country:
    """国家增长指标记录"""
    name: str = ''
    indicator: str = ''
    value: float = 0.0
    year: int = 0

    @property
    def key(self) -> CountryKey:
        return CountryKey(self.name, self.indicator, self.year)
