#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CountryRepository：增长指标仓储端口。
服务层面向该接口编程，具体存储由适配器（如内存实现）提供。
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from models.growth import Country, CountryKey


class CountryRepository(ABC):
    """增长指标仓储接口"""

    @abstractmethod
    def growth_info(self, key: CountryKey) -> Optional[Country]:
        """按复合键查询记录，不存在返回 None"""

    @abstractmethod
    def size(self) -> int:
        """记录总数"""

    @abstractmethod
    def update_growth(self, country: Country) -> bool:
        """无条件写入（覆盖），始终返回 True"""

    @abstractmethod
    def upsert_growth(self, country: Country) -> bool:
        """无条件写入（覆盖），返回写入前记录是否已存在；检查与写入为原子操作"""

    @abstractmethod
    def create_country_growth_info(self, country: Country) -> bool:
        """仅当复合键不存在时写入；写入返回 True，已存在返回 False"""

    @abstractmethod
    def remove_country_growth_info(self, key: CountryKey) -> bool:
        """删除记录；记录存在时返回 True"""

    @abstractmethod
    def all_growth_info(self) -> List[Country]:
        """按复合键排序返回全部记录"""
