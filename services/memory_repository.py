#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CountryMemoryRepository：基于进程内字典的仓储实现。

说明：
- 键为 (name, indicator, year) 元组，不做字符串拼接，避免不同记录撞键。
- Flask 多线程分发请求，所有读写在同一把锁内完成。
- 进程重启后数据丢失。
"""

import threading
from dataclasses import replace
from typing import Dict, List, Optional

from models.growth import Country, CountryKey
from .country_repository import CountryRepository


class CountryMemoryRepository(CountryRepository):
    def __init__(self):
        self._db: Dict[CountryKey, Country] = {}
        self._lock = threading.RLock()

    def growth_info(self, key: CountryKey) -> Optional[Country]:
        with self._lock:
            country = self._db.get(key)
            # 返回副本，调用方修改不影响仓储
            return replace(country) if country is not None else None

    def size(self) -> int:
        with self._lock:
            return len(self._db)

    def update_growth(self, country: Country) -> bool:
        self.upsert_growth(country)
        return True

    def upsert_growth(self, country: Country) -> bool:
        with self._lock:
            existed = country.key in self._db
            self._db[country.key] = replace(country)
            return existed

    def create_country_growth_info(self, country: Country) -> bool:
        with self._lock:
            if country.key in self._db:
                return False
            self._db[country.key] = replace(country)
            return True

    def remove_country_growth_info(self, key: CountryKey) -> bool:
        with self._lock:
            return self._db.pop(key, None) is not None

    def all_growth_info(self) -> List[Country]:
        with self._lock:
            return [replace(self._db[k]) for k in sorted(self._db)]

    def __len__(self) -> int:
        return self.size()
