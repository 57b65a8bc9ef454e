#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
增长指标服务层：查询、更新、删除单条记录
"""

import logging
from typing import Any, Dict, Tuple

from models.growth import Country
from utils.exceptions import NotFoundError, ValidationError
from utils.validators import validate_value
from .country_repository import CountryRepository
from .mappers import make_key


logger = logging.getLogger(__name__)


class GrowthInformationService:
    """查询增长指标"""

    def __init__(self, repository: CountryRepository):
        self.repo = repository

    def get(self, name: str, indicator: str, year) -> Country:
        key = make_key(name, indicator, year)
        country = self.repo.growth_info(key)
        if country is None:
            raise NotFoundError(f"未找到记录: {key.name}/{key.indicator}/{key.year}")
        return country

    def size(self) -> int:
        return self.repo.size()


class UpdateGrowthInformationService:
    """更新增长指标（不存在时创建）"""

    def __init__(self, repository: CountryRepository):
        self.repo = repository

    def update(self, name: str, indicator: str, year, value: Any) -> Tuple[Country, bool]:
        """写入记录，返回 (记录, 是否新建)"""
        key = make_key(name, indicator, year)
        ok, msg = validate_value(value)
        if not ok:
            raise ValidationError(msg)
        country = Country(name=key.name, indicator=key.indicator, value=float(value), year=key.year)
        existed = self.repo.upsert_growth(country)
        logger.debug(f"更新记录 {key.name}/{key.indicator}/{key.year} = {country.value}")
        return country, not existed


class RemoveGrowthInformationService:
    """删除增长指标"""

    def __init__(self, repository: CountryRepository):
        self.repo = repository

    def remove(self, name: str, indicator: str, year) -> Dict[str, Any]:
        key = make_key(name, indicator, year)
        if not self.repo.remove_country_growth_info(key):
            raise NotFoundError(f"未找到记录: {key.name}/{key.indicator}/{key.year}")
        logger.info(f"删除记录 {key.name}/{key.indicator}/{key.year}")
        return key._asdict()
