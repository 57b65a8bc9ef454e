#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
领域模型映射：将请求体/导入行等字典映射为 Country 模型，以及反向序列化。
"""

from dataclasses import asdict
from typing import Any, Dict, Mapping

from models.growth import Country, CountryKey
from utils.exceptions import ValidationError
from utils.validators import parse_year, validate_text, validate_year, validate_value


# 导入文件中国家名称列允许的别名
_NAME_FIELDS = ('name', 'country')


def _pick(row: Mapping[str, Any], *fields: str) -> Any:
    for f in fields:
        if f in row:
            return row[f]
    return None


def make_key(name: str, indicator: str, year) -> CountryKey:
    """校验并构造复合键"""
    ok, msg = validate_text(name, '国家名称')
    if not ok:
        raise ValidationError(msg)
    ok, msg = validate_text(indicator, '指标名称')
    if not ok:
        raise ValidationError(msg)
    ok, msg = validate_year(year)
    if not ok:
        raise ValidationError(msg)
    return CountryKey(name.strip(), indicator.strip(), parse_year(year))


def map_row_to_model(row: Mapping[str, Any]) -> Country:
    """将一行原始数据（字段名大小写不敏感）映射为 Country，非法时抛 ValidationError"""
    if not isinstance(row, Mapping):
        raise ValidationError("记录必须是对象")
    normalized = {str(k).strip().lower(): v for k, v in row.items()}
    name = _pick(normalized, *_NAME_FIELDS)
    key = make_key(
        name if isinstance(name, str) else '',
        normalized.get('indicator') if isinstance(normalized.get('indicator'), str) else '',
        normalized.get('year'),
    )
    value = normalized.get('value')
    ok, msg = validate_value(value)
    if not ok:
        raise ValidationError(msg)
    return Country(name=key.name, indicator=key.indicator, value=float(value), year=key.year)


def to_dict(country: Country) -> Dict[str, Any]:
    return asdict(country)
