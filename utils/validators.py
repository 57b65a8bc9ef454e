#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
输入校验工具：集中化常用校验与解析，便于服务层与路由复用。
保持简单（KISS），避免重复（DRY）。
"""

import math
from typing import Tuple


def validate_text(value, field: str = '字段') -> Tuple[bool, str]:
    if not isinstance(value, str) or not value.strip():
        return False, f"{field}不能为空"
    return True, ""


# 年份为 64 位无符号整数
MAX_YEAR = 2 ** 64 - 1


def parse_year(value) -> int:
    """解析年份为整数；接受 2024、'2024'、2024.0，其余抛 ValueError"""
    # bool 是 int 的子类，需单独排除
    if isinstance(value, bool) or value is None:
        raise ValueError(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(value)
        return int(value)
    text = str(value).strip()
    # 仅接受 ASCII 数字（可带正负号），排除 '2_021'、全角数字等写法
    digits = text[1:] if text[:1] in ('+', '-') else text
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(value)
    return int(text)


def validate_year(value) -> Tuple[bool, str]:
    try:
        i = parse_year(value)
    except (TypeError, ValueError, OverflowError):
        return False, "年份格式不正确"
    if i < 0:
        return False, "年份不能为负数"
    if i > MAX_YEAR:
        return False, "年份超出范围"
    return True, ""


def validate_value(value) -> Tuple[bool, str]:
    if isinstance(value, bool) or value is None:
        return False, "指标值格式不正确"
    try:
        f = float(value)
    except (TypeError, ValueError, OverflowError):
        # 超出 float 范围的整数（如 10**400）抛 OverflowError
        return False, "指标值格式不正确"
    if not math.isfinite(f):
        return False, "指标值必须是有限数值"
    return True, ""
