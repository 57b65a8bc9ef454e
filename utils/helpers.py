#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
辅助工具函数
"""

from datetime import datetime, timezone
from typing import Iterable, Optional


def file_extension(filename: Optional[str]) -> str:
    """获取小写扩展名（不含点）"""
    if not filename or '.' not in filename:
        return ''
    return filename.rsplit('.', 1)[1].strip().lower()


def allowed_file(filename: Optional[str], allowed: Iterable[str]) -> bool:
    """判断文件扩展名是否在允许列表中"""
    return file_extension(filename) in set(allowed)


def parse_bool_flag(value) -> bool:
    """解析 1/true/yes/on 形式的开关参数"""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')


def utc_now_iso() -> str:
    """当前 UTC 时间（ISO 8601，秒级）"""
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()
