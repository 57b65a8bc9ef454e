#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
数据提供者适配层

约定：每个 Provider 暴露 read_xxx / parse_xxx 方法，返回原始记录列表。
"""

from .file_provider import read_records, parse_json_payload

__all__ = ["read_records", "parse_json_payload"]
