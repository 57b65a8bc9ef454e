#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
文件 Provider：解析批量导入文件，返回原始记录（dict）列表。

支持格式：
- CSV：表头包含 name|country, indicator, year, value（大小写不敏感）
- JSON：对象数组，或 {"records": [...]}

字段合法性由映射层（services.mappers）逐行校验，这里只负责解码。
"""

from __future__ import annotations

import json
from typing import IO, Any, Dict, List, Union

from utils.exceptions import ValidationError
from utils.helpers import file_extension


def parse_csv(stream: Union[IO[bytes], IO[str]]) -> List[Dict[str, Any]]:
    import pandas as pd

    try:
        # 全部按字符串读取，空单元格保留为空串，类型转换交给映射层
        df = pd.read_csv(stream, dtype=str, keep_default_na=False, skipinitialspace=True)
    except pd.errors.EmptyDataError:
        return []
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise ValidationError(f"CSV 解析失败: {str(e)}")
    df.columns = [str(c).strip().lower() for c in df.columns]
    return df.to_dict(orient='records')


def parse_json_payload(data: Any) -> List[Dict[str, Any]]:
    """接受对象数组或 {"records": [...]}"""
    if isinstance(data, dict) and 'records' in data:
        data = data['records']
    if not isinstance(data, list):
        raise ValidationError("JSON 内容必须是记录数组或包含 records 字段的对象")
    return data


def parse_json(stream: Union[IO[bytes], IO[str]]) -> List[Dict[str, Any]]:
    raw = stream.read()
    if isinstance(raw, bytes):
        try:
            raw = raw.decode('utf-8-sig')
        except UnicodeDecodeError as e:
            raise ValidationError(f"文件编码必须是 UTF-8: {str(e)}")
    if not raw.strip():
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValidationError(f"JSON 解析失败: {str(e)}")
    return parse_json_payload(data)


_PARSERS = {
    'csv': parse_csv,
    'json': parse_json,
}


def read_records(stream: Union[IO[bytes], IO[str]], filename: str) -> List[Dict[str, Any]]:
    """按扩展名选择解析器"""
    ext = file_extension(filename)
    parser = _PARSERS.get(ext)
    if parser is None:
        raise ValidationError(f"不支持的文件类型: {filename or '(未命名)'}，仅支持 csv/json")
    return parser(stream)
