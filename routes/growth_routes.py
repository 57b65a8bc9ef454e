#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
增长指标 - API 路由
"""

from typing import Any, cast

from flask import Blueprint, jsonify, request, current_app

from config import Config
from services.data_providers import parse_json_payload
from services.mappers import to_dict
from utils.decorators import handle_errors, require_json
from utils.exceptions import ValidationError
from utils.helpers import allowed_file, parse_bool_flag


growth_bp = Blueprint('growth', __name__, url_prefix=Config.API_PREFIX)


def _app() -> Any:
    return cast(Any, current_app)


@growth_bp.route('/status')
@handle_errors
def status():
    """最近一次批量导入的处理状态"""
    return jsonify({'success': True, 'data': _app().status_service.get_status()})


@growth_bp.route('/size')
@handle_errors
def size():
    return jsonify({'success': True, 'data': {'size': _app().growth_service.size()}})


@growth_bp.route('/<country>/<indicator>/<int:year>', methods=['GET'])
@handle_errors
def growth_information(country, indicator, year):
    record = _app().growth_service.get(country, indicator, year)
    return jsonify({'success': True, 'data': to_dict(record)})


@growth_bp.route('/<country>/<indicator>/<int:year>', methods=['PUT'])
@require_json
@handle_errors
def update_growth_information(country, indicator, year):
    """写入指标值，记录不存在时创建

    Body: {"value": 2.5}
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or 'value' not in data:
        raise ValidationError("请求体必须包含 value 字段")
    record, created = _app().update_service.update(country, indicator, year, data['value'])
    return jsonify({'success': True, 'created': created, 'data': to_dict(record)})


@growth_bp.route('/<country>/<indicator>/<int:year>', methods=['DELETE'])
@handle_errors
def delete_growth_information(country, indicator, year):
    removed = _app().remove_service.remove(country, indicator, year)
    return jsonify({'success': True, 'message': '删除成功', 'data': removed})


@growth_bp.route('/', methods=['POST'])
@handle_errors
def save_growth_information():
    """批量导入增长指标

    支持：
      - multipart/form-data，字段 file（csv/json）
      - application/json，记录数组或 {"records": [...]}
    Query/Form:
      - overwrite: 1/true 时覆盖已存在记录（默认跳过）
    """
    app = _app()
    overwrite = parse_bool_flag(request.args.get('overwrite') or request.form.get('overwrite'))

    upload = request.files.get('file')
    if upload is not None:
        allowed = app.config.get('ALLOWED_LOAD_EXTENSIONS', Config.ALLOWED_LOAD_EXTENSIONS)
        if not allowed_file(upload.filename, allowed):
            raise ValidationError(f"不支持的文件类型: {upload.filename or '(未命名)'}")
        summary = app.load_service.load_file(upload.stream, upload.filename, overwrite=overwrite)
    elif request.is_json:
        data = request.get_json(silent=True)
        if data is None:
            raise ValidationError("JSON 解析失败")
        if isinstance(data, dict) and 'overwrite' in data:
            overwrite = overwrite or parse_bool_flag(data.get('overwrite'))
        rows = parse_json_payload(data)
        summary = app.load_service.load_records(rows, overwrite=overwrite)
    else:
        raise ValidationError("请上传文件（file 字段）或提交 JSON 记录")

    current_app.logger.info(f"批量导入完成: 新建 {summary['created']}, 覆盖 {summary['updated']}, 跳过 {summary['skipped']}")
    return jsonify({'success': True, 'data': summary})
