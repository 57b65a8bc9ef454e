#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
装饰器模块
"""

from functools import wraps
from flask import request, jsonify, current_app
from werkzeug.exceptions import HTTPException
from .exceptions import DomainError, ValidationError, NotFoundError, ConflictError, InternalError


def handle_errors(f):
    """错误处理装饰器"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except ValidationError as e:
            return jsonify({'success': False, 'code': e.code, 'message': str(e)}), 400
        except NotFoundError as e:
            return jsonify({'success': False, 'code': e.code, 'message': str(e)}), 404
        except ConflictError as e:
            return jsonify({'success': False, 'code': e.code, 'message': str(e)}), 409
        except InternalError as e:
            current_app.logger.error(f"内部错误: {str(e)}")
            return jsonify({'success': False, 'code': e.code, 'message': str(e)}), 500
        except DomainError as e:
            return jsonify({'success': False, 'code': e.code, 'message': str(e)}), 400
        except HTTPException:
            # 交由 Flask 的 errorhandler 处理（如 413 上传过大）
            raise
        except Exception as e:
            current_app.logger.exception(f"请求处理失败: {str(e)}")
            return jsonify({'success': False, 'code': 'internal_error', 'message': f'操作失败: {str(e)}'}), 500

    return decorated_function


def require_json(f):
    """要求JSON请求的装饰器"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not request.is_json:
            return jsonify({
                'success': False,
                'code': ValidationError.code,
                'message': '请求必须是JSON格式'
            }), 400

        return f(*args, **kwargs)

    return decorated_function
