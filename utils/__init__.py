"""
工具模块
"""

from .helpers import allowed_file, parse_bool_flag, utc_now_iso
from .decorators import handle_errors, require_json

__all__ = [
    'allowed_file',
    'parse_bool_flag',
    'utc_now_iso',
    'handle_errors',
    'require_json'
]
