"""
路由模块
"""

from .growth_routes import growth_bp

__all__ = [
    'growth_bp'
]
