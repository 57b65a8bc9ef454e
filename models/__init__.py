"""
数据模型模块
"""

from .growth import Country, CountryKey

__all__ = [
    'Country',
    'CountryKey'
]
