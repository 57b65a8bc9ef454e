#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
国家增长指标服务 - 配置管理
"""

import os


class Config:
    """应用配置类"""

    # 服务器配置
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', 3000))

    # 日志级别
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # Flask配置
    JSON_AS_ASCII = False
    # 批量导入文件大小上限（字节）
    MAX_CONTENT_LENGTH = int(os.environ.get('MAX_CONTENT_LENGTH', 16 * 1024 * 1024))

    # 应用配置
    API_PREFIX = '/api/v1/growth'
    ALLOWED_LOAD_EXTENSIONS = {'csv', 'json'}

    @classmethod
    def init_app(cls, app):
        """初始化Flask应用配置"""
        app.config.from_object(cls)


class DevelopmentConfig(Config):
    """开发环境配置"""
    DEBUG = True


class ProductionConfig(Config):
    """生产环境配置"""
    DEBUG = False


class TestingConfig(Config):
    """测试环境配置"""
    TESTING = True
    LOG_LEVEL = 'WARNING'


# 配置字典
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
