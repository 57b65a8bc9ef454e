#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
国家增长指标服务 - 主应用文件
"""

import os
from flask import Flask, jsonify

from config import config
from routes import growth_bp


def create_app(config_name=None):
    """应用工厂函数"""
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'default')
    if config_name not in config:
        config_name = 'default'

    app = Flask(__name__)

    # 加载配置
    app.config.from_object(config[config_name])
    config[config_name].init_app(app)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # 注册蓝图
    app.register_blueprint(growth_bp)

    # 初始化并挂载服务到 app（供路由通过 current_app 使用）
    from services import (
        CountryMemoryRepository,
        GrowthInformationService,
        UpdateGrowthInformationService,
        RemoveGrowthInformationService,
        LoadStatus,
        LoadGrowthInformationService,
        StatusProcessService,
    )
    # 每个 app 实例持有独立的内存仓储
    app.country_repository = CountryMemoryRepository()
    app.load_status = LoadStatus()
    app.growth_service = GrowthInformationService(app.country_repository)
    app.update_service = UpdateGrowthInformationService(app.country_repository)
    app.remove_service = RemoveGrowthInformationService(app.country_repository)
    app.load_service = LoadGrowthInformationService(app.country_repository, app.load_status)
    app.status_service = StatusProcessService(app.country_repository, app.load_status)

    # 全局错误处理
    @app.errorhandler(404)
    def page_not_found(error):
        return jsonify({'success': False, 'code': 'not_found', 'message': '资源不存在'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'success': False, 'code': 'method_not_allowed', 'message': '请求方法不被允许'}), 405

    @app.errorhandler(413)
    def payload_too_large(error):
        return jsonify({'success': False, 'code': 'payload_too_large', 'message': '上传文件过大'}), 413

    @app.errorhandler(500)
    def internal_error(error):
        return jsonify({'success': False, 'code': 'internal_error', 'message': '服务器内部错误'}), 500

    app.logger.info(f"应用已创建 (config={config_name})")
    return app


if __name__ == '__main__':
    app = create_app()
    app.run(debug=app.config.get('DEBUG', False), host=app.config['HOST'], port=app.config['PORT'])
