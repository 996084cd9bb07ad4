# -*- coding: utf-8 -*-
"""
配置模块
"""

from .env_config import EnvConfig, get_env_config, is_local_dev, is_production
from .app_config import AppConfig, CalendarConfig, get_config, reload_config

__all__ = ['EnvConfig', 'get_env_config', 'is_local_dev', 'is_production',
           'AppConfig', 'CalendarConfig', 'get_config', 'reload_config']
