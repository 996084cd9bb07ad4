#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置管理单元测试
测试统一配置管理
"""

import os
from unittest.mock import patch

import pytest

from core.models.daily_record import YearBranchSource
from server.config.app_config import AppConfig, CalendarConfig, get_config, reload_config
from server.config.env_config import EnvConfig


@pytest.fixture(autouse=True)
def restore_config():
    """测试修改了环境变量，结束后按真实环境重新加载全局配置"""
    yield
    reload_config()


class TestEnvConfig:
    """环境检测"""

    def test_default_is_local(self):
        """测试：未设置环境变量时为本地开发"""
        with patch.dict(os.environ, {}, clear=True):
            config = EnvConfig()

            assert config.env == 'local'
            assert config.is_local_dev

    def test_production_alias(self):
        """测试：prod 识别为生产环境"""
        with patch.dict(os.environ, {'ENV': 'prod'}, clear=True):
            assert EnvConfig().is_production

    def test_app_env_fallback(self):
        """测试：没有 ENV 时读取 APP_ENV"""
        with patch.dict(os.environ, {'APP_ENV': 'stage'}, clear=True):
            assert EnvConfig().env == 'staging'

    def test_typed_getters(self):
        """测试：布尔与整数配置"""
        with patch.dict(os.environ, {'FLAG': 'yes', 'COUNT': '12', 'BROKEN': 'abc'}, clear=True):
            config = EnvConfig()

            assert config.get_bool_config('FLAG') is True
            assert config.get_bool_config('MISSING') is False
            assert config.get_int_config('COUNT') == 12
            assert config.get_int_config('BROKEN', default=7) == 7
            assert config.get_config('MISSING', default='x') == 'x'


class TestCalendarConfig:
    """历法配置"""

    def test_calendar_config_defaults(self):
        """测试：默认值"""
        with patch.dict(os.environ, {}, clear=True):
            config = reload_config().calendar

            assert config.default_base_palace == '戌'
            assert config.year_branch_source is YearBranchSource.NATAL_PALACE
            assert (config.min_year, config.max_year) == (1901, 2099)
            assert config.max_range_days == 366

    def test_calendar_config_from_env(self):
        """测试：从环境变量创建历法配置"""
        with patch.dict(os.environ, {
            'DEFAULT_BASE_PALACE': '巳',
            'YEAR_BRANCH_SOURCE': 'LUNAR_YEAR',
            'CALENDAR_MIN_YEAR': '1950',
            'CALENDAR_MAX_YEAR': '2050',
            'MAX_RANGE_DAYS': '31',
        }, clear=True):
            config = reload_config().calendar

            assert config.default_base_palace == '巳'
            assert config.year_branch_source is YearBranchSource.LUNAR_YEAR
            assert (config.min_year, config.max_year) == (1950, 2050)
            assert config.max_range_days == 31

    def test_unknown_source_falls_back(self):
        """测试：未知年支来源回退为 natal_palace"""
        with patch.dict(os.environ, {'YEAR_BRANCH_SOURCE': 'whatever'}, clear=True):
            config = reload_config().calendar

            assert config.year_branch_source is YearBranchSource.NATAL_PALACE

    def test_invalid_base_palace_falls_back(self):
        """测试：DEFAULT_BASE_PALACE 不是地支时回退为 戌"""
        with patch.dict(os.environ, {'DEFAULT_BASE_PALACE': '甲'}, clear=True):
            config = reload_config().calendar

            assert config.default_base_palace == '戌'


class TestAppConfig:
    """应用配置"""

    def test_app_config_from_env(self):
        """测试：从环境变量创建完整配置"""
        with patch.dict(os.environ, {'ENV': 'production', 'DEBUG': 'true', 'LOG_LEVEL': 'debug'}, clear=True):
            config = reload_config()

            assert isinstance(config, AppConfig)
            assert isinstance(config.calendar, CalendarConfig)
            assert config.env == 'production'
            assert config.debug is True
            assert config.log_level == 'DEBUG'

    def test_get_config_singleton(self):
        """测试：配置单例"""
        with patch.dict(os.environ, {}, clear=True):
            reload_config()

            assert get_config() is get_config()
