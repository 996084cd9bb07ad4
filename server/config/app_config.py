#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
统一应用配置管理
所有配置统一从这里读取，避免配置分散
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from core.calculators.LunarConverter import DEFAULT_MIN_YEAR, DEFAULT_MAX_YEAR
from core.data.stems_branches import EARTHLY_BRANCHES
from core.models.daily_record import YearBranchSource
from server.config.env_config import get_env_config, reset_env_config

logger = logging.getLogger(__name__)


@dataclass
class CalendarConfig:
    """历法计算配置"""
    default_base_palace: str = '戌'
    year_branch_source: YearBranchSource = YearBranchSource.NATAL_PALACE
    min_year: int = DEFAULT_MIN_YEAR
    max_year: int = DEFAULT_MAX_YEAR
    max_range_days: int = 366

    @classmethod
    def from_env(cls) -> 'CalendarConfig':
        """从环境变量创建配置"""
        env_config = get_env_config()

        source_value = env_config.get_config('YEAR_BRANCH_SOURCE', default=YearBranchSource.NATAL_PALACE.value)
        try:
            source = YearBranchSource(source_value.lower())
        except ValueError:
            logger.warning(f"未知的 YEAR_BRANCH_SOURCE: {source_value}，使用 natal_palace")
            source = YearBranchSource.NATAL_PALACE

        base_palace = env_config.get_config('DEFAULT_BASE_PALACE', default='戌')
        if base_palace not in EARTHLY_BRANCHES:
            logger.warning(f"无效的 DEFAULT_BASE_PALACE: {base_palace}，使用 戌")
            base_palace = '戌'

        return cls(
            default_base_palace=base_palace,
            year_branch_source=source,
            min_year=env_config.get_int_config('CALENDAR_MIN_YEAR', default=DEFAULT_MIN_YEAR),
            max_year=env_config.get_int_config('CALENDAR_MAX_YEAR', default=DEFAULT_MAX_YEAR),
            max_range_days=env_config.get_int_config('MAX_RANGE_DAYS', default=366),
        )


@dataclass
class AppConfig:
    """应用配置"""
    env: str = 'local'
    debug: bool = False
    log_level: str = 'INFO'

    # 子配置
    calendar: CalendarConfig = field(default_factory=CalendarConfig)

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """从环境变量创建完整配置"""
        env_config = get_env_config()
        return cls(
            env=env_config.env,
            debug=env_config.get_bool_config('DEBUG', default=False),
            log_level=env_config.get_config('LOG_LEVEL', default='INFO').upper(),
            calendar=CalendarConfig.from_env(),
        )


# 全局配置实例（单例模式）
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """获取全局配置实例（单例）"""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reload_config() -> AppConfig:
    """重新加载配置（环境变量变化后调用）"""
    global _config
    reset_env_config()
    _config = AppConfig.from_env()
    return _config
