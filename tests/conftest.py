#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest 全局配置

提供：
- 共享 fixtures
- 全局配置
"""

import os
import sys
from datetime import date
from typing import Dict, List

import pytest

# 添加项目根目录到路径
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from tests.fixtures.sample_data import KNOWN_FLOW_PALACE_SAMPLES, SOLAR_TERMS_2026


# ==================== 数据 Fixtures ====================

@pytest.fixture(scope="function")
def sample_date() -> date:
    """
    示例日期（农历乙巳年冬月十三）

    Returns:
        date
    """
    return date(2026, 1, 1)


@pytest.fixture(scope="function")
def natal_palace() -> str:
    """与已知流日命宫记录吻合的本命命宫地支"""
    return '巳'


@pytest.fixture(scope="function")
def known_samples() -> List[Dict[str, str]]:
    """已知流日命宫记录"""
    return [dict(sample) for sample in KNOWN_FLOW_PALACE_SAMPLES]


@pytest.fixture(scope="function")
def solar_terms_2026():
    """2026 年节气表（静态数据）"""
    return SOLAR_TERMS_2026


# ==================== 测试钩子 ====================

def pytest_configure(config):
    """注册自定义标记"""
    config.addinivalue_line("markers", "unit: 单元测试")
    config.addinivalue_line("markers", "api: API 测试")
