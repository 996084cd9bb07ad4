# -*- coding: utf-8 -*-
"""
历法计算模块

- 农历转换（LunarConverter）
- 农历日期字符串解析
- 紫微流月/流日命宫
- 天干四化
- 二十四节气
- 每日基本资料
"""

from .errors import (
    CalendarError,
    DateOutOfRange,
    UnparsableLunarLabel,
    InvalidBranch,
    InvalidStem,
    InvalidLunarValue,
)
from .calendar_tables import CalendarTables, DEFAULT_TABLES
from .lunar_label_parser import parse_lunar_month, parse_lunar_day, parse_lunar_label
from .flow_palace_calculator import (
    FlowPalaceCalculator,
    flow_month_palace,
    flow_day_palace,
    flow_day_palace_from_label,
)
from .four_transformations import (
    FourTransformationsResolver,
    four_transformations_code,
    resolve_four_transformations,
    expand_four_transformations_code,
)
from .solar_terms import solar_terms_for_year, current_solar_term, transition_note
from .LunarConverter import LunarConverter
from .daily_record_calculator import DailyRecordCalculator, compute_daily_record

__all__ = [
    'CalendarError',
    'DateOutOfRange',
    'UnparsableLunarLabel',
    'InvalidBranch',
    'InvalidStem',
    'InvalidLunarValue',
    'CalendarTables',
    'DEFAULT_TABLES',
    'parse_lunar_month',
    'parse_lunar_day',
    'parse_lunar_label',
    'FlowPalaceCalculator',
    'flow_month_palace',
    'flow_day_palace',
    'flow_day_palace_from_label',
    'FourTransformationsResolver',
    'four_transformations_code',
    'resolve_four_transformations',
    'expand_four_transformations_code',
    'solar_terms_for_year',
    'current_solar_term',
    'transition_note',
    'LunarConverter',
    'DailyRecordCalculator',
    'compute_daily_record',
]
