# -*- coding: utf-8 -*-
"""
历法数据模型
"""

from .calendar_day import Pillar, SolarTerm, CalendarDay
from .daily_record import YearBranchSource, FourTransformations, DailyRecord

__all__ = [
    'Pillar',
    'SolarTerm',
    'CalendarDay',
    'YearBranchSource',
    'FourTransformations',
    'DailyRecord',
]
