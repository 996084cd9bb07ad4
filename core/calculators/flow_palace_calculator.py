#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微斗数流月/流日命宫计算

计算逻辑：
1. 流月命宫 = 年支参考点索引 + 当月地支索引 + 2   (mod 12)
2. 流日命宫 = 流月命宫索引 + (农历日 - 1)          (mod 12)

年支参考点（year_branch）始终由调用方传入：本命命宫、八字年支、农历年支
三种取法结果不同，计算器不替调用方做选择。
"""

from core.calculators.calendar_tables import CalendarTables, DEFAULT_TABLES
from core.calculators.errors import InvalidLunarValue
from core.calculators.lunar_label_parser import parse_lunar_month, parse_lunar_day


class FlowPalaceCalculator:
    """流月/流日命宫计算器"""

    def __init__(self, tables: CalendarTables = DEFAULT_TABLES):
        self.tables = tables

    def flow_month_palace(self, year_branch: str, lunar_month: int) -> str:
        """
        计算流月命宫

        Args:
            year_branch: 年支参考点（地支）
            lunar_month: 农历月份（1-12）

        Returns:
            str: 流月命宫地支
        """
        year_index = self.tables.branch_index(year_branch)
        month_branch = self.tables.month_branch(lunar_month)
        month_index = self.tables.branch_index(month_branch)

        flow_month_index = (year_index + month_index + 2) % 12
        return self.tables.branch_at(flow_month_index)

    def flow_day_palace(self, month_palace: str, lunar_day: int) -> str:
        """
        计算流日命宫

        Args:
            month_palace: 流月命宫地支
            lunar_day: 农历日（1-30）

        Returns:
            str: 流日命宫地支
        """
        month_index = self.tables.branch_index(month_palace)
        if isinstance(lunar_day, bool) or not isinstance(lunar_day, int) or not 1 <= lunar_day <= 30:
            raise InvalidLunarValue('日数', lunar_day)

        flow_day_index = (month_index + lunar_day - 1) % 12
        return self.tables.branch_at(flow_day_index)

    def flow_palaces(self, year_branch: str, lunar_month: int, lunar_day: int):
        """完整链路：返回 (流月命宫, 流日命宫)"""
        month_palace = self.flow_month_palace(year_branch, lunar_month)
        return month_palace, self.flow_day_palace(month_palace, lunar_day)

    def flow_day_palace_from_label(self, year_branch: str, lunar_label: str) -> str:
        """从农历日期字符串（如 '乙巳十二月初二'）计算流日命宫"""
        lunar_month = parse_lunar_month(lunar_label, self.tables)
        lunar_day = parse_lunar_day(lunar_label, self.tables)
        return self.flow_palaces(year_branch, lunar_month, lunar_day)[1]

    def relative_palace_name(self, reference_branch: str, star_branch: str) -> str:
        """
        星曜所在地支相对于参考命宫的宫位名称

        十二宫自命宫起逆行排列，所以距离取 参考索引 - 星曜索引。
        例如参考命宫在午、星曜在辰，距离 2 -> 夫妻。
        """
        distance = self.tables.branch_distance(star_branch, reference_branch)
        return self.tables.palace_names[distance]


_default_calculator = FlowPalaceCalculator()


def flow_month_palace(year_branch: str, lunar_month: int) -> str:
    """计算流月命宫（使用默认查找表）"""
    return _default_calculator.flow_month_palace(year_branch, lunar_month)


def flow_day_palace(month_palace: str, lunar_day: int) -> str:
    """计算流日命宫（使用默认查找表）"""
    return _default_calculator.flow_day_palace(month_palace, lunar_day)


def flow_day_palace_from_label(year_branch: str, lunar_label: str) -> str:
    """从农历日期字符串计算流日命宫（使用默认查找表）"""
    return _default_calculator.flow_day_palace_from_label(year_branch, lunar_label)
