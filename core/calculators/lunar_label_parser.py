#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
农历日期字符串解析

历史数据源只提供格式化后的农历字符串（如：乙巳十一月十三、甲辰十二月初二），
需要从中还原整数月份和日数。

匹配规则：长串优先。
- 月份：先查「十二月」「十一月」「十月」（及冬月、臘月），再查「正月」「二月」…「九月」，
  否则「十二月」会被误认为「二月」。
- 日数：先去掉月份部分，再依次查二十/三十段（三十、廿九…廿一、二十）、
  十几段（十九…十一、初十）、初几段（初九…初一）。

匹配表来自 CalendarTables.lunar_month_label_patterns / lunar_day_label_patterns。
无法匹配时抛出 UnparsableLunarLabel，绝不返回 0。
"""

from core.calculators.calendar_tables import CalendarTables, DEFAULT_TABLES
from core.calculators.errors import UnparsableLunarLabel


def _find_month(label: str, tables: CalendarTables):
    """返回 (月份, 月名结束位置)，找不到返回 None"""
    for name, month in tables.lunar_month_label_patterns:
        index = label.find(name)
        if index != -1:
            return month, index + len(name)
    return None


def parse_lunar_month(label: str, tables: CalendarTables = DEFAULT_TABLES) -> int:
    """
    从农历日期字符串提取月份

    Args:
        label: 农历日期字符串，如 '乙巳十一月十三'
        tables: 查找表

    Returns:
        int: 1-12

    Raises:
        UnparsableLunarLabel: 无法识别月份
    """
    found = _find_month(label or '', tables)
    if found is None:
        raise UnparsableLunarLabel(label, '月份')
    return found[0]


def parse_lunar_day(label: str, tables: CalendarTables = DEFAULT_TABLES) -> int:
    """
    从农历日期字符串提取日数

    先去掉月份部分，避免「十一月」中的「十一」被误识别为日数。

    Args:
        label: 农历日期字符串，如 '甲辰十二月初二'
        tables: 查找表

    Returns:
        int: 1-30

    Raises:
        UnparsableLunarLabel: 无法识别日数
    """
    day_part = label or ''
    found = _find_month(day_part, tables)
    if found is not None:
        day_part = day_part[found[1]:]

    for name, day in tables.lunar_day_label_patterns:
        if name in day_part:
            return day

    raise UnparsableLunarLabel(label, '日数')


def parse_lunar_label(label: str, tables: CalendarTables = DEFAULT_TABLES):
    """解析农历日期字符串，返回 (月份, 日数)"""
    return parse_lunar_month(label, tables), parse_lunar_day(label, tables)
