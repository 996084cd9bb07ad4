#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from datetime import date

from lunar_python import Solar

from core.calculators.calendar_tables import CalendarTables, DEFAULT_TABLES
from core.calculators.errors import DateOutOfRange
from core.calculators.solar_terms import solar_terms_for_year, term_on
from core.data.stems_branches import LEAP_MONTH_PREFIX
from core.models.calendar_day import CalendarDay, Pillar

# 默认支持的公历年份范围
DEFAULT_MIN_YEAR = 1901
DEFAULT_MAX_YEAR = 2099


class LunarConverter:
    """农历转换工具类 - 公历日期 -> 农历月日、三柱干支、当天节气"""

    def __init__(self, tables: CalendarTables = DEFAULT_TABLES,
                 min_year: int = DEFAULT_MIN_YEAR, max_year: int = DEFAULT_MAX_YEAR):
        self.tables = tables
        self.min_year = min_year
        self.max_year = max_year

    @staticmethod
    def normalize_lunar_month(raw_month: int) -> int:
        """lunar_python 用负数表示闰月，流月公式只看月序，取绝对值"""
        return abs(raw_month)

    def resolve(self, day: date) -> CalendarDay:
        """
        将公历日期转换为农历信息
        Args:
            day: 公历日期
        Returns:
            CalendarDay: 农历月日、年/月/日柱、当天节气
        Raises:
            DateOutOfRange: 超出支持范围或农历库无法转换
        """
        if not self.min_year <= day.year <= self.max_year:
            raise DateOutOfRange(
                day.isoformat(),
                f"日期超出支持范围: {day.isoformat()}（{self.min_year}-{self.max_year}）"
            )

        try:
            lunar = Solar.fromYmd(day.year, day.month, day.day).getLunar()
            raw_month = lunar.getMonth()
            calendar_day = CalendarDay(
                gregorian_date=day,
                lunar_year=lunar.getYear(),
                lunar_month=self.normalize_lunar_month(raw_month),
                lunar_day=lunar.getDay(),
                is_leap_month=raw_month < 0,
                lunar_year_pillar=Pillar(stem=lunar.getYearGan(), branch=lunar.getYearZhi()),
                year_pillar=Pillar(stem=lunar.getYearGanByLiChun(), branch=lunar.getYearZhiByLiChun()),
                month_pillar=Pillar(stem=lunar.getMonthGan(), branch=lunar.getMonthZhi()),
                day_pillar=Pillar(stem=lunar.getDayGan(), branch=lunar.getDayZhi()),
                solar_term=term_on(day, solar_terms_for_year(day.year, self.tables)),
            )
        except DateOutOfRange:
            raise
        except Exception as e:
            raise DateOutOfRange(day.isoformat(), f"农历转换失败: {day.isoformat()}: {e}") from e

        return calendar_day

    def lunar_label(self, calendar_day: CalendarDay, with_year: bool = True) -> str:
        """
        格式化农历日期
        例如：乙巳十二月初二；with_year=False 时为 十二月初二
        """
        month_name = self.tables.lunar_month_numeral_names[calendar_day.lunar_month]
        if calendar_day.is_leap_month:
            month_name = f"{LEAP_MONTH_PREFIX}{month_name}"
        label = f"{month_name}{self.tables.lunar_day_names[calendar_day.lunar_day]}"
        if with_year:
            label = f"{calendar_day.lunar_year_pillar.label}{label}"
        return label
