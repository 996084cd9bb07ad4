#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
每日基本资料计算

一次调用 = 一天：公历日期 + 本命命宫地支 -> DailyRecord。
无状态、无 IO，可在多线程中并发调用。
"""

from datetime import date

from core.calculators.calendar_tables import CalendarTables, DEFAULT_TABLES
from core.calculators.flow_palace_calculator import FlowPalaceCalculator
from core.calculators.four_transformations import FourTransformationsResolver
from core.calculators.LunarConverter import LunarConverter
from core.calculators.solar_terms import solar_terms_for_year, current_solar_term, transition_note
from core.models.calendar_day import CalendarDay
from core.models.daily_record import DailyRecord, YearBranchSource


class DailyRecordCalculator:
    """每日基本资料计算器，查找表在构造时注入"""

    def __init__(self, tables: CalendarTables = DEFAULT_TABLES, converter: LunarConverter = None):
        self.tables = tables
        self.converter = converter or LunarConverter(tables)
        self.flow_palace = FlowPalaceCalculator(tables)
        self.four_transformations = FourTransformationsResolver(tables)

    def year_branch(self, calendar_day: CalendarDay, base_palace: str,
                    source: YearBranchSource) -> str:
        """按来源选出流月公式的年支参考点"""
        source = YearBranchSource(source)
        if source is YearBranchSource.BAZI_YEAR:
            return calendar_day.year_pillar.branch
        if source is YearBranchSource.LUNAR_YEAR:
            return calendar_day.lunar_year_pillar.branch
        return base_palace

    def compute_daily_record(self, day: date, base_palace: str,
                             year_branch_source: YearBranchSource = YearBranchSource.NATAL_PALACE) -> DailyRecord:
        """
        生成完整的「每日基本资料」

        Args:
            day: 公历日期
            base_palace: 本命命宫地支（例如：'戌'）
            year_branch_source: 流月公式年支参考点的来源，默认使用 base_palace

        Returns:
            DailyRecord

        Raises:
            DateOutOfRange: 日期超出农历转换范围
            InvalidBranch: base_palace 不是合法地支
        """
        # 非 NATAL_PALACE 来源也要求 base_palace 合法，记录里会原样带出
        self.tables.branch_index(base_palace)

        calendar_day = self.converter.resolve(day)
        terms = solar_terms_for_year(day.year, self.tables)

        year_branch = self.year_branch(calendar_day, base_palace, year_branch_source)
        month_palace, day_palace = self.flow_palace.flow_palaces(
            year_branch, calendar_day.lunar_month, calendar_day.lunar_day
        )

        day_pillar = calendar_day.day_pillar
        month_pillar_label = calendar_day.month_pillar.label

        return DailyRecord(
            date=day.isoformat(),
            weekday=self.tables.weekday_names[day.weekday()],
            lunar_date_label=self.converter.lunar_label(calendar_day, with_year=False),
            lunar_month=calendar_day.lunar_month,
            lunar_day=calendar_day.lunar_day,
            day_stem=day_pillar.stem,
            day_branch=day_pillar.branch,
            month_pillar_label=month_pillar_label,
            solar_term=current_solar_term(day, terms, self.tables.default_solar_term),
            year_pillar_label=calendar_day.year_pillar.label,
            month_pillar_label2=month_pillar_label,
            flow_month_label=self.tables.flow_month_names[calendar_day.lunar_month],
            flow_month_palace=month_palace,
            flow_day_palace=day_palace,
            four_transformations=self.four_transformations.code(day_pillar.stem),
            solar_term_transition_note=transition_note(day, terms, self.tables.solar_term_names),
            base_palace=base_palace,
            year_branch_source=YearBranchSource(year_branch_source),
        )


_default_calculator = DailyRecordCalculator()


def compute_daily_record(day: date, base_palace: str,
                         year_branch_source: YearBranchSource = YearBranchSource.NATAL_PALACE) -> DailyRecord:
    """生成一天的每日基本资料（使用默认查找表和默认支持范围）"""
    return _default_calculator.compute_daily_record(day, base_palace, year_branch_source)
