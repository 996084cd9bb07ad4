#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
每日基本资料服务

在历法计算器之上处理：日期字符串解析、配置默认值、批量生成（整年/日期区间）、日志。
"""

import logging
from datetime import date, datetime, timedelta
from typing import List, Optional, Union

from core.calculators.daily_record_calculator import DailyRecordCalculator
from core.calculators.LunarConverter import LunarConverter
from core.models.daily_record import DailyRecord, YearBranchSource
from server.config.app_config import CalendarConfig, get_config

logger = logging.getLogger(__name__)

DateLike = Union[date, str]


class BatchRequestError(ValueError):
    """批量请求参数错误：日期区间颠倒、超过天数或记录条数上限"""


def parse_date(value: DateLike) -> date:
    """
    解析日期

    Args:
        value: date 对象或 YYYY-MM-DD 字符串

    Raises:
        ValueError: 日期格式错误
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value, '%Y-%m-%d').date()
    except (TypeError, ValueError):
        raise ValueError(f"日期格式错误: {value}，应为 YYYY-MM-DD") from None


class DailyRecordService:
    """每日基本资料服务"""

    def __init__(self, config: Optional[CalendarConfig] = None,
                 calculator: Optional[DailyRecordCalculator] = None):
        self.config = config or get_config().calendar
        self.calculator = calculator or DailyRecordCalculator(
            converter=LunarConverter(min_year=self.config.min_year, max_year=self.config.max_year)
        )

    def _resolve_options(self, base_palace: Optional[str],
                         year_branch_source: Optional[YearBranchSource]):
        return (
            base_palace or self.config.default_base_palace,
            YearBranchSource(year_branch_source or self.config.year_branch_source),
        )

    def get_daily_record(self, day: DateLike, base_palace: Optional[str] = None,
                         year_branch_source: Optional[YearBranchSource] = None) -> DailyRecord:
        """
        获取单日基本资料

        Args:
            day: 公历日期
            base_palace: 本命命宫地支，默认取配置
            year_branch_source: 年支来源，默认取配置

        Returns:
            DailyRecord
        """
        base_palace, source = self._resolve_options(base_palace, year_branch_source)
        return self.calculator.compute_daily_record(parse_date(day), base_palace, source)

    def generate_range_records(self, start: DateLike, end: DateLike,
                               base_palace: Optional[str] = None,
                               year_branch_source: Optional[YearBranchSource] = None,
                               max_days: Optional[int] = None) -> List[DailyRecord]:
        """
        批量生成日期区间（含首尾）的每日基本资料

        每天的结果只依赖当天输入，逐日独立计算。

        Raises:
            BatchRequestError: 结束日期早于开始日期，或区间超过 max_days
        """
        start_date = parse_date(start)
        end_date = parse_date(end)
        if end_date < start_date:
            raise BatchRequestError(f"结束日期 {end_date} 早于开始日期 {start_date}")

        total_days = (end_date - start_date).days + 1
        if max_days is not None and total_days > max_days:
            raise BatchRequestError(f"日期区间 {total_days} 天，超过上限 {max_days} 天")

        base_palace, source = self._resolve_options(base_palace, year_branch_source)
        logger.info(f"生成每日基本资料: {start_date} ~ {end_date}，共 {total_days} 天，"
                    f"本命命宫={base_palace}，年支来源={source.value}")

        records = [
            self.calculator.compute_daily_record(start_date + timedelta(days=offset), base_palace, source)
            for offset in range(total_days)
        ]

        logger.info(f"✓ 已生成 {len(records)} 天的资料")
        return records

    def generate_yearly_records(self, year: int, base_palace: Optional[str] = None,
                                year_branch_source: Optional[YearBranchSource] = None) -> List[DailyRecord]:
        """批量生成一整年（公历）的每日基本资料"""
        return self.generate_range_records(
            date(year, 1, 1), date(year, 12, 31),
            base_palace=base_palace,
            year_branch_source=year_branch_source,
        )
