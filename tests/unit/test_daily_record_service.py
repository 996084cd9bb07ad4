#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
每日基本资料服务 单元测试
"""

from datetime import date, datetime

import pytest

from core.calculators.errors import DateOutOfRange
from core.models.daily_record import YearBranchSource
from server.config.app_config import CalendarConfig
from server.services.daily_record_service import BatchRequestError, DailyRecordService, parse_date


class TestParseDate:
    """日期解析"""

    def test_parse_string(self):
        assert parse_date('2026-01-01') == date(2026, 1, 1)

    def test_parse_date_and_datetime(self):
        assert parse_date(date(2026, 1, 1)) == date(2026, 1, 1)
        assert parse_date(datetime(2026, 1, 1, 12, 30)) == date(2026, 1, 1)

    @pytest.mark.parametrize("value", ['2026/01/01', '2026-13-01', '', None])
    def test_invalid_format(self, value):
        """测试：格式错误抛出 ValueError"""
        with pytest.raises(ValueError, match="日期格式错误"):
            parse_date(value)


class TestDailyRecordService:
    """单日与批量生成"""

    def test_defaults_from_config(self):
        """测试：未传本命命宫和来源时使用配置"""
        # Given
        service = DailyRecordService(CalendarConfig(default_base_palace='巳'))

        # When
        record = service.get_daily_record('2026-01-01')

        # Then
        assert record.base_palace == '巳'
        assert record.flow_day_palace == '未'
        assert record.year_branch_source is YearBranchSource.NATAL_PALACE

    def test_config_source(self):
        """测试：配置的年支来源生效"""
        service = DailyRecordService(CalendarConfig(year_branch_source=YearBranchSource.BAZI_YEAR))

        record = service.get_daily_record('2026-02-10', base_palace='戌')

        assert record.year_branch_source is YearBranchSource.BAZI_YEAR
        assert record.flow_day_palace == '未'

    def test_config_year_range(self):
        """测试：配置的支持范围传给农历转换"""
        service = DailyRecordService(CalendarConfig(min_year=2020, max_year=2030))

        with pytest.raises(DateOutOfRange):
            service.get_daily_record('2019-12-31')

    def test_range_inclusive(self):
        """测试：区间包含首尾两天，按日期顺序"""
        service = DailyRecordService(CalendarConfig())

        records = service.generate_range_records('2025-12-30', '2026-01-05', base_palace='巳')

        assert [record.date for record in records] == [
            '2025-12-30', '2025-12-31', '2026-01-01', '2026-01-02',
            '2026-01-03', '2026-01-04', '2026-01-05',
        ]
        assert records[-1].solar_term_transition_note is not None

    def test_single_day_range(self):
        """测试：首尾同一天"""
        service = DailyRecordService(CalendarConfig())
        assert len(service.generate_range_records('2026-01-01', '2026-01-01')) == 1

    def test_reversed_range_raises(self):
        """测试：结束日期早于开始日期"""
        service = DailyRecordService(CalendarConfig())

        with pytest.raises(BatchRequestError, match="早于"):
            service.generate_range_records('2026-01-05', '2026-01-01')

    def test_range_over_limit_raises(self):
        """测试：区间超过上限"""
        service = DailyRecordService(CalendarConfig())

        with pytest.raises(BatchRequestError, match="超过上限"):
            service.generate_range_records('2026-01-01', '2026-01-10', max_days=5)

    def test_yearly_records(self):
        """测试：整年 365 天，节气只有 24 天带转换说明"""
        service = DailyRecordService(CalendarConfig())

        records = service.generate_yearly_records(2026, base_palace='戌')

        assert len(records) == 365
        assert records[0].date == '2026-01-01'
        assert records[-1].date == '2026-12-31'
        assert sum(1 for record in records if record.solar_term_transition_note) == 24
