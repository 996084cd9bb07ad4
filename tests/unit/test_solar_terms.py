#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
二十四节气 单元测试

节气时刻由天文算法给出，这里只断言日期稳定的节气，
交节时刻用静态表测试格式。
"""

from datetime import date

import pytest

from core.calculators.solar_terms import (
    solar_terms_for_year,
    term_on,
    current_solar_term,
    transition_note,
)
from core.calculators.calendar_tables import CalendarTables, DEFAULT_TABLES
from core.calculators.errors import DateOutOfRange
from core.data.solar_terms_data import SOLAR_TERM_NAMES


class TestSolarTermsForYear:
    """lunar_python 节气表"""

    def test_twenty_four_terms_sorted(self):
        """测试：一年 24 个节气，按日期升序，从小寒开始到冬至结束"""
        terms = solar_terms_for_year(2026)

        assert len(terms) == 24
        assert [term.name for term in terms] == list(SOLAR_TERM_NAMES)
        assert all(a.solar_date < b.solar_date for a, b in zip(terms, terms[1:]))
        assert all(term.solar_date.year == 2026 for term in terms)

    @pytest.mark.parametrize("name,expected", [
        ('小寒', date(2026, 1, 5)),
        ('立春', date(2026, 2, 4)),
        ('清明', date(2026, 4, 5)),
        ('夏至', date(2026, 6, 21)),
        ('冬至', date(2026, 12, 22)),
    ])
    def test_known_dates(self, name, expected):
        """测试：2026 年节气日期"""
        terms = {term.name: term for term in solar_terms_for_year(2026)}
        assert terms[name].solar_date == expected

    def test_time_format(self):
        """测试：交节时刻为 HH:MM"""
        for term in solar_terms_for_year(2026):
            hour, minute = term.time.split(':')
            assert len(hour) == 2 and len(minute) == 2
            assert 0 <= int(hour) < 24 and 0 <= int(minute) < 60


class TestCurrentSolarTerm:
    """当前节气"""

    def test_term_day_uses_that_term(self, solar_terms_2026):
        """测试：交节当天取当天节气"""
        assert current_solar_term(date(2026, 2, 4), solar_terms_2026) == '立春'

    def test_between_terms_uses_latest(self, solar_terms_2026):
        """测试：两个节气之间取已交的最近节气"""
        assert current_solar_term(date(2026, 2, 10), solar_terms_2026) == '立春'
        assert current_solar_term(date(2026, 12, 31), solar_terms_2026) == '冬至'

    def test_before_first_term_defaults_to_xiaohan(self, solar_terms_2026):
        """测试：元旦到小寒前，返回小寒"""
        assert current_solar_term(date(2026, 1, 1), solar_terms_2026) == '小寒'

    def test_custom_default(self, solar_terms_2026):
        """测试：可以指定默认节气"""
        assert current_solar_term(date(2026, 1, 1), solar_terms_2026, default='冬至') == '冬至'


class TestTransitionNote:
    """节气转换说明"""

    def test_note_on_term_day(self, solar_terms_2026):
        """测试：交节日返回 上一节气→当天节气 时刻"""
        assert transition_note(date(2026, 1, 5), solar_terms_2026) == '冬至→小寒 16:24'
        assert transition_note(date(2026, 2, 4), solar_terms_2026) == '大寒→立春 04:03'

    def test_no_note_on_other_days(self, solar_terms_2026):
        """测试：非交节日没有说明"""
        assert transition_note(date(2026, 1, 6), solar_terms_2026) is None
        assert term_on(date(2026, 1, 6), solar_terms_2026) is None

    def test_term_on(self, solar_terms_2026):
        """测试：交节日返回节气对象"""
        term = term_on(date(2026, 6, 21), solar_terms_2026)
        assert term.name == '夏至'
        assert term.time == '16:16'


class TestInjectedTermNames:
    """节气名称映射来自查找表"""

    def test_incomplete_name_mapping_raises(self):
        """测试：名称映射缺少节气时报告节气不完整"""
        # Given
        names = {key: name for key, name in DEFAULT_TABLES.library_term_names.items() if name != '夏至'}
        tables = CalendarTables(library_term_names=names)

        # When / Then
        with pytest.raises(DateOutOfRange):
            solar_terms_for_year(2026, tables)

    def test_default_tables_match_default_call(self):
        """测试：显式传入默认查找表与默认调用结果一致"""
        assert solar_terms_for_year(2026, DEFAULT_TABLES) == solar_terms_for_year(2026)
