#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
天干四化 单元测试
"""

import pytest

from core.calculators.calendar_tables import CalendarTables
from core.calculators.errors import InvalidStem
from core.calculators.four_transformations import (
    FourTransformationsResolver,
    four_transformations_code,
    resolve_four_transformations,
    expand_four_transformations_code,
)
from core.data.stems_branches import HEAVENLY_STEMS

EXPECTED_CODES = {
    '甲': '廉破武陽',
    '乙': '機梁紫陰',
    '丙': '同機昌廉',
    '丁': '陰同機巨',
    '戊': '貪陰右機',
    '己': '武貪梁曲',
    '庚': '陽武陰同',
    '辛': '巨陽曲昌',
    '壬': '梁紫左武',
    '癸': '破巨陰貪',
}


class TestFourTransformationsCode:
    """四化缩写"""

    @pytest.mark.parametrize("stem", HEAVENLY_STEMS)
    def test_every_stem_has_four_characters(self, stem):
        """测试：十天干都返回 4 个字"""
        code = four_transformations_code(stem)
        assert len(code) == 4

    @pytest.mark.parametrize("stem,expected", EXPECTED_CODES.items())
    def test_known_codes(self, stem, expected):
        """测试：与四化对照表一致"""
        assert four_transformations_code(stem) == expected

    @pytest.mark.parametrize("stem", ['子', 'X', '', '甲乙'])
    def test_unknown_stem_returns_empty(self, stem):
        """测试：未知天干返回空字符串，不抛异常"""
        assert four_transformations_code(stem) == ''

    def test_missing_abbreviation_keeps_full_name(self):
        """测试：缩写表缺失的星曜保留全名"""
        tables = CalendarTables(star_abbreviations={})
        resolver = FourTransformationsResolver(tables)

        assert resolver.code('甲') == '廉貞破軍武曲太陽'


class TestResolveFourTransformations:
    """完整四化信息"""

    def test_resolve_jia(self):
        """测试：甲干四化"""
        result = resolve_four_transformations('甲')

        assert result.stars == ('廉貞', '破軍', '武曲', '太陽')
        assert result.code == '廉破武陽'
        assert result.description == '廉貞化祿、破軍化權、武曲化科、太陽化忌'

    def test_resolve_unknown_raises(self):
        """测试：严格查询时未知天干抛出 InvalidStem"""
        with pytest.raises(InvalidStem):
            resolve_four_transformations('子')

    def test_expand_code(self):
        """测试：缩写还原为全名"""
        assert expand_four_transformations_code('梁紫左武') == ('天梁', '紫微', '左輔', '武曲')

    def test_expand_includes_tianfu(self):
        """测试：府 -> 天府"""
        assert expand_four_transformations_code('府') == ('天府',)
