#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微流日四化

根据日天干查四化星，再把每颗星缩写成单字，按 祿、權、科、忌 顺序拼接，
例如 甲 -> 廉破武陽。
"""

from typing import Tuple

from core.calculators.calendar_tables import CalendarTables, DEFAULT_TABLES
from core.calculators.errors import InvalidStem
from core.models.daily_record import FourTransformations


class FourTransformationsResolver:
    """天干四化查询"""

    def __init__(self, tables: CalendarTables = DEFAULT_TABLES):
        self.tables = tables

    def abbreviate(self, star: str) -> str:
        # 缩写表里没有的星曜保持全名
        return self.tables.star_abbreviations.get(star, star)

    def code(self, stem: str) -> str:
        """
        获取四化缩写

        天干集合是封闭的，调用前已校验，未知天干返回空字符串表示"无数据"。
        """
        stars = self.tables.four_transformations.get(stem)
        if not stars:
            return ''
        return ''.join(self.abbreviate(star) for star in stars)

    def resolve(self, stem: str) -> FourTransformations:
        """获取完整四化信息，未知天干抛出 InvalidStem"""
        stars = self.tables.four_transformations.get(stem)
        if not stars:
            raise InvalidStem(stem)
        fortune, power, status, adversity = stars
        return FourTransformations(
            stem=stem,
            fortune=fortune,
            power=power,
            status=status,
            adversity=adversity,
            code=''.join(self.abbreviate(star) for star in stars),
        )

    def expand(self, code: str) -> Tuple[str, ...]:
        """四化缩写还原为星曜全名，如 '廉破武陽' -> ('廉貞', '破軍', '武曲', '太陽')"""
        return tuple(self.tables.star_full_names.get(abbr, abbr) for abbr in code)


_default_resolver = FourTransformationsResolver()


def four_transformations_code(stem: str) -> str:
    return _default_resolver.code(stem)


def resolve_four_transformations(stem: str) -> FourTransformations:
    return _default_resolver.resolve(stem)


def expand_four_transformations_code(code: str) -> Tuple[str, ...]:
    return _default_resolver.expand(code)
