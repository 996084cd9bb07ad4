#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
历法查找表集合

把 core.data 中的常量打包成一个不可变对象，注入到各个计算器中，
测试时可以替换为自定义表。
"""

from dataclasses import dataclass, field
from typing import Mapping, Tuple

from core.data.stems_branches import (
    HEAVENLY_STEMS,
    EARTHLY_BRANCHES,
    LUNAR_MONTH_BRANCHES,
    LUNAR_MONTH_NUMERAL_NAMES,
    LUNAR_DAY_NAMES,
    FLOW_MONTH_NAMES,
    WEEKDAY_NAMES,
    PALACE_NAMES,
    LUNAR_MONTH_LABEL_PATTERNS,
    LUNAR_DAY_LABEL_PATTERNS,
)
from core.data.four_transformations_data import (
    FOUR_TRANSFORMATIONS,
    STAR_ABBREVIATIONS,
    STAR_FULL_NAMES,
)
from core.data.solar_terms_data import SOLAR_TERM_NAMES, DEFAULT_SOLAR_TERM, LIBRARY_TERM_NAMES
from core.calculators.errors import InvalidBranch, InvalidStem, InvalidLunarValue


@dataclass(frozen=True)
class CalendarTables:
    """历法计算所需的全部只读查找表"""
    stems: Tuple[str, ...] = HEAVENLY_STEMS
    branches: Tuple[str, ...] = EARTHLY_BRANCHES
    lunar_month_branches: Mapping[int, str] = field(default_factory=lambda: LUNAR_MONTH_BRANCHES)
    lunar_month_numeral_names: Mapping[int, str] = field(default_factory=lambda: LUNAR_MONTH_NUMERAL_NAMES)
    lunar_day_names: Tuple[str, ...] = LUNAR_DAY_NAMES
    flow_month_names: Mapping[int, str] = field(default_factory=lambda: FLOW_MONTH_NAMES)
    weekday_names: Tuple[str, ...] = WEEKDAY_NAMES
    palace_names: Tuple[str, ...] = PALACE_NAMES
    four_transformations: Mapping[str, Tuple[str, str, str, str]] = field(default_factory=lambda: FOUR_TRANSFORMATIONS)
    star_abbreviations: Mapping[str, str] = field(default_factory=lambda: STAR_ABBREVIATIONS)
    star_full_names: Mapping[str, str] = field(default_factory=lambda: STAR_FULL_NAMES)
    solar_term_names: Tuple[str, ...] = SOLAR_TERM_NAMES
    default_solar_term: str = DEFAULT_SOLAR_TERM
    library_term_names: Mapping[str, str] = field(default_factory=lambda: LIBRARY_TERM_NAMES)
    lunar_month_label_patterns: Tuple[Tuple[str, int], ...] = LUNAR_MONTH_LABEL_PATTERNS
    lunar_day_label_patterns: Tuple[Tuple[str, int], ...] = LUNAR_DAY_LABEL_PATTERNS

    def branch_index(self, branch: str) -> int:
        """获取地支索引，非法地支抛出 InvalidBranch"""
        try:
            return self.branches.index(branch)
        except ValueError:
            raise InvalidBranch(branch) from None

    def branch_at(self, index: int) -> str:
        """根据索引获取地支，负数和大于 11 的索引按模 12 归一"""
        # Python 的取模结果与除数同号，负索引也会落在 0..11
        return self.branches[index % 12]

    def stem_index(self, stem: str) -> int:
        """获取天干索引，非法天干抛出 InvalidStem"""
        try:
            return self.stems.index(stem)
        except ValueError:
            raise InvalidStem(stem) from None

    def month_branch(self, lunar_month: int) -> str:
        """农历月份对应的地支（正月建寅）"""
        if isinstance(lunar_month, bool) or not isinstance(lunar_month, int):
            raise InvalidLunarValue('月份', lunar_month)
        branch = self.lunar_month_branches.get(lunar_month)
        if branch is None:
            raise InvalidLunarValue('月份', lunar_month)
        return branch

    def branch_distance(self, from_branch: str, to_branch: str) -> int:
        """从 from_branch 顺行到 to_branch 的步数（0-11）"""
        distance = self.branch_index(to_branch) - self.branch_index(from_branch)
        if distance < 0:
            distance += 12
        return distance


DEFAULT_TABLES = CalendarTables()
