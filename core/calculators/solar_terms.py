#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
二十四节气查询

- solar_terms_for_year: 由 lunar_python 的节气表生成某公历年的 24 个节气（按日期排序）
- current_solar_term: 当天交节取当天节气，否则取不晚于当天的最近节气；
  当年尚未交任何节气时（元旦至小寒前）返回「小寒」
- transition_note: 交节日的节气转换说明，如「冬至→小寒 16:24」
"""

from datetime import date
from functools import lru_cache
from typing import Optional, Sequence, Tuple

from lunar_python import Solar

from core.calculators.calendar_tables import CalendarTables, DEFAULT_TABLES
from core.calculators.errors import DateOutOfRange
from core.data.solar_terms_data import SOLAR_TERM_NAMES, DEFAULT_SOLAR_TERM
from core.models.calendar_day import SolarTerm


@lru_cache(maxsize=256)
def _library_jie_qi(year: int) -> Tuple[Tuple[str, int, int, int, int, int], ...]:
    """
    读取 lunar_python 节气表中落在公历 year 内的条目（按年缓存）

    农历年的节气表覆盖上一年大雪到下一年惊蛰，取两个农历年（元旦、七月一日
    所在农历年）的节气表合并，再按公历年份过滤。

    Returns:
        ((库中名称, 年, 月, 日, 时, 分), ...)

    Raises:
        DateOutOfRange: 农历库无法计算该年节气
    """
    entries = []
    try:
        for month in (1, 7):
            lunar = Solar.fromYmd(year, month, 1).getLunar()
            for key, solar in lunar.getJieQiTable().items():
                if solar.getYear() != year:
                    continue
                entries.append((key, solar.getYear(), solar.getMonth(), solar.getDay(),
                                solar.getHour(), solar.getMinute()))
    except Exception as e:
        raise DateOutOfRange(year, f"无法计算 {year} 年节气: {e}") from e
    return tuple(entries)


def solar_terms_for_year(year: int, tables: CalendarTables = DEFAULT_TABLES) -> Tuple[SolarTerm, ...]:
    """
    获取公历年内的 24 个节气

    Args:
        year: 公历年
        tables: 查找表（库中名称 -> 繁体名称、节气名称列表）

    Returns:
        Tuple[SolarTerm, ...]: 按日期排序的节气

    Raises:
        DateOutOfRange: 农历库无法计算该年节气，或节气不完整
    """
    terms = {}
    for key, term_year, month, day, hour, minute in _library_jie_qi(year):
        name = tables.library_term_names.get(key)
        if name is None:
            continue
        terms[name] = SolarTerm(
            name=name,
            solar_date=date(term_year, month, day),
            time=f"{hour:02d}:{minute:02d}",
        )

    expected = len(tables.solar_term_names)
    if len(terms) != expected:
        raise DateOutOfRange(year, f"{year} 年节气不完整: {len(terms)}/{expected}")

    return tuple(sorted(terms.values(), key=lambda term: term.solar_date))


def term_on(day: date, terms: Sequence[SolarTerm]) -> Optional[SolarTerm]:
    """当天交节的节气，非交节日返回 None"""
    for term in terms:
        if term.solar_date == day:
            return term
    return None


def current_solar_term(day: date, terms: Sequence[SolarTerm],
                       default: str = DEFAULT_SOLAR_TERM) -> str:
    """
    获取当前节气：最接近但不晚于 day 的节气

    Args:
        day: 公历日期
        terms: 该公历年的节气（按日期升序）
        default: 当年尚未交节时的默认节气

    Returns:
        str: 节气名称
    """
    current = ''
    for term in terms:
        if term.solar_date <= day:
            current = term.name
        else:
            break
    return current or default


def transition_note(day: date, terms: Sequence[SolarTerm],
                    names: Sequence[str] = SOLAR_TERM_NAMES) -> Optional[str]:
    """交节日返回「上一节气→当天节气 交节时刻」，否则返回 None"""
    term = term_on(day, terms)
    if term is None:
        return None
    previous = names[(names.index(term.name) - 1) % len(names)]
    note = f"{previous}→{term.name}"
    if term.time:
        note = f"{note} {term.time}"
    return note
