#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
历法数据模型 - 干支柱、节气、单日农历信息
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Pillar(BaseModel):
    """干支柱（年柱/月柱/日柱）"""
    model_config = ConfigDict(frozen=True)

    stem: str = Field(..., description="天干", examples=["甲"])
    branch: str = Field(..., description="地支", examples=["寅"])

    @property
    def label(self) -> str:
        return f"{self.stem}{self.branch}"


class SolarTerm(BaseModel):
    """节气（公历日期 + 交节时刻，北京时间）"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="节气名称（繁体）", examples=["立春"])
    solar_date: date = Field(..., description="交节公历日期")
    time: str = Field("", description="交节时刻 HH:MM", examples=["04:03"])


class CalendarDay(BaseModel):
    """单日农历与八字信息"""
    model_config = ConfigDict(frozen=True)

    gregorian_date: date = Field(..., description="公历日期")
    lunar_year: int = Field(..., description="农历年")
    lunar_month: int = Field(..., ge=1, le=12, description="农历月（已取绝对值，闰月不带负号）")
    lunar_day: int = Field(..., ge=1, le=30, description="农历日")
    is_leap_month: bool = Field(False, description="是否闰月")
    lunar_year_pillar: Pillar = Field(..., description="农历年干支（以正月初一换年）")
    year_pillar: Pillar = Field(..., description="八字年柱（以立春换年）")
    month_pillar: Pillar = Field(..., description="八字月柱（以节换月）")
    day_pillar: Pillar = Field(..., description="日柱")
    solar_term: Optional[SolarTerm] = Field(None, description="当天交节的节气，非交节日为空")
