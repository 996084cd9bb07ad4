#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
每日基本资料模型 - 四化、年支来源、单日完整记录
"""

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from core.data.four_transformations_data import TRANSFORMATION_LABELS


class YearBranchSource(str, Enum):
    """
    流月命宫公式中"年支"参考点的来源

    三种来源各自给出不同结果，目前没有定论，由调用方显式选择：
    - NATAL_PALACE: 配置的本命（流年）命宫地支
    - BAZI_YEAR: 八字年柱地支（立春换年）
    - LUNAR_YEAR: 农历年地支（正月初一换年）
    """
    NATAL_PALACE = "natal_palace"
    BAZI_YEAR = "bazi_year"
    LUNAR_YEAR = "lunar_year"


class FourTransformations(BaseModel):
    """天干四化：化祿、化權、化科、化忌"""
    model_config = ConfigDict(frozen=True)

    stem: str = Field(..., description="天干", examples=["甲"])
    fortune: str = Field(..., description="化祿星", examples=["廉貞"])
    power: str = Field(..., description="化權星", examples=["破軍"])
    status: str = Field(..., description="化科星", examples=["武曲"])
    adversity: str = Field(..., description="化忌星", examples=["太陽"])
    code: str = Field(..., min_length=4, max_length=4, description="四星缩写", examples=["廉破武陽"])

    @property
    def stars(self):
        return (self.fortune, self.power, self.status, self.adversity)

    @property
    def description(self) -> str:
        """例如：廉貞化祿、破軍化權、武曲化科、太陽化忌"""
        return '、'.join(
            f"{star}化{label}" for star, label in zip(self.stars, TRANSFORMATION_LABELS)
        )


class DailyRecord(BaseModel):
    """每日基本资料（一天一条，由日期和本命命宫完全决定）"""
    model_config = ConfigDict(frozen=True)

    date: str = Field(..., description="公历日期 YYYY-MM-DD", examples=["2026-01-01"])
    weekday: str = Field(..., description="星期", examples=["四"])
    lunar_date_label: str = Field(..., description="农历月日", examples=["十一月十三"])
    lunar_month: int = Field(..., ge=1, le=12, description="农历月")
    lunar_day: int = Field(..., ge=1, le=30, description="农历日")
    day_stem: str = Field(..., description="日天干")
    day_branch: str = Field(..., description="日地支")
    month_pillar_label: str = Field(..., description="月天干地支")
    solar_term: str = Field(..., description="当前节气")
    year_pillar_label: str = Field(..., description="八字流年")
    month_pillar_label2: str = Field(..., description="八字流月")
    flow_month_label: str = Field(..., description="紫微流月", examples=["臘月"])
    flow_month_palace: str = Field(..., description="流月命宫地支")
    flow_day_palace: str = Field(..., description="流日命宫地支")
    four_transformations: str = Field(..., description="流日四化缩写", examples=["機梁紫陰"])
    solar_term_transition_note: Optional[str] = Field(None, description="节气转换说明（仅交节日）")
    base_palace: str = Field(..., description="本命命宫地支")
    year_branch_source: YearBranchSource = Field(YearBranchSource.NATAL_PALACE, description="流月公式年支来源")

    def to_sheet_row(self) -> Dict[str, str]:
        """转换为「每日基本資料」工作表的列名映射"""
        return {
            '日期': self.date,
            '星期': self.weekday,
            '農曆': self.lunar_date_label,
            '農曆月': str(self.lunar_month),
            '農曆日': str(self.lunar_day),
            '天干': self.day_stem,
            '地支': self.day_branch,
            '月天干地支': self.month_pillar_label,
            '節氣': self.solar_term,
            '八字流年': self.year_pillar_label,
            '八字流月': self.month_pillar_label2,
            '紫微流月': self.flow_month_label,
            '流日命宮地支': self.flow_day_palace,
            '流日四化': self.four_transformations,
            '節氣轉換': self.solar_term_transition_note or '',
        }
