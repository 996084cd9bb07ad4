#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
每日基本资料请求/响应模型
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from core.data.stems_branches import EARTHLY_BRANCHES
from core.models.daily_record import DailyRecord, YearBranchSource


def _validate_date_str(v: str) -> str:
    try:
        datetime.strptime(v, '%Y-%m-%d')
    except ValueError:
        raise ValueError('日期格式错误，应为 YYYY-MM-DD')
    return v


def _validate_branch(v: Optional[str]) -> Optional[str]:
    if v is not None and v not in EARTHLY_BRANCHES:
        raise ValueError(f"本命命宫必须为十二地支之一: {v}")
    return v


class DailyRecordRequest(BaseModel):
    """单日请求"""
    date: str = Field(..., description="公历日期，格式：YYYY-MM-DD", examples=["2026-01-01"])
    base_palace: Optional[str] = Field(None, description="本命命宫地支（可选，默认取配置）", examples=["巳"])
    year_branch_source: Optional[YearBranchSource] = Field(
        None, description="流月公式年支来源：natal_palace / bazi_year / lunar_year（可选，默认取配置）"
    )

    @field_validator('date')
    @classmethod
    def validate_date(cls, v):
        return _validate_date_str(v)

    @field_validator('base_palace')
    @classmethod
    def validate_base_palace(cls, v):
        return _validate_branch(v)


class DailyRecordRangeRequest(BaseModel):
    """日期区间请求"""
    start_date: str = Field(..., description="开始日期 YYYY-MM-DD", examples=["2026-01-01"])
    end_date: str = Field(..., description="结束日期 YYYY-MM-DD（含）", examples=["2026-01-31"])
    base_palace: Optional[str] = Field(None, description="本命命宫地支（可选）")
    year_branch_source: Optional[YearBranchSource] = Field(None, description="流月公式年支来源（可选）")

    @field_validator('start_date', 'end_date')
    @classmethod
    def validate_dates(cls, v):
        return _validate_date_str(v)

    @field_validator('base_palace')
    @classmethod
    def validate_base_palace(cls, v):
        return _validate_branch(v)


class DailyRecordResponse(BaseModel):
    """单日响应"""
    success: bool
    data: Optional[DailyRecord] = None
    error: Optional[str] = None


class DailyRecordRangeResponse(BaseModel):
    """区间响应"""
    success: bool
    count: int = 0
    data: List[DailyRecord] = Field(default_factory=list)


class PalaceSample(BaseModel):
    """已知流日命宫记录"""
    date: str = Field(..., examples=["2026-01-01"])
    palace: str = Field(..., examples=["未"])

    @field_validator('date')
    @classmethod
    def validate_date(cls, v):
        return _validate_date_str(v)

    @field_validator('palace')
    @classmethod
    def validate_palace(cls, v):
        return _validate_branch(v)


class VerifyRequest(BaseModel):
    """流日命宫验证请求"""
    samples: List[PalaceSample] = Field(..., min_length=1, description="已知记录")
    base_palace: Optional[str] = Field(None, description="本命命宫地支（可选）")

    @field_validator('base_palace')
    @classmethod
    def validate_base_palace(cls, v):
        return _validate_branch(v)
