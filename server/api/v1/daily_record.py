#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
每日基本资料API接口
提供单日/区间的农历、干支、节气、紫微流日命宫与四化计算，以及流日命宫验证
"""

import logging

from fastapi import APIRouter

from server.api.v1.models.daily_record_models import (
    DailyRecordRequest,
    DailyRecordResponse,
    DailyRecordRangeRequest,
    DailyRecordRangeResponse,
    VerifyRequest,
)
from server.services.daily_record_service import DailyRecordService
from server.services.flow_palace_verification_service import FlowPalaceVerificationService
from server.utils.async_executor import run_in_executor

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/daily-record", response_model=DailyRecordResponse, summary="查询每日基本资料")
async def query_daily_record(request: DailyRecordRequest):
    """
    查询指定日期的每日基本资料

    - **date**: 公历日期 YYYY-MM-DD
    - **base_palace**: 本命命宫地支（可选）
    - **year_branch_source**: 流月公式年支来源（可选）

    历法计算错误（超出范围、非法地支）由全局异常处理器转换为 400
    """
    service = DailyRecordService()
    record = service.get_daily_record(request.date, request.base_palace, request.year_branch_source)
    return DailyRecordResponse(success=True, data=record)


@router.post("/daily-record/range", response_model=DailyRecordRangeResponse, summary="批量生成每日基本资料")
async def query_daily_record_range(request: DailyRecordRangeRequest):
    """
    批量生成日期区间（含首尾）的每日基本资料

    区间长度受 MAX_RANGE_DAYS 限制（默认 366 天），区间颠倒或超限由全局异常处理器转换为 400
    """
    service = DailyRecordService()
    records = await run_in_executor(
        service.generate_range_records,
        request.start_date,
        request.end_date,
        base_palace=request.base_palace,
        year_branch_source=request.year_branch_source,
        max_days=service.config.max_range_days,
    )

    return DailyRecordRangeResponse(success=True, count=len(records), data=records)


@router.post("/flow-palace/verify", summary="验证流日命宫")
async def verify_flow_palace(request: VerifyRequest):
    """
    用已知流日命宫记录检验三种年支来源的准确率

    返回每种来源的命中数、准确率与未命中明细；记录条数同样受 MAX_RANGE_DAYS 限制
    """
    service = FlowPalaceVerificationService()
    samples = [sample.model_dump() for sample in request.samples]
    reports = await run_in_executor(
        service.compare_sources,
        samples,
        request.base_palace,
        max_samples=service.record_service.config.max_range_days,
    )
    return {
        'success': True,
        'reports': [report.to_dict() for report in reports],
    }
