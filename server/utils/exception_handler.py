"""
统一异常处理

历法计算异常（CalendarError）和批量请求参数错误（BatchRequestError）是调用方输入问题，返回 400；
其他未处理异常记录堆栈，返回 500，生产环境不暴露详细信息。
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from core.calculators.errors import CalendarError
from server.config.env_config import is_production
from server.services.daily_record_service import BatchRequestError

logger = logging.getLogger(__name__)


def _bad_request(exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": str(exc),
            "error_type": type(exc).__name__,
        }
    )


async def calendar_error_handler(request: Request, exc: CalendarError) -> JSONResponse:
    """历法计算错误 -> 400"""
    logger.warning(f"历法计算错误 [{request.url.path}]: {exc}")
    return _bad_request(exc)


async def batch_request_error_handler(request: Request, exc: BatchRequestError) -> JSONResponse:
    """批量请求参数错误（区间颠倒、超过上限） -> 400，与历法错误使用同一响应结构"""
    logger.warning(f"批量请求参数错误 [{request.url.path}]: {exc}")
    return _bad_request(exc)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """其他未处理异常 -> 500"""
    logger.error(f"未处理的异常 [{request.url.path}]: {exc}", exc_info=exc)

    # 生产环境不暴露详细错误信息
    if is_production():
        error_detail = "服务器内部错误，请稍后重试"
    else:
        error_detail = f"错误: {exc}"

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": error_detail,
            "error_type": "internal_error",
        }
    )


def register_exception_handlers(app: FastAPI):
    """注册全局异常处理器"""
    app.add_exception_handler(CalendarError, calendar_error_handler)
    app.add_exception_handler(BatchRequestError, batch_request_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
