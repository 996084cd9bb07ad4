#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
异步执行器工具 - 统一管理线程池执行器

批量生成每日资料是同步的纯计算，放到线程池执行，避免阻塞事件循环
"""

import os
import asyncio
import threading
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Callable, Any

from server.config.env_config import get_env_config

logger = logging.getLogger(__name__)

# 全局线程池执行器（单例）
_executor: Optional[ThreadPoolExecutor] = None
_executor_lock = threading.Lock()


def get_executor() -> ThreadPoolExecutor:
    """
    获取全局线程池执行器（单例模式）

    根据CPU核心数动态调整线程池大小：
    - 本地开发：CPU核心数 * 2，最大16
    - 其他环境：CPU核心数 * 2，最大64

    Returns:
        ThreadPoolExecutor: 线程池执行器实例
    """
    global _executor

    if _executor is None:
        with _executor_lock:
            if _executor is None:
                cpu_count = os.cpu_count() or 4
                if get_env_config().is_local_dev:
                    max_workers = min(cpu_count * 2, 16)
                else:
                    max_workers = min(cpu_count * 2, 64)

                _executor = ThreadPoolExecutor(
                    max_workers=max_workers,
                    thread_name_prefix="calendar_executor"
                )
                logger.info(f"✓ 全局线程池执行器已创建 (max_workers={max_workers})")

    return _executor


async def run_in_executor(func: Callable, *args, **kwargs) -> Any:
    """
    在线程池中执行同步函数（便捷函数）

    Args:
        func: 要执行的同步函数
        *args: 位置参数
        **kwargs: 关键字参数

    Returns:
        函数执行结果
    """
    loop = asyncio.get_running_loop()
    executor = get_executor()
    return await loop.run_in_executor(executor, lambda: func(*args, **kwargs))


def shutdown_executor():
    """关闭线程池（应用退出时调用）"""
    global _executor
    with _executor_lock:
        if _executor is not None:
            _executor.shutdown(wait=False)
            _executor = None
            logger.info("✓ 全局线程池执行器已关闭")
