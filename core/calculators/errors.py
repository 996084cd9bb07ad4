#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
历法计算异常

所有异常都在检测点抛出，由调用方处理；计算模块内部不做恢复、重试或日志。
继承 ValueError，便于 API 层统一转换为 400 响应。
"""


class CalendarError(ValueError):
    """历法计算异常基类"""


class DateOutOfRange(CalendarError):
    """农历转换无法处理该公历日期（超出支持范围）"""

    def __init__(self, value, message=None):
        self.value = value
        super().__init__(message or f"日期超出支持范围: {value}")


class UnparsableLunarLabel(CalendarError):
    """农历日期字符串无法解析出月份或日数"""

    def __init__(self, label, part):
        self.label = label
        self.part = part
        super().__init__(f"无法从「{label}」提取农历{part}")


class InvalidBranch(CalendarError):
    """不在十二地支中的地支"""

    def __init__(self, branch):
        self.branch = branch
        super().__init__(f"无效的地支: {branch!r}")


class InvalidStem(CalendarError):
    """不在十天干中的天干"""

    def __init__(self, stem):
        self.stem = stem
        super().__init__(f"无效的天干: {stem!r}")


class InvalidLunarValue(CalendarError):
    """农历月份或日数超出定义域（月 1-12，日 1-30）"""

    def __init__(self, field, value):
        self.field = field
        self.value = value
        super().__init__(f"无效的农历{field}: {value!r}")
