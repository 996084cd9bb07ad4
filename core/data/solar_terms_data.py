#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
二十四节气名称

按公历年内顺序排列，以小寒为首。lunar_python 返回简体名称，
这里统一转换为繁体输出。
"""

from types import MappingProxyType

SOLAR_TERM_NAMES = (
    '小寒', '大寒', '立春', '雨水', '驚蟄', '春分',
    '清明', '谷雨', '立夏', '小滿', '芒種', '夏至',
    '小暑', '大暑', '立秋', '處暑', '白露', '秋分',
    '寒露', '霜降', '立冬', '小雪', '大雪', '冬至',
)

# 一年中尚未交任何节气时的默认节气
DEFAULT_SOLAR_TERM = '小寒'

# lunar_python 节气表中的简体名称与拼音键 -> 繁体名称
LIBRARY_TERM_NAMES = MappingProxyType({
    '小寒': '小寒', '大寒': '大寒', '立春': '立春', '雨水': '雨水',
    '惊蛰': '驚蟄', '春分': '春分', '清明': '清明', '谷雨': '谷雨',
    '立夏': '立夏', '小满': '小滿', '芒种': '芒種', '夏至': '夏至',
    '小暑': '小暑', '大暑': '大暑', '立秋': '立秋', '处暑': '處暑',
    '白露': '白露', '秋分': '秋分', '寒露': '寒露', '霜降': '霜降',
    '立冬': '立冬', '小雪': '小雪', '大雪': '大雪', '冬至': '冬至',
    'DONG_ZHI': '冬至', 'XIAO_HAN': '小寒', 'DA_HAN': '大寒',
    'LI_CHUN': '立春', 'YU_SHUI': '雨水', 'JING_ZHE': '驚蟄',
    'DA_XUE': '大雪',
})
