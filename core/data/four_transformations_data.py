#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微斗数天干四化对照表

顺序固定为：化祿、化權、化科、化忌。
庚干四化有争议，这里使用 太陽、武曲、太陰、天同 版本。
"""

from types import MappingProxyType

# 四化名称（固定顺序）
TRANSFORMATION_LABELS = ('祿', '權', '科', '忌')

# 天干 -> (祿, 權, 科, 忌)
FOUR_TRANSFORMATIONS = MappingProxyType({
    '甲': ('廉貞', '破軍', '武曲', '太陽'),
    '乙': ('天機', '天梁', '紫微', '太陰'),
    '丙': ('天同', '天機', '文昌', '廉貞'),
    '丁': ('太陰', '天同', '天機', '巨門'),
    '戊': ('貪狼', '太陰', '右弼', '天機'),
    '己': ('武曲', '貪狼', '天梁', '文曲'),
    '庚': ('太陽', '武曲', '太陰', '天同'),
    '辛': ('巨門', '太陽', '文曲', '文昌'),
    '壬': ('天梁', '紫微', '左輔', '武曲'),
    '癸': ('破軍', '巨門', '太陰', '貪狼'),
})

# 星曜全名 -> 单字缩写
STAR_ABBREVIATIONS = MappingProxyType({
    '廉貞': '廉',
    '破軍': '破',
    '武曲': '武',
    '太陽': '陽',
    '天機': '機',
    '天梁': '梁',
    '紫微': '紫',
    '太陰': '陰',
    '天同': '同',
    '文昌': '昌',
    '巨門': '巨',
    '貪狼': '貪',
    '右弼': '右',
    '文曲': '曲',
    '左輔': '左',
})

# 单字缩写 -> 星曜全名（比缩写表多一个 天府）
STAR_FULL_NAMES = MappingProxyType({
    **{abbr: name for name, abbr in STAR_ABBREVIATIONS.items()},
    '府': '天府',
})
