#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
天干地支基础数据

十天干、十二地支、农历月份对应地支、月份名称、十二宫名称。
所有表均为只读常量（tuple / MappingProxyType），进程启动时初始化一次。
"""

from types import MappingProxyType

# 十天干（循环顺序）
HEAVENLY_STEMS = ('甲', '乙', '丙', '丁', '戊', '己', '庚', '辛', '壬', '癸')

# 十二地支（循环顺序，索引 0..11）
EARTHLY_BRANCHES = ('子', '丑', '寅', '卯', '辰', '巳', '午', '未', '申', '酉', '戌', '亥')

# 农历月份对应地支：正月建寅，依次递增，冬月建子，腊月建丑
LUNAR_MONTH_BRANCHES = MappingProxyType({
    1: '寅',   # 正月
    2: '卯',   # 二月
    3: '辰',   # 三月
    4: '巳',   # 四月
    5: '午',   # 五月
    6: '未',   # 六月
    7: '申',   # 七月
    8: '酉',   # 八月
    9: '戌',   # 九月
    10: '亥',  # 十月
    11: '子',  # 十一月
    12: '丑',  # 十二月
})

# 农历日期标签中使用的数字月名（如：乙巳十一月十三）
LUNAR_MONTH_NUMERAL_NAMES = MappingProxyType({
    1: '正月', 2: '二月', 3: '三月', 4: '四月', 5: '五月', 6: '六月',
    7: '七月', 8: '八月', 9: '九月', 10: '十月', 11: '十一月', 12: '十二月',
})

# 农历日名，下标即日数（0 不使用）
LUNAR_DAY_NAMES = (
    '',
    '初一', '初二', '初三', '初四', '初五', '初六', '初七', '初八', '初九', '初十',
    '十一', '十二', '十三', '十四', '十五', '十六', '十七', '十八', '十九', '二十',
    '廿一', '廿二', '廿三', '廿四', '廿五', '廿六', '廿七', '廿八', '廿九', '三十',
)

# 紫微流月使用的传统月名
FLOW_MONTH_NAMES = MappingProxyType({
    1: '正月', 2: '二月', 3: '三月', 4: '四月', 5: '五月', 6: '六月',
    7: '七月', 8: '八月', 9: '九月', 10: '十月', 11: '冬月', 12: '臘月',
})

# 闰月前缀
LEAP_MONTH_PREFIX = '閏'

# 星期（Python weekday(): 0=周一）
WEEKDAY_NAMES = ('一', '二', '三', '四', '五', '六', '日')

# 紫微斗数十二宫（自命宫起逆行排列）
PALACE_NAMES = ('命宮', '兄弟', '夫妻', '子女', '財帛', '疾厄',
                '遷移', '朋友', '官祿', '田宅', '福德', '父母')

# 农历日期字符串中的月名 -> 月份，按匹配优先级排列：
# 「十二月」「十一月」「十月」必须排在「二月」「一月」之前
LUNAR_MONTH_LABEL_PATTERNS = (
    ('十二月', 12),
    ('十一月', 11),
    ('十月', 10),
    ('臘月', 12),
    ('腊月', 12),
    ('冬月', 11),
    ('正月', 1),
    ('一月', 1),
    ('二月', 2),
    ('三月', 3),
    ('四月', 4),
    ('五月', 5),
    ('六月', 6),
    ('七月', 7),
    ('八月', 8),
    ('九月', 9),
)

# 农历日期字符串中的日名 -> 日数，按匹配优先级排列：二十/三十段、十几段、初几段
LUNAR_DAY_LABEL_PATTERNS = (
    ('三十', 30),
    ('廿九', 29),
    ('廿八', 28),
    ('廿七', 27),
    ('廿六', 26),
    ('廿五', 25),
    ('廿四', 24),
    ('廿三', 23),
    ('廿二', 22),
    ('廿一', 21),
    ('二十', 20),
    ('十九', 19),
    ('十八', 18),
    ('十七', 17),
    ('十六', 16),
    ('十五', 15),
    ('十四', 14),
    ('十三', 13),
    ('十二', 12),
    ('十一', 11),
    ('初十', 10),
    ('初九', 9),
    ('初八', 8),
    ('初七', 7),
    ('初六', 6),
    ('初五', 5),
    ('初四', 4),
    ('初三', 3),
    ('初二', 2),
    ('初一', 1),
)
