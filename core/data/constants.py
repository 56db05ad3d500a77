#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
天干地支基础常量

所有查表数据在导入时构建一次，之后只读（MappingProxyType / tuple），
供排盘、先天五行、后天五行各模块共用。
"""

from types import MappingProxyType
from typing import Mapping, Tuple

# 五行（固定优先级顺序，同分时按此顺序取前者）
ELEMENT_ORDER: Tuple[str, ...] = ('wood', 'fire', 'earth', 'metal', 'water')

ELEMENT_NAMES: Mapping[str, str] = MappingProxyType({
    'wood': '木',
    'fire': '火',
    'earth': '土',
    'metal': '金',
    'water': '水',
})

# 天干、地支
HEAVENLY_STEMS: Tuple[str, ...] = ('甲', '乙', '丙', '丁', '戊', '己', '庚', '辛', '壬', '癸')
EARTHLY_BRANCHES: Tuple[str, ...] = ('子', '丑', '寅', '卯', '辰', '巳', '午', '未', '申', '酉', '戌', '亥')

# 月令：公历月份 -> 地支（2月寅 … 12月子，1月丑）；与月柱地支 (月 + 2) mod 12 分开使用
MONTH_BRANCHES: Mapping[int, str] = MappingProxyType({
    month: EARTHLY_BRANCHES[month % 12] for month in range(1, 13)
})

STEM_ELEMENTS: Mapping[str, str] = MappingProxyType({
    '甲': 'wood', '乙': 'wood',
    '丙': 'fire', '丁': 'fire',
    '戊': 'earth', '己': 'earth',
    '庚': 'metal', '辛': 'metal',
    '壬': 'water', '癸': 'water',
})

BRANCH_ELEMENTS: Mapping[str, str] = MappingProxyType({
    '子': 'water', '丑': 'earth',
    '寅': 'wood', '卯': 'wood',
    '辰': 'earth', '巳': 'fire',
    '午': 'fire', '未': 'earth',
    '申': 'metal', '酉': 'metal',
    '戌': 'earth', '亥': 'water',
})

# 地支藏干权重（本气在前，权重不要求合计为1）
BRANCH_HIDDEN_STEMS: Mapping[str, Tuple[Tuple[str, float], ...]] = MappingProxyType({
    '子': (('癸', 0.8),),
    '丑': (('己', 0.5), ('癸', 0.3), ('辛', 0.2)),
    '寅': (('甲', 0.6), ('丙', 0.3), ('戊', 0.1)),
    '卯': (('乙', 1.0),),
    '辰': (('戊', 0.5), ('乙', 0.3), ('癸', 0.2)),
    '巳': (('丙', 0.6), ('庚', 0.2), ('戊', 0.2)),
    '午': (('丁', 0.7), ('己', 0.3)),
    '未': (('己', 0.5), ('丁', 0.3), ('乙', 0.2)),
    '申': (('庚', 0.6), ('壬', 0.2), ('戊', 0.2)),
    '酉': (('辛', 1.0),),
    '戌': (('戊', 0.5), ('辛', 0.3), ('丁', 0.2)),
    '亥': (('壬', 0.7), ('甲', 0.3)),
})

# 时干起点（按日干查），保持原有简化规则
HOUR_STEM_START: Mapping[str, str] = MappingProxyType({
    '甲': '己', '乙': '庚', '丙': '辛', '丁': '壬', '戊': '癸',
    '己': '甲', '庚': '乙', '辛': '丙', '壬': '丁', '癸': '戊',
})

# 日柱起算日：1900-01-31 记为甲子（干支索引均为0）
DAY_PILLAR_EPOCH = (1900, 1, 31)

# 月支 -> 季节
BRANCH_SEASONS: Mapping[str, str] = MappingProxyType({
    '寅': '春季', '卯': '春季', '辰': '春季',
    '巳': '夏季', '午': '夏季', '未': '夏季',
    '申': '秋季', '酉': '秋季', '戌': '秋季',
    '亥': '冬季', '子': '冬季', '丑': '冬季',
})

SEASON_KEYS: Mapping[str, str] = MappingProxyType({
    '春季': 'spring',
    '夏季': 'summer',
    '秋季': 'autumn',
    '冬季': 'winter',
})

PILLAR_NAMES: Tuple[str, ...] = ('year', 'month', 'day', 'hour')

STRENGTH_NAMES: Mapping[str, str] = MappingProxyType({
    'strong': '强旺',
    'weak': '衰弱',
    'balanced': '平衡',
})
