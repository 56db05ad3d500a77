#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
先天五行计分用的关系表：旺相休囚死、十二长生、天干五合、地支六合
"""

from types import MappingProxyType
from typing import Mapping, Tuple

# 基础分
STEM_BASE_SCORE = 15
BRANCH_BASE_SCORE = 10
HIDDEN_STEM_BASE_SCORE = 8

# 旺相休囚死：按与月令五行在相生序上的距离（0-4）取倍数
SEASONAL_STATES: Tuple[str, ...] = ('dominant', 'rising', 'resting', 'constrained', 'depleted')

SEASONAL_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    'dominant': 2.0,
    'rising': 1.2,
    'resting': 0.8,
    'constrained': 0.6,
    'depleted': 0.4,
})

# 十二长生状态权重
TWELVE_STAGE_WEIGHTS: Mapping[str, float] = MappingProxyType({
    '长生': 1.8,
    '沐浴': 1.2,
    '冠带': 1.5,
    '临官': 2.0,
    '帝旺': 2.5,
    '衰': 0.8,
    '病': 0.6,
    '死': 0.4,
    '墓': 0.3,
    '绝': 0.2,
    '胎': 0.5,
    '养': 0.7,
})


def _stage_row(*pairs: str) -> Mapping[str, str]:
    return MappingProxyType(dict(zip(pairs[0::2], pairs[1::2])))


_YANG_WOOD_FIRE_EARTH = _stage_row(
    '寅', '长生', '卯', '沐浴', '辰', '冠带', '巳', '临官', '午', '帝旺', '未', '衰',
    '申', '病', '酉', '死', '戌', '墓', '亥', '绝', '子', '胎', '丑', '养',
)
_YIN_FIRE_EARTH = _stage_row(
    '酉', '长生', '申', '沐浴', '未', '冠带', '午', '临官', '巳', '帝旺', '辰', '衰',
    '卯', '病', '寅', '死', '丑', '墓', '子', '绝', '亥', '胎', '戌', '养',
)

# 日干在各月支的十二长生状态
TWELVE_STAGES: Mapping[str, Mapping[str, str]] = MappingProxyType({
    '甲': _YANG_WOOD_FIRE_EARTH,
    '乙': _stage_row(
        '午', '长生', '巳', '沐浴', '辰', '冠带', '卯', '临官', '寅', '帝旺', '丑', '衰',
        '子', '病', '亥', '死', '戌', '墓', '酉', '绝', '申', '胎', '未', '养',
    ),
    '丙': _YANG_WOOD_FIRE_EARTH,
    '丁': _YIN_FIRE_EARTH,
    '戊': _YANG_WOOD_FIRE_EARTH,
    '己': _YIN_FIRE_EARTH,
    '庚': _stage_row(
        '巳', '长生', '午', '沐浴', '未', '冠带', '申', '临官', '酉', '帝旺', '戌', '衰',
        '亥', '病', '子', '死', '丑', '墓', '寅', '绝', '卯', '胎', '辰', '养',
    ),
    '辛': _stage_row(
        '子', '长生', '亥', '沐浴', '戌', '冠带', '酉', '临官', '申', '帝旺', '未', '衰',
        '午', '病', '巳', '死', '辰', '墓', '卯', '绝', '寅', '胎', '丑', '养',
    ),
    '壬': _stage_row(
        '申', '长生', '酉', '沐浴', '戌', '冠带', '亥', '临官', '子', '帝旺', '丑', '衰',
        '寅', '病', '卯', '死', '辰', '墓', '巳', '绝', '午', '胎', '未', '养',
    ),
    '癸': _stage_row(
        '卯', '长生', '寅', '沐浴', '丑', '冠带', '子', '临官', '亥', '帝旺', '戌', '衰',
        '酉', '病', '申', '死', '未', '墓', '午', '绝', '巳', '胎', '辰', '养',
    ),
})

# 日主生克调整
SAME_ELEMENT_MULTIPLIER = 1.3
PRODUCING_ME_MULTIPLIER = 1.1
CONTROLLING_ME_MULTIPLIER = 0.9
ME_CONTROLLING_MULTIPLIER = 0.95

# 天干五合：(干, 干, 合化五行)
STEM_COMBINATIONS: Tuple[Tuple[str, str, str], ...] = (
    ('甲', '己', 'earth'),
    ('乙', '庚', 'metal'),
    ('丙', '辛', 'water'),
    ('丁', '壬', 'wood'),
    ('戊', '癸', 'fire'),
)
STEM_COMBINATION_BONUS = 1.2

# 地支六合：(支, 支, 合化五行)
BRANCH_COMBINATIONS: Tuple[Tuple[str, str, str], ...] = (
    ('子', '丑', 'earth'),
    ('寅', '亥', 'wood'),
    ('卯', '戌', 'fire'),
    ('辰', '酉', 'metal'),
    ('巳', '申', 'water'),
    ('午', '未', 'earth'),
)
BRANCH_COMBINATION_BONUS = 1.1

# 日主旺衰阈值（相对五行均值）
STRONG_THRESHOLD = 1.3
WEAK_THRESHOLD = 0.7
