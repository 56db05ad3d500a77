#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行计算结果值对象

全部为 frozen dataclass，每次调用新建，不跨调用共享。
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from core.data.constants import ELEMENT_ORDER


def element_vector(values: Dict[str, float]) -> Tuple[Tuple[str, float], ...]:
    """按固定五行顺序冻结为元组，缺失的五行补0"""
    return tuple((element, values.get(element, 0)) for element in ELEMENT_ORDER)


@dataclass(frozen=True)
class Pillar:
    """一柱（天干 + 地支）"""
    stem: str
    branch: str

    def __str__(self) -> str:
        return f"{self.stem}{self.branch}"

    def to_dict(self) -> Dict[str, str]:
        return {'stem': self.stem, 'branch': self.branch}


@dataclass(frozen=True)
class Chart:
    """四柱八字

    season_branch 为月令地支（按公历月份查表），用于季节与旺相休囚死，
    与月柱地支分开保存。
    """
    year: Pillar
    month: Pillar
    day: Pillar
    hour: Pillar
    season_branch: str

    @property
    def pillars(self) -> Tuple[Pillar, Pillar, Pillar, Pillar]:
        return (self.year, self.month, self.day, self.hour)

    @property
    def stems(self) -> Tuple[str, ...]:
        return tuple(p.stem for p in self.pillars)

    @property
    def branches(self) -> Tuple[str, ...]:
        return tuple(p.branch for p in self.pillars)

    def __str__(self) -> str:
        return " ".join(str(p) for p in self.pillars)

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {
            'year': self.year.to_dict(),
            'month': self.month.to_dict(),
            'day': self.day.to_dict(),
            'hour': self.hour.to_dict(),
        }


@dataclass(frozen=True)
class SymptomTag:
    """症状标签：severity 为正表示加重该五行，为负表示健康信号"""
    element: str
    category: str
    label: str
    severity: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'element': self.element,
            'category': self.category,
            'label': self.label,
            'severity': self.severity,
        }


@dataclass(frozen=True)
class Constitution:
    """体质判定结果"""
    primary: str
    primary_element: str
    is_deficient: bool
    secondary: Optional[str] = None
    secondary_element: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'primary': self.primary,
            'secondary': self.secondary,
            'primary_element': self.primary_element,
            'secondary_element': self.secondary_element,
            'is_deficient': self.is_deficient,
        }


@dataclass(frozen=True)
class BalanceResult:
    """平衡度与体质分类"""
    balance_score: int
    balance_level: str
    spread: float
    dominant_element: str
    weakest_element: str
    constitution: Constitution
    deficient_elements: Tuple[str, ...] = ()
    excessive_elements: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'balance_score': self.balance_score,
            'balance_level': self.balance_level,
            'spread': self.spread,
            'dominant_element': self.dominant_element,
            'weakest_element': self.weakest_element,
            'constitution': self.constitution.to_dict(),
            'deficient_elements': list(self.deficient_elements),
            'excessive_elements': list(self.excessive_elements),
        }


@dataclass(frozen=True)
class NatalAnalysis:
    """先天五行分析结果"""
    chart: Chart
    day_master: str
    day_master_element: str
    month_branch: str
    season: str
    seasonal_element: str
    twelve_stage: str
    element_scores: Tuple[Tuple[str, float], ...]
    element_percentages: Tuple[Tuple[str, float], ...]
    strength: str
    dominant_element: str
    weakest_element: str

    @property
    def scores(self) -> Dict[str, float]:
        return dict(self.element_scores)

    @property
    def percentages(self) -> Dict[str, float]:
        return dict(self.element_percentages)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'chart': self.chart.to_dict(),
            'day_master': self.day_master,
            'day_master_element': self.day_master_element,
            'month_branch': self.month_branch,
            'season': self.season,
            'seasonal_element': self.seasonal_element,
            'twelve_stage': self.twelve_stage,
            'element_scores': self.scores,
            'element_percentages': self.percentages,
            'strength': self.strength,
            'dominant_element': self.dominant_element,
            'weakest_element': self.weakest_element,
        }


@dataclass(frozen=True)
class PostnatalAnalysis:
    """后天五行分析结果"""
    tags: Tuple[SymptomTag, ...]
    element_scores: Tuple[Tuple[str, float], ...]
    element_percentages: Tuple[Tuple[str, float], ...]
    dominant_element: str
    weakest_element: str
    strengthening: Tuple[str, ...] = ()
    balancing: Tuple[str, ...] = ()

    @property
    def scores(self) -> Dict[str, float]:
        return dict(self.element_scores)

    @property
    def percentages(self) -> Dict[str, float]:
        return dict(self.element_percentages)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'tags': [tag.to_dict() for tag in self.tags],
            'element_scores': self.scores,
            'element_percentages': self.percentages,
            'dominant_element': self.dominant_element,
            'weakest_element': self.weakest_element,
            'recommendations': {
                'strengthening': list(self.strengthening),
                'balancing': list(self.balancing),
            },
        }


@dataclass(frozen=True)
class RecommendationBundle:
    """调理建议（饮食、运动、情绪、季节）"""
    diet: Dict[str, Any] = field(default_factory=dict)
    exercise: Dict[str, Any] = field(default_factory=dict)
    emotional: Dict[str, Any] = field(default_factory=dict)
    seasonal: Dict[str, Any] = field(default_factory=dict)
    balance: Tuple[str, ...] = ()
    constitution_profile: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'diet': self.diet,
            'exercise': self.exercise,
            'emotional': self.emotional,
            'seasonal': self.seasonal,
            'balance': list(self.balance),
            'constitution_profile': self.constitution_profile,
        }


@dataclass(frozen=True)
class DailyRecord:
    """单日五行记录（先天与后天并列，不合并）"""
    date: str
    basic_five_elements: Dict[str, float]
    dynamic_five_elements: Dict[str, float]
    balance_score: int
    primary_constitution: str
    secondary_constitution: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'date': self.date,
            'basic_five_elements': dict(self.basic_five_elements),
            'dynamic_five_elements': dict(self.dynamic_five_elements),
            'balance_score': self.balance_score,
            'primary_constitution': self.primary_constitution,
            'secondary_constitution': self.secondary_constitution,
        }


@dataclass(frozen=True)
class PeriodStats:
    """区间统计摘要"""
    period: str
    window_days: int
    record_count: int
    average_basic: Dict[str, float]
    average_dynamic: Dict[str, float]
    avg_balance: int
    trend_direction: str
    most_frequent_constitution: str
    trends: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'period': self.period,
            'window_days': self.window_days,
            'record_count': self.record_count,
            'average_distribution': {
                'basic': dict(self.average_basic),
                'dynamic': dict(self.average_dynamic),
            },
            'summary': {
                'avg_balance': self.avg_balance,
                'trend_direction': self.trend_direction,
                'most_frequent_constitution': self.most_frequent_constitution,
            },
            'trends': list(self.trends),
        }
