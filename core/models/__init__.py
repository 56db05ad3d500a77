# -*- coding: utf-8 -*-
"""
数据模型：结果值对象（dataclass）与输入模型（pydantic）
"""

from .five_elements import (
    BalanceResult,
    Chart,
    Constitution,
    DailyRecord,
    NatalAnalysis,
    PeriodStats,
    Pillar,
    PostnatalAnalysis,
    RecommendationBundle,
    SymptomTag,
)
from .observation import (
    BirthData,
    EmotionEntry,
    MealEntry,
    ObservationBundle,
    SleepRecord,
    SymptomEntry,
)

__all__ = [
    'BalanceResult', 'Chart', 'Constitution', 'DailyRecord', 'NatalAnalysis',
    'PeriodStats', 'Pillar', 'PostnatalAnalysis', 'RecommendationBundle', 'SymptomTag',
    'BirthData', 'EmotionEntry', 'MealEntry', 'ObservationBundle', 'SleepRecord',
    'SymptomEntry',
]
