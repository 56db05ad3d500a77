#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
调理建议生成器

纯查表：按（主导五行, 最弱五行, 日主旺衰, 当前季节）选取饮食、运动、情绪、季节建议，
不做任何计分。
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from core.data.advice_tables import (
    CONSTITUTION_PROFILES,
    ELEMENT_ADVICE,
    ELEMENT_FOODS,
    EMOTIONAL_GUIDANCE,
    EXERCISE_RECOMMENDATIONS,
    FOOD_RECOMMENDATIONS,
    SEASONAL_ADJUSTMENTS,
    STRENGTH_INTENSITY,
)
from core.data.constants import ELEMENT_NAMES, ELEMENT_ORDER, SEASON_KEYS
from core.data.symptom_library import POSTNATAL_ADVICE
from core.exceptions import ValidationError
from core.models.five_elements import BalanceResult, NatalAnalysis, RecommendationBundle

logger = logging.getLogger(__name__)

SEASON_ORDER = ('spring', 'summer', 'autumn', 'winter')


@dataclass(frozen=True)
class RecommendationContext:
    """建议查表的键"""
    dominant_element: str
    weakest_element: str
    strength: str = 'balanced'
    season: Optional[str] = None
    balance_level: Optional[str] = None

    @classmethod
    def from_natal(cls, analysis: NatalAnalysis, balance: Optional[BalanceResult] = None) -> 'RecommendationContext':
        return cls(
            dominant_element=analysis.dominant_element,
            weakest_element=analysis.weakest_element,
            strength=analysis.strength,
            season=analysis.season,
            balance_level=balance.balance_level if balance else None,
        )


def _season_key(season: Optional[str]) -> Optional[str]:
    """'春季' / 'spring' -> 'spring'"""
    if season is None:
        return None
    if season in SEASON_ORDER:
        return season
    key = SEASON_KEYS.get(season)
    if key is None:
        raise ValidationError(f"未知季节: {season}", field='season')
    return key


def _check_element(element: str, field: str) -> None:
    if element not in ELEMENT_ORDER:
        raise ValidationError(f"未知五行: {element}", field=field)


class RecommendationGenerator:
    """调理建议生成器"""

    @staticmethod
    def diet(dominant: str, weakest: str) -> Dict[str, Any]:
        table = FOOD_RECOMMENDATIONS[dominant]
        foods_to_add = list(table['add'])
        for food in ELEMENT_FOODS[weakest]:
            if food not in foods_to_add:
                foods_to_add.append(food)
        return {
            'foods_to_add': foods_to_add,
            'foods_to_reduce': list(table['reduce']),
            'cooking_methods': list(table['methods']),
            'meal_timing': table['timing'],
        }

    @staticmethod
    def exercise(dominant: str, strength: str) -> Dict[str, Any]:
        table = EXERCISE_RECOMMENDATIONS[dominant]
        return {
            'best_exercises': list(table['best']),
            'avoid_exercises': list(table['avoid']),
            'optimal_time': table['time'],
            'intensity': STRENGTH_INTENSITY.get(strength, table['intensity']),
        }

    @staticmethod
    def emotional(dominant: str) -> Dict[str, Any]:
        table = EMOTIONAL_GUIDANCE[dominant]
        return {
            'emotional_tendencies': list(table['emotional_tendencies']),
            'stress_management': list(table['stress_management']),
            'meditation_focus': table['meditation_focus'],
        }

    @staticmethod
    def seasonal(dominant: str, season: Optional[str]) -> Dict[str, Any]:
        table = SEASONAL_ADJUSTMENTS[dominant]
        key = _season_key(season)
        return {
            'current_season': key,
            'current': table[key] if key else None,
            **{name: table[name] for name in SEASON_ORDER},
        }

    @staticmethod
    def balance_recommendations(level: Optional[str], dominant: str, weakest: str) -> List[str]:
        """按平衡等级给出总体建议"""
        if level is None:
            return []
        dominant_name = ELEMENT_NAMES[dominant]
        weakest_name = ELEMENT_NAMES[weakest]
        if level in ('excellent', 'good'):
            return ['五行分布相对均衡，继续保持良好的生活习惯', '定期进行五行能量检测，保持动态平衡']
        elif level == 'fair':
            return [f'{weakest_name}元素相对较弱，建议加强相关方面的调理', f'适当减少{dominant_name}元素的过度消耗']
        elif level == 'poor':
            return [
                f'需要重点补充{weakest_name}元素，调整生活作息',
                f'避免{dominant_name}元素的过度使用，寻求平衡',
                '建议咨询专业的五行调理师进行个性化指导',
            ]
        return [
            f'五行严重失衡，{weakest_name}元素极度缺乏',
            f'{dominant_name}元素过度强旺，需要重点调理',
            '强烈建议进行系统的五行能量调理',
        ]

    @staticmethod
    def constitution_profile(dominant: str) -> Dict[str, Any]:
        profile = CONSTITUTION_PROFILES[dominant]
        return {
            'name': profile['name'],
            'characteristics': list(profile['characteristics']),
            'strengths': list(profile['strengths']),
            'weaknesses': list(profile['weaknesses']),
        }

    @staticmethod
    def generate(context: RecommendationContext) -> RecommendationBundle:
        """
        生成调理建议

        Args:
            context: 主导五行、最弱五行、日主旺衰、季节（可选）、平衡等级（可选）

        Returns:
            RecommendationBundle: 饮食、运动、情绪、季节、平衡建议与体质画像
        """
        _check_element(context.dominant_element, 'dominant_element')
        _check_element(context.weakest_element, 'weakest_element')
        dominant, weakest = context.dominant_element, context.weakest_element
        logger.debug(f"📊 生成调理建议: 主导 {dominant}，最弱 {weakest}，{context.strength}，{context.season}")

        return RecommendationBundle(
            diet=RecommendationGenerator.diet(dominant, weakest),
            exercise=RecommendationGenerator.exercise(dominant, context.strength),
            emotional=RecommendationGenerator.emotional(dominant),
            seasonal=RecommendationGenerator.seasonal(dominant, context.season),
            balance=tuple(RecommendationGenerator.balance_recommendations(context.balance_level, dominant, weakest)),
            constitution_profile=RecommendationGenerator.constitution_profile(dominant),
        )

    @staticmethod
    def element_advice(element: str) -> Dict[str, Any]:
        """单一五行的宜忌、平衡/失衡表现与穴位"""
        _check_element(element, 'element')
        advice = ELEMENT_ADVICE[element]
        return {
            key: list(value) if isinstance(value, tuple) else value
            for key, value in advice.items()
        }

    @staticmethod
    def postnatal_advice(dominant: str) -> Dict[str, List[str]]:
        """后天主导五行 -> 补益与平衡建议"""
        _check_element(dominant, 'dominant_element')
        advice = POSTNATAL_ADVICE[dominant]
        return {
            'strengthening': list(advice['strengthening']),
            'balancing': list(advice['balancing']),
        }
