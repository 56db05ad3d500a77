# -*- coding: utf-8 -*-
"""
分析器：五行平衡、先天五行、后天五行、调理建议、区间统计
"""

from .element_stats_analyzer import ElementStatsAnalyzer
from .natal_element_analyzer import NatalElementAnalyzer
from .postnatal_element_analyzer import PostnatalElementAnalyzer
from .recommendation_generator import RecommendationContext, RecommendationGenerator
from .wuxing_balance_analyzer import WuxingBalanceAnalyzer

__all__ = [
    'ElementStatsAnalyzer',
    'NatalElementAnalyzer',
    'PostnatalElementAnalyzer',
    'RecommendationContext',
    'RecommendationGenerator',
    'WuxingBalanceAnalyzer',
]
