# -*- coding: utf-8 -*-
"""
计算模块：四柱排盘与五行生克
"""

from .chart_builder import ChartBuilder

__all__ = ['ChartBuilder']
