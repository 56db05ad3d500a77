# -*- coding: utf-8 -*-
"""
五行计算引擎

- core.calculators: 四柱排盘
- core.analyzers: 先天五行、后天五行、平衡度、调理建议、区间统计
- core.services: 对外统一入口
"""

__version__ = "1.0.0"
