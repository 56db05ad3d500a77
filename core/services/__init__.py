# -*- coding: utf-8 -*-
"""
服务层
"""

from .five_elements_service import FiveElementsService

__all__ = ['FiveElementsService']
