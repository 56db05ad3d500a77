#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字核心计算模块

提供五行生克关系的常量与计算函数。
"""

from .element_relations import (
    ELEMENT_RELATIONS,
    cycle_distance,
    element_index,
    get_controlled_by_element,
    get_controlled_element,
    get_element_relation,
    get_producing_element,
    get_producing_from_element,
)

__all__ = [
    'ELEMENT_RELATIONS',
    'cycle_distance',
    'element_index',
    'get_element_relation',
    'get_producing_element',
    'get_controlled_element',
    'get_producing_from_element',
    'get_controlled_by_element',
]
