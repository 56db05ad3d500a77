#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行生克关系模块

相生：木→火→土→金→水→木
相克：木克土、土克水、水克火、火克金、金克木
"""

from types import MappingProxyType
from typing import Literal, Mapping

from core.data.constants import ELEMENT_ORDER
from core.exceptions import InvariantViolationError

# 五行关系类型
RelationType = Literal['same', 'me_producing', 'me_controlling', 'producing_me', 'controlling_me']


def _build_relations() -> Mapping[str, Mapping[str, str]]:
    relations = {}
    for index, element in enumerate(ELEMENT_ORDER):
        relations[element] = MappingProxyType({
            'produces': ELEMENT_ORDER[(index + 1) % 5],
            'controls': ELEMENT_ORDER[(index + 2) % 5],
            'controlled_by': ELEMENT_ORDER[(index + 3) % 5],
            'produced_by': ELEMENT_ORDER[(index + 4) % 5],
        })
    return MappingProxyType(relations)


# 五行生克关系定义
ELEMENT_RELATIONS = _build_relations()


def cycle_distance(source: str, target: str) -> int:
    """target 在相生序上距离 source 的步数（0-4）"""
    return (element_index(target) - element_index(source)) % 5


def element_index(element: str) -> int:
    """五行在固定顺序中的位置"""
    try:
        return ELEMENT_ORDER.index(element)
    except ValueError:
        raise InvariantViolationError(f"未知五行: {element}", symbol=element) from None


def _related(element: str, relation: str) -> str:
    """查生克关系表，未知五行与 element_index 一样抛 InvariantViolationError"""
    element_index(element)
    return ELEMENT_RELATIONS[element][relation]


def get_element_relation(day_element: str, target_element: str) -> RelationType:
    """
    判断五行生克关系

    Args:
        day_element: 日主五行（wood/fire/earth/metal/water）
        target_element: 目标五行

    Returns:
        RelationType: 关系类型
        - 'same': 同元素
        - 'me_producing': 我生
        - 'me_controlling': 我克
        - 'producing_me': 生我
        - 'controlling_me': 克我
    """
    distance = cycle_distance(day_element, target_element)
    if distance == 0:
        return 'same'
    elif distance == 1:
        return 'me_producing'
    elif distance == 2:
        return 'me_controlling'
    elif distance == 3:
        return 'controlling_me'
    return 'producing_me'


def get_producing_element(element: str) -> str:
    """获取被生的元素"""
    return _related(element, 'produces')


def get_controlled_element(element: str) -> str:
    """获取被克的元素"""
    return _related(element, 'controls')


def get_producing_from_element(element: str) -> str:
    """获取生我的元素"""
    return _related(element, 'produced_by')


def get_controlled_by_element(element: str) -> str:
    """获取克我的元素"""
    return _related(element, 'controlled_by')
