#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行平衡分析器（先天、后天共用）

功能：
- 五行分数归一化为百分比（四舍五入保留1位小数，总分为0时均分20.0）
- 主导/最弱五行（同分按 木火土金水 顺序取前者）
- 平衡度评分（0-100）与平衡等级
- 主次体质判定（虚/旺）

先天、后天两条流水线都调用这里，不各自实现。
"""

import logging
import math
from typing import Dict, List, Optional

from core.data.advice_tables import (
    BALANCE_LEVEL_FALLBACK,
    BALANCE_LEVELS,
    CONSTITUTION_TYPES,
    DEFICIENT_PERCENTAGE,
    EXCESSIVE_PERCENTAGE,
)
from core.data.constants import ELEMENT_ORDER
from core.models.five_elements import BalanceResult, Constitution

logger = logging.getLogger(__name__)

EVEN_PERCENTAGE = 20.0


def round_half_up(value: float, digits: int = 1) -> float:
    """四舍五入（0.5 进位，不用银行家舍入）"""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


class WuxingBalanceAnalyzer:
    """五行平衡分析器"""

    @staticmethod
    def normalize_scores(scores: Dict[str, float]) -> Dict[str, float]:
        """
        五行分数 -> 百分比

        Args:
            scores: 五行分数，如 {"wood": 30.5, "fire": 12, ...}，缺失的五行按0计

        Returns:
            五个键齐全的百分比字典，总和为 100.0 ± 0.2
        """
        total = sum(scores.get(element, 0) for element in ELEMENT_ORDER)
        if total <= 0:
            logger.warning("⚠️ 五行总分为0，按均分处理")
            return {element: EVEN_PERCENTAGE for element in ELEMENT_ORDER}
        return {
            element: math.floor(scores.get(element, 0) / total * 1000 + 0.5) / 10
            for element in ELEMENT_ORDER
        }

    @staticmethod
    def rank_elements(values: Dict[str, float]) -> List[str]:
        """按数值从高到低排序，同值保持 木火土金水 的顺序"""
        return sorted(ELEMENT_ORDER, key=lambda element: -values.get(element, 0))

    @staticmethod
    def dominant_element(values: Dict[str, float]) -> str:
        """数值最高的五行"""
        return WuxingBalanceAnalyzer.rank_elements(values)[0]

    @staticmethod
    def weakest_element(values: Dict[str, float]) -> str:
        """数值最低的五行（同值取顺序靠前者）"""
        return min(ELEMENT_ORDER, key=lambda element: values.get(element, 0))

    @staticmethod
    def calculate_spread(percentages: Dict[str, float]) -> float:
        values = [percentages.get(element, 0) for element in ELEMENT_ORDER]
        return round_half_up(max(values) - min(values))

    @staticmethod
    def calculate_balance_score(percentages: Dict[str, float]) -> int:
        """
        平衡度 = max(0, 100 - 10 × (最高占比 - 最低占比))，取整

        五行完全均分（差值为0）时为100，差值 ≥ 10 个百分点时为0。
        """
        spread = WuxingBalanceAnalyzer.calculate_spread(percentages)
        score = max(0.0, 100.0 - 10.0 * spread)
        return min(100, int(math.floor(score + 0.5)))

    @staticmethod
    def classify_balance_level(spread: float) -> str:
        """按最高最低占比差划分等级：excellent / good / fair / poor / critical"""
        for upper, level in BALANCE_LEVELS:
            if spread <= upper:
                return level
        return BALANCE_LEVEL_FALLBACK

    @staticmethod
    def determine_constitution(
        percentages: Dict[str, float],
        raw_scores: Optional[Dict[str, float]] = None
    ) -> Constitution:
        """
        主次体质判定

        Args:
            percentages: 五行百分比
            raw_scores: 归一化前的原始分数；缺省时用百分比代替

        Returns:
            Constitution: 主体质为占比最高的五行；次体质为占比第二的五行，
            仅当其原始分数不为0时给出。主五行原始分数低于五行均值时判为虚（yin），
            否则为旺（yang），次体质沿用同一虚旺标记。
        """
        scores = raw_scores if raw_scores is not None else percentages
        ranked = WuxingBalanceAnalyzer.rank_elements(percentages)
        primary_element, second_element = ranked[0], ranked[1]

        mean = sum(scores.get(element, 0) for element in ELEMENT_ORDER) / len(ELEMENT_ORDER)
        is_deficient = scores.get(primary_element, 0) < mean
        suffix = 'yin' if is_deficient else 'yang'

        secondary = None
        secondary_element = None
        if scores.get(second_element, 0) != 0:
            secondary_element = second_element
            secondary = CONSTITUTION_TYPES[f"{second_element}_{suffix}"]

        return Constitution(
            primary=CONSTITUTION_TYPES[f"{primary_element}_{suffix}"],
            primary_element=primary_element,
            is_deficient=is_deficient,
            secondary=secondary,
            secondary_element=secondary_element,
        )

    @staticmethod
    def analyze(
        percentages: Dict[str, float],
        raw_scores: Optional[Dict[str, float]] = None
    ) -> BalanceResult:
        """
        平衡度与体质综合分析

        Args:
            percentages: 五行百分比，如 {"wood": 24.1, "fire": 18.0, ...}
            raw_scores: 归一化前的原始分数（可选）
        """
        spread = WuxingBalanceAnalyzer.calculate_spread(percentages)
        balance_score = WuxingBalanceAnalyzer.calculate_balance_score(percentages)
        level = WuxingBalanceAnalyzer.classify_balance_level(spread)
        constitution = WuxingBalanceAnalyzer.determine_constitution(percentages, raw_scores)

        deficient = tuple(e for e in ELEMENT_ORDER if percentages.get(e, 0) < DEFICIENT_PERCENTAGE)
        excessive = tuple(e for e in ELEMENT_ORDER if percentages.get(e, 0) > EXCESSIVE_PERCENTAGE)

        logger.debug(f"📊 平衡度: {balance_score} ({level})，差值 {spread}，体质 {constitution.primary}")

        return BalanceResult(
            balance_score=balance_score,
            balance_level=level,
            spread=spread,
            dominant_element=WuxingBalanceAnalyzer.dominant_element(percentages),
            weakest_element=WuxingBalanceAnalyzer.weakest_element(percentages),
            constitution=constitution,
            deficient_elements=deficient,
            excessive_elements=excessive,
        )


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    sample = WuxingBalanceAnalyzer.normalize_scores(
        {'wood': 30, 'fire': 20, 'earth': 25, 'metal': 15, 'water': 10}
    )
    print(f"百分比: {sample}")
    print(f"分析结果: {WuxingBalanceAnalyzer.analyze(sample).to_dict()}")
