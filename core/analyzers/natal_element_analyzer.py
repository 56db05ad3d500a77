#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
先天五行分析器 - 根据四柱计算五行力量分布与日主旺衰

计分步骤（顺序固定）：
1. 天干基础分（每干15分）
2. 地支基础分（每支10分）
3. 地支藏干分（8分 × 藏干权重）
4. 月令旺相休囚死（月令地支按公历月份取，不用月柱地支）
5. 日主十二长生状态
6. 日主生克调整
7. 天干五合
8. 地支六合
9. 归一化 + 日主旺衰判断
"""

import logging
from typing import Dict

from core.analyzers.wuxing_balance_analyzer import WuxingBalanceAnalyzer
from core.calculators.bazi_core.element_relations import cycle_distance, get_element_relation
from core.data.constants import (
    BRANCH_ELEMENTS,
    BRANCH_HIDDEN_STEMS,
    BRANCH_SEASONS,
    ELEMENT_NAMES,
    ELEMENT_ORDER,
    STEM_ELEMENTS,
    STRENGTH_NAMES,
)
from core.data.relations import (
    BRANCH_BASE_SCORE,
    BRANCH_COMBINATION_BONUS,
    BRANCH_COMBINATIONS,
    CONTROLLING_ME_MULTIPLIER,
    HIDDEN_STEM_BASE_SCORE,
    ME_CONTROLLING_MULTIPLIER,
    PRODUCING_ME_MULTIPLIER,
    SAME_ELEMENT_MULTIPLIER,
    SEASONAL_MULTIPLIERS,
    SEASONAL_STATES,
    STEM_BASE_SCORE,
    STEM_COMBINATION_BONUS,
    STEM_COMBINATIONS,
    STRONG_THRESHOLD,
    TWELVE_STAGE_WEIGHTS,
    TWELVE_STAGES,
    WEAK_THRESHOLD,
)
from core.exceptions import InvariantViolationError
from core.models.five_elements import Chart, NatalAnalysis, element_vector

logger = logging.getLogger(__name__)

# 日主与目标五行关系 -> 倍数（我生者不调整）
_RELATION_MULTIPLIERS = {
    'same': SAME_ELEMENT_MULTIPLIER,
    'producing_me': PRODUCING_ME_MULTIPLIER,
    'controlling_me': CONTROLLING_ME_MULTIPLIER,
    'me_controlling': ME_CONTROLLING_MULTIPLIER,
}


def _stem_element(stem: str) -> str:
    element = STEM_ELEMENTS.get(stem)
    if element is None:
        raise InvariantViolationError(f"未知天干: {stem}", symbol=stem)
    return element


def _branch_element(branch: str) -> str:
    element = BRANCH_ELEMENTS.get(branch)
    if element is None:
        raise InvariantViolationError(f"未知地支: {branch}", symbol=branch)
    return element


class NatalElementAnalyzer:
    """先天五行分析器"""

    @staticmethod
    def get_season(month_branch: str) -> str:
        """月支 -> 季节（春季/夏季/秋季/冬季）"""
        season = BRANCH_SEASONS.get(month_branch)
        if season is None:
            raise InvariantViolationError(f"未知月支: {month_branch}", symbol=month_branch)
        return season

    @staticmethod
    def get_twelve_stage(day_master: str, month_branch: str) -> str:
        """日干在月支的十二长生状态"""
        stages = TWELVE_STAGES.get(day_master)
        if stages is None or month_branch not in stages:
            raise InvariantViolationError(f"十二长生表缺少: {day_master}{month_branch}", symbol=day_master)
        return stages[month_branch]

    @staticmethod
    def calculate_element_scores(chart: Chart) -> Dict[str, float]:
        """
        计算五行原始分数（归一化前）

        Args:
            chart: 四柱

        Returns:
            五个键齐全的分数字典
        """
        scores = {element: 0.0 for element in ELEMENT_ORDER}
        day_master = chart.day.stem
        day_element = _stem_element(day_master)
        month_branch = chart.season_branch

        # 1-2. 天干、地支基础分
        for stem in chart.stems:
            scores[_stem_element(stem)] += STEM_BASE_SCORE
        for branch in chart.branches:
            scores[_branch_element(branch)] += BRANCH_BASE_SCORE

        # 3. 藏干
        for branch in chart.branches:
            for hidden_stem, weight in BRANCH_HIDDEN_STEMS[branch]:
                scores[_stem_element(hidden_stem)] += HIDDEN_STEM_BASE_SCORE * weight
        logger.debug(f"📊 步骤1-3 基础分: {scores}")

        # 4. 月令旺相休囚死
        seasonal_element = _branch_element(month_branch)
        for element in ELEMENT_ORDER:
            state = SEASONAL_STATES[cycle_distance(seasonal_element, element)]
            scores[element] *= SEASONAL_MULTIPLIERS[state]
        logger.debug(f"📊 步骤4 月令({month_branch}): {scores}")

        # 5. 十二长生
        stage = NatalElementAnalyzer.get_twelve_stage(day_master, month_branch)
        scores[day_element] *= TWELVE_STAGE_WEIGHTS[stage]
        logger.debug(f"📊 步骤5 十二长生({day_master}@{month_branch}={stage}): {scores}")

        # 6. 生克
        for element in ELEMENT_ORDER:
            multiplier = _RELATION_MULTIPLIERS.get(get_element_relation(day_element, element))
            if multiplier is not None:
                scores[element] *= multiplier

        # 7-8. 合化
        stems = set(chart.stems)
        for first, second, element in STEM_COMBINATIONS:
            if first in stems and second in stems:
                scores[element] *= STEM_COMBINATION_BONUS
        branches = set(chart.branches)
        for first, second, element in BRANCH_COMBINATIONS:
            if first in branches and second in branches:
                scores[element] *= BRANCH_COMBINATION_BONUS
        logger.debug(f"📊 步骤6-8 生克与合化: {scores}")

        return scores

    @staticmethod
    def determine_strength(scores: Dict[str, float], day_element: str, seasonal_element: str) -> str:
        """
        日主旺衰判断（使用归一化前的分数）

        - 日主五行当令且分数 > 均值 × 1.3 -> strong
        - 日主五行不当令且分数 < 均值 × 0.7 -> weak
        - 其余 -> balanced
        """
        mean = sum(scores.get(element, 0) for element in ELEMENT_ORDER) / len(ELEMENT_ORDER)
        day_score = scores.get(day_element, 0)
        in_season = day_element == seasonal_element
        if in_season and day_score > mean * STRONG_THRESHOLD:
            return 'strong'
        if not in_season and day_score < mean * WEAK_THRESHOLD:
            return 'weak'
        return 'balanced'

    @staticmethod
    def analyze(chart: Chart) -> NatalAnalysis:
        """
        先天五行分析

        Args:
            chart: 四柱（由 ChartBuilder.build 生成）

        Returns:
            NatalAnalysis: 分数、百分比、季节、日主旺衰等
        """
        logger.info(f"🔍 先天五行分析: {chart}")

        day_master = chart.day.stem
        day_element = _stem_element(day_master)
        month_branch = chart.season_branch
        seasonal_element = _branch_element(month_branch)

        scores = NatalElementAnalyzer.calculate_element_scores(chart)
        percentages = WuxingBalanceAnalyzer.normalize_scores(scores)
        strength = NatalElementAnalyzer.determine_strength(scores, day_element, seasonal_element)

        analysis = NatalAnalysis(
            chart=chart,
            day_master=day_master,
            day_master_element=day_element,
            month_branch=month_branch,
            season=NatalElementAnalyzer.get_season(month_branch),
            seasonal_element=seasonal_element,
            twelve_stage=NatalElementAnalyzer.get_twelve_stage(day_master, month_branch),
            element_scores=element_vector(scores),
            element_percentages=element_vector(percentages),
            strength=strength,
            dominant_element=WuxingBalanceAnalyzer.dominant_element(percentages),
            weakest_element=WuxingBalanceAnalyzer.weakest_element(percentages),
        )
        logger.info(f"✅ 先天五行分析完成: 日主{day_master}({day_element}) {strength}，{percentages}")
        return analysis

    @staticmethod
    def describe(analysis: NatalAnalysis) -> str:
        """生成先天五行文字报告"""
        names = ELEMENT_NAMES
        percentages = analysis.percentages
        lines = [
            "=== 先天五行分析报告 ===",
            "",
            f"八字：{analysis.chart}",
            "",
            f"日主：{analysis.day_master}（{names[analysis.day_master_element]}）",
            f"出生季节：{analysis.season}",
            f"日主状态：{STRENGTH_NAMES[analysis.strength]}",
            "",
            "=== 先天五行力量分布 ===",
        ]
        lines.extend(f"{names[element]}：{percentages[element]}%" for element in ELEMENT_ORDER)

        dominant, weakest = analysis.dominant_element, analysis.weakest_element
        lines.extend([
            "",
            "=== 五行平衡建议 ===",
            f"最强五行：{names[dominant]} ({percentages[dominant]}%)",
            f"最弱五行：{names[weakest]} ({percentages[weakest]}%)",
        ])
        if analysis.strength == 'strong':
            lines.append(f"日主强旺，建议补充{names[weakest]}等元素来平衡。")
        elif analysis.strength == 'weak':
            lines.append(f"日主衰弱，建议加强{names[analysis.day_master_element]}等元素。")
        else:
            lines.append("五行相对平衡，保持现有状态即可。")
        return "\n".join(lines)
