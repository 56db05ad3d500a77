#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行计算服务层
负责串联排盘、先天/后天分析、平衡度与调理建议，并格式化输出
"""

import logging
from datetime import date
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from core.analyzers.element_stats_analyzer import ElementStatsAnalyzer
from core.analyzers.natal_element_analyzer import NatalElementAnalyzer
from core.analyzers.postnatal_element_analyzer import PostnatalElementAnalyzer
from core.analyzers.recommendation_generator import RecommendationContext, RecommendationGenerator
from core.analyzers.wuxing_balance_analyzer import WuxingBalanceAnalyzer
from core.calculators.chart_builder import ChartBuilder
from core.config.engine_config import get_config
from core.exceptions import ValidationError
from core.models.five_elements import DailyRecord, PostnatalAnalysis
from core.models.observation import BirthData, ObservationBundle

logger = logging.getLogger(__name__)

BirthInput = Union[BirthData, Mapping[str, Any]]


def _parse_birth(birth: BirthInput) -> BirthData:
    if isinstance(birth, BirthData):
        return birth
    try:
        return BirthData.model_validate(birth)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get('loc', ())) or None
        raise ValidationError(f"出生信息格式错误: {first.get('msg')}", field=field) from e


def _resolve_hour(hour: Optional[int]) -> int:
    if hour is None:
        default_hour = get_config().default_birth_hour
        logger.info(f"⚠️ 未提供出生时辰，使用默认 {default_hour} 时")
        return default_hour
    return hour


def _postnatal_result(analysis: PostnatalAnalysis) -> Dict[str, Any]:
    balance = WuxingBalanceAnalyzer.analyze(analysis.percentages, analysis.scores)
    return {
        'postnatal': analysis.to_dict(),
        'balance': balance.to_dict(),
    }


class FiveElementsService:
    """五行计算服务类"""

    @staticmethod
    def analyze_natal(
        birth_year: int,
        birth_month: int,
        birth_day: int,
        birth_hour: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        先天五行完整分析

        Args:
            birth_year: 出生年
            birth_month: 出生月
            birth_day: 出生日
            birth_hour: 出生时（0-23），缺省使用配置的默认时辰

        Returns:
            dict: chart / natal / balance / recommendations / description
        """
        hour = _resolve_hour(birth_hour)
        chart = ChartBuilder.build(birth_year, birth_month, birth_day, hour)
        natal = NatalElementAnalyzer.analyze(chart)
        balance = WuxingBalanceAnalyzer.analyze(natal.percentages, natal.scores)
        bundle = RecommendationGenerator.generate(RecommendationContext.from_natal(natal, balance))

        return {
            'chart': chart.to_dict(),
            'natal': natal.to_dict(),
            'balance': balance.to_dict(),
            'recommendations': bundle.to_dict(),
            'description': NatalElementAnalyzer.describe(natal),
        }

    @staticmethod
    def analyze_postnatal(bundle: Union[ObservationBundle, Mapping[str, Any], None]) -> Dict[str, Any]:
        """
        后天五行分析（内观记录）

        Returns:
            dict: postnatal / balance / suggestions
        """
        bundle = ObservationBundle.from_payload(bundle)
        result = _postnatal_result(PostnatalElementAnalyzer.analyze_observations(bundle))
        result['suggestions'] = PostnatalElementAnalyzer.daily_suggestions(bundle)
        return result

    @staticmethod
    def analyze_questionnaire(answers: Mapping[str, Any], version: Optional[str] = None) -> Dict[str, Any]:
        """
        后天五行分析（标准问卷）

        Returns:
            dict: postnatal / balance
        """
        return _postnatal_result(PostnatalElementAnalyzer.analyze_questionnaire(answers, version))

    @staticmethod
    def generate_daily_analysis(
        birth: BirthInput,
        bundle: Union[ObservationBundle, Mapping[str, Any], None],
        record_date: Optional[date] = None
    ) -> DailyRecord:
        """
        生成单日五行记录：先天与后天分布并列，平衡度和体质按后天分布计算

        Args:
            birth: 出生信息（BirthData 或等价字典）
            bundle: 当日内观记录
            record_date: 记录日期，默认今天
        """
        birth = _parse_birth(birth)
        hour = _resolve_hour(birth.birth_hour)
        record_date = record_date or date.today()
        logger.info(f"🔍 生成每日五行记录: {record_date.isoformat()}")

        chart = ChartBuilder.build(birth.birth_year, birth.birth_month, birth.birth_day, hour)
        natal = NatalElementAnalyzer.analyze(chart)
        postnatal = PostnatalElementAnalyzer.analyze_observations(bundle)
        balance = WuxingBalanceAnalyzer.analyze(postnatal.percentages, postnatal.scores)

        record = DailyRecord(
            date=record_date.isoformat(),
            basic_five_elements=natal.percentages,
            dynamic_five_elements=postnatal.percentages,
            balance_score=balance.balance_score,
            primary_constitution=balance.constitution.primary,
            secondary_constitution=balance.constitution.secondary,
        )
        logger.info(f"✅ 每日五行记录完成: 平衡度 {record.balance_score}，体质 {record.primary_constitution}")
        return record

    @staticmethod
    def summarize_period(
        records: Iterable[Union[DailyRecord, Mapping[str, Any]]],
        period: str = 'month',
        end_date: Optional[date] = None
    ) -> Optional[Dict[str, Any]]:
        """区间统计，没有记录时返回 None"""
        stats = ElementStatsAnalyzer.summarize(records, period, end_date)
        return stats.to_dict() if stats else None
