#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行区间统计 - 汇总一段时间内的每日五行记录

先天（basic）与后天（dynamic）分布分别求平均，不合并。
"""

import logging
from collections import Counter
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from core.analyzers.wuxing_balance_analyzer import round_half_up
from core.data.constants import ELEMENT_ORDER
from core.exceptions import ValidationError
from core.models.five_elements import DailyRecord, PeriodStats

logger = logging.getLogger(__name__)

PERIOD_DAYS = {
    'week': 7,
    'month': 30,
    'quarter': 90,
}
DEFAULT_PERIOD_DAYS = 30

# 后半段平均平衡度与前半段相差超过该值才算有趋势
TREND_THRESHOLD = 5

UNKNOWN_CONSTITUTION = '未知'

RecordInput = Union[DailyRecord, Mapping[str, Any]]


def _to_record(item: RecordInput) -> DailyRecord:
    if isinstance(item, DailyRecord):
        return item
    try:
        return DailyRecord(
            date=str(item['date']),
            basic_five_elements=dict(item['basic_five_elements']),
            dynamic_five_elements=dict(item['dynamic_five_elements']),
            balance_score=int(item['balance_score']),
            primary_constitution=item.get('primary_constitution') or UNKNOWN_CONSTITUTION,
            secondary_constitution=item.get('secondary_constitution'),
        )
    except KeyError as e:
        raise ValidationError(f"每日记录缺少字段: {e.args[0]}", field=str(e.args[0])) from None


def _average(vectors: List[Dict[str, float]]) -> Dict[str, float]:
    count = len(vectors)
    return {
        element: round_half_up(sum(v.get(element, 0) for v in vectors) / count)
        for element in ELEMENT_ORDER
    }


def _mean(values: List[float]) -> float:
    return sum(values) / len(values) if values else 0.0


class ElementStatsAnalyzer:
    """五行区间统计"""

    @staticmethod
    def window_days(period: str) -> int:
        """week=7, month=30, quarter=90，其余按30天"""
        return PERIOD_DAYS.get(period, DEFAULT_PERIOD_DAYS)

    @staticmethod
    def trend_direction(balance_scores: List[float]) -> str:
        """
        按时间顺序比较前后两半的平均平衡度

        后半段 > 前半段 + 5 -> improving；< 前半段 - 5 -> declining；否则 stable。
        少于2条记录时无法比较，返回 stable。
        """
        if len(balance_scores) < 2:
            return 'stable'
        middle = len(balance_scores) // 2
        first, second = _mean(balance_scores[:middle]), _mean(balance_scores[middle:])
        if second > first + TREND_THRESHOLD:
            return 'improving'
        if second < first - TREND_THRESHOLD:
            return 'declining'
        return 'stable'

    @staticmethod
    def summarize(
        records: Iterable[RecordInput],
        period: str = 'month',
        end_date: Optional[date] = None
    ) -> Optional[PeriodStats]:
        """
        区间统计

        Args:
            records: 每日记录（DailyRecord 或等价字典），按日期排序后统计
            period: week / month / quarter
            end_date: 给定时只统计 (end_date - 窗口天数, end_date] 内的记录

        Returns:
            PeriodStats；区间内没有记录时返回 None
        """
        days = ElementStatsAnalyzer.window_days(period)
        rows = sorted((_to_record(item) for item in records), key=lambda r: r.date)
        if end_date is not None:
            start = (end_date - timedelta(days=days)).isoformat()
            end = end_date.isoformat()
            rows = [r for r in rows if start <= r.date <= end]

        if not rows:
            logger.info(f"⚠️ {period} 区间内没有五行记录")
            return None

        balance_scores = [r.balance_score for r in rows]
        counts = Counter(r.primary_constitution for r in rows)
        # Counter.most_common 对同频次保持首次出现的顺序
        most_frequent = counts.most_common(1)[0][0]

        stats = PeriodStats(
            period=period,
            window_days=days,
            record_count=len(rows),
            average_basic=_average([r.basic_five_elements for r in rows]),
            average_dynamic=_average([r.dynamic_five_elements for r in rows]),
            avg_balance=int(round_half_up(_mean(balance_scores), 0)),
            trend_direction=ElementStatsAnalyzer.trend_direction(balance_scores),
            most_frequent_constitution=most_frequent,
            trends=[ElementStatsAnalyzer.flatten(r) for r in rows],
        )
        logger.info(f"✅ {period} 统计完成: {len(rows)} 条，平均平衡度 {stats.avg_balance}，趋势 {stats.trend_direction}")
        return stats

    @staticmethod
    def flatten(record: DailyRecord) -> Dict[str, Any]:
        """展开为趋势图使用的扁平行"""
        row: Dict[str, Any] = {'date': record.date}
        for element in ELEMENT_ORDER:
            row[f'basic_{element}'] = record.basic_five_elements.get(element, 0)
        for element in ELEMENT_ORDER:
            row[f'dynamic_{element}'] = record.dynamic_five_elements.get(element, 0)
        row['balance_score'] = record.balance_score
        row['primary_constitution'] = record.primary_constitution
        return row
