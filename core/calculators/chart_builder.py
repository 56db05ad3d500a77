#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
四柱排盘（简化历法）

年柱、月柱按公历年月直接推算，日柱按固定起算日（1900-01-31 甲子）计算偏移，
时柱按日干查时干起点。月令地支另按公历月份查表（2月寅 … 1月丑）。这是简化算法，不做节气换月、立春换年的校正。
"""

import logging
from datetime import date

from core.data.constants import (
    DAY_PILLAR_EPOCH,
    EARTHLY_BRANCHES,
    HEAVENLY_STEMS,
    HOUR_STEM_START,
    MONTH_BRANCHES,
)
from core.exceptions import InvariantViolationError, ValidationError
from core.models.five_elements import Chart, Pillar

logger = logging.getLogger(__name__)

_EPOCH_ORDINAL = date(*DAY_PILLAR_EPOCH).toordinal()

# 字段 -> (最小值, 最大值)
_FIELD_RANGES = (
    ('year', 1, 9999),
    ('month', 1, 12),
    ('day', 1, 31),
    ('hour', 0, 23),
)


def _validate(values) -> None:
    for (field, low, high), value in zip(_FIELD_RANGES, values):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"{field} 必须为整数，当前值: {value!r}", field=field)
        if not low <= value <= high:
            raise ValidationError(f"{field} 必须在 {low}-{high} 之间，当前值: {value}", field=field)


def year_pillar(year: int) -> Pillar:
    """年柱：(年 - 4) 对 10 / 12 取模"""
    return Pillar(HEAVENLY_STEMS[(year - 4) % 10], EARTHLY_BRANCHES[(year - 4) % 12])


def month_pillar(year_stem: str, month: int) -> Pillar:
    """月柱：月支 = (月 + 2) mod 12，月干由年干推出（五虎遁的简化形式）"""
    try:
        year_stem_index = HEAVENLY_STEMS.index(year_stem)
    except ValueError:
        raise InvariantViolationError(f"未知天干: {year_stem}", symbol=year_stem) from None
    stem_index = ((year_stem_index % 5) * 2 + month - 2) % 10
    return Pillar(HEAVENLY_STEMS[stem_index], EARTHLY_BRANCHES[(month + 2) % 12])


def day_offset(year: int, month: int, day: int) -> int:
    """
    距起算日的天数

    按"当月1日序数 + 日 - 1"计算，不校验日是否超出当月天数；
    早于起算日时为负数，取模后沿六十甲子继续倒推。
    """
    return date(year, month, 1).toordinal() + day - 1 - _EPOCH_ORDINAL


def day_pillar(year: int, month: int, day: int) -> Pillar:
    """日柱：起算日偏移对 10 / 12 取模"""
    offset = day_offset(year, month, day)
    return Pillar(HEAVENLY_STEMS[offset % 10], EARTHLY_BRANCHES[offset % 12])


def hour_pillar(day_stem: str, hour: int) -> Pillar:
    """时柱：时支 = floor(时 / 2) mod 12，时干 = 日干对应起点 + 时支序号"""
    start = HOUR_STEM_START.get(day_stem)
    if start is None:
        raise InvariantViolationError(f"未知日干: {day_stem}", symbol=day_stem)
    branch_index = (hour // 2) % 12
    stem_index = (HEAVENLY_STEMS.index(start) + branch_index) % 10
    return Pillar(HEAVENLY_STEMS[stem_index], EARTHLY_BRANCHES[branch_index])


class ChartBuilder:
    """四柱排盘器"""

    @staticmethod
    def build(year: int, month: int, day: int, hour: int) -> Chart:
        """
        根据出生年月日时排出四柱

        Args:
            year: 公历年（1-9999）
            month: 月（1-12）
            day: 日（1-31）
            hour: 时（0-23）

        Returns:
            Chart: 年、月、日、时四柱，以及月令地支

        Raises:
            ValidationError: 任一字段超出范围或不是整数
        """
        _validate((year, month, day, hour))

        year_p = year_pillar(year)
        month_p = month_pillar(year_p.stem, month)
        day_p = day_pillar(year, month, day)
        hour_p = hour_pillar(day_p.stem, hour)

        chart = Chart(
            year=year_p,
            month=month_p,
            day=day_p,
            hour=hour_p,
            season_branch=MONTH_BRANCHES[month],
        )
        logger.debug(f"📊 排盘 {year}-{month:02d}-{day:02d} {hour:02d}时: {chart}")
        return chart
