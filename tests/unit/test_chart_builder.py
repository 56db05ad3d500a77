#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""四柱排盘单元测试"""

import pytest

from core.calculators.chart_builder import (
    ChartBuilder,
    day_offset,
    day_pillar,
    hour_pillar,
    month_pillar,
    year_pillar,
)
from core.exceptions import InvariantViolationError, ValidationError
from core.models.five_elements import Pillar


class TestReferenceChart:
    def test_year_pillar(self, reference_chart):
        assert str(reference_chart.year) == "庚午"

    def test_month_pillar(self, reference_chart):
        assert str(reference_chart.month) == "甲子"

    def test_day_pillar(self, reference_chart):
        assert str(reference_chart.day) == "癸未"
        assert reference_chart.day.stem == "癸"

    def test_hour_pillar(self, reference_chart):
        assert str(reference_chart.hour) == "乙未"

    def test_season_branch(self, reference_chart):
        # 月令按公历月份取，不跟随月柱地支
        assert reference_chart.season_branch == "戌"
        assert reference_chart.month.branch == "子"

    def test_deterministic(self, reference_chart):
        again = ChartBuilder.build(1990, 10, 25, 14)
        assert again == reference_chart
        assert again.to_dict() == reference_chart.to_dict()


class TestYearPillar:
    @pytest.mark.parametrize("year, expected", [
        (1984, "甲子"),
        (1990, "庚午"),
        (2000, "庚辰"),
        (2024, "甲辰"),
    ])
    def test_cycle(self, year, expected):
        assert str(year_pillar(year)) == expected


class TestMonthPillar:
    def test_branch_offset(self):
        assert month_pillar("甲", 1).branch == "卯"
        assert month_pillar("甲", 10).branch == "子"
        assert month_pillar("甲", 12).branch == "寅"

    def test_stem_from_year_stem(self):
        # 庚年：(1 × 2 + 10 - 2) mod 10 = 0 -> 甲
        assert month_pillar("庚", 10).stem == "甲"

    def test_unknown_year_stem(self):
        with pytest.raises(InvariantViolationError):
            month_pillar("X", 1)


class TestDayPillar:
    def test_epoch_is_jiazi(self):
        assert day_offset(1900, 1, 31) == 0
        assert str(day_pillar(1900, 1, 31)) == "甲子"

    def test_reference_offset(self):
        assert day_offset(1990, 10, 25) == 33139

    def test_before_epoch_continues_cycle(self):
        assert day_offset(1900, 1, 30) == -1
        assert str(day_pillar(1900, 1, 30)) == "癸亥"

    def test_day_beyond_month_length_not_checked(self):
        assert day_pillar(2001, 2, 31) == day_pillar(2001, 3, 3)

    def test_sixty_day_cycle(self):
        assert day_pillar(2000, 1, 1) == day_pillar(2000, 3, 1)


class TestHourPillar:
    @pytest.mark.parametrize("hour, branch", [
        (0, "子"), (1, "子"), (2, "丑"), (13, "午"), (14, "未"), (23, "亥"),
    ])
    def test_branch(self, hour, branch):
        assert hour_pillar("甲", hour).branch == branch

    def test_stem_start(self):
        assert hour_pillar("甲", 0) == Pillar("己", "子")
        assert hour_pillar("癸", 14) == Pillar("乙", "未")

    def test_unknown_day_stem(self):
        with pytest.raises(InvariantViolationError):
            hour_pillar("X", 0)


class TestValidation:
    @pytest.mark.parametrize("args, field", [
        ((0, 1, 1, 0), "year"),
        ((10000, 1, 1, 0), "year"),
        ((1990, 0, 1, 0), "month"),
        ((1990, 13, 1, 0), "month"),
        ((1990, 1, 0, 0), "day"),
        ((1990, 1, 32, 0), "day"),
        ((1990, 1, 1, -1), "hour"),
        ((1990, 1, 1, 24), "hour"),
    ])
    def test_out_of_range(self, args, field):
        with pytest.raises(ValidationError) as exc_info:
            ChartBuilder.build(*args)
        assert exc_info.value.field == field
        assert exc_info.value.error_type == f"validation_error:{field}"

    @pytest.mark.parametrize("args, field", [
        ((1990.0, 1, 1, 0), "year"),
        ((1990, "1", 1, 0), "month"),
        ((1990, 1, True, 0), "day"),
    ])
    def test_non_integer(self, args, field):
        with pytest.raises(ValidationError) as exc_info:
            ChartBuilder.build(*args)
        assert exc_info.value.field == field

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            ChartBuilder.build(1990, 13, 1, 0)
