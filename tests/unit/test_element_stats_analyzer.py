#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""五行区间统计单元测试"""

from datetime import date

import pytest

from core.analyzers.element_stats_analyzer import ElementStatsAnalyzer
from core.exceptions import ValidationError
from core.models.five_elements import DailyRecord

BASIC = {"wood": 16.3, "fire": 6.3, "earth": 7.4, "metal": 3.2, "water": 66.8}


def _record(day, balance, constitution="火旺体质", dynamic=None):
    return DailyRecord(
        date=f"2025-01-{day:02d}",
        basic_five_elements=BASIC,
        dynamic_five_elements=dynamic or {"wood": 20.0, "fire": 20.0, "earth": 20.0, "metal": 20.0, "water": 20.0},
        balance_score=balance,
        primary_constitution=constitution,
    )


class TestSummarize:
    def test_empty_returns_none(self):
        assert ElementStatsAnalyzer.summarize([]) is None

    def test_averages_kept_separate(self):
        records = [
            _record(1, 60, dynamic={"wood": 30.0, "fire": 10.0, "earth": 20.0, "metal": 20.0, "water": 20.0}),
            _record(2, 70, dynamic={"wood": 10.0, "fire": 30.0, "earth": 20.0, "metal": 20.0, "water": 20.0}),
        ]
        stats = ElementStatsAnalyzer.summarize(records, "week")
        assert stats.average_basic == BASIC
        assert stats.average_dynamic == {"wood": 20.0, "fire": 20.0, "earth": 20.0, "metal": 20.0, "water": 20.0}
        assert stats.record_count == 2
        assert stats.window_days == 7

    def test_avg_balance_rounds_half_up(self):
        stats = ElementStatsAnalyzer.summarize([_record(1, 40), _record(2, 41)])
        assert stats.avg_balance == 41

    @pytest.mark.parametrize("scores, direction", [
        ([40, 42, 60, 70], "improving"),
        ([80, 78, 50, 40], "declining"),
        ([50, 52, 54, 53], "stable"),
        ([90], "stable"),
    ])
    def test_trend_direction(self, scores, direction):
        records = [_record(i + 1, s) for i, s in enumerate(scores)]
        assert ElementStatsAnalyzer.summarize(records).trend_direction == direction

    def test_records_sorted_by_date(self):
        records = [_record(4, 70), _record(1, 40), _record(3, 60), _record(2, 42)]
        stats = ElementStatsAnalyzer.summarize(records)
        assert stats.trend_direction == "improving"
        assert [row["date"] for row in stats.trends] == ["2025-01-01", "2025-01-02", "2025-01-03", "2025-01-04"]

    def test_most_frequent_constitution_first_seen_wins_tie(self):
        records = [
            _record(1, 50, "水旺体质"),
            _record(2, 50, "木旺体质"),
            _record(3, 50, "木旺体质"),
            _record(4, 50, "水旺体质"),
        ]
        assert ElementStatsAnalyzer.summarize(records).most_frequent_constitution == "水旺体质"

    def test_end_date_window(self):
        records = [_record(1, 10), _record(20, 90), _record(25, 80)]
        stats = ElementStatsAnalyzer.summarize(records, "week", end_date=date(2025, 1, 25))
        assert stats.record_count == 2
        assert stats.avg_balance == 85

    def test_end_date_no_records(self):
        assert ElementStatsAnalyzer.summarize([_record(1, 10)], "week", end_date=date(2025, 3, 1)) is None

    def test_dict_records(self):
        record = _record(1, 55).to_dict()
        stats = ElementStatsAnalyzer.summarize([record])
        assert stats.avg_balance == 55

    def test_dict_record_missing_field(self):
        with pytest.raises(ValidationError) as exc_info:
            ElementStatsAnalyzer.summarize([{"date": "2025-01-01"}])
        assert exc_info.value.field == "basic_five_elements"

    def test_to_dict_layout(self):
        data = ElementStatsAnalyzer.summarize([_record(1, 50)], "quarter").to_dict()
        assert set(data["average_distribution"]) == {"basic", "dynamic"}
        assert data["summary"] == {
            "avg_balance": 50,
            "trend_direction": "stable",
            "most_frequent_constitution": "火旺体质",
        }
        assert data["window_days"] == 90
        assert data["trends"][0]["basic_water"] == 66.8
        assert data["trends"][0]["dynamic_wood"] == 20.0


class TestWindowDays:
    @pytest.mark.parametrize("period, days", [
        ("week", 7), ("month", 30), ("quarter", 90), ("year", 30),
    ])
    def test_window_days(self, period, days):
        assert ElementStatsAnalyzer.window_days(period) == days
