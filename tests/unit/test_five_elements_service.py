#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行计算服务单元测试
"""

import os
from datetime import date
from unittest.mock import patch

import pytest

from core.exceptions import ValidationError
from core.models.five_elements import DailyRecord


class TestAnalyzeNatal:
    """先天分析测试"""

    def test_reference_birth(self, five_elements_service, reference_birth):
        result = five_elements_service.analyze_natal(**reference_birth)

        assert set(result) == {'chart', 'natal', 'balance', 'recommendations', 'description'}
        assert result['chart']['year'] == {'stem': '庚', 'branch': '午'}
        assert result['natal']['day_master_element'] == 'water'
        assert result['natal']['month_branch'] == '戌'
        assert result['natal']['strength'] == 'balanced'
        assert result['balance']['dominant_element'] == 'earth'
        assert result['balance']['balance_level'] == 'poor'
        assert result['recommendations']['seasonal']['current_season'] == 'autumn'
        assert '癸' in result['description']

    def test_default_hour(self, five_elements_service):
        result = five_elements_service.analyze_natal(1990, 10, 25)
        assert result['chart']['hour']['branch'] == '午'

    def test_default_hour_from_env(self, five_elements_service):
        with patch.dict(os.environ, {'FIVE_ELEMENTS_DEFAULT_HOUR': '0'}):
            result = five_elements_service.analyze_natal(1990, 10, 25)
        assert result['chart']['hour']['branch'] == '子'

    def test_invalid_month(self, five_elements_service):
        with pytest.raises(ValidationError) as exc_info:
            five_elements_service.analyze_natal(1990, 13, 25, 14)
        assert exc_info.value.field == 'month'


class TestAnalyzePostnatal:
    """后天分析测试"""

    def test_observations(self, five_elements_service, tired_bundle, assert_percentages_valid):
        result = five_elements_service.analyze_postnatal(tired_bundle)

        assert result['postnatal']['element_scores']['fire'] == 56
        assert_percentages_valid(result['postnatal']['element_percentages'])
        assert result['balance']['balance_score'] == 76
        assert result['suggestions']

    def test_empty_observations(self, five_elements_service):
        result = five_elements_service.analyze_postnatal(None)
        assert result['balance']['balance_score'] == 100
        assert result['postnatal']['tags'] == []

    def test_invalid_observations(self, five_elements_service):
        with pytest.raises(ValidationError):
            five_elements_service.analyze_postnatal({"emotions": [{"emoji": "😤", "intensity": 11}]})

    def test_questionnaire(self, five_elements_service):
        result = five_elements_service.analyze_questionnaire({'water_energy': 3})
        assert result['postnatal']['element_scores']['water'] == 58
        assert result['postnatal']['element_percentages']['water'] == 22.5
        assert result['balance']['dominant_element'] == 'water'


class TestDailyAnalysis:
    """每日记录测试"""

    def test_generate_daily_analysis(self, five_elements_service, reference_birth, tired_bundle):
        record = five_elements_service.generate_daily_analysis(reference_birth, tired_bundle, date(2025, 1, 1))

        assert isinstance(record, DailyRecord)
        assert record.date == '2025-01-01'
        assert record.basic_five_elements['earth'] == 43.7
        assert record.dynamic_five_elements['fire'] == 21.9
        assert record.balance_score == 76
        assert record.primary_constitution == '火旺体质'
        assert record.secondary_constitution == '木旺体质'

    def test_invalid_birth(self, five_elements_service, tired_bundle):
        with pytest.raises(ValidationError) as exc_info:
            five_elements_service.generate_daily_analysis(
                {'birth_year': 'abc', 'birth_month': 1, 'birth_day': 1}, tired_bundle
            )
        assert exc_info.value.field == 'birth_year'

    def test_summarize_period(self, five_elements_service, reference_birth, tired_bundle, full_bundle):
        records = [
            five_elements_service.generate_daily_analysis(reference_birth, tired_bundle, date(2025, 1, 1)),
            five_elements_service.generate_daily_analysis(reference_birth, full_bundle, date(2025, 1, 2)),
        ]
        summary = five_elements_service.summarize_period(records, 'week')

        assert summary['record_count'] == 2
        assert summary['window_days'] == 7
        assert summary['average_distribution']['basic']['earth'] == 43.7
        assert len(summary['trends']) == 2

    def test_summarize_period_empty(self, five_elements_service):
        assert five_elements_service.summarize_period([]) is None
