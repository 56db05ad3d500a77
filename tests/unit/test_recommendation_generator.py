#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""调理建议生成单元测试"""

import pytest

from core.analyzers.natal_element_analyzer import NatalElementAnalyzer
from core.analyzers.recommendation_generator import RecommendationContext, RecommendationGenerator
from core.analyzers.wuxing_balance_analyzer import WuxingBalanceAnalyzer
from core.data.advice_tables import (
    EXERCISE_RECOMMENDATIONS,
    FOOD_RECOMMENDATIONS,
    SEASONAL_ADJUSTMENTS,
    STRENGTH_INTENSITY,
)
from core.exceptions import ValidationError


@pytest.fixture
def wood_context():
    return RecommendationContext(
        dominant_element="wood",
        weakest_element="metal",
        strength="strong",
        season="春季",
        balance_level="fair",
    )


class TestGenerate:
    def test_diet(self, wood_context):
        diet = RecommendationGenerator.generate(wood_context).diet
        assert diet["foods_to_add"][:6] == list(FOOD_RECOMMENDATIONS["wood"]["add"])
        assert "梨" in diet["foods_to_add"]
        assert diet["foods_to_reduce"] == list(FOOD_RECOMMENDATIONS["wood"]["reduce"])
        assert diet["meal_timing"] == FOOD_RECOMMENDATIONS["wood"]["timing"]

    def test_weakest_foods_not_duplicated(self):
        diet = RecommendationGenerator.generate(RecommendationContext("wood", "wood")).diet
        assert len(diet["foods_to_add"]) == len(set(diet["foods_to_add"]))

    def test_exercise_intensity_by_strength(self, wood_context):
        exercise = RecommendationGenerator.generate(wood_context).exercise
        assert exercise["intensity"] == STRENGTH_INTENSITY["strong"]
        assert exercise["best_exercises"] == list(EXERCISE_RECOMMENDATIONS["wood"]["best"])

    def test_exercise_intensity_balanced(self):
        exercise = RecommendationGenerator.generate(RecommendationContext("fire", "water")).exercise
        assert exercise["intensity"] == EXERCISE_RECOMMENDATIONS["fire"]["intensity"]

    def test_seasonal(self, wood_context):
        seasonal = RecommendationGenerator.generate(wood_context).seasonal
        assert seasonal["current_season"] == "spring"
        assert seasonal["current"] == SEASONAL_ADJUSTMENTS["wood"]["spring"]
        for season in ("spring", "summer", "autumn", "winter"):
            assert seasonal[season] == SEASONAL_ADJUSTMENTS["wood"][season]

    def test_season_key_accepted(self):
        seasonal = RecommendationGenerator.generate(RecommendationContext("water", "fire", season="winter")).seasonal
        assert seasonal["current"] == SEASONAL_ADJUSTMENTS["water"]["winter"]

    def test_no_season(self):
        seasonal = RecommendationGenerator.generate(RecommendationContext("water", "fire")).seasonal
        assert seasonal["current"] is None

    def test_balance_recommendations(self, wood_context):
        balance = RecommendationGenerator.generate(wood_context).balance
        assert balance == ("金元素相对较弱，建议加强相关方面的调理", "适当减少木元素的过度消耗")

    @pytest.mark.parametrize("level, count", [
        ("excellent", 2), ("good", 2), ("fair", 2), ("poor", 3), ("critical", 3), (None, 0),
    ])
    def test_balance_recommendation_count(self, level, count):
        assert len(RecommendationGenerator.balance_recommendations(level, "fire", "water")) == count

    def test_constitution_profile(self, wood_context):
        profile = RecommendationGenerator.generate(wood_context).constitution_profile
        assert profile["name"] == "木型体质"

    def test_deterministic(self, wood_context):
        first = RecommendationGenerator.generate(wood_context).to_dict()
        second = RecommendationGenerator.generate(wood_context).to_dict()
        assert first == second

    def test_from_natal(self, reference_chart):
        natal = NatalElementAnalyzer.analyze(reference_chart)
        balance = WuxingBalanceAnalyzer.analyze(natal.percentages, natal.scores)
        context = RecommendationContext.from_natal(natal, balance)
        assert context == RecommendationContext("earth", "fire", "balanced", "秋季", "poor")


class TestValidation:
    def test_unknown_season(self):
        with pytest.raises(ValidationError) as exc_info:
            RecommendationGenerator.generate(RecommendationContext("wood", "fire", season="雨季"))
        assert exc_info.value.field == "season"

    def test_unknown_element(self):
        with pytest.raises(ValidationError) as exc_info:
            RecommendationGenerator.generate(RecommendationContext("wind", "fire"))
        assert exc_info.value.field == "dominant_element"


class TestElementAdvice:
    def test_element_advice(self):
        advice = RecommendationGenerator.element_advice("water")
        assert advice["element_name"] == "水"
        assert isinstance(advice["acupoints"], list)
        assert advice["acupoints"]

    def test_postnatal_advice(self):
        advice = RecommendationGenerator.postnatal_advice("fire")
        assert advice["strengthening"][0] == "保持心情平和，避免过度兴奋"
        assert len(advice["balancing"]) == 2
