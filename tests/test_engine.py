"""Tests for MetricsEngine: end-to-end facade behaviour."""

from __future__ import annotations

import logging
from typing import Callable

import pytest

import fitness_engine
from fitness_engine.config import EngineSettings
from fitness_engine.engine import MetricsEngine
from fitness_engine.models.enums import ActivityLevel, Goal, Sex, Trend
from fitness_engine.models.observation import BodyProfile, LiftAttempt, Observation
from fitness_engine.models.results import NutritionResult, StrengthResult, TrendResult


class TestAnalyzeWeightTrend:
    def test_empty_returns_none(self) -> None:
        assert MetricsEngine().analyze_weight_trend([], 80.0) is None

    def test_linear_loss_scenario(self, linear_loss_series: list[Observation]) -> None:
        result = MetricsEngine().analyze_weight_trend(linear_loss_series, 80.0)
        assert isinstance(result, TrendResult)
        assert result.current_weight == 83.0
        assert result.trend == Trend.LOSING
        assert result.weekly_change_rate == pytest.approx(-0.47, abs=0.05)
        assert result.predicted_weight == pytest.approx(81.0, abs=0.5)
        assert result.days_to_goal == 43
        assert result.standard_deviation == pytest.approx(0.6)

    def test_averages_use_last_window(self, linear_loss_series: list[Observation]) -> None:
        result = MetricsEngine().analyze_weight_trend(linear_loss_series, 80.0)
        assert result is not None
        # Mean of the last 7 points (i = 23..29) is 85 − 2·26/29
        assert result.short_average == 83.2
        assert result.long_average == 84.0

    def test_short_series_sentinels(
        self, series_factory: Callable[..., list[Observation]]
    ) -> None:
        obs = series_factory([80.0, 79.8, 79.9, 79.6, 79.5])
        result = MetricsEngine().analyze_weight_trend(obs, 75.0)
        assert result is not None
        assert result.trend == Trend.INSUFFICIENT_DATA
        assert result.predicted_weight == 0.0
        # Windows longer than the series fall back to the current weight
        assert result.short_average == 79.5
        assert result.long_average == 79.5

    def test_single_observation(
        self, series_factory: Callable[..., list[Observation]]
    ) -> None:
        result = MetricsEngine().analyze_weight_trend(series_factory([80.0]), 75.0)
        assert result is not None
        assert result.weekly_change_rate == 0.0
        assert result.days_to_goal == -1
        assert result.standard_deviation == 0.0

    def test_custom_settings(self, series_factory: Callable[..., list[Observation]]) -> None:
        obs = series_factory([80.0 - 0.1 * i for i in range(5)])
        engine = MetricsEngine(
            EngineSettings(short_window=3, min_points_for_trend=3, min_points_for_prediction=5)
        )
        result = engine.analyze_weight_trend(obs, 75.0)
        assert result is not None
        assert result.trend == Trend.LOSING
        assert result.predicted_weight == pytest.approx(76.6)

    def test_idempotent(self, linear_loss_series: list[Observation]) -> None:
        engine = MetricsEngine()
        assert engine.analyze_weight_trend(linear_loss_series, 80.0) == engine.analyze_weight_trend(
            linear_loss_series, 80.0
        )


class TestCalculateNutritionProfile:
    def test_male_cutting(self, male_cutting_profile: BodyProfile) -> None:
        result = MetricsEngine().calculate_nutrition_profile(male_cutting_profile)
        assert isinstance(result, NutritionResult)
        assert result.bmr == 1840
        assert result.tdee == 2852
        assert result.calorie_target == 2352
        assert (result.protein_g, result.carbs_g, result.fats_g) == (235, 176, 78)
        assert result.bmi == 26.2
        assert result.bmi_category == "Overweight"
        assert result.water_liters == 2.8
        assert result.calorie_balance == -500
        assert result.goal == Goal.CUTTING
        assert result.activity_level == ActivityLevel.MODERATE

    def test_safety_floor_applied(self, small_female_profile: BodyProfile) -> None:
        result = MetricsEngine().calculate_nutrition_profile(small_female_profile)
        assert result.bmr == 927
        assert result.tdee == 1112
        assert result.calorie_target == 1200
        # Macros follow the floored target
        assert (result.protein_g, result.carbs_g, result.fats_g) == (120, 90, 40)
        assert result.calorie_balance == 88

    def test_floor_logged(
        self, small_female_profile: BodyProfile, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="fitness_engine.engine"):
            MetricsEngine().calculate_nutrition_profile(small_female_profile)
        assert "safety floor" in caplog.text

    def test_bulking_surplus(self) -> None:
        profile = BodyProfile(
            weight_kg=70.0,
            height_cm=175.0,
            age=25,
            sex=Sex.MALE,
            activity_level=ActivityLevel.ACTIVE,
            goal=Goal.BULKING,
        )
        result = MetricsEngine().calculate_nutrition_profile(profile)
        assert result.calorie_balance == 300
        assert result.water_liters == 2.7


class TestAnalyzeWorkoutSet:
    def test_first_session(self, first_session_attempt: LiftAttempt) -> None:
        result = MetricsEngine().analyze_workout_set(first_session_attempt)
        assert isinstance(result, StrengthResult)
        assert result.estimated_one_rm == pytest.approx(114.6)
        assert result.volume == 500.0
        assert result.percent_of_max == 87.3
        assert result.strength_level == "Intermediate"
        assert result.is_progressive_overload is False
        assert result.volume_improvement_pct == 0.0

    def test_progressive_overload(self, progressing_attempt: LiftAttempt) -> None:
        result = MetricsEngine().analyze_workout_set(progressing_attempt)
        assert result.is_progressive_overload is True
        assert result.volume_improvement_pct == 4.2

    def test_decline_is_not_overload(self) -> None:
        attempt = LiftAttempt(weight=100.0, reps=5, body_weight=80.0, previous_volume=600.0)
        result = MetricsEngine().analyze_workout_set(attempt)
        assert result.is_progressive_overload is False
        assert result.volume_improvement_pct == pytest.approx(-16.7)

    def test_overload_threshold_from_settings(self, progressing_attempt: LiftAttempt) -> None:
        engine = MetricsEngine(EngineSettings(overload_threshold=0.05))
        assert engine.analyze_workout_set(progressing_attempt).is_progressive_overload is False

    def test_high_rep_set_uses_epley(self) -> None:
        attempt = LiftAttempt(weight=40.0, reps=40, body_weight=80.0)
        result = MetricsEngine().analyze_workout_set(attempt)
        assert result.estimated_one_rm == pytest.approx(93.3)


class TestCaloriesForGoal:
    def test_lower_goal_cuts(self, male_cutting_profile: BodyProfile) -> None:
        assert MetricsEngine().calories_for_goal(male_cutting_profile, 80.0) == 2352

    def test_higher_goal_bulks(self, male_cutting_profile: BodyProfile) -> None:
        assert MetricsEngine().calories_for_goal(male_cutting_profile, 90.0) == 3152

    def test_same_goal_maintains(self, male_cutting_profile: BodyProfile) -> None:
        assert MetricsEngine().calories_for_goal(male_cutting_profile, 85.0) == 2852


class TestModuleShortcuts:
    def test_shortcuts_match_engine(
        self,
        linear_loss_series: list[Observation],
        male_cutting_profile: BodyProfile,
        first_session_attempt: LiftAttempt,
    ) -> None:
        engine = MetricsEngine()
        assert fitness_engine.analyze_weight_trend(linear_loss_series, 80.0) == (
            engine.analyze_weight_trend(linear_loss_series, 80.0)
        )
        assert fitness_engine.calculate_nutrition_profile(male_cutting_profile) == (
            engine.calculate_nutrition_profile(male_cutting_profile)
        )
        assert fitness_engine.analyze_workout_set(first_session_attempt) == (
            engine.analyze_workout_set(first_session_attempt)
        )
