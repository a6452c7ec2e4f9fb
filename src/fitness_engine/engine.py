"""MetricsEngine: facade that composes the trend, strength and nutrition analyzers."""

from __future__ import annotations

import logging
from typing import Sequence

from fitness_engine.config import EngineSettings
from fitness_engine.math import nutrition, strength, trend
from fitness_engine.models.observation import BodyProfile, LiftAttempt, Observation
from fitness_engine.models.results import NutritionResult, StrengthResult, TrendResult

logger = logging.getLogger(__name__)


def _last_or(values: list[float], fallback: float) -> float:
    return values[-1] if values else fallback


class MetricsEngine:
    """Turns collaborator-supplied inputs into immutable result records.

    The engine holds only its frozen settings, so one instance can be shared
    freely across callers.

    Usage:
        engine = MetricsEngine()
        trend_result = engine.analyze_weight_trend(observations, goal_weight=80.0)
        nutrition_result = engine.calculate_nutrition_profile(profile)
        strength_result = engine.analyze_workout_set(attempt)
    """

    def __init__(self, settings: EngineSettings | None = None) -> None:
        self.settings = settings or EngineSettings()

    def analyze_weight_trend(
        self,
        observations: Sequence[Observation],
        goal_weight: float,
    ) -> TrendResult | None:
        """Run the full weight trend analysis.

        Args:
            observations: Weight observations sorted ascending by timestamp.
            goal_weight: Target body weight in kg.

        Returns:
            A TrendResult, or None when *observations* is empty.
        """
        if not observations:
            logger.debug("No observations supplied, skipping trend analysis")
            return None

        s = self.settings
        current = observations[-1].value
        short_avg = trend.moving_average(observations, s.short_window)
        long_avg = trend.moving_average(observations, s.long_window)

        result = TrendResult(
            current_weight=current,
            short_average=_last_or(short_avg, current),
            long_average=_last_or(long_avg, current),
            weekly_change_rate=trend.change_rate_per_week(observations),
            trend=trend.detect_trend(
                observations,
                threshold_kg_per_week=s.trend_threshold_kg_per_week,
                min_points=s.min_points_for_trend,
            ),
            predicted_weight=trend.forecast(
                observations,
                s.forecast_days,
                min_points=s.min_points_for_prediction,
            ),
            days_to_goal=trend.days_to_goal(observations, goal_weight),
            standard_deviation=trend.standard_deviation(observations),
        )
        logger.debug(
            "Analyzed %d observations: trend=%s rate=%.3f kg/week",
            len(observations),
            result.trend.value,
            result.weekly_change_rate,
        )
        return result

    def calculate_nutrition_profile(self, profile: BodyProfile) -> NutritionResult:
        """Compute BMR, TDEE, floored calorie target, macros, BMI and water."""
        bmr_kcal = nutrition.bmr(
            profile.weight_kg, profile.height_cm, profile.age, profile.sex
        )
        tdee_kcal = nutrition.tdee(bmr_kcal, profile.activity_level)
        raw_target = nutrition.calorie_target(tdee_kcal, profile.goal)
        target = nutrition.validate_floor(raw_target, profile.sex)
        if target != raw_target:
            logger.info(
                "Calorie target %d below %s safety floor, raised to %d",
                raw_target,
                profile.sex.value,
                target,
            )

        split = nutrition.macros(target, profile.goal)
        bmi_value = nutrition.bmi(profile.weight_kg, profile.height_cm)

        return NutritionResult(
            bmr=bmr_kcal,
            tdee=tdee_kcal,
            calorie_target=target,
            protein_g=split.protein_g,
            carbs_g=split.carbs_g,
            fats_g=split.fats_g,
            bmi=bmi_value,
            bmi_category=nutrition.bmi_category(bmi_value),
            water_liters=nutrition.water_intake(profile.weight_kg, profile.activity_level),
            goal=profile.goal,
            activity_level=profile.activity_level,
        )

    def analyze_workout_set(self, attempt: LiftAttempt) -> StrengthResult:
        """Estimate 1RM, volume, intensity and progress for one working set.

        A previous volume of 0 means no history: overload is False and the
        improvement is 0.0 rather than a decline.
        """
        one_rm = strength.one_rep_max_blended(attempt.weight, attempt.reps)
        set_volume = strength.volume(attempt.weight, attempt.reps)

        overload = False
        improvement = 0.0
        if attempt.previous_volume > 0:
            overload = strength.is_progressive_overload(
                attempt.previous_volume,
                set_volume,
                threshold=self.settings.overload_threshold,
            )
            improvement = strength.volume_improvement_pct(
                attempt.previous_volume, set_volume
            )

        return StrengthResult(
            weight=attempt.weight,
            reps=attempt.reps,
            estimated_one_rm=one_rm,
            volume=set_volume,
            percent_of_max=strength.percent_of_max(attempt.weight, one_rm),
            strength_level=strength.strength_tier(one_rm, attempt.body_weight),
            is_progressive_overload=overload,
            volume_improvement_pct=improvement,
        )

    def calories_for_goal(self, profile: BodyProfile, goal_weight_kg: float) -> int:
        """Daily calorie target with the goal inferred from the goal weight.

        The profile's own ``goal`` is ignored.
        """
        goal = nutrition.goal_for_weights(profile.weight_kg, goal_weight_kg)
        bmr_kcal = nutrition.bmr(
            profile.weight_kg, profile.height_cm, profile.age, profile.sex
        )
        tdee_kcal = nutrition.tdee(bmr_kcal, profile.activity_level)
        return nutrition.validate_floor(
            nutrition.calorie_target(tdee_kcal, goal), profile.sex
        )


_default_engine = MetricsEngine()


def analyze_weight_trend(
    observations: Sequence[Observation], goal_weight: float
) -> TrendResult | None:
    """Shortcut for ``MetricsEngine().analyze_weight_trend`` with default settings."""
    return _default_engine.analyze_weight_trend(observations, goal_weight)


def calculate_nutrition_profile(profile: BodyProfile) -> NutritionResult:
    """Shortcut for ``MetricsEngine().calculate_nutrition_profile``."""
    return _default_engine.calculate_nutrition_profile(profile)


def analyze_workout_set(attempt: LiftAttempt) -> StrengthResult:
    """Shortcut for ``MetricsEngine().analyze_workout_set``."""
    return _default_engine.analyze_workout_set(attempt)
