"""Immutable result records returned by the MetricsEngine facade.

Fields are primitives or enums only, so the surrounding application can
serialize them without engine involvement (see ``fitness_engine.serialization``).
"""

from __future__ import annotations

from dataclasses import dataclass

from fitness_engine.models.enums import ActivityLevel, Goal, Trend


@dataclass(frozen=True)
class TrendResult:
    """Weight trend analysis for one ordered observation series.

    Sentinels: ``trend`` is INSUFFICIENT_DATA below 7 points,
    ``predicted_weight`` is 0.0 below 14 points and ``days_to_goal`` is -1
    when the trend is flat or moving away from the goal.
    """

    current_weight: float
    short_average: float  # Last 7-point moving average
    long_average: float  # Last 30-point moving average
    weekly_change_rate: float  # kg/week, negative = losing
    trend: Trend
    predicted_weight: float  # 30-day forecast
    days_to_goal: int
    standard_deviation: float

    def trend_description(self) -> str:
        """Short human-readable description of the trend."""
        if self.trend == Trend.LOSING:
            return f"Losing {abs(self.weekly_change_rate):.1f} kg/week"
        if self.trend == Trend.GAINING:
            return f"Gaining {self.weekly_change_rate:.1f} kg/week"
        if self.trend == Trend.MAINTAINING:
            return "Maintaining weight"
        return "Insufficient data"

    def goal_progress_message(self) -> str:
        """Describe the estimated time to the goal weight."""
        if self.days_to_goal < 0:
            return "Current trend is not moving toward goal"
        if self.days_to_goal == 0:
            return "Goal weight reached!"
        weeks = self.days_to_goal // 7
        return f"Estimated {self.days_to_goal} days ({weeks} weeks) to goal"


@dataclass(frozen=True)
class StrengthResult:
    """Metrics for a single working set."""

    weight: float
    reps: int
    estimated_one_rm: float
    volume: float
    percent_of_max: float
    strength_level: str
    is_progressive_overload: bool = False
    volume_improvement_pct: float = 0.0

    def performance_summary(self) -> str:
        return (
            f"Set: {self.weight:.1f}kg × {self.reps} reps | "
            f"Est 1RM: {self.estimated_one_rm:.1f}kg\n"
            f"Volume: {self.volume:.1f}kg | "
            f"Intensity: {self.percent_of_max:.1f}% of 1RM\n"
            f"Strength Level: {self.strength_level}"
        )

    def progress_message(self) -> str:
        """Compare this set's volume with the previous session."""
        if self.is_progressive_overload:
            return (
                f"Progressive overload achieved! "
                f"+{self.volume_improvement_pct:.1f}% volume"
            )
        if self.volume_improvement_pct > 0:
            return f"Slight improvement: +{self.volume_improvement_pct:.1f}% volume"
        if self.volume_improvement_pct < 0:
            return f"Volume decreased: {self.volume_improvement_pct:.1f}%"
        return "First workout - establish baseline"


@dataclass(frozen=True)
class NutritionResult:
    """Daily energy and macronutrient targets.

    ``calorie_target`` is already clamped to the sex-specific safety floor.
    """

    bmr: int
    tdee: int
    calorie_target: int
    protein_g: int
    carbs_g: int
    fats_g: int
    bmi: float
    bmi_category: str
    water_liters: float
    goal: Goal
    activity_level: ActivityLevel

    @property
    def calorie_balance(self) -> int:
        """Calorie surplus (positive) or deficit (negative) relative to TDEE."""
        return self.calorie_target - self.tdee

    def summary(self) -> str:
        return (
            f"BMR: {self.bmr} cal | TDEE: {self.tdee} cal | "
            f"Target: {self.calorie_target} cal\n"
            f"Macros: P={self.protein_g}g C={self.carbs_g}g F={self.fats_g}g\n"
            f"BMI: {self.bmi:.1f} ({self.bmi_category}) | "
            f"Water: {self.water_liters:.1f}L/day"
        )
