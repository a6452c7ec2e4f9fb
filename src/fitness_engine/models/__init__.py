"""Data models for the fitness metrics engine."""

from fitness_engine.models.enums import ActivityLevel, Goal, Sex, Trend
from fitness_engine.models.observation import BodyProfile, LiftAttempt, Observation
from fitness_engine.models.results import NutritionResult, StrengthResult, TrendResult

__all__ = [
    "ActivityLevel",
    "BodyProfile",
    "Goal",
    "LiftAttempt",
    "NutritionResult",
    "Observation",
    "Sex",
    "StrengthResult",
    "Trend",
    "TrendResult",
]
