"""Fitness metrics engine: weight trends, strength metrics and nutrition targets."""

from fitness_engine.config import EngineSettings
from fitness_engine.engine import (
    MetricsEngine,
    analyze_weight_trend,
    analyze_workout_set,
    calculate_nutrition_profile,
)

__all__ = [
    "EngineSettings",
    "MetricsEngine",
    "analyze_weight_trend",
    "analyze_workout_set",
    "calculate_nutrition_profile",
]
