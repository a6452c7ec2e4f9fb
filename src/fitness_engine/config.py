"""Engine settings with environment-variable overrides.

Defaults come from the constants table. ``EngineSettings.from_env()`` reads:

    FITNESS_SHORT_WINDOW            short moving-average window (points)
    FITNESS_LONG_WINDOW             long moving-average window (points)
    FITNESS_TREND_THRESHOLD         maintenance band half-width (kg/week)
    FITNESS_OVERLOAD_THRESHOLD      progressive overload threshold (fraction)
    FITNESS_MIN_TREND_POINTS        points required for a trend label
    FITNESS_MIN_PREDICTION_POINTS   points required for a forecast
    FITNESS_FORECAST_DAYS           forecast horizon (days)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from fitness_engine.models.enums import (
    FORECAST_DAYS,
    MIN_DATA_POINTS_FOR_PREDICTION,
    MIN_DATA_POINTS_FOR_TREND,
    MOVING_AVERAGE_LONG_WINDOW,
    MOVING_AVERAGE_SHORT_WINDOW,
    PROGRESSIVE_OVERLOAD_THRESHOLD,
    TREND_THRESHOLD_KG_PER_WEEK,
)


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


@dataclass(frozen=True)
class EngineSettings:
    """Tunable parameters for MetricsEngine."""

    short_window: int = MOVING_AVERAGE_SHORT_WINDOW
    long_window: int = MOVING_AVERAGE_LONG_WINDOW
    trend_threshold_kg_per_week: float = TREND_THRESHOLD_KG_PER_WEEK
    overload_threshold: float = PROGRESSIVE_OVERLOAD_THRESHOLD
    min_points_for_trend: int = MIN_DATA_POINTS_FOR_TREND
    min_points_for_prediction: int = MIN_DATA_POINTS_FOR_PREDICTION
    forecast_days: int = FORECAST_DAYS

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> EngineSettings:
        """Build settings from environment variables, falling back to defaults.

        Args:
            env: Mapping to read instead of ``os.environ`` (useful in tests).

        Raises:
            ValueError: If a variable is set to a non-numeric or out-of-range value.
        """
        if env is None:
            env = os.environ
        return cls(
            short_window=_env_int(env, "FITNESS_SHORT_WINDOW", MOVING_AVERAGE_SHORT_WINDOW),
            long_window=_env_int(env, "FITNESS_LONG_WINDOW", MOVING_AVERAGE_LONG_WINDOW),
            trend_threshold_kg_per_week=_env_float(
                env, "FITNESS_TREND_THRESHOLD", TREND_THRESHOLD_KG_PER_WEEK
            ),
            overload_threshold=_env_float(
                env, "FITNESS_OVERLOAD_THRESHOLD", PROGRESSIVE_OVERLOAD_THRESHOLD
            ),
            min_points_for_trend=_env_int(
                env, "FITNESS_MIN_TREND_POINTS", MIN_DATA_POINTS_FOR_TREND
            ),
            min_points_for_prediction=_env_int(
                env, "FITNESS_MIN_PREDICTION_POINTS", MIN_DATA_POINTS_FOR_PREDICTION
            ),
            forecast_days=_env_int(env, "FITNESS_FORECAST_DAYS", FORECAST_DAYS),
        )
