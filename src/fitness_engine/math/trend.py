"""Body-weight trend analysis: moving averages, regression slope, forecasting.

All functions take an observation series sorted ascending by timestamp and
never mutate it. Insufficient data yields a documented sentinel instead of
an exception.

References:
    - Least-squares slope: slope = (nΣxy − ΣxΣy) / (nΣx² − (Σx)²)
    - CDC (2022). Losing weight: healthy rate of 0.5-1 kg per week.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
import pandas as pd

from fitness_engine.math.rounding import round_half_away
from fitness_engine.models.enums import (
    GOAL_MIN_DAILY_RATE,
    MIN_DATA_POINTS_FOR_PREDICTION,
    MIN_DATA_POINTS_FOR_TREND,
    MS_PER_DAY,
    REGRESSION_MIN_DENOMINATOR,
    SAFE_WEIGHT_GAIN_MAX_KG_PER_WEEK,
    SAFE_WEIGHT_LOSS_MAX_KG_PER_WEEK,
    TREND_THRESHOLD_KG_PER_WEEK,
    Trend,
)
from fitness_engine.models.observation import Observation


def _values(observations: Sequence[Observation]) -> np.ndarray:
    return np.array([o.value for o in observations], dtype=np.float64)


def moving_average(observations: Sequence[Observation], window: int) -> list[float]:
    """Calculate the simple moving average over every full window.

    Args:
        observations: Weight observations (oldest first).
        window: Number of points per window.

    Returns:
        ``len(observations) - window + 1`` averages rounded to 1 decimal,
        or an empty list when there are fewer points than the window.
    """
    if window <= 0 or len(observations) < window:
        return []
    series = pd.Series(_values(observations))
    # fsum per window; a running sum would carry error from earlier readings
    rolled = series.rolling(window=window).apply(math.fsum, raw=True).iloc[window - 1:] / window
    return [round_half_away(float(v), 1) for v in rolled]


def change_rate_per_day(observations: Sequence[Observation]) -> float:
    """Least-squares slope of weight against elapsed days.

    x is days since the first observation, y is the weight.

    Returns:
        Slope in kg/day rounded to 3 decimals (negative = losing). Returns
        0.0 for fewer than 2 points or when all timestamps coincide.
    """
    n = len(observations)
    if n < 2:
        return 0.0

    start_ms = observations[0].timestamp_ms
    x = np.array(
        [(o.timestamp_ms - start_ms) / MS_PER_DAY for o in observations],
        dtype=np.float64,
    )
    y = _values(observations)

    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xy = float(np.sum(x * y))
    sum_x2 = float(np.sum(x * x))

    denominator = n * sum_x2 - sum_x * sum_x
    if abs(denominator) < REGRESSION_MIN_DENOMINATOR:
        return 0.0

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    return round_half_away(slope, 3)


def change_rate_per_week(observations: Sequence[Observation]) -> float:
    """Regression slope expressed in kg/week."""
    return change_rate_per_day(observations) * 7.0


def detect_trend(
    observations: Sequence[Observation],
    threshold_kg_per_week: float = TREND_THRESHOLD_KG_PER_WEEK,
    min_points: int = MIN_DATA_POINTS_FOR_TREND,
) -> Trend:
    """Classify the weekly rate of change against a ±threshold band.

    Args:
        observations: Weight observations (oldest first).
        threshold_kg_per_week: Half-width of the maintenance band.
        min_points: Observations required before a trend is reported.

    Returns:
        LOSING, GAINING or MAINTAINING; INSUFFICIENT_DATA below *min_points*.
    """
    if len(observations) < min_points:
        return Trend.INSUFFICIENT_DATA

    rate = change_rate_per_week(observations)
    if rate < -threshold_kg_per_week:
        return Trend.LOSING
    if rate > threshold_kg_per_week:
        return Trend.GAINING
    return Trend.MAINTAINING


def forecast(
    observations: Sequence[Observation],
    days_ahead: int,
    min_points: int = MIN_DATA_POINTS_FOR_PREDICTION,
) -> float:
    """Project the latest weight forward along the regression line.

    Returns:
        Predicted weight rounded to 1 decimal, or 0.0 (not computed) when
        fewer than *min_points* observations are available.
    """
    if len(observations) < min_points:
        return 0.0
    current = observations[-1].value
    return round_half_away(current + change_rate_per_day(observations) * days_ahead, 1)


def days_to_goal(observations: Sequence[Observation], goal_value: float) -> int:
    """Estimate whole days until the goal weight at the current daily rate.

    Returns:
        Non-negative day count, or -1 when there is no data, no momentum
        (|rate| < 0.001 kg/day) or the trend is moving away from the goal.
    """
    if not observations:
        return -1

    current = observations[-1].value
    daily_rate = change_rate_per_day(observations)
    difference = goal_value - current

    if abs(daily_rate) < GOAL_MIN_DAILY_RATE:
        return -1
    if (difference > 0 and daily_rate < 0) or (difference < 0 and daily_rate > 0):
        return -1

    return int(math.floor(abs(difference) / abs(daily_rate)))


def standard_deviation(observations: Sequence[Observation]) -> float:
    """Population standard deviation of the weights, rounded to 2 decimals."""
    if len(observations) < 2:
        return 0.0
    return round_half_away(float(np.std(_values(observations), ddof=0)), 2)


def is_safe_rate(weekly_rate: float) -> bool:
    """Check a weekly rate of change against healthy loss/gain limits."""
    if weekly_rate < 0:
        return -weekly_rate <= SAFE_WEIGHT_LOSS_MAX_KG_PER_WEEK
    return weekly_rate <= SAFE_WEIGHT_GAIN_MAX_KG_PER_WEEK
