"""Synthetic body-weight series for demos and fixtures.

Generators are deterministic for a given ``seed`` so results are
reproducible across runs.
"""

from __future__ import annotations

import numpy as np

from fitness_engine.math.rounding import round_half_away
from fitness_engine.models.enums import MS_PER_DAY
from fitness_engine.models.observation import Observation

# 2025-01-01T00:00:00Z
DEFAULT_START_MS = 1_735_689_600_000


def generate_weight_trend(
    start_weight: float,
    target_weight: float,
    days: int,
    subject_id: int = 0,
    seed: int | None = None,
    noise_kg: float = 0.3,
    start_ms: int = DEFAULT_START_MS,
) -> list[Observation]:
    """Generate daily readings drifting linearly from start toward target.

    Each day adds the average daily change plus uniform noise in
    ±*noise_kg*; the running weight is clamped between start and target and
    each reading is rounded to 1 decimal, like a bathroom scale.

    Args:
        start_weight: First-day weight in kg.
        target_weight: Weight the series drifts toward (lower or higher).
        days: Number of daily observations.
        subject_id: Subject id stamped on every observation.
        seed: Seed for ``numpy.random.RandomState``.
        noise_kg: Half-width of the daily fluctuation.
        start_ms: Timestamp of the first observation.

    Returns:
        Observations sorted ascending by timestamp.
    """
    if days <= 0:
        return []

    rng = np.random.RandomState(seed)
    daily_change = (target_weight - start_weight) / days
    low, high = sorted((start_weight, target_weight))

    observations: list[Observation] = []
    weight = start_weight
    for day in range(days):
        weight += daily_change + rng.uniform(-noise_kg, noise_kg)
        weight = min(high, max(low, weight))
        observations.append(
            Observation(
                subject_id=subject_id,
                value=round_half_away(weight, 1),
                timestamp_ms=start_ms + day * MS_PER_DAY,
            )
        )
    return observations


def generate_maintenance_trend(
    weight: float,
    days: int,
    subject_id: int = 0,
    seed: int | None = None,
    noise_kg: float = 0.5,
    start_ms: int = DEFAULT_START_MS,
) -> list[Observation]:
    """Generate daily readings fluctuating around a stable weight."""
    rng = np.random.RandomState(seed)
    return [
        Observation(
            subject_id=subject_id,
            value=round_half_away(weight + rng.uniform(-noise_kg, noise_kg), 1),
            timestamp_ms=start_ms + day * MS_PER_DAY,
        )
        for day in range(max(days, 0))
    ]


def generate_realistic_30_day_data(subject_id: int = 0, seed: int = 42) -> list[Observation]:
    """30 days of healthy weight loss, 85 kg → 83 kg (~0.5 kg/week)."""
    return generate_weight_trend(85.0, 83.0, 30, subject_id=subject_id, seed=seed)
