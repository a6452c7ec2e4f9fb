"""Shared test fixtures: weight series, body profiles, lift attempts."""

from __future__ import annotations

from typing import Callable, Sequence

import pytest

from fitness_engine.models.enums import MS_PER_DAY, ActivityLevel, Goal, Sex
from fitness_engine.models.observation import BodyProfile, LiftAttempt, Observation

START_MS = 1_735_689_600_000  # 2025-01-01T00:00:00Z


def make_series(
    values: Sequence[float],
    start_ms: int = START_MS,
    step_days: float = 1.0,
    subject_id: int = 1,
) -> list[Observation]:
    """Build daily (or every *step_days*) observations from raw weights."""
    return [
        Observation(
            subject_id=subject_id,
            value=v,
            timestamp_ms=start_ms + int(i * step_days * MS_PER_DAY),
        )
        for i, v in enumerate(values)
    ]


@pytest.fixture
def series_factory() -> Callable[..., list[Observation]]:
    """Factory fixture for observation series.

    Usage:
        obs = series_factory([80.0, 79.8, 79.5])
    """
    return make_series


@pytest.fixture
def linear_loss_series() -> list[Observation]:
    """30 daily readings descending linearly 85.0 → 83.0 kg (≈ −0.069 kg/day)."""
    return make_series([85.0 - 2.0 * i / 29 for i in range(30)])


@pytest.fixture
def linear_gain_series() -> list[Observation]:
    """21 daily readings climbing 0.1 kg/day from 70.0 kg."""
    return make_series([70.0 + 0.1 * i for i in range(21)])


@pytest.fixture
def flat_series() -> list[Observation]:
    """14 daily readings at exactly 80.0 kg."""
    return make_series([80.0] * 14)


@pytest.fixture
def male_cutting_profile() -> BodyProfile:
    """28-year-old male, 85 kg / 180 cm, moderately active, cutting."""
    return BodyProfile(
        weight_kg=85.0,
        height_cm=180.0,
        age=28,
        sex=Sex.MALE,
        activity_level=ActivityLevel.MODERATE,
        goal=Goal.CUTTING,
    )


@pytest.fixture
def small_female_profile() -> BodyProfile:
    """60-year-old sedentary female, 45 kg / 150 cm, cutting → hits the floor."""
    return BodyProfile(
        weight_kg=45.0,
        height_cm=150.0,
        age=60,
        sex=Sex.FEMALE,
        activity_level=ActivityLevel.SEDENTARY,
        goal=Goal.CUTTING,
    )


@pytest.fixture
def first_session_attempt() -> LiftAttempt:
    """100 kg × 5 at 80 kg body weight, no prior history."""
    return LiftAttempt(weight=100.0, reps=5, body_weight=80.0)


@pytest.fixture
def progressing_attempt() -> LiftAttempt:
    """100 kg × 5 after a 480 kg session (+4.2% volume)."""
    return LiftAttempt(weight=100.0, reps=5, body_weight=80.0, previous_volume=480.0)
