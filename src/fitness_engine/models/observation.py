"""Frozen input value types handed to the engine by its collaborators."""

from __future__ import annotations

from dataclasses import dataclass

from fitness_engine.models.enums import ActivityLevel, Goal, Sex


@dataclass(frozen=True)
class Observation:
    """One body-weight reading.

    Sequences of observations must be sorted ascending by ``timestamp_ms``;
    the engine never sorts them.
    """

    subject_id: int
    value: float  # kg
    timestamp_ms: int  # Unix epoch milliseconds

    def __post_init__(self) -> None:
        if not self.value > 0:
            raise ValueError(f"Observation value must be positive, got {self.value}")


@dataclass(frozen=True)
class LiftAttempt:
    """A single working set, plus the volume of the same lift last session.

    ``previous_volume`` of 0 means there is no prior history.
    """

    weight: float  # kg
    reps: int
    body_weight: float  # kg
    previous_volume: float = 0.0

    def __post_init__(self) -> None:
        if not self.weight > 0:
            raise ValueError(f"Lift weight must be positive, got {self.weight}")
        if not self.reps > 0:
            raise ValueError(f"Reps must be positive, got {self.reps}")
        if not self.body_weight > 0:
            raise ValueError(f"Body weight must be positive, got {self.body_weight}")
        if not self.previous_volume >= 0:
            raise ValueError(
                f"Previous volume must be non-negative, got {self.previous_volume}"
            )


@dataclass(frozen=True)
class BodyProfile:
    """Body and activity profile used for nutrition targets (SI units)."""

    weight_kg: float
    height_cm: float
    age: int
    sex: Sex
    activity_level: ActivityLevel = ActivityLevel.MODERATE
    goal: Goal = Goal.MAINTENANCE

    def __post_init__(self) -> None:
        for name in ("weight_kg", "height_cm", "age"):
            value = getattr(self, name)
            if not value > 0:
                raise ValueError(f"{name} must be positive, got {value}")
