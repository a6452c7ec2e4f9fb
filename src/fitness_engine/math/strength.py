"""Strength calculations: one-rep max estimation, volume and training heuristics.

Epley and Brzycki are kept as two independent formulas; ``one_rep_max_blended``
reconciles them.

References:
    - Epley (1985). Poundage Chart. Boyd Epley Workout.
    - Brzycki (1993). Strength testing: predicting a one-rep max from
      reps-to-fatigue. JOPERD 64(1):88-90.
    - Haff & Triplett (2016). Essentials of Strength Training and
      Conditioning, 4th ed. (rest intervals).
"""

from __future__ import annotations

from typing import Sequence

from fitness_engine.math.rounding import round_half_away, round_to_int
from fitness_engine.models.enums import (
    BRZYCKI_DENOMINATOR_BASE,
    BRZYCKI_MAX_REPS,
    BRZYCKI_NUMERATOR,
    DELOAD_DECLINE_PCT,
    DELOAD_MIN_DECLINES,
    DELOAD_MIN_SESSIONS,
    EPLEY_CONSTANT,
    PROGRESSIVE_OVERLOAD_THRESHOLD,
    REST_SECONDS_BY_INTENSITY,
    REST_SECONDS_LIGHT,
    STRENGTH_TIER_TOP,
    STRENGTH_TIER_UNKNOWN,
    STRENGTH_TIERS,
)


def one_rep_max_epley(weight: float, reps: int) -> float:
    """Estimate 1RM with the Epley formula: weight × (1 + reps / 30).

    Most accurate in the 1-10 rep range.

    Returns:
        Estimated 1RM rounded to 1 decimal; 0.0 for non-positive inputs.
    """
    if reps <= 0 or weight <= 0:
        return 0.0
    if reps == 1:
        return weight
    return round_half_away(weight * (1.0 + reps / EPLEY_CONSTANT), 1)


def one_rep_max_brzycki(weight: float, reps: int) -> float:
    """Estimate 1RM with the Brzycki formula: weight × 36 / (37 − reps).

    Returns:
        Estimated 1RM rounded to 1 decimal; 0.0 for non-positive inputs or
        at 37+ reps where the formula is singular.
    """
    if reps <= 0 or weight <= 0:
        return 0.0
    if reps == 1:
        return weight
    if reps >= BRZYCKI_MAX_REPS:
        return 0.0
    return round_half_away(
        weight * BRZYCKI_NUMERATOR / (BRZYCKI_DENOMINATOR_BASE - reps), 1
    )


def one_rep_max_blended(weight: float, reps: int) -> float:
    """Average the Epley and Brzycki estimates.

    Falls back to Epley alone when Brzycki is out of its valid range.
    """
    epley = one_rep_max_epley(weight, reps)
    brzycki = one_rep_max_brzycki(weight, reps)
    if brzycki == 0.0:
        return epley
    return round_half_away((epley + brzycki) / 2.0, 1)


def training_weight_for_reps(one_rm: float, target_reps: int) -> float:
    """Invert Epley: the load that should allow *target_reps* reps."""
    if target_reps <= 0 or one_rm <= 0:
        return 0.0
    if target_reps == 1:
        return one_rm
    return round_half_away(one_rm / (1.0 + target_reps / EPLEY_CONSTANT), 1)


def percent_of_max(weight: float, one_rm: float) -> float:
    """Express *weight* as a percentage of *one_rm* (1 decimal)."""
    if one_rm <= 0:
        return 0.0
    return round_half_away(weight / one_rm * 100.0, 1)


def volume(weight: float, reps: int) -> float:
    """Set volume: weight × reps, unrounded."""
    return weight * reps


def total_volume(weights: Sequence[float], reps: Sequence[int]) -> float:
    """Sum set volumes across paired weight/rep sequences.

    Returns 0.0 when the sequences differ in length.
    """
    if len(weights) != len(reps):
        return 0.0
    return sum(volume(w, r) for w, r in zip(weights, reps))


def session_volume(exercise_volumes: Sequence[float]) -> float:
    """Total session volume rounded to the nearest kilogram."""
    if len(exercise_volumes) == 0:
        return 0.0
    return float(round_to_int(sum(exercise_volumes)))


def average_intensity(weights: Sequence[float], one_rms: Sequence[float]) -> float:
    """Mean %1RM across sets (1 decimal); 0.0 for empty or mismatched input."""
    if len(weights) == 0 or len(weights) != len(one_rms):
        return 0.0
    total = sum(percent_of_max(w, m) for w, m in zip(weights, one_rms))
    return round_half_away(total / len(weights), 1)


def is_progressive_overload(
    previous_volume: float,
    current_volume: float,
    threshold: float = PROGRESSIVE_OVERLOAD_THRESHOLD,
) -> bool:
    """True when volume rose by at least *threshold* (fraction) over the previous session.

    A non-positive previous volume means no history, never overload.
    """
    if previous_volume <= 0:
        return False
    return (current_volume - previous_volume) / previous_volume >= threshold


def volume_improvement_pct(previous_volume: float, current_volume: float) -> float:
    """Percent change in volume (1 decimal); 0.0 without a previous session."""
    if previous_volume <= 0:
        return 0.0
    return round_half_away(
        (current_volume - previous_volume) / previous_volume * 100.0, 1
    )


def strength_tier(one_rm: float, body_weight: float) -> str:
    """Classify relative strength (1RM / body weight).

    Returns:
        "Beginner", "Intermediate", "Advanced", "Elite", or "Unknown" for
        non-positive inputs.
    """
    if one_rm <= 0 or body_weight <= 0:
        return STRENGTH_TIER_UNKNOWN
    ratio = one_rm / body_weight
    for upper, label in STRENGTH_TIERS:
        if ratio < upper:
            return label
    return STRENGTH_TIER_TOP


def recommended_rest_seconds(percent: float) -> int:
    """Rest between sets for a given intensity (%1RM)."""
    for lower, seconds in REST_SECONDS_BY_INTENSITY:
        if percent >= lower:
            return seconds
    return REST_SECONDS_LIGHT


def should_deload(recent_volumes: Sequence[float]) -> bool:
    """Recommend a deload after repeated session-to-session volume drops.

    Counts consecutive pairs whose volume fell by more than 10%; two or more
    such drops within the last 3+ sessions trigger a deload.
    """
    if len(recent_volumes) < DELOAD_MIN_SESSIONS:
        return False

    declines = 0
    for previous, current in zip(recent_volumes, recent_volumes[1:]):
        if previous <= 0:
            continue
        if (current - previous) / previous * 100.0 < -DELOAD_DECLINE_PCT:
            declines += 1
    return declines >= DELOAD_MIN_DECLINES
