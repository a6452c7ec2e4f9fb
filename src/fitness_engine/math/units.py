"""Body-weight unit conversion between kilograms and pounds.

A single canonical constant is used in both directions: the exact
international avoirdupois pound (0.45359237 kg). Pounds per kilogram is its
reciprocal rather than a separately truncated literal.
"""

from __future__ import annotations

from fitness_engine.models.enums import (
    KG_PER_LB,
    MAX_BODY_WEIGHT_KG,
    MAX_BODY_WEIGHT_LBS,
    MIN_BODY_WEIGHT_KG,
    MIN_BODY_WEIGHT_LBS,
)

KG = "kg"
LBS = "lbs"

_RANGES = {
    KG: (MIN_BODY_WEIGHT_KG, MAX_BODY_WEIGHT_KG),
    LBS: (MIN_BODY_WEIGHT_LBS, MAX_BODY_WEIGHT_LBS),
}


def _normalize_unit(unit: str) -> str:
    normalized = unit.strip().lower()
    if normalized == "lb":
        normalized = LBS
    if normalized not in _RANGES:
        raise ValueError(f"Unknown weight unit {unit!r}, expected 'kg' or 'lbs'")
    return normalized


def lbs_to_kg(lbs: float) -> float:
    return lbs * KG_PER_LB


def kg_to_lbs(kg: float) -> float:
    return kg / KG_PER_LB


def convert_weight(value: float, from_unit: str, to_unit: str) -> float:
    """Convert *value* between "kg" and "lbs".

    Raises:
        ValueError: If either unit is not kg or lbs.
    """
    source = _normalize_unit(from_unit)
    target = _normalize_unit(to_unit)
    if source == target:
        return value
    if source == KG:
        return kg_to_lbs(value)
    return lbs_to_kg(value)


def is_valid_weight(value: float, unit: str) -> bool:
    """Check a body weight against the plausible range for its unit."""
    low, high = _RANGES[_normalize_unit(unit)]
    return low <= value <= high
