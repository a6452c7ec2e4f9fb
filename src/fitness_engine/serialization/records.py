"""JSON-compatible serialization for engine result records.

All functions are pure (no I/O).
"""

from __future__ import annotations

import dataclasses
import json
from enum import Enum

from fitness_engine.models.results import NutritionResult, StrengthResult, TrendResult

Result = TrendResult | StrengthResult | NutritionResult


def result_to_dict(result: Result) -> dict:
    """Convert a result record to a plain dict.

    Enum fields become their string values. Nutrition results also carry the
    derived ``calorie_balance``.
    """
    if not dataclasses.is_dataclass(result) or isinstance(result, type):
        raise TypeError(f"Expected a result record, got {type(result).__name__}")

    data = {}
    for f in dataclasses.fields(result):
        value = getattr(result, f.name)
        data[f.name] = value.value if isinstance(value, Enum) else value

    if isinstance(result, NutritionResult):
        data["calorie_balance"] = result.calorie_balance
    return data


def result_to_json_string(result: Result, indent: int = 2) -> str:
    """Convert a result record to a JSON string."""
    return json.dumps(result_to_dict(result), indent=indent)
