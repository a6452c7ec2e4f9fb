"""Nutrition calculations: BMR, TDEE, calorie targets, macros, BMI, water.

Uses the Mifflin-St Jeor equation for BMR; it is the most accurate
predictive equation for modern populations (±10% for most individuals).

References:
    - Mifflin et al. (1990). A new predictive equation for resting energy
      expenditure in healthy individuals. Am J Clin Nutr 51(2):241-247.
    - Roza & Shizgal (1984). Am J Clin Nutr 40(1):168-182 (activity factors).
    - WHO (2000). Obesity: preventing and managing the global epidemic.
"""

from __future__ import annotations

from dataclasses import dataclass

from fitness_engine.math.rounding import round_half_away, round_to_int
from fitness_engine.models.enums import (
    ACTIVITY_MULTIPLIERS,
    BMI_NORMAL_THRESHOLD,
    BMI_OVERWEIGHT_THRESHOLD,
    BMI_UNDERWEIGHT_THRESHOLD,
    CALORIES_PER_GRAM_CARBS,
    CALORIES_PER_GRAM_FATS,
    CALORIES_PER_GRAM_PROTEIN,
    GOAL_CALORIE_ADJUSTMENT,
    HIGH_ACTIVITY_LEVELS,
    MACRO_RATIOS,
    MIFFLIN_AGE_FACTOR,
    MIFFLIN_HEIGHT_FACTOR,
    MIFFLIN_SEX_CONSTANT,
    MIFFLIN_WEIGHT_FACTOR,
    MIN_CALORIES,
    PROTEIN_G_PER_KG,
    WATER_ACTIVE_MULTIPLIER,
    WATER_LITERS_PER_KG,
    ActivityLevel,
    Goal,
    Sex,
)


@dataclass(frozen=True)
class MacroSplit:
    """Daily macronutrient targets in whole grams."""

    protein_g: int
    carbs_g: int
    fats_g: int


def bmr(weight_kg: float, height_cm: float, age: int, sex: Sex) -> int:
    """Calculate Basal Metabolic Rate (Mifflin-St Jeor).

    BMR = 10 × weight_kg + 6.25 × height_cm − 5 × age + s
    where s = +5 for males and −161 for females.

    Args:
        weight_kg: Body weight in kilograms.
        height_cm: Height in centimetres.
        age: Age in years.
        sex: Biological sex.

    Returns:
        BMR in kcal/day, rounded to the nearest integer.
    """
    value = (
        MIFFLIN_WEIGHT_FACTOR * weight_kg
        + MIFFLIN_HEIGHT_FACTOR * height_cm
        - MIFFLIN_AGE_FACTOR * age
        + MIFFLIN_SEX_CONSTANT[sex]
    )
    return round_to_int(value)


def tdee(bmr_kcal: float, activity_level: ActivityLevel) -> int:
    """Total Daily Energy Expenditure: BMR × activity multiplier."""
    return round_to_int(bmr_kcal * ACTIVITY_MULTIPLIERS[activity_level])


def tdee_from_profile(
    weight_kg: float,
    height_cm: float,
    age: int,
    sex: Sex,
    activity_level: ActivityLevel,
) -> int:
    """Convenience wrapper: TDEE straight from body stats."""
    return tdee(bmr(weight_kg, height_cm, age, sex), activity_level)


def calorie_target(tdee_kcal: float, goal: Goal) -> int:
    """Daily calorie target: −500 for cutting, +300 for bulking."""
    return round_to_int(tdee_kcal + GOAL_CALORIE_ADJUSTMENT[goal])


def validate_floor(target: float, sex: Sex) -> int:
    """Clamp a calorie target up to the sex-specific safety minimum.

    The floor (1500 kcal male, 1200 kcal female) always wins over the
    computed deficit.
    """
    floor = MIN_CALORIES[sex]
    if target < floor:
        return floor
    return round_to_int(target)


def macros(total_calories: float, goal: Goal) -> MacroSplit:
    """Split calories into protein/carb/fat grams by goal.

    Ratios: cutting 40/30/30, bulking 30/50/20, maintenance 30/40/30,
    converted at 4/4/9 kcal per gram.
    """
    protein_pct, carbs_pct, fats_pct = MACRO_RATIOS[goal]
    return MacroSplit(
        protein_g=round_to_int(total_calories * protein_pct / CALORIES_PER_GRAM_PROTEIN),
        carbs_g=round_to_int(total_calories * carbs_pct / CALORIES_PER_GRAM_CARBS),
        fats_g=round_to_int(total_calories * fats_pct / CALORIES_PER_GRAM_FATS),
    )


def protein_requirement(weight_kg: float, goal: Goal) -> int:
    """Body-weight based protein target in grams (1.6-2.2 g/kg)."""
    return round_to_int(weight_kg * PROTEIN_G_PER_KG[goal])


def bmi(weight_kg: float, height_cm: float) -> float:
    """Body Mass Index: weight / height_m², rounded to 1 decimal."""
    height_m = height_cm / 100.0
    return round_half_away(weight_kg / (height_m * height_m), 1)


def bmi_category(bmi_value: float) -> str:
    """WHO category for a BMI value."""
    if bmi_value < BMI_UNDERWEIGHT_THRESHOLD:
        return "Underweight"
    if bmi_value <= BMI_NORMAL_THRESHOLD:
        return "Normal"
    if bmi_value <= BMI_OVERWEIGHT_THRESHOLD:
        return "Overweight"
    return "Obese"


def water_intake(weight_kg: float, activity_level: ActivityLevel) -> float:
    """Daily water recommendation in litres (33 ml/kg, +15% when active)."""
    liters = weight_kg * WATER_LITERS_PER_KG
    if activity_level in HIGH_ACTIVITY_LEVELS:
        liters *= WATER_ACTIVE_MULTIPLIER
    return round_half_away(liters, 1)


def goal_for_weights(current_kg: float, goal_kg: float) -> Goal:
    """Infer the nutrition goal from current and goal body weight."""
    if goal_kg < current_kg:
        return Goal.CUTTING
    if goal_kg > current_kg:
        return Goal.BULKING
    return Goal.MAINTENANCE
