"""Enumerations and formula constants for the fitness metrics engine.

All formula coefficients and thresholds cite their published source.
Enum-keyed lookup tables live next to the constants they are built from.
"""

from enum import Enum


class Sex(str, Enum):
    """Biological sex for BMR calculation and calorie safety floors."""

    MALE = "MALE"
    FEMALE = "FEMALE"


class ActivityLevel(str, Enum):
    """Activity level for TDEE and water intake calculations."""

    SEDENTARY = "SEDENTARY"      # Little or no exercise
    LIGHT = "LIGHT"              # 1-3 days/week
    MODERATE = "MODERATE"        # 3-5 days/week
    ACTIVE = "ACTIVE"            # 6-7 days/week
    VERY_ACTIVE = "VERY_ACTIVE"  # Athlete or physical job


class Goal(str, Enum):
    """Body composition goal driving calorie targets and macro splits."""

    MAINTENANCE = "MAINTENANCE"
    CUTTING = "CUTTING"  # Fat loss, high protein
    BULKING = "BULKING"  # Muscle gain, high carbohydrate


class Trend(str, Enum):
    """Direction of a body-weight series over its regression slope."""

    LOSING = "LOSING"
    GAINING = "GAINING"
    MAINTAINING = "MAINTAINING"
    INSUFFICIENT_DATA = "INSUFFICIENT_DATA"


# ---------------------------------------------------------------------------
# Nutrition constants
# ---------------------------------------------------------------------------

# Mifflin-St Jeor BMR, Mifflin et al. (1990), Am J Clin Nutr 51(2):241-247
# BMR = 10 × weight_kg + 6.25 × height_cm − 5 × age + s
MIFFLIN_WEIGHT_FACTOR = 10.0
MIFFLIN_HEIGHT_FACTOR = 6.25
MIFFLIN_AGE_FACTOR = 5.0
MIFFLIN_SEX_CONSTANT = {
    Sex.MALE: 5.0,
    Sex.FEMALE: -161.0,
}

# TDEE activity factors, Harris-Benedict refinements, Roza & Shizgal (1984)
ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

# Daily calorie adjustment from TDEE by goal (~0.5 kg/week loss, ~0.3 kg/week gain)
GOAL_CALORIE_ADJUSTMENT = {
    Goal.MAINTENANCE: 0,
    Goal.CUTTING: -500,
    Goal.BULKING: 300,
}

# Macro split as fraction of calories (protein, carbs, fats)
# USDA Dietary Guidelines & ISSN Position Stand (2017)
MACRO_RATIOS = {
    Goal.MAINTENANCE: (0.30, 0.40, 0.30),
    Goal.CUTTING: (0.40, 0.30, 0.30),
    Goal.BULKING: (0.30, 0.50, 0.20),
}

CALORIES_PER_GRAM_PROTEIN = 4.0
CALORIES_PER_GRAM_CARBS = 4.0
CALORIES_PER_GRAM_FATS = 9.0

# Protein by body weight (g/kg), Jäger et al. (2017), ISSN Position Stand
PROTEIN_G_PER_KG = {
    Goal.MAINTENANCE: 1.6,
    Goal.CUTTING: 2.2,  # Preserve lean mass in a deficit
    Goal.BULKING: 1.8,
}

# Minimum daily calories without medical supervision
MIN_CALORIES = {
    Sex.MALE: 1500,
    Sex.FEMALE: 1200,
}

# WHO BMI bands (upper bounds inclusive for Normal and Overweight)
BMI_UNDERWEIGHT_THRESHOLD = 18.5
BMI_NORMAL_THRESHOLD = 24.9
BMI_OVERWEIGHT_THRESHOLD = 29.9

# Water: 33 ml per kg body weight, +15% for high activity
WATER_LITERS_PER_KG = 0.033
WATER_ACTIVE_MULTIPLIER = 1.15
HIGH_ACTIVITY_LEVELS = frozenset({ActivityLevel.ACTIVE, ActivityLevel.VERY_ACTIVE})

# ---------------------------------------------------------------------------
# Strength constants
# ---------------------------------------------------------------------------

# Epley (1985): 1RM = weight × (1 + reps / 30)
EPLEY_CONSTANT = 30.0

# Brzycki (1993): 1RM = weight × 36 / (37 − reps); singular at 37 reps
BRZYCKI_NUMERATOR = 36.0
BRZYCKI_DENOMINATOR_BASE = 37.0
BRZYCKI_MAX_REPS = 37

# Volume increase (fraction) counted as progressive overload
PROGRESSIVE_OVERLOAD_THRESHOLD = 0.025

# Deload: more than 10% volume drop on 2+ session-to-session pairs
DELOAD_DECLINE_PCT = 10.0
DELOAD_MIN_DECLINES = 2
DELOAD_MIN_SESSIONS = 3

# Relative strength (1RM / body weight) upper bounds, conservative squat standards
STRENGTH_TIERS = (
    (1.0, "Beginner"),
    (1.5, "Intermediate"),
    (2.0, "Advanced"),
)
STRENGTH_TIER_TOP = "Elite"
STRENGTH_TIER_UNKNOWN = "Unknown"

# Rest between sets by %1RM, NSCA Essentials of Strength Training (4th ed.)
REST_SECONDS_BY_INTENSITY = (
    (90.0, 300),
    (80.0, 180),
    (70.0, 120),
)
REST_SECONDS_LIGHT = 60

# ---------------------------------------------------------------------------
# Statistical analysis constants
# ---------------------------------------------------------------------------

MS_PER_DAY = 86_400_000

MIN_DATA_POINTS_FOR_TREND = 7  # One week
MIN_DATA_POINTS_FOR_PREDICTION = 14  # Two weeks

MOVING_AVERAGE_SHORT_WINDOW = 7
MOVING_AVERAGE_LONG_WINDOW = 30

FORECAST_DAYS = 30

# Weekly change inside ±0.2 kg counts as maintenance
TREND_THRESHOLD_KG_PER_WEEK = 0.2

# Regression guards
REGRESSION_MIN_DENOMINATOR = 1e-4
GOAL_MIN_DAILY_RATE = 1e-3

# Safe rate of weight change, CDC healthy weight guidance
SAFE_WEIGHT_LOSS_MAX_KG_PER_WEEK = 1.0
SAFE_WEIGHT_GAIN_MAX_KG_PER_WEEK = 0.5

# ---------------------------------------------------------------------------
# Unit conversion
# ---------------------------------------------------------------------------

# International avoirdupois pound (exact, 1959 agreement)
KG_PER_LB = 0.45359237

# Plausible body-weight input range
MIN_BODY_WEIGHT_KG = 20.0
MAX_BODY_WEIGHT_KG = 300.0
MIN_BODY_WEIGHT_LBS = 44.0
MAX_BODY_WEIGHT_LBS = 661.0
