"""Demo: run every engine analysis on synthetic data and print the results.

Usage:
    python -m fitness_engine.demo             # human-readable summaries
    python -m fitness_engine.demo --json      # JSON records
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from fitness_engine.config import EngineSettings
from fitness_engine.engine import MetricsEngine
from fitness_engine.models.enums import ActivityLevel, Goal, Sex
from fitness_engine.models.observation import BodyProfile, LiftAttempt
from fitness_engine.sample_data import generate_realistic_30_day_data
from fitness_engine.serialization import result_to_dict

logger = logging.getLogger(__name__)


def run_demo(goal_weight: float = 80.0, seed: int = 42, settings: EngineSettings | None = None) -> dict:
    """Analyze sample weight, nutrition and lifting data.

    Returns:
        Dict with "trend", "nutrition" and "strength" result records.
    """
    engine = MetricsEngine(settings)

    observations = generate_realistic_30_day_data(seed=seed)
    logger.info(
        "Generated %d days of sample data: %.1fkg → %.1fkg",
        len(observations),
        observations[0].value,
        observations[-1].value,
    )

    profile = BodyProfile(
        weight_kg=observations[-1].value,
        height_cm=180.0,
        age=28,
        sex=Sex.MALE,
        activity_level=ActivityLevel.MODERATE,
        goal=Goal.CUTTING,
    )
    attempt = LiftAttempt(weight=100.0, reps=5, body_weight=profile.weight_kg, previous_volume=480.0)

    return {
        "trend": engine.analyze_weight_trend(observations, goal_weight),
        "nutrition": engine.calculate_nutrition_profile(profile),
        "strength": engine.analyze_workout_set(attempt),
    }


def _format_text(results: dict) -> str:
    trend_result = results["trend"]
    strength_result = results["strength"]
    lines = [
        "--- WEIGHT TREND ---",
        f"Current: {trend_result.current_weight:.1f}kg | "
        f"7-point avg: {trend_result.short_average:.1f}kg | "
        f"30-point avg: {trend_result.long_average:.1f}kg",
        trend_result.trend_description(),
        f"Predicted in 30 days: {trend_result.predicted_weight:.1f}kg",
        trend_result.goal_progress_message(),
        f"Std dev: {trend_result.standard_deviation:.2f}kg",
        "",
        "--- NUTRITION ---",
        results["nutrition"].summary(),
        "",
        "--- STRENGTH ---",
        strength_result.performance_summary(),
        strength_result.progress_message(),
    ]
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Fitness metrics engine demo")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument("--goal-weight", type=float, default=80.0, help="Goal weight in kg")
    parser.add_argument("--seed", type=int, default=42, help="Sample data seed")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        settings = EngineSettings.from_env()
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    results = run_demo(goal_weight=args.goal_weight, seed=args.seed, settings=settings)
    if args.json:
        print(json.dumps({k: result_to_dict(v) for k, v in results.items()}, indent=2))
    else:
        print(_format_text(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
