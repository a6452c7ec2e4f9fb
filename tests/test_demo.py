"""Tests for the demo command-line entry point."""

from __future__ import annotations

import json

import pytest

from fitness_engine.demo import main, run_demo
from fitness_engine.models.results import NutritionResult, StrengthResult, TrendResult


class TestRunDemo:
    def test_returns_all_results(self) -> None:
        results = run_demo()
        assert isinstance(results["trend"], TrendResult)
        assert isinstance(results["nutrition"], NutritionResult)
        assert isinstance(results["strength"], StrengthResult)

    def test_deterministic(self) -> None:
        assert run_demo(seed=42) == run_demo(seed=42)

    def test_strength_shows_overload(self) -> None:
        assert run_demo()["strength"].is_progressive_overload is True


class TestMain:
    def test_text_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "--- WEIGHT TREND ---" in out
        assert "--- NUTRITION ---" in out
        assert "--- STRENGTH ---" in out

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--json", "--goal-weight", "82"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert set(data) == {"trend", "nutrition", "strength"}
        assert data["nutrition"]["goal"] == "CUTTING"

    def test_invalid_env_exits_with_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("FITNESS_SHORT_WINDOW", "abc")
        assert main([]) == 2
