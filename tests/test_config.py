"""Tests for pydantic-settings configuration."""

import pytest
from pydantic import ValidationError

from grid_estimator.config import AppSettings, SimulationSettings


class TestSimulationSettings:
    def test_default_cap(self) -> None:
        assert SimulationSettings().max_trades == 10_000

    @pytest.mark.parametrize("max_trades", [0, -1])
    def test_cap_must_be_positive(self, max_trades: int) -> None:
        with pytest.raises(ValidationError):
            SimulationSettings(max_trades=max_trades)

    def test_cap_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SIMULATION_MAX_TRADES", "25")
        assert SimulationSettings().max_trades == 25

    def test_zero_cap_from_environment_rejected(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SIMULATION_MAX_TRADES", "0")
        with pytest.raises(ValidationError):
            SimulationSettings()


class TestAppSettings:
    def test_log_format_choices(self) -> None:
        assert AppSettings(log_format="json").log_format == "json"
        with pytest.raises(ValidationError):
            AppSettings(log_format="xml")
