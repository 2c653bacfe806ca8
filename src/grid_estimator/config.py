"""Configuration system using pydantic-settings with environment variable loading."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SimulationSettings(BaseSettings):
    """Free-fall simulation guards."""

    model_config = SettingsConfigDict(env_prefix="SIMULATION_")

    max_trades: int = Field(default=10_000, gt=0)  # hard cap on recorded ladder steps


class AdvisorySettings(BaseSettings):
    """Wording of the advisory messages attached to results."""

    model_config = SettingsConfigDict(env_prefix="ADVISORY_")

    exchange_name: str = "GDAX"


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"
    simulation: SimulationSettings = SimulationSettings()
    advisory: AdvisorySettings = AdvisorySettings()
