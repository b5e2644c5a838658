"""Configuration for the simulator, the synthetic feed and the CLI.

Every field can be overridden from the environment, e.g.
``DEPTHSIM_SIM_MARKET_IMPACT_RATE=0.002``.
"""

from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SimulatorConfig(BaseSettings):
    """Policy constants for the execution simulator.

    The impact rate and the latency baselines are placeholder heuristics
    with no calibration behind them. They are kept configurable rather than
    presented as a predictive model.
    """

    model_config = SettingsConfigDict(env_prefix="DEPTHSIM_SIM_")

    market_impact_rate: float = Field(
        default=0.001, ge=0, description="Impact estimate as a fraction of total cost"
    )
    market_base_latency_s: float = Field(
        default=0.1, ge=0, description="Base fill latency for market orders"
    )
    limit_base_latency_s: float = Field(
        default=3.5,
        ge=0,
        description="Deterministic base fill latency for limit orders",
    )
    limit_latency_min_s: float = Field(
        default=1.0, ge=0, description="Lower bound when drawing limit latency from an RNG"
    )
    limit_latency_max_s: float = Field(
        default=6.0, ge=0, description="Upper bound when drawing limit latency from an RNG"
    )

    @model_validator(mode="after")
    def _check_latency_range(self) -> "SimulatorConfig":
        if self.limit_latency_max_s < self.limit_latency_min_s:
            raise ValueError("limit_latency_max_s must be >= limit_latency_min_s")
        return self


class FeedConfig(BaseSettings):
    """Shape and cadence of the synthetic random-walk book feed."""

    model_config = SettingsConfigDict(env_prefix="DEPTHSIM_FEED_")

    levels: int = Field(default=15, gt=0, description="Levels generated per side")
    spread_fraction: float = Field(
        default=0.001, gt=0, description="Spread as a fraction of the base price"
    )
    mid_jitter_fraction: float = Field(
        default=0.02, ge=0, description="Width of the mid-price band around the base price"
    )
    min_size: float = Field(default=0.1, gt=0, description="Smallest level size")
    size_range: float = Field(default=5.0, ge=0, description="Random size added on top of min_size")
    min_interval_s: float = Field(default=1.0, ge=0, description="Shortest gap between snapshots")
    max_interval_s: float = Field(default=3.0, ge=0, description="Longest gap between snapshots")
    seed: Optional[int] = Field(default=None, description="RNG seed; None for fresh entropy")

    @model_validator(mode="after")
    def _check_interval_range(self) -> "FeedConfig":
        if self.max_interval_s < self.min_interval_s:
            raise ValueError("max_interval_s must be >= min_interval_s")
        return self


class AppConfig(BaseSettings):
    """Application-level settings."""

    model_config = SettingsConfigDict(env_prefix="DEPTHSIM_")

    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level
