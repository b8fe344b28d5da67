"""tradesim.core.config

Two config surfaces only:
1) a YAML file (`Config.from_yaml`)
2) environment variables, `TRADESIM_` prefixed, `__` for nesting

Spans are written the short way ("30d", "1y6M") and parsed into `TimeSpan`.
"""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import Annotated, Any, Literal

import yaml
from pydantic import BaseModel, Field, PlainValidator, field_validator, model_validator
from pydantic_settings import BaseSettings

from tradesim.core.exceptions import ConfigError
from tradesim.core.timespan import TimeSpan


def _as_span(v: Any) -> TimeSpan:
    if isinstance(v, TimeSpan):
        return v
    if isinstance(v, int | str):
        return TimeSpan.parse(str(v))
    if isinstance(v, timedelta):
        return TimeSpan.from_timedelta(v)
    raise ValueError(f"not a time span: {v!r}")


Span = Annotated[TimeSpan, PlainValidator(_as_span)]


class LoggingConfig(BaseModel):
    level: str = "INFO"
    json_output: bool = False

    @field_validator("level")
    @classmethod
    def level_must_be_known(cls, v: str) -> str:
        v = v.upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return v


class BacktestSettings(BaseModel):
    """Which evaluation mode to run and over which spans."""

    mode: Literal["single", "walk_forward", "monte_carlo"] = "single"
    period: Span | None = None
    warmup: Span = TimeSpan.ZERO
    samples: int = Field(default=1, ge=0)
    seed: int | None = None
    sample_resolution: timedelta = timedelta(days=1)
    continue_state: bool = False

    @model_validator(mode="after")
    def period_required_for_sweeps(self) -> BacktestSettings:
        if self.mode != "single" and self.period is None:
            raise ValueError(f"mode {self.mode} requires a period")
        if self.period is not None and not self.period.is_positive:
            raise ValueError("period must be positive")
        if self.warmup.is_negative:
            raise ValueError("warmup must not be negative")
        return self


class Config(BaseSettings):
    """Root configuration. Single source of truth."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    backtest: BacktestSettings = Field(default_factory=BacktestSettings)

    model_config = {"env_prefix": "TRADESIM_", "env_nested_delimiter": "__"}

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        raw = yaml.safe_load(path.read_text()) or {}
        if not isinstance(raw, dict):
            raise ConfigError(f"Config file must hold a mapping: {path}")
        return cls(**raw)
