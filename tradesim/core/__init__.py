"""tradesim.core

Core primitives.

Everything outside this package depends on it; it depends on nothing else here.
"""

from .config import BacktestSettings, Config, LoggingConfig
from .exceptions import ConfigError, EngineFailure, InvalidArgumentError, TradesimError
from .time import ensure_utc, parse_dt
from .timeframe import Timeframe, TimeframeSplit
from .timespan import TimeSpan
from .types import Account, Event, Execution, Feed, MetricResults, SimulationEngine

__all__ = [
    "Account",
    "BacktestSettings",
    "Config",
    "ConfigError",
    "EngineFailure",
    "Event",
    "Execution",
    "Feed",
    "InvalidArgumentError",
    "LoggingConfig",
    "MetricResults",
    "SimulationEngine",
    "TimeSpan",
    "Timeframe",
    "TimeframeSplit",
    "TradesimError",
    "ensure_utc",
    "parse_dt",
]
