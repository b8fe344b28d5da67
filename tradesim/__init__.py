"""tradesim: backtest orchestration.

Turns one stretch of history into warmup + evaluation windows and drives a
simulation engine over them, one window at a time.
"""

from __future__ import annotations

from tradesim.backtest import Backtest, WindowRun
from tradesim.core import EngineFailure, InvalidArgumentError, Timeframe, TimeSpan

__all__ = [
    "__version__",
    "Backtest",
    "EngineFailure",
    "InvalidArgumentError",
    "TimeSpan",
    "Timeframe",
    "WindowRun",
]

__version__ = "0.1.0"
