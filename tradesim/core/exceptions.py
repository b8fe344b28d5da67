"""tradesim.core.exceptions

Errors are part of the interface.

Preconditions fail before the engine is touched. Engine failures end the sweep.
"""

from __future__ import annotations


class TradesimError(Exception):
    """Base exception for tradesim."""


class InvalidArgumentError(TradesimError, ValueError):
    """A precondition on a timeframe, span, or count does not hold."""


class EngineFailure(TradesimError):
    """The simulation engine failed during a warmup or a run."""


class ConfigError(TradesimError):
    """Configuration is missing, invalid, or inconsistent."""
