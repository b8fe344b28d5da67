"""tradesim.core.types

Collaborator contracts.

The orchestrator never owns an account, an event, or an execution. It only
sees these shapes through the engine, the feed, and the plugins.
"""

from __future__ import annotations

from collections.abc import Sized
from datetime import datetime
from typing import Protocol, TypeAlias, runtime_checkable

from tradesim.core.timeframe import Timeframe

MetricResults: TypeAlias = dict[str, float]


@runtime_checkable
class Account(Protocol):
    """Snapshot owned and mutated by the engine. Read-only everywhere else."""

    @property
    def cash(self) -> float: ...

    @property
    def equity(self) -> float: ...

    @property
    def positions(self) -> Sized: ...


@runtime_checkable
class Event(Protocol):
    """Market observations at one instant."""

    @property
    def time(self) -> datetime: ...


@runtime_checkable
class Execution(Protocol):
    """A single fill. Size is signed: negative for sells."""

    @property
    def size(self) -> float: ...

    @property
    def price(self) -> float: ...


@runtime_checkable
class Feed(Protocol):
    @property
    def timeframe(self) -> Timeframe: ...


@runtime_checkable
class SimulationEngine(Protocol):
    """Drives a feed through strategy, broker, and metrics.

    `reset(False)` clears per-run state (account, positions) and keeps the
    configured strategy, metrics, and fee model. `reset(True)` clears those too.
    """

    def warmup(self, feed: Feed, timeframe: Timeframe) -> None: ...

    def run(self, feed: Feed, timeframe: Timeframe, name: str) -> None: ...

    def reset(self, full: bool = True) -> None: ...
