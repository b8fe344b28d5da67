from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from tradesim.core.timeframe import Timeframe

T0 = datetime(2024, 1, 1, tzinfo=UTC)


def day(n: int) -> datetime:
    return T0 + timedelta(days=n)


def days(a: int, b: int) -> Timeframe:
    return Timeframe(day(a), day(b))


@dataclass
class StubFeed:
    timeframe: Timeframe


def feed_of_days(n: int) -> StubFeed:
    return StubFeed(days(0, n))


@dataclass
class RecordingEngine:
    """Records every call in order. Optionally fails on the n-th run (1-based)."""

    calls: list[tuple] = field(default_factory=list)
    fail_on_run: int | None = None
    error: Exception = field(default_factory=lambda: RuntimeError("boom"))

    def warmup(self, feed, timeframe: Timeframe) -> None:
        self.calls.append(("warmup", timeframe))

    def run(self, feed, timeframe: Timeframe, name: str) -> None:
        self.calls.append(("run", timeframe, name))
        if self.fail_on_run is not None and len(self.runs) == self.fail_on_run:
            raise self.error

    def reset(self, full: bool = True) -> None:
        self.calls.append(("reset", full))

    @property
    def runs(self) -> list[tuple]:
        return [c for c in self.calls if c[0] == "run"]

    @property
    def resets(self) -> list[tuple]:
        return [c for c in self.calls if c[0] == "reset"]


@dataclass
class StubAccount:
    cash: float = 0.0
    equity: float = 0.0
    positions: list = field(default_factory=list)


@dataclass(frozen=True)
class StubEvent:
    time: datetime


@dataclass(frozen=True)
class StubExecution:
    size: float
    price: float
