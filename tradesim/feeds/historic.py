"""tradesim.feeds.historic

In-memory feed over a fixed list of events.

The feed's timeframe covers its first event up to and including its last one.
Half-open intervals need an end past the last event, so the end is the last
event time plus one microsecond (the finest datetime step).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime, timedelta

from tradesim.core.time import ensure_utc
from tradesim.core.timeframe import Timeframe
from tradesim.core.types import Event

TICK = timedelta(microseconds=1)


@dataclass(frozen=True, slots=True)
class PriceBar:
    time: datetime
    close: float
    high: float | None = None
    low: float | None = None
    volume: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "time", ensure_utc(self.time))


class HistoricFeed:
    """Events sorted by time. Ties keep insertion order."""

    def __init__(self, events: Iterable[Event] = ()) -> None:
        self._events: list[Event] = sorted(events, key=lambda e: e.time)

    def __len__(self) -> int:
        return len(self._events)

    @property
    def timeframe(self) -> Timeframe:
        if not self._events:
            return Timeframe.EMPTY
        return Timeframe(self._events[0].time, self._events[-1].time + TICK)

    def play(self, timeframe: Timeframe | None = None) -> Iterator[Event]:
        """Yield the events inside `timeframe` (all events when omitted)."""

        if timeframe is None:
            yield from self._events
            return
        if timeframe.is_empty:
            return
        for ev in self._events:
            if ev.time >= timeframe.end:
                break
            if ev.time in timeframe:
                yield ev
