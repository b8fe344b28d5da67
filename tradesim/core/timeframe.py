"""tradesim.core.timeframe

Half-open time intervals and the two ways of cutting one up.

- `split`: walk-forward. Consecutive windows, no gaps, no overlap, the tail
  truncated to the source end. Restartable: iterating twice yields the same
  windows.
- `sample`: Monte-Carlo. Random fixed-length windows inside the source.
  A generator: each call draws afresh unless seeded.

Both fail eagerly, before the first window is produced.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace
from datetime import UTC, datetime, timedelta
from typing import ClassVar

import numpy as np

from tradesim.core.exceptions import InvalidArgumentError
from tradesim.core.time import ensure_utc, parse_dt
from tradesim.core.timespan import TimeSpan

MIN_INSTANT = datetime.min.replace(tzinfo=UTC)
MAX_INSTANT = datetime.max.replace(tzinfo=UTC)
EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

DEFAULT_RESOLUTION = timedelta(days=1)


def _fmt(dt: datetime) -> str:
    if dt == MIN_INSTANT:
        return "-inf"
    if dt == MAX_INSTANT:
        return "+inf"
    if dt.time() == datetime.min.time():
        return dt.strftime("%Y-%m-%d")
    if dt.microsecond:
        return dt.strftime("%Y-%m-%dT%H:%M:%S.%f")
    return dt.strftime("%Y-%m-%dT%H:%M:%S")


@dataclass(frozen=True, slots=True)
class Timeframe:
    """Interval ``[start, end)`` between two UTC instants."""

    start: datetime
    end: datetime

    INFINITE: ClassVar[Timeframe]
    EMPTY: ClassVar[Timeframe]

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", ensure_utc(self.start))
        object.__setattr__(self, "end", ensure_utc(self.end))
        if self.start > self.end:
            raise InvalidArgumentError(f"start must not be after end: {self.start} > {self.end}")

    @classmethod
    def parse(cls, start: str, end: str) -> Timeframe:
        return cls(parse_dt(start), parse_dt(end))

    @classmethod
    def from_years(cls, first: int, last: int) -> Timeframe:
        """Jan 1 of `first` up to (not including) Jan 1 of `last`."""

        return cls(datetime(first, 1, 1, tzinfo=UTC), datetime(last, 1, 1, tzinfo=UTC))

    @property
    def is_finite(self) -> bool:
        return self.start != MIN_INSTANT and self.end != MAX_INSTANT

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def duration(self) -> timedelta:
        self._require_finite("duration")
        return self.end - self.start

    def __contains__(self, instant: object) -> bool:
        if not isinstance(instant, datetime):
            return False
        return self.start <= ensure_utc(instant) < self.end

    def with_start(self, start: datetime) -> Timeframe:
        return replace(self, start=start)

    def with_end(self, end: datetime) -> Timeframe:
        return replace(self, end=end)

    def __add__(self, span: object) -> Timeframe:
        if not isinstance(span, TimeSpan):
            return NotImplemented
        self._require_finite("shift")
        return Timeframe(self.start + span, self.end + span)

    def __sub__(self, span: object) -> Timeframe:
        if not isinstance(span, TimeSpan):
            return NotImplemented
        self._require_finite("shift")
        return Timeframe(self.start - span, self.end - span)

    def split(self, period: TimeSpan, warmup: TimeSpan = TimeSpan.ZERO) -> TimeframeSplit:
        """Cut into consecutive windows of `period + warmup`.

        The warmup is a prefix of each window, not a gap between windows.
        """

        self._require_finite("split")
        if not period.is_positive:
            raise InvalidArgumentError(f"period must be positive, got {period}")
        if warmup.is_negative:
            raise InvalidArgumentError(f"warmup must not be negative, got {warmup}")
        return TimeframeSplit(self, period + warmup)

    def sample(
        self,
        length: TimeSpan,
        samples: int = 1,
        *,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
        resolution: timedelta = DEFAULT_RESOLUTION,
    ) -> Iterator[Timeframe]:
        """Draw `samples` random windows of `length` inside this timeframe.

        Start instants are drawn uniformly from the grid
        ``start + k * resolution`` that lies within ``[start, end - length]``.
        Pass `rng` or `seed` for reproducible draws.
        """

        self._require_finite("sample")
        if samples < 0:
            raise InvalidArgumentError(f"samples must be >= 0, got {samples}")
        if resolution <= timedelta(0):
            raise InvalidArgumentError(f"resolution must be positive, got {resolution}")
        if not length.is_positive:
            raise InvalidArgumentError(f"length must be positive, got {length}")
        last = self.end - length
        if last < self.start:
            raise InvalidArgumentError(f"length {length} exceeds timeframe {self}")

        slots = (last - self.start) // resolution
        gen = rng if rng is not None else np.random.default_rng(seed)
        return self._draw(gen, length, samples, resolution, int(slots))

    def _draw(
        self,
        gen: np.random.Generator,
        length: TimeSpan,
        samples: int,
        resolution: timedelta,
        slots: int,
    ) -> Iterator[Timeframe]:
        for _ in range(samples):
            start = self.start + resolution * int(gen.integers(0, slots, endpoint=True))
            yield Timeframe(start, start + length)

    def _require_finite(self, op: str) -> None:
        if not self.is_finite:
            raise InvalidArgumentError(f"{op} requires a finite timeframe")

    def __str__(self) -> str:
        return f"{_fmt(self.start)}..{_fmt(self.end)}"


Timeframe.INFINITE = Timeframe(MIN_INSTANT, MAX_INSTANT)
Timeframe.EMPTY = Timeframe(EPOCH, EPOCH)


class TimeframeSplit:
    """Walk-forward windows of a finite timeframe.

    Lazy and restartable: every iteration recomputes the windows from the
    source, so two passes always agree. Window k starts at
    ``source.start + step * k``; the last one ends at ``source.end``.
    """

    __slots__ = ("source", "step")

    def __init__(self, source: Timeframe, step: TimeSpan) -> None:
        self.source = source
        self.step = step

    def __iter__(self) -> Iterator[Timeframe]:
        end = self.source.end
        k = 0
        cursor = self.source.start
        while cursor < end:
            k += 1
            nxt = self._boundary(k)
            yield Timeframe(cursor, min(nxt, end))
            cursor = nxt

    def __len__(self) -> int:
        step = self.step
        if step.total_months == 0:
            q, r = divmod(self.source.duration, step.fixed)
            return q + (1 if r else 0)
        return sum(1 for _ in self)

    def _boundary(self, k: int) -> datetime:
        # Past the end is all that matters once the instant range runs out.
        try:
            return self.source.start + self.step * k
        except InvalidArgumentError:
            return MAX_INSTANT

    def __repr__(self) -> str:
        return f"TimeframeSplit(source={self.source}, step={self.step})"
