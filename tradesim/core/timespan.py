"""tradesim.core.timespan

A span of time with a calendar part and a fixed part.

Calendar part (years, months) follows the calendar: one month after Jan 31 is
Feb 28/29. Fixed part (weeks folded into days, hours, minutes, seconds,
microseconds) is plain elapsed time. Adding a span to an instant applies the
calendar part first, then the fixed part.

Repeated stepping must not drift. Step k is computed as `origin + span * k`,
never as k successive additions, because month-end clamping is not reversible.
"""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass, fields
from datetime import datetime, timedelta
from typing import ClassVar

from tradesim.core.exceptions import InvalidArgumentError

_TOKEN = re.compile(r"(-?\d+)\s*([yMwdhms]|us)")

_UNITS: dict[str, str] = {
    "y": "years",
    "M": "months",
    "d": "days",
    "h": "hours",
    "m": "minutes",
    "s": "seconds",
    "us": "microseconds",
}


def _add_months(dt: datetime, months: int) -> datetime:
    if months == 0:
        return dt
    total = dt.year * 12 + (dt.month - 1) + months
    year, month = divmod(total, 12)
    month += 1
    if not 1 <= year <= 9999:
        raise InvalidArgumentError(f"instant out of range: {dt.isoformat()} + {months} months")
    day = min(dt.day, calendar.monthrange(year, month)[1])
    return dt.replace(year=year, month=month, day=day)


@dataclass(frozen=True, slots=True)
class TimeSpan:
    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    microseconds: int = 0

    ZERO: ClassVar[TimeSpan]

    @property
    def is_zero(self) -> bool:
        return self == TimeSpan.ZERO

    @property
    def is_positive(self) -> bool:
        """No negative component and at least one positive one."""

        values = [getattr(self, f.name) for f in fields(self)]
        return min(values) >= 0 and max(values) > 0

    @property
    def is_negative(self) -> bool:
        return any(getattr(self, f.name) < 0 for f in fields(self))

    @property
    def total_months(self) -> int:
        return self.years * 12 + self.months

    @property
    def fixed(self) -> timedelta:
        """The non-calendar part as a timedelta."""

        return timedelta(
            days=self.days,
            hours=self.hours,
            minutes=self.minutes,
            seconds=self.seconds,
            microseconds=self.microseconds,
        )

    @classmethod
    def from_timedelta(cls, td: timedelta) -> TimeSpan:
        return cls(days=td.days, seconds=td.seconds, microseconds=td.microseconds)

    @classmethod
    def parse(cls, text: str) -> TimeSpan:
        """Parse compact notation such as ``"1y6M"``, ``"30d"`` or ``"4h30m"``.

        Units: ``y`` years, ``M`` months, ``w`` weeks, ``d`` days, ``h`` hours,
        ``m`` minutes, ``s`` seconds, ``us`` microseconds. ``"0"`` is zero.

        Raises:
            InvalidArgumentError: if the text is not valid notation.
        """

        s = text.strip()
        if s == "0":
            return cls.ZERO
        if not s:
            raise InvalidArgumentError("empty time span")

        parts: dict[str, int] = {}
        pos = 0
        for m in _TOKEN.finditer(s):
            if s[pos : m.start()].strip():
                raise InvalidArgumentError(f"invalid time span: {text!r}")
            value, unit = int(m.group(1)), m.group(2)
            if unit == "w":
                unit, value = "d", value * 7
            name = _UNITS[unit]
            parts[name] = parts.get(name, 0) + value
            pos = m.end()

        if pos == 0 or s[pos:].strip():
            raise InvalidArgumentError(f"invalid time span: {text!r}")
        return cls(**parts)

    def add_to(self, dt: datetime) -> datetime:
        try:
            return _add_months(dt, self.total_months) + self.fixed
        except OverflowError as e:
            raise InvalidArgumentError(f"instant out of range: {dt.isoformat()} + {self}") from e

    def __add__(self, other: object) -> TimeSpan:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return TimeSpan(**{f.name: getattr(self, f.name) + getattr(other, f.name) for f in fields(self)})

    def __radd__(self, other: object) -> datetime:
        if not isinstance(other, datetime):
            return NotImplemented
        return self.add_to(other)

    def __rsub__(self, other: object) -> datetime:
        if not isinstance(other, datetime):
            return NotImplemented
        return (-self).add_to(other)

    def __neg__(self) -> TimeSpan:
        return self * -1

    def __mul__(self, k: object) -> TimeSpan:
        if not isinstance(k, int) or isinstance(k, bool):
            return NotImplemented
        return TimeSpan(**{f.name: getattr(self, f.name) * k for f in fields(self)})

    __rmul__ = __mul__

    def __str__(self) -> str:
        if self.is_zero:
            return "0"
        out = []
        for unit, name in _UNITS.items():
            v = getattr(self, name)
            if v:
                out.append(f"{v}{unit}")
        return "".join(out)


TimeSpan.ZERO = TimeSpan()
