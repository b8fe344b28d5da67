"""tradesim.metrics.progress

How far a run has come: steps taken and event time covered.
"""

from __future__ import annotations

from datetime import datetime

from tradesim.core.types import Account, Event, MetricResults
from tradesim.metrics.base import BaseMetric


class ProgressMetric(BaseMetric):
    name = "progress"

    def __init__(self) -> None:
        self._steps = 0
        self._first: datetime | None = None

    def calculate(self, account: Account, event: Event) -> MetricResults:
        self._steps += 1
        if self._first is None:
            self._first = event.time
        elapsed = (event.time - self._first).total_seconds()
        return {
            "progress.steps": float(self._steps),
            "progress.elapsed_seconds": float(elapsed),
        }

    def reset(self) -> None:
        self._steps = 0
        self._first = None
