"""tradesim.metrics.returns

Running return statistics over the account equity.

Keeps the equity curve of the current run. Values are only meaningful within
one run, so `reset()` drops the curve.
"""

from __future__ import annotations

import numpy as np

from tradesim.core.types import Account, Event, MetricResults
from tradesim.metrics.base import BaseMetric
from tradesim.metrics.validation import max_drawdown, returns_from_equity, sharpe, total_return


class ReturnsMetric(BaseMetric):
    name = "returns"

    def __init__(self, *, periods_per_year: int = 252, min_steps: int = 2) -> None:
        if min_steps < 1:
            raise ValueError("min_steps must be >= 1")
        self.periods_per_year = int(periods_per_year)
        self.min_steps = int(min_steps)
        self._equity: list[float] = []

    def calculate(self, account: Account, event: Event) -> MetricResults:
        self._equity.append(float(account.equity))
        if len(self._equity) < self.min_steps:
            return {}

        eq = np.asarray(self._equity, dtype=np.float64)
        return {
            "returns.total": total_return(eq),
            "returns.sharpe": sharpe(returns_from_equity(eq), periods_per_year=self.periods_per_year),
            "returns.max_drawdown": max_drawdown(eq),
        }

    def reset(self) -> None:
        self._equity = []
