"""tradesim.metrics.account

Stateless snapshot of the account at each step.
"""

from __future__ import annotations

from tradesim.core.types import Account, Event, MetricResults
from tradesim.metrics.base import BaseMetric


class AccountMetric(BaseMetric):
    name = "account"

    def calculate(self, account: Account, event: Event) -> MetricResults:
        return {
            "account.cash": float(account.cash),
            "account.equity": float(account.equity),
            "account.positions": float(len(account.positions)),
        }
