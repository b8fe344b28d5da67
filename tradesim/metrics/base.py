"""tradesim.metrics.base

Metric plugin contract.

A metric is invoked by the engine once per step with the current account and
event, and returns named numbers. It computes; it does not store. Persisting
results is the job of whatever logs them.

Lifecycle:
- `start()` before a run
- `end()` after a run
- `reset()` when the engine discards run state

Stateful metrics must clear their state in `reset()`, or values leak from one
window into the next.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from tradesim.core.types import Account, Event, MetricResults


@runtime_checkable
class Metric(Protocol):
    def calculate(self, account: Account, event: Event) -> MetricResults: ...

    def start(self) -> None: ...

    def end(self) -> None: ...

    def reset(self) -> None: ...


class BaseMetric(ABC):
    """Lifecycle hooks default to no-ops; subclasses implement `calculate`."""

    name: str = "metric"

    @abstractmethod
    def calculate(self, account: Account, event: Event) -> MetricResults:
        raise NotImplementedError

    def start(self) -> None:
        return None

    def end(self) -> None:
        return None

    def reset(self) -> None:
        return None
