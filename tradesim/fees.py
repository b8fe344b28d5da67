"""tradesim.fees

Fee plugin contract and the common models.

A fee model is a pure function of one execution. The engine consults it at
fill time; the orchestrator never does. Fees are in the currency of the
executed instrument and normally positive (negative models a rebate).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from tradesim.core.types import Execution


@runtime_checkable
class FeeModel(Protocol):
    def calculate(self, execution: Execution) -> float: ...


class NoFeeModel:
    def calculate(self, execution: Execution) -> float:
        return 0.0


@dataclass(frozen=True, slots=True)
class PercentageFeeModel:
    """Basis points of traded notional, with an optional floor per execution."""

    fee_bps: float = 10.0
    minimum: float = 0.0

    def __post_init__(self) -> None:
        if self.fee_bps < 0:
            raise ValueError("fee_bps must be >= 0")
        if self.minimum < 0:
            raise ValueError("minimum must be >= 0")

    def calculate(self, execution: Execution) -> float:
        notional = abs(float(execution.size) * float(execution.price))
        return max(notional * (self.fee_bps / 10_000.0), self.minimum)


@dataclass(frozen=True, slots=True)
class FixedFeeModel:
    """Flat fee per execution, whatever its size."""

    fee: float = 0.0

    def calculate(self, execution: Execution) -> float:
        return float(self.fee)
