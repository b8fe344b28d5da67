"""tradesim.metrics.validation

Performance math over an equity curve.

Enough to tell signal from noise, not a finance library.
"""

from __future__ import annotations

import numpy as np


def returns_from_equity(equity: np.ndarray) -> np.ndarray:
    e = equity.astype(np.float64)
    if e.size < 2:
        return np.zeros(0, dtype=np.float64)
    return (e[1:] / e[:-1]) - 1.0


def max_drawdown(equity: np.ndarray) -> float:
    if equity.size == 0:
        return 0.0
    peak = np.maximum.accumulate(equity)
    dd = (equity / peak) - 1.0
    return float(dd.min())


def sharpe(returns: np.ndarray, *, periods_per_year: int = 252) -> float:
    r = returns.astype(np.float64)
    if r.size < 2:
        return 0.0
    mu = float(np.mean(r))
    sd = float(np.std(r, ddof=1))
    # Constant returns leave rounding noise in the std, not an exact zero.
    if not np.isfinite(sd) or sd <= 1e-12 * max(1.0, abs(mu)):
        return 0.0
    return float((mu / sd) * np.sqrt(periods_per_year))


def total_return(equity: np.ndarray) -> float:
    if equity.size == 0 or equity[0] == 0.0:
        return 0.0
    return float(equity[-1] / equity[0] - 1.0)
