"""tradesim.backtest

Runs one simulation engine over many windows of history.

Single run, walk-forward, and Monte-Carlo share one per-window protocol:
warmup, scored run, reset.
"""

from .walkforward import Backtest, WindowRun, plan_window

__all__ = ["Backtest", "WindowRun", "plan_window"]
