"""tradesim.metrics

Metric plugins invoked by the engine at every step.
"""

from .account import AccountMetric
from .base import BaseMetric, Metric
from .progress import ProgressMetric
from .returns import ReturnsMetric

__all__ = ["AccountMetric", "BaseMetric", "Metric", "ProgressMetric", "ReturnsMetric"]
