"""tradesim.feeds

Historic market data as a feed: a timeframe plus the events inside it.
"""

from .historic import HistoricFeed, PriceBar
from .io import load_feed_csv

__all__ = ["HistoricFeed", "PriceBar", "load_feed_csv"]
