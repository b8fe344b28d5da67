"""tradesim.feeds.io

CSV loader for historic feeds.

CSV schema:
- required: time (ISO-8601), close
- optional: high, low, volume

Numeric columns go through numpy so blanks become NaN, not errors.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path

import numpy as np

from tradesim.core.exceptions import InvalidArgumentError
from tradesim.core.time import parse_dt
from tradesim.feeds.historic import HistoricFeed, PriceBar

logger = logging.getLogger(__name__)


def load_feed_csv(path: str | Path) -> HistoricFeed:
    p = Path(path)
    rows: list[dict[str, str]] = []
    with p.open("r", encoding="utf-8") as f:
        r = csv.DictReader(f)
        for row in r:
            rows.append({k.strip(): (v.strip() if isinstance(v, str) else "") for k, v in row.items() if k is not None})

    if not rows:
        logger.warning("empty price file: %s", p)
        return HistoricFeed()

    for required in ("time", "close"):
        if required not in rows[0]:
            raise InvalidArgumentError(f"CSV missing required column: {required}")

    def col(name: str) -> np.ndarray | None:
        if name not in rows[0]:
            return None
        out: list[float] = []
        for row in rows:
            v = row.get(name, "")
            out.append(float("nan") if v == "" else float(v))
        return np.array(out, dtype=np.float64)

    close = col("close")
    high, low, volume = col("high"), col("low"), col("volume")

    def at(a: np.ndarray | None, i: int) -> float | None:
        return None if a is None else float(a[i])

    bars = [
        PriceBar(
            time=parse_dt(row["time"]),
            close=float(close[i]),
            high=at(high, i),
            low=at(low, i),
            volume=at(volume, i),
        )
        for i, row in enumerate(rows)
    ]
    logger.debug("loaded %d bars from %s", len(bars), p)
    return HistoricFeed(bars)
