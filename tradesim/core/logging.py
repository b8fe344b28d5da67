"""tradesim.core.logging

Standard library logging, configured once.

Modules log through `logging.getLogger(__name__)`; this module only decides
where records go and how they look. Levels can be changed at runtime, which
matters in notebooks where a sweep is rerun with more detail.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime

from tradesim.core.config import LoggingConfig

ROOT = "tradesim"

_HANDLER_ATTR = "_tradesim_handler"


class ShortFormatter(logging.Formatter):
    """``[LEVEL] module: message`` with only the last logger name segment."""

    def format(self, record: logging.LogRecord) -> str:
        short = record.name.rsplit(".", 1)[-1]
        msg = f"[{record.levelname}] {short}: {record.getMessage()}"
        if record.exc_info:
            msg = f"{msg}\n{self.formatException(record.exc_info)}"
        return msg


class JsonFormatter(logging.Formatter):
    """One JSON object per line. Extra fields passed via `extra=` are kept."""

    _STANDARD = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        out = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for k, v in vars(record).items():
            if k not in self._STANDARD and not k.startswith("_"):
                out[k] = v if isinstance(v, str | int | float | bool) or v is None else str(v)
        if record.exc_info:
            out["exc"] = self.formatException(record.exc_info)
        return json.dumps(out, sort_keys=True)


def configure_logging(cfg: LoggingConfig | None = None) -> logging.Logger:
    """Install a single stream handler on the `tradesim` logger.

    Idempotent: calling again replaces the handler installed by a previous call
    and leaves handlers installed by anyone else alone.
    """

    cfg = cfg or LoggingConfig()
    logger = logging.getLogger(ROOT)

    for h in list(logger.handlers):
        if getattr(h, _HANDLER_ATTR, False):
            logger.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter() if cfg.json_output else ShortFormatter())
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)
    logger.setLevel(cfg.level)
    logger.propagate = False
    return logger


def set_level(level: str | int, prefix: str = ROOT) -> None:
    """Set the level of every existing logger whose name starts with `prefix`."""

    if isinstance(level, str):
        level = level.upper()
    logging.getLogger(prefix).setLevel(level)
    for name in list(logging.root.manager.loggerDict):
        if name.startswith(prefix + "."):
            logging.getLogger(name).setLevel(level)
