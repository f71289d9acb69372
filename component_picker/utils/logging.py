"""
Logging for the component picker CLI.

Every command calls ``configure_logging(config.logging)`` right after loading
``AppConfig``; library modules only ever ask for ``logging.getLogger(__name__)``.

What gets logged
----------------
  INFO   knowledge.loader          catalog file loaded (component/cell/filter counts)
  INFO   recommendations.reporter  JSON/CSV report written
  DEBUG  recommendations.engine    per-candidate score for each recommend() call

The default level is WARNING, so a plain ``component-picker recommend`` prints
nothing but its cards.  Raise it with ``COMPONENT_PICKER_LOG_LEVEL=DEBUG`` to
see why a component landed in matches or alternatives.

Records go to stderr; stdout carries only command output, so
``recommend --json | jq`` keeps working at any level.

With ``json_format = true`` under ``[logging]`` each record is one object::

    {"ts": "2026-10-19T15:00:00Z", "level": "DEBUG",
     "logger": "component_picker.recommendations.engine",
     "msg": "Scored Toast for Minor + Notification: 67 (2/3 filters matched)"}
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from component_picker.config import LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Attributes every LogRecord carries; anything else came from ``extra=``.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


class _JsonFormatter(logging.Formatter):
    """One JSON object per record: ``ts``, ``level``, ``logger``, ``msg``,
    ``exc`` when an exception is attached, plus any ``extra=`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: dict = {
            "ts": ts.strftime(LOG_DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        payload.update(
            (key, val)
            for key, val in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        )
        return json.dumps(payload, default=str)


def configure_logging(config: "LoggingConfig") -> None:
    """Install stderr (and optionally file) handlers on the root logger.

    Safe to call more than once; ``force=True`` replaces earlier handlers,
    which the CLI tests rely on when several commands run in one process.

    Args:
        config: ``AppConfig.logging``.
    """
    level = getattr(logging, config.level.upper(), logging.WARNING)
    formatter: logging.Formatter = (
        _JsonFormatter()
        if config.json_format
        else logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)
