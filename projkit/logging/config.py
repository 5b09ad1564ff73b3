from __future__ import annotations

import json
import logging
from typing import IO, Any, Optional

JSON_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_STANDARD_RECORD_ATTRS = set(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


class JsonFormatter(logging.Formatter):
    """Emit log records as compact JSON for deterministic parsing."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        extras = self._extract_extras(record)
        if extras:
            payload["context"] = extras
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)

    def _extract_extras(self, record: logging.LogRecord) -> dict[str, Any]:
        extras: dict[str, Any] = {}
        for key, value in record.__dict__.items():
            if key in _STANDARD_RECORD_ATTRS or key.startswith("_"):
                continue
            extras[key] = value
        return extras


class _ProjkitStreamHandler(logging.StreamHandler):
    """Marker subclass so repeated configuration does not stack handlers."""


def configure_logging(
    *,
    level: int | str = logging.INFO,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Configure the root logger with structured JSON output on ``stream`` (stderr by default)."""

    root = logging.getLogger()
    root.setLevel(level)

    for handler in list(root.handlers):
        if isinstance(handler, _ProjkitStreamHandler):
            root.removeHandler(handler)

    stream_handler = _ProjkitStreamHandler(stream)
    stream_handler.setFormatter(JsonFormatter(JSON_LOG_FORMAT))
    root.addHandler(stream_handler)
    return root


__all__ = ["JsonFormatter", "configure_logging", "JSON_LOG_FORMAT"]
