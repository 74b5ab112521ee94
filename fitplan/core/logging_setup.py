"""Logging configuration helpers.

Updates:
    v0.1.0 - 2026-10-19 - JSON and plain formatters with per-logger overrides.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Mapping

_configured = False
_handler: logging.Handler | None = None

PLAIN_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "message",
        "taskName",
        "asctime",
    }
)


class JsonFormatter(logging.Formatter):
    """Emit one JSON object per record, including `extra=` fields."""

    def __init__(self, service: str | None = None) -> None:
        super().__init__()
        self._service = service

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if self._service:
            payload["service"] = self._service

        payload.update(_extract_extra_fields(record))

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(
    config: Mapping[str, Any] | None = None, *, service: str | None = None
) -> None:
    """Configure application-wide logging.

    Args:
        config (Mapping[str, Any] | None): Logging section from `settings.yaml`.
            Recognised keys: `level` (default INFO), `format` (`json` or
            `plain`, default `json`) and `loggers`, a mapping of logger name
            to level used to quiet chatty dependencies.
        service (str | None): Application name stamped on JSON records.
    """

    global _configured, _handler
    if _configured:
        return

    config = config or {}
    level = _parse_level(config.get("level", "INFO"), default=logging.INFO)

    handler = logging.StreamHandler()
    if str(config.get("format", "json")).lower() == "plain":
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    else:
        handler.setFormatter(JsonFormatter(service=service))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    overrides = config.get("loggers") or {}
    if isinstance(overrides, Mapping):
        for name, logger_level in overrides.items():
            logging.getLogger(str(name)).setLevel(
                _parse_level(logger_level, default=logging.WARNING)
            )

    _handler = handler
    _configured = True


def set_runtime_level(level_name: str) -> None:
    """Adjust the root logging level at runtime.

    Raises:
        ValueError: If the level name is not recognized by the logging module.
    """

    if not level_name:
        return
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {level_name}")

    logging.getLogger().setLevel(level)
    if _handler:
        _handler.setLevel(level)


def _parse_level(value: Any, *, default: int) -> int:
    if isinstance(value, int):
        return value
    level = getattr(logging, str(value).upper(), None)
    return level if isinstance(level, int) else default


def _extract_extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if not key.startswith("_") and key not in _RESERVED_ATTRS
    }
