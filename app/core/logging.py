"""Centralized logging configuration.

- Structured logs (JSON) to stdout for centralized collection (Docker/K8s/etc.)
- No request/response bodies, prompts or model outputs are logged
- Extra fields are optional; the formatter must never raise due to missing keys
"""

from __future__ import annotations

import json
import logging
import logging.config
import os
from datetime import UTC, datetime
from typing import Any


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Metadata copied from `extra=` when present on a record.
_EXTRA_FIELDS = ("request_id", "status_code", "duration_ms", "outcome", "success", "error")


class JsonFormatter(logging.Formatter):
    """Emit one JSON object per record, skipping metadata the record does not carry.

    A `'%(request_id)s'`-style format string would raise KeyError for records
    without those fields (e.g. third-party logs), so fields are read with getattr.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "method": getattr(record, "method", getattr(record, "http_method", None)),
            "path": getattr(record, "path", getattr(record, "request_path", None)),
        }
        for field in _EXTRA_FIELDS:
            payload[field] = getattr(record, field, None)

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(
            {key: value for key, value in payload.items() if value is not None},
            ensure_ascii=False,
            default=str,
        )


def setup_logging(level: str | None = None) -> None:
    """Configure application logging (JSON to stdout)."""

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "()": "app.core.logging.JsonFormatter",
                }
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                    "stream": "ext://sys.stdout",
                }
            },
            "loggers": {
                # httpx logs every outbound request at INFO; the relay logs its own outcome.
                "httpx": {"level": "WARNING"},
            },
            "root": {
                "level": (level or LOG_LEVEL).upper(),
                "handlers": ["default"],
            },
        }
    )
