from __future__ import annotations

import json
import logging

from app.core.logging import JsonFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="app.first_call",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Relay call completed",
        args=(),
        exc_info=None,
    )
    record.__dict__.update(extra)
    return record


def test_formatter_emits_present_extra_fields() -> None:
    line = JsonFormatter().format(
        _record(request_id="req_1", outcome="rejected", success=False, status_code=429)
    )

    payload = json.loads(line)
    assert payload["logger"] == "app.first_call"
    assert payload["message"] == "Relay call completed"
    assert payload["request_id"] == "req_1"
    assert payload["outcome"] == "rejected"
    assert payload["success"] is False
    assert payload["status_code"] == 429


def test_formatter_skips_missing_fields() -> None:
    payload = json.loads(JsonFormatter().format(_record()))

    assert "request_id" not in payload
    assert "duration_ms" not in payload
    assert payload["level"] == "INFO"
