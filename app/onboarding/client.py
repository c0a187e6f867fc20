"""Relay caller: posts a prompt to /api/first-call and splits the answer for display."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from app.first_call.markdown import split_markdown

logger = logging.getLogger("app.onboarding.client")

FIRST_CALL_PATH = "/api/first-call"
MAX_ERROR_CHARS = 400


@dataclass(frozen=True)
class FirstCallOutcome:
    """What the onboarding page shows after one relay call."""

    success: bool
    plan: str = ""
    snippet: str = ""
    latency_ms: int | None = None
    error: str | None = None


def describe_error(data: Any) -> str:
    """
    Render a failure body for display.

    String errors are shown as-is; anything else is compact JSON cut to 400 chars.
    A missing `error` falls back to the whole body.
    """

    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, str):
        return error
    shown = data if error is None else error
    return json.dumps(shown, separators=(",", ":"), ensure_ascii=False)[:MAX_ERROR_CHARS]


def outcome_from_response(*, status_code: int, data: Any) -> FirstCallOutcome:
    body = data if isinstance(data, dict) else {}
    latency_ms = body.get("latencyMs")
    if not 200 <= status_code < 300 or body.get("success") is not True:
        return FirstCallOutcome(success=False, latency_ms=latency_ms, error=describe_error(data))

    output = body.get("output") or ""
    if not isinstance(output, str):
        # Structured content (e.g. a list of content parts) is shown as JSON text.
        output = json.dumps(output, ensure_ascii=False)
    split = split_markdown(output)
    return FirstCallOutcome(
        success=True,
        plan=split.prose,
        snippet=split.code,
        latency_ms=latency_ms,
    )


class FirstCallClient:
    """
    Caller side of the relay.

    Pass `http_client` to reuse a configured httpx.AsyncClient (e.g. one bound to an
    ASGI app in tests); otherwise a client is opened per call against `base_url`.
    """

    def __init__(self, *, base_url: str = "", http_client: httpx.AsyncClient | None = None):
        self._base_url = base_url.rstrip("/")
        self._http = http_client

    async def _post(self, client: httpx.AsyncClient, body: dict[str, Any]) -> FirstCallOutcome:
        resp = await client.post(f"{self._base_url}{FIRST_CALL_PATH}", json=body)
        return outcome_from_response(status_code=resp.status_code, data=resp.json())

    async def run(self, *, prompt: str, model: str, temperature: float) -> FirstCallOutcome:
        body = {"prompt": prompt, "model": model, "temperature": temperature}
        try:
            if self._http is not None:
                return await self._post(self._http, body)
            async with httpx.AsyncClient() as client:
                return await self._post(client, body)
        except (httpx.HTTPError, ValueError) as exc:
            # Includes a relay response that is not JSON at all.
            logger.warning("First call request failed", extra={"error": type(exc).__name__})
            return FirstCallOutcome(success=False, error=str(exc) or "Network error")
