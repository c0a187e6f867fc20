from __future__ import annotations

import json
import time
from dataclasses import dataclass
from typing import Any

import httpx


class OpenAIError(Exception):
    """Base error for OpenAI client failures.

    `latency_ms` is set only when the upstream call completed before the failure.
    """

    status_code: int = 500

    def __init__(self, message: str, *, latency_ms: int | None = None):
        super().__init__(message)
        self.latency_ms = latency_ms

    @property
    def payload(self) -> Any:
        """Value surfaced to callers in the failure envelope's `error` field."""
        return str(self) or "Unknown error"


class OpenAIUnavailableError(OpenAIError):
    """Raised when OpenAI is not configured (e.g., missing API key or project id)."""


class OpenAITransportError(OpenAIError):
    """Raised when the request never produced a response (network failure, timeout)."""


class OpenAIProtocolError(OpenAIError):
    """Raised when the upstream body cannot be parsed as JSON."""

    def __init__(self, raw: str, *, latency_ms: int):
        super().__init__(f"Non-JSON: {raw[:200]}", latency_ms=latency_ms)


class OpenAIRejectedError(OpenAIError):
    """Raised when the upstream answers with a non-success status and a JSON body.

    The upstream status and error payload are kept verbatim.
    """

    def __init__(self, *, status_code: int, error: Any, latency_ms: int):
        super().__init__(f"OpenAI rejected the request ({status_code})", latency_ms=latency_ms)
        self.status_code = status_code or 500
        self.error = error

    @property
    def payload(self) -> Any:
        return self.error


@dataclass(frozen=True)
class OpenAIConfig:
    api_key: str
    project_id: str
    base_url: str
    timeout_seconds: float | None = None


@dataclass(frozen=True)
class ChatCompletion:
    """A successful chat completion, reduced to the fields callers use."""

    content: Any
    usage: Any
    latency_ms: int


NO_CONTENT = "(no content)"


def _first_message_content(data: Any) -> Any:
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    if not isinstance(message, dict):
        return None
    return message.get("content")


class OpenAIClient:
    """
    Minimal OpenAI chat-completions client.

    Design notes:
    - No prompt/output logging in this module.
    - One attempt per call; no retries.
    - Timeout is left to httpx unless configured.
    """

    def __init__(
        self,
        *,
        config: OpenAIConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = config
        self._transport = transport

    def _client_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {}
        if self._config.timeout_seconds is not None:
            kwargs["timeout"] = self._config.timeout_seconds
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return kwargs

    async def chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> ChatCompletion:
        url = f"{self._config.base_url.rstrip('/')}/chat/completions"
        headers = {
            "Authorization": f"Bearer {self._config.api_key}",
            "OpenAI-Project": self._config.project_id,
            "Content-Type": "application/json",
        }
        payload: dict[str, Any] = {
            "model": model,
            "temperature": temperature,
            "max_tokens": max_tokens,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        }

        started = time.perf_counter()
        try:
            async with httpx.AsyncClient(**self._client_kwargs()) as client:
                resp = await client.post(url, headers=headers, json=payload)
                raw = resp.text
        except httpx.HTTPError as exc:
            raise OpenAITransportError(str(exc)) from exc
        latency_ms = int((time.perf_counter() - started) * 1000)

        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise OpenAIProtocolError(raw, latency_ms=latency_ms) from exc

        if not resp.is_success:
            error = data.get("error") if isinstance(data, dict) else None
            raise OpenAIRejectedError(
                status_code=resp.status_code,
                error=error if error else data,
                latency_ms=latency_ms,
            )

        content = _first_message_content(data)
        usage = data.get("usage") if isinstance(data, dict) else None
        # Falsy scalars count as absent; empty objects/arrays are kept.
        if not usage and not isinstance(usage, (dict, list)):
            usage = None
        return ChatCompletion(
            content=NO_CONTENT if content is None else content,
            usage=usage,
            latency_ms=latency_ms,
        )
