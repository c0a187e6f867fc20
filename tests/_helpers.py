"""Test helpers: a stub chat-completion upstream served through httpx.MockTransport."""

from __future__ import annotations

import json
from typing import Any

import httpx

STUB_COMPLETION = "Hello from the stub upstream."


def completion_body(content: Any = STUB_COMPLETION, *, usage: Any = None) -> dict[str, Any]:
    body: dict[str, Any] = {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {"index": 0, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"}
        ],
    }
    if usage is not None:
        body["usage"] = usage
    return body


class StubUpstream:
    """Records every outbound request and answers with a configurable response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: Any = completion_body(
            usage={"prompt_tokens": 12, "completion_tokens": 7, "total_tokens": 19}
        )
        self.raw: str | None = None
        self.exc: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.raw is not None:
            return httpx.Response(self.status_code, text=self.raw)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def sent(self) -> dict[str, Any]:
        """JSON body of the last outbound request."""
        return json.loads(self.requests[-1].content)
