"""Unit tests: OpenAIClient error mapping and latency reporting."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from app.core.llm.deps import build_openai_client
from app.core.llm.openai_client import (
    NO_CONTENT,
    ChatCompletion,
    OpenAIClient,
    OpenAIConfig,
    OpenAIProtocolError,
    OpenAIRejectedError,
    OpenAITransportError,
    OpenAIUnavailableError,
)
from app.core.settings import Settings
from tests._helpers import STUB_COMPLETION, StubUpstream


def _client(upstream: StubUpstream) -> OpenAIClient:
    config = OpenAIConfig(api_key="sk-unit", project_id="proj_unit", base_url="https://u.test/v1/")
    return OpenAIClient(config=config, transport=upstream.transport)


def _call(client: OpenAIClient) -> ChatCompletion:
    return asyncio.run(
        client.chat_completion(
            model="gpt-4o-mini",
            temperature=0.4,
            max_tokens=250,
            system_prompt="sys",
            user_prompt="hello",
        )
    )


def test_success_returns_content_usage_and_latency(upstream: StubUpstream) -> None:
    completion = _call(_client(upstream))

    assert completion.content == STUB_COMPLETION
    assert completion.usage["total_tokens"] == 19
    assert completion.latency_ms >= 0
    # Trailing slash on the base URL is not doubled.
    assert str(upstream.requests[0].url) == "https://u.test/v1/chat/completions"


def test_non_json_body_raises_protocol_error_with_latency(upstream: StubUpstream) -> None:
    upstream.raw = "not json at all"

    with pytest.raises(OpenAIProtocolError) as excinfo:
        _call(_client(upstream))

    assert excinfo.value.payload == "Non-JSON: not json at all"
    assert excinfo.value.latency_ms is not None
    assert excinfo.value.status_code == 500


def test_non_json_error_status_is_a_protocol_error(upstream: StubUpstream) -> None:
    upstream.status_code = 502
    upstream.raw = "<html>Bad gateway</html>"

    with pytest.raises(OpenAIProtocolError):
        _call(_client(upstream))


def test_rejection_keeps_status_and_error_payload(upstream: StubUpstream) -> None:
    upstream.status_code = 400
    upstream.body = {"error": {"message": "bad model", "param": "model"}}

    with pytest.raises(OpenAIRejectedError) as excinfo:
        _call(_client(upstream))

    assert excinfo.value.status_code == 400
    assert excinfo.value.payload == {"message": "bad model", "param": "model"}
    assert excinfo.value.latency_ms is not None


def test_transport_failure_has_no_latency(upstream: StubUpstream) -> None:
    upstream.exc = httpx.ReadTimeout("timed out")

    with pytest.raises(OpenAITransportError) as excinfo:
        _call(_client(upstream))

    assert excinfo.value.payload == "timed out"
    assert excinfo.value.latency_ms is None


def test_non_object_success_body_yields_placeholder(upstream: StubUpstream) -> None:
    upstream.body = ["unexpected"]

    completion = _call(_client(upstream))

    assert completion.content == NO_CONTENT
    assert completion.usage is None


def test_build_client_requires_key_and_project() -> None:
    with pytest.raises(OpenAIUnavailableError, match="Missing OPENAI_API_KEY"):
        build_openai_client(settings=Settings(openai_api_key=None, openai_project_id="p"))
    with pytest.raises(OpenAIUnavailableError, match="Missing OPENAI_PROJECT_ID"):
        build_openai_client(settings=Settings(openai_api_key="k", openai_project_id=None))

    client = build_openai_client(settings=Settings(openai_api_key="k", openai_project_id="p"))
    assert isinstance(client, OpenAIClient)
