from __future__ import annotations

import httpx
from pydantic import ValidationError

from app.core.llm.openai_client import OpenAIClient, OpenAIConfig, OpenAIUnavailableError
from app.core.settings import Settings, get_settings


def build_openai_client(
    *,
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> OpenAIClient:
    """Build a client from settings, raising OpenAIUnavailableError when unconfigured."""

    missing = settings.missing_openai_setting
    if missing is not None:
        raise OpenAIUnavailableError(f"Missing {missing}")

    config = OpenAIConfig(
        api_key=str(settings.openai_api_key),
        project_id=str(settings.openai_project_id),
        base_url=settings.openai_base_url,
        timeout_seconds=settings.openai_timeout_seconds,
    )
    return OpenAIClient(config=config, transport=transport)


def get_openai_client() -> OpenAIClient:
    """
    Dependency provider for OpenAIClient.

    Resolved per request so a missing credential fails the request before any
    outbound traffic. OpenAIUnavailableError is mapped to the 500 failure envelope
    by the registered exception handler.
    """

    try:
        settings = get_settings()
    except ValidationError as exc:
        raise OpenAIUnavailableError(str(exc)) from exc
    return build_openai_client(settings=settings)
