from __future__ import annotations

import pytest

from tests._helpers import StubUpstream


@pytest.fixture(autouse=True)
def _openai_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("OPENAI_PROJECT_ID", "proj_test")
    monkeypatch.setenv("OPENAI_BASE_URL", "https://upstream.test/v1")
    monkeypatch.delenv("OPENAI_DEFAULT_MODEL", raising=False)
    monkeypatch.delenv("OPENAI_TIMEOUT_SECONDS", raising=False)
    # Settings are cached via @lru_cache; clear so each test sees its own environment.
    from app.core.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def upstream() -> StubUpstream:
    return StubUpstream()


@pytest.fixture
def app(upstream: StubUpstream):
    from app.core.llm.deps import build_openai_client, get_openai_client
    from app.core.settings import get_settings
    from app.main import create_app

    app = create_app()
    transport = upstream.transport
    # Same settings-driven construction as production, with the stub as transport.
    app.dependency_overrides[get_openai_client] = lambda: build_openai_client(
        settings=get_settings(), transport=transport
    )
    return app


@pytest.fixture
def client(app):
    from fastapi.testclient import TestClient

    with TestClient(app) as c:
        yield c
