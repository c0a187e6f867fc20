from __future__ import annotations


def test_health_ok(client) -> None:
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


def test_health_does_not_need_openai_credentials(client, monkeypatch) -> None:
    from app.core.settings import get_settings

    monkeypatch.delenv("OPENAI_API_KEY")
    get_settings.cache_clear()

    res = client.get("/health")
    assert res.status_code == 200


def test_metrics_exposes_relay_counters(client) -> None:
    client.post("/api/first-call", json={"prompt": "hello"})

    res = client.get("/metrics")
    assert res.status_code == 200
    assert 'llm_upstream_requests_total{outcome="success"}' in res.text
    assert 'route="/api/first-call"' in res.text


def test_metrics_module_imports_and_records_outcomes() -> None:
    from prometheus_client import REGISTRY

    from app.core.metrics import observe_relay_outcome

    before = REGISTRY.get_sample_value(
        "llm_upstream_requests_total", {"outcome": "protocol_error"}
    ) or 0.0
    observe_relay_outcome(outcome="protocol_error", latency_ms=12)

    after = REGISTRY.get_sample_value("llm_upstream_requests_total", {"outcome": "protocol_error"})
    assert after == before + 1
