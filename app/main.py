from __future__ import annotations

from fastapi import FastAPI
from fastapi.openapi.docs import get_redoc_html

from app.api.exception_handlers import register_exception_handlers
from app.api.schemas import HealthOut
from app.core.logging import setup_logging
from app.core.metrics import PrometheusMetricsMiddleware, metrics_router
from app.core.middleware.http_logging import HttpLoggingMiddleware
from app.first_call.router import router as first_call_router
from app.onboarding.router import router as onboarding_router

setup_logging()

_REDOC_JS_URL = "https://cdn.jsdelivr.net/npm/redoc@2.1.4/bundles/redoc.standalone.js"


def create_app() -> FastAPI:
    # Settings are read per request, so creating the app never requires OpenAI credentials.
    app = FastAPI(
        title="Builder Onramp API",
        description=(
            "Pick a project goal, get a stack recommendation and run a first OpenAI call.\n\n"
            "Design principles:\n"
            "- The relay makes exactly one upstream call per request: no retries, no streaming.\n"
            "- Every relay failure is returned as `{success: false, error}`; upstream "
            "rejections keep the upstream status and payload.\n"
            "- Nothing is persisted, and prompts/outputs are never logged."
        ),
        docs_url="/swagger",
        redoc_url=None,  # custom ReDoc page at /docs
        openapi_tags=[
            {
                "name": "health",
                "description": "Basic uptime check. Does not call the upstream API.",
            },
            {
                "name": "onboarding",
                "description": "Goal/stack catalogue and the first-call prompt builder.",
            },
            {
                "name": "first-call",
                "description": "Relay a prompt to the chat-completion API.",
            },
        ],
    )

    app.add_middleware(PrometheusMetricsMiddleware)
    app.add_middleware(HttpLoggingMiddleware)

    register_exception_handlers(app)

    @app.get("/docs", include_in_schema=False)
    async def redoc_docs():
        return get_redoc_html(
            openapi_url=app.openapi_url or "/openapi.json",
            title=f"{app.title} - ReDoc",
            redoc_js_url=_REDOC_JS_URL,
        )

    @app.get(
        "/health",
        response_model=HealthOut,
        tags=["health"],
        summary="Health check",
        description=(
            "Lightweight endpoint to verify the API process is running.\n\n"
            "It does not check OpenAI credentials or reachability."
        ),
    )
    async def health() -> HealthOut:
        return HealthOut(status="ok")

    app.include_router(metrics_router)
    app.include_router(onboarding_router)
    app.include_router(first_call_router)
    return app


app = create_app()
