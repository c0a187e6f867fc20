from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.llm.openai_client import OpenAIUnavailableError
from app.core.metrics import observe_relay_outcome
from app.domain.exceptions import BusinessValidationError

logger = logging.getLogger("app.business_validation")
relay_logger = logging.getLogger("app.first_call")


def register_exception_handlers(app: FastAPI) -> None:
    """Register application exception handlers."""

    @app.exception_handler(BusinessValidationError)
    async def handle_business_validation_error(
        request: Request,
        exc: BusinessValidationError,
    ) -> JSONResponse:
        request_id = request.headers.get("X-Request-ID")
        logger.info(
            "Business validation failed",
            extra={
                "request_id": request_id,
                "http_method": request.method,
                "request_path": request.url.path,  # no query string
                "status_code": 400,
                "error": "business_validation",
            },
        )
        return JSONResponse(status_code=400, content={"detail": exc.message})

    @app.exception_handler(OpenAIUnavailableError)
    async def handle_openai_unavailable(
        request: Request,
        exc: OpenAIUnavailableError,
    ) -> JSONResponse:
        # Raised while resolving the client dependency: no outbound call, no latency.
        request_id = getattr(request.state, "request_id", None) or request.headers.get(
            "X-Request-ID"
        )
        observe_relay_outcome(outcome="unavailable", latency_ms=None)
        relay_logger.warning(
            "Relay call rejected: OpenAI is not configured",
            extra={
                "request_id": request_id,
                "outcome": "unavailable",
                "success": False,
                "status_code": 500,
            },
        )
        return JSONResponse(status_code=500, content={"success": False, "error": exc.payload})
