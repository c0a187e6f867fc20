from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.core.llm.deps import get_openai_client
from app.core.llm.openai_client import OpenAIClient
from app.core.settings import get_settings
from app.first_call.schemas import (
    GenerationFailureOut,
    GenerationRequestIn,
    GenerationSuccessOut,
)
from app.first_call.service import FirstCallService

router = APIRouter(prefix="/api", tags=["first-call"])


async def _read_json_body(request: Request) -> Any:
    """Return the parsed body, or an empty object when it is missing or malformed."""

    raw = await request.body()
    try:
        return json.loads(raw)
    except ValueError:
        return {}


@router.post(
    "/first-call",
    response_model=GenerationSuccessOut,
    responses={
        500: {"model": GenerationFailureOut, "description": "Configuration or upstream failure."},
    },
    # The body is parsed by hand so malformed JSON never turns into a 422.
    openapi_extra={
        "requestBody": {
            "required": False,
            "content": {"application/json": {"schema": GenerationRequestIn.model_json_schema()}},
        }
    },
    summary="Relay a prompt to the chat-completion API",
    description=(
        "Forwards one prompt to the configured OpenAI project and returns the first "
        "completion's text with latency and token usage.\n\n"
        "The body is optional and never rejected: malformed JSON is treated as `{}` and "
        "each field falls back to its default. Upstream rejections keep the upstream "
        "status code and error payload."
    ),
)
async def first_call(
    request: Request,
    openai_client: OpenAIClient = Depends(get_openai_client),
) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None) or request.headers.get("X-Request-ID")
    payload = await _read_json_body(request)

    svc = FirstCallService(
        llm_client=openai_client,
        default_model=get_settings().openai_default_model,
    )
    outcome = await svc.relay(payload=payload, request_id=request_id)
    return JSONResponse(status_code=outcome.status_code, content=outcome.result.to_content())
