from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from app.core.llm.openai_client import (
    ChatCompletion,
    OpenAIError,
    OpenAIProtocolError,
    OpenAIRejectedError,
    OpenAITransportError,
    OpenAIUnavailableError,
)
from app.core.metrics import observe_relay_outcome
from app.first_call.schemas import (
    DEFAULT_MODEL,
    MAX_OUTPUT_TOKENS,
    SYSTEM_PROMPT,
    GenerationFailureOut,
    GenerationRequest,
    GenerationResult,
    GenerationSuccessOut,
)

logger = logging.getLogger("app.first_call")


class ChatClient(Protocol):
    async def chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> ChatCompletion: ...


@dataclass(frozen=True)
class RelayOutcome:
    """HTTP status plus the envelope returned to the caller."""

    status_code: int
    result: GenerationResult
    kind: str

    @property
    def latency_ms(self) -> int | None:
        return self.result.latency_ms


def _outcome_kind(exc: OpenAIError) -> str:
    if isinstance(exc, OpenAIRejectedError):
        return "rejected"
    if isinstance(exc, OpenAIProtocolError):
        return "protocol_error"
    if isinstance(exc, OpenAIUnavailableError):
        return "unavailable"
    if isinstance(exc, OpenAITransportError):
        return "transport_error"
    return "error"


def failure_outcome(exc: Exception) -> RelayOutcome:
    """Convert any exception into the uniform failure envelope."""

    if isinstance(exc, OpenAIError):
        return RelayOutcome(
            status_code=exc.status_code,
            result=GenerationFailureOut(latency_ms=exc.latency_ms, error=exc.payload),
            kind=_outcome_kind(exc),
        )
    return RelayOutcome(
        status_code=500,
        result=GenerationFailureOut(error=str(exc) or "Unknown error"),
        kind="unexpected",
    )


class FirstCallService:
    """Relay one prompt to the chat-completion API and normalize the answer."""

    def __init__(self, *, llm_client: ChatClient, default_model: str = DEFAULT_MODEL):
        self._llm = llm_client
        self._default_model = default_model

    async def relay(self, *, payload: Any, request_id: str | None = None) -> RelayOutcome:
        """
        Normalize `payload`, make a single upstream call and build the envelope.

        Every failure is converted into a failure outcome; nothing is raised.
        """

        try:
            gen_request = GenerationRequest.from_payload(payload, default_model=self._default_model)
            completion = await self._llm.chat_completion(
                model=gen_request.model,
                temperature=gen_request.temperature,
                max_tokens=MAX_OUTPUT_TOKENS,
                system_prompt=SYSTEM_PROMPT,
                user_prompt=gen_request.prompt,
            )
            outcome = RelayOutcome(
                status_code=200,
                result=GenerationSuccessOut(
                    latency_ms=completion.latency_ms,
                    output=completion.content,
                    usage=completion.usage,
                    model=gen_request.model,
                    temperature=gen_request.temperature,
                ),
                kind="success",
            )
        except Exception as exc:  # noqa: BLE001 - relay boundary, converted to an envelope
            outcome = failure_outcome(exc)
            if outcome.kind == "unexpected":
                logger.exception(
                    "Relay call failed unexpectedly",
                    extra={"request_id": request_id, "status_code": outcome.status_code},
                )

        observe_relay_outcome(outcome=outcome.kind, latency_ms=outcome.latency_ms)
        # Never log prompts or outputs.
        logger.info(
            "Relay call completed",
            extra={
                "request_id": request_id,
                "outcome": outcome.kind,
                "success": outcome.kind == "success",
                "status_code": outcome.status_code,
                "duration_ms": outcome.latency_ms,
            },
        )
        return outcome
