from __future__ import annotations

import math
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PROMPT = "Give me one fun sentence proving this OpenAI call works."
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 0.4
MAX_PROMPT_CHARS = 2000
MAX_OUTPUT_TOKENS = 250
SYSTEM_PROMPT = "You are a concise, friendly assistant."


def _normalize_prompt(value: Any) -> str:
    if isinstance(value, str) and value.strip():
        return value[:MAX_PROMPT_CHARS]
    return DEFAULT_PROMPT


def _normalize_temperature(value: Any) -> float:
    # bool is an int subclass; JSON true/false is not a temperature.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_TEMPERATURE
    if isinstance(value, float) and math.isnan(value):
        return DEFAULT_TEMPERATURE
    return float(min(max(value, 0.0), 1.0))


def _normalize_model(value: Any, *, default: str) -> str:
    if isinstance(value, str) and value:
        return value
    return default


class GenerationRequest(BaseModel):
    """Normalized relay input. Build it from a raw body with `from_payload`."""

    model_config = ConfigDict(frozen=True)

    prompt: str = Field(
        min_length=1,
        max_length=MAX_PROMPT_CHARS,
        description="User prompt forwarded as the only user message.",
        examples=["Give me one fun sentence proving this OpenAI call works."],
    )
    temperature: float = Field(
        default=DEFAULT_TEMPERATURE,
        ge=0.0,
        le=1.0,
        description="Sampling temperature, clamped into [0, 1].",
    )
    model: str = Field(
        default=DEFAULT_MODEL,
        min_length=1,
        description="Chat-completion model identifier.",
        examples=["gpt-4o-mini", "gpt-4o"],
    )

    @classmethod
    def from_payload(cls, payload: Any, *, default_model: str = DEFAULT_MODEL) -> GenerationRequest:
        """
        Normalize an arbitrary JSON value into a request.

        Never raises for bad field values: each field falls back to its default.
        Non-object payloads are treated as an empty object.
        """

        body = payload if isinstance(payload, dict) else {}
        return cls(
            prompt=_normalize_prompt(body.get("prompt")),
            temperature=_normalize_temperature(body.get("temperature")),
            model=_normalize_model(body.get("model"), default=default_model),
        )


class GenerationRequestIn(BaseModel):
    """OpenAPI documentation for the relay body. All fields are optional."""

    prompt: str | None = None
    temperature: float | None = None
    model: str | None = None


class GenerationSuccessOut(BaseModel):
    success: Literal[True] = True
    latency_ms: int = Field(
        ge=0,
        serialization_alias="latencyMs",
        description="Wall-clock duration of the upstream call in milliseconds.",
    )
    output: Any = Field(
        description="First completion's message content as sent upstream, or `(no content)`."
    )
    usage: Any = Field(default=None, description="Upstream token accounting, passed through verbatim.")
    model: str
    temperature: float

    def to_content(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class GenerationFailureOut(BaseModel):
    success: Literal[False] = False
    latency_ms: int | None = Field(
        default=None,
        ge=0,
        serialization_alias="latencyMs",
        description="Present only when the upstream call completed.",
    )
    error: Any = Field(description="Error message, or the upstream error payload verbatim.")

    def to_content(self) -> dict[str, Any]:
        exclude = {"latency_ms"} if self.latency_ms is None else None
        return self.model_dump(by_alias=True, exclude=exclude)


GenerationResult = GenerationSuccessOut | GenerationFailureOut
