from __future__ import annotations

from pydantic import BaseModel, Field


class GoalOut(BaseModel):
    value: str
    label: str
    help: str


class StackOut(BaseModel):
    value: str
    label: str
    best_at: str


class OnboardingOptionsOut(BaseModel):
    goals: list[GoalOut]
    stacks: list[StackOut]
    recommended: dict[str, str] = Field(description="Goal value -> recommended stack value.")
    levels: list[str]
    models: list[str]
    default_goal: str
    default_level: str
    default_model: str
    default_temperature: float


class OnboardingPromptIn(BaseModel):
    want: str = Field(min_length=1, description="Goal value.", examples=["support bot"])
    stack: str | None = Field(
        default=None,
        description="Stack value. Omit to accept the recommendation; any value counts as an override.",
        examples=["python-flask"],
    )
    level: str | None = Field(default=None, examples=["New to it"])


class OnboardingPromptOut(BaseModel):
    prompt: str
    want: str
    stack: str
    stack_label: str
    stack_help: str
    recommended_stack: str | None
    user_overrode_stack: bool
    level: str
