from __future__ import annotations

from fastapi import APIRouter

from app.first_call.schemas import DEFAULT_TEMPERATURE
from app.onboarding.catalog import (
    DEFAULT_GOAL,
    DEFAULT_LEVEL,
    EXPERIENCE_LEVELS,
    GOALS,
    MODELS,
    RECOMMENDED,
    STACKS,
    get_stack_help,
    get_stack_label,
    recommended_stack,
)
from app.onboarding.prompt import build_onboarding_prompt
from app.onboarding.schemas import (
    GoalOut,
    OnboardingOptionsOut,
    OnboardingPromptIn,
    OnboardingPromptOut,
    StackOut,
)
from app.onboarding.selection import build_selection

router = APIRouter(prefix="/onboarding", tags=["onboarding"])


@router.get("/options", response_model=OnboardingOptionsOut)
async def get_options() -> OnboardingOptionsOut:
    return OnboardingOptionsOut(
        goals=[GoalOut(value=g.value, label=g.label, help=g.help) for g in GOALS],
        stacks=[StackOut(value=s.value, label=s.label, best_at=s.best_at) for s in STACKS],
        recommended=dict(RECOMMENDED),
        levels=list(EXPERIENCE_LEVELS),
        models=list(MODELS),
        default_goal=DEFAULT_GOAL,
        default_level=DEFAULT_LEVEL,
        default_model=MODELS[0],
        default_temperature=DEFAULT_TEMPERATURE,
    )


@router.post(
    "/prompt",
    response_model=OnboardingPromptOut,
    summary="Build the first-call prompt for a goal/stack choice",
    description=(
        "Applies the goal -> stack recommendation unless a stack is given, then renders "
        "the prompt to send to `POST /api/first-call`. Unknown values return 400."
    ),
)
async def build_prompt(payload: OnboardingPromptIn) -> OnboardingPromptOut:
    selection = build_selection(want=payload.want, stack=payload.stack, level=payload.level)
    return OnboardingPromptOut(
        prompt=build_onboarding_prompt(selection),
        want=selection.want,
        stack=selection.stack,
        stack_label=get_stack_label(selection.stack),
        stack_help=get_stack_help(selection.stack),
        recommended_stack=recommended_stack(selection.want),
        user_overrode_stack=selection.user_overrode_stack,
        level=selection.level,
    )
