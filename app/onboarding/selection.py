from __future__ import annotations

from dataclasses import dataclass, replace

from app.domain.exceptions import BusinessValidationError
from app.onboarding.catalog import (
    DEFAULT_GOAL,
    DEFAULT_LEVEL,
    EXPERIENCE_LEVELS,
    find_goal,
    find_stack,
    recommended_stack,
)


@dataclass(frozen=True)
class StackSelection:
    """
    Goal/stack choice with the recommendation that can be overridden.

    Changing the goal re-applies the recommendation until the user picks a stack
    explicitly; after that the user's stack sticks.
    """

    want: str = DEFAULT_GOAL
    stack: str = recommended_stack(DEFAULT_GOAL) or ""
    user_overrode_stack: bool = False
    level: str = DEFAULT_LEVEL

    def choose_goal(self, want: str) -> StackSelection:
        if find_goal(want) is None:
            raise BusinessValidationError(f"Unknown goal: {want!r}", field="want")
        if self.user_overrode_stack:
            return replace(self, want=want)
        rec = recommended_stack(want)
        return replace(self, want=want, stack=rec or self.stack)

    def choose_stack(self, stack: str) -> StackSelection:
        if find_stack(stack) is None:
            raise BusinessValidationError(f"Unknown stack: {stack!r}", field="stack")
        return replace(self, stack=stack, user_overrode_stack=True)

    def choose_level(self, level: str) -> StackSelection:
        if level not in EXPERIENCE_LEVELS:
            supported = ", ".join(EXPERIENCE_LEVELS)
            raise BusinessValidationError(
                f"Unknown experience level. Supported values: {supported}.", field="level"
            )
        return replace(self, level=level)

    @property
    def is_recommended(self) -> bool:
        return not self.user_overrode_stack


def build_selection(*, want: str, stack: str | None = None, level: str | None = None) -> StackSelection:
    """Replay the choices a user makes on the onboarding form, in form order."""

    selection = StackSelection().choose_goal(want)
    if stack is not None:
        selection = selection.choose_stack(stack)
    if level is not None:
        selection = selection.choose_level(level)
    return selection
