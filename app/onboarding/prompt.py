from __future__ import annotations

from app.onboarding.catalog import get_goal_label, get_stack_label
from app.onboarding.selection import StackSelection


def build_onboarding_prompt(selection: StackSelection) -> str:
    """
    Create the relay prompt for a goal/stack selection.

    The reply format is fixed so the first fenced block is the snippet and
    everything else is the plan.
    """

    decision = (
        "User overrode recommendation. "
        if selection.user_overrode_stack
        else "User accepted recommendation. "
    )
    return (
        f"Goal: {get_goal_label(selection.want)}. "
        f"Recommended stack: {get_stack_label(selection.stack)}. "
        f"{decision}"
        f"Experience level: {selection.level}. "
        "Return EXACTLY:\n"
        "Plan:\n- one short paragraph\n"
        "Next steps:\n- three bullets\n"
        "Snippet:\n"
        "```bash\n# a single, minimal first API call (curl or fetch)\n```\n"
    )
