"""Run the onboarding flow from a terminal against a running API.

Builds the prompt for a goal/stack choice, posts it to /api/first-call and prints
the plan and snippet the same way the onboarding page renders them.

Example:
    python -m scripts.first_call --want "support bot" --level "New to it"
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from app.core.logging import setup_logging
from app.first_call.schemas import DEFAULT_TEMPERATURE
from app.onboarding.catalog import (
    DEFAULT_GOAL,
    DEFAULT_LEVEL,
    EXPERIENCE_LEVELS,
    GOALS,
    MODELS,
    STACKS,
)
from app.onboarding.client import FirstCallClient, FirstCallOutcome
from app.onboarding.prompt import build_onboarding_prompt
from app.onboarding.selection import build_selection


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Run the first OpenAI call for a project goal")
    ap.add_argument("--base-url", default="http://localhost:8000", help="API base URL")
    ap.add_argument("--want", default=DEFAULT_GOAL, choices=[g.value for g in GOALS])
    ap.add_argument(
        "--stack",
        default=None,
        choices=[s.value for s in STACKS],
        help="Override the recommended stack",
    )
    ap.add_argument("--level", default=DEFAULT_LEVEL, choices=list(EXPERIENCE_LEVELS))
    ap.add_argument("--model", default=MODELS[0], choices=list(MODELS))
    ap.add_argument("--temperature", type=float, default=DEFAULT_TEMPERATURE)
    return ap.parse_args(argv)


def _render(outcome: FirstCallOutcome) -> str:
    lines: list[str] = []
    if outcome.error:
        lines += ["Error", outcome.error, ""]
    if outcome.plan:
        lines += ["Plan & steps", outcome.plan, ""]
    if outcome.snippet:
        lines += ["Snippet", outcome.snippet, ""]
    latency = "-" if outcome.latency_ms is None else str(outcome.latency_ms)
    lines += [f"Latency ms: {latency}", f"Success: {'true' if outcome.success else 'false'}"]
    return "\n".join(lines)


async def _run(args: argparse.Namespace) -> FirstCallOutcome:
    selection = build_selection(want=args.want, stack=args.stack, level=args.level)
    client = FirstCallClient(base_url=args.base_url)
    return await client.run(
        prompt=build_onboarding_prompt(selection),
        model=args.model,
        temperature=args.temperature,
    )


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    outcome = asyncio.run(_run(_parse_args(argv)))
    print(_render(outcome))
    return 0 if outcome.success else 1


if __name__ == "__main__":
    sys.exit(main())
