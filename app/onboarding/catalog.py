"""Static onboarding catalogue: goals, stacks and the goal -> stack recommendation."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class GoalOption:
    value: str
    label: str
    help: str


@dataclass(frozen=True)
class StackOption:
    value: str
    label: str
    best_at: str


GOALS: tuple[GoalOption, ...] = (
    GoalOption(
        "chat assistant",
        "Chat Assistant",
        "A conversational helper that answers questions or chats with users.",
    ),
    GoalOption(
        "ai knowledge app",
        "AI Knowledge App",
        "Searches docs or sites and answers questions about them (RAG-style).",
    ),
    GoalOption(
        "support bot",
        "Support Bot",
        "A customer-help assistant living in Slack, Discord, or your site.",
    ),
    GoalOption(
        "automation tool",
        "Automation Tool",
        "A background worker that processes data or messages automatically.",
    ),
    GoalOption(
        "website starter",
        "Website Starter",
        "A simple landing page or product site with AI-generated content.",
    ),
    GoalOption(
        "ai dev helper",
        "AI Dev Helper",
        "Reads GitHub issues/PRs, writes summaries or suggested responses.",
    ),
)

STACKS: tuple[StackOption, ...] = (
    StackOption(
        "nextjs",
        "Next.js (Web)",
        "Best for polished websites and web apps with pages, navigation, and UI.",
    ),
    StackOption(
        "node-express",
        "Node.js + Express (Server)",
        "Runs backend logic — perfect for bots, APIs, and background tasks.",
    ),
    StackOption(
        "python-fastapi",
        "Python + FastAPI (AI Ready)",
        "Great for AI projects, chatbots, and anything needing Python libraries.",
    ),
    StackOption(
        "python-flask",
        "Python + Flask (Simple)",
        "Very lightweight — ideal for tiny prototypes and quick bots.",
    ),
    StackOption(
        "deno-fresh",
        "Deno + Fresh (Modern)",
        "New, secure, lightweight stack for JavaScript/TypeScript projects.",
    ),
    StackOption(
        "bun-elysia",
        "Bun + Elysia (Experimental)",
        "Extremely fast JS/TS runtime — great for tinkering and high speed.",
    ),
)

RECOMMENDED: Mapping[str, str] = MappingProxyType(
    {
        "chat assistant": "nextjs",
        "ai knowledge app": "python-fastapi",
        "support bot": "node-express",
        "automation tool": "node-express",
        "website starter": "nextjs",
        "ai dev helper": "python-fastapi",
    }
)

EXPERIENCE_LEVELS: tuple[str, ...] = ("New to it", "Comfortable", "Advanced")
DEFAULT_LEVEL = "Comfortable"

MODELS: tuple[str, ...] = ("gpt-4o-mini", "gpt-4o")

_GOALS_BY_VALUE: Mapping[str, GoalOption] = MappingProxyType({g.value: g for g in GOALS})
_STACKS_BY_VALUE: Mapping[str, StackOption] = MappingProxyType({s.value: s for s in STACKS})

DEFAULT_GOAL = GOALS[0].value


def find_goal(value: str) -> GoalOption | None:
    return _GOALS_BY_VALUE.get(value)


def find_stack(value: str) -> StackOption | None:
    return _STACKS_BY_VALUE.get(value)


def get_goal_label(value: str) -> str:
    goal = find_goal(value)
    return goal.label if goal else value


def get_goal_help(value: str) -> str:
    goal = find_goal(value)
    return goal.help if goal else ""


def get_stack_label(value: str) -> str:
    stack = find_stack(value)
    return stack.label if stack else value


def get_stack_help(value: str) -> str:
    stack = find_stack(value)
    return stack.best_at if stack else ""


def recommended_stack(goal: str) -> str | None:
    return RECOMMENDED.get(goal)
