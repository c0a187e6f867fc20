from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class MarkdownSplit:
    """A model response split into its first fenced code block and the remaining prose."""

    code: str
    prose: str


# Opening fence with an optional language tag, then the shortest span up to the next fence.
_FENCED_BLOCK_RE = re.compile(r"```[A-Za-z0-9_-]*\n(.*?)```", re.DOTALL)


def split_markdown(text: str) -> MarkdownSplit:
    """
    Extract the first fenced code block from markdown-ish text.

    - With a match: `code` is the block body (stripped) and `prose` is the text with
      the whole fenced span removed (stripped).
    - Without a match: `code` is empty and `prose` is the input verbatim, not stripped.
    - Later fenced blocks stay in `prose` untouched.
    """

    match = _FENCED_BLOCK_RE.search(text)
    if match is None:
        return MarkdownSplit(code="", prose=text)

    prose = text[: match.start()] + text[match.end() :]
    return MarkdownSplit(code=match.group(1).strip(), prose=prose.strip())
