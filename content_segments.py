"""Split message bodies into plain-text and display-math segments."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import List

from models import Segment, SegmentKind

MATH_DELIMITER = "$$"
_MATH_BLOCK_PATTERN = re.compile(
    re.escape(MATH_DELIMITER) + r"([\s\S]*?)" + re.escape(MATH_DELIMITER)
)
_CODE_FENCE = "```"


@lru_cache(maxsize=256)
def segment(content: str) -> tuple[Segment, ...]:
    """Return the ordered text/math segments of ``content``.

    An opening ``$$`` without a closing partner stays in the surrounding
    text segment.
    """

    parts: List[Segment] = []
    last_index = 0
    for match in _MATH_BLOCK_PATTERN.finditer(content):
        if match.start() > last_index:
            parts.append(Segment(SegmentKind.TEXT, content[last_index : match.start()]))
        parts.append(Segment(SegmentKind.MATH, match.group(1).strip()))
        last_index = match.end()

    if last_index < len(content):
        parts.append(Segment(SegmentKind.TEXT, content[last_index:]))

    if not parts:
        parts.append(Segment(SegmentKind.TEXT, content))
    return tuple(parts)


def has_math(content: str) -> bool:
    return any(part.kind is SegmentKind.MATH for part in segment(content))


def has_code(content: str) -> bool:
    fence = content.find(_CODE_FENCE)
    return fence != -1 and content.find(_CODE_FENCE, fence + len(_CODE_FENCE)) != -1


def paragraphs(text: str) -> list[str]:
    """Split a text segment on blank lines for display."""

    return text.split("\n\n")


__all__ = ["MATH_DELIMITER", "has_code", "has_math", "paragraphs", "segment"]
