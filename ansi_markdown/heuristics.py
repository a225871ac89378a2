"""Cheap pre-filter deciding whether a chunk is worth parsing."""

from __future__ import annotations

from .lines import (
    is_horizontal_rule,
    match_blockquote,
    match_fence_open,
    match_heading,
    match_list_item,
    strip_line_ending,
)


def _line_looks_like_markdown(line: str) -> bool:
    return (
        match_heading(line) is not None
        or match_fence_open(line) is not None
        or match_list_item(line) is not None
        or match_blockquote(line) is not None
        or is_horizontal_rule(line)
    )


def likely_contains_markdown(chunk: str) -> bool:
    """Check whether any line of a chunk starts a recognized construct.

    Markers without their required space or content (``"#"``, ``"-"``,
    ``"1."``, ``">"``) do not count. Plain prose and empty input return False.

    Args:
        chunk: Raw text received from the stream.

    Returns:
        bool: True when at least one line could produce a non-paragraph block.

    Examples:
        likely_contains_markdown("# Heading")  # True
        likely_contains_markdown("The # symbol")  # False
    """
    if not chunk:
        return False

    for line in chunk.split("\n"):
        if _line_looks_like_markdown(strip_line_ending(line)):
            return True
    return False
