"""Line classification helpers shared by the pre-filter and the detector.

Every matcher takes a single line with its terminator already removed and
scans it character by character from the line start.
"""

from __future__ import annotations

from .constants import (
    BLOCKQUOTE_MARKER,
    BULLET_MARKERS,
    CODE_FENCE,
    HEADING_MARKER,
    MAX_HEADING_LEVEL,
    MIN_RULE_LENGTH,
    RULE_CHARACTERS,
)
from .models import ListType


def strip_line_ending(line: str) -> str:
    r"""Remove a trailing ``\n`` and the ``\r`` of a CRLF terminator.

    Examples:
        strip_line_ending("text\r\n")  # "text"
    """
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def is_blank(line: str) -> bool:
    """Return True for lines holding nothing but whitespace."""
    return not line.strip()


def _is_ascii_digit(character: str) -> bool:
    return "0" <= character <= "9"


def match_heading(line: str) -> tuple[int, str] | None:
    """Match an ATX heading.

    Args:
        line: Line to inspect.

    Returns:
        tuple[int, str] | None: Heading level and stripped content, or None
            when the line is not a heading with visible content.

    Examples:
        match_heading("## Section")  # (2, "Section")
        match_heading("#")  # None
        match_heading("####### Seven")  # None
    """
    level = 0
    while level < len(line) and line[level] == HEADING_MARKER:
        level += 1

    if level == 0 or level > MAX_HEADING_LEVEL:
        return None
    if level >= len(line) or line[level] != " ":
        return None

    content = line[level + 1 :].strip()
    if not content:
        return None
    return level, content


def match_fence_open(line: str) -> str | None:
    """Match an opening code fence.

    The fence may be followed immediately by a language token and trailing
    whitespace, nothing else.

    Args:
        line: Line to inspect.

    Returns:
        str | None: Language token (``""`` when absent), or None when the line
            does not open a fence.

    Examples:
        match_fence_open("```python")  # "python"
        match_fence_open("```")  # ""
        match_fence_open("```js extra")  # None
    """
    if not line.startswith(CODE_FENCE):
        return None

    language = line[len(CODE_FENCE) :].rstrip()
    for character in language:
        if character == "`" or character.isspace():
            return None
    return language


def is_fence_close(line: str) -> bool:
    """Return True when the line is a bare fence with optional trailing whitespace."""
    return line.rstrip() == CODE_FENCE


def match_list_item(line: str) -> tuple[ListType, str] | None:
    """Match a bullet (``-``/``*``) or ordered (``1.``) list item.

    Args:
        line: Line to inspect.

    Returns:
        tuple[ListType, str] | None: Marker kind and stripped item content,
            or None when the line is not a list item.

    Examples:
        match_list_item("- item")  # (ListType.BULLET, "item")
        match_list_item("42. item")  # (ListType.ORDERED, "item")
        match_list_item("1.")  # None
    """
    if len(line) >= 2 and line[0] in BULLET_MARKERS and line[1] == " ":
        return ListType.BULLET, line[2:].strip()

    digits = 0
    while digits < len(line) and _is_ascii_digit(line[digits]):
        digits += 1

    if digits == 0 or len(line) < digits + 2:
        return None
    if line[digits] != "." or line[digits + 1] != " ":
        return None
    return ListType.ORDERED, line[digits + 2 :].strip()


def match_blockquote(line: str) -> str | None:
    """Match a blockquote line, returning the text after ``"> "``.

    Examples:
        match_blockquote("> quote")  # "quote"
        match_blockquote("> ")  # ""
        match_blockquote(">")  # None
    """
    prefix = f"{BLOCKQUOTE_MARKER} "
    if not line.startswith(prefix):
        return None
    return line[len(prefix) :]


def is_horizontal_rule(line: str) -> bool:
    """Return True for three or more identical rule characters alone on the line.

    Examples:
        is_horizontal_rule("---")  # True
        is_horizontal_rule("-_-")  # False
    """
    if len(line) < MIN_RULE_LENGTH or line[0] not in RULE_CHARACTERS:
        return False
    return line.count(line[0]) == len(line)
