"""ANSI rendering of detected markdown blocks."""

from __future__ import annotations

from collections.abc import Callable

from .constants import ANSI, BOX, HEADING_LEVEL_COLORS, HEADING_ROTATING_COLORS, MIN_BOX_WIDTH
from .models import BlockType, ListType, MarkdownBlock, RenderOptions


def heading_color(level: int) -> str:
    """Return the color code for a heading level.

    Levels 1 and 2 use bright cyan and bright green; deeper levels rotate
    through the remaining bright colors so adjacent levels always differ.

    Examples:
        heading_color(1) == ANSI.BRIGHT_CYAN
        heading_color(3) == ANSI.BRIGHT_YELLOW
    """
    if level in HEADING_LEVEL_COLORS:
        return HEADING_LEVEL_COLORS[level]
    offset = max(level, 3) - 3
    return HEADING_ROTATING_COLORS[offset % len(HEADING_ROTATING_COLORS)]


def _render_heading(block: MarkdownBlock, options: RenderOptions) -> str:
    color = heading_color(block.level or 1)
    return f"{BOX.BLOCK} {ANSI.BOLD}{color}{block.content}{ANSI.RESET}"


def _code_box_top(language: str, width: int) -> str:
    if not language:
        return f"{ANSI.DIM}{BOX.TOP_LEFT}{BOX.H_LINE * (width - 2)}{BOX.TOP_RIGHT}{ANSI.RESET}"

    # ┌─ lang ───┐
    fill = max(width - len(language) - 5, 0)
    return (
        f"{ANSI.DIM}{BOX.TOP_LEFT}{BOX.H_LINE} {ANSI.RESET}"
        f"{ANSI.BRIGHT_YELLOW}{language}{ANSI.RESET}"
        f"{ANSI.DIM} {BOX.H_LINE * fill}{BOX.TOP_RIGHT}{ANSI.RESET}"
    )


def _render_code_block(block: MarkdownBlock, options: RenderOptions) -> str:
    width = max(options.term_width, MIN_BOX_WIDTH)
    language = (block.language or "") if options.show_language else ""

    lines = [_code_box_top(language, width)]
    for code_line in block.content.split("\n"):
        lines.append(f"{ANSI.DIM}{BOX.V_LINE}{ANSI.RESET} {code_line}")
    lines.append(
        f"{ANSI.DIM}{BOX.BOTTOM_LEFT}{BOX.H_LINE * (width - 2)}{BOX.BOTTOM_RIGHT}{ANSI.RESET}"
    )
    return "\n".join(lines)


def _render_list_item(block: MarkdownBlock, options: RenderOptions) -> str:
    if block.list_type is ListType.ORDERED:
        return f"{ANSI.BRIGHT_BLUE}{BOX.ARROW}{ANSI.RESET} {block.content}"
    return f"{ANSI.GREEN}{BOX.BULLET}{ANSI.RESET} {block.content}"


def _render_blockquote(block: MarkdownBlock, options: RenderOptions) -> str:
    return f"{BOX.V_LINE} {ANSI.ITALIC}{block.content}{ANSI.RESET}"


def _render_horizontal_rule(block: MarkdownBlock, options: RenderOptions) -> str:
    return f"{ANSI.DIM}{BOX.H_LINE * max(options.term_width, 0)}{ANSI.RESET}"


def _render_paragraph(block: MarkdownBlock, options: RenderOptions) -> str:
    return block.content


BLOCK_RENDERERS: dict[BlockType, Callable[[MarkdownBlock, RenderOptions], str]] = {
    BlockType.HEADING: _render_heading,
    BlockType.CODE_BLOCK: _render_code_block,
    BlockType.LIST: _render_list_item,
    BlockType.BLOCKQUOTE: _render_blockquote,
    BlockType.HORIZONTAL_RULE: _render_horizontal_rule,
    BlockType.PARAGRAPH: _render_paragraph,
}


def render_block(block: MarkdownBlock, options: RenderOptions | None = None) -> str:
    """Render a single block to ANSI-styled text."""
    return BLOCK_RENDERERS[block.type](block, options or RenderOptions())


def render_blocks(blocks: list[MarkdownBlock], options: RenderOptions | None = None) -> str:
    """Render blocks to a single ANSI-styled string.

    Each block is rendered with the fixed style table and the results are
    joined with newlines. Paragraphs carry no escape codes at all.

    Args:
        blocks: Blocks to render, in display order.
        options: Width and language-tag options. Defaults to a new
            `RenderOptions` when omitted.

    Returns:
        str: Escape-coded text; ``""`` for an empty list.

    Examples:
        render_blocks([MarkdownBlock.paragraph("Hello")])  # "Hello"
        render_blocks([MarkdownBlock.horizontal_rule("---")], RenderOptions(term_width=40))
    """
    options = options or RenderOptions()
    return "\n".join(render_block(block, options) for block in blocks)
