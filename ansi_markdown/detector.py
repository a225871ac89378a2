"""Incremental markdown block detection over a text stream."""

from __future__ import annotations

import logging

from .lines import (
    is_blank,
    is_fence_close,
    is_horizontal_rule,
    match_blockquote,
    match_fence_open,
    match_heading,
    match_list_item,
    strip_line_ending,
)
from .models import DetectorContext, DetectorState, MarkdownBlock, ProcessResult

logger = logging.getLogger(__name__)


def classify_line(line: str) -> MarkdownBlock | None:
    """Classify a complete line outside of any code fence.

    Patterns are tried in priority order: heading, list item, blockquote,
    horizontal rule, then paragraph as the catch-all.

    Args:
        line: Line with its terminator removed.

    Returns:
        MarkdownBlock | None: The block for the line, or None for blank lines.

    Examples:
        classify_line("# Title")  # heading, level 1
        classify_line("   ")  # None
    """
    if is_blank(line):
        return None

    heading = match_heading(line)
    if heading is not None:
        level, content = heading
        return MarkdownBlock.heading(level, content, line)

    list_item = match_list_item(line)
    if list_item is not None:
        list_type, content = list_item
        return MarkdownBlock.list_item(list_type, content, line)

    quote = match_blockquote(line)
    if quote is not None:
        return MarkdownBlock.blockquote(quote, line)

    if is_horizontal_rule(line):
        return MarkdownBlock.horizontal_rule(line)

    return MarkdownBlock.paragraph(line)


def _try_open_fence(ctx: DetectorContext, line: str) -> bool:
    """Enter fenced-code state when the line opens a fence.

    Args:
        ctx: Detector context to update when a fence opens.
        line: Current line being scanned.

    Returns:
        bool: True when the line opens a fence and the context is updated.
    """
    if ctx.state is not DetectorState.NORMAL:
        return False

    language = match_fence_open(line)
    if language is None:
        return False

    ctx.state = DetectorState.IN_FENCED_CODE
    ctx.language = language
    ctx.fence_line = line
    ctx.body = []
    logger.debug("code fence opened (language=%r)", language)
    return True


def _fence_raw(ctx: DetectorContext, closing_line: str | None = None) -> str:
    parts = [ctx.fence_line] if ctx.fence_line else []
    parts.extend(ctx.body)
    if closing_line is not None:
        parts.append(closing_line)
    return "\n".join(parts)


def _build_code_block(ctx: DetectorContext, closing_line: str | None = None) -> MarkdownBlock:
    return MarkdownBlock.code_block(
        content="\n".join(ctx.body),
        raw=_fence_raw(ctx, closing_line),
        language=ctx.language,
    )


def _fence_is_drained(ctx: DetectorContext) -> bool:
    """True after an early split left the open fence with nothing unemitted."""
    return not ctx.fence_line and not ctx.body


def _try_close_fence(ctx: DetectorContext, line: str) -> MarkdownBlock | None:
    """Close the active fence when the line is a bare closing fence.

    Args:
        ctx: Detector context describing the active fence.
        line: Current line being scanned.

    Returns:
        MarkdownBlock | None: The completed code block, or None when the line
            does not close the fence.
    """
    if ctx.state is not DetectorState.IN_FENCED_CODE or not is_fence_close(line):
        return None

    block = _build_code_block(ctx, closing_line=line)
    logger.debug("code fence closed after %d line(s)", len(ctx.body))
    ctx.state = DetectorState.NORMAL
    ctx.language = ""
    ctx.fence_line = ""
    ctx.body = []
    return block


class MarkdownDetector:
    """Stateful detector turning stream chunks into markdown blocks.

    One instance belongs to one logical stream. Complete lines are classified
    as soon as their newline arrives; a trailing partial line and an unclosed
    code fence are kept until later input completes them, or until `flush`
    or `reset` is called.

    Args:
        max_fence_lines: When set, an open fence whose body reaches this many
            lines is emitted early as a code block and stays open for the rest
            of its body. None leaves fence bodies unbounded.

    Examples:
        detector = MarkdownDetector()
        result = detector.process("# Title\\n- item")
        result.blocks  # [heading "Title"]
        result.incomplete  # "- item"
        detector.flush()  # [paragraph "- item"]
    """

    def __init__(self, max_fence_lines: int | None = None) -> None:
        self.max_fence_lines = max_fence_lines
        self._pending = ""
        self._ctx = DetectorContext()

    @property
    def pending(self) -> str:
        """Partial line waiting for its newline."""
        return self._pending

    @property
    def in_code_block(self) -> bool:
        return self._ctx.state is DetectorState.IN_FENCED_CODE

    @property
    def incomplete(self) -> str:
        """Everything received but not yet resolved into a block."""
        fence_raw = _fence_raw(self._ctx) if self.in_code_block else ""
        if not fence_raw:
            return self._pending
        return fence_raw + "\n" + self._pending

    def process(self, chunk: str) -> ProcessResult:
        """Feed a chunk and collect the blocks it completes.

        Args:
            chunk: Next piece of the stream; boundaries are arbitrary.

        Returns:
            ProcessResult: Completed blocks in source order and the text still
                buffered.
        """
        blocks: list[MarkdownBlock] = []
        if chunk:
            *complete_lines, self._pending = (self._pending + chunk).split("\n")
            for line in complete_lines:
                self._consume_line(strip_line_ending(line), blocks)

        return ProcessResult(blocks=blocks, incomplete=self.incomplete)

    def flush(self) -> list[MarkdownBlock]:
        """Resolve whatever is buffered and return the detector to its empty state.

        An open fence is emitted as a code block with the body received so far;
        otherwise a non-blank partial line is emitted as a paragraph.

        Returns:
            list[MarkdownBlock]: Zero or one block.
        """
        blocks: list[MarkdownBlock] = []
        trailing = strip_line_ending(self._pending)

        if self.in_code_block:
            drained = _fence_is_drained(self._ctx)
            closed = _try_close_fence(self._ctx, trailing) if trailing else None
            if closed is None:
                if trailing:
                    self._ctx.body.append(trailing)
                    drained = False
                closed = _build_code_block(self._ctx)
            if not drained:
                blocks.append(closed)
        elif not is_blank(trailing):
            blocks.append(MarkdownBlock.paragraph(trailing))

        if blocks:
            logger.debug("flushed %s block", blocks[0].type.name)
        self.reset()
        return blocks

    def reset(self) -> None:
        """Discard the pending buffer and any open fence without emitting blocks."""
        self._pending = ""
        self._ctx = DetectorContext()

    def _consume_line(self, line: str, blocks: list[MarkdownBlock]) -> None:
        ctx = self._ctx

        if ctx.state is DetectorState.IN_FENCED_CODE:
            drained = _fence_is_drained(ctx)
            closed = _try_close_fence(ctx, line)
            if closed is not None:
                if not drained:
                    blocks.append(closed)
                return

            ctx.body.append(line)
            if self.max_fence_lines is not None and len(ctx.body) >= self.max_fence_lines:
                blocks.append(self._split_fence())
            return

        if _try_open_fence(ctx, line):
            return

        block = classify_line(line)
        if block is not None:
            blocks.append(block)

    def _split_fence(self) -> MarkdownBlock:
        block = _build_code_block(self._ctx)
        logger.debug(
            "code fence body reached %d line(s); emitting early", self.max_fence_lines
        )
        self._ctx.fence_line = ""
        self._ctx.body = []
        return block
