"""Stream adapter wiring the pre-filter, detector and renderer together."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from .detector import MarkdownDetector
from .heuristics import likely_contains_markdown
from .models import RenderMode, RenderOptions
from .renderer import render_blocks

logger = logging.getLogger(__name__)


class MarkdownStreamAdapter:
    """Route terminal output through markdown detection and rendering.

    In ``ansi`` mode, chunks that look like markdown are fed to the detector
    and the blocks they complete are returned rendered; everything else is
    returned unchanged. ``off`` and ``overlay`` pass data through.

    Args:
        options: Render options, copied so that `update_width` never changes
            the caller's object. Defaults to a new `RenderOptions`.
        mode: Initial rendering mode.
        detector: Detector owned by this stream. Defaults to a new one.
        sink: Callable receiving the output of `write`.
        line_terminator: Appended after rendered output, for hosts that need
            rendered blocks to end their line.

    Examples:
        adapter = MarkdownStreamAdapter(sink=sys.stdout.write)
        adapter.write("# Title\\n")
    """

    def __init__(
        self,
        options: RenderOptions | None = None,
        mode: RenderMode | str = RenderMode.ANSI,
        detector: MarkdownDetector | None = None,
        sink: Callable[[str], object] | None = None,
        line_terminator: str = "",
    ) -> None:
        self.options = replace(options) if options is not None else RenderOptions()
        self.detector = detector or MarkdownDetector()
        self.sink = sink
        self.line_terminator = line_terminator
        self._mode = RenderMode(mode)

    @property
    def mode(self) -> RenderMode:
        return self._mode

    def set_mode(self, mode: RenderMode | str) -> None:
        """Switch rendering mode.

        Switching to ``off`` drains the detector so no construct stays half
        buffered when rendering resumes.

        Raises:
            ValueError: If `mode` is not a known mode value.
        """
        new_mode = RenderMode(mode)
        if new_mode is RenderMode.OFF:
            drained = self.detector.flush()
            if drained:
                logger.debug("discarded %d buffered block(s) on mode switch", len(drained))
        if new_mode is not self._mode:
            logger.debug("render mode %s -> %s", self._mode.value, new_mode.value)
        self._mode = new_mode

    def process_data(self, data: str) -> str:
        """Return what should be written to the terminal for a chunk of output.

        Args:
            data: Chunk read from the child process.

        Returns:
            str: Rendered blocks when the chunk completed any, otherwise `data`
                unchanged.
        """
        if self._mode is not RenderMode.ANSI:
            return data

        if not likely_contains_markdown(data):
            return data

        result = self.detector.process(data)
        if not result.blocks:
            return data

        return render_blocks(result.blocks, self.options) + self.line_terminator

    def write(self, data: str) -> None:
        """Process a chunk and hand the result to the sink, if any."""
        if self.sink is None:
            return
        self.sink(self.process_data(data))

    def flush(self) -> str:
        """Resolve buffered output at end of stream.

        Returns:
            str: The rendered trailing block in ``ansi`` mode, otherwise ``""``.
        """
        blocks = self.detector.flush()
        if not blocks or self._mode is not RenderMode.ANSI:
            return ""
        return render_blocks(blocks, self.options) + self.line_terminator

    def reset(self) -> None:
        """Clear detector state, e.g. when the session reconnects."""
        logger.debug("resetting detector state")
        self.detector.reset()

    def update_width(self, cols: int) -> None:
        """Set the terminal width used by later renders."""
        self.options.term_width = cols

    def dispose(self) -> None:
        """Release the sink and discard buffered state."""
        self.detector.reset()
        self.sink = None
