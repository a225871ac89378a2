"""
ansi-markdown: render streamed Markdown as ANSI-styled terminal output.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    some-command | ansi-markdown --width 100

Library Usage:
    from ansi_markdown import MarkdownDetector, render_blocks

    detector = MarkdownDetector()
    for chunk in stream:
        result = detector.process(chunk)
        terminal.write(render_blocks(result.blocks))
    terminal.write(render_blocks(detector.flush()))
"""

from .adapter import MarkdownStreamAdapter
from .config import AnsiMarkdownConfig, ConfigError
from .constants import ANSI, BOX
from .detector import MarkdownDetector, classify_line
from .heuristics import likely_contains_markdown
from .models import BlockType, ListType, MarkdownBlock, ProcessResult, RenderMode, RenderOptions
from .renderer import render_block, render_blocks

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "likely_contains_markdown",
    "MarkdownDetector",
    "classify_line",
    "render_blocks",
    "render_block",
    "MarkdownStreamAdapter",
    # Data models
    "BlockType",
    "ListType",
    "MarkdownBlock",
    "ProcessResult",
    "RenderMode",
    "RenderOptions",
    # Styles
    "ANSI",
    "BOX",
    # Configuration
    "AnsiMarkdownConfig",
    "ConfigError",
    # Version
    "__version__",
]
