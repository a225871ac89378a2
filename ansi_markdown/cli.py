"""
Renders markdown read from a file or standard input as ANSI-styled terminal output.
Input is consumed chunk by chunk, the way a terminal receives a child process's output.
"""

from __future__ import annotations

import codecs
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

import click
from .adapter import MarkdownStreamAdapter
from .config import AnsiMarkdownConfig, ConfigError, build_config, to_render_options
from .detector import MarkdownDetector
from .models import RenderMode

__all__ = ["cli"]

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(name)s] %(levelname)s %(message)s"))
    package_logger = logging.getLogger("ansi_markdown")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


def _read_chunks(source: BinaryIO, chunk_size: int) -> Iterator[str]:
    """
    Yield decoded text as it becomes available, cut at line boundaries.

    Every chunk but the last ends with a newline. A partial line is held
    back until the rest of it arrives, or yielded on its own at EOF.
    """
    read = getattr(source, "read1", source.read)
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    buffer = ""
    while True:
        data = read(chunk_size)
        if not data:
            break
        buffer += decoder.decode(data)
        cut = buffer.rfind("\n") + 1
        if cut:
            yield buffer[:cut]
            buffer = buffer[cut:]
    buffer += decoder.decode(b"", final=True)
    if buffer:
        yield buffer


def build_adapter(config: AnsiMarkdownConfig) -> MarkdownStreamAdapter:
    """Create a stream adapter configured for writing to a terminal."""
    return MarkdownStreamAdapter(
        options=to_render_options(config),
        mode=RenderMode(config.mode),
        detector=MarkdownDetector(max_fence_lines=config.max_fence_lines),
        sink=lambda text: click.echo(text, nl=False, color=True),
        line_terminator="\n",
    )


@click.command()
@click.version_option(package_name="ansi-markdown")
@click.option(
    "--mode",
    type=click.Choice([mode.value for mode in RenderMode]),
    help="Rendering mode",
)
@click.option("--width", "term_width", type=int, help="Terminal width in columns")
@click.option(
    "--language/--no-language",
    "show_language",
    default=None,
    help="Show the language tag on code blocks",
)
@click.option("--max-fence-lines", type=int, help="Emit unclosed code fences every N lines")
@click.option("--chunk-size", type=int, help="Maximum bytes read at once")
@click.option("-v", "--verbose", is_flag=True, help="Log detector activity to stderr")
@click.argument("source", type=click.File("rb"), default="-")
def cli(
    source: BinaryIO,
    mode: str | None = None,
    term_width: int | None = None,
    show_language: bool | None = None,
    max_fence_lines: int | None = None,
    chunk_size: int | None = None,
    verbose: bool = False,
):
    """
    Entry point for rendering a markdown stream.

    Args:
        source: File to read, or ``-`` for standard input.
        mode: Override for the rendering mode.
        term_width: Override for the terminal width.
        show_language: Override for showing code block languages.
        max_fence_lines: Override for the open-fence body cap.
        chunk_size: Override for the read size.
        verbose: Log detector activity to standard error.

    Raises:
        click.BadParameter: If the resulting configuration is invalid.
        click.ClickException: If reading the source fails.

    Examples:
        some-command | ansi-markdown --width 100
    """
    _configure_logging(verbose)
    try:
        config = build_config(
            Path.cwd(),
            mode=mode,
            term_width=term_width,
            show_language=show_language,
            max_fence_lines=max_fence_lines,
            chunk_size=chunk_size,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    adapter = build_adapter(config)
    logger.debug("rendering in %s mode at width %d", adapter.mode.value, adapter.options.term_width)

    try:
        for chunk in _read_chunks(source, config.chunk_size):
            adapter.write(chunk)
    except OSError as error:
        adapter.dispose()
        raise click.ClickException(str(error)) from error

    # End of input: surface whatever the detector still holds.
    trailing = adapter.flush()
    if trailing:
        click.echo(trailing, nl=False, color=True)
    adapter.dispose()


if __name__ == "__main__":
    cli()
