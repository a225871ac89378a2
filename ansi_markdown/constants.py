"""Constants used across the ansi-markdown package."""

from __future__ import annotations


class ANSI:
    """Fixed SGR escape sequences understood by the display surface."""

    RESET = "\x1b[0m"

    # Text styles
    BOLD = "\x1b[1m"
    DIM = "\x1b[2m"
    ITALIC = "\x1b[3m"
    UNDERLINE = "\x1b[4m"

    # Foreground colors
    BLACK = "\x1b[30m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"
    WHITE = "\x1b[37m"

    # Bright foreground colors
    BRIGHT_BLACK = "\x1b[90m"
    BRIGHT_RED = "\x1b[91m"
    BRIGHT_GREEN = "\x1b[92m"
    BRIGHT_YELLOW = "\x1b[93m"
    BRIGHT_BLUE = "\x1b[94m"
    BRIGHT_MAGENTA = "\x1b[95m"
    BRIGHT_CYAN = "\x1b[96m"
    BRIGHT_WHITE = "\x1b[97m"

    # Background colors
    BG_BLACK = "\x1b[40m"
    BG_RED = "\x1b[41m"
    BG_GREEN = "\x1b[42m"
    BG_YELLOW = "\x1b[43m"
    BG_BLUE = "\x1b[44m"
    BG_MAGENTA = "\x1b[45m"
    BG_CYAN = "\x1b[46m"
    BG_WHITE = "\x1b[47m"


class BOX:
    """Unicode box-drawing and marker glyphs."""

    H_LINE = "─"
    V_LINE = "│"
    TOP_LEFT = "┌"
    TOP_RIGHT = "┐"
    BOTTOM_LEFT = "└"
    BOTTOM_RIGHT = "┘"

    BULLET = "●"
    ARROW = "▶"
    BLOCK = "▌"


# Markdown markers
CODE_FENCE = "```"
HEADING_MARKER = "#"
MAX_HEADING_LEVEL = 6
BULLET_MARKERS = ("-", "*")
BLOCKQUOTE_MARKER = ">"
RULE_CHARACTERS = ("-", "_", "*")
MIN_RULE_LENGTH = 3

# Heading colors: levels 1 and 2 are fixed, deeper levels rotate.
HEADING_LEVEL_COLORS = {1: ANSI.BRIGHT_CYAN, 2: ANSI.BRIGHT_GREEN}
HEADING_ROTATING_COLORS = (ANSI.BRIGHT_YELLOW, ANSI.BRIGHT_MAGENTA, ANSI.BRIGHT_BLUE)

# Layout defaults
DEFAULT_TERM_WIDTH = 80
MIN_BOX_WIDTH = 2
DEFAULT_CHUNK_SIZE = 4096
