"""Data models for ansi-markdown."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from .constants import DEFAULT_TERM_WIDTH


class BlockType(Enum):
    """Block-level constructs recognized in a stream.

    Attributes:
        HEADING: ATX heading (``#`` through ``######``).
        CODE_BLOCK: Backtick-fenced code block.
        LIST: A single bullet or ordered list item.
        BLOCKQUOTE: A single ``>`` quoted line.
        HORIZONTAL_RULE: Three or more ``-``, ``_`` or ``*`` characters.
        PARAGRAPH: Any other non-blank line.
    """

    HEADING = auto()
    CODE_BLOCK = auto()
    LIST = auto()
    BLOCKQUOTE = auto()
    HORIZONTAL_RULE = auto()
    PARAGRAPH = auto()


class ListType(Enum):
    """Kind of list item marker."""

    BULLET = auto()
    ORDERED = auto()


class RenderMode(Enum):
    """Rendering modes of a stream adapter.

    Attributes:
        OFF: Pass data through untouched.
        ANSI: Render completed blocks inline as ANSI-styled text.
        OVERLAY: Reserved for out-of-band rendering; data passes through.
    """

    OFF = "off"
    ANSI = "ansi"
    OVERLAY = "overlay"


@dataclass(frozen=True)
class MarkdownBlock:
    """A fully recognized markdown construct.

    Attributes:
        type: Variant of the block.
        content: Parsed text of the block, markers stripped.
        raw: Source text that produced the block, without line terminators.
        level: Heading level (1-6); None for other variants.
        language: Code block language tag, ``""`` when absent; None for other variants.
        list_type: Marker kind for list items; None for other variants.
    """

    type: BlockType
    content: str
    raw: str
    level: int | None = None
    language: str | None = None
    list_type: ListType | None = None

    @classmethod
    def heading(cls, level: int, content: str, raw: str) -> MarkdownBlock:
        return cls(BlockType.HEADING, content, raw, level=level)

    @classmethod
    def code_block(cls, content: str, raw: str, language: str = "") -> MarkdownBlock:
        return cls(BlockType.CODE_BLOCK, content, raw, language=language)

    @classmethod
    def list_item(cls, list_type: ListType, content: str, raw: str) -> MarkdownBlock:
        return cls(BlockType.LIST, content, raw, list_type=list_type)

    @classmethod
    def blockquote(cls, content: str, raw: str) -> MarkdownBlock:
        return cls(BlockType.BLOCKQUOTE, content, raw)

    @classmethod
    def horizontal_rule(cls, raw: str) -> MarkdownBlock:
        return cls(BlockType.HORIZONTAL_RULE, "", raw)

    @classmethod
    def paragraph(cls, content: str, raw: str | None = None) -> MarkdownBlock:
        return cls(BlockType.PARAGRAPH, content, content if raw is None else raw)


@dataclass
class ProcessResult:
    """Outcome of feeding one chunk to a detector.

    Attributes:
        blocks: Blocks completed by this chunk, in source order.
        incomplete: Text received but not yet resolved into a block.
    """

    blocks: list[MarkdownBlock]
    incomplete: str


class DetectorState(Enum):
    """Detector states used while scanning a stream.

    Attributes:
        NORMAL: Default state, each line is classified on its own.
        IN_FENCED_CODE: Inside an unclosed code fence.
    """

    NORMAL = auto()
    IN_FENCED_CODE = auto()


@dataclass
class DetectorContext:
    """Encapsulate open-fence state while walking a stream.

    Attributes:
        state: Current detector state.
        language: Language tag captured when the fence opened.
        fence_line: Verbatim opening fence line.
        body: Lines accumulated inside the fence.
    """

    state: DetectorState = DetectorState.NORMAL
    language: str = ""
    fence_line: str = ""
    body: list[str] = field(default_factory=list)


@dataclass
class RenderOptions:
    """Options consulted by a single render call.

    Attributes:
        show_language: Embed the code block language in its top border.
        term_width: Terminal width in columns used for rules and borders.
    """

    show_language: bool = True
    term_width: int = DEFAULT_TERM_WIDTH
