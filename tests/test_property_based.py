from __future__ import annotations

import string

from hypothesis import given
from hypothesis import strategies as st

from ansi_markdown.detector import MarkdownDetector
from ansi_markdown.heuristics import likely_contains_markdown
from ansi_markdown.models import BlockType, ListType, MarkdownBlock, RenderOptions
from ansi_markdown.renderer import render_blocks

words = st.text(alphabet=string.ascii_letters + string.digits + " .,", min_size=1, max_size=20)

line_strategy = st.one_of(
    words.map(lambda text: f"# {text}"),
    words.map(lambda text: f"### {text}"),
    words.map(lambda text: f"- {text}"),
    words.map(lambda text: f"3. {text}"),
    words.map(lambda text: f"> {text}"),
    st.sampled_from(["---", "***", "___", "```", "```python", "", "   "]),
    words,
)

document_strategy = st.lists(line_strategy, max_size=30).map("\n".join)


def _blocks_in_one_call(document: str, max_fence_lines: int | None = None) -> list[MarkdownBlock]:
    detector = MarkdownDetector(max_fence_lines=max_fence_lines)
    return detector.process(document).blocks + detector.flush()


def _blocks_in_chunks(
    document: str, cuts: list[int], max_fence_lines: int | None = None
) -> list[MarkdownBlock]:
    detector = MarkdownDetector(max_fence_lines=max_fence_lines)
    blocks: list[MarkdownBlock] = []
    previous = 0
    for cut in sorted(cuts) + [len(document)]:
        blocks.extend(detector.process(document[previous:cut]).blocks)
        previous = cut
    return blocks + detector.flush()


@given(document_strategy, st.data())
def test_chunk_splits_do_not_change_blocks(document: str, data):
    """Property: Any chunking of a stream yields the same block sequence."""
    cuts = data.draw(st.lists(st.integers(min_value=0, max_value=len(document)), max_size=10))

    assert _blocks_in_chunks(document, cuts) == _blocks_in_one_call(document)


@given(document_strategy, st.data(), st.integers(min_value=1, max_value=4))
def test_chunk_splits_with_fence_cap(document: str, data, max_fence_lines: int):
    cuts = data.draw(st.lists(st.integers(min_value=0, max_value=len(document)), max_size=10))

    assert _blocks_in_chunks(document, cuts, max_fence_lines) == _blocks_in_one_call(
        document, max_fence_lines
    )


@given(st.text(max_size=200))
def test_detector_never_emits_blank_blocks(text: str):
    detector = MarkdownDetector()
    blocks = detector.process(text).blocks + detector.flush()

    for block in blocks:
        if block.type is not BlockType.CODE_BLOCK:
            assert block.raw.strip()
            assert "\n" not in block.raw


@given(st.text(max_size=200))
def test_detector_is_total_and_drains(text: str):
    detector = MarkdownDetector()

    detector.process(text)
    detector.flush()

    assert detector.incomplete == ""
    assert detector.flush() == []


@given(st.text())
def test_single_paragraph_renders_verbatim(content: str):
    assert render_blocks([MarkdownBlock.paragraph(content)]) == content


block_strategy = st.one_of(
    st.builds(MarkdownBlock.heading, st.integers(min_value=1, max_value=6), words, words),
    st.builds(MarkdownBlock.code_block, st.text(max_size=50), words, words),
    st.builds(MarkdownBlock.list_item, st.sampled_from(list(ListType)), words, words),
    st.builds(MarkdownBlock.blockquote, words, words),
    st.builds(MarkdownBlock.horizontal_rule, st.sampled_from(["---", "***"])),
    st.builds(MarkdownBlock.paragraph, words),
)


@given(
    st.lists(block_strategy, max_size=10),
    st.integers(min_value=0, max_value=300),
    st.booleans(),
)
def test_renderer_is_total(blocks: list[MarkdownBlock], width: int, show_language: bool):
    rendered = render_blocks(blocks, RenderOptions(show_language=show_language, term_width=width))

    assert isinstance(rendered, str)
    if not blocks:
        assert rendered == ""


@given(st.text(alphabet=string.ascii_letters + string.digits + " ,!?", max_size=80))
def test_prose_never_triggers_prefilter(text: str):
    assert likely_contains_markdown(text) is False
