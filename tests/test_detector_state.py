from ansi_markdown.detector import _try_close_fence, _try_open_fence
from ansi_markdown.models import BlockType, DetectorContext, DetectorState


def test_try_open_fence_sets_context_fields():
    ctx = DetectorContext()

    opened = _try_open_fence(ctx, "```python")

    assert opened is True
    assert ctx.state is DetectorState.IN_FENCED_CODE
    assert ctx.language == "python"
    assert ctx.fence_line == "```python"
    assert ctx.body == []


def test_try_open_fence_ignored_when_already_in_code():
    ctx = DetectorContext(state=DetectorState.IN_FENCED_CODE, language="sh", fence_line="```sh")

    assert _try_open_fence(ctx, "```js") is False
    assert ctx.language == "sh"


def test_try_open_fence_rejects_non_fence_lines():
    ctx = DetectorContext()

    assert _try_open_fence(ctx, "``` two words") is False
    assert ctx.state is DetectorState.NORMAL


def test_try_close_fence_builds_block_and_resets_context():
    ctx = DetectorContext(
        state=DetectorState.IN_FENCED_CODE,
        language="py",
        fence_line="```py",
        body=["a = 1", "b = 2"],
    )

    assert _try_close_fence(ctx, "```py") is None

    block = _try_close_fence(ctx, "```")

    assert block is not None
    assert block.type is BlockType.CODE_BLOCK
    assert block.content == "a = 1\nb = 2"
    assert block.language == "py"
    assert block.raw == "```py\na = 1\nb = 2\n```"
    assert ctx == DetectorContext()


def test_try_close_fence_outside_code_is_noop():
    ctx = DetectorContext()

    assert _try_close_fence(ctx, "```") is None
    assert ctx.state is DetectorState.NORMAL
