from __future__ import annotations

import io
import textwrap
from pathlib import Path

from ansi_markdown.cli import _read_chunks, cli
from ansi_markdown.constants import ANSI, BOX


def _write(tmp_path: Path, filename: str, content: str) -> Path:
    path = tmp_path / filename
    path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
    return path


def _write_pyproject(base: Path, body: str) -> Path:
    path = base / "pyproject.toml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def test_cli_passes_plain_text_through(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(cli, ["--width", "40"], input="hello world\nsecond line\n")

    assert result.exit_code == 0
    assert result.output == "hello world\nsecond line\n"


def test_cli_renders_markdown_from_file(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _write(
        tmp_path,
        "notes.md",
        """
        # Notes
        - first
        1. second
        > quoted
        ---
        plain
        """,
    )

    result = cli_runner.invoke(cli, ["--width", "20", str(target)])

    assert result.exit_code == 0
    lines = result.output.split("\n")
    assert lines[0] == f"{BOX.BLOCK} {ANSI.BOLD}{ANSI.BRIGHT_CYAN}Notes{ANSI.RESET}"
    assert BOX.BULLET in lines[1]
    assert BOX.ARROW in lines[2]
    assert lines[3] == f"{BOX.V_LINE} {ANSI.ITALIC}quoted{ANSI.RESET}"
    assert lines[4] == f"{ANSI.DIM}{BOX.H_LINE * 20}{ANSI.RESET}"
    assert lines[5] == "plain"
    assert result.output.endswith("plain\n")


def test_cli_renders_code_block(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(
        cli, ["--width", "30"], input="```python\nprint('hi')\n```\n"
    )

    assert result.exit_code == 0
    assert BOX.TOP_LEFT in result.output
    assert "python" in result.output
    assert "print('hi')" in result.output


def test_cli_no_language_hides_tag(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(
        cli, ["--width", "30", "--no-language"], input="```python\nx = 1\n```\n"
    )

    assert result.exit_code == 0
    assert "python" not in result.output


def test_cli_flushes_unclosed_fence_at_end(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(cli, ["--width", "30"], input="```sh\nls -la\n")

    assert result.exit_code == 0
    assert result.output.startswith("```sh\nls -la\n")
    assert BOX.BOTTOM_LEFT in result.output


def test_cli_off_mode_leaves_input_untouched(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source = "# Title\n- item\n"

    result = cli_runner.invoke(cli, ["--mode", "off"], input=source)

    assert result.exit_code == 0
    assert result.output == source


def test_cli_reads_mode_from_pyproject(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_pyproject(
        tmp_path,
        """
        [tool.ansi-markdown]
        mode = "off"
        """,
    )

    result = cli_runner.invoke(cli, [], input="# Title\n")

    assert result.exit_code == 0
    assert result.output == "# Title\n"


def test_cli_small_chunks_keep_all_text(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(
        cli, ["--width", "30", "--chunk-size", "3"], input="- alpha\n- beta\n"
    )

    bullet = f"{ANSI.GREEN}{BOX.BULLET}{ANSI.RESET}"
    assert result.exit_code == 0
    assert result.output == f"{bullet} alpha\n{bullet} beta\n"


def test_cli_small_chunks_mix_prose_and_markdown(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(
        cli,
        ["--width", "30", "--chunk-size", "4"],
        input="# Title\nplain prose\n- item\n",
    )

    assert result.exit_code == 0
    assert result.output == (
        f"{BOX.BLOCK} {ANSI.BOLD}{ANSI.BRIGHT_CYAN}Title{ANSI.RESET}\n"
        "plain prose\n"
        f"{ANSI.GREEN}{BOX.BULLET}{ANSI.RESET} item\n"
    )


def test_read_chunks_yields_whole_lines():
    source = io.BytesIO("one\ntwo\nthrée".encode("utf-8"))

    chunks = list(_read_chunks(source, 3))

    assert chunks == ["one\n", "two\n", "thrée"]
    assert all(chunk.endswith("\n") for chunk in chunks[:-1])


def test_cli_rejects_invalid_width(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(cli, ["--width", "0"], input="# Title\n")

    assert result.exit_code == 2
    assert "term_width" in result.output


def test_cli_rejects_invalid_config_file(cli_runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write_pyproject(
        tmp_path,
        """
        [tool.ansi-markdown]
        unknown = 1
        """,
    )

    result = cli_runner.invoke(cli, [], input="text\n")

    assert result.exit_code == 2
    assert "Invalid `[tool.ansi-markdown]` settings" in result.output
