import pytest
from click.testing import CliRunner

from ansi_markdown.detector import MarkdownDetector


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


@pytest.fixture()
def detector() -> MarkdownDetector:
    """Provides a fresh detector for each test."""
    return MarkdownDetector()
