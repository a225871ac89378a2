"""Configuration loading and management."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

from .constants import DEFAULT_CHUNK_SIZE, DEFAULT_TERM_WIDTH
from .models import RenderMode, RenderOptions

logger = logging.getLogger(__name__)

CONFIG_TABLE = "ansi-markdown"
DOTFILE_NAME = ".ansi-markdown.toml"


@dataclass
class AnsiMarkdownConfig:
    """Configuration for rendering a markdown stream.

    Attributes:
        mode: Rendering mode (``"off"``, ``"ansi"`` or ``"overlay"``).
        show_language: Whether code block borders carry the language tag.
        term_width: Terminal width in columns; None detects it at run time.
        max_fence_lines: Emit an unclosed code fence early once its body
            reaches this many lines; None keeps bodies unbounded.
        chunk_size: Maximum number of bytes read from the source at once.

    Examples:
        AnsiMarkdownConfig(mode="ansi", term_width=100)
    """

    mode: str = RenderMode.ANSI.value
    show_language: bool = True
    term_width: int | None = None
    max_fence_lines: int | None = None
    chunk_size: int = DEFAULT_CHUNK_SIZE


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`term_width` must be a positive integer")
    """


def load_config(search_path: Path) -> AnsiMarkdownConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.ansi-markdown]`` table from `pyproject.toml` and the
    ``[ansi-markdown]`` or ``[tool.ansi-markdown]`` table from
    `.ansi-markdown.toml` when present. Returns default values when no
    configuration is found. TOML files that cannot be read or decoded are
    skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        AnsiMarkdownConfig: Loaded configuration with defaults applied.

    Raises:
        ConfigError: If a matching table is not a mapping or contains unsupported keys.

    Examples:
        load_config(Path.cwd())
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", CONFIG_TABLE)]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / DOTFILE_NAME,
            table_paths=[(CONFIG_TABLE,), ("tool", CONFIG_TABLE)],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return AnsiMarkdownConfig()


_MISSING = object()


def _load_from_file(
    config_file: Path, table_paths: list[tuple[str, ...]]
) -> AnsiMarkdownConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError) as error:
        logger.debug("skipping unreadable config %s: %s", config_file, error)
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        logger.debug("loaded [%s] from %s", ".".join(table_path), config_file)
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> AnsiMarkdownConfig:
    table_display = ".".join(table_path)

    if raw_config is None:
        return AnsiMarkdownConfig()

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    # TOML keys are written with dashes, dataclass fields use underscores.
    normalized = {key.replace("-", "_"): value for key, value in raw_config.items()}
    try:
        return AnsiMarkdownConfig(**normalized)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: AnsiMarkdownConfig) -> None:
    """Validate an `AnsiMarkdownConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If the mode is unknown, `show_language` is not a boolean,
            or a numeric setting is not a positive integer.

    Examples:
        validate_config(AnsiMarkdownConfig(term_width=120))
    """
    if config.mode not in {mode.value for mode in RenderMode}:
        raise ConfigError("`mode` must be one of: off, ansi, overlay")
    if not isinstance(config.show_language, bool):
        raise ConfigError("`show_language` must be a boolean")

    numbers = {"chunk_size": config.chunk_size}
    if config.term_width is not None:
        numbers["term_width"] = config.term_width
    if config.max_fence_lines is not None:
        numbers["max_fence_lines"] = config.max_fence_lines

    _ensure_integers(numbers)
    _ensure_positive(numbers)


def apply_overrides(config: AnsiMarkdownConfig, **overrides: object) -> AnsiMarkdownConfig:
    """Apply override values to an `AnsiMarkdownConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by field name; None values are ignored.

    Returns:
        AnsiMarkdownConfig: New configuration with the overrides applied, or the
            original configuration when no changes are supplied.

    Raises:
        TypeError: If an override name is not a field of `AnsiMarkdownConfig`.

    Examples:
        apply_overrides(config, mode="off", term_width=None)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> AnsiMarkdownConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by field name; None values are ignored.

    Returns:
        AnsiMarkdownConfig: Validated configuration.

    Raises:
        ConfigError: If configuration loading or validation fails.
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config


def resolve_term_width(config: AnsiMarkdownConfig) -> int:
    """Return the configured width, or the current terminal's column count."""
    if config.term_width is not None:
        return config.term_width
    return shutil.get_terminal_size(fallback=(DEFAULT_TERM_WIDTH, 24)).columns


def to_render_options(config: AnsiMarkdownConfig) -> RenderOptions:
    """Build the render options described by a configuration."""
    return RenderOptions(
        show_language=config.show_language,
        term_width=resolve_term_width(config),
    )


def _ensure_positive(values: dict[str, int]) -> None:
    for key, value in values.items():
        if value <= 0:
            raise ConfigError(f"`{key}` must be a positive integer")


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
