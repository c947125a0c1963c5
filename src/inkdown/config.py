"""ContextVar-based parse configuration for inkdown.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per Markdown instance and read by every parsing stage
running in that context.

The feature switches mirror the editor's parser options: each Markdown
construct can be turned off, in which case its syntax falls through to the
next classification rule (ultimately a plain paragraph or literal text).

Usage:
    md = Markdown(config=ParseConfig(tables=False))
    html = md.render("| a |")  # sets config internally via ContextVar

    # Or use the context manager around the low-level API
    with parse_config_context(ParseConfig(max_heading_level=2)):
        doc = parse(tokenize("### Small"))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any

from inkdown.errors import ConfigError

MAX_HEADING_LEVEL = 3


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        headings: ``#`` headings
        bold: ``**strong**``
        italic: ``*emphasis*``
        strikethrough: ``~~deleted~~``
        bullet_lists: ``- item`` / ``* item``
        ordered_lists: ``1. item``
        links: ``[label](url)``
        images: ``![alt](url)``
        blockquotes: ``> quote``
        horizontal_rules: ``---`` / ``***``
        tables: pipe tables with a delimiter row
        max_heading_level: Deepest heading level produced (1-3)

    """

    headings: bool = True
    bold: bool = True
    italic: bool = True
    strikethrough: bool = True
    bullet_lists: bool = True
    ordered_lists: bool = True
    links: bool = True
    images: bool = True
    blockquotes: bool = True
    horizontal_rules: bool = True
    tables: bool = True
    max_heading_level: int = MAX_HEADING_LEVEL

    def __post_init__(self) -> None:
        if not 1 <= self.max_heading_level <= MAX_HEADING_LEVEL:
            raise ConfigError(
                f"max_heading_level must be between 1 and {MAX_HEADING_LEVEL}, "
                f"got {self.max_heading_level!r}"
            )

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only keys that are ParseConfig fields are used; unknown keys are
        silently ignored so editor option blobs can be passed straight in.

        Example:
            >>> config = ParseConfig.from_dict({"tables": False, "theme": "dark"})
            >>> config.tables
            False
        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    def enabled_features(self) -> tuple[str, ...]:
        """Names of the boolean feature switches that are on, in field order."""
        return tuple(
            f.name for f in fields(self) if f.type in (bool, "bool") and getattr(self, f.name)
        )


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "inkdown_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the module-level default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(tables=False)):
        ...     get_parse_config().tables
        False
    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "MAX_HEADING_LEVEL",
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
