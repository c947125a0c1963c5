"""Tests for ContextVar-based parse configuration.

Validates defaults, validation, thread isolation and context manager
behavior.
"""

import dataclasses
from threading import Thread

import pytest

from inkdown import (
    ConfigError,
    ParseConfig,
    Parser,
    get_parse_config,
    parse,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from inkdown.lexer import tokenize
from inkdown.nodes import Paragraph, Table


class TestParseConfigDataclass:
    """Test ParseConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        """Default config enables every feature."""
        config = ParseConfig()
        assert config.headings is True
        assert config.tables is True
        assert config.max_heading_level == 3
        assert len(config.enabled_features()) == 11

    def test_immutability(self) -> None:
        config = ParseConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.tables = False  # type: ignore[misc]

    @pytest.mark.parametrize("level", [0, 4, -1])
    def test_invalid_heading_level(self, level: int) -> None:
        with pytest.raises(ConfigError, match="max_heading_level"):
            ParseConfig(max_heading_level=level)

    def test_config_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            ParseConfig(max_heading_level=9)

    def test_enabled_features_skips_disabled(self) -> None:
        config = ParseConfig(bold=False, images=False)
        features = config.enabled_features()
        assert "bold" not in features
        assert "images" not in features
        assert "max_heading_level" not in features


class TestFromDict:
    """ParseConfig.from_dict."""

    def test_known_keys(self) -> None:
        config = ParseConfig.from_dict({"tables": False, "max_heading_level": 2})
        assert config.tables is False
        assert config.max_heading_level == 2

    def test_unknown_keys_ignored(self) -> None:
        assert ParseConfig.from_dict({"theme": "dark"}) == ParseConfig()

    def test_validation_still_applies(self) -> None:
        with pytest.raises(ConfigError):
            ParseConfig.from_dict({"max_heading_level": 7})


class TestContextVar:
    """get/set/reset and the context manager."""

    def teardown_method(self) -> None:
        reset_parse_config()

    def test_default_config(self) -> None:
        assert get_parse_config() == ParseConfig()

    def test_set_and_reset(self) -> None:
        set_parse_config(ParseConfig(tables=False))
        assert get_parse_config().tables is False
        reset_parse_config()
        assert get_parse_config().tables is True

    def test_context_manager_restores(self) -> None:
        outer = ParseConfig(bold=False)
        set_parse_config(outer)
        with parse_config_context(ParseConfig(tables=False)):
            assert get_parse_config().tables is False
        assert get_parse_config() is outer

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with parse_config_context(ParseConfig(tables=False)):
                raise RuntimeError("boom")
        assert get_parse_config().tables is True

    def test_parser_reads_context(self) -> None:
        source = "| a |\n| - |\n| 1 |"
        with parse_config_context(ParseConfig(tables=False)):
            blocks = Parser(tokenize(source)).parse()
        assert all(isinstance(b, Paragraph) for b in blocks)
        assert isinstance(parse(source).children[0], Table)

    def test_thread_isolation(self) -> None:
        """A config set in another thread does not leak into this one."""
        seen: list[bool] = []

        def other() -> None:
            set_parse_config(ParseConfig(tables=False))
            seen.append(get_parse_config().tables)

        thread = Thread(target=other)
        thread.start()
        thread.join()
        assert seen == [False]
        assert get_parse_config().tables is True
