"""Tests for tmtop configuration."""

from tmtop import config
from tmtop.config import FormatterConfig


class TestEnvironment:
    """Tests for environment-dependent settings."""

    def test_test_environment_is_active(self) -> None:
        """The test suite runs with TMTOP_ENV=test."""
        assert config.TMTOP_ENV == "test"

    def test_lookup_timeout_is_bounded(self) -> None:
        """The alias lookup never waits longer than a few seconds."""
        assert 0 < config.DEFAULT_LOOKUP_TIMEOUT <= 5.0


class TestFormatterConfig:
    """Tests for the status line layout."""

    def test_defaults(self) -> None:
        """Default widths match the dashboard columns."""
        layout = FormatterConfig()

        assert layout.ordinal_width == 3
        assert layout.percent_width == 6
        assert layout.name_width == 25
        assert layout.key_marker == "🔑 "
