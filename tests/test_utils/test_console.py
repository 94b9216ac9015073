"""Tests for console logging formatter and setup."""

import logging
import sys
from collections.abc import Iterator

import pytest

from conncheck.utils.console import COLORS, ColorfulFormatter, configure_logging


def _record(name: str, level: int, msg: str, *args: object) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, msg, args, None)


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """Restore the conncheck logger's handlers after each test."""
    lg = logging.getLogger("conncheck")
    saved_handlers = list(lg.handlers)
    saved_level = lg.level
    saved_propagate = lg.propagate
    yield lg
    lg.handlers = saved_handlers
    lg.setLevel(saved_level)
    lg.propagate = saved_propagate


class TestColorfulFormatter:
    """Formatting of log records."""

    def test_plain_format_has_level_component_and_message(self) -> None:
        """Without colors, output is pipe-separated plain text."""
        formatter = ColorfulFormatter(use_colors=False)
        line = formatter.format(
            _record("conncheck.services.probe", logging.INFO, "%s:%d is reachable", "1.1.1.1", 53)
        )

        assert "\033[" not in line
        assert "INFO" in line
        assert "services.probe" in line
        assert "conncheck.services" not in line
        assert line.endswith("1.1.1.1:53 is reachable")

    def test_colored_format_highlights_status(self) -> None:
        """Reachability words are colored by status."""
        formatter = ColorfulFormatter(use_colors=True)
        line = formatter.format(
            _record("conncheck.services.probe", logging.DEBUG, "8.8.4.4:53 is unreachable: refused")
        )

        assert f"{COLORS['bright_red']}unreachable{COLORS['reset']}" in line
        assert f"{COLORS['bright_magenta']}8.8.4.4:53{COLORS['reset']}" in line

    def test_colored_format_highlights_durations(self) -> None:
        formatter = ColorfulFormatter(use_colors=True)
        line = formatter.format(_record("conncheck", logging.DEBUG, "timeout=2.5s"))

        assert f"{COLORS['bright_yellow']}2.5s{COLORS['reset']}" in line


class TestConfigureLogging:
    """Logging setup for host applications."""

    def test_adds_single_stream_handler(self, package_logger: logging.Logger) -> None:
        """Repeated calls do not stack handlers."""
        package_logger.handlers = [logging.NullHandler()]

        configure_logging(level="DEBUG", use_colors=False)
        configure_logging(level="DEBUG", use_colors=False)

        stream_handlers = [
            h for h in package_logger.handlers if isinstance(h, logging.StreamHandler)
        ]
        assert len(stream_handlers) == 1
        assert isinstance(stream_handlers[0].formatter, ColorfulFormatter)
        assert package_logger.level == logging.DEBUG
        assert package_logger.propagate is False

    def test_level_defaults_from_environment(
        self, package_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """CONNCHECK_LOG_LEVEL is used when no level is given."""
        package_logger.handlers = []
        monkeypatch.setenv("CONNCHECK_LOG_LEVEL", "warning")

        configure_logging()

        assert package_logger.level == logging.WARNING

    def test_colors_disabled_without_tty(
        self, package_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Non-TTY stderr gets a plain formatter even when colors are requested."""
        package_logger.handlers = []
        monkeypatch.setattr(sys.stderr, "isatty", lambda: False)

        configure_logging(level="INFO", use_colors=True)

        formatter = package_logger.handlers[0].formatter
        assert isinstance(formatter, ColorfulFormatter)
        assert formatter.use_colors is False
