"""Colorful console logging for conncheck."""

import logging
import re
import sys
from datetime import datetime

# ANSI color codes
COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "cyan": "\033[36m",
    "white": "\033[37m",
    "bright_black": "\033[90m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
    "bright_yellow": "\033[93m",
    "bright_blue": "\033[94m",
    "bright_magenta": "\033[95m",
    "bright_cyan": "\033[96m",
    "bg_red": "\033[41m",
}

# Log level colors
LEVEL_COLORS = {
    "DEBUG": COLORS["bright_black"],
    "INFO": COLORS["bright_green"],
    "WARNING": COLORS["bright_yellow"],
    "ERROR": COLORS["bright_red"],
    "CRITICAL": COLORS["bg_red"] + COLORS["white"] + COLORS["bold"],
}

# Component colors for logger names
COMPONENT_COLORS = {
    "conncheck.services.probe": COLORS["bright_cyan"],
    "conncheck.services.checker": COLORS["bright_magenta"],
    "conncheck.config": COLORS["green"],
    "default": COLORS["white"],
}

_HOST_PORT_PATTERN = re.compile(r"(\[?[\w\.:\-]+\]?:\d+)\b")
_SECONDS_PATTERN = re.compile(r"(\d+\.?\d*s)\b")
_STATUS_PATTERN = re.compile(r"\b(unreachable|reachable)\b")


class ColorfulFormatter(logging.Formatter):
    """Colorful log formatter with component highlighting."""

    def __init__(self, use_colors: bool = True) -> None:
        """Initialize the formatter.

        Args:
            use_colors: Whether to use ANSI colors.
        """
        super().__init__()
        self.use_colors = use_colors

    def _colorize(self, text: str, color: str) -> str:
        """Apply color to text if colors are enabled."""
        if not self.use_colors:
            return text
        return f"{color}{text}{COLORS['reset']}"

    def _get_component_color(self, name: str) -> str:
        for prefix, color in COMPONENT_COLORS.items():
            if prefix != "default" and name.startswith(prefix):
                return color
        return COMPONENT_COLORS["default"]

    def _format_timestamp(self, record: logging.LogRecord) -> str:
        dt = datetime.fromtimestamp(record.created)
        return f"{dt:%H:%M:%S}.{int(record.msecs):03d} {dt:%m/%d}"

    def _format_level(self, record: logging.LogRecord) -> str:
        level = record.levelname
        color = LEVEL_COLORS.get(level, COLORS["white"])
        return self._colorize(f"{level:<8}", color)

    def _format_component(self, record: logging.LogRecord) -> str:
        name = record.name
        if name.startswith("conncheck."):
            name = name[len("conncheck.") :]
        color = self._get_component_color(record.name)
        return self._colorize(f"{name:<18}", color)

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as a single pipe-separated line."""
        timestamp = self._colorize(self._format_timestamp(record), COLORS["dim"])
        level = self._format_level(record)
        component = self._format_component(record)
        sep = self._colorize("|", COLORS["dim"])
        message = self._highlight_message(record.getMessage())

        line = f"{timestamp} {sep} {level} {sep} {component} {sep} {message}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line

    def _highlight_message(self, message: str) -> str:
        """Highlight endpoints, durations and probe status in messages."""
        if not self.use_colors:
            return message

        message = _HOST_PORT_PATTERN.sub(
            f"{COLORS['bright_magenta']}\\1{COLORS['reset']}", message
        )
        message = _SECONDS_PATTERN.sub(
            f"{COLORS['bright_yellow']}\\1{COLORS['reset']}", message
        )

        def _status(match: re.Match[str]) -> str:
            color = COLORS["bright_red"] if match.group(1) == "unreachable" else COLORS["bright_green"]
            return f"{color}{match.group(1)}{COLORS['reset']}"

        return _STATUS_PATTERN.sub(_status, message)


def configure_logging(level: str | None = None, use_colors: bool | None = None) -> logging.Logger:
    """Attach a colorful stderr handler to the conncheck logger.

    Safe to call more than once: a handler is only added when the logger
    has none besides the library's NullHandler. Colors are disabled when
    stderr is not a TTY.

    Args:
        level: Log level name, defaults to CONNCHECK_LOG_LEVEL
        use_colors: Force colors on or off, defaults to CONNCHECK_LOG_COLORS

    Returns:
        The configured "conncheck" logger
    """
    from conncheck.config.settings import Settings

    if level is None or use_colors is None:
        settings = Settings.from_env()
        level = level if level is not None else settings.log_level
        use_colors = use_colors if use_colors is not None else settings.log_colors

    if not sys.stderr.isatty():
        use_colors = False

    package_logger = logging.getLogger("conncheck")
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handlers = [h for h in package_logger.handlers if not isinstance(h, logging.NullHandler)]
    if not handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColorfulFormatter(use_colors=use_colors))
        package_logger.addHandler(handler)
        package_logger.propagate = False

    return package_logger
