"""Logging utilities for tilegrid tooling.

Provides color-coded console output for the CLI. Library functions do not log.
"""

from enum import Enum

from .config import Config


class Color(Enum):
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"      # Computed results (offsets, distances)
    RED = "\033[91m"       # Errors
    GREEN = "\033[92m"     # Success/completion
    CYAN = "\033[96m"      # Info/metadata
    GREY = "\033[90m"      # Debug detail

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colors_enabled() -> bool:
    return not Config.NO_COLOR


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text unless Config.NO_COLOR is set, otherwise plain text
    """
    if not colors_enabled():
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def log_deterministic(message: str) -> None:
    """Log a computed result (blue)."""
    print(colored(message, Color.BLUE))


def log_error(message: str) -> None:
    """Log an error (red)."""
    print(colored(f"{MARKER_ERROR} {message}", Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    print(colored(message, Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(message, Color.CYAN))


def log_debug(message: str) -> None:
    """Log debug detail (grey), only when the configured level is DEBUG."""
    if Config.LOG_LEVEL == "DEBUG":
        print(colored(f"{MARKER_DEBUG} {message}", Color.GREY))


# Markers for message types (color-blind accessible)
MARKER_RESULT = "[•]"
MARKER_ERROR = "[!]"
MARKER_SUCCESS = "[✓]"
MARKER_INFO = "[i]"
MARKER_DEBUG = "[d]"
