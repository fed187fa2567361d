"""Logging utilities for cleanerbot runs.

Provides color-coded console output so robot activity, run summaries and
setup problems are easy to tell apart while the grid animates.
"""

import os
from enum import Enum


class Color(Enum):
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"      # Robot activity (moves, cleans)
    RED = "\033[91m"       # Errors and rejected input
    GREEN = "\033[92m"     # Success/completion
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text if CLEANERBOT_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("CLEANERBOT_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def log_deterministic(message: str) -> None:
    """Log robot activity (blue)."""
    print(colored(message, Color.BLUE))


def log_error(message: str) -> None:
    """Log an error (red)."""
    print(colored(message, Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    print(colored(message, Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(message, Color.CYAN))


# Markers for message types (color-blind accessible)
EMOJI_DETERMINISTIC = "[•]"
EMOJI_ERROR = "[!]"
EMOJI_SUCCESS = "[✓]"
EMOJI_INFO = "[i]"
