"""
Terminal formatting utilities for displaying report fields.
"""
import os
import sys
from typing import Optional, TextIO


# ANSI color codes
class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    FG_RED = "\033[31m"
    FG_CYAN = "\033[36m"


def supports_color(stream: Optional[TextIO] = None) -> bool:
    """Whether ANSI colors should be written to the stream."""
    stream = stream or sys.stdout
    if os.environ.get("NO_COLOR"):
        return False
    return hasattr(stream, "isatty") and stream.isatty()


def format_field(field: str, color: bool = False) -> str:
    """
    Format one report field for display, highlighting its label.

    "Memory Usage: 1.00MB/2.00MB (50.00%)" gets "Memory Usage:" in bold cyan.
    """
    if not color:
        return field
    label, sep, value = field.partition(":")
    if not sep:
        return field
    return f"{Colors.BOLD}{Colors.FG_CYAN}{label}{sep}{Colors.RESET}{value}"


def format_error(message: str, color: bool = False) -> str:
    if not color:
        return f"Error: {message}"
    return f"{Colors.FG_RED}Error: {message}{Colors.RESET}"
