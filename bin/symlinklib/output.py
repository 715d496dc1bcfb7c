"""Formatted output utilities."""

# ============================================================
# Imports
# ============================================================

import sys
from collections.abc import Sequence

from .errors import InvalidChoiceError


# ============================================================
# Configuration
# ============================================================

class Color:
    """ANSI color codes for terminal output."""

    RESET = '\033[0m'
    BOLD = '\033[1m'
    CYAN = '\033[36m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'


# ============================================================
# Output Functions
# ============================================================

def print_header(message: str) -> None:
    """Print a section header with bold cyan formatting."""
    print()
    print(f"{Color.BOLD}{Color.CYAN}# {message}{Color.RESET}")
    print()


def print_info(message: str) -> None:
    """Print an informational message."""
    print(message)


def print_error(message: str) -> None:
    """Print an error message to stderr with 'Error:' prefix."""
    print(f"Error: {message}", file=sys.stderr)


def print_success(message: str) -> None:
    """Print a success message in green."""
    print(f"{Color.GREEN}{message}{Color.RESET}")


def print_warning(message: str) -> None:
    """Print a warning message in yellow."""
    print(f"{Color.YELLOW}{message}{Color.RESET}")


def print_key_value(key: str, value: str) -> None:
    """Print a key-value pair with cyan-colored key."""
    print(f"{Color.CYAN}{key}:{Color.RESET} {value}")


# ============================================================
# Prompts
# ============================================================

def prompt_user(title: str, message: str, options: Sequence[str]) -> str:
    """
    Ask the user to pick one of the given options.

    Args:
        title: Headline describing what needs a decision
        message: Question listing the available answers
        options: Labels the caller accepts

    Returns:
        The raw answer; validation is left to the caller

    Raises:
        InvalidChoiceError: If stdin is closed before an answer is given
    """
    print(f"{Color.BOLD}{Color.YELLOW}{title}{Color.RESET}")
    try:
        answer = input(f"{message} [{'/'.join(options)}] ")
    except EOFError:
        raise InvalidChoiceError('') from None
    return answer.strip()
