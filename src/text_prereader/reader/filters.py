"""Line skip rules applied by the pre-reader.

Rules are evaluated in a fixed order and the first one that fires decides the
outcome. Evaluation is pure: it reads the configuration and the line and
changes neither.
"""

from enum import Enum, auto
from typing import Optional

from ..shared.config import LENGTH_DISABLED, Configuration

LINE_TERMINATOR = "\r\n"

# Unicode White_Space characters; str.isspace() also counts the \x1c-\x1f
# information separators, which are line content here
WHITESPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class SkipRule(Enum):
    """Rules that can hide a line, in evaluation order."""

    EMPTY = auto()          # skip_empty_or_null
    WHITESPACE = auto()     # skip_whitespace_only
    TOO_SHORT = auto()      # min_line_length
    TOO_LONG = auto()       # max_line_length
    CONTAINS = auto()       # skip_containing
    STARTS_WITH = auto()    # skip_starting_with
    ENDS_WITH = auto()      # skip_ending_with


def strip_terminator(raw_line: str) -> str:
    """Remove a single trailing line terminator (CR-LF, LF or CR)."""
    if raw_line.endswith("\r\n"):
        return raw_line[:-2]
    if raw_line.endswith(("\n", "\r")):
        return raw_line[:-1]
    return raw_line


def trim_line(line: str) -> str:
    """Remove leading and trailing whitespace."""
    return line.strip(WHITESPACE)


def is_blank(line: str) -> bool:
    """Check whether a line is empty or holds only whitespace."""
    return not line.strip(WHITESPACE)


def find_skip_rule(line: Optional[str], config: Configuration) -> Optional[SkipRule]:
    """Find the first rule that hides a line.

    Args:
        line: Line content without terminator, already trimmed if trimming
            is enabled
        config: Rules to evaluate

    Returns:
        The rule that fired, or None when the line is kept
    """
    if line is None:
        return None

    if config.skip_empty_or_null and not line:
        return SkipRule.EMPTY

    if config.skip_whitespace_only and is_blank(line):
        return SkipRule.WHITESPACE

    # Only strict comparisons skip; a line exactly at a limit is kept
    if config.min_line_length != LENGTH_DISABLED and len(line) < config.min_line_length:
        return SkipRule.TOO_SHORT

    if config.max_line_length != LENGTH_DISABLED and len(line) > config.max_line_length:
        return SkipRule.TOO_LONG

    if config.skip_containing and any(text in line for text in config.skip_containing):
        return SkipRule.CONTAINS

    if config.skip_starting_with and any(
        line.startswith(prefix) for prefix in config.skip_starting_with
    ):
        return SkipRule.STARTS_WITH

    if config.skip_ending_with and any(
        line.endswith(suffix) for suffix in config.skip_ending_with
    ):
        return SkipRule.ENDS_WITH

    return None


def should_skip_line(line: Optional[str], config: Configuration) -> bool:
    """Check whether a line is hidden by any rule in config."""
    return find_skip_rule(line, config) is not None
