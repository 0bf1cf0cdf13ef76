"""Reader layer for text pre-reading.

This module provides the filtering pre-reader and the line skip rules it
applies.
"""

from .filters import (
    LINE_TERMINATOR,
    SkipRule,
    find_skip_rule,
    should_skip_line,
    strip_terminator,
)
from .prereader import (
    InvalidArgumentError,
    PreReaderError,
    ReaderClosedError,
    TextPreReader,
    open_reader,
)

__all__ = [
    # Skip rules
    "LINE_TERMINATOR",
    "SkipRule",
    "find_skip_rule",
    "should_skip_line",
    "strip_terminator",
    # Reader
    "TextPreReader",
    "open_reader",
    # Errors
    "PreReaderError",
    "InvalidArgumentError",
    "ReaderClosedError",
]
