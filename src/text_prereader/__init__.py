"""Text Pre-Reader.

A filtering text reader that hides lines matching configurable rules (blank
lines, comments, lines outside a length range, lines containing, starting or
ending with given text) while keeping ordinary line and character reads.

Progressive API Disclosure:
- Level 1: Simple function - open_reader()
- Level 2: Configured reader - TextPreReader with a Configuration
- Level 3: Rule evaluation - should_skip_line(), find_skip_rule()
"""

__version__ = "0.1.0"
__author__ = "Text Pre-Reader Team"

# Progressive API disclosure - Level 1 and Level 2
from .reader.prereader import (
    InvalidArgumentError,
    PreReaderError,
    ReaderClosedError,
    TextPreReader,
    open_reader,
)

# Progressive API disclosure - Level 3
from .reader.filters import SkipRule, find_skip_rule, should_skip_line

# Configuration classes
from .shared.config import ConfigError, ConfigValidationError, Configuration

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple factory
    "open_reader",

    # Level 2: Reader and configuration
    "TextPreReader",
    "Configuration",

    # Level 3: Rule evaluation
    "SkipRule",
    "find_skip_rule",
    "should_skip_line",

    # Errors
    "PreReaderError",
    "InvalidArgumentError",
    "ReaderClosedError",
    "ConfigError",
    "ConfigValidationError",
]
