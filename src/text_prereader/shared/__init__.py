"""Shared utilities for text pre-reading.

This module provides the configuration object, its error types and the
logging helpers used by the reader layer.
"""

from .config import (
    LENGTH_DISABLED,
    RULE_COLLECTIONS,
    ConfigError,
    ConfigValidationError,
    Configuration,
)
from .logging import (
    ReaderLogger,
    get_logger,
)

__all__ = [
    "LENGTH_DISABLED",
    "RULE_COLLECTIONS",
    "ConfigError",
    "ConfigValidationError",
    "Configuration",
    "ReaderLogger",
    "get_logger",
]
