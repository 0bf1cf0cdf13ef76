"""Structured logging utilities for text pre-reading.

This module provides source-aware logging so records emitted by a reader can
be traced back to the file or stream it wraps.
"""

import logging
from typing import Any, Dict, Optional


class ReaderLogger:
    """Logger that automatically includes source and component information."""

    def __init__(
        self,
        name: str,
        source: Optional[str] = None,
        component: Optional[str] = None
    ) -> None:
        """Initialize reader logger.

        Args:
            name: Logger name (typically __name__)
            source: Label of the text source being read
            component: Component name for structured logging
        """
        self.logger = logging.getLogger(name)
        self.source = source
        self.component = component or name.split('.')[-1]

    def _get_extra(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Get logging extra data with source info.

        Args:
            extra: Additional extra data

        Returns:
            Combined extra data with source info
        """
        combined_extra = {
            "component": self.component,
            "source": self.source,
        }

        if extra:
            combined_extra.update(extra)

        return combined_extra

    def debug(
        self,
        message: str,
        extra: Optional[Dict[str, Any]] = None,
        exc_info: bool = False
    ) -> None:
        """Log debug message with source info."""
        self.logger.debug(message, extra=self._get_extra(extra), exc_info=exc_info)


def get_logger(
    name: str,
    source: Optional[str] = None,
    component: Optional[str] = None
) -> ReaderLogger:
    """Get a source-aware logger instance.

    Args:
        name: Logger name (typically __name__)
        source: Label of the text source being read
        component: Component name for structured logging

    Returns:
        ReaderLogger instance
    """
    return ReaderLogger(name, source, component)
