"""Filtering pre-reader over line-oriented text sources.

The reader pulls raw lines from a file or an already-open text stream, hides
the lines rejected by its Configuration and exposes the rest either as whole
lines or as a character stream in which every surviving line is followed by
a CR-LF terminator.
"""

import os
from enum import Enum, auto
from typing import Any, Callable, Iterator, Optional, Union

from ..shared.config import Configuration
from ..shared.logging import get_logger
from .filters import (
    LINE_TERMINATOR,
    is_blank,
    should_skip_line,
    strip_terminator,
    trim_line,
)

PathType = Union[str, "os.PathLike[str]"]
DEFAULT_ENCODING = "utf-8"


class PreReaderError(Exception):
    """Base exception for pre-reader errors."""


class InvalidArgumentError(PreReaderError, ValueError):
    """Exception raised when a required reader argument is missing or unusable."""

    def __init__(self, message: str, argument_name: Optional[str] = None):
        super().__init__(message)
        self.argument_name = argument_name


class ReaderClosedError(PreReaderError, ValueError):
    """Exception raised when a closed reader is used."""


class _CacheState(Enum):
    """Marker for the character cache holding nothing yet."""

    EMPTY = auto()


class _Unset(Enum):
    """Marker for an argument that was not passed."""

    CONFIG = auto()


class TextPreReader:
    """Reader that omits lines according to the rules in a Configuration.

    The reader owns the underlying source and closes it on ``close()`` or
    when leaving a ``with`` block. The Configuration is borrowed: it is read
    afresh for every line, so changes made between reads apply to the next
    line fetched.

    Not safe for use from several threads without external locking.

    Example:
        >>> import io
        >>> config = Configuration(skip_starting_with=["#"])
        >>> with TextPreReader(io.StringIO("# note\\nvalue\\n"), config) as reader:
        ...     reader.read_line()
        'value'
    """

    def __init__(
        self,
        source: Any,
        config: Union[Configuration, None, _Unset] = _Unset.CONFIG,
        *,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        """Initialize the pre-reader.

        Args:
            source: Path of a text file, an open text stream with
                ``readline()``, or any iterable of lines
            config: Filter rules; a default (pass-through) Configuration
                when omitted
            encoding: Text encoding used when source is a path

        Raises:
            InvalidArgumentError: If source or config is missing or unusable
            OSError: If the path cannot be opened
        """
        if source is None:
            raise InvalidArgumentError("source must not be None", "source")
        if isinstance(source, (bytes, bytearray)):
            raise InvalidArgumentError(
                "source must be a text path or line source, not bytes", "source"
            )

        if config is _Unset.CONFIG:
            config = Configuration()
        self._config = self._check_config(config)

        self._closed = False
        self._source: Any = None
        self._end_logged = False

        # Character path state
        self._char_cache: Union[str, None, _CacheState] = _CacheState.EMPTY
        self._line: Optional[str] = None
        self._index = 0

        if isinstance(source, (str, os.PathLike)):
            self._open_path(source, encoding)
        else:
            self._wrap_source(source)

    def _open_path(self, path: PathType, encoding: str) -> None:
        """Open path for reading; open errors propagate unchanged."""
        path_str = os.fspath(path)
        if not isinstance(path_str, str):
            raise InvalidArgumentError("path must be text", "path")
        if is_blank(path_str):
            raise InvalidArgumentError("path must not be empty or whitespace", "path")

        self.name = path_str
        self._logger = get_logger(__name__, self.name, "prereader")

        # newline="" keeps raw terminators so every kind is stripped the same way
        stream = open(path_str, "r", encoding=encoding, newline="")
        self._source = stream
        self._read_raw = self._readline_reader(stream)
        self._logger.debug("Opened text source", extra={"encoding": encoding})

    def _wrap_source(self, source: Any) -> None:
        """Adopt an already-open line source."""
        if hasattr(source, "readline"):
            read_raw = self._readline_reader(source)
        else:
            try:
                lines = iter(source)
            except TypeError as e:
                raise InvalidArgumentError(
                    f"source of type {type(source).__name__} is not a line source",
                    "source",
                ) from e
            read_raw = self._iterator_reader(lines)

        label = getattr(source, "name", None)
        self.name = label if isinstance(label, str) else type(source).__name__
        self._logger = get_logger(__name__, self.name, "prereader")

        self._source = source
        self._read_raw = read_raw
        self._logger.debug("Wrapped line source")

    @staticmethod
    def _readline_reader(stream: Any) -> Callable[[], Optional[str]]:
        def read_raw() -> Optional[str]:
            line = stream.readline()
            return line if line else None
        return read_raw

    @staticmethod
    def _iterator_reader(lines: Iterator[Any]) -> Callable[[], Optional[str]]:
        def read_raw() -> Optional[str]:
            return next(lines, None)
        return read_raw

    @staticmethod
    def _check_config(config: Any) -> Configuration:
        if config is None:
            raise InvalidArgumentError("config must not be None", "config")
        if not isinstance(config, Configuration):
            raise InvalidArgumentError(
                f"config must be a Configuration, got {type(config).__name__}",
                "config",
            )
        return config

    @property
    def config(self) -> Configuration:
        """Filter rules consulted on every line fetch."""
        return self._config

    @config.setter
    def config(self, value: Configuration) -> None:
        self._config = self._check_config(value)

    @property
    def closed(self) -> bool:
        """Whether the underlying source has been released."""
        return self._closed

    def read_line(self) -> Optional[str]:
        """Read the next line that survives filtering.

        If characters of the current line were already read or peeked, the
        rest of that line is returned instead of a new one.

        Returns:
            Line content without terminator, or None at end of source
        """
        self._check_open()
        pending = self._take_pending_line()
        if pending is not None:
            return pending
        return self._get_line()

    def peek_char(self) -> Optional[str]:
        """Return the next character without consuming it, or None at end."""
        self._check_open()
        self._fill_char_cache()
        return self._char_cache  # type: ignore[return-value]

    def read_char(self) -> Optional[str]:
        """Read and consume the next character, or None at end."""
        self._check_open()
        self._fill_char_cache()
        ch = self._char_cache
        self._char_cache = _CacheState.EMPTY
        return ch  # type: ignore[return-value]

    def read(self, size: int = -1) -> str:
        """Read up to size characters from the character stream.

        Args:
            size: Maximum number of characters; all remaining when negative

        Returns:
            Characters read, empty string at end of source
        """
        chars = []
        while size < 0 or len(chars) < size:
            ch = self.read_char()
            if ch is None:
                break
            chars.append(ch)
        return "".join(chars)

    def read_to_end(self) -> str:
        """Read all remaining characters."""
        return self.read()

    def close(self) -> None:
        """Release the underlying source; further calls do nothing."""
        if self._closed:
            return
        self._closed = True
        self._char_cache = _CacheState.EMPTY
        self._line = None

        close = getattr(self._source, "close", None)
        if callable(close):
            close()
        self._logger.debug("Closed text source")

    def __enter__(self) -> "TextPreReader":
        return self

    def __exit__(self, exc_type: Any, exc_value: Any, traceback: Any) -> None:
        self.close()

    def __iter__(self) -> "TextPreReader":
        return self

    def __next__(self) -> str:
        line = self.read_line()
        if line is None:
            raise StopIteration
        return line

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r} closed={self._closed}>"

    def _check_open(self) -> None:
        if self._closed:
            raise ReaderClosedError("I/O operation on closed reader")

    def _fill_char_cache(self) -> None:
        if self._char_cache is _CacheState.EMPTY:
            self._char_cache = self._next_char()

    def _next_char(self) -> Optional[str]:
        """Get the next character of the filtered stream and advance."""
        if self._line is None:
            line = self._get_line()
            if line is None:
                return None
            # Terminators were stripped on read; every line gets CR-LF back
            self._line = line + LINE_TERMINATOR
            self._index = 0

        ch = self._line[self._index]
        self._index += 1
        if self._index >= len(self._line):
            self._line = None
        return ch

    def _take_pending_line(self) -> Optional[str]:
        """Drain a partially consumed line left by the character path."""
        cached = self._char_cache
        if cached is _CacheState.EMPTY and self._line is None:
            return None

        self._char_cache = _CacheState.EMPTY
        if cached is None:
            return None

        text = cached if isinstance(cached, str) else ""
        if self._line is not None:
            text += self._line[self._index:]
            self._line = None
            self._index = 0

        # text is a non-empty suffix of "<line>\r\n"
        if len(text) < len(LINE_TERMINATOR):
            return ""
        return text[:-len(LINE_TERMINATOR)]

    def _get_line(self) -> Optional[str]:
        """Pull raw lines until one passes the configured rules."""
        while True:
            raw_line = self._read_raw()
            if raw_line is None:
                self._log_end_of_source()
                return None
            if not isinstance(raw_line, str):
                raise TypeError(
                    f"line source produced {type(raw_line).__name__}, expected str"
                )

            line = strip_terminator(raw_line)
            if self._config.trim_lines:
                line = trim_line(line)

            if not should_skip_line(line, self._config):
                return line

    def _log_end_of_source(self) -> None:
        if self._end_logged:
            return
        self._end_logged = True
        self._logger.debug("Reached end of source")


def open_reader(
    source: Any,
    config: Optional[Configuration] = None,
    **rules: Any,
) -> TextPreReader:
    """Create a pre-reader, building its Configuration from keyword rules.

    Args:
        source: Path, open text stream or iterable of lines
        config: Ready-made rules; mutually exclusive with keyword rules
        **rules: Configuration fields, e.g. ``skip_starting_with=["#"]``

    Returns:
        TextPreReader over source

    Raises:
        InvalidArgumentError: If both config and rules are given, or a rule
            name is unknown
    """
    if config is not None and rules:
        raise InvalidArgumentError(
            "pass either config or keyword rules, not both", "rules"
        )
    if config is None:
        try:
            config = Configuration(**rules)
        except TypeError as e:
            raise InvalidArgumentError(f"unknown rule: {e}", "rules") from e
    return TextPreReader(source, config)
