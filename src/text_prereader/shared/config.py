"""Configuration classes for text pre-reading.

This module provides the filter policy consulted by the pre-reader for every
line it pulls from the underlying source.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Optional

# Sentinel meaning "length rule not set"
LENGTH_DISABLED = -1

RULE_COLLECTIONS = ("skip_containing", "skip_starting_with", "skip_ending_with")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError, ValueError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass
class Configuration:
    """Rules deciding which lines the pre-reader hides from its consumer.

    The instance is owned by the caller and may be changed between reads;
    readers hold a reference and consult it on every line fetch.

    Attributes:
        trim_lines: Strip leading/trailing whitespace before any rule runs
        skip_empty_or_null: Skip lines that are empty
        skip_whitespace_only: Skip lines that are empty or only whitespace
        min_line_length: Skip lines shorter than this (-1 disables)
        max_line_length: Skip lines longer than this (-1 disables)
        skip_containing: Skip lines containing any of these substrings
        skip_starting_with: Skip lines starting with any of these prefixes
        skip_ending_with: Skip lines ending with any of these suffixes
    """

    trim_lines: bool = False
    skip_empty_or_null: bool = False
    skip_whitespace_only: bool = False
    min_line_length: int = LENGTH_DISABLED
    max_line_length: int = LENGTH_DISABLED
    skip_containing: List[str] = field(default_factory=list)
    skip_starting_with: List[str] = field(default_factory=list)
    skip_ending_with: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate configuration and turn rule sequences into lists."""
        self.validate()
        for name in RULE_COLLECTIONS:
            value = getattr(self, name)
            if not isinstance(value, list):
                setattr(self, name, list(value))

    def validate(self) -> None:
        """Validate length and rule collection types.

        Any int is a usable length; only -1 disables the rule.

        Raises:
            ConfigValidationError: If a field holds an unusable value
        """
        for name in ("min_line_length", "max_line_length"):
            value = getattr(self, name)
            # bool is an int subclass but never a meaningful length
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigValidationError(
                    f"{name} must be an int",
                    field_name=name,
                    suggestions=[f"Use -1 to disable {name}"],
                )

        for name in RULE_COLLECTIONS:
            value = getattr(self, name)
            if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
                raise ConfigValidationError(
                    f"{name} must be a sequence of strings",
                    field_name=name,
                    suggestions=[f"Wrap a single rule in a list: {name}=[...]"],
                )

    @property
    def is_pass_through(self) -> bool:
        """Whether every rule is disabled."""
        return (
            not self.trim_lines
            and not self.skip_empty_or_null
            and not self.skip_whitespace_only
            and self.min_line_length == LENGTH_DISABLED
            and self.max_line_length == LENGTH_DISABLED
            and not self.skip_containing
            and not self.skip_starting_with
            and not self.skip_ending_with
        )

    def copy(self) -> "Configuration":
        """Return an independent snapshot of this configuration."""
        return replace(
            self,
            skip_containing=list(self.skip_containing),
            skip_starting_with=list(self.skip_starting_with),
            skip_ending_with=list(self.skip_ending_with),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary representation of the configuration
        """
        result: Dict[str, Any] = {}
        for config_field in fields(self):
            value = getattr(self, config_field.name)
            if config_field.name in RULE_COLLECTIONS:
                value = list(value)
            result[config_field.name] = value
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string.

        Args:
            indent: JSON indentation level

        Returns:
            JSON string representation
        """
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Configuration":
        """Create configuration from dictionary.

        Args:
            data: Dictionary containing configuration data

        Returns:
            Configuration instance created from dictionary

        Raises:
            ConfigValidationError: If data holds unknown keys or invalid values
        """
        known = {config_field.name for config_field in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {', '.join(unknown)}",
                field_name=unknown[0],
                suggestions=sorted(known),
            )
        return cls(**data)

    @classmethod
    def from_json(cls, json_str: str) -> "Configuration":
        """Create configuration from JSON string.

        Args:
            json_str: JSON string containing configuration data

        Returns:
            Configuration instance created from JSON
        """
        data = json.loads(json_str)
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)

    # Preset factory methods
    @classmethod
    def pass_through(cls) -> "Configuration":
        """Create configuration that hides nothing."""
        return cls()

    @classmethod
    def skip_blank_lines(cls) -> "Configuration":
        """Create configuration that hides empty and whitespace-only lines."""
        return cls(trim_lines=True, skip_empty_or_null=True)

    @classmethod
    def skip_comments(cls, *prefixes: str) -> "Configuration":
        """Create configuration that hides blank lines and comment lines.

        Args:
            *prefixes: Comment markers, "#" when none are given

        Returns:
            Configuration with trimming, blank skipping and prefix rules
        """
        return cls(
            trim_lines=True,
            skip_empty_or_null=True,
            skip_starting_with=list(prefixes) if prefixes else ["#"],
        )
