"""
Configuration and limits for jsonbonsai parsing.

Every limit is optional. With the default configuration the tokenizer and
tree builder enforce nothing beyond the grammar, so deeply nested input is
bounded only by the interpreter's recursion limit.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Optional


@dataclass
class ParseLimits:
    """Security limits for JSON parsing to prevent abuse. None disables a limit."""

    max_input_size: Optional[int] = None
    max_string_length: Optional[int] = None
    max_number_length: Optional[int] = None
    max_nesting_depth: Optional[int] = None

    def __post_init__(self) -> None:
        for limit in fields(self):
            value = getattr(self, limit.name)
            if value is not None and value <= 0:
                raise ValueError(f"{limit.name} must be positive")

    @classmethod
    def recommended(cls) -> "ParseLimits":
        """Limits suitable for untrusted input."""
        return cls(
            max_input_size=10 * 1024 * 1024,
            max_string_length=1024 * 1024,
            max_number_length=100,
            max_nesting_depth=100,
        )


@dataclass
class ErrorReporting:
    """Error reporting and context settings."""
    include_context: bool = True
    max_error_context: int = 50


@dataclass
class ParseConfig:
    """Configuration options for jsonbonsai parsing."""

    limits: Optional[ParseLimits] = None
    error_reporting: Optional[ErrorReporting] = None
    logger: Optional[logging.Logger] = None

    def __init__(
        self,
        *,
        limits: Optional[ParseLimits] = None,
        error_reporting: Optional[ErrorReporting] = None,
        logger: Optional[logging.Logger] = None,
        **config_options: Any,  # flat shortcuts for the nested settings
    ):
        limit_names = {limit.name for limit in fields(ParseLimits)}
        limit_options = {
            name: value for name, value in config_options.items() if name in limit_names
        }
        if limits is not None:
            self.limits = limits
        elif limit_options:
            self.limits = ParseLimits(**limit_options)
        else:
            self.limits = None

        if error_reporting is not None:
            self.error_reporting = error_reporting
        else:
            self.error_reporting = ErrorReporting(
                include_context=config_options.get('include_context', True),
                max_error_context=config_options.get('max_error_context', 50),
            )

        unknown = set(config_options) - limit_names - {'include_context', 'max_error_context'}
        if unknown:
            raise TypeError(f"Unknown configuration options: {', '.join(sorted(unknown))}")

        self.logger = logger

    @classmethod
    def hardened(cls, logger: Optional[logging.Logger] = None) -> "ParseConfig":
        """Create a configuration with recommended limits for untrusted input."""
        return cls(limits=ParseLimits.recommended(), logger=logger)

    @property
    def include_context(self) -> bool:
        """Whether to attach a source snippet to errors raised by parse()."""
        assert self.error_reporting is not None
        return self.error_reporting.include_context

    @include_context.setter
    def include_context(self, value: bool) -> None:
        """Set source snippet inclusion."""
        assert self.error_reporting is not None
        self.error_reporting.include_context = value

    @property
    def max_error_context(self) -> int:
        """Maximum characters of context to include in errors."""
        assert self.error_reporting is not None
        return self.error_reporting.max_error_context

    @max_error_context.setter
    def max_error_context(self, value: int) -> None:
        """Set maximum error context length."""
        assert self.error_reporting is not None
        self.error_reporting.max_error_context = value
