"""
Security limits and validation for jsonbonsai.
This module provides security validation to prevent resource exhaustion attacks.
"""

from typing import Optional

from ..utils.config import ParseLimits
from .exceptions import SecurityError


class LimitValidator:
    """Validates parsing limits to prevent resource exhaustion attacks."""

    def __init__(self, limits: ParseLimits):
        self.limits = limits
        self.nesting_depth = 0

    def validate_input_size(self, text: str) -> None:
        """Validate that input text size is within limits."""
        limit = self.limits.max_input_size
        if limit is not None and len(text) > limit:
            raise SecurityError(f"Input size {len(text)} exceeds limit {limit}")

    def validate_string_length(
        self, string: str, position: Optional[str] = None
    ) -> None:
        """Validate that string length is within limits."""
        limit = self.limits.max_string_length
        if limit is not None and len(string) > limit:
            pos_info = f" at {position}" if position else ""
            raise SecurityError(
                f"String length {len(string)} exceeds limit {limit}{pos_info}"
            )

    def validate_number_length(
        self, number_str: str, position: Optional[str] = None
    ) -> None:
        """Validate that number string length is within limits."""
        limit = self.limits.max_number_length
        if limit is not None and len(number_str) > limit:
            pos_info = f" at {position}" if position else ""
            raise SecurityError(
                f"Number length {len(number_str)} exceeds limit {limit}{pos_info}"
            )

    def enter_structure(self) -> None:
        """Track entering a nested structure and validate depth."""
        self.nesting_depth += 1
        limit = self.limits.max_nesting_depth
        if limit is not None and self.nesting_depth > limit:
            raise SecurityError(
                f"Nesting depth {self.nesting_depth} exceeds limit {limit}"
            )

    def exit_structure(self) -> None:
        """Track exiting a nested structure."""
        if self.nesting_depth > 0:
            self.nesting_depth -= 1

    def reset(self) -> None:
        """Reset validator state for reuse."""
        self.nesting_depth = 0
