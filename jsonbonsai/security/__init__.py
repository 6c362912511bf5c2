"""
jsonbonsai Security and Validation System.

This module provides security limits and exception handling.
"""

from .exceptions import (
    ErrorReporter,
    JsonBonsaiError,
    LexError,
    ParseError,
    SecurityError,
)
from .limits import LimitValidator

__all__ = [
    'JsonBonsaiError', 'LexError', 'ParseError', 'SecurityError',
    'ErrorReporter', 'LimitValidator',
]
