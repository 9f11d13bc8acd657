"""
argtree exception classes.

This package provides all exception types used throughout argtree for
consistent error handling and reporting.
"""

from argtree.exceptions.core import (
    ArgTreeError,
    DeclarationError,
    ErrorContext,
    ParseError,
    UnknownCommandError,
    UnknownFlagError,
    UnsupportedFlagError,
)

__all__ = [
    "ArgTreeError",
    "DeclarationError",
    "ErrorContext",
    "ParseError",
    "UnknownCommandError",
    "UnknownFlagError",
    "UnsupportedFlagError",
]
