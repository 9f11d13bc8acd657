"""
argtree parsing components.

This package provides token classification and the parser engine that fills
a command from command-line tokens.
"""

from argtree.parsing.classifier import (
    Token,
    TokenKind,
    classify_token,
    is_flag,
    is_inverted_flag,
    is_short_flag,
    is_unsupported_flag,
    is_variadic_arg,
    split_assignments,
)
from argtree.parsing.parser import (
    ArgumentParser,
    check_supported_flags,
    parse_arguments,
)

__all__ = [
    "ArgumentParser",
    "Token",
    "TokenKind",
    "check_supported_flags",
    "classify_token",
    "is_flag",
    "is_inverted_flag",
    "is_short_flag",
    "is_unsupported_flag",
    "is_variadic_arg",
    "parse_arguments",
    "split_assignments",
]
