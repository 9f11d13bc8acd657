"""
argtree core components.

This package provides the fundamental type aliases shared across argtree.
"""

from argtree.core.types import BOOLEAN_FALSE, BOOLEAN_TRUE, ArgumentVector, ValueText

__all__ = [
    "BOOLEAN_FALSE",
    "BOOLEAN_TRUE",
    "ArgumentVector",
    "ValueText",
]
