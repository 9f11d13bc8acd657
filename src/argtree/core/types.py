"""
Core type definitions for argtree.

This module contains the type aliases shared by the structure and parsing
packages.
"""

from collections.abc import Sequence

# Raw command-line tokens as received from the host program
ArgumentVector = Sequence[str]

# Every parsed value stays text; no coercion is performed
ValueText = str

# Text written to boolean flags
BOOLEAN_TRUE = "true"
BOOLEAN_FALSE = "false"
