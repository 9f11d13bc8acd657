"""
argtree command structure components.

This package provides the declarative command model and the registries that
own it.
"""

from argtree.structure.registry import CommandRegistry, Registry
from argtree.structure.spec import ArgSpec, CommandSpec, FlagSpec, sanitize_name

__all__ = [
    "ArgSpec",
    "CommandRegistry",
    "CommandSpec",
    "FlagSpec",
    "Registry",
    "sanitize_name",
]
