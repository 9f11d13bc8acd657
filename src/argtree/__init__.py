"""
argtree - Declarative command-line parsing for programs with several commands

argtree lets a program declare commands with flags and positional arguments,
then parse an argument vector into their values.
"""

from importlib.metadata import version

from argtree.exceptions import (
    ArgTreeError,
    DeclarationError,
    UnknownCommandError,
    UnknownFlagError,
    UnsupportedFlagError,
)
from argtree.parsing import ArgumentParser, parse_arguments
from argtree.settings import ParserSettings
from argtree.structure import ArgSpec, CommandRegistry, CommandSpec, FlagSpec, Registry

__version__ = version("argtree")

__all__ = [
    "__version__",
    "ArgSpec",
    "ArgTreeError",
    "ArgumentParser",
    "CommandRegistry",
    "CommandSpec",
    "DeclarationError",
    "FlagSpec",
    "ParserSettings",
    "Registry",
    "UnknownCommandError",
    "UnknownFlagError",
    "UnsupportedFlagError",
    "parse_arguments",
]
