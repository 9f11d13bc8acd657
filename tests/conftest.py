"""
Shared test fixtures and utilities for the argtree test suite.
"""

import pytest

from argtree import CommandRegistry, CommandSpec, Registry


@pytest.fixture
def registry() -> Registry:
    """Registry with a "crn" base command and a "generate" command.

    generate declares:
        -g/--generate   value flag
        -v/--verbose    boolean flag
        --no-color      inverted boolean flag
        --format        value flag defaulting to "text"
        output          positional argument
    """
    registry = Registry()
    crn, _ = registry.register("crn", "1.2", "CRN Generator Command")
    generate, _ = crn.add_command("generate")
    generate.add_flag("generate", short_name="g")
    generate.add_flag("verbose", short_name="v", is_boolean=True)
    generate.add_flag("no-color", is_boolean=True)
    generate.add_flag("format", default="text")
    generate.add_arg("output")
    return registry


@pytest.fixture
def crn(registry: Registry) -> CommandRegistry:
    return registry.get("crn")


@pytest.fixture
def tag_command() -> CommandSpec:
    """Command with a name argument followed by a variadic tags argument."""
    command = CommandSpec(name="tag")
    command.add_arg("name")
    command.add_arg("tags...")
    command.add_flag("force", short_name="f", is_boolean=True)
    command.add_flag("message", short_name="m")
    return command
