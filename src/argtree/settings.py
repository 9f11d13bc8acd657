"""
Parser configuration for argtree.

ParserSettings collects the few knobs the parsing engine exposes. The defaults
reproduce the standard behavior: `=` splits a token, variadic values are
comma-joined and caller-facing parses never touch the registered specs.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ParserSettings(BaseModel):
    """Immutable settings shared by the parser and the registry entry points."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    variadic_separator: str = Field(
        default=",",
        description="Text placed between accumulated variadic values",
    )
    split_assignments: bool = Field(
        default=True,
        description="Split tokens on '=' so '--name=value' reads as '--name value'",
    )
    isolate_parses: bool = Field(
        default=True,
        description="Parse against a fresh copy of the command instead of the registered one",
    )

    @field_validator("variadic_separator")
    @classmethod
    def _separator_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("variadic_separator must not be empty")
        return value


DEFAULT_SETTINGS = ParserSettings()
