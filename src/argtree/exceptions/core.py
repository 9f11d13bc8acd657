"""
Exception classes for argtree command-line parsing.

This module defines specific exception types for the error conditions that
can occur while declaring commands and parsing an argument vector.
"""

from dataclasses import dataclass, field


@dataclass
class ErrorContext:
    """
    Context information for parse error messages.

    Captures where an offending token appeared in the argument vector so the
    caller can point at it when printing usage.

    Params:
        command_name: Command being parsed when the error occurred
        position: Index of the offending token within the arguments
        arguments: The argument vector that was being parsed
    """

    command_name: str | None = None
    position: int | None = None
    arguments: list[str] = field(default_factory=list)

    def format_location(self) -> str:
        """
        Format location information for display.

        Returns:
            Formatted location string, empty when nothing is known
        """
        lines = []

        if self.command_name:
            lines.append(f"  in command {self.command_name}")

        if self.position is not None:
            lines.append(f"  at argument {self.position}")
            if self.arguments:
                line = " ".join(self.arguments)
                offset = len(" ".join(self.arguments[: self.position]))
                if self.position:
                    offset += 1
                lines.append(f"  {line}")
                lines.append("  " + " " * offset + "^")

        return "\n".join(lines)


class ArgTreeError(Exception):
    """Base exception for all argtree errors."""

    pass


class ParseError(ArgTreeError):
    """Base exception for errors raised while parsing an argument vector."""

    message_template = "invalid argument {name} found in the arguments"

    def __init__(self, name: str, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            name: The offending command name or token
            context: Optional ErrorContext with the token location
        """
        self.name = name
        self.context = context
        super().__init__(self.message_template.format(name=name))

    def describe(self) -> str:
        """Return the error message followed by its location, if known."""
        message = str(self)
        if self.context:
            location = self.context.format_location()
            if location:
                return f"{message}\n{location}"
        return message


class UnknownCommandError(ParseError):
    """Raised when the arguments select a command that was never registered."""

    message_template = "unknown command {name} found in the arguments"


class UnknownFlagError(ParseError):
    """Raised when a well-formed flag is not declared on the selected command."""

    message_template = "unknown flag {name} found in the arguments"


class UnsupportedFlagError(ParseError):
    """Raised when a token has a flag shape the grammar does not allow."""

    message_template = "unsupported flag {name} found in the arguments"


class DeclarationError(ArgTreeError):
    """Raised when a command, flag or argument declaration is invalid."""

    def __init__(self, name: str, reason: str):
        """
        Initialize the exception.

        Params:
            name: The name being declared
            reason: Why the declaration is rejected
        """
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid declaration '{name}': {reason}")
