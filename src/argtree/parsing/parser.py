"""
Parser engine for argtree commands.

This module consumes a raw argument vector against one declared command,
resolving flags to their specs and assigning positional tokens to arguments
in declaration order.
"""

from typing import TYPE_CHECKING

from argtree.core.types import BOOLEAN_FALSE, BOOLEAN_TRUE, ArgumentVector
from argtree.exceptions import ErrorContext, UnknownFlagError, UnsupportedFlagError
from argtree.parsing.classifier import (
    Token,
    TokenKind,
    classify_token,
    find_unsupported_flag,
    is_flag,
    split_assignments,
)
from argtree.settings import DEFAULT_SETTINGS, ParserSettings

if TYPE_CHECKING:
    from argtree.structure.spec import CommandSpec, FlagSpec


def check_supported_flags(
    arguments: ArgumentVector, command_name: str | None = None
) -> None:
    """
    Reject the first token whose flag shape is not supported.

    Runs over the whole vector before anything is assigned, so an unsupported
    flag late in the arguments aborts the parse up front.

    Raises:
        UnsupportedFlagError: If any flag-shaped token is malformed
    """
    offender = find_unsupported_flag(arguments)
    if offender is not None:
        position, token = offender
        raise UnsupportedFlagError(
            token,
            ErrorContext(
                command_name=command_name,
                position=position,
                arguments=list(arguments),
            ),
        )


class ArgumentParser:
    """Parser that fills a CommandSpec from command-line tokens."""

    def __init__(self, settings: ParserSettings | None = None):
        self.settings = settings or DEFAULT_SETTINGS

    def parse(self, command: "CommandSpec", arguments: ArgumentVector) -> "CommandSpec":
        """
        Parse arguments into the given command.

        The command is updated in place: flag and argument values found on
        the command line are written to their specs. On error some values may
        already have been written; callers should discard the command.

        Params:
            command: Command whose flags and arguments are filled
            arguments: Tokens following the command selector

        Returns:
            The same command, populated

        Raises:
            UnsupportedFlagError: If a token has a malformed flag shape
            UnknownFlagError: If a flag is not declared on the command
        """
        arguments = list(arguments)
        check_supported_flags(arguments, command.name)
        return self.fill(command, arguments)

    def fill(self, command: "CommandSpec", arguments: ArgumentVector) -> "CommandSpec":
        """
        Fill a command from tokens already checked by check_supported_flags.

        Entry points that scan the whole argument vector up front call this
        directly so the grammar check runs once per parse.

        Raises:
            UnsupportedFlagError: If splitting on "=" exposes a malformed flag
            UnknownFlagError: If a flag is not declared on the command
        """
        tokens = (
            split_assignments(arguments)
            if self.settings.split_assignments
            else list(arguments)
        )
        variadic_items = self._variadic_items(command)

        cursor = 0
        while cursor < len(tokens):
            token = classify_token(tokens[cursor])
            cursor += 1

            if not token.is_flag:
                self._assign_positional(command, token.text, variadic_items)
                continue

            flag = self._resolve_flag(command, token, tokens, cursor - 1)

            if flag.is_boolean:
                flag.value = BOOLEAN_FALSE if flag.is_inverted else BOOLEAN_TRUE
                continue

            if cursor < len(tokens) and not is_flag(tokens[cursor]):
                flag.value = tokens[cursor]
                cursor += 1

        return command

    def _resolve_flag(
        self,
        command: "CommandSpec",
        token: Token,
        tokens: list[str],
        position: int,
    ) -> "FlagSpec":
        """Find the declared flag a flag token refers to."""
        if token.kind is TokenKind.SHORT_FLAG:
            flag = command.get_shorthand_flag(token.name)
        elif token.kind is TokenKind.INVERTED_FLAG:
            flag = command.get_flag(token.name)
            if flag is not None and not flag.is_inverted:
                flag = None
        elif token.kind is TokenKind.LONG_FLAG:
            flag = command.get_flag(token.name)
            # "--name" never reaches a flag declared as "no-name"
            if flag is not None and flag.is_inverted:
                flag = None
        else:
            # split_assignments can expose a malformed part such as "---x"
            raise UnsupportedFlagError(
                token.text, self._context(command, tokens, position)
            )

        if flag is None:
            raise UnknownFlagError(token.text, self._context(command, tokens, position))
        return flag

    def _variadic_items(self, command: "CommandSpec") -> list[str]:
        """Items already held by the variadic argument, if the command has one."""
        arguments = command.ordered_args()
        if arguments and arguments[-1].is_variadic and arguments[-1].value:
            return arguments[-1].value.split(self.settings.variadic_separator)
        return []

    def _assign_positional(
        self, command: "CommandSpec", value: str, variadic_items: list[str]
    ) -> None:
        """
        Give a positional token to the first free argument slot.

        The variadic argument keeps its items in `variadic_items` so an empty
        token still counts as an item. Tokens with no free slot are dropped.
        """
        arguments = command.ordered_args()
        for index, arg in enumerate(arguments):
            if index == len(arguments) - 1 and arg.is_variadic:
                variadic_items.append(value)
                arg.value = self.settings.variadic_separator.join(variadic_items)
                return

            if not arg.value:
                arg.value = value
                return

    @staticmethod
    def _context(
        command: "CommandSpec", tokens: list[str], position: int
    ) -> ErrorContext:
        return ErrorContext(command_name=command.name, position=position, arguments=tokens)


def parse_arguments(
    command: "CommandSpec",
    arguments: ArgumentVector,
    settings: ParserSettings | None = None,
) -> "CommandSpec":
    """
    Parse arguments into a command with a one-off parser.

    Params:
        command: Command to populate in place
        arguments: Tokens following the command selector
        settings: Optional parser settings

    Returns:
        The populated command
    """
    return ArgumentParser(settings).parse(command, arguments)
