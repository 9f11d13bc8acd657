"""
Registry classes for declaring base commands and their commands.

A Registry is an explicitly owned object mapping base command names (the
executable) to CommandRegistry entries, each holding the commands it accepts.
Both expose the caller-facing parse entry points that select a command and
hand the remaining tokens to the parser engine.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import PurePath

from argtree.core.types import ArgumentVector
from argtree.exceptions import DeclarationError, ErrorContext, UnknownCommandError
from argtree.parsing.parser import ArgumentParser, check_supported_flags
from argtree.settings import DEFAULT_SETTINGS, ParserSettings
from argtree.structure.spec import CommandSpec, sanitize_name


@dataclass
class CommandRegistry:
    """
    Commands accepted by one base command.

    Params:
        base_command: Name of the executable
        version: Version of the executable
        description: Description of the command interface
        commands: Child commands keyed by name
    """

    base_command: str
    version: str = ""
    description: str = ""
    commands: dict[str, CommandSpec] = field(default_factory=dict)

    def add_command(self, name: str) -> tuple[CommandSpec, bool]:
        """
        Declare a command under this base command.

        Params:
            name: Command name; whitespace is removed

        Returns:
            (CommandSpec, True) if the command was already declared, (CommandSpec, False) otherwise

        Raises:
            DeclarationError: If the name is empty
        """
        command_name = sanitize_name(name)
        if not command_name:
            raise DeclarationError(name, "command name must not be empty")

        if command_name in self.commands:
            return self.commands[command_name], True

        command = CommandSpec(name=command_name)
        self.commands[command_name] = command
        return command, False

    def get_command(self, name: str) -> CommandSpec | None:
        return self.commands.get(name)

    def parse(
        self,
        arguments: ArgumentVector,
        settings: ParserSettings | None = None,
    ) -> CommandSpec:
        """
        Select a command with the first token and parse the rest into it.

        Malformed flags anywhere in the vector are reported before the command
        is looked up. With `settings.isolate_parses` the registered command is
        left untouched and a populated copy is returned.

        Params:
            arguments: Command name followed by its flags and arguments
            settings: Optional parser settings

        Returns:
            The populated command

        Raises:
            UnsupportedFlagError: If a token has a malformed flag shape
            UnknownCommandError: If no command is given or it is not declared
            UnknownFlagError: If a flag is not declared on the command
        """
        arguments = list(arguments)
        check_supported_flags(arguments)
        return self.parse_from(arguments, 0, settings or DEFAULT_SETTINGS)

    def parse_from(
        self, arguments: list[str], position: int, settings: ParserSettings
    ) -> CommandSpec:
        """
        Parse a vector whose command name sits at `position`.

        The vector must already have passed check_supported_flags. Error
        positions refer to the whole vector, so a caller that owns the
        tokens before `position` gets accurate locations.

        Raises:
            UnknownCommandError: If no command is given or it is not declared
            UnknownFlagError: If a flag is not declared on the command
        """
        has_command = position < len(arguments)
        command_name = arguments[position] if has_command else ""
        command = self.commands.get(command_name)
        if command is None:
            raise UnknownCommandError(
                command_name,
                ErrorContext(position=position, arguments=arguments)
                if has_command
                else None,
            )

        if settings.isolate_parses:
            command = command.fresh()

        return ArgumentParser(settings).fill(command, arguments[position + 1 :])

    def __iter__(self) -> Iterator[CommandSpec]:
        return iter(self.commands.values())

    def __len__(self) -> int:
        return len(self.commands)


class Registry:
    """Base commands known to a program, keyed by executable name."""

    def __init__(self, settings: ParserSettings | None = None):
        self.settings = settings or DEFAULT_SETTINGS
        self.entries: dict[str, CommandRegistry] = {}

    def register(
        self, name: str, version: str = "", description: str = ""
    ) -> tuple[CommandRegistry, bool]:
        """
        Register a base command.

        Params:
            name: Executable name; whitespace is removed
            version: Version of the executable
            description: Description of the command interface

        Returns:
            (CommandRegistry, True) if the base command was already registered,
            (CommandRegistry, False) otherwise

        Raises:
            DeclarationError: If the name is empty
        """
        base_command = sanitize_name(name)
        if not base_command:
            raise DeclarationError(name, "base command name must not be empty")

        if base_command in self.entries:
            return self.entries[base_command], True

        entry = CommandRegistry(
            base_command=base_command, version=version, description=description
        )
        self.entries[base_command] = entry
        return entry, False

    def get(self, name: str) -> CommandRegistry | None:
        return self.entries.get(name)

    def parse(self, arguments: ArgumentVector) -> CommandSpec:
        """
        Parse a full argument vector such as sys.argv.

        The first token names the base command; only its final path component
        is matched, so "/usr/bin/crn" selects "crn". The second token selects
        the command and the rest is parsed into it.

        Params:
            arguments: Executable, command and the command's tokens

        Returns:
            The populated command

        Raises:
            UnsupportedFlagError: If a token has a malformed flag shape
            UnknownCommandError: If the base command or command is not registered
            UnknownFlagError: If a flag is not declared on the command
        """
        arguments = list(arguments)
        check_supported_flags(arguments)

        program = arguments[0] if arguments else ""
        base_command = PurePath(program).name if program else ""
        entry = self.entries.get(base_command)
        if entry is None:
            raise UnknownCommandError(
                program,
                ErrorContext(position=0, arguments=arguments) if arguments else None,
            )

        return entry.parse_from(arguments, 1, self.settings)

    def __contains__(self, name: str) -> bool:
        return name in self.entries

    def __iter__(self) -> Iterator[CommandRegistry]:
        return iter(self.entries.values())

    def __len__(self) -> int:
        return len(self.entries)
