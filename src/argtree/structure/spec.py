"""
Declarative command model for argtree.

FlagSpec, ArgSpec and CommandSpec hold what a host program declares and, after
parsing, the values found on the command line. Declaration methods are
idempotent: declaring a name twice returns the existing spec together with an
"already existed" flag instead of raising.
"""

import copy
from dataclasses import dataclass, field

from argtree.core.types import BOOLEAN_FALSE, BOOLEAN_TRUE, ValueText
from argtree.exceptions import DeclarationError
from argtree.parsing.classifier import FLAG_PREFIX, is_variadic_arg

INVERTED_NAME_PREFIX = "no-"


def sanitize_name(name: str) -> str:
    """Remove every whitespace character from a declared name."""
    return "".join(name.split())


@dataclass
class FlagSpec:
    """
    A flag declared on a command.

    Params:
        long_name: Name used with "--", unique within the command
        short_name: Optional one-character alias used with "-"
        is_boolean: True if the flag takes no value
        is_inverted: True for boolean flags declared as "no-<name>"
        default: Value reported when the flag is absent
        value: Value found on the command line, empty until parsed
    """

    long_name: str
    short_name: str = ""
    is_boolean: bool = False
    is_inverted: bool = False
    default: ValueText = ""
    value: ValueText = ""

    @property
    def resolved_value(self) -> ValueText:
        """Parsed value, or the default when the flag was not given a value."""
        return self.value or self.default

    def __str__(self) -> str:
        prefix = "--no-" if self.is_inverted else "--"
        if self.short_name:
            return f"-{self.short_name}/{prefix}{self.long_name}"
        return f"{prefix}{self.long_name}"


@dataclass
class ArgSpec:
    """
    A positional argument declared on a command.

    Params:
        name: Argument name, unique within the command
        is_variadic: True if the argument collects every trailing value
        default: Value reported when no token was assigned
        value: Assigned value; variadic values are joined with a separator
    """

    name: str
    is_variadic: bool = False
    default: ValueText = ""
    value: ValueText = ""

    @property
    def resolved_value(self) -> ValueText:
        return self.value or self.default

    def values(self, separator: str = ",") -> list[str]:
        """Split the resolved value into its items."""
        resolved = self.resolved_value
        if not resolved:
            return []
        if not self.is_variadic:
            return [resolved]
        return resolved.split(separator)

    def __str__(self) -> str:
        return f"{self.name}..." if self.is_variadic else self.name


@dataclass
class CommandSpec:
    """
    A command with its flags and positional arguments.

    Flags are keyed by long name with a separate shorthand table; arguments
    are keyed by name while `arg_names` keeps their declaration order, which
    is the order positional tokens are assigned in.
    """

    name: str
    flags: dict[str, FlagSpec] = field(default_factory=dict)
    shorthand_flags: dict[str, str] = field(default_factory=dict)
    args: dict[str, ArgSpec] = field(default_factory=dict)
    arg_names: list[str] = field(default_factory=list)

    def add_flag(
        self,
        name: str,
        short_name: str = "",
        is_boolean: bool = False,
        default: ValueText = "",
    ) -> tuple[FlagSpec, bool]:
        """
        Declare a flag on this command.

        A boolean flag named "no-<name>" is inverted: it is stored under
        <name>, defaults to "true" and is switched off by "--no-<name>".

        Params:
            name: Long flag name without dashes
            short_name: Optional one-character alias
            is_boolean: True if the flag takes no value
            default: Default for value-taking flags

        Returns:
            (FlagSpec, True) if the flag was already declared, (FlagSpec, False) otherwise

        Raises:
            DeclarationError: If the declaration breaks the flag rules
        """
        declared = name
        name = sanitize_name(name)
        short_name = sanitize_name(short_name)

        if not name:
            raise DeclarationError(declared, "flag name must not be empty")
        if name.startswith(FLAG_PREFIX):
            raise DeclarationError(name, "flag names are declared without dashes")
        if len(short_name) > 1:
            raise DeclarationError(short_name, "shorthand must be a single character")
        if short_name == FLAG_PREFIX:
            raise DeclarationError(short_name, "shorthand must not be a dash")

        is_inverted = name.startswith(INVERTED_NAME_PREFIX)
        if is_inverted and not is_boolean:
            raise DeclarationError(name, "only boolean flags can use the 'no-' prefix")

        long_name = name.removeprefix(INVERTED_NAME_PREFIX) if is_inverted else name
        if not long_name:
            raise DeclarationError(name, "inverted flag needs a name after 'no-'")

        existing = self.flags.get(long_name)
        if existing is not None:
            if existing.is_inverted != is_inverted:
                raise DeclarationError(
                    name, f"conflicts with already declared flag {existing}"
                )
            return existing, True

        if is_inverted and short_name:
            raise DeclarationError(name, "inverted flags cannot have a shorthand")
        if short_name and short_name in self.shorthand_flags:
            raise DeclarationError(
                short_name,
                f"shorthand already used by --{self.shorthand_flags[short_name]}",
            )

        if is_inverted:
            default = BOOLEAN_TRUE
        elif is_boolean:
            default = BOOLEAN_FALSE

        flag = FlagSpec(
            long_name=long_name,
            short_name=short_name,
            is_boolean=is_boolean,
            is_inverted=is_inverted,
            default=default,
        )
        self.flags[long_name] = flag
        if short_name:
            self.shorthand_flags[short_name] = long_name

        return flag, False

    def add_arg(self, name: str, default: ValueText = "") -> tuple[ArgSpec, bool]:
        """
        Declare a positional argument on this command.

        A name ending in "..." declares a variadic argument, which must be the
        last argument of the command.

        Params:
            name: Argument name, optionally with a "..." suffix
            default: Value reported when no token is assigned

        Returns:
            (ArgSpec, True) if the argument was already declared, (ArgSpec, False) otherwise

        Raises:
            DeclarationError: If the declaration breaks the argument rules
        """
        declared = name
        name = sanitize_name(name)
        is_variadic, variadic_name = is_variadic_arg(name)
        if is_variadic:
            name = variadic_name

        if not name:
            raise DeclarationError(declared, "argument name must not be empty")
        if name.startswith(FLAG_PREFIX):
            raise DeclarationError(name, "argument names must not start with a dash")

        existing = self.args.get(name)
        if existing is not None:
            if existing.is_variadic != is_variadic:
                raise DeclarationError(
                    name, f"conflicts with already declared argument {existing}"
                )
            return existing, True

        if self.arg_names and self.args[self.arg_names[-1]].is_variadic:
            raise DeclarationError(
                name,
                f"cannot be declared after variadic argument {self.arg_names[-1]}",
            )

        arg = ArgSpec(name=name, is_variadic=is_variadic, default=default)
        self.args[name] = arg
        self.arg_names.append(name)

        return arg, False

    def get_flag(self, name: str) -> FlagSpec | None:
        """Look up a flag by long name."""
        return self.flags.get(name)

    def get_shorthand_flag(self, short_name: str) -> FlagSpec | None:
        """Look up a flag by its one-character alias."""
        long_name = self.shorthand_flags.get(short_name)
        if long_name is None:
            return None
        return self.flags.get(long_name)

    def get_arg(self, name: str) -> ArgSpec | None:
        return self.args.get(name)

    def ordered_args(self) -> list[ArgSpec]:
        """Arguments in declaration order."""
        return [self.args[name] for name in self.arg_names]

    def flag_values(self) -> dict[str, ValueText]:
        """Resolved value of every flag, keyed by long name."""
        return {name: flag.resolved_value for name, flag in self.flags.items()}

    def arg_values(self) -> dict[str, ValueText]:
        """Resolved value of every argument, in declaration order."""
        return {arg.name: arg.resolved_value for arg in self.ordered_args()}

    def reset(self) -> None:
        """Clear every parsed value in place."""
        for flag in self.flags.values():
            flag.value = ""
        for arg in self.args.values():
            arg.value = ""

    def fresh(self) -> "CommandSpec":
        """Return a deep copy of this command with every parsed value cleared."""
        command = copy.deepcopy(self)
        command.reset()
        return command
