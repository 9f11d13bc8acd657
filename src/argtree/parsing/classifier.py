"""
Token classification for raw command-line arguments.

Classification is purely shape based: the length of a token and its dash
prefix decide what it is, never the commands that were declared.

Grammar:
    flag-shaped   at least two characters, starting with "-"
    short flag    "-" followed by exactly one character ("-g")
    long flag     "--" followed by one or more characters ("--good")
    inverted flag a long flag starting with "--no-" ("--no-verbose")
    unsupported   any other flag shape ("--", "-ab", "---g", "-good")
"""

from collections.abc import Iterable
from enum import Enum

from attrs import frozen

FLAG_PREFIX = "-"
LONG_FLAG_PREFIX = "--"
INVERTED_FLAG_PREFIX = "--no-"
VARIADIC_SUFFIX = "..."
ASSIGNMENT_SEPARATOR = "="


class TokenKind(Enum):
    """Kind of a classified token."""

    SHORT_FLAG = "short_flag"
    LONG_FLAG = "long_flag"
    INVERTED_FLAG = "inverted_flag"
    UNSUPPORTED_FLAG = "unsupported_flag"
    POSITIONAL = "positional"


@frozen
class Token:
    """A raw token together with its kind and the flag name it carries."""

    kind: TokenKind
    text: str
    name: str = ""

    @property
    def is_flag(self) -> bool:
        return self.kind is not TokenKind.POSITIONAL


def is_flag(value: str) -> bool:
    """Check whether a token is flag-shaped."""
    return len(value) >= 2 and value.startswith(FLAG_PREFIX)


def is_short_flag(value: str) -> bool:
    """Check whether a token is a single-dash, single-character flag."""
    return is_flag(value) and len(value) == 2 and not value.startswith(LONG_FLAG_PREFIX)


def is_inverted_flag(value: str) -> tuple[bool, str]:
    """
    Check whether a token is an inverted long flag.

    Params:
        value: Raw token

    Returns:
        (True, name without the "--no-" prefix) for inverted flags,
        (False, "") otherwise
    """
    if is_flag(value) and value.startswith(INVERTED_FLAG_PREFIX):
        return True, value.removeprefix(INVERTED_FLAG_PREFIX)

    return False, ""


def is_unsupported_flag(value: str) -> bool:
    """
    Check whether a token violates the flag grammar.

    Tokens shorter than two characters are never unsupported. A two-character
    token must start with "-" but not "--"; a longer one must start with "--"
    but not "---".
    """
    if len(value) < 2:
        return False

    if len(value) == 2:
        return not value.startswith(FLAG_PREFIX) or value.startswith(LONG_FLAG_PREFIX)

    return not value.startswith(LONG_FLAG_PREFIX) or value.startswith("---")


def is_variadic_arg(value: str) -> tuple[bool, str]:
    """
    Check whether an argument declaration is variadic.

    Params:
        value: Declared argument name, e.g. "tags..."

    Returns:
        (True, name without the "..." suffix) for variadic declarations,
        (False, "") otherwise
    """
    if not is_flag(value) and value.endswith(VARIADIC_SUFFIX):
        return True, value.removesuffix(VARIADIC_SUFFIX)

    return False, ""


def classify_token(value: str) -> Token:
    """
    Classify a raw token.

    Params:
        value: Raw token from the argument vector

    Returns:
        Token with its kind and, for flags, the bare flag name
    """
    if not is_flag(value):
        return Token(TokenKind.POSITIONAL, value)

    if is_unsupported_flag(value):
        return Token(TokenKind.UNSUPPORTED_FLAG, value)

    if is_short_flag(value):
        return Token(TokenKind.SHORT_FLAG, value, value[1:])

    inverted, name = is_inverted_flag(value)
    if inverted:
        return Token(TokenKind.INVERTED_FLAG, value, name)

    return Token(TokenKind.LONG_FLAG, value, value.removeprefix(LONG_FLAG_PREFIX))


def find_unsupported_flag(values: Iterable[str]) -> tuple[int, str] | None:
    """
    Find the first flag-shaped token that violates the flag grammar.

    Returns:
        (position, token) of the first offender, or None
    """
    for position, value in enumerate(values):
        if is_flag(value) and is_unsupported_flag(value):
            return position, value
    return None


def split_assignments(values: Iterable[str]) -> list[str]:
    """
    Split tokens on "=" into their trimmed, non-empty parts.

    "--name=value" becomes "--name", "value"; tokens without "=" pass through.
    """
    tokens: list[str] = []
    for value in values:
        if ASSIGNMENT_SEPARATOR not in value:
            tokens.append(value)
            continue
        for part in value.split(ASSIGNMENT_SEPARATOR):
            part = part.strip()
            if part:
                tokens.append(part)
    return tokens
