"""ptargs exception hierarchy.

Shared by the scanner, parser, config, and CLI so every module raises and
catches the same types.
"""

from dataclasses import dataclass
from enum import Enum


class PtArgsError(Exception):
    """Base for all ptargs-specific errors."""


class ConfigurationError(PtArgsError):
    """Raised when a ``DecodeConfig`` or CLI option is invalid."""


class ParseErrorKind(Enum):
    """Which rule of the parameter syntax the input broke."""

    DANGLING_ESCAPE = "dangling_escape"
    MISSING_EQUALS = "missing_equals"
    EMPTY_KEY = "empty_key"


_MESSAGES: dict[ParseErrorKind, str] = {
    ParseErrorKind.DANGLING_ESCAPE: "nothing following final escape in {fragment!r}",
    ParseErrorKind.MISSING_EQUALS: "no equals sign in {fragment!r}",
    ParseErrorKind.EMPTY_KEY: "empty key in {fragment!r}",
}


@dataclass(frozen=True, slots=True)
class ArgsParseError(PtArgsError):
    """Malformed parameter string.

    ``kind`` says which rule was broken; ``fragment`` is the piece of input
    that broke it. Branch on ``kind`` rather than on ``str(exc)``.
    """

    kind: ParseErrorKind
    fragment: str = ""

    def __str__(self) -> str:
        return _MESSAGES[self.kind].format(fragment=self.fragment)


class DanglingEscape(ArgsParseError):
    """A backslash was the last character, with nothing to escape."""

    def __init__(self, fragment: str) -> None:
        super().__init__(kind=ParseErrorKind.DANGLING_ESCAPE, fragment=fragment)


class MissingEquals(ArgsParseError):
    """A key was not followed by an unescaped ``=``."""

    def __init__(self, fragment: str) -> None:
        super().__init__(kind=ParseErrorKind.MISSING_EQUALS, fragment=fragment)


class EmptyKey(ArgsParseError):
    """An ``=`` was found with nothing before it."""

    def __init__(self, fragment: str) -> None:
        super().__init__(kind=ParseErrorKind.EMPTY_KEY, fragment=fragment)
