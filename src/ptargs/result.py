"""Parse result: immutable container for decoded args or the error."""

from dataclasses import dataclass
from typing import cast

from ptargs.args import Args
from ptargs.errors import ArgsParseError


@dataclass(frozen=True, slots=True)
class ParseResult:
    """The outcome of decoding one parameter string.

    Exactly one of ``args`` and ``error`` is set. The result is falsy on
    failure, so you can write::

        result = try_parse(text)
        if not result:
            log.warning("bad transport args: %s", result.error)
    """

    args: Args | None = None
    error: ArgsParseError | None = None

    def __post_init__(self) -> None:
        if (self.args is None) == (self.error is None):
            raise ValueError("ParseResult needs exactly one of args or error")

    @property
    def is_ok(self) -> bool:
        """True if the string decoded without error."""
        return self.error is None

    def __bool__(self) -> bool:
        """Falsy on failure, enables ``if not result:`` pattern."""
        return self.is_ok

    def unwrap(self) -> Args:
        """Return the decoded args, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return cast(Args, self.args)
