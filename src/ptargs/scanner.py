"""Escape-aware scanning of parameter strings.

A backslash makes the next character literal. Delimiter detection and
unescaping happen in the same pass, so an escaped ``;`` or ``=`` is data
and never ends a token.
"""

from collections.abc import Collection

from ptargs.errors import DanglingEscape

ESCAPE = "\\"

KEY_TERMINATORS: frozenset[str] = frozenset("=;")
VALUE_TERMINATORS: frozenset[str] = frozenset(";")


def index_unescaped(text: str, terminators: Collection[str], start: int = 0) -> tuple[int, str]:
    """Find the first unescaped terminator in *text* at or after *start*.

    Args:
        text: The string to scan.
        terminators: Single characters that end the scan. Must not
            contain the escape character.
        start: Index to begin scanning at. The parser advances this
            instead of slicing, so a parse stays linear in the input.

    Returns:
        ``(index, decoded)``: the index in *text* of the terminator (or
        ``len(text)`` if none occurs) and the unescaped text between
        *start* and it.

    Raises:
        DanglingEscape: *text* ends in a backslash with nothing after it.
            The fragment is ``text[start:]``.
    """
    if ESCAPE in terminators:
        raise ValueError("the escape character cannot be a terminator")

    decoded: list[str] = []
    i = start
    n = len(text)
    while i < n:
        char = text[i]
        if char in terminators:
            break
        if char == ESCAPE:
            i += 1
            if i >= n:
                raise DanglingEscape(text[start:])
            char = text[i]
        decoded.append(char)
        i += 1
    return i, "".join(decoded)
