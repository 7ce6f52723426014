r"""Decoding of ``key=value;key=value`` transport parameter strings.

Keys and values may contain ``=``, ``;`` or ``\`` by escaping them with a
backslash. Any other character may also be escaped; the backslash is
dropped and the character taken as is. There are no other escape
sequences (``\n`` is just ``n``).

Usage::

    from ptargs import parse_client_parameters

    args = parse_client_parameters(r"shared-secret=ab\;cd;mode=1")
    args["shared-secret"]   # "ab;cd"
"""

import logging

from ptargs.args import Args
from ptargs.errors import ArgsParseError, EmptyKey, MissingEquals
from ptargs.result import ParseResult
from ptargs.scanner import KEY_TERMINATORS, VALUE_TERMINATORS, index_unescaped

logger = logging.getLogger("ptargs.parser")


def parse_client_parameters(text: str) -> Args:
    """Decode a parameter string into ``Args``.

    An empty string decodes to empty ``Args``. Repeated keys accumulate
    their values in order.

    Raises:
        DanglingEscape: the string (or a key/value) ends in a lone backslash.
        MissingEquals: a key is not followed by an unescaped ``=``.
        EmptyKey: a pair has nothing before its ``=``.
    """
    try:
        args = _parse(text)
    except ArgsParseError as exc:
        logger.debug("rejected parameter string: %s", exc.kind.value)
        raise
    logger.debug("decoded %d parameter key(s)", len(args))
    return args


def _parse(text: str) -> Args:
    args = Args()
    if not text:
        return args

    n = len(text)
    i = 0
    while True:
        begin = i
        i, key = index_unescaped(text, KEY_TERMINATORS, i)
        if i >= n or text[i] != "=":
            raise MissingEquals(text[begin:i])
        i += 1  # "="
        i, value = index_unescaped(text, VALUE_TERMINATORS, i)
        # Checked after the value is read so the fragment covers the whole pair.
        if not key:
            raise EmptyKey(text[begin:i])
        args.add(key, value)
        if i >= n:
            return args
        i += 1  # ";"


def try_parse(text: str) -> ParseResult:
    """Decode *text*, returning a ``ParseResult`` instead of raising."""
    try:
        return ParseResult(args=parse_client_parameters(text))
    except ArgsParseError as exc:
        return ParseResult(error=exc)
