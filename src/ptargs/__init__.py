"""ptargs: decoding of escaped ``key=value;key=value`` transport parameters.

Pluggable proxy transports receive their per-connection options as one flat
string. ``ptargs`` turns that string into an ordered multi-map.

Basic usage::

    from ptargs import parse_client_parameters

    args = parse_client_parameters("cert=abc;iat-mode=0")
    args.get("cert")         # "abc"
    args.get_list("iat-mode")  # ["0"]

Without exceptions::

    from ptargs import try_parse

    result = try_parse(text)
    if not result:
        print(result.error.kind)
"""

from ptargs.args import Args
from ptargs.config import DecodeConfig
from ptargs.errors import (
    ArgsParseError,
    ConfigurationError,
    DanglingEscape,
    EmptyKey,
    MissingEquals,
    ParseErrorKind,
    PtArgsError,
)
from ptargs.parser import parse_client_parameters, try_parse
from ptargs.result import ParseResult
from ptargs.scanner import index_unescaped

__version__ = "0.1.0"
__all__ = [
    "Args",
    "ArgsParseError",
    "ConfigurationError",
    "DanglingEscape",
    "DecodeConfig",
    "EmptyKey",
    "MissingEquals",
    "ParseErrorKind",
    "ParseResult",
    "PtArgsError",
    "index_unescaped",
    "parse_client_parameters",
    "try_parse",
]
