"""``ptargs get``: print the value(s) stored under one key.

Exits with code 1 if the string is malformed or the key is absent.
"""

import argparse
import sys

from ptargs._internal.bag import ParameterBag
from ptargs.cli import read_text
from ptargs.parser import try_parse


def select_values(params: ParameterBag, key: str, *, all_values: bool = False) -> list[str] | None:
    """Return the first value (or every value) for *key*, or None if absent."""
    first, found = params.lookup(key)
    if not found:
        return None
    return params.get_list(key) if all_values else [first]


def run_get(args: argparse.Namespace) -> None:
    result = try_parse(read_text(args.text))
    if not result:
        print(f"Error: {result.error}", file=sys.stderr)
        raise SystemExit(1)

    values = select_values(result.unwrap(), args.key, all_values=args.all)
    if values is None:
        print(f"Error: no key {args.key!r}", file=sys.stderr)
        raise SystemExit(1)

    for value in values:
        print(value)
