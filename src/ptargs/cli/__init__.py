"""ptargs CLI: decode transport parameter strings from the shell.

Entry point registered as ``ptargs`` in ``pyproject.toml``::

    [project.scripts]
    ptargs = "ptargs.cli:main"
"""

import argparse
import logging
import sys

from ptargs.config import DecodeConfig
from ptargs.errors import ConfigurationError


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``ptargs`` command."""
    parser = argparse.ArgumentParser(
        prog="ptargs",
        description="ptargs: decode escaped key=value;key=value parameter strings.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: $PTARGS_LOG_LEVEL or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- ptargs decode ----------------------------------------------------
    decode_parser = subparsers.add_parser("decode", help="Print every decoded key/value pair")
    decode_parser.add_argument("text", help="Parameter string, or - to read stdin")
    decode_parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON object of key -> list of values",
    )

    # -- ptargs get -------------------------------------------------------
    get_parser = subparsers.add_parser("get", help="Print the value(s) for one key")
    get_parser.add_argument("text", help="Parameter string, or - to read stdin")
    get_parser.add_argument("key", help="Key to look up")
    get_parser.add_argument(
        "--all",
        action="store_true",
        help="Print every value for the key, one per line",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        config = DecodeConfig.from_env(
            output="json" if getattr(args, "json", False) else None,
            log_level=args.log_level,
        )
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    logging.basicConfig(level=config.level, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "decode":
        from ptargs.cli._decode import run_decode

        run_decode(args, config)
    elif args.command == "get":
        from ptargs.cli._get import run_get

        run_get(args)


def read_text(value: str) -> str:
    """Return *value*, or stdin minus one trailing newline when it is ``-``."""
    if value != "-":
        return value
    data = sys.stdin.read()
    if data.endswith("\n"):
        data = data[:-1]
    return data
