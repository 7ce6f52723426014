"""``ptargs decode``: print every decoded pair.

Exits with code 1 if the string is malformed.
"""

import argparse
import json
import logging
import sys

from ptargs._internal.bag import ParameterBag
from ptargs.cli import read_text
from ptargs.config import DecodeConfig
from ptargs.errors import ArgsParseError
from ptargs.parser import parse_client_parameters

logger = logging.getLogger("ptargs.cli")


def render(params: ParameterBag, output: str) -> list[str]:
    """Format *params* as output lines: ``key=value`` pairs, or one JSON object."""
    if output == "json":
        return [json.dumps({key: params.get_list(key) for key in params}, ensure_ascii=False)]
    return [f"{key}={value}" for key, value in params.multi_items()]


def run_decode(args: argparse.Namespace, config: DecodeConfig) -> None:
    """Decode ``args.text`` and print it in ``config.output`` format."""
    text = read_text(args.text)
    try:
        decoded = parse_client_parameters(text)
    except ArgsParseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    logger.info("decoded %d key(s) from %d characters", len(decoded), len(text))
    for line in render(decoded, config.output):
        print(line)
