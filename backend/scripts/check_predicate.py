#!/usr/bin/env python3
"""Evaluate registry predicates from the command line.

Commands:
- list: print every registered predicate name
- check: evaluate NAME against SUBJECT with optional parameters

Parameters are decoded as JSON when possible, so `10` is a number and
`'["en-GB","de-DE"]'` is a list; anything else is passed as a string.

Exit status for check: 0 when the predicate passes, 1 when it fails,
2 when it could not be evaluated.

Run with: python3 -m scripts.check_predicate check isISBN 0306406152 10
"""
import argparse
import json
import sys

from core.config import settings
from core.errors import Err, Ok
from core.logging import bind_context, configure_logging
from predicates import build_default_registry


def decode_param(raw: str):
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Probe the predicate registry")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="List registered predicate names")

    check = commands.add_parser("check", help="Evaluate one predicate")
    check.add_argument("name", help="Predicate name, e.g. isEmail")
    check.add_argument("subject", help="String to validate")
    check.add_argument("params", nargs="*", help="Extra parameters (JSON decoded when possible)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(settings.LOG_LEVEL, settings.LOG_JSON)
    bind_context(command=args.command)
    registry = build_default_registry()

    if args.command == "list":
        for name in registry.names():
            print(name)
        return 0

    params = [decode_param(raw) for raw in args.params]
    match registry.evaluate(args.name, args.subject, *params):
        case Ok(passed):
            print("true" if passed else "false")
            return 0 if passed else 1
        case Err(error):
            print(f"error: {error}", file=sys.stderr)
            return 2


if __name__ == "__main__":
    sys.exit(main())
