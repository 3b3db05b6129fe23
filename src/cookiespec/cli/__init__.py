"""cookiespec CLI — inspect how a spec treats a cookie header.

Entry point registered as ``cookiespec`` in ``pyproject.toml``::

    [project.scripts]
    cookiespec = "cookiespec.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``cookiespec`` command."""
    parser = argparse.ArgumentParser(
        prog="cookiespec",
        description="cookiespec — parse, validate, and match HTTP cookies (RFC 2109 / RFC 2965).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log engine decisions to stderr")
    subparsers = parser.add_subparsers(dest="command")

    # -- cookiespec parse -------------------------------------------------
    parse_parser = subparsers.add_parser("parse", help="Parse and validate a Set-Cookie header")
    parse_parser.add_argument("header", help='Header line, e.g. "Set-Cookie2: id=1; Version=1"')
    parse_parser.add_argument("--url", required=True, help="URL the header was received from")
    parse_parser.add_argument(
        "--baseline",
        action="store_true",
        help="Use RFC 2109 rules instead of RFC 2965",
    )

    # -- cookiespec match -------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Check which cookies apply to a request")
    match_parser.add_argument("header", help="Header line the cookies were received in")
    match_parser.add_argument("--url", required=True, help="URL the header was received from")
    match_parser.add_argument("--request-url", required=True, help="URL of the outgoing request")
    match_parser.add_argument(
        "--baseline",
        action="store_true",
        help="Use RFC 2109 rules instead of RFC 2965",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command == "parse":
        from cookiespec.cli._parse import run_parse

        run_parse(args)
    elif args.command == "match":
        from cookiespec.cli._match import run_match

        run_match(args)
