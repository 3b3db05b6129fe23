"""``cookiespec parse`` — parse a header and validate every cookie in it.

Prints one line per cookie to stdout. Exits with code 1 if the header
cannot be parsed or any cookie is rejected.
"""

import argparse
import logging
import sys

from cookiespec.cookie import Cookie
from cookiespec.errors import CookieSpecError, MalformedCookie
from cookiespec.http.headers import Header
from cookiespec.origin import CookieOrigin
from cookiespec.spec import BaselineSpec, CookieSpec, StrictSpec

logger = logging.getLogger("cookiespec.cli")


def select_spec(args: argparse.Namespace) -> CookieSpec:
    return BaselineSpec() if args.baseline else StrictSpec()


def load_cookies(args: argparse.Namespace, spec: CookieSpec) -> tuple[list[Cookie], CookieOrigin]:
    """Parse ``args.header`` as received from ``args.url``.

    Exits with code 1 on malformed input.
    """
    try:
        origin = CookieOrigin.from_url(args.url)
        cookies = spec.parse(Header.parse(args.header), origin)
    except CookieSpecError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    logger.debug("Loaded %d cookie(s) with %s", len(cookies), type(spec).__name__)
    return cookies, origin


def run_parse(args: argparse.Namespace) -> None:
    spec = select_spec(args)
    cookies, origin = load_cookies(args, spec)

    rejected = 0
    for cookie in cookies:
        try:
            spec.validate(cookie, origin)
        except MalformedCookie as exc:
            rejected += 1
            print(f"REJECTED  {cookie!r}: {exc.reason}")
        else:
            print(f"OK        {cookie!r}")

    if rejected:
        raise SystemExit(1)
