"""``cookiespec match`` — which received cookies accompany a request.

Cookies that fail validation are reported and left out, as a cookie
jar would. The ``Cookie`` header (and, for RFC 2965, the ``Cookie2``
announcement) that would be sent is printed last.
"""

import argparse
import sys

from cookiespec.cli._parse import load_cookies, select_spec
from cookiespec.cookie import Cookie
from cookiespec.errors import CookieSpecError, MalformedCookie
from cookiespec.origin import CookieOrigin


def run_match(args: argparse.Namespace) -> None:
    spec = select_spec(args)
    cookies, origin = load_cookies(args, spec)
    try:
        request = CookieOrigin.from_url(args.request_url)
    except CookieSpecError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    matched: list[Cookie] = []
    for cookie in cookies:
        try:
            spec.validate(cookie, origin)
        except MalformedCookie as exc:
            print(f"REJECTED  {cookie.name}: {exc.reason}")
            continue
        if spec.match(cookie, request):
            matched.append(cookie)
            print(f"MATCH     {cookie.name}")
        else:
            print(f"NO MATCH  {cookie.name}")

    if not matched:
        return
    for header in spec.format_cookies(matched):
        print(header.to_line())
    announcement = spec.version_header()
    if announcement is not None:
        print(announcement.to_line())
