"""Handlers shared by both engines: Path, Secure, Comment, Max-Age, Expires."""

from collections.abc import Iterable
from datetime import UTC, datetime, timedelta

from cookiespec.config import DEFAULT_DATE_PATTERNS
from cookiespec.cookie import Cookie
from cookiespec.dates import parse_date
from cookiespec.errors import MalformedCookie
from cookiespec.handlers.base import BaseAttributeHandler
from cookiespec.origin import CookieOrigin


def path_match(target: str, cookie_path: str | None) -> bool:
    """Whether request path *target* falls under *cookie_path*.

    Prefix match on a ``/`` boundary: ``/a`` covers ``/a`` and ``/a/b``
    but not ``/ab``. A trailing slash on the cookie path is ignored
    unless the path is ``/`` itself.
    """
    top = cookie_path or "/"
    if len(top) > 1 and top.endswith("/"):
        top = top[:-1]
    if not target.startswith(top):
        return False
    return len(target) == len(top) or top.endswith("/") or target[len(top)] == "/"


class PathHandler(BaseAttributeHandler):
    __slots__ = ()

    def parse(self, cookie: Cookie, value: str | None) -> None:
        cookie.path = value if value and value.strip() else "/"

    def validate(self, cookie: Cookie, origin: CookieOrigin) -> None:
        if not path_match(origin.path, cookie.path):
            msg = f'Illegal path attribute "{cookie.path}". Path of origin: "{origin.path}"'
            raise MalformedCookie(msg)

    def match(self, cookie: Cookie, origin: CookieOrigin) -> bool:
        return path_match(origin.path, cookie.path)


class SecureHandler(BaseAttributeHandler):
    """Secure cookies only travel over secure channels."""

    __slots__ = ()

    def parse(self, cookie: Cookie, value: str | None) -> None:
        cookie.secure = True

    def match(self, cookie: Cookie, origin: CookieOrigin) -> bool:
        return not cookie.secure or origin.secure


class CommentHandler(BaseAttributeHandler):
    __slots__ = ()

    def parse(self, cookie: Cookie, value: str | None) -> None:
        cookie.comment = value


class MaxAgeHandler(BaseAttributeHandler):
    """Max-Age sets the expiry relative to the moment of parsing."""

    __slots__ = ()

    def parse(self, cookie: Cookie, value: str | None) -> None:
        if value is None:
            msg = "Missing value for max-age attribute"
            raise MalformedCookie(msg)
        try:
            age = int(value.strip())
        except ValueError:
            msg = f"Invalid max-age attribute: {value}"
            raise MalformedCookie(msg) from None
        if age < 0:
            msg = f"Negative max-age attribute: {value}"
            raise MalformedCookie(msg)
        cookie.expiry = datetime.now(UTC) + timedelta(seconds=age)

    def match(self, cookie: Cookie, origin: CookieOrigin) -> bool:
        return not cookie.is_expired()


class ExpiresHandler(BaseAttributeHandler):
    """Expires carries an absolute HTTP date, read with the configured patterns."""

    __slots__ = ("_patterns",)

    def __init__(self, patterns: Iterable[str] = DEFAULT_DATE_PATTERNS) -> None:
        self._patterns = tuple(patterns)

    def parse(self, cookie: Cookie, value: str | None) -> None:
        if value is None:
            msg = "Missing value for expires attribute"
            raise MalformedCookie(msg)
        try:
            cookie.expiry = parse_date(value, self._patterns)
        except ValueError:
            msg = f"Unable to parse expires attribute: {value}"
            raise MalformedCookie(msg) from None

    def match(self, cookie: Cookie, origin: CookieOrigin) -> bool:
        return not cookie.is_expired()

    def __repr__(self) -> str:
        return f"ExpiresHandler(patterns={self._patterns!r})"
