"""Attribute handler protocol and the known attribute kinds.

Each handler owns exactly one cookie attribute and answers three
questions about it: how to read its text onto a cookie (``parse``),
whether a received cookie is acceptable from an origin (``validate``),
and whether a stored cookie may accompany a request (``match``).
"""

from enum import StrEnum
from typing import Protocol, runtime_checkable

from cookiespec.cookie import Cookie
from cookiespec.origin import CookieOrigin


class AttributeKind(StrEnum):
    """Attribute names the engines know about, lowercase as on the wire."""

    VERSION = "version"
    PATH = "path"
    DOMAIN = "domain"
    MAX_AGE = "max-age"
    SECURE = "secure"
    COMMENT = "comment"
    EXPIRES = "expires"
    PORT = "port"
    COMMENT_URL = "commenturl"
    DISCARD = "discard"

    @classmethod
    def lookup(cls, name: str) -> "AttributeKind | None":
        """Return the kind for *name* (case-insensitive), or ``None``."""
        try:
            return cls(name.lower())
        except ValueError:
            return None


@runtime_checkable
class AttributeHandler(Protocol):
    """Parse/validate/match logic for one cookie attribute.

    Handlers are stateless apart from configuration fixed at
    construction. ``parse`` may mutate the cookie it is given;
    ``validate`` and ``match`` never do.
    """

    def parse(self, cookie: Cookie, value: str | None) -> None: ...
    def validate(self, cookie: Cookie, origin: CookieOrigin) -> None: ...
    def match(self, cookie: Cookie, origin: CookieOrigin) -> bool: ...


class BaseAttributeHandler:
    """Handler defaults: every cookie is valid and matches."""

    __slots__ = ()

    def parse(self, cookie: Cookie, value: str | None) -> None:
        raise NotImplementedError

    def validate(self, cookie: Cookie, origin: CookieOrigin) -> None:
        return None

    def match(self, cookie: Cookie, origin: CookieOrigin) -> bool:
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
