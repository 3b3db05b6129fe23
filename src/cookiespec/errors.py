"""cookiespec exception hierarchy.

Shared across origins, handlers, and spec engines so every module
raises and catches the same types.
"""


class CookieSpecError(Exception):
    """Base for all cookiespec-specific errors."""


class InvalidArgument(CookieSpecError, ValueError):  # noqa: N818 — mirrors the wire-level error kinds
    """Raised when a caller passes a missing or unusable argument.

    A programming error on the caller's side (``None`` header, blank
    origin host, empty cookie list), never a property of received data.
    """


class MalformedCookie(CookieSpecError):  # noqa: N818 — mirrors the wire-level error kinds
    """Raised when cookie data violates the cookie specification.

    The message is the human-readable reason: an empty name, a domain
    that does not match the origin, a request port missing from the
    cookie's port list, a malformed version number.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
