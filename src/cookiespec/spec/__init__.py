"""Cookie spec engines.

``BaselineSpec`` implements RFC 2109 over ``Set-Cookie``;
``StrictSpec`` implements RFC 2965 over ``Set-Cookie`` and
``Set-Cookie2`` by composing a baseline engine with the strict
handler set::

    from cookiespec.spec import StrictSpec

    spec = StrictSpec()
    cookies = spec.parse(header, origin)
"""

from cookiespec.spec.baseline import COOKIE, SET_COOKIE, BaselineSpec
from cookiespec.spec.protocol import CookieSpec
from cookiespec.spec.strict import COOKIE2, SET_COOKIE2, StrictSpec

__all__ = [
    "COOKIE",
    "COOKIE2",
    "SET_COOKIE",
    "SET_COOKIE2",
    "BaselineSpec",
    "CookieSpec",
    "StrictSpec",
]
