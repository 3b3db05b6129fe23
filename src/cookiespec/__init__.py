"""cookiespec — an HTTP cookie specification engine.

Parses server-issued cookie headers into cookie records, validates them
against the origin that sent them, decides whether a stored cookie
applies to a request, and formats the outgoing ``Cookie`` header.
Implements RFC 2109 (``BaselineSpec``) and RFC 2965 (``StrictSpec``).

Basic usage::

    from cookiespec import CookieOrigin, Header, StrictSpec

    spec = StrictSpec()
    origin = CookieOrigin("x.example.com", 80, "/a")
    header = Header.parse('Set-Cookie2: id=123; Version=1; Path="/"; Domain=".example.com"')

    for cookie in spec.parse(header, origin):
        spec.validate(cookie, origin)
        if spec.match(cookie, CookieOrigin("y.example.com", 80, "/a/b")):
            ...
"""

from importlib import import_module

__version__ = "0.1.0"
__all__ = [
    "AttributeHandler",
    "AttributeKind",
    "BaselineSpec",
    "Cookie",
    "CookieOrigin",
    "CookieSpec",
    "CookieSpecError",
    "CookieVariant",
    "HandlerRegistry",
    "Header",
    "HeaderElement",
    "InvalidArgument",
    "MalformedCookie",
    "NameValuePair",
    "PortBinding",
    "SpecConfig",
    "StrictSpec",
    "effective_origin",
]

# Public name -> defining module. Keeps ``import cookiespec`` cheap.
_LAZY_IMPORTS: dict[str, str] = {
    "AttributeHandler": "cookiespec.handlers.base",
    "AttributeKind": "cookiespec.handlers.base",
    "BaselineSpec": "cookiespec.spec.baseline",
    "Cookie": "cookiespec.cookie",
    "CookieOrigin": "cookiespec.origin",
    "CookieSpec": "cookiespec.spec.protocol",
    "CookieSpecError": "cookiespec.errors",
    "CookieVariant": "cookiespec.cookie",
    "HandlerRegistry": "cookiespec.registry",
    "Header": "cookiespec.http.headers",
    "HeaderElement": "cookiespec.http.headers",
    "InvalidArgument": "cookiespec.errors",
    "MalformedCookie": "cookiespec.errors",
    "NameValuePair": "cookiespec.http.headers",
    "PortBinding": "cookiespec.cookie",
    "SpecConfig": "cookiespec.config",
    "StrictSpec": "cookiespec.spec.strict",
    "effective_origin": "cookiespec.origin",
}


def __getattr__(name: str) -> object:
    """Lazy imports for the public API."""
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module_name), name)
