"""Baseline (RFC 2109) Domain and Version handlers."""

from cookiespec.cookie import Cookie
from cookiespec.errors import MalformedCookie
from cookiespec.handlers.base import BaseAttributeHandler
from cookiespec.origin import CookieOrigin


class Rfc2109DomainHandler(BaseAttributeHandler):
    """Domain rules of RFC 2109, section 4.3.2.

    A domain other than the request host must start with a dot, contain
    an embedded dot, and cover the host with exactly one extra label::

        host www.example.com, Domain=.example.com   accepted
        host a.www.example.com, Domain=.example.com rejected
    """

    __slots__ = ()

    def parse(self, cookie: Cookie, value: str | None) -> None:
        if value is None:
            msg = "Missing value for domain attribute"
            raise MalformedCookie(msg)
        if not value.strip():
            msg = "Blank value for domain attribute"
            raise MalformedCookie(msg)
        cookie.domain = value

    def validate(self, cookie: Cookie, origin: CookieOrigin) -> None:
        host = origin.host
        if cookie.domain is None:
            msg = "Cookie domain may not be null"
            raise MalformedCookie(msg)
        domain = cookie.domain.lower()
        if domain == host:
            return
        if "." not in domain:
            msg = f'Domain attribute "{cookie.domain}" does not match the host "{host}"'
            raise MalformedCookie(msg)
        if not domain.startswith("."):
            msg = f'Domain attribute "{cookie.domain}" violates RFC 2109: domain must start with a dot'
            raise MalformedCookie(msg)
        dot = domain.find(".", 1)
        if dot < 0 or dot == len(domain) - 1:
            msg = f'Domain attribute "{cookie.domain}" violates RFC 2109: domain must contain an embedded dot'
            raise MalformedCookie(msg)
        if not host.endswith(domain):
            msg = f'Illegal domain attribute "{cookie.domain}". Domain of origin: "{host}"'
            raise MalformedCookie(msg)
        if "." in host[: -len(domain)]:
            msg = f'Domain attribute "{cookie.domain}" violates RFC 2109: host minus domain may not contain any dots'
            raise MalformedCookie(msg)

    def match(self, cookie: Cookie, origin: CookieOrigin) -> bool:
        if cookie.domain is None:
            return False
        domain = cookie.domain.lower()
        return origin.host == domain or (domain.startswith(".") and origin.host.endswith(domain))


class Rfc2109VersionHandler(BaseAttributeHandler):
    __slots__ = ()

    def parse(self, cookie: Cookie, value: str | None) -> None:
        if value is None:
            msg = "Missing value for version attribute"
            raise MalformedCookie(msg)
        if not value.strip():
            msg = "Blank value for version attribute"
            raise MalformedCookie(msg)
        try:
            cookie.version = int(value.strip())
        except ValueError:
            msg = f"Invalid version: {value}"
            raise MalformedCookie(msg) from None

    def validate(self, cookie: Cookie, origin: CookieOrigin) -> None:
        if cookie.version < 0:
            msg = "Cookie version may not be negative"
            raise MalformedCookie(msg)
