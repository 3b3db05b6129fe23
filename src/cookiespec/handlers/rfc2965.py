"""Strict (RFC 2965) handlers: Domain, Port, CommentURL, Discard, Version.

All checks here run against the *effective* origin, so every host
carries at least one dot by the time a handler sees it.
"""

from cookiespec.cookie import Cookie, CookieVariant, PortBinding
from cookiespec.errors import MalformedCookie
from cookiespec.handlers.base import AttributeKind, BaseAttributeHandler
from cookiespec.origin import CookieOrigin


def domain_match(host: str, domain: str) -> bool:
    """RFC 2965 domain-match: equal, or *domain* is a dotted suffix of *host*.

    ``x.example.com`` matches ``.example.com``; ``example.com`` does not.
    """
    return host == domain or (domain.startswith(".") and host.endswith(domain))


def effective_domain(cookie: Cookie) -> str | None:
    """The cookie domain with the leading dot a user agent supplies.

    RFC 2965, section 3.2.2: an explicit Domain value without a leading
    dot is treated as if it had one. Default domains (the request host)
    are used as they are.
    """
    if cookie.domain is None:
        return None
    domain = cookie.domain.lower()
    if cookie.is_attribute_specified(AttributeKind.DOMAIN) and not domain.startswith("."):
        return "." + domain
    return domain


def parse_ports(value: str) -> tuple[int, ...]:
    """Parse a Port attribute value such as ``80,8080``."""
    ports: list[int] = []
    for token in value.split(","):
        try:
            port = int(token.strip())
        except ValueError:
            msg = f"Invalid Port attribute: {value}"
            raise MalformedCookie(msg) from None
        if port < 0:
            msg = f"Invalid Port attribute: {value}"
            raise MalformedCookie(msg)
        ports.append(port)
    return tuple(ports)


class Rfc2965DomainHandler(BaseAttributeHandler):
    __slots__ = ()

    def parse(self, cookie: Cookie, value: str | None) -> None:
        if value is None:
            msg = "Missing value for domain attribute"
            raise MalformedCookie(msg)
        if not value.strip():
            msg = "Blank value for domain attribute"
            raise MalformedCookie(msg)
        cookie.domain = value.strip().lower()

    def validate(self, cookie: Cookie, origin: CookieOrigin) -> None:
        host = origin.host
        domain = effective_domain(cookie)
        if domain is None:
            msg = "Invalid cookie state: domain not specified"
            raise MalformedCookie(msg)
        if not cookie.is_attribute_specified(AttributeKind.DOMAIN):
            if domain != host:
                msg = f'Illegal domain attribute: "{cookie.domain}". Domain of origin: "{host}"'
                raise MalformedCookie(msg)
            return
        dot = domain.find(".", 1)
        if (dot < 0 or dot == len(domain) - 1) and domain != ".local":
            msg = (
                f'Domain attribute "{cookie.domain}" violates RFC 2965: '
                "the value contains no embedded dots and the value is not .local"
            )
            raise MalformedCookie(msg)
        if not domain_match(host, domain):
            msg = (
                f'Domain attribute "{cookie.domain}" violates RFC 2965: '
                "effective host name does not domain-match domain attribute."
            )
            raise MalformedCookie(msg)
        if "." in host[: len(host) - len(domain)]:
            msg = (
                f'Domain attribute "{cookie.domain}" violates RFC 2965: '
                "effective host minus domain may not contain any dots"
            )
            raise MalformedCookie(msg)

    def match(self, cookie: Cookie, origin: CookieOrigin) -> bool:
        host = origin.host
        domain = effective_domain(cookie)
        if domain is None or not domain_match(host, domain):
            return False
        return "." not in host[: len(host) - len(domain)]


class Rfc2965PortHandler(BaseAttributeHandler):
    """Port binding for ``Set-Cookie2`` records.

    A listed Port restricts the cookie to those ports. A blank Port binds
    it to the port it was received on. Without a Port attribute any
    request port matches.
    """

    __slots__ = ()

    def parse(self, cookie: Cookie, value: str | None) -> None:
        if cookie.variant is not CookieVariant.SET_COOKIE2:
            return
        if value is not None and value.strip():
            cookie.ports = parse_ports(value)

    def validate(self, cookie: Cookie, origin: CookieOrigin) -> None:
        if not self.match(cookie, origin):
            msg = "Port attribute violates RFC 2965: Request port not found in cookie's port list."
            raise MalformedCookie(msg)

    def match(self, cookie: Cookie, origin: CookieOrigin) -> bool:
        if cookie.port_binding is PortBinding.ABSENT:
            return True
        return cookie.ports is not None and origin.port in cookie.ports


class Rfc2965CommentUrlHandler(BaseAttributeHandler):
    __slots__ = ()

    def parse(self, cookie: Cookie, value: str | None) -> None:
        if cookie.variant is CookieVariant.SET_COOKIE2:
            cookie.comment_url = value


class Rfc2965DiscardHandler(BaseAttributeHandler):
    __slots__ = ()

    def parse(self, cookie: Cookie, value: str | None) -> None:
        cookie.discard = True


class Rfc2965VersionHandler(BaseAttributeHandler):
    """Version is mandatory on ``Set-Cookie2`` cookies."""

    __slots__ = ()

    def parse(self, cookie: Cookie, value: str | None) -> None:
        if value is None:
            msg = "Missing value for version attribute"
            raise MalformedCookie(msg)
        try:
            version = int(value.strip())
        except ValueError:
            version = -1
        if version < 0:
            msg = "Invalid cookie version."
            raise MalformedCookie(msg)
        cookie.version = version

    def validate(self, cookie: Cookie, origin: CookieOrigin) -> None:
        if cookie.variant is CookieVariant.SET_COOKIE2 and not cookie.is_attribute_specified(
            AttributeKind.VERSION
        ):
            msg = "Violates RFC 2965. Version attribute is required."
            raise MalformedCookie(msg)
