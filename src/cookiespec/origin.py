"""Cookie origin — where a cookie came from or is being sent to.

``CookieOrigin`` is a frozen value. The strict engine derives an
*effective* origin from it (see ``effective_origin``) and never touches
the caller's instance.
"""

from dataclasses import dataclass, replace
from urllib.parse import urlsplit

from cookiespec.errors import InvalidArgument

_SECURE_SCHEMES = frozenset({"https", "wss"})
_DEFAULT_PORTS = {"http": 80, "ws": 80, "https": 443, "wss": 443}


@dataclass(frozen=True, slots=True)
class CookieOrigin:
    """The (host, port, path, secure) tuple of a request.

    The host is stored lowercased and a blank path becomes ``/``.
    """

    host: str
    port: int
    path: str = "/"
    secure: bool = False

    def __post_init__(self) -> None:
        if self.host is None or not self.host.strip():
            msg = "Host of origin may not be blank"
            raise InvalidArgument(msg)
        if self.port is None or self.port < 0:
            msg = f"Invalid port: {self.port}"
            raise InvalidArgument(msg)
        if self.path is None:
            msg = "Path of origin may not be null"
            raise InvalidArgument(msg)
        object.__setattr__(self, "host", self.host.strip().lower())
        if not self.path.strip():
            object.__setattr__(self, "path", "/")

    @classmethod
    def from_url(cls, url: str) -> "CookieOrigin":
        """Build an origin from an absolute ``http``/``https`` URL.

        The port falls back to the scheme's default when the URL omits it.
        """
        parts = urlsplit(url)
        scheme = parts.scheme.lower()
        if not parts.hostname:
            msg = f"URL has no host: {url!r}"
            raise InvalidArgument(msg)
        try:
            port = parts.port
        except ValueError as exc:
            msg = f"Invalid port in URL {url!r}: {exc}"
            raise InvalidArgument(msg) from exc
        if port is None:
            port = _DEFAULT_PORTS.get(scheme, 80)
        return cls(
            host=parts.hostname,
            port=port,
            path=parts.path or "/",
            secure=scheme in _SECURE_SCHEMES,
        )

    def __str__(self) -> str:
        return f"[{'(secure)' if self.secure else ''}{self.host}:{self.port}{self.path}]"


def effective_origin(origin: CookieOrigin, suffix: str = ".local") -> CookieOrigin:
    """Return *origin* with its effective host name (RFC 2965, section 1).

    A host name without dots gets *suffix* appended; any other origin is
    returned unchanged. Every effective host contains at least one dot,
    so applying this twice is the same as applying it once.
    """
    if "." in origin.host:
        return origin
    return replace(origin, host=origin.host + suffix)
