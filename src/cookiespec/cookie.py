"""Cookie record — the parsed, structured form of one received cookie.

Typed fields are filled in by attribute handlers during parse. The raw
attributes ("as received") are write-once: the engine records each
attribute through ``set_attribute`` while parsing, everything else reads
them through the read-only ``attributes`` view.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from types import MappingProxyType

from cookiespec.errors import InvalidArgument


class CookieVariant(StrEnum):
    """Which response header produced the cookie."""

    SET_COOKIE = "Set-Cookie"
    SET_COOKIE2 = "Set-Cookie2"


class PortBinding(StrEnum):
    """How a cookie is bound to request ports.

    ``ABSENT`` — no Port attribute, any port.
    ``BLANK`` — Port present but blank, the request's own port.
    ``LISTED`` — explicit port list, membership required.
    """

    ABSENT = "absent"
    BLANK = "blank"
    LISTED = "listed"


@dataclass(slots=True, eq=False)
class Cookie:
    """A single cookie received from an origin server."""

    name: str
    value: str | None
    domain: str | None = None
    path: str | None = None
    ports: tuple[int, ...] | None = None
    version: int = 0
    discard: bool = False
    secure: bool = False
    comment: str | None = None
    comment_url: str | None = None
    expiry: datetime | None = None
    variant: CookieVariant = CookieVariant.SET_COOKIE
    _attrs: dict[str, str | None] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if not self.name:
            msg = "Cookie name may not be empty"
            raise InvalidArgument(msg)

    @property
    def attributes(self) -> MappingProxyType[str, str | None]:
        """Raw attributes as received, keyed by lowercase name."""
        return MappingProxyType(self._attrs)

    def set_attribute(self, name: str, value: str | None) -> None:
        """Record the raw value of attribute *name*.

        Each attribute is recorded once; a second write is refused.
        """
        key = name.lower()
        if key in self._attrs:
            msg = f"Attribute {key!r} already recorded on cookie {self.name!r}"
            raise InvalidArgument(msg)
        self._attrs[key] = value

    def get_attribute(self, name: str) -> str | None:
        return self._attrs.get(name.lower())

    def is_attribute_specified(self, name: str) -> bool:
        """Whether the origin server sent attribute *name* at all."""
        return name.lower() in self._attrs

    @property
    def port_binding(self) -> PortBinding:
        """How the Port attribute binds the cookie; only ``Set-Cookie2`` records bind."""
        if self.variant is not CookieVariant.SET_COOKIE2 or "port" not in self._attrs:
            return PortBinding.ABSENT
        raw = self._attrs["port"]
        if raw is None or not raw.strip():
            return PortBinding.BLANK
        return PortBinding.LISTED

    @property
    def is_persistent(self) -> bool:
        """Whether the cookie outlives the current session."""
        return self.expiry is not None and not self.discard

    def is_expired(self, now: datetime | None = None) -> bool:
        if self.expiry is None:
            return False
        return self.expiry <= (now or datetime.now(UTC))

    def __repr__(self) -> str:
        parts = [f"{self.name}={self.value!r}", f"domain={self.domain!r}", f"path={self.path!r}"]
        if self.ports is not None:
            parts.append(f"ports={list(self.ports)}")
        if self.version:
            parts.append(f"version={self.version}")
        if self.secure:
            parts.append("secure")
        if self.discard:
            parts.append("discard")
        if self.expiry is not None:
            parts.append(f"expiry={self.expiry.isoformat()}")
        return f"Cookie({', '.join(parts)})"
