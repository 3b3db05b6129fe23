"""Handler registry — attribute name to handler, frozen at construction.

Known attributes are keyed by ``AttributeKind``; anything else a caller
wants handled goes in the ``extensions`` table under its lowercase name.
Lookup is case-insensitive. There is no way to mutate a registry;
``with_handlers`` returns a new one.
"""

from collections.abc import Iterator, Mapping

from cookiespec.config import SpecConfig
from cookiespec.errors import InvalidArgument
from cookiespec.handlers import (
    AttributeHandler,
    AttributeKind,
    CommentHandler,
    ExpiresHandler,
    MaxAgeHandler,
    PathHandler,
    Rfc2109DomainHandler,
    Rfc2109VersionHandler,
    Rfc2965CommentUrlHandler,
    Rfc2965DiscardHandler,
    Rfc2965DomainHandler,
    Rfc2965PortHandler,
    Rfc2965VersionHandler,
    SecureHandler,
)


class HandlerRegistry(Mapping[str, AttributeHandler]):
    """Immutable, case-insensitive mapping of attribute name to handler.

    Iteration yields known kinds first, in registration order, then
    extension names.
    """

    __slots__ = ("_extensions", "_known")

    def __init__(
        self,
        handlers: Mapping[AttributeKind, AttributeHandler] | None = None,
        extensions: Mapping[str, AttributeHandler] | None = None,
    ) -> None:
        known: dict[AttributeKind, AttributeHandler] = {}
        for kind, handler in (handlers or {}).items():
            known[AttributeKind(kind)] = handler
        extra: dict[str, AttributeHandler] = {}
        for name, handler in (extensions or {}).items():
            key = name.lower()
            if AttributeKind.lookup(key) is not None:
                msg = f"{name!r} is a known attribute; register it under handlers="
                raise InvalidArgument(msg)
            extra[key] = handler
        self._known = known
        self._extensions = extra

    def find(self, name: str) -> AttributeHandler | None:
        """Return the handler for attribute *name*, or ``None`` if unregistered."""
        kind = AttributeKind.lookup(name)
        if kind is not None:
            return self._known.get(kind)
        return self._extensions.get(name.lower())

    def __getitem__(self, key: str) -> AttributeHandler:
        handler = self.find(key)
        if handler is None:
            raise KeyError(key)
        return handler

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.find(key) is not None

    def __iter__(self) -> Iterator[str]:
        yield from (str(kind) for kind in self._known)
        yield from self._extensions

    def __len__(self) -> int:
        return len(self._known) + len(self._extensions)

    def __repr__(self) -> str:
        return f"HandlerRegistry({list(self)!r})"

    def with_handlers(
        self,
        handlers: Mapping[AttributeKind, AttributeHandler] | None = None,
        extensions: Mapping[str, AttributeHandler] | None = None,
    ) -> "HandlerRegistry":
        """Return a new registry with *handlers* added or replacing existing ones.

        A replaced handler keeps its position in iteration order.
        """
        return HandlerRegistry(
            {**self._known, **(handlers or {})},
            {**self._extensions, **(extensions or {})},
        )


def baseline_registry(config: SpecConfig | None = None) -> HandlerRegistry:
    """Handlers for the baseline (RFC 2109) engine."""
    cfg = config or SpecConfig()
    return HandlerRegistry(
        {
            AttributeKind.VERSION: Rfc2109VersionHandler(),
            AttributeKind.PATH: PathHandler(),
            AttributeKind.DOMAIN: Rfc2109DomainHandler(),
            AttributeKind.MAX_AGE: MaxAgeHandler(),
            AttributeKind.SECURE: SecureHandler(),
            AttributeKind.COMMENT: CommentHandler(),
            AttributeKind.EXPIRES: ExpiresHandler(cfg.date_patterns),
        }
    )


def strict_registry(config: SpecConfig | None = None) -> HandlerRegistry:
    """Baseline handlers with the strict (RFC 2965) set layered on top."""
    return baseline_registry(config).with_handlers(
        {
            AttributeKind.DOMAIN: Rfc2965DomainHandler(),
            AttributeKind.PORT: Rfc2965PortHandler(),
            AttributeKind.COMMENT_URL: Rfc2965CommentUrlHandler(),
            AttributeKind.DISCARD: Rfc2965DiscardHandler(),
            AttributeKind.VERSION: Rfc2965VersionHandler(),
        }
    )
