"""Per-attribute cookie handlers.

Baseline handlers (both engines)::

    PathHandler, SecureHandler, CommentHandler, MaxAgeHandler,
    ExpiresHandler, Rfc2109DomainHandler, Rfc2109VersionHandler

Strict handlers (``StrictSpec`` only; Domain and Version replace the
baseline ones)::

    Rfc2965DomainHandler, Rfc2965PortHandler, Rfc2965CommentUrlHandler,
    Rfc2965DiscardHandler, Rfc2965VersionHandler
"""

from cookiespec.handlers.base import AttributeHandler, AttributeKind, BaseAttributeHandler
from cookiespec.handlers.basic import (
    CommentHandler,
    ExpiresHandler,
    MaxAgeHandler,
    PathHandler,
    SecureHandler,
    path_match,
)
from cookiespec.handlers.rfc2109 import Rfc2109DomainHandler, Rfc2109VersionHandler
from cookiespec.handlers.rfc2965 import (
    Rfc2965CommentUrlHandler,
    Rfc2965DiscardHandler,
    Rfc2965DomainHandler,
    Rfc2965PortHandler,
    Rfc2965VersionHandler,
    domain_match,
    effective_domain,
    parse_ports,
)

__all__ = [
    "AttributeHandler",
    "AttributeKind",
    "BaseAttributeHandler",
    "CommentHandler",
    "ExpiresHandler",
    "MaxAgeHandler",
    "PathHandler",
    "Rfc2109DomainHandler",
    "Rfc2109VersionHandler",
    "Rfc2965CommentUrlHandler",
    "Rfc2965DiscardHandler",
    "Rfc2965DomainHandler",
    "Rfc2965PortHandler",
    "Rfc2965VersionHandler",
    "SecureHandler",
    "domain_match",
    "effective_domain",
    "parse_ports",
    "path_match",
]
