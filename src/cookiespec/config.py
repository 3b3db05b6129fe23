"""Spec engine configuration.

SpecConfig is a frozen dataclass — immutable after creation, shared by
every parse/validate/match call of the engine it was handed to.
"""

from dataclasses import dataclass

# strptime equivalents of the RFC 1123, RFC 1036, asctime, and Netscape date formats.
DEFAULT_DATE_PATTERNS: tuple[str, ...] = (
    "%a, %d %b %Y %H:%M:%S %Z",
    "%A, %d-%b-%y %H:%M:%S %Z",
    "%a %b %d %H:%M:%S %Y",
    "%a, %d-%b-%Y %H:%M:%S %Z",
)


@dataclass(frozen=True, slots=True)
class SpecConfig:
    """Engine configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = SpecConfig(one_header=False)
        spec = StrictSpec(config)
    """

    # Expires attribute
    date_patterns: tuple[str, ...] = DEFAULT_DATE_PATTERNS

    # Formatting — one Cookie header for all cookies, or one header per cookie
    one_header: bool = True

    # Effective host — appended to dotless hosts by the strict engine
    local_suffix: str = ".local"
