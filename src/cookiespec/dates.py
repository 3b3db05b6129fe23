"""HTTP date parsing for the Expires attribute."""

from collections.abc import Iterable
from datetime import UTC, datetime

from cookiespec.config import DEFAULT_DATE_PATTERNS


def parse_date(value: str, patterns: Iterable[str] = DEFAULT_DATE_PATTERNS) -> datetime:
    """Parse *value* with the first matching ``strptime`` pattern.

    Surrounding single quotes are stripped (some servers send them).
    The result is an aware datetime in UTC; HTTP dates are always GMT.

    Raises:
        ValueError: No pattern matches *value*.
    """
    text = value.strip()
    if len(text) > 1 and text.startswith("'") and text.endswith("'"):
        text = text[1:-1]
    for pattern in patterns:
        try:
            parsed = datetime.strptime(text, pattern)  # noqa: DTZ007 — HTTP dates are GMT
        except ValueError:
            continue
        return parsed.replace(tzinfo=UTC)
    msg = f"Unable to parse the date {value!r}"
    raise ValueError(msg)
