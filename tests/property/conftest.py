"""Hypothesis strategies for property testing.

Composite strategies that generate cookie tokens, host names, and
origins shaped the way real cookie traffic is.
"""

import string

from hypothesis import strategies as st

from cookiespec.handlers import AttributeKind
from cookiespec.origin import CookieOrigin

_TOKEN = string.ascii_letters + string.digits + "_-"
_VALUE = string.ascii_letters + string.digits + "-._~!*()/:@?+"
_LABEL = string.ascii_lowercase + string.digits


@st.composite
def cookie_name(draw):
    """Generate a cookie name valid under both specs (no blanks, no leading $)."""
    return draw(st.text(alphabet=_TOKEN, min_size=1, max_size=20))


@st.composite
def cookie_value(draw):
    """Generate a cookie value free of header delimiters and quotes."""
    return draw(st.text(alphabet=_VALUE, min_size=0, max_size=40))


@st.composite
def unknown_attribute(draw):
    """Generate an attribute name no handler is registered for."""
    names = st.text(alphabet=string.ascii_letters, min_size=1, max_size=12)
    return draw(names.filter(lambda n: AttributeKind.lookup(n) is None))


@st.composite
def dotless_host(draw):
    """Generate a single-label host such as ``intranet``."""
    return draw(st.text(alphabet=_LABEL, min_size=1, max_size=15))


@st.composite
def dotted_host(draw, min_labels=2, max_labels=4):
    """Generate a multi-label host such as ``a1.example.com``."""
    labels = draw(st.lists(st.text(alphabet=_LABEL, min_size=1, max_size=10), min_size=min_labels, max_size=max_labels))
    return ".".join(labels)


@st.composite
def request_path(draw):
    segments = draw(st.lists(st.text(alphabet=_LABEL, min_size=1, max_size=8), max_size=4))
    return "/" + "/".join(segments)


@st.composite
def origin(draw, hosts=None):
    """Generate a CookieOrigin; *hosts* overrides the host strategy."""
    host = draw(hosts if hosts is not None else st.one_of(dotless_host(), dotted_host()))
    return CookieOrigin(
        host=host,
        port=draw(st.integers(min_value=0, max_value=65535)),
        path=draw(request_path()),
        secure=draw(st.booleans()),
    )
