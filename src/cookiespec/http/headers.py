"""Cookie header values — elements, parameters, and the tokenizer.

A header value such as ``a=1; Path=/, b=2; Port="80,8080"`` is a list of
*elements* separated by ``,``; each element is a ``name=value`` pair
followed by ``;``-separated *parameters*. Quoted strings may contain
either delimiter.
"""

from dataclasses import dataclass

from cookiespec.errors import InvalidArgument

_PAIR_DELIMITERS = ";,"


@dataclass(frozen=True, slots=True)
class NameValuePair:
    """One ``name[=value]`` token. ``value`` is ``None`` when there was no ``=``."""

    name: str
    value: str | None = None


@dataclass(frozen=True, slots=True)
class HeaderElement:
    """A header element: its own name/value plus parameters in header order."""

    name: str
    value: str | None = None
    parameters: tuple[NameValuePair, ...] = ()

    def get_parameter(self, name: str) -> NameValuePair | None:
        """Return the first parameter called *name* (case-insensitive)."""
        key = name.lower()
        for param in self.parameters:
            if param.name.lower() == key:
                return param
        return None


@dataclass(frozen=True, slots=True)
class Header:
    """An HTTP header line, e.g. ``Set-Cookie2: id=123; Version=1``."""

    name: str
    value: str

    @classmethod
    def parse(cls, line: str) -> "Header":
        """Split ``Name: value`` into a Header."""
        name, sep, value = line.partition(":")
        if not sep or not name.strip():
            msg = f"Not a header line: {line!r}"
            raise InvalidArgument(msg)
        return cls(name.strip(), value.strip())

    @property
    def elements(self) -> tuple[HeaderElement, ...]:
        """Tokenize the value into elements (see ``parse_elements``)."""
        return parse_elements(self.value)

    def to_line(self) -> str:
        return f"{self.name}: {self.value}"

    def __str__(self) -> str:
        return self.to_line()


def parse_elements(value: str) -> tuple[HeaderElement, ...]:
    """Tokenize a header value into elements.

    Empty elements (stray ``,``) are dropped::

        a, b = parse_elements('a=1; Path="/", b')
        # a.parameters == (NameValuePair("Path", "/"),)
        # b.value is None
    """
    elements: list[HeaderElement] = []
    pos = 0
    while pos < len(value):
        name, val, pos, delim = _parse_pair(value, pos)
        params: list[NameValuePair] = []
        while delim == ";":
            pname, pval, pos, delim = _parse_pair(value, pos)
            if pname or pval is not None:
                params.append(NameValuePair(pname, pval))
        if name or val is not None:
            elements.append(HeaderElement(name, val, tuple(params)))
    return tuple(elements)


def _parse_pair(text: str, pos: int) -> tuple[str, str | None, int, str | None]:
    """Read one ``name[=value]`` starting at *pos*.

    Returns ``(name, value, next_pos, delimiter)``; the delimiter is the
    ``;`` or ``,`` that ended the pair, or ``None`` at end of input.
    """
    end = len(text)
    start = pos
    while pos < end and text[pos] not in "=" + _PAIR_DELIMITERS:
        pos += 1
    name = text[start:pos].strip()
    if pos >= end:
        return name, None, pos, None
    if text[pos] != "=":
        return name, None, pos + 1, text[pos]

    pos += 1
    start = pos
    quoted = False
    escaped = False
    while pos < end:
        ch = text[pos]
        if quoted:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                quoted = False
        elif ch == '"':
            quoted = True
        elif ch in _PAIR_DELIMITERS:
            break
        pos += 1
    value = _unquote(text[start:pos].strip())
    if pos >= end:
        return name, value, pos, None
    return name, value, pos + 1, text[pos]


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        inner = value[1:-1]
        out: list[str] = []
        chars = iter(inner)
        for ch in chars:
            out.append(next(chars, "\\") if ch == "\\" else ch)
        return "".join(out)
    return value
