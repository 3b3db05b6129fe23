"""Tests for cookiespec.handlers.rfc2109 — baseline Domain and Version."""

import pytest

from cookiespec.cookie import Cookie
from cookiespec.errors import MalformedCookie
from cookiespec.handlers import Rfc2109DomainHandler, Rfc2109VersionHandler
from cookiespec.origin import CookieOrigin

ORIGIN = CookieOrigin("www.example.com", 80, "/")


class TestDomainParse:
    def test_parse(self) -> None:
        c = Cookie("a", "1")
        Rfc2109DomainHandler().parse(c, ".example.com")
        assert c.domain == ".example.com"

    def test_missing(self) -> None:
        with pytest.raises(MalformedCookie, match="Missing value for domain"):
            Rfc2109DomainHandler().parse(Cookie("a", "1"), None)

    def test_blank(self) -> None:
        with pytest.raises(MalformedCookie, match="Blank value for domain"):
            Rfc2109DomainHandler().parse(Cookie("a", "1"), "  ")


class TestDomainValidate:
    @pytest.mark.parametrize("domain", ["www.example.com", ".example.com", "WWW.EXAMPLE.COM"])
    def test_accepts(self, domain: str) -> None:
        Rfc2109DomainHandler().validate(Cookie("a", "1", domain=domain), ORIGIN)

    @pytest.mark.parametrize(
        ("domain", "reason"),
        [
            ("localhost", "does not match the host"),
            ("example.com", "must start with a dot"),
            (".com", "embedded dot"),
            (".example.", "embedded dot"),
            (".example.org", "Illegal domain attribute"),
        ],
    )
    def test_rejects(self, domain: str, reason: str) -> None:
        with pytest.raises(MalformedCookie, match=reason):
            Rfc2109DomainHandler().validate(Cookie("a", "1", domain=domain), ORIGIN)

    def test_host_minus_domain_with_dot(self) -> None:
        origin = CookieOrigin("a.www.example.com", 80)
        with pytest.raises(MalformedCookie, match="may not contain any dots"):
            Rfc2109DomainHandler().validate(Cookie("a", "1", domain=".example.com"), origin)

    def test_null_domain(self) -> None:
        with pytest.raises(MalformedCookie):
            Rfc2109DomainHandler().validate(Cookie("a", "1"), ORIGIN)


class TestDomainMatch:
    def test_exact_host(self) -> None:
        assert Rfc2109DomainHandler().match(Cookie("a", "1", domain="www.example.com"), ORIGIN)

    def test_dotted_suffix(self) -> None:
        assert Rfc2109DomainHandler().match(Cookie("a", "1", domain=".example.com"), ORIGIN)

    def test_other_domain(self) -> None:
        assert not Rfc2109DomainHandler().match(Cookie("a", "1", domain=".example.org"), ORIGIN)

    def test_undotted_parent_does_not_match(self) -> None:
        assert not Rfc2109DomainHandler().match(Cookie("a", "1", domain="example.com"), ORIGIN)

    def test_no_domain(self) -> None:
        assert not Rfc2109DomainHandler().match(Cookie("a", "1"), ORIGIN)


class TestVersion:
    def test_parse(self) -> None:
        c = Cookie("a", "1")
        Rfc2109VersionHandler().parse(c, " 1 ")
        assert c.version == 1

    @pytest.mark.parametrize(
        ("value", "reason"),
        [(None, "Missing value"), ("", "Blank value"), ("one", "Invalid version")],
    )
    def test_parse_errors(self, value: str | None, reason: str) -> None:
        with pytest.raises(MalformedCookie, match=reason):
            Rfc2109VersionHandler().parse(Cookie("a", "1"), value)

    def test_validate_negative(self) -> None:
        with pytest.raises(MalformedCookie, match="negative"):
            Rfc2109VersionHandler().validate(Cookie("a", "1", version=-1), ORIGIN)

    def test_validate_ok(self) -> None:
        Rfc2109VersionHandler().validate(Cookie("a", "1", version=1), ORIGIN)
