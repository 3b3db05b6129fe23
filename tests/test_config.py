"""Tests for cookiespec.config — SpecConfig frozen dataclass."""

import pytest

from cookiespec.config import DEFAULT_DATE_PATTERNS, SpecConfig


class TestSpecConfig:
    def test_defaults(self) -> None:
        cfg = SpecConfig()

        assert cfg.date_patterns == DEFAULT_DATE_PATTERNS
        assert cfg.one_header is True
        assert cfg.local_suffix == ".local"

    def test_override(self) -> None:
        cfg = SpecConfig(one_header=False, local_suffix=".lan", date_patterns=("%Y-%m-%d",))

        assert cfg.one_header is False
        assert cfg.local_suffix == ".lan"
        assert cfg.date_patterns == ("%Y-%m-%d",)

    def test_frozen(self) -> None:
        cfg = SpecConfig()

        with pytest.raises(AttributeError):
            cfg.one_header = False  # type: ignore[misc]
