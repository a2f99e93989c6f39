"""Unit tests for source-suffix configuration."""

import pytest

from goast_viewer.core.config import DEFAULT_SOURCE_SUFFIX, normalize_suffix, resolve_source_suffix


class TestNormalizeSuffix:
    def test_keeps_leading_dot(self) -> None:
        assert normalize_suffix(".go") == ".go"

    def test_adds_missing_dot(self) -> None:
        assert normalize_suffix("go") == ".go"

    def test_strips_whitespace(self) -> None:
        assert normalize_suffix("  .gotmpl ") == ".gotmpl"

    @pytest.mark.parametrize("value", ["", "   "])
    def test_rejects_empty(self, value: str) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            normalize_suffix(value)


class TestResolveSourceSuffix:
    def test_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("GOAST_SOURCE_SUFFIX", raising=False)
        assert resolve_source_suffix() == DEFAULT_SOURCE_SUFFIX == ".go"

    def test_environment_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GOAST_SOURCE_SUFFIX", "gox")
        assert resolve_source_suffix() == ".gox"

    def test_explicit_value_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GOAST_SOURCE_SUFFIX", ".gox")
        assert resolve_source_suffix(".go") == ".go"
