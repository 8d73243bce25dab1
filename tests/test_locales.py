"""Tests for Locale parsing, identifiers and the CLDR parent chain.

Python 3.11+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

import currencyfmt.core.babel_compat as _bc
from currencyfmt import Locale


class TestParse:
    """Lenient parsing of BCP-47 and POSIX identifiers."""

    @pytest.mark.parametrize(
        ("identifier", "expected"),
        [
            ("en", Locale("en")),
            ("en-US", Locale("en", territory="US")),
            ("en_US", Locale("en", territory="US")),
            ("EN-us", Locale("en", territory="US")),
            ("sr_latn_rs", Locale("sr", "Latn", "RS")),
            ("zh-Hant", Locale("zh", script="Hant")),
            ("es-419", Locale("es", territory="419")),
            ("fil", Locale("fil")),
            ("de_DE.UTF-8", Locale("de", territory="DE")),
            ("ca_ES@valencia", Locale("ca", territory="ES")),
            ("en-US-posix", Locale("en", territory="US")),
        ],
    )
    def test_valid(self, identifier: str, expected: Locale) -> None:
        """Subtags are recognized and case-normalized."""
        assert Locale.parse(identifier) == expected

    @pytest.mark.parametrize("identifier", ["", "   ", "e", "english", "1234", "root", "und"])
    def test_malformed_is_empty(self, identifier: str) -> None:
        """Malformed or root identifiers parse to the empty locale."""
        assert Locale.parse(identifier).is_empty()

    def test_system_locale(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """system() parses the detected process locale."""
        monkeypatch.setattr(
            "currencyfmt.locales.get_system_locale", lambda: "pt_BR"
        )
        assert Locale.system() == Locale("pt", territory="BR")


class TestIdentifier:
    """Canonical identifiers and string conversion."""

    def test_identifier_uses_hyphens(self) -> None:
        """identifier() is BCP-47."""
        assert Locale("sr", "Latn", "RS").identifier() == "sr-Latn-RS"

    def test_empty_identifier(self) -> None:
        """The empty locale has an empty identifier."""
        assert Locale().identifier() == ""
        assert str(Locale()) == ""

    def test_str_is_identifier(self) -> None:
        """str() matches identifier()."""
        assert str(Locale("en", territory="GB")) == "en-GB"

    def test_hashable(self) -> None:
        """Locales can key dictionaries."""
        assert {Locale("en"): 1}[Locale.parse("EN")] == 1


class TestParent:
    """CLDR parent chain."""

    @pytest.mark.parametrize(
        ("identifier", "parent"),
        [
            ("en-US", "en"),
            ("de-AT", "de"),
            ("en-AU", "en-001"),
            ("en-001", "en"),
            ("es-MX", "es-419"),
            ("es-419", "es"),
            ("pt-AO", "pt-PT"),
            ("sr-Latn-RS", "sr-Latn"),
            ("zh-Hant", ""),
            ("zh-Hans", "zh"),
            ("sr-Latn", ""),
            ("sr-Cyrl", "sr"),
            ("en-Cyrl", ""),
            ("de", ""),
        ],
    )
    def test_parent(self, identifier: str, parent: str) -> None:
        """Parent exceptions and unlikely scripts win over truncation."""
        assert Locale.parse(identifier).parent().identifier() == parent

    def test_script_dropped_after_territory(self) -> None:
        """Without exceptions the territory goes before the script."""
        locale = Locale("xx", "Latn", "YY")
        assert locale.parent() == Locale("xx", "Latn")
        assert locale.parent().parent() == Locale("xx")

    def test_empty_parent_is_empty(self) -> None:
        """The empty locale is its own parent."""
        assert Locale().parent() == Locale()

    @given(
        language=st.sampled_from(["en", "es", "pt", "sr", "zh", "de", "xx"]),
        script=st.sampled_from(["", "Latn", "Hant", "Cyrl"]),
        territory=st.sampled_from(["", "US", "AU", "MX", "419", "AO", "RS", "TW"]),
    )
    def test_chain_terminates(self, language: str, script: str, territory: str) -> None:
        """Property: every chain reaches the empty locale in a few steps."""
        current = Locale(language, script, territory)
        steps = 0
        while not current.is_empty():
            current = current.parent()
            steps += 1
            assert steps <= 5
        event(f"chain_length={steps}")


class TestParentWithoutBabel:
    """Parent chain when CLDR data is not installed."""

    @pytest.fixture(autouse=True)
    def babel_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(_bc, "_check_babel_available", lambda: False)

    @pytest.mark.parametrize(
        ("identifier", "parent"),
        [
            ("en-AU", "en"),
            ("es-MX", "es"),
            ("sr-Latn-RS", "sr-Latn"),
            ("sr-Latn", "sr"),
            ("de", ""),
        ],
    )
    def test_truncation_only(self, identifier: str, parent: str) -> None:
        """Subtags are dropped one at a time; no CLDR lookup happens."""
        assert Locale.parse(identifier).parent().identifier() == parent
