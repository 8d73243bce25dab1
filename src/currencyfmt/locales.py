"""Locale identifiers with a deterministic CLDR parent chain.

A Locale is a language, script and territory triple. Formatters walk its
parent chain (``en-AU -> en-001 -> en -> empty``) to find the nearest locale
with formatting data. Parsing is lenient: malformed identifiers produce the
empty locale rather than an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from currencyfmt.core.babel_compat import get_babel_global, is_babel_available
from currencyfmt.locale_utils import get_system_locale, normalize_locale

__all__ = ["Locale"]

# CLDR parentLocales entries pointing here end the chain.
_ROOT_IDS = frozenset({"root", "und"})


@lru_cache(maxsize=1)
def _parent_exceptions() -> dict[str, str]:
    """CLDR parentLocales table (POSIX identifiers, e.g. en_AU -> en_001)."""
    return dict(get_babel_global("parent_exceptions"))


@lru_cache(maxsize=1)
def _likely_subtags() -> dict[str, str]:
    """CLDR likelySubtags table (e.g. sr -> sr_Cyrl_RS, zh -> zh_Hans_CN)."""
    return dict(get_babel_global("likely_subtags"))


def _is_unlikely_script(language: str, script: str) -> bool:
    """True when script is not the default script of language."""
    likely = _likely_subtags().get(language)
    if likely is None:
        return False
    return Locale.parse(likely).script != script


def _is_language(part: str) -> bool:
    return 2 <= len(part) <= 3 and part.isascii() and part.isalpha()


def _is_script(part: str) -> bool:
    return len(part) == 4 and part.isascii() and part.isalpha()


def _is_territory(part: str) -> bool:
    if not part.isascii():
        return False
    return (len(part) == 2 and part.isalpha()) or (len(part) == 3 and part.isdigit())


@dataclass(frozen=True, slots=True)
class Locale:
    """Language/script/territory identifier.

    Immutable, hashable. The empty locale (all fields blank) terminates every
    parent chain.

    Attributes:
        language: Lowercase language subtag (e.g., 'en', 'sr')
        script: Titlecase script subtag (e.g., 'Latn'), or ''
        territory: Uppercase territory subtag (e.g., 'US', '419'), or ''

    Examples:
        >>> Locale.parse("sr_latn_rs").identifier()
        'sr-Latn-RS'
        >>> Locale.parse("en-AU").parent().identifier()
        'en-001'
    """

    language: str = ""
    script: str = ""
    territory: str = ""

    @classmethod
    def parse(cls, identifier: str) -> Locale:
        """Parse a BCP-47 or POSIX locale identifier.

        Encoding and modifier suffixes (``de_DE.UTF-8``, ``ca_ES@valencia``)
        are ignored, as are subtags that are neither a script nor a territory.

        Args:
            identifier: Locale identifier (e.g., 'en-US', 'sr_Latn_RS')

        Returns:
            Parsed Locale, or the empty locale if the language subtag is
            missing or malformed.
        """
        identifier = identifier.strip().split(".")[0].split("@")[0]
        parts = normalize_locale(identifier).split("_")
        language = parts[0].lower()
        if not _is_language(language) or language in _ROOT_IDS:
            return cls()

        script = ""
        territory = ""
        for part in parts[1:]:
            if not script and not territory and _is_script(part):
                script = part.title()
            elif not territory and _is_territory(part):
                territory = part.upper()
        return cls(language=language, script=script, territory=territory)

    @classmethod
    def system(cls) -> Locale:
        """Locale of the running process (LC_ALL, LC_MESSAGES, LANG)."""
        return cls.parse(get_system_locale())

    def identifier(self) -> str:
        """Canonical BCP-47 identifier ('' for the empty locale)."""
        return "-".join(part for part in (self.language, self.script, self.territory) if part)

    def is_empty(self) -> bool:
        """True for the empty locale that terminates parent chains."""
        return not self.language

    def parent(self) -> Locale:
        """Return the next-broader locale in the CLDR fallback chain.

        CLDR parentLocales exceptions take precedence (``es-MX -> es-419``,
        ``pt-AO -> pt-PT``). A language-script locale whose script is not the
        language's likely script goes straight to root (``sr-Latn``,
        ``zh-Hant``). Otherwise the territory is dropped, then the script.
        The parent of a bare language is the empty locale.

        Without Babel only truncation applies (``en-AU -> en``).
        """
        if self.is_empty():
            return self

        if is_babel_available():
            parent_id = _parent_exceptions().get(normalize_locale(self.identifier()))
            if parent_id is not None:
                if parent_id in _ROOT_IDS:
                    return Locale()
                return Locale.parse(parent_id)
            if (
                self.script
                and not self.territory
                and _is_unlikely_script(self.language, self.script)
            ):
                return Locale()
        if self.territory:
            return Locale(language=self.language, script=self.script)
        if self.script:
            return Locale(language=self.language)
        return Locale()

    def __str__(self) -> str:
        return self.identifier()
