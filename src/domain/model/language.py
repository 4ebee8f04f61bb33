"""Language Value Object.

Static table of the locales the Free Dictionary service can answer for.
Loaded once at import time; never mutated.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class Language:
    """Immutable value object representing a supported language."""

    name: str
    code: str


# ── Language instances ────────────────────────────────────────

ENGLISH = Language(name="English", code="en")
HINDI = Language(name="Hindi", code="hi")
SPANISH = Language(name="Spanish", code="es")
FRENCH = Language(name="French", code="fr")
JAPANESE = Language(name="Japanese", code="ja")
RUSSIAN = Language(name="Russian", code="ru")
GERMAN = Language(name="German", code="de")
ITALIAN = Language(name="Italian", code="it")
KOREAN = Language(name="Korean", code="ko")
BRAZILIAN_PORTUGUESE = Language(name="Brazilian Portuguese", code="pt-BR")
ARABIC = Language(name="Arabic", code="ar")
TURKISH = Language(name="Turkish", code="tr")

DEFAULT_LANGUAGE = ENGLISH


# ── Registry ──────────────────────────────────────────────────

LANGUAGES: Mapping[str, Language] = MappingProxyType({
    lang.code: lang
    for lang in (
        ENGLISH, HINDI, SPANISH, FRENCH, JAPANESE, RUSSIAN,
        GERMAN, ITALIAN, KOREAN, BRAZILIAN_PORTUGUESE, ARABIC, TURKISH,
    )
})

SUPPORTED_LANGUAGE_CODES: frozenset[str] = frozenset(LANGUAGES)


def get_language(code: str) -> Language | None:
    """Look up a Language by its code (e.g., "en", "pt-BR").

    Codes are case-sensitive. Returns None for unsupported codes.
    """
    return LANGUAGES.get(code)


def is_supported(code: str) -> bool:
    return code in SUPPORTED_LANGUAGE_CODES
