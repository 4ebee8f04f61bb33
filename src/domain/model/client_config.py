"""Client configuration Value Object."""

from dataclasses import dataclass

from domain.model.errors import UnsupportedLanguageError
from domain.model.language import DEFAULT_LANGUAGE, is_supported

FREE_DICTIONARY_API_BASE_URL = "https://api.dictionaryapi.dev/api/v2/entries"


@dataclass(frozen=True)
class ClientConfig:
    """Preferred language plus the endpoint derived from it.

    Instances are only built through for_language(), so resolved_endpoint
    always matches a validated preferred_language.
    """
    preferred_language: str
    resolved_endpoint: str

    @classmethod
    def for_language(cls, language: str) -> "ClientConfig":
        """Build a config for ``language``.

        Raises:
            UnsupportedLanguageError: If the code is not supported.
        """
        if not isinstance(language, str) or not is_supported(language):
            raise UnsupportedLanguageError(language)
        return cls(
            preferred_language=language,
            resolved_endpoint=f"{FREE_DICTIONARY_API_BASE_URL}/{language}",
        )

    @classmethod
    def default(cls) -> "ClientConfig":
        return cls.for_language(DEFAULT_LANGUAGE.code)
