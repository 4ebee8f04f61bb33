"""Domain-level exceptions.

The dictionary client raises these errors to describe why a lookup or a
configuration change failed. Callers can handle each kind separately or
catch DictionaryError to treat them all as fatal for the request.
"""


class DictionaryError(Exception):
    """Base class for all dictionary client errors."""


class UnsupportedLanguageError(DictionaryError, ValueError):
    """Language code is not in the supported-language table."""

    def __init__(self, language: str):
        self.language = language
        super().__init__(
            f"Language {language!r} is not supported. "
            "Refer to SUPPORTED_LANGUAGE_CODES for available languages."
        )


class TransportError(DictionaryError):
    """The request to the dictionary service failed."""

    def __init__(self, url: str, reason: str, status_code: int | None = None):
        self.url = url
        self.status_code = status_code
        super().__init__(f"Request to {url} failed: {reason}")


class LookupNotFoundError(DictionaryError):
    """The dictionary service has no entry for the word."""

    def __init__(self, word: str, message: str | None = None):
        self.word = word
        self.message = message
        super().__init__(message or f"No definitions found for {word!r}")


class MalformedResponseError(DictionaryError, ValueError):
    """Response body does not match the expected entry schema."""


class NoAudioAvailableError(DictionaryError):
    """Entry has no phonetic with a playable audio URL."""

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"No pronunciation audio available for {word!r}")
