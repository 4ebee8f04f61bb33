"""Dictionary client — fetches a word from the Free Dictionary API and
returns it as a ParsedEntry.

Pipeline: resolve endpoint → transport fetch → parse first entry.
Errors from any step propagate to the caller unchanged; there is no retry
and no partial result.
"""

import logging
from urllib.parse import quote

from adapter.external.free_dictionary import parse_lookup_response
from adapter.external.http_transport import HttpxJsonTransport
from domain.model.client_config import FREE_DICTIONARY_API_BASE_URL, ClientConfig
from domain.model.entry import ParsedEntry
from port.transport import JsonTransport

logger = logging.getLogger(__name__)


class DictionaryClient:
    """Single-provider dictionary client with a preferred-language setting.

    Not safe for concurrent mutation of preferred_language; callers that
    share an instance must serialize their own access.
    """

    base_endpoint = FREE_DICTIONARY_API_BASE_URL

    def __init__(self, transport: JsonTransport | None = None):
        self.transport = transport or HttpxJsonTransport()
        self._config = ClientConfig.default()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def preferred_language(self) -> str:
        return self.get_preferred_language()

    @preferred_language.setter
    def preferred_language(self, language: str) -> None:
        self.set_preferred_language(language)

    @property
    def resolved_endpoint(self) -> str:
        return self._config.resolved_endpoint

    def get_preferred_language(self) -> str:
        return self._config.preferred_language

    def set_preferred_language(self, language: str) -> None:
        """Switch lookups to ``language``.

        Raises:
            UnsupportedLanguageError: If the code is not supported. The
                current configuration is left untouched.
        """
        self._config = ClientConfig.for_language(language)
        logger.debug("Preferred language changed", extra={"language": language})

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    async def fetch_entry(self, word: str) -> ParsedEntry:
        """Retrieve and parse the entry for ``word``.

        Only the first entry variant in the response is used.

        Raises:
            TransportError: The request failed.
            LookupNotFoundError: The service has no entry for the word.
            MalformedResponseError: The response does not match the entry schema.
            NoAudioAvailableError: The entry has no pronunciation audio.
        """
        url = f"{self._config.resolved_endpoint}/{quote(word, safe='')}"
        body = await self.transport.get_json(url)
        entry = parse_lookup_response(body, word)

        logger.debug("Dictionary entry parsed", extra={
            "word": word,
            "language": self._config.preferred_language,
            "meaning_count": len(entry.meanings),
        })
        return entry

    get = fetch_entry
