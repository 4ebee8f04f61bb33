"""Free Dictionary API response parsing.

This module is the only place that knows the upstream payload shape.
Should the provider change, the schema models and parse functions here
absorb it; everything outside deals in domain.model.entry types.

API Documentation: https://dictionaryapi.dev
"""

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from domain.model.entry import Definition, MeaningGroup, ParsedEntry
from domain.model.errors import (
    LookupNotFoundError,
    MalformedResponseError,
    NoAudioAvailableError,
)

logger = logging.getLogger(__name__)


# ── Upstream schema ──────────────────────────────────────────


class _UpstreamModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class RawPhonetic(_UpstreamModel):
    text: str | None = None
    audio: str | None = None


class RawDefinition(_UpstreamModel):
    definition: str
    synonyms: list[str] = Field(default_factory=list)
    antonyms: list[str] = Field(default_factory=list)
    example: str | None = None


class RawMeaning(_UpstreamModel):
    part_of_speech: str = Field(alias="partOfSpeech")
    definitions: list[RawDefinition]
    synonyms: list[str] = Field(default_factory=list)
    antonyms: list[str] = Field(default_factory=list)


class RawEntry(_UpstreamModel):
    """One entry variant as returned by the provider."""
    word: str
    phonetic: str | None = None
    phonetics: list[RawPhonetic]
    source_urls: list[str] = Field(default_factory=list, alias="sourceUrls")
    meanings: list[RawMeaning]


class NotFoundResponse(_UpstreamModel):
    """Error object the provider sends (with HTTP 404) for unknown words."""
    title: str
    message: str | None = None
    resolution: str | None = None


# ── Response parsing ─────────────────────────────────────────


def parse_lookup_response(body: Any, word: str) -> ParsedEntry:
    """Turn a decoded lookup response into a ParsedEntry.

    The provider returns a list of entry variants; only the first one is
    parsed.

    Args:
        body: Decoded JSON body.
        word: The word that was looked up (for error reporting).

    Raises:
        LookupNotFoundError: Body is the provider's not-found object.
        MalformedResponseError: Body is not a non-empty list of entries.
        NoAudioAvailableError: First entry has no audio-bearing phonetic.
    """
    if isinstance(body, dict):
        not_found = _decode_not_found(body)
        if not_found is not None:
            logger.debug(
                "Word not found in Free Dictionary API",
                extra={"word": word, "title": not_found.title},
            )
            raise LookupNotFoundError(word, not_found.message)

    if not isinstance(body, list):
        raise MalformedResponseError(
            f"Expected a list of entries, got {type(body).__name__}"
        )

    if not body:
        raise MalformedResponseError(f"Response for {word!r} contains no entries")

    return parse_entry(body[0])


def parse_entry(raw: Any) -> ParsedEntry:
    """Break an entry down to the parts the application uses.

    Raises:
        MalformedResponseError: Entry is missing required fields.
        NoAudioAvailableError: No phonetic carries an audio URL.
    """
    entry = decode_entry(raw)
    return ParsedEntry(
        word=entry.word,
        phonetic=entry.phonetic,
        audio=find_audio(entry.phonetics, entry.word),
        source_urls=list(entry.source_urls),
        meanings=parse_meanings(entry.meanings),
    )


def parse_meanings(meanings: Iterable[RawMeaning | dict[str, Any]]) -> list[MeaningGroup]:
    """Map meaning groups in input order.

    The provider lists parts of speech noun first, then verb. The order is
    kept as-is; nothing is sorted or deduplicated.
    """
    groups = []
    for meaning in meanings:
        if not isinstance(meaning, RawMeaning):
            meaning = _validate(RawMeaning, meaning, "meaning")
        groups.append(MeaningGroup(
            speech_part=meaning.part_of_speech,
            definitions=[
                Definition(
                    details=d.definition,
                    synonyms=list(d.synonyms),
                    antonyms=list(d.antonyms),
                    examples=d.example or None,
                )
                for d in meaning.definitions
            ],
            synonyms=list(meaning.synonyms),
            antonyms=list(meaning.antonyms),
        ))
    return groups


def find_audio(phonetics: Iterable[RawPhonetic], word: str) -> str:
    """Return the first non-empty audio URL.

    Raises:
        NoAudioAvailableError: If no phonetic has one.
    """
    for phonetic in phonetics:
        if phonetic.audio:
            return phonetic.audio
    raise NoAudioAvailableError(word)


def decode_entry(raw: Any) -> RawEntry:
    """Validate a raw entry against the upstream schema."""
    if not isinstance(raw, dict):
        raise MalformedResponseError(
            f"Expected an entry object, got {type(raw).__name__}"
        )
    return _validate(RawEntry, raw, "entry")


# ── Helpers ──────────────────────────────────────────────────


def _decode_not_found(body: dict[str, Any]) -> NotFoundResponse | None:
    try:
        return NotFoundResponse.model_validate(body)
    except ValidationError:
        return None


def _validate(model: type[_UpstreamModel], raw: Any, label: str) -> Any:
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"]) or "<root>"
            for err in e.errors()
        )
        logger.debug(
            "Free Dictionary API payload failed schema validation",
            extra={"model": model.__name__, "fields": fields},
        )
        raise MalformedResponseError(f"Malformed {label}: invalid or missing {fields}") from e
