"""Dictionary entry domain models.

These are the only entry types callers see. The upstream payload shape
stays inside adapter.external.free_dictionary.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Definition:
    """A single definition within a meaning group.

    ``examples`` holds the provider's single example sentence, or None.
    """
    details: str
    synonyms: list[str] = field(default_factory=list)
    antonyms: list[str] = field(default_factory=list)
    examples: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "details": self.details,
            "synonyms": list(self.synonyms),
            "antonyms": list(self.antonyms),
            "examples": self.examples,
        }


@dataclass(frozen=True)
class MeaningGroup:
    """Definitions, synonyms and antonyms for one part of speech."""
    speech_part: str
    definitions: list[Definition] = field(default_factory=list)
    synonyms: list[str] = field(default_factory=list)
    antonyms: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "speechPart": self.speech_part,
            "definitions": [d.to_dict() for d in self.definitions],
            "synonyms": list(self.synonyms),
            "antonyms": list(self.antonyms),
        }


@dataclass(frozen=True)
class ParsedEntry:
    """Normalized dictionary entry (Value Object).

    Returned by DictionaryClient.fetch_entry(). ``meanings`` keeps the
    provider's ordering (noun before verb in practice).
    """
    word: str
    audio: str
    phonetic: str | None = None
    source_urls: list[str] = field(default_factory=list)
    meanings: list[MeaningGroup] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Application-facing mapping with camelCase keys."""
        return {
            "word": self.word,
            "phonetic": self.phonetic,
            "audio": self.audio,
            "sourceUrls": list(self.source_urls),
            "meanings": [m.to_dict() for m in self.meanings],
        }
