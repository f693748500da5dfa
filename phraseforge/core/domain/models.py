# phraseforge/core/domain/models.py
from enum import Enum
from typing import Dict, Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

# --- Enums ---

class PartOfSpeech(str, Enum):
    """
    Grammatical slot of a passphrase word.
    Declaration order is the passphrase template order.
    """
    ADJECTIVE = "adjective"
    NOUN = "noun"
    VERB = "verb"
    ADVERB = "adverb"

    @property
    def index_file(self) -> str:
        """WordNet index file listing the base forms (e.g. 'index.adj')."""
        return _INDEX_FILES[self]

    @property
    def output_file(self) -> str:
        """Derived word-list file inside the storage directory."""
        return _OUTPUT_FILES[self]

    @property
    def fallback_word(self) -> str:
        """Literal used by the lexical variant when a list is empty."""
        return _FALLBACK_WORDS[self]


_INDEX_FILES: Dict[PartOfSpeech, str] = {
    PartOfSpeech.ADJECTIVE: "index.adj",
    PartOfSpeech.NOUN: "index.noun",
    PartOfSpeech.VERB: "index.verb",
    PartOfSpeech.ADVERB: "index.adv",
}

_OUTPUT_FILES: Dict[PartOfSpeech, str] = {
    PartOfSpeech.ADJECTIVE: "adjectives.txt",
    PartOfSpeech.NOUN: "nouns.txt",
    PartOfSpeech.VERB: "verbs.txt",
    PartOfSpeech.ADVERB: "adverbs.txt",
}

_FALLBACK_WORDS: Dict[PartOfSpeech, str] = {
    PartOfSpeech.ADJECTIVE: "quick",
    PartOfSpeech.NOUN: "fox",
    PartOfSpeech.VERB: "jumps",
    PartOfSpeech.ADVERB: "swiftly",
}


class Variant(str, Enum):
    """Which word-list algorithm the tool runs."""
    FREQUENCY = "frequency"  # Cross-referenced against a usage corpus
    LEXICAL = "lexical"      # Shape filters only, no corpus


class EmptyPoolPolicy(str, Enum):
    """What the frequency generator does when nothing clears the threshold."""
    BLANK = "blank"          # Empty word field
    FALLBACK = "fallback"    # Pick from the unfiltered list
    ERROR = "error"          # Raise EmptyCandidatePoolError

# --- Entities ---

class WordEntry(BaseModel):
    """
    A single lexical item with its observed usage frequency.
    Lexical-variant entries carry no frequency.
    """
    model_config = ConfigDict(frozen=True)

    word: str = Field(..., min_length=1)
    frequency: Optional[int] = Field(None, ge=0)

    def to_line(self) -> str:
        """Serializes to the cache line format 'word[ frequency]'."""
        if self.frequency is None:
            return self.word
        return f"{self.word} {self.frequency}"

    @classmethod
    def from_line(cls, line: str, require_frequency: bool = True) -> Optional["WordEntry"]:
        """
        Parses a cache line. Returns None when a required field is missing
        or unparsable, so callers can skip the line.
        """
        parts = line.split()
        if not parts:
            return None

        frequency: Optional[int] = None
        # Plain ASCII digits only: no sign, underscores or other scripts.
        if len(parts) > 1 and parts[1].isascii() and parts[1].isdigit():
            frequency = int(parts[1])

        if require_frequency and frequency is None:
            return None
        return cls(word=parts[0], frequency=frequency)


WordLists = Mapping[PartOfSpeech, Sequence[WordEntry]]
"""Loaded word lists, one entry sequence per part of speech."""
