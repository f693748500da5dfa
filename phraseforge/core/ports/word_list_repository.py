# phraseforge/core/ports/word_list_repository.py
from typing import Iterable, Protocol

from phraseforge.core.domain.models import PartOfSpeech, Variant, WordLists

class IWordListRepository(Protocol):
    """
    Port for the derived word-list cache.
    Implementations decide where and how the four lists are stored.
    """

    def exists(self) -> bool:
        """True only if all four derived word lists are present."""
        ...

    def has(self, pos: PartOfSpeech) -> bool:
        """True if the derived list for one part of speech is present."""
        ...

    def save(self, pos: PartOfSpeech, lines: Iterable[str]) -> int:
        """
        Persists a derived list, one entry per line.

        Returns:
            The number of lines written.
        """
        ...

    def load(self, variant: Variant) -> WordLists:
        """
        Loads all four lists. Lines missing a field required by the
        variant are skipped.
        """
        ...
