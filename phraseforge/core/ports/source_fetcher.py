# phraseforge/core/ports/source_fetcher.py
from pathlib import Path
from typing import List, Protocol

from phraseforge.core.domain.models import PartOfSpeech

class IDictionarySource(Protocol):
    """
    Port for the lexical database (per-part-of-speech index files).
    """

    def fetch(self, force: bool = False) -> Path:
        """
        Makes the index files available locally.

        Args:
            force: Re-download and re-extract even if already present.

        Returns:
            The directory holding the index files.
        """
        ...

    def read_index(self, pos: PartOfSpeech) -> List[str]:
        """Returns the raw lines of the index file for a part of speech."""
        ...


class IFrequencySource(Protocol):
    """
    Port for the word-frequency corpus ('word count' per line).
    """

    def fetch(self, force: bool = False) -> Path:
        """Makes the corpus available locally and returns its path."""
        ...

    def read_lines(self) -> List[str]:
        """Returns the corpus lines in source order."""
        ...
