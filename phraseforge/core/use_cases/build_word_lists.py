# phraseforge/core/use_cases/build_word_lists.py
from typing import Dict, Iterable, List, Optional, Set

import structlog

from phraseforge.core.domain.models import PartOfSpeech, Variant
from phraseforge.core.ports.source_fetcher import IDictionarySource, IFrequencySource
from phraseforge.core.ports.word_list_repository import IWordListRepository

logger = structlog.get_logger()

# Lines starting with two spaces are the license header of WordNet index files.
INDEX_HEADER_PREFIX = "  "
MIN_LEXICAL_LENGTH = 4


def _first_token(line: str) -> str:
    parts = line.split(maxsplit=1)
    return parts[0] if parts else ""


def collect_known_words(index_lines: Iterable[str]) -> Set[str]:
    """
    First token of every index line whose first character is an ASCII letter.
    """
    known: Set[str] = set()
    for line in index_lines:
        word = _first_token(line)
        if word and word[0].isascii() and word[0].isalpha():
            known.add(word)
    return known


def filter_by_frequency(index_lines: Iterable[str], corpus_lines: Iterable[str]) -> List[str]:
    """
    Frequency-filtered variant.

    Keeps every corpus line whose first token is a known index word.
    The whole line (word and count) is kept and corpus order is preserved.
    """
    known = collect_known_words(index_lines)
    kept: List[str] = []
    for line in corpus_lines:
        line = line.rstrip("\r\n")
        word = _first_token(line)
        if word and word in known:
            kept.append(line)
    return kept


def filter_by_lexical_shape(index_lines: Iterable[str]) -> List[str]:
    """
    Lexical-filter variant.

    Keeps purely alphabetic index words longer than three characters,
    which rejects collocations ('ice_cream'), hyphenated and numeric entries.
    """
    kept: List[str] = []
    for line in index_lines:
        if line.startswith(INDEX_HEADER_PREFIX):
            continue
        word = _first_token(line)
        if word.isalpha() and len(word) >= MIN_LEXICAL_LENGTH:
            kept.append(word)
    return kept


class BuildWordLists:
    """
    Use Case: Produces the four derived word lists.

    Responsibilities:
    1. Ask the sources to make the dictionary (and corpus) available.
    2. Filter each part-of-speech index with the selected variant.
    3. Persist the result, skipping lists that already exist unless forced.
    """

    def __init__(
        self,
        repo: IWordListRepository,
        dictionary_source: IDictionarySource,
        frequency_source: IFrequencySource,
    ):
        self.repo = repo
        self.dictionary_source = dictionary_source
        self.frequency_source = frequency_source

    def execute(self, variant: Variant, force: bool = False) -> Dict[PartOfSpeech, int]:
        """
        Builds the word lists.

        Args:
            variant: Filtering algorithm.
            force: Re-fetch the sources and overwrite existing lists.

        Returns:
            Lines written per part of speech. Skipped lists are absent.
        """
        pending = [pos for pos in PartOfSpeech if force or not self.repo.has(pos)]
        if not pending:
            logger.info("word_lists_up_to_date", variant=variant.value)
            return {}

        logger.info(
            "word_list_build_started",
            variant=variant.value,
            parts_of_speech=[pos.value for pos in pending],
            force=force,
        )

        self.dictionary_source.fetch(force=force)
        corpus_lines: Optional[List[str]] = None
        if variant is Variant.FREQUENCY:
            self.frequency_source.fetch(force=force)
            corpus_lines = self.frequency_source.read_lines()

        written: Dict[PartOfSpeech, int] = {}
        for pos in pending:
            index_lines = self.dictionary_source.read_index(pos)
            if corpus_lines is not None:
                lines = filter_by_frequency(index_lines, corpus_lines)
            else:
                lines = filter_by_lexical_shape(index_lines)
            written[pos] = self.repo.save(pos, lines)

        logger.info(
            "word_list_build_finished",
            variant=variant.value,
            counts={pos.value: count for pos, count in written.items()},
        )
        return written
