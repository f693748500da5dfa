# phraseforge/core/use_cases/generate_passphrase.py
import random
from typing import Dict, List, Optional, Sequence

import structlog

from phraseforge.core.domain.exceptions import EmptyCandidatePoolError
from phraseforge.core.domain.models import (
    EmptyPoolPolicy,
    PartOfSpeech,
    Variant,
    WordEntry,
    WordLists,
)
from phraseforge.core.domain.morphology import pluralize

logger = structlog.get_logger()

NUMBER_MIN = 1
NUMBER_MAX = 999  # exclusive
SEPARATOR = "-"


class GeneratePassphrase:
    """
    Use Case: Assembles passphrases from loaded word lists.

    Frequency variant: "{N}-{adjective}-{noun}-{verb}-{adverb}", where N is
    drawn from [1, 999), words must have a frequency above `min_frequency`,
    and the noun is pluralized when N > 1.

    Lexical variant: "{adjective}-{noun}-{verb}-{adverb}", drawn from the
    full lists, with a fixed fallback word when a list is empty.

    Each call draws independently from `rng`; seeding it makes the output
    reproducible.
    """

    def __init__(
        self,
        word_lists: WordLists,
        variant: Variant = Variant.FREQUENCY,
        min_frequency: int = 10000,
        on_empty: EmptyPoolPolicy = EmptyPoolPolicy.BLANK,
        rng: Optional[random.Random] = None,
    ):
        self.word_lists = word_lists
        self.variant = variant
        self.min_frequency = min_frequency
        self.on_empty = on_empty
        self.rng = rng or random.Random()
        self._pools = self._build_pools() if variant is Variant.FREQUENCY else {}

    def _build_pools(self) -> Dict[PartOfSpeech, List[str]]:
        """Filters every list by the frequency threshold once, up front."""
        pools: Dict[PartOfSpeech, List[str]] = {}
        for pos in PartOfSpeech:
            entries: Sequence[WordEntry] = self.word_lists.get(pos, ())
            pools[pos] = [
                entry.word
                for entry in entries
                if entry.frequency is not None and entry.frequency > self.min_frequency
            ]
            if not pools[pos]:
                logger.warning(
                    "empty_candidate_pool",
                    part_of_speech=pos.value,
                    min_frequency=self.min_frequency,
                    available=len(entries),
                    policy=self.on_empty.value,
                )

        entries = [entry for pos in PartOfSpeech for entry in self.word_lists.get(pos, ())]
        if entries and all(entry.frequency is None for entry in entries):
            logger.warning(
                "word_lists_without_frequencies",
                hint="cache was built by the lexical variant; rerun with -r",
            )
        return pools

    def _pick_above_frequency(self, pos: PartOfSpeech) -> str:
        pool = self._pools[pos]
        if pool:
            return self.rng.choice(pool)

        if self.on_empty is EmptyPoolPolicy.ERROR:
            raise EmptyCandidatePoolError(pos.value, self.min_frequency)
        if self.on_empty is EmptyPoolPolicy.FALLBACK:
            entries = self.word_lists.get(pos, ())
            if entries:
                return self.rng.choice(entries).word
        return ""

    def _pick_any(self, pos: PartOfSpeech) -> str:
        entries = self.word_lists.get(pos, ())
        if not entries:
            return pos.fallback_word
        return self.rng.choice(entries).word

    def execute(self) -> str:
        """Returns one passphrase."""
        if self.variant is Variant.LEXICAL:
            return SEPARATOR.join(self._pick_any(pos) for pos in PartOfSpeech)

        number = self.rng.randrange(NUMBER_MIN, NUMBER_MAX)
        words = {pos: self._pick_above_frequency(pos) for pos in PartOfSpeech}

        noun = words[PartOfSpeech.NOUN]
        if number > 1 and noun:
            words[PartOfSpeech.NOUN] = pluralize(noun)

        return SEPARATOR.join([str(number)] + [words[pos] for pos in PartOfSpeech])

    def generate_many(self, count: int) -> List[str]:
        """Returns `count` independent passphrases."""
        return [self.execute() for _ in range(count)]
