# phraseforge/adapters/persistence/filesystem_repo.py
from pathlib import Path
from typing import Dict, Iterable, List

import structlog

from phraseforge.core.domain.exceptions import StorageError, WordListMissingError
from phraseforge.core.domain.models import PartOfSpeech, Variant, WordEntry, WordLists
from phraseforge.core.ports.word_list_repository import IWordListRepository

logger = structlog.get_logger()

class FileSystemWordListRepository(IWordListRepository):
    """
    Concrete implementation of the Word List Repository using plain-text files.

    Layout (one 'word[ frequency]' entry per line):
        <data_dir>/adjectives.txt
        <data_dir>/nouns.txt
        <data_dir>/verbs.txt
        <data_dir>/adverbs.txt
    """

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(str(self.data_dir), e.strerror or str(e)) from e

    def path_for(self, pos: PartOfSpeech) -> Path:
        return self.data_dir / pos.output_file

    # --- Interface Implementation ---

    def exists(self) -> bool:
        return all(self.has(pos) for pos in PartOfSpeech)

    def has(self, pos: PartOfSpeech) -> bool:
        return self.path_for(pos).exists()

    def save(self, pos: PartOfSpeech, lines: Iterable[str]) -> int:
        path = self.path_for(pos)
        count = 0
        try:
            with open(path, "w", encoding="utf-8") as f:
                for line in lines:
                    f.write(f"{line}\n")
                    count += 1
        except OSError as e:
            logger.error("word_list_write_failed", path=str(path), error=str(e))
            raise StorageError(str(path), e.strerror or str(e)) from e

        logger.info("word_list_written", part_of_speech=pos.value, path=str(path), lines=count)
        return count

    def load(self, variant: Variant) -> WordLists:
        require_frequency = variant is Variant.FREQUENCY
        word_lists: Dict[PartOfSpeech, List[WordEntry]] = {}
        for pos in PartOfSpeech:
            word_lists[pos] = self._load_one(pos, require_frequency)
        return word_lists

    def _load_one(self, pos: PartOfSpeech, require_frequency: bool) -> List[WordEntry]:
        path = self.path_for(pos)
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                lines = f.read().splitlines()
        except FileNotFoundError as e:
            raise WordListMissingError(str(path)) from e
        except OSError as e:
            raise StorageError(str(path), e.strerror or str(e)) from e

        entries: List[WordEntry] = []
        skipped = 0
        for line in lines:
            entry = WordEntry.from_line(line, require_frequency=require_frequency)
            if entry is None:
                skipped += 1
                continue
            entries.append(entry)

        if skipped:
            logger.debug("word_list_lines_skipped", part_of_speech=pos.value, skipped=skipped)
        return entries
