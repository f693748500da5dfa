# phraseforge/core/use_cases/load_word_lists.py
import structlog

from phraseforge.core.domain.models import Variant, WordLists
from phraseforge.core.ports.word_list_repository import IWordListRepository
from phraseforge.core.use_cases.build_word_lists import BuildWordLists

logger = structlog.get_logger()

class LoadWordLists:
    """
    Use Case: Returns the word lists, building them first when needed.

    The cache is trusted as-is: the presence of all four files is the only
    check, their contents are not validated before loading.
    """

    def __init__(self, repo: IWordListRepository, builder: BuildWordLists):
        self.repo = repo
        self.builder = builder

    def execute(self, variant: Variant, force: bool = False) -> WordLists:
        if force or not self.repo.exists():
            logger.info("word_list_cache_miss", variant=variant.value, force=force)
            self.builder.execute(variant, force=force)
        else:
            logger.debug("word_list_cache_hit", variant=variant.value)

        word_lists = self.repo.load(variant)
        logger.debug(
            "word_lists_loaded",
            counts={pos.value: len(entries) for pos, entries in word_lists.items()},
        )
        return word_lists
