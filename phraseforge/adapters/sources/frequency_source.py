# phraseforge/adapters/sources/frequency_source.py
from pathlib import Path
from typing import List

import structlog

from phraseforge.adapters.sources.http import HttpDownloader
from phraseforge.adapters.sources.wordnet_source import read_text_lines
from phraseforge.core.ports.source_fetcher import IFrequencySource
from phraseforge.shared.config import Settings

logger = structlog.get_logger()


class FrequencyCorpusSource(IFrequencySource):
    """
    Word-frequency corpus from Hermit Dave's FrequencyWords (OpenSubtitles 2018).
    Lines are 'word count', most frequent first. Stored verbatim.
    """

    def __init__(self, settings: Settings, downloader: HttpDownloader):
        self.settings = settings
        self.downloader = downloader
        self.path = settings.data_dir / settings.FREQUENCY_FILE

    def fetch(self, force: bool = False) -> Path:
        if self.path.is_file() and not force:
            logger.debug("frequency_corpus_present", path=str(self.path))
            return self.path

        logger.info("frequency_corpus_download_started", url=self.settings.FREQUENCY_URL)
        return self.downloader.download(self.settings.FREQUENCY_URL, self.path)

    def read_lines(self) -> List[str]:
        return read_text_lines(self.path)
