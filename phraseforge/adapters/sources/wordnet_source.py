# phraseforge/adapters/sources/wordnet_source.py
import subprocess
from pathlib import Path
from typing import List

import structlog

from phraseforge.adapters.sources.http import HttpDownloader
from phraseforge.core.domain.exceptions import ExtractionError, StorageError
from phraseforge.core.domain.models import PartOfSpeech
from phraseforge.core.ports.source_fetcher import IDictionarySource
from phraseforge.shared.config import Settings

logger = structlog.get_logger()


def read_text_lines(path: Path) -> List[str]:
    """Reads a text file into lines without their line terminators."""
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read().splitlines()
    except OSError as e:
        raise StorageError(str(path), e.strerror or str(e)) from e


class WordNetDictionarySource(IDictionarySource):
    """
    Concrete dictionary source backed by the WordNet 3.0 database archive.

    The archive unpacks a 'dict/' directory holding 'index.adj',
    'index.noun', 'index.verb' and 'index.adv' among other files.
    """

    def __init__(self, settings: Settings, downloader: HttpDownloader):
        self.settings = settings
        self.downloader = downloader
        self.data_dir = settings.data_dir
        self.dict_dir = settings.dict_dir
        self.archive_path = self.data_dir / settings.WORDNET_ARCHIVE

    def is_present(self) -> bool:
        return self.dict_dir.is_dir()

    def fetch(self, force: bool = False) -> Path:
        if self.is_present() and not force:
            logger.debug("wordnet_present", path=str(self.dict_dir))
            return self.dict_dir

        logger.info("wordnet_download_started", url=self.settings.WORDNET_URL)
        self.downloader.download(self.settings.WORDNET_URL, self.archive_path)
        self._extract()

        if not self.settings.KEEP_ARCHIVE:
            try:
                self.archive_path.unlink()
            except OSError as e:
                raise StorageError(str(self.archive_path), e.strerror or str(e)) from e

        missing = [pos.index_file for pos in PartOfSpeech if not (self.dict_dir / pos.index_file).is_file()]
        if missing:
            raise ExtractionError(
                str(self.archive_path),
                f"archive did not contain {', '.join(missing)} under {self.dict_dir}",
            )

        logger.info("wordnet_ready", path=str(self.dict_dir))
        return self.dict_dir

    def _extract(self) -> None:
        """Unpacks the archive with the external extraction utility."""
        cmd = [
            self.settings.EXTRACT_COMMAND,
            "-xzf",
            str(self.archive_path),
            "-C",
            str(self.data_dir),
        ]
        logger.info("wordnet_extract_started", command=" ".join(cmd))
        try:
            subprocess.run(cmd, check=True, capture_output=True, text=True)
        except FileNotFoundError as e:
            raise ExtractionError(
                str(self.archive_path),
                f"extraction utility '{self.settings.EXTRACT_COMMAND}' not found",
            ) from e
        except subprocess.CalledProcessError as e:
            details = (e.stderr or "").strip() or f"exit status {e.returncode}"
            raise ExtractionError(str(self.archive_path), details) from e

    def read_index(self, pos: PartOfSpeech) -> List[str]:
        return read_text_lines(self.dict_dir / pos.index_file)
