# tests/conftest.py
import pytest
from unittest.mock import MagicMock

import structlog
from dependency_injector import providers

from phraseforge.adapters.persistence.filesystem_repo import FileSystemWordListRepository
from phraseforge.core.domain.models import PartOfSpeech
from phraseforge.core.ports.source_fetcher import IDictionarySource, IFrequencySource
from phraseforge.shared.config import Settings
from phraseforge.shared.container import Container

# Two-space lines mimic the license header at the top of WordNet index files.
INDEX_FILES = {
    PartOfSpeech.ADJECTIVE: [
        "  1 This software and database is being provided to you, the LICENSEE, by",
        "  2 Princeton University under the following license.",
        "brave a 2 1 & 2 0 01234567",
        "red a 3 1 & 3 0 01234568",
        "well-known a 1 1 & 1 0 01234569",
        "3-d a 1 1 & 1 0 01234570",
    ],
    PartOfSpeech.NOUN: [
        "  1 This software and database is being provided to you, the LICENSEE, by",
        "cat n 8 6 @ ~ #m #p %p + ; - 8 1 02121620",
        "dog n 7 5 @ ~ #m #p %p 7 1 02084071",
        "house n 12 3 @ ~ + 12 6 03544360",
        "ice_cream n 1 2 @ ~ 1 0 07614500",
        "ox n 2 3 @ ~ + 2 0 02403325",
    ],
    PartOfSpeech.VERB: [
        "  1 This software and database is being provided to you, the LICENSEE, by",
        "run v 41 5 @ ~ * > $ 41 19 01926311",
        "jump v 13 4 @ ~ * $ 13 4 01963942",
        "go v 30 2 @ ~ 30 12 01835496",
    ],
    PartOfSpeech.ADVERB: [
        "  1 This software and database is being provided to you, the LICENSEE, by",
        "quickly r 2 1 \\ 2 2 00085811",
        "softly r 2 1 \\ 2 0 00410794",
        "a_priori r 1 0 1 0 00159040",
    ],
}

CORPUS_LINES = [
    "you 22484400",
    "run 120000",
    "go 110000",
    "cat 50000",
    "house 45000",
    "quickly 30000",
    "brave 25000",
    "red 20000",
    "jump 15000",
    "softly 12000",
    "dog 5",
    "zzz 99999",
    "ox 3",
]


class FakeDictionarySource(IDictionarySource):
    """In-memory dictionary source recording fetch calls."""

    def __init__(self, index_files=None):
        self.index_files = index_files if index_files is not None else INDEX_FILES
        self.fetch_calls = []

    def fetch(self, force=False):
        self.fetch_calls.append(force)
        return None

    def read_index(self, pos):
        return list(self.index_files.get(pos, []))


class FakeFrequencySource(IFrequencySource):
    """In-memory frequency corpus recording fetch calls."""

    def __init__(self, lines=None):
        self.lines = lines if lines is not None else CORPUS_LINES
        self.fetch_calls = []

    def fetch(self, force=False):
        self.fetch_calls.append(force)
        return None

    def read_lines(self):
        return list(self.lines)


@pytest.fixture(autouse=True)
def reset_structlog():
    """CLI tests bind structlog to a captured stderr; drop it afterwards."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def data_dir(tmp_path):
    path = tmp_path / "phraseforge"
    path.mkdir()
    return path


@pytest.fixture
def test_settings(data_dir):
    """Settings pointing at a temporary storage directory, no retry sleeps."""
    return Settings(DATA_DIR=data_dir, FETCH_ATTEMPTS=2, FETCH_BACKOFF=0, HTTP_TIMEOUT=5)


@pytest.fixture
def dictionary_source():
    return FakeDictionarySource()


@pytest.fixture
def frequency_source():
    return FakeFrequencySource()


@pytest.fixture
def repo(data_dir):
    return FileSystemWordListRepository(data_dir)


@pytest.fixture
def container(test_settings, dictionary_source, frequency_source):
    """
    Dependency Injection Container with the network-backed sources
    replaced by in-memory fakes. The file-system repository stays real.
    """
    container = Container()
    container.settings.override(providers.Object(test_settings))
    container.dictionary_source.override(dictionary_source)
    container.frequency_source.override(frequency_source)
    container.downloader.override(MagicMock())

    yield container

    container.reset_override()


@pytest.fixture
def write_word_lists(repo):
    """Returns a helper writing {PartOfSpeech: [line, ...]} through the repository."""
    def _write(lists):
        for pos, lines in lists.items():
            repo.save(pos, lines)
        return repo
    return _write
