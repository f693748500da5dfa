# phraseforge/shared/container.py
from dependency_injector import containers, providers

from phraseforge.shared.config import settings as default_settings
from phraseforge.adapters.sources.http import HttpDownloader
from phraseforge.adapters.sources.wordnet_source import WordNetDictionarySource
from phraseforge.adapters.sources.frequency_source import FrequencyCorpusSource
from phraseforge.adapters.persistence.filesystem_repo import FileSystemWordListRepository

from phraseforge.core.use_cases.build_word_lists import BuildWordLists
from phraseforge.core.use_cases.load_word_lists import LoadWordLists
from phraseforge.core.use_cases.generate_passphrase import GeneratePassphrase

class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    The CLI overrides `settings` with a per-run copy carrying the flag
    values; tests override individual adapters with fakes.
    """

    # 1. Configuration
    settings = providers.Object(default_settings)

    # 2. Gateways (Infrastructure Adapters)

    downloader = providers.Singleton(
        HttpDownloader,
        timeout=settings.provided.HTTP_TIMEOUT,
        attempts=settings.provided.FETCH_ATTEMPTS,
        backoff=settings.provided.FETCH_BACKOFF,
    )

    dictionary_source = providers.Singleton(
        WordNetDictionarySource,
        settings=settings,
        downloader=downloader,
    )

    frequency_source = providers.Singleton(
        FrequencyCorpusSource,
        settings=settings,
        downloader=downloader,
    )

    word_list_repository = providers.Singleton(
        FileSystemWordListRepository,
        data_dir=settings.provided.data_dir,
    )

    # 3. Use Cases (Application Logic)

    build_word_lists_use_case = providers.Factory(
        BuildWordLists,
        repo=word_list_repository,
        dictionary_source=dictionary_source,
        frequency_source=frequency_source,
    )

    load_word_lists_use_case = providers.Factory(
        LoadWordLists,
        repo=word_list_repository,
        builder=build_word_lists_use_case,
    )

    # `word_lists` and `rng` are supplied at call time.
    generate_passphrase_use_case = providers.Factory(
        GeneratePassphrase,
        variant=settings.provided.VARIANT,
        min_frequency=settings.provided.MIN_FREQUENCY,
        on_empty=settings.provided.ON_EMPTY,
    )
