# phraseforge/adapters/sources/__init__.py
"""
Source Adapters.

Components:
- HttpDownloader: streaming downloads with bounded retries.
- WordNetDictionarySource: IDictionarySource over the WordNet 3.0 archive.
- FrequencyCorpusSource: IFrequencySource over a 'word count' corpus.
"""

from .http import HttpDownloader
from .wordnet_source import WordNetDictionarySource
from .frequency_source import FrequencyCorpusSource

__all__ = [
    "HttpDownloader",
    "WordNetDictionarySource",
    "FrequencyCorpusSource",
]
