# phraseforge/core/ports/__init__.py
"""
Core Ports (Interfaces).

Protocols the Infrastructure Adapters must implement. They let the use
cases fetch sources and read/write the word-list cache without knowing
about HTTP, tar or the file system.
"""

from .source_fetcher import IDictionarySource, IFrequencySource
from .word_list_repository import IWordListRepository

__all__ = [
    "IDictionarySource",
    "IFrequencySource",
    "IWordListRepository",
]
