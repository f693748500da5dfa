# phraseforge/core/use_cases/__init__.py
"""
Core Use Cases (Application Logic).

- BuildWordLists: fetch the sources and derive the four word lists.
- LoadWordLists: load the cached lists, building them first if missing.
- GeneratePassphrase: assemble passphrases from the loaded lists.
"""

from .build_word_lists import BuildWordLists
from .load_word_lists import LoadWordLists
from .generate_passphrase import GeneratePassphrase

__all__ = [
    "BuildWordLists",
    "LoadWordLists",
    "GeneratePassphrase",
]
