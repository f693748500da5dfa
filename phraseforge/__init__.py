# phraseforge/__init__.py
"""
PhraseForge - memorable passphrases from WordNet word lists.

This package follows Hexagonal Architecture (Ports & Adapters):
the word selection logic lives in `phraseforge.core`, while downloads,
archive extraction and the on-disk cache live in `phraseforge.adapters`.
"""

__version__ = "0.1.0"
