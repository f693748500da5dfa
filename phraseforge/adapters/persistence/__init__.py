# phraseforge/adapters/persistence/__init__.py
"""
Persistence Adapters.

Components:
- FileSystemWordListRepository: IWordListRepository backed by four plain-text files.
"""

from .filesystem_repo import FileSystemWordListRepository

__all__ = [
    "FileSystemWordListRepository",
]
