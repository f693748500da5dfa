# phraseforge/core/__init__.py
"""
Core Domain Layer.

Pure passphrase logic: entities, word-list filtering and word selection.
- No dependencies on infrastructure (HTTP, subprocess, file system).
- Defines Interfaces (Ports) that the Infrastructure layer must implement.
"""
