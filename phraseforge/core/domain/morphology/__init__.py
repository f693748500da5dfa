# phraseforge/core/domain/morphology/__init__.py
"""
Morphology helpers.

Only English is needed: passphrase nouns agree in number with the
numeric prefix ("42-brave-foxes-...").
"""

from .english import pluralize

__all__ = ["pluralize"]
