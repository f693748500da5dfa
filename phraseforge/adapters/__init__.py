# phraseforge/adapters/__init__.py
"""
Infrastructure Adapters.

Concrete implementations of the Ports defined in `phraseforge.core.ports`:
- `sources`: Secondary Adapters (Driven) - WordNet archive and frequency corpus downloads.
- `persistence`: Secondary Adapter (Driven) - Word-list cache on the local file system.

Dependencies point INWARD. These modules depend on `phraseforge.core`,
but `phraseforge.core` never imports from here.
"""
