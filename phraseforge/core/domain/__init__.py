# phraseforge/core/domain/__init__.py
"""
Domain Entities and Value Objects.

The "ubiquitous language" of the tool: parts of speech, word entries,
word lists and the errors raised while building or using them.
"""
