# tests/__init__.py
"""
Test Suite for PhraseForge.

Organization:
- `core`: Use Cases, Domain Models and morphology with in-memory sources.
- `adapters`: Downloads (httpx MockTransport), extraction and the file-system cache.
- `test_cli.py`: End-to-end runs of the command line against a temporary storage directory.
"""
