# phraseforge/shared/__init__.py
"""
Shared utilities package.

Cross-cutting concerns used by both the Core Domain and the Adapters:
- Configuration management
- Structured logging
- Retry policy for downloads
- Dependency Injection wiring
"""
