# phraseforge/shared/logging_config.py
import logging
import sys

import structlog

from phraseforge.shared.config import Settings


def configure_logging(settings: Settings) -> None:
    """
    Configures structlog and the standard logging library to emit
    structured JSON logs or human-readable console logs.

    Everything goes to stderr: stdout is reserved for passphrases.
    """
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    # 1. Define the chain of processors
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    # 2. Determine the Output Format
    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    # 3. Configure Structlog
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    # 4. Standard library logging (httpx, tenacity) at the same level
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )
