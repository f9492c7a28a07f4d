"""Stdlib logging setup.

Most diagnostics go through logfire; plain loggers remain for process level
messages (startup, app creation) and for third-party libraries.
"""

import logging
import sys

from inkwell.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Loggers that are too chatty at INFO
QUIET_LOGGERS = (
    "multipart",
    "python_multipart",
    "uvicorn.access",  # Requests are traced by logfire instead
)


def setup_logging(settings: Settings) -> None:
    """Route log records to stdout at DEBUG (``DEBUG=true``) or INFO.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Replace handlers installed by imported libraries
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("inkwell").setLevel(level)

    get_logger(__name__).info(
        "Logging configured: environment=%s level=%s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a module (pass ``__name__``)."""
    return logging.getLogger(name)
