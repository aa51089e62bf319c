"""Standard library logging baseline.

Application events go through logfire; this only sets levels for the
libraries that log through the standard library.
"""

import logging
import sys

from agora.config import Settings

# Library loggers and their level outside debug mode
_QUIET_LOGGERS = {
    "asyncpg": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    "uvicorn.access": logging.INFO,
}


def log_level_for(settings: Settings) -> int:
    """Pick the root level: DEBUG in debug mode, WARNING in production."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the root logger and quiet chatty libraries.

    Args:
        settings: Application settings
    """
    level = log_level_for(settings)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stdout,
        force=True,
    )

    for name, quiet_level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level if settings.debug else quiet_level)
    logging.getLogger("agora").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
