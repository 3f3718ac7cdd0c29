"""Logging setup for the API process."""

import logging.config
from typing import Any

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%d-%b-%y %H:%M:%S"


def get_logging_config(level: str) -> dict[str, Any]:
    """Build a dictConfig mapping for the application and uvicorn loggers."""
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "src": {"handlers": ["console"], "level": level, "propagate": False},
            "uvicorn.error": {"handlers": ["console"], "level": level, "propagate": False},
            "uvicorn.access": {"handlers": ["console"], "level": level, "propagate": False},
        },
        "root": {"handlers": ["console"], "level": "WARNING"},
    }


def configure_logging(level: str = "INFO") -> None:
    """Configure logging for the whole process.

    Application modules log through ``logging.getLogger(__name__)``, so every
    logger under the ``src`` package inherits the level given here.
    """
    logging.config.dictConfig(get_logging_config(level))
