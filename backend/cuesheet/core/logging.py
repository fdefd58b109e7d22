"""Process-wide logging setup."""

import logging.config

from cuesheet.core.config import settings


def configure_logging() -> None:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "loggers": {
                "cuesheet": {"handlers": ["console"], "level": settings.LOG_LEVEL, "propagate": False},
            },
        }
    )
