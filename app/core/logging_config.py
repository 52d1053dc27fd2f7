# app/core/logging_config.py
import logging
import logging.config

from app.core.config import settings


def setup_logging(level: str | None = None) -> None:
    """Configure root logging for the API process."""
    log_level = (level or settings.LOG_LEVEL).upper()

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "root": {
                "handlers": ["console"],
                "level": log_level,
            },
            "loggers": {
                # keep SQL echo quiet unless explicitly asked for
                "sqlalchemy.engine": {"level": "WARNING"},
            },
        }
    )
