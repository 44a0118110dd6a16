import logging
import logging.config
from typing import Optional

from pet_store.domain.exceptions import ConfigurationError
from pet_store.infrastructure.config.settings import LoggingSettings


def setup_logging(settings: Optional[LoggingSettings] = None) -> None:
    settings = settings or LoggingSettings()
    level = settings.level.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"Unknown log level: {settings.level}")

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": {"format": settings.format}},
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stderr",
                }
            },
            "loggers": {
                "pet_store": {"handlers": ["console"], "level": level, "propagate": False},
            },
            "root": {"handlers": ["console"], "level": "WARNING"},
        }
    )
