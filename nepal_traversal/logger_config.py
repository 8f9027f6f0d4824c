import logging.config
import sys
from typing import Optional


def configure_logging(level: str = "INFO", log_file: Optional[str] = None):
    handlers = {
        "console": {
            "level": level,
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "stream": sys.stdout,
        },
    }
    if log_file:
        handlers["file"] = {
            "level": "WARNING",
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "standard",
            "filename": log_file,
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
        }

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,

        # Formatters: How the logs look
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S"
            },
        },

        # Handlers: Where the logs go
        "handlers": handlers,

        # Loggers: the engine package only, callers own the root logger
        "loggers": {
            "nepal_traversal": {
                "handlers": list(handlers),
                "level": level,
                "propagate": False
            },
        }
    }

    logging.config.dictConfig(logging_config)
