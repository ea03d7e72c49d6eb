import logging
import logging.config
import os


# Define base directories
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../../../"))
LOG_DIR = os.environ.get("FRI_LOG_DIR", os.path.join(BASE_DIR, "logs"))
APP_LOG_DIR = os.path.join(LOG_DIR, "app")

# Ensure log directories exist
os.makedirs(APP_LOG_DIR, exist_ok=True)

# Log file paths
APP_LOG_FILE = os.path.join(APP_LOG_DIR, "app.log")
APP_ERROR_LOG_FILE = os.path.join(APP_LOG_DIR, "app.error.log")

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] [%(filename)s:%(lineno)d] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": LOG_FORMAT,
            "datefmt": LOG_DATE_FORMAT,
        },
    },
    "handlers": {
        "console": {
            "level": "INFO",
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
        "file_app": {
            "level": "DEBUG",
            "class": "logging.handlers.TimedRotatingFileHandler",
            "filename": APP_LOG_FILE,
            "when": "midnight",
            "interval": 1,
            "backupCount": 30,
            "encoding": "utf-8",
            "formatter": "standard",
        },
        "file_error": {
            "level": "ERROR",
            "class": "logging.handlers.TimedRotatingFileHandler",
            "filename": APP_ERROR_LOG_FILE,
            "when": "midnight",
            "interval": 1,
            "backupCount": 30,
            "encoding": "utf-8",
            "formatter": "standard",
        },
    },
    "loggers": {
        "fri": {
            "level": "DEBUG",
            "propagate": True,
        },
    },
    "root": {
        "handlers": ["console", "file_app", "file_error"],
        "level": "INFO",
    },
}


def setup_logging():
    """Apply default logging configuration."""
    logging.config.dictConfig(LOGGING_CONFIG)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with standard configuration."""
    # Ensure configuration is applied at least once
    if not logging.getLogger().handlers:
        setup_logging()

    return logging.getLogger(name)


# Apply configuration immediately upon import to ensure capture
setup_logging()
