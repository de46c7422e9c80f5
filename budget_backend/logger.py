import logging
import sys
from logging.handlers import RotatingFileHandler

from .config import LOG_FILE, LOG_LEVEL

APP_LOGGER_NAME = "budget_backend"


def setup_logger(name: str = APP_LOGGER_NAME, log_file: str | None = LOG_FILE, level: str | int = LOG_LEVEL):
    """Configures and returns a logger with a console handler and an optional rotating file handler."""

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if log_file:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5*1024*1024, # 5 MB
            backupCount=3,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger of the application logger (module ``__name__`` is expected)."""
    if not name.startswith(APP_LOGGER_NAME):
        name = f"{APP_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


app_logger = setup_logger()
