import logging
from logging.handlers import RotatingFileHandler
import os
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# httpx and httpcore log every request at INFO/DEBUG
_CHATTY_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str = "INFO", logfile: str | None = None) -> logging.Logger:
    """
    Configure the root logger for the tracker.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive ("debug", "info", "warning", ...).
        Unknown names fall back to INFO.
    logfile : str | None
        When set, records are also written to this file through a rotating
        handler. When None only stdout is used.

    Returns
    -------
    logging.Logger
        The configured root logger.
    """

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.root.handlers.clear()
    logging.root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logging.root.addHandler(console_handler)

    if logfile:
        log_dir = os.path.dirname(logfile)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            logfile, maxBytes=10 * 1024 * 1024, backupCount=10, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        logging.root.addHandler(file_handler)

    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    return logging.root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
