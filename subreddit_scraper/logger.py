"""Logging setup: console plus a rotating log file shared by all fetch threads."""

import logging
import os
from logging.handlers import RotatingFileHandler

LOGGER_NAME = "subreddit_scraper"


def setup_logger(log_dir: str = "logs", level: int = logging.INFO,
                 filename: str = "scraper.log") -> logging.Logger:
    os.makedirs(log_dir, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Called again (e.g. with --verbose): only adjust levels
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    # threadName tells the concurrent downloads apart
    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(threadName)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(fmt)
    logger.addHandler(console)

    # 10MB per file, keep 5
    file_handler = RotatingFileHandler(
        os.path.join(log_dir, filename),
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(fmt)
    logger.addHandler(file_handler)

    return logger
