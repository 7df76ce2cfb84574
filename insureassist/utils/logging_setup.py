from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = "INFO", log_file: str | None = None) -> logging.Logger:
    """Attach one handler to the package logger and return it."""
    logger = logging.getLogger("insureassist")
    logger.setLevel(level if isinstance(level, int) else level.upper())
    if not logger.handlers:
        handler: logging.Handler = logging.FileHandler(log_file) if log_file else logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
