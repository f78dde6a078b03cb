import logging
import os
from typing import Optional


def setup_logger(
    logger_name: str = "fractals",
    log_level: str = "INFO",
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Configure the package logger without stacking duplicate handlers."""
    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    logger.propagate = False

    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-5s %(message)s", datefmt="%H:%M:%S")
        )
        logger.addHandler(stream_handler)

    # debug log file, one handler per path
    if log_file:
        existing = [
            h for h in logger.handlers
            if isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", "") == os.path.abspath(log_file)
        ]
        if not existing:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(
                logging.Formatter("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d - %(message)s")
            )
            logger.addHandler(file_handler)

    return logger
