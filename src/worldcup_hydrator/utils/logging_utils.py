"""
Logging setup for the World Cup finals CLI.

Library modules only create module loggers; the command line entry points
call :func:`setup_logging` once to attach a handler to the root logger.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO", verbose: bool = False, log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Set up logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        verbose: Force DEBUG regardless of ``level``
        log_file: Optional file that receives a copy of every record

    Returns:
        The configured root logger
    """
    numeric_level = logging.DEBUG if verbose else getattr(
        logging, level.upper(), logging.INFO
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    handler.setLevel(numeric_level)
    root_logger.addHandler(handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.setLevel(numeric_level)
        root_logger.addHandler(file_handler)

    # Keep third-party HTTP chatter out of INFO output
    for noisy in ("urllib3", "google", "googleapiclient"):
        logging.getLogger(noisy).setLevel(max(numeric_level, logging.WARNING))

    return root_logger
