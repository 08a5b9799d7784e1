import logging
import sys
from typing import Optional, TextIO

from loggers.config import configure_loggers


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure logging with UTF-8 encoding support.

    Sets up a logging system that outputs to the console and, when log_file is
    given, to that file as well.

    Args:
        log_level (str): Level name applied to the hand logger.
        log_file (Optional[str]): Path of a log file to overwrite, or None.
        stream (Optional[TextIO]): Console stream, sys.stdout when None.

    Side Effects:
        - Clears existing root logging handlers
        - Creates/overwrites log_file if given
        - Sets the hand logger's level
    """
    # Clear any existing handlers
    logging.getLogger().handlers = []

    handlers = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        # mode="w" ensures the file is cleared each time
        handlers.append(logging.FileHandler(log_file, encoding="utf-8", mode="w"))

    logging.basicConfig(
        level=logging.INFO,  # Default level for root logger
        format="%(message)s",
        handlers=handlers,
    )

    configure_loggers({"hand": log_level})
    if logging.getLevelName(log_level.upper()) == logging.DEBUG:
        logging.getLogger().setLevel(logging.DEBUG)
