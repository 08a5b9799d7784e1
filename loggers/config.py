import logging
from typing import Dict, Optional, Union

# Default log levels for each logger
DEFAULT_LOG_LEVELS = {
    "hand": logging.INFO,
}


def configure_loggers(log_levels: Optional[Dict[str, Union[int, str]]] = None) -> None:
    """Configure log levels for all loggers.

    Args:
        log_levels: Dictionary mapping logger names to their desired log levels.
                   Can use either logging constants (e.g. logging.INFO)
                   or level names as strings (e.g. "INFO").

    Raises:
        ValueError: If a level name is not a known logging level
    """
    # Use default levels if none provided
    levels = log_levels or {}

    for logger_name, default_level in DEFAULT_LOG_LEVELS.items():
        logger = logging.getLogger(f"loggers.{logger_name}_logger")

        # Set level from provided levels, falling back to default
        level = levels.get(logger_name, default_level)

        # Convert string level names to constants if needed
        if isinstance(level, str):
            resolved = logging.getLevelName(level.upper())
            if not isinstance(resolved, int):
                raise ValueError(f"Unknown log level: {level}")
            level = resolved

        logger.setLevel(level)
