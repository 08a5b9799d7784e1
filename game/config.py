import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from exceptions import ConfigurationError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class EvaluatorConfig:
    """
    Configuration for the hand evaluator command line driver.

    Attributes:
        log_level (str): Level name for the hand logger (default: "INFO")
        log_file (Optional[str]): File to mirror log output into, None for console only (default: None)
        json_output (bool): Emit results as JSON instead of log lines (default: False)

    Raises:
        ConfigurationError: If log_level is not a known logging level name
    """

    log_level: str = "INFO"
    log_file: Optional[str] = None
    json_output: bool = False

    def __post_init__(self):
        """Validate configuration parameters."""
        self.log_level = str(self.log_level).upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigurationError(f"Unknown log level: {self.log_level}")
        if self.log_file is not None and not self.log_file.strip():
            raise ConfigurationError("Log file path cannot be blank")

    @classmethod
    def from_env(cls) -> "EvaluatorConfig":
        """
        Build a configuration from environment variables, loading a .env file
        first if one is present.

        Reads POKER_LOG_LEVEL, POKER_LOG_FILE and POKER_JSON_OUTPUT.
        """
        load_dotenv()
        return cls(
            log_level=os.getenv("POKER_LOG_LEVEL", "INFO"),
            log_file=os.getenv("POKER_LOG_FILE") or None,
            json_output=_parse_bool(os.getenv("POKER_JSON_OUTPUT", "")),
        )


def _parse_bool(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Expected a boolean value, got {value!r}")
