"""
Runtime settings for the categorical library.

Settings are read from the environment, after loading a .env file from the
current directory if one exists.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

TRUTHY = ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class Settings:
    """
    Logging configuration for the library.

    Attributes:
        debug: Whether debug logging to a JSON file is enabled
        log_level: The log level used when debug is enabled
        log_file: Optional log file path (relative paths go under logs/)
    """
    debug: bool = False
    log_level: str = "info"
    log_file: Optional[str] = None


def load_settings() -> Settings:
    """
    Load settings from CATEGORICAL_* environment variables.

    Recognised variables:
        CATEGORICAL_DEBUG: enable debug logging (1, true, yes, on)
        CATEGORICAL_LOG_LEVEL: debug, info, warning or error
        CATEGORICAL_LOG_FILE: log file path

    Returns:
        Settings instance
    """
    load_dotenv()
    return Settings(
        debug=os.getenv('CATEGORICAL_DEBUG', '').strip().lower() in TRUTHY,
        log_level=os.getenv('CATEGORICAL_LOG_LEVEL', 'info'),
        log_file=os.getenv('CATEGORICAL_LOG_FILE') or None,
    )
