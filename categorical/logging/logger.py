"""
Logger implementation for the categorical library.

This module provides JSON-formatted logging functionality for the library.
When debugging is enabled, logs are written to timestamped files in a 'logs'
directory; otherwise only warnings and errors are emitted, to a null handler
unless the application attaches its own.
"""

import os
import json
import logging
import datetime
from decimal import Decimal
from fractions import Fraction
from typing import Dict, Any, Optional

import numpy as np

from categorical.config import load_settings
from categorical.numeric import is_zero

LOGGER_NAME = "categorical"

LEVEL_MAP = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR
}


# Custom JSON formatter that can handle numpy values and exact number types
class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for logging."""

    def __init__(self):
        super().__init__()

    def _serialize(self, obj: Any) -> Any:
        """Serialize objects to JSON-compatible format."""
        if isinstance(obj, np.ndarray):
            # Only show a sample for large arrays
            if obj.size > 100:
                shape_str = 'x'.join(str(dim) for dim in obj.shape)
                sample = obj.flatten()[:5].tolist()
                return f"ndarray({shape_str}): sample={sample}..."
            return obj.tolist()
        elif isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, (Fraction, Decimal)):
            # Exact weights keep their exact text form
            return str(obj)
        elif isinstance(obj, (list, tuple)):
            if len(obj) > 100:
                return [self._serialize(item) for item in list(obj)[:5]] + ["..."]
            return [self._serialize(item) for item in obj]
        elif isinstance(obj, dict):
            return {str(k): self._serialize(v) for k, v in obj.items()}
        elif isinstance(obj, type):
            return obj.__name__
        elif hasattr(obj, '__dict__'):
            return {
                "__type": obj.__class__.__name__,
                **{k: self._serialize(v) for k, v in obj.__dict__.items()
                   if not k.startswith('_')}
            }
        return obj

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as JSON."""
        log_data = {
            'timestamp': datetime.datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if isinstance(record.msg, dict):
            log_data['data'] = self._serialize(record.msg)
        else:
            log_data['message'] = record.getMessage()

            if hasattr(record, 'data'):
                log_data['data'] = self._serialize(record.data)

        return json.dumps(log_data, default=str)


# Global logger instance
_logger = None


def setup_logger(
    debug: Optional[bool] = None,
    log_level: Optional[str] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up the logger with the specified configuration.

    Arguments left as None fall back to the environment settings from
    categorical.config.

    Args:
        debug: Whether to enable debugging
        log_level: The log level (debug, info, warning, error)
        log_file: Optional custom log file path

    Returns:
        Configured logger instance

    Raises:
        ValueError: If log_level is not a known level name
    """
    global _logger

    if _logger is not None:
        return _logger

    settings = load_settings()
    if debug is None:
        debug = settings.debug
    if log_level is None:
        log_level = settings.log_level
    if log_file is None:
        log_file = settings.log_file

    if log_level.lower() not in LEVEL_MAP:
        raise ValueError(f"Unknown log level: {log_level}")

    logger = logging.getLogger(LOGGER_NAME)

    if not debug:
        # Minimal logging when debug is False, and no files are written
        logger.setLevel(logging.WARNING)
        logger.addHandler(logging.NullHandler())
        _logger = logger
        return logger

    logger.setLevel(LEVEL_MAP[log_level.lower()])

    logs_dir = os.path.join(os.getcwd(), "logs")
    os.makedirs(logs_dir, exist_ok=True)

    if log_file is None:
        timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(logs_dir, f"categorical_{timestamp}.json")
    elif not os.path.isabs(log_file):
        log_file = os.path.join(logs_dir, log_file)

    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(JsonFormatter())
    logger.addHandler(file_handler)

    _logger = logger

    logger.info({
        "event": "logger_initialized",
        "log_level": log_level,
        "log_file": log_file
    })

    return logger


def get_logger() -> logging.Logger:
    """
    Get the configured logger instance.

    Returns:
        Logger instance
    """
    global _logger

    if _logger is None:
        # Set up with default configuration if not already configured
        _logger = setup_logger()

    return _logger


# Helper functions for common logging patterns

def log_phase(phase: str, details: Optional[Dict[str, Any]] = None) -> None:
    """
    Log the start of a new processing phase.

    Args:
        phase: Name of the phase
        details: Optional details about the phase
    """
    logger = get_logger()

    log_data = {
        "event": "phase_start",
        "phase": phase
    }

    if details:
        log_data["details"] = details

    logger.info(log_data)


def log_combination(
    output: str,
    left_size: int,
    right_size: int,
    merged_size: int
) -> None:
    """
    Log the sizes involved in combining two distributions.

    Args:
        output: Name of the output backend class
        left_size: Number of entries in the outer distribution
        right_size: Number of entries in the inner distribution
        merged_size: Number of entries after the output merge policy
    """
    logger = get_logger()

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug({
            "event": "combine",
            "output": output,
            "left_size": left_size,
            "right_size": right_size,
            "pairs": left_size * right_size,
            "merged_size": merged_size
        })


def log_normalization(backend: str, size: int, total: Any) -> None:
    """
    Log a normalization, or an attempt to normalize a zero total.

    Args:
        backend: Name of the backend class
        size: Number of entries being rescaled
        total: Sum of the weights before rescaling
    """
    logger = get_logger()

    if is_zero(total):
        logger.error({
            "event": "normalize_zero_total",
            "backend": backend,
            "size": size,
            "total": total
        })
    elif logger.isEnabledFor(logging.DEBUG):
        logger.debug({
            "event": "normalize",
            "backend": backend,
            "size": size,
            "total": total
        })
