"""Logging, configuration and the fatal error path."""

from .config import load_config, Config
from .logging import setup_logging, get_logger, JSONFormatter
from .errors import die, FATAL_EXIT_CODE

__all__ = [
    "load_config", "Config",
    "setup_logging", "get_logger", "JSONFormatter",
    "die", "FATAL_EXIT_CODE",
]
