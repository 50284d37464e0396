"""Logging setup and utilities."""

import errno
import logging
import sys
from pathlib import Path
from datetime import datetime, timezone
from typing import Optional
import json


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if hasattr(record, 'extra_data'):
            log_entry.update(record.extra_data)
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


class FileUtilsLogger(logging.Logger):
    """Logger with helpers for file operation events."""

    def log_io(self, operation: str, path, size: int):
        """Log a completed read, write or walk at DEBUG."""
        self.debug(
            f"{operation} {path!r} ({size})",
            extra={'extra_data': {
                'operation': operation,
                'path': path,
                'size': size
            }}
        )

    def log_fatal(self, operation: str, path, cause: OSError) -> str:
        """Log an unrecoverable I/O failure and return the diagnostic."""
        message = f"{operation} failed for {path!r}: {describe_os_error(cause)}"
        self.critical(
            message,
            extra={'extra_data': {
                'event': 'fatal',
                'operation': operation,
                'path': path,
                'errno': cause.errno
            }}
        )
        return message


def describe_os_error(error: OSError) -> str:
    """Render an OSError as 'strerror [ERRNAME]' when the errno is known."""
    if error.errno is None:
        return str(error) or type(error).__name__
    name = errno.errorcode.get(error.errno, str(error.errno))
    return f"{error.strerror or error} [{name}]"


# Replace default logger class
logging.setLoggerClass(FileUtilsLogger)


def setup_logging(
    log_dir: Optional[Path] = None,
    level: str = "INFO",
    console: bool = True,
    json_file: bool = True
) -> FileUtilsLogger:
    """Setup logging configuration.

    Args:
        log_dir: Directory for log files
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        console: Whether to log to console
        json_file: Whether to log to JSON file

    Returns:
        Configured logger
    """
    logger = logging.getLogger("fileutils")
    logger.setLevel(getattr(logging, level.upper()))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Console handler
    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG)
        console_format = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(message)s',
            datefmt='%H:%M:%S'
        )
        console_handler.setFormatter(console_format)
        logger.addHandler(console_handler)

    # JSON file handler
    if json_file and log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_dir / f"fileutils_{timestamp}.jsonl"

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "fileutils") -> FileUtilsLogger:
    """Get a logger instance.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
