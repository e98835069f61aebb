"""
Logging configuration for the movie characters API.

Provides console logging plus an optional rotating log file.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional

# Server loggers that should follow the API log level and use the root handlers
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _level_number(level: str) -> int:
    number = logging.getLevelName(level.upper())
    if not isinstance(number, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return number


def setup_logging(
    log_file: Optional[str] = None,
    level: str = "INFO",
    log_dir: str = "logs",
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5
) -> None:
    """
    Configure logging for the application.

    Args:
        log_file: Name of log file (default: None, logs to console only)
        level: Logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR')
        log_dir: Directory for log files (default: 'logs')
        max_bytes: Maximum size of log file before rotation (default: 10MB)
        backup_count: Number of backup files to keep (default: 5)
    """
    log_level = _level_number(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Console handler (always active)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        full_log_path = log_path / log_file

        file_handler = RotatingFileHandler(
            full_log_path,
            maxBytes=max_bytes,
            backupCount=backup_count
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

        root_logger.info(f"Logging to file: {full_log_path}")

    # SQL statements only when explicitly requested through SQL_ECHO
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance with the specified name.

    Args:
        name: Name of the logger (typically __name__)
        level: Optional logging level override

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name)

    if level:
        logger.setLevel(_level_number(level))

    return logger


def configure_api_logging(
    level: str = "INFO",
    log_file: Optional[str] = "api.log",
    log_dir: str = "logs"
):
    """
    Configure logging for the API server.

    uvicorn runs with log_config=None, so its loggers are reset here: they
    drop their own handlers, propagate to the root handlers and take the
    same level. Access lines are then hidden by LOG_LEVEL=WARNING and end
    up in the rotating file next to the application logs.

    Args:
        level: Logging level name
        log_file: Rotating log file under log_dir, or None for console only
        log_dir: Directory for the log file

    Raises:
        ValueError: If level is not a logging level name
    """
    setup_logging(log_file=log_file, level=level, log_dir=log_dir)

    server_level = _level_number(level)
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.setLevel(server_level)
        server_logger.propagate = True


def configure_script_logging(debug: bool = False):
    """
    Configure console logging for command line scripts.

    Args:
        debug: Enable debug logging (default: False)
    """
    setup_logging(level="DEBUG" if debug else "INFO")
