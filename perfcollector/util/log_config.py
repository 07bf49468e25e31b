"""
Logging configuration for the collector.

Provides centralized logging setup with clean, concise terminal output.

Every logger created through setup_logger is remembered, so set_log_level
can switch all of them to DEBUG (--verbose) or add a log file (--log-file)
after the modules have been imported.
"""
import logging
import sys
from pathlib import Path
from typing import Dict, Optional

# Loggers handed out by setup_logger, so verbosity can be changed after import
_LOGGERS: Dict[str, logging.Logger] = {}


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (typically __name__)
        level: Logging level (default: INFO)
        log_file: Optional file path for log output

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(min(level, logging.DEBUG) if log_file else level)

    # Remove existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    # Console handler with clean formatting
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    # Clean format: [LEVEL] message
    console_formatter = logging.Formatter(
        fmt='[%(levelname)s] %(message)s'
    )
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    # Optional file handler with more detailed format
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)

        file_formatter = logging.Formatter(
            fmt='%(asctime)s [%(levelname)s] %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    _LOGGERS[name] = logger
    return logger


def set_log_level(level: int, log_file: Optional[Path] = None) -> None:
    """
    Reconfigure every logger created through setup_logger.

    Args:
        level: New console logging level
        log_file: Optional file that all loggers should also write to
    """
    for name in list(_LOGGERS):
        setup_logger(name, level=level, log_file=log_file)
