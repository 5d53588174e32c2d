################################################################################
# File Name: logging_config.py
# Purpose/Description: Structured logging configuration and utilities
# Author: Michael Cornelison
# Creation Date: 2026-10-19
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-19    | M. Cornelison | Initial implementation
# ================================================================================
################################################################################

"""
Logging configuration module.

Provides structured logging with:
- Configurable log levels
- Console (stderr) and file output
- Consistent formatting with extra context fields

Log output goes to stderr so that test reports written to stdout stay clean.

Usage:
    from common.logging_config import setupLogging, getLogger

    setupLogging(level='INFO')
    logger = getLogger(__name__)
    logger.info("Suite finished", extra={"extra": {"cases": 4}})
"""

import logging
import sys
from pathlib import Path
from typing import Any

# Default log format
DEFAULT_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s | %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class StructuredFormatter(logging.Formatter):
    """
    Custom formatter for structured logging.

    Adds support for extra fields in log output.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record with extra fields.

        Args:
            record: Log record to format

        Returns:
            Formatted log string
        """
        message = super().format(record)

        extra = getattr(record, 'extra', None)
        if extra and isinstance(extra, dict):
            extraStr = ' | ' + ' '.join(f'{k}={v}' for k, v in extra.items())
            message += extraStr

        return message


def resolveLogLevel(level: Any) -> int | None:
    """
    Map a level name such as 'debug' or 'WARNING' to its logging constant.

    Returns:
        The numeric level, or None when the name is not a known level
    """
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else None


def setupLogging(
    level: str = 'INFO',
    logFormat: str | None = None,
    logFile: str | None = None
) -> logging.Logger:
    """
    Configure application logging.

    Replaces the root handlers, so it can be called again once the
    configuration has been loaded. An unknown level falls back to INFO
    with a warning.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        logFormat: Custom format string
        logFile: Optional file path for log output

    Returns:
        Root logger instance
    """
    rootLogger = logging.getLogger()
    resolvedLevel = resolveLogLevel(level)
    rootLogger.setLevel(resolvedLevel if resolvedLevel is not None else logging.INFO)

    for handler in rootLogger.handlers[:]:
        rootLogger.removeHandler(handler)

    formatter = StructuredFormatter(
        fmt=logFormat or DEFAULT_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT
    )

    # stdout belongs to the report
    consoleHandler = logging.StreamHandler(sys.stderr)
    consoleHandler.setFormatter(formatter)
    rootLogger.addHandler(consoleHandler)

    if logFile:
        logPath = Path(logFile)
        logPath.parent.mkdir(parents=True, exist_ok=True)

        fileHandler = logging.FileHandler(logFile, encoding='utf-8')
        fileHandler.setFormatter(formatter)
        rootLogger.addHandler(fileHandler)

    if resolvedLevel is None:
        rootLogger.warning(f"Unknown log level {level!r}, using INFO")
    rootLogger.debug(f"Logging configured | level={level} file={logFile or '-'}")

    return rootLogger


def setupLoggingFromConfig(
    config: dict[str, Any],
    verbose: bool = False
) -> logging.Logger:
    """
    Configure logging from the 'logging' section of a configuration.

    Section keys (both optional):
        level: Log level name (default INFO)
        file: Log file path; empty or missing means console only

    Args:
        config: Validated configuration dictionary
        verbose: Force DEBUG regardless of the configured level

    Returns:
        Root logger instance
    """
    section = config.get('logging', {}) or {}
    level = 'DEBUG' if verbose else section.get('level', 'INFO')
    return setupLogging(level=level, logFile=section.get('file') or None)


def getLogger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def logWithContext(
    logger: logging.Logger,
    level: str,
    message: str,
    **context: Any
) -> None:
    """
    Log a message with structured context.

    Args:
        logger: Logger instance
        level: Log level
        message: Log message
        **context: Additional context fields
    """
    logFunc = getattr(logger, level.lower(), logger.info)

    if context:
        contextStr = ' | ' + ' '.join(f'{k}={v}' for k, v in context.items())
        logFunc(message + contextStr)
    else:
        logFunc(message)


class LogContext:
    """
    Context manager for adding context to all log messages.

    Usage:
        with LogContext(suite='math_suite'):
            logger.info("Running suite")  # Includes suite
    """

    def __init__(self, **context: Any):
        self.context = context
        self._oldFactory = None

    def __enter__(self) -> 'LogContext':
        """Enter context and add fields to log records."""
        self._oldFactory = logging.getLogRecordFactory()

        context = self.context

        def recordFactory(*args: Any, **kwargs: Any) -> logging.LogRecord:
            record = self._oldFactory(*args, **kwargs)
            record.extra = context
            return record

        logging.setLogRecordFactory(recordFactory)
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context and restore original factory."""
        if self._oldFactory:
            logging.setLogRecordFactory(self._oldFactory)
