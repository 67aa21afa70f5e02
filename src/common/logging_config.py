################################################################################
# File Name: logging_config.py
# Purpose/Description: Structured logging configuration and utilities
# Author: Control Center Team
# Creation Date: 2026-10-17
# Copyright: (c) 2026 Control Center Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-17    | CC Team       | Initial implementation
# ================================================================================
################################################################################

"""
Logging configuration module.

Provides structured logging with:
- Configurable log levels
- Console output and optional rotating file output
- Consistent formatting with key=value context

The privileged helper runs as root and may be invoked many times a day, so the
file handler rotates instead of growing without bound.

Usage:
    from common.logging_config import setupLogging, getLogger

    setupLogging(level='INFO', logFile='/var/log/controlcenterd.log')
    logger = getLogger(__name__)
    logger.info("Profiles committed", extra={'extra': {'count': 3}})
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any

# Default log format
DEFAULT_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s | %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Rotation defaults for the optional file handler
DEFAULT_MAX_BYTES = 5 * 1024 * 1024
DEFAULT_BACKUP_COUNT = 5


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


def setupLogging(
    level: str = 'INFO',
    logFormat: str | None = None,
    logFile: str | None = None,
    maxBytes: int = DEFAULT_MAX_BYTES,
    backupCount: int = DEFAULT_BACKUP_COUNT
) -> logging.Logger:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        logFormat: Custom format string
        logFile: Optional file path for log output
        maxBytes: Size at which the log file is rotated
        backupCount: Number of rotated files to keep

    Returns:
        Root logger instance
    """
    rootLogger = logging.getLogger()
    rootLogger.setLevel(getattr(logging, level.upper(), logging.INFO))

    rootLogger.handlers.clear()

    formatter = StructuredFormatter(
        fmt=logFormat or DEFAULT_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT
    )

    consoleHandler = logging.StreamHandler(sys.stdout)
    consoleHandler.setFormatter(formatter)
    rootLogger.addHandler(consoleHandler)

    if logFile:
        logPath = Path(logFile)
        logPath.parent.mkdir(parents=True, exist_ok=True)

        fileHandler = logging.handlers.RotatingFileHandler(
            logFile,
            maxBytes=maxBytes,
            backupCount=backupCount,
            encoding='utf-8'
        )
        fileHandler.setFormatter(formatter)
        rootLogger.addHandler(fileHandler)

    rootLogger.info(f"Logging configured | level={level}")

    return rootLogger


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
