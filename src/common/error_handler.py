################################################################################
# File Name: error_handler.py
# Purpose/Description: Centralized error classification and handling
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
Error handling module.

Provides centralized error handling with:
- Custom exception classes by error type
- Error classification (config, persistence, privilege, validation, system)
- Structured error reporting

Expected, local failures (unknown profile, duplicate name) are not exceptions
at all; callers get a boolean. The classes here cover infrastructure failures
that must reach the user.

Usage:
    from common.error_handler import PersistenceError, handleError

    try:
        handler.writeSettings(settings, path)
    except Exception as e:
        handleError(e, context={'path': path})
"""

import json
import logging
import traceback
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ErrorCategory(Enum):
    """Categories of errors for classification."""
    CONFIGURATION = 'config'      # Config errors, fail fast
    PERSISTENCE = 'persistence'   # Disk errors reading/writing state files
    PRIVILEGE = 'privilege'       # Escalation declined or helper failed
    VALIDATION = 'validation'     # Payload rejected, log and report
    SYSTEM = 'system'             # Unexpected errors


# ================================================================================
# Custom Exception Classes
# ================================================================================

class BaseError(Exception):
    """Base exception for all custom errors."""

    category: ErrorCategory = ErrorCategory.SYSTEM

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def toDict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            'type': self.__class__.__name__,
            'category': self.category.value,
            'message': self.message,
            'details': self.details
        }


class ConfigurationError(BaseError):
    """Configuration validation failure."""
    category = ErrorCategory.CONFIGURATION


class PersistenceError(BaseError):
    """Failure reading or writing a state file."""
    category = ErrorCategory.PERSISTENCE


class PrivilegeError(BaseError):
    """Privilege escalation declined or privileged helper failure."""
    category = ErrorCategory.PRIVILEGE


class ValidationError(BaseError):
    """Data validation failure."""
    category = ErrorCategory.VALIDATION


class InternalError(BaseError):
    """Unexpected internal error."""
    category = ErrorCategory.SYSTEM


# ================================================================================
# Error Classification
# ================================================================================

def classifyError(error: Exception) -> ErrorCategory:
    """
    Classify an error into a category.

    Args:
        error: Exception to classify

    Returns:
        ErrorCategory for the error
    """
    if isinstance(error, BaseError):
        return error.category

    if isinstance(error, PermissionError):
        return ErrorCategory.PRIVILEGE

    if isinstance(error, OSError):
        return ErrorCategory.PERSISTENCE

    # JSONDecodeError is a ValueError, check it first for clarity
    if isinstance(error, (json.JSONDecodeError, ValueError, KeyError, TypeError)):
        return ErrorCategory.VALIDATION

    return ErrorCategory.SYSTEM


# ================================================================================
# Error Handling
# ================================================================================

def handleError(
    error: Exception,
    context: dict[str, Any] | None = None,
    reraise: bool = True
) -> dict[str, Any]:
    """
    Handle an error with logging and classification.

    Args:
        error: Exception that occurred
        context: Additional context information
        reraise: Whether to re-raise the exception

    Returns:
        Error details dictionary

    Raises:
        The original exception if reraise is True
    """
    category = classifyError(error)
    context = context or {}

    errorDetails = {
        'type': type(error).__name__,
        'category': category.value,
        'message': str(error),
        'context': context,
        'traceback': traceback.format_exc()
    }

    if category == ErrorCategory.CONFIGURATION:
        logger.error(f"Configuration error: {error}")
    elif category == ErrorCategory.VALIDATION:
        logger.warning(f"Validation error: {error}")
    elif category == ErrorCategory.PRIVILEGE:
        logger.warning(f"Privilege error: {error}")
    elif category == ErrorCategory.PERSISTENCE:
        logger.error(f"Persistence error: {error}")
    else:
        logger.error(f"Error: {error}", exc_info=True)

    if reraise:
        raise error

    return errorDetails


def formatError(error: Exception) -> str:
    """
    Format an error for display/logging.

    Args:
        error: Exception to format

    Returns:
        Formatted error string
    """
    category = classifyError(error)

    if isinstance(error, BaseError):
        details = f" | details={error.details}" if error.details else ""
        return f"[{category.value.upper()}] {error.message}{details}"

    return f"[{category.value.upper()}] {type(error).__name__}: {error}"
