################################################################################
# File Name: exceptions.py
# Purpose/Description: Custom exceptions for the persistence layer
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
Custom exceptions for the persistence subpackage.

Exception hierarchy:
    PersistenceError (common.error_handler)
    ├── PersistenceReadError
    └── PersistenceWriteError
    ValidationError (common.error_handler)
    └── PayloadValidationError
"""

from typing import Any

from common.error_handler import PersistenceError, ValidationError


class PersistenceReadError(PersistenceError):
    """State file missing, unreadable or malformed."""
    pass


class PersistenceWriteError(PersistenceError):
    """State file could not be written."""
    pass


class PayloadValidationError(ValidationError):
    """Decoded settings or profile payload failed validation."""

    def __init__(
        self,
        message: str,
        problems: list[str] | None = None,
        details: dict[str, Any] | None = None
    ):
        """
        Initialize the exception.

        Args:
            message: Error message
            problems: Every problem found in the payload
            details: Additional error details
        """
        super().__init__(message, details)
        self.problems = problems or []
