################################################################################
# File Name: exceptions.py
# Purpose/Description: Application configuration exceptions
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
Application configuration exceptions.

Contains:
- AppConfigError: Raised when the config file is malformed or has invalid values
"""

from typing import Any

from common.error_handler import ConfigurationError


class AppConfigError(ConfigurationError):
    """
    Error in application configuration.

    Attributes:
        message: Human-readable error message
        invalidFields: Dot-notation keys with invalid values
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        invalidFields: list[str] | None = None,
        details: dict[str, Any] | None = None
    ):
        super().__init__(message, details)
        self.invalidFields = invalidFields or []
