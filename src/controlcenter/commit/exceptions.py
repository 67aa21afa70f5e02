################################################################################
# File Name: exceptions.py
# Purpose/Description: Custom exceptions for the privileged commit channel
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
Custom exceptions for the commit subpackage.

Exception hierarchy:
    PrivilegeError (common.error_handler)
    └── CommandExecutionError
"""

from typing import Any

from common.error_handler import PrivilegeError


class CommandExecutionError(PrivilegeError):
    """
    External command failed or could not be started.

    Attributes:
        exitCode: Process exit code, None if the process never ran
        stderr: Captured standard error text
    """

    def __init__(
        self,
        message: str,
        exitCode: int | None = None,
        stderr: str = '',
        details: dict[str, Any] | None = None
    ):
        super().__init__(message, details)
        self.exitCode = exitCode
        self.stderr = stderr

    def __str__(self) -> str:
        if self.exitCode is not None:
            return f"{self.message} (exit code {self.exitCode})"
        return self.message
