################################################################################
# File Name: types.py
# Purpose/Description: Type definitions for the privileged commit channel
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
Type definitions for the commit subpackage.

Contains:
- PayloadKind enum and the matching helper flags
- CommitFailure enum classifying failed commits
- CommitResult dataclass returned by every commit
- ExecResult dataclass returned by the command executor

This module has no dependencies on other project modules (only stdlib).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

# ================================================================================
# Constants
# ================================================================================

FLAG_NEW_SETTINGS = '--new-settings'
FLAG_NEW_PROFILES = '--new-profiles'

# pkexec: 126 = authorization dismissed or not obtained, 127 = authentication failed
ESCALATION_DENIED_EXIT_CODES = frozenset({126, 127})


# ================================================================================
# Enums
# ================================================================================

class PayloadKind(Enum):
    """Kind of payload handed to the privileged helper."""

    SETTINGS = 'settings'
    PROFILES = 'profiles'

    @property
    def flag(self) -> str:
        """Helper command-line flag for this payload."""
        return FLAG_NEW_SETTINGS if self is PayloadKind.SETTINGS else FLAG_NEW_PROFILES


class CommitFailure(Enum):
    """
    Why a commit failed.

    Values:
        PRIVILEGE_DENIED: User declined or failed the escalation prompt
        HELPER_FAILED: Helper rejected the payload or crashed
        EXEC_FAILED: Helper could not be started at all
    """

    PRIVILEGE_DENIED = 'privilege_denied'
    HELPER_FAILED = 'helper_failed'
    EXEC_FAILED = 'exec_failed'


# ================================================================================
# Results
# ================================================================================

@dataclass
class CommitResult:
    """
    Outcome of a privileged commit. Truthy only on success.

    Attributes:
        success: Helper exited without error
        payloadKind: Settings or profiles
        exitCode: Helper/escalation exit code if it ran
        error: Error message if the commit failed
        failure: Failure classification if the commit failed
    """

    success: bool
    payloadKind: PayloadKind
    exitCode: int | None = None
    error: str | None = None
    failure: CommitFailure | None = None

    def __bool__(self) -> bool:
        return self.success

    def toDict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            'success': self.success,
            'payloadKind': self.payloadKind.value,
            'exitCode': self.exitCode,
            'error': self.error,
            'failure': self.failure.value if self.failure else None,
        }


@dataclass
class ExecResult:
    """
    Outcome of a synchronous command. Exactly one field is populated.

    Attributes:
        data: Captured stdout on success
        error: CommandExecutionError on failure
    """

    data: bytes | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        """True if the command succeeded."""
        return self.error is None
