################################################################################
# File Name: executor.py
# Purpose/Description: Synchronous external command execution
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
Synchronous command execution.

Runs a command, blocks until it exits and reports either the captured stdout
or a CommandExecutionError. Never raises for command failures, so callers only
branch on ExecResult.

Usage:
    from controlcenter.commit.executor import CommandExecutor

    result = CommandExecutor().runSync(['pkexec', '/usr/bin/controlcenterd', '--help'])
    if result.error is not None:
        print(result.error)
"""

import logging
import subprocess
from collections.abc import Sequence

from .exceptions import CommandExecutionError
from .types import ExecResult

logger = logging.getLogger(__name__)


class CommandExecutor:
    """
    Runs external commands synchronously.

    Attributes:
        timeoutSeconds: Upper bound on run time, None to wait indefinitely

    Example:
        executor = CommandExecutor()
        result = executor.runSync(['true'])
        assert result.ok
    """

    def __init__(self, timeoutSeconds: float | None = None):
        """
        Initialize the executor.

        Args:
            timeoutSeconds: Upper bound on run time; the privilege prompt waits
                for the user, so the default is no limit
        """
        self.timeoutSeconds = timeoutSeconds

    def runSync(self, command: Sequence[str]) -> ExecResult:
        """
        Run a command and wait for it to exit.

        Args:
            command: Program and arguments (no shell)

        Returns:
            ExecResult with data on exit code 0, error otherwise
        """
        args = list(command)
        logger.debug(f"Executing: {' '.join(args)}")

        try:
            result = subprocess.run(
                args,
                capture_output=True,
                timeout=self.timeoutSeconds,
                check=False
            )

        except FileNotFoundError as e:
            return ExecResult(error=CommandExecutionError(
                f"Executable not found: {args[0]}",
                details={'command': args, 'error': str(e)}
            ))
        except subprocess.TimeoutExpired:
            return ExecResult(error=CommandExecutionError(
                f"Command timed out after {self.timeoutSeconds}s: {args[0]}",
                details={'command': args}
            ))
        except OSError as e:
            return ExecResult(error=CommandExecutionError(
                f"Failed to start {args[0]}: {e}",
                details={'command': args, 'error': str(e)}
            ))

        if result.returncode != 0:
            stderr = (result.stderr or b'').decode('utf-8', errors='replace').strip()
            return ExecResult(error=CommandExecutionError(
                f"Command failed: {args[0]}",
                exitCode=result.returncode,
                stderr=stderr,
                details={'command': args}
            ))

        return ExecResult(data=result.stdout)
