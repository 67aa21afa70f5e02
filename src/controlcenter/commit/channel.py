################################################################################
# File Name: channel.py
# Purpose/Description: Commit channels delivering new state to the daemon
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
Commit channels for the commit subpackage.

A commit hands a complete new settings record or custom profile list to
whoever owns the authoritative files:

- PrivilegedCommitChannel stages the payload in a fixed temp file and
  re-invokes the daemon executable through the privilege escalation wrapper:
      pkexec /usr/bin/controlcenterd --new-settings /tmp/tmpccsettings
  The call blocks until the helper exits; exit code 0 is the only success.
- DirectCommitChannel validates and writes straight to the authoritative
  files in-process. Used by tests and unprivileged development setups.

Channels never retry; the caller decides whether to retry or discard.
Failure to write the staging file raises PersistenceWriteError.

Usage:
    from controlcenter.commit.channel import PrivilegedCommitChannel

    channel = PrivilegedCommitChannel(handler, '/usr/bin/controlcenterd')
    result = channel.commitSettings(newSettings)
    if not result:
        print(result.error)
"""

import logging
import shlex
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from common.copy_utils import copyConfig
from common.logging_config import logWithContext

from ..config.types import DEFAULT_TMP_PROFILES_FILE, DEFAULT_TMP_SETTINGS_FILE
from ..persistence.exceptions import PayloadValidationError
from ..persistence.handler import ConfigHandler
from ..persistence.validation import validateProfiles, validateSettings
from ..profile.defaults import getBuiltinProfiles
from ..profile.types import Profile
from ..settings.types import Settings
from .executor import CommandExecutor
from .types import (
    ESCALATION_DENIED_EXIT_CODES,
    CommitFailure,
    CommitResult,
    PayloadKind,
)

logger = logging.getLogger(__name__)


class CommitChannel(ABC):
    """Port through which new settings and profiles reach the daemon."""

    @abstractmethod
    def commitSettings(self, settings: Settings) -> CommitResult:
        """
        Replace the authoritative settings.

        Args:
            settings: Complete new settings record

        Returns:
            CommitResult, truthy on success

        Raises:
            PersistenceWriteError: If the payload cannot be staged
        """

    @abstractmethod
    def commitProfiles(self, profiles: list[Profile]) -> CommitResult:
        """
        Replace the authoritative custom profile list.

        Args:
            profiles: Complete new custom profile list

        Returns:
            CommitResult, truthy on success

        Raises:
            PersistenceWriteError: If the payload cannot be staged
        """


# ================================================================================
# Privileged Channel
# ================================================================================

class PrivilegedCommitChannel(CommitChannel):
    """
    Commits through the daemon executable run with elevated privilege.

    Attributes:
        daemonExecPath: Daemon executable re-invoked as the helper
        escalationCommand: Wrapper prefix (e.g. 'pkexec'), empty for none
        tmpSettingsPath: Fixed staging file for settings
        tmpProfilesPath: Fixed staging file for profiles

    Example:
        channel = PrivilegedCommitChannel(handler, '/usr/bin/controlcenterd')
        if channel.commitProfiles(profiles):
            service.resync()
    """

    def __init__(
        self,
        handler: ConfigHandler,
        daemonExecPath: str,
        executor: CommandExecutor | None = None,
        escalationCommand: str = 'pkexec',
        tmpSettingsPath: str = DEFAULT_TMP_SETTINGS_FILE,
        tmpProfilesPath: str = DEFAULT_TMP_PROFILES_FILE
    ):
        """
        Initialize the channel.

        Args:
            handler: ConfigHandler used to stage payloads
            daemonExecPath: Daemon executable re-invoked as the helper
            executor: Command executor (defaults to a new CommandExecutor)
            escalationCommand: Wrapper prefix, split shell-style
            tmpSettingsPath: Fixed staging file for settings
            tmpProfilesPath: Fixed staging file for profiles
        """
        self._handler = handler
        self._executor = executor or CommandExecutor()
        self.daemonExecPath = daemonExecPath
        self.escalationCommand = escalationCommand
        self.tmpSettingsPath = tmpSettingsPath
        self.tmpProfilesPath = tmpProfilesPath

    def buildCommand(self, kind: PayloadKind, stagedPath: str) -> list[str]:
        """
        Build the helper command line.

        Args:
            kind: Payload kind, selects the flag
            stagedPath: Staging file the helper reads

        Returns:
            Argument list (no shell)
        """
        return [
            *shlex.split(self.escalationCommand),
            self.daemonExecPath,
            kind.flag,
            str(stagedPath),
        ]

    def commitSettings(self, settings: Settings) -> CommitResult:
        self._handler.writeSettings(settings, self.tmpSettingsPath)
        return self._invokeHelper(PayloadKind.SETTINGS, self.tmpSettingsPath)

    def commitProfiles(self, profiles: list[Profile]) -> CommitResult:
        self._handler.writeProfiles(profiles, self.tmpProfilesPath)
        return self._invokeHelper(PayloadKind.PROFILES, self.tmpProfilesPath)

    def _invokeHelper(self, kind: PayloadKind, stagedPath: str) -> CommitResult:
        """Run the helper on a staged file and classify the outcome."""
        command = self.buildCommand(kind, stagedPath)
        result = self._executor.runSync(command)

        if result.error is None:
            logWithContext(logger, 'info', "Privileged commit succeeded", kind=kind.value)
            return CommitResult(success=True, payloadKind=kind, exitCode=0)

        exitCode = getattr(result.error, 'exitCode', None)
        failure = self._classifyFailure(exitCode)

        logWithContext(
            logger, 'warning', "Privileged commit failed",
            kind=kind.value,
            failure=failure.value,
            exitCode=exitCode,
            error=result.error,
        )
        return CommitResult(
            success=False,
            payloadKind=kind,
            exitCode=exitCode,
            error=str(result.error),
            failure=failure,
        )

    def _classifyFailure(self, exitCode: int | None) -> CommitFailure:
        if exitCode is None:
            return CommitFailure.EXEC_FAILED
        if self.escalationCommand.strip() and exitCode in ESCALATION_DENIED_EXIT_CODES:
            return CommitFailure.PRIVILEGE_DENIED
        return CommitFailure.HELPER_FAILED


# ================================================================================
# Direct Channel
# ================================================================================

class DirectCommitChannel(CommitChannel):
    """
    Commits by writing the authoritative files in-process.

    Applies the same validation as the privileged helper. Every payload is
    recorded in `commits`; setting `failNext` makes the next commit fail
    without touching disk, as a rejecting helper would.

    Example:
        channel = DirectCommitChannel(handler)
        channel.failNext = True
        assert not channel.commitSettings(settings)
    """

    def __init__(
        self,
        handler: ConfigHandler,
        reservedNames: Iterable[str] | None = None
    ):
        """
        Initialize the channel.

        Args:
            handler: ConfigHandler owning the authoritative paths
            reservedNames: Names custom profiles may not use (defaults to built-ins)
        """
        self._handler = handler
        if reservedNames is None:
            reservedNames = [p.name for p in getBuiltinProfiles()]
        self._reservedNames = list(reservedNames)
        self.commits: list[tuple[PayloadKind, Any]] = []
        self.failNext = False

    def commitSettings(self, settings: Settings) -> CommitResult:
        self.commits.append((PayloadKind.SETTINGS, copyConfig(settings)))
        return self._apply(
            PayloadKind.SETTINGS,
            lambda: validateSettings(settings),
            lambda: self._handler.writeSettings(settings, self._handler.settingsPath),
        )

    def commitProfiles(self, profiles: list[Profile]) -> CommitResult:
        self.commits.append((PayloadKind.PROFILES, copyConfig(profiles)))
        return self._apply(
            PayloadKind.PROFILES,
            lambda: validateProfiles(profiles, self._reservedNames),
            lambda: self._handler.writeProfiles(profiles, self._handler.profilesPath),
        )

    def _apply(self, kind: PayloadKind, validate: Any, write: Any) -> CommitResult:
        if self.failNext:
            self.failNext = False
            logger.warning(f"Simulated helper failure | kind={kind.value}")
            return CommitResult(
                success=False,
                payloadKind=kind,
                exitCode=1,
                error='Simulated helper failure',
                failure=CommitFailure.HELPER_FAILED,
            )

        try:
            validate()
        except PayloadValidationError as e:
            return CommitResult(
                success=False,
                payloadKind=kind,
                exitCode=1,
                error=str(e),
                failure=CommitFailure.HELPER_FAILED,
            )

        write()
        logger.info(f"Direct commit written | kind={kind.value}")
        return CommitResult(success=True, payloadKind=kind, exitCode=0)

