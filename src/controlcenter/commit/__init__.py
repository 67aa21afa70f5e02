################################################################################
# File Name: __init__.py
# Purpose/Description: Commit subpackage for privileged state changes
# Author: Control Center Team
# Creation Date: 2026-10-17
# Copyright: (c) 2026 Control Center Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-17    | CC Team       | Initial subpackage creation
# ================================================================================
################################################################################
"""
Commit Subpackage.

This subpackage delivers new settings and custom profiles to the daemon:
- CommitChannel port with privileged and direct implementations
- CommandExecutor for synchronous external commands
- CommitResult / ExecResult result types

Usage:
    from controlcenter.commit import createCommitChannelFromConfig

    channel = createCommitChannelFromConfig(config, handler)
    if channel.commitSettings(newSettings):
        ...
"""

from .channel import (
    CommitChannel,
    DirectCommitChannel,
    PrivilegedCommitChannel,
)
from .exceptions import CommandExecutionError
from .executor import CommandExecutor
from .helpers import createCommitChannelFromConfig, resolveDaemonExecPath
from .types import (
    ESCALATION_DENIED_EXIT_CODES,
    FLAG_NEW_PROFILES,
    FLAG_NEW_SETTINGS,
    CommitFailure,
    CommitResult,
    ExecResult,
    PayloadKind,
)

__all__ = [
    # Channels
    'CommitChannel',
    'PrivilegedCommitChannel',
    'DirectCommitChannel',
    # Execution
    'CommandExecutor',
    'CommandExecutionError',
    # Types
    'CommitResult',
    'CommitFailure',
    'ExecResult',
    'PayloadKind',
    'FLAG_NEW_SETTINGS',
    'FLAG_NEW_PROFILES',
    'ESCALATION_DENIED_EXIT_CODES',
    # Factory
    'createCommitChannelFromConfig',
    'resolveDaemonExecPath',
]
