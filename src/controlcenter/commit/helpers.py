################################################################################
# File Name: helpers.py
# Purpose/Description: Factory and path helpers for commit channels
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
Helper functions for the commit subpackage.

Provides:
- Daemon executable resolution for production and development installs
- Factory creating a PrivilegedCommitChannel from configuration

Usage:
    from controlcenter.commit.helpers import createCommitChannelFromConfig

    channel = createCommitChannelFromConfig(config, handler)
"""

import logging
import os
from typing import Any

from ..config.loader import getConfigValue
from ..config.types import ENVIRONMENT_PRODUCTION
from ..persistence.handler import ConfigHandler
from .channel import PrivilegedCommitChannel
from .executor import CommandExecutor

logger = logging.getLogger(__name__)


def resolveDaemonExecPath(config: dict[str, Any], cwd: str | None = None) -> str:
    """
    Resolve the daemon executable re-invoked as the privileged helper.

    Production installs use daemon.execPath. Development checkouts use
    daemon.devExecPath relative to the working directory.

    Args:
        config: Validated configuration
        cwd: Working directory for development paths (defaults to os.getcwd())

    Returns:
        Absolute or configured path of the daemon executable
    """
    environment = getConfigValue(config, 'application.environment', ENVIRONMENT_PRODUCTION)
    if environment == ENVIRONMENT_PRODUCTION:
        return getConfigValue(config, 'daemon.execPath')

    devPath = getConfigValue(config, 'daemon.devExecPath')
    if os.path.isabs(devPath):
        return devPath
    return os.path.join(cwd or os.getcwd(), devPath)


def createCommitChannelFromConfig(
    config: dict[str, Any],
    handler: ConfigHandler,
    executor: CommandExecutor | None = None
) -> PrivilegedCommitChannel:
    """
    Create a PrivilegedCommitChannel from configuration.

    Args:
        config: Validated configuration
        handler: ConfigHandler used to stage payloads
        executor: Optional executor (defaults to one honouring
            daemon.commandTimeoutSeconds)

    Returns:
        Configured PrivilegedCommitChannel
    """
    if executor is None:
        executor = CommandExecutor(
            timeoutSeconds=getConfigValue(config, 'daemon.commandTimeoutSeconds')
        )

    daemonExecPath = resolveDaemonExecPath(config)
    channel = PrivilegedCommitChannel(
        handler,
        daemonExecPath,
        executor=executor,
        escalationCommand=getConfigValue(config, 'privilege.escalationCommand', ''),
        tmpSettingsPath=getConfigValue(config, 'paths.tmpSettingsFile'),
        tmpProfilesPath=getConfigValue(config, 'paths.tmpProfilesFile'),
    )

    logger.info(f"Commit channel created | helper={daemonExecPath}")
    return channel
