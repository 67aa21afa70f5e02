################################################################################
# File Name: helpers.py
# Purpose/Description: Factory functions for the sync subpackage
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
Helper functions for the sync subpackage.

Usage:
    from controlcenter.config import loadAppConfig
    from controlcenter.sync.helpers import createConfigSyncServiceFromConfig

    service = createConfigSyncServiceFromConfig(loadAppConfig(configPath))
"""

import logging
from typing import Any

from ..commit.executor import CommandExecutor
from ..commit.helpers import createCommitChannelFromConfig
from ..config.loader import getConfigValue, getFileMode
from ..persistence.handler import ConfigHandler
from .service import ConfigSyncService

logger = logging.getLogger(__name__)


def createConfigHandlerFromConfig(config: dict[str, Any]) -> ConfigHandler:
    """
    Create a ConfigHandler for the configured authoritative files.

    Args:
        config: Validated configuration

    Returns:
        Configured ConfigHandler
    """
    return ConfigHandler(
        settingsPath=getConfigValue(config, 'paths.settingsFile'),
        profilesPath=getConfigValue(config, 'paths.profilesFile'),
        autosavePath=getConfigValue(config, 'paths.autosaveFile'),
        fileMode=getFileMode(config),
    )


def createConfigSyncServiceFromConfig(
    config: dict[str, Any],
    executor: CommandExecutor | None = None
) -> ConfigSyncService:
    """
    Create a ConfigSyncService committing through the privileged helper.

    Args:
        config: Validated configuration
        executor: Optional command executor for the helper invocation

    Returns:
        Resynced ConfigSyncService
    """
    handler = createConfigHandlerFromConfig(config)
    channel = createCommitChannelFromConfig(config, handler, executor=executor)
    service = ConfigSyncService(handler, channel)

    logger.info(f"Config sync service created | settings={handler.settingsPath}")
    return service
