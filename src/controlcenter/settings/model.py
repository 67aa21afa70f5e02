################################################################################
# File Name: model.py
# Purpose/Description: SettingsModel holding the cached global settings
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
SettingsModel class for the settings subpackage.

Keeps a read cache of the authoritative settings record. Changes are never
applied to the cache: the model builds a modified copy and hands it to the
commit channel, and the cache only changes when the facade resyncs from disk.

Usage:
    from controlcenter.settings.model import SettingsModel

    model = SettingsModel(channel)
    model.replaceSettings(handler.readSettingsNoThrow())
    result = model.setProfileForState('power_bat', 'Powersave extreme')
"""

import logging
from typing import TYPE_CHECKING

from common.copy_utils import copyConfig

from .types import Settings

if TYPE_CHECKING:
    from ..commit.channel import CommitChannel
    from ..commit.types import CommitResult

logger = logging.getLogger(__name__)


class SettingsModel:
    """
    Read cache over the global settings record.

    Example:
        model = SettingsModel(channel)
        newSettings = model.buildSettingsForState('power_ac', 'Default')
    """

    def __init__(self, channel: 'CommitChannel', settings: Settings | None = None):
        """
        Initialize the settings model.

        Args:
            channel: Commit channel used to persist new settings
            settings: Initial cached settings (defaults to Settings())
        """
        self._channel = channel
        self._settings = copyConfig(settings) if settings is not None else Settings()

    # ================================================================================
    # Cache Access
    # ================================================================================

    def getSettings(self) -> Settings:
        """Deep copy of the cached settings."""
        return copyConfig(self._settings)

    def getProfileNameForState(self, stateId: str) -> str | None:
        """
        Name of the profile assigned to a state.

        Args:
            stateId: Operating state identifier

        Returns:
            Profile name, or None if the state has no assignment
        """
        return self._settings.stateMap.get(stateId)

    def replaceSettings(self, settings: Settings) -> None:
        """
        Replace the cached settings.

        Args:
            settings: Freshly read settings
        """
        self._settings = copyConfig(settings)
        logger.debug(f"Settings cache refreshed | states={len(settings.stateMap)}")

    # ================================================================================
    # Changes
    # ================================================================================

    def buildSettingsForState(self, stateId: str, profileName: str) -> Settings:
        """
        Build new settings with one state reassigned.

        Args:
            stateId: Operating state identifier
            profileName: Profile to assign

        Returns:
            Modified copy; the cache is untouched
        """
        newSettings = copyConfig(self._settings)
        newSettings.stateMap[stateId] = profileName
        return newSettings

    def setProfileForState(self, stateId: str, profileName: str) -> 'CommitResult':
        """
        Assign a profile to a state through the commit channel.

        Args:
            stateId: Operating state identifier
            profileName: Profile to assign

        Returns:
            Result of the privileged commit

        Raises:
            PersistenceWriteError: If the staged payload cannot be written
        """
        newSettings = self.buildSettingsForState(stateId, profileName)
        logger.info(f"Assigning profile '{profileName}' to state '{stateId}'")
        return self._channel.commitSettings(newSettings)
