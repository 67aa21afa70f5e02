################################################################################
# File Name: service.py
# Purpose/Description: ConfigSyncService facade over settings and profiles
# Author: Control Center Team
# Creation Date: 2026-10-17
# Copyright: (c) 2026 Control Center Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-17    | CC Team       | Initial implementation
# 2026-10-18    | CC Team       | Re-anchor edit session after deletions
# ================================================================================
################################################################################

"""
ConfigSyncService class for the sync subpackage.

Single entry point for front-end code. Owns the persistence handler, the
profile catalog, the settings model, the edit staging area and the commit
channel, and keeps their caches in step with the authoritative files.

Every change follows the same cycle:
    1. Build a modified copy of the last resynced state
    2. Hand it to the commit channel (blocks while the helper runs)
    3. On success, resync() re-reads the authoritative files

resync() is the only method that mutates the caches. A failed commit leaves
them untouched.

Usage:
    from controlcenter.sync.service import ConfigSyncService

    service = ConfigSyncService(handler, channel)
    unsubscribe = service.observeSettings(lambda s: print(s.stateMap))

    if service.copyProfile('Default', 'Gaming'):
        service.setActiveProfile('Gaming', 'power_ac')
"""

import logging
from collections.abc import Callable
from typing import Any

from common.copy_utils import copyConfig
from common.events import EventStream

from ..commit.channel import CommitChannel
from ..commit.types import CommitResult
from ..persistence.handler import ConfigHandler
from ..persistence.types import Autosave
from ..profile.catalog import ProfileCatalog
from ..profile.types import Profile
from ..settings.model import SettingsModel
from ..settings.types import Settings
from ..staging.area import EditStagingArea

logger = logging.getLogger(__name__)


class ConfigSyncService:
    """
    Synchronization facade for settings and profiles.

    Attributes:
        settingsChanged: Stream receiving a settings copy once per resync()

    Example:
        service = ConfigSyncService(handler, DirectCommitChannel(handler))
        service.setCurrentEditingProfile('Gaming')
        service.getCurrentEditingProfile().fan.offsetFanspeed = 10
        service.writeCurrentEditingProfile()
    """

    def __init__(
        self,
        handler: ConfigHandler,
        channel: CommitChannel,
        catalog: ProfileCatalog | None = None
    ):
        """
        Initialize the service and perform the first resync.

        Args:
            handler: ConfigHandler owning the authoritative files
            channel: Commit channel for all writes
            catalog: Profile catalog (defaults to one with the built-in profiles)
        """
        self._handler = handler
        self._channel = channel
        self._catalog = catalog or ProfileCatalog()
        self._settingsModel = SettingsModel(channel)
        self._staging = EditStagingArea(self._catalog, channel, resyncCallback=self.resync)
        self._autosave = Autosave()

        self.settingsChanged: EventStream[Settings] = EventStream('settings')

        self.resync()

    # ================================================================================
    # Synchronization
    # ================================================================================

    def resync(self) -> None:
        """
        Re-read the authoritative files and refresh every cache.

        Unreadable files fall back to defaults. Publishes once on the
        settings stream.
        """
        settings = self._handler.readSettingsNoThrow()
        customProfiles = self._handler.readCustomProfilesNoThrow()
        self._autosave = self._handler.readAutosaveNoThrow()

        self._settingsModel.replaceSettings(settings)
        self._catalog.replaceCustomProfiles(customProfiles)

        logger.debug(f"Resynced | customProfiles={len(customProfiles)}")
        self.settingsChanged.publish(self._settingsModel.getSettings())

    def observeSettings(self, callback: Callable[[Settings], Any]) -> Callable[[], None]:
        """
        Subscribe to settings changes.

        Args:
            callback: Called with a settings copy after every resync

        Returns:
            Function that removes the subscription
        """
        return self.settingsChanged.subscribe(callback)

    def observeEditingProfile(
        self,
        callback: Callable[[Profile | None], Any]
    ) -> Callable[[], None]:
        """
        Subscribe to editing session changes.

        Args:
            callback: Called with the new working copy, or None when cleared

        Returns:
            Function that removes the subscription
        """
        return self._staging.editingChanged.subscribe(callback)

    # ================================================================================
    # Read Access
    # ================================================================================

    def getSettings(self) -> Settings:
        return self._settingsModel.getSettings()

    def getDefaultProfiles(self) -> list[Profile]:
        return self._catalog.getDefaultProfiles()

    def getCustomProfiles(self) -> list[Profile]:
        return self._catalog.getCustomProfiles()

    def getAllProfiles(self) -> list[Profile]:
        return self._catalog.getAllProfiles()

    def getProfileByName(self, name: str) -> Profile | None:
        return self._catalog.findByName(name)

    def getCustomProfileByName(self, name: str) -> Profile | None:
        return self._catalog.findCustomByName(name)

    def getAutosave(self) -> Autosave:
        """Copy of the autosave record read at the last resync."""
        return copyConfig(self._autosave)

    # ================================================================================
    # Settings Changes
    # ================================================================================

    def setActiveProfile(self, profileName: str, stateId: str) -> bool:
        """
        Assign a profile to an operating state.

        Args:
            profileName: Default or custom profile name
            stateId: Operating state identifier (e.g. 'power_bat')

        Returns:
            True if committed, False if the profile doesn't exist or the
            commit failed

        Raises:
            PersistenceWriteError: If the staged payload cannot be written
        """
        if not self._catalog.profileExists(profileName):
            logger.info(f"Cannot activate '{profileName}': profile not found")
            return False

        result = self._settingsModel.setProfileForState(stateId, profileName)
        return self._finishCommit(result)

    # ================================================================================
    # Profile Changes
    # ================================================================================

    def copyProfile(self, sourceName: str, newName: str) -> bool:
        """
        Append a renamed copy of a profile to the custom list.

        Args:
            sourceName: Default or custom profile to copy
            newName: Name of the new custom profile

        Returns:
            True if committed; False if the source is missing, the new name is
            empty or taken, or the commit failed

        Raises:
            PersistenceWriteError: If the staged payload cannot be written
        """
        newProfile = self._catalog.findByName(sourceName)
        if newProfile is None:
            logger.info(f"Cannot copy '{sourceName}': profile not found")
            return False

        if not newName or not newName.strip():
            logger.info("Cannot copy profile: new name is empty")
            return False

        if self._catalog.profileExists(newName):
            logger.info(f"Cannot copy '{sourceName}': '{newName}' already exists")
            return False

        newProfile.name = newName
        newProfiles = self._catalog.getCustomProfiles()
        newProfiles.append(newProfile)

        logger.info(f"Copying profile '{sourceName}' to '{newName}'")
        return self._finishCommit(self._channel.commitProfiles(newProfiles))

    def deleteCustomProfile(self, name: str) -> bool:
        """
        Remove a custom profile.

        Args:
            name: Custom profile name; default profiles are never removed

        Returns:
            True if committed, False if not a custom profile or the commit failed

        Raises:
            PersistenceWriteError: If the staged payload cannot be written
        """
        index = self._catalog.indexOfCustom(name)
        if index == -1:
            logger.info(f"Cannot delete '{name}': not a custom profile")
            return False

        newProfiles = self._catalog.getCustomProfiles()
        del newProfiles[index]

        logger.info(f"Deleting profile '{name}'")
        result = self._channel.commitProfiles(newProfiles)
        if result:
            self._staging.customProfileRemoved(index)
        return self._finishCommit(result)

    def pkexecWriteCustomProfiles(self, profiles: list[Profile]) -> bool:
        """
        Commit a complete custom profile list as given.

        Args:
            profiles: New custom profile list

        Returns:
            True if committed

        Raises:
            PersistenceWriteError: If the staged payload cannot be written
        """
        return self._finishCommit(self._channel.commitProfiles(copyConfig(profiles)))

    # ================================================================================
    # Editing Session
    # ================================================================================

    def setCurrentEditingProfile(self, name: str | None) -> bool:
        """
        Check out a custom profile for editing, or clear the session with None.

        Returns:
            True if a custom profile is now being edited
        """
        return self._staging.beginEdit(name)

    def getCurrentEditingProfile(self) -> Profile | None:
        """Live working copy of the profile being edited, None if idle."""
        return self._staging.getWorkingCopy()

    def editProfileChanges(self) -> bool:
        """True if the working copy differs from the saved profile."""
        return self._staging.hasChanges()

    def writeCurrentEditingProfile(self) -> bool:
        """
        Commit the working copy.

        Returns:
            True if committed; the session is then idle and caches resynced

        Raises:
            PersistenceWriteError: If the staged payload cannot be written
        """
        return self._staging.commit()

    # ================================================================================
    # Private Methods
    # ================================================================================

    def _finishCommit(self, result: CommitResult) -> bool:
        if not result:
            logger.warning(
                f"Commit failed | kind={result.payloadKind.value} | error={result.error}"
            )
            return False

        self.resync()
        return True
