################################################################################
# File Name: area.py
# Purpose/Description: EditStagingArea for checking out and committing profiles
# Author: Control Center Team
# Creation Date: 2026-10-17
# Copyright: (c) 2026 Control Center Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-17    | CC Team       | Initial implementation
# 2026-10-18    | CC Team       | Handle commit after the edited profile is deleted
# ================================================================================
################################################################################

"""
EditStagingArea class for the staging subpackage.

Holds at most one custom profile checked out for editing. The working copy is
handed to the caller (typically UI bindings) and mutated directly; changes are
detected by comparing it field by field with the last synchronized custom
profile at the staged index, never by a dirty flag.

State machine:
    Idle --beginEdit(custom name)--> Editing
    Editing --beginEdit(other custom name)--> Editing (previous copy discarded)
    any --beginEdit(None or unknown name)--> Idle
    Editing --commit() succeeds--> Idle (then resync)
    Editing --commit() fails--> Editing (working copy intact)

Usage:
    from controlcenter.staging.area import EditStagingArea

    staging = EditStagingArea(catalog, channel, resyncCallback=service.resync)
    staging.beginEdit('Performance')
    staging.getWorkingCopy().fan.minimumFanspeed = 80
    if staging.hasChanges():
        staging.commit()
"""

import logging
from collections.abc import Callable

from common.copy_utils import copyConfig
from common.events import EventStream

from ..commit.channel import CommitChannel
from ..profile.catalog import ProfileCatalog
from ..profile.types import Profile
from .types import IDLE, EditingSession, EditSession

logger = logging.getLogger(__name__)

# Staged index of a session whose saved entry has been deleted
REMOVED_INDEX = -1


class EditStagingArea:
    """
    Single-slot staging area for custom profile edits.

    Attributes:
        editingChanged: Stream receiving the new working copy on beginEdit and
            None whenever the session is cleared or committed

    Example:
        staging = EditStagingArea(catalog, channel)
        if staging.beginEdit('Gaming'):
            staging.getWorkingCopy().cpu.noTurbo = True
    """

    def __init__(
        self,
        catalog: ProfileCatalog,
        channel: CommitChannel,
        resyncCallback: Callable[[], None] | None = None
    ):
        """
        Initialize the staging area.

        Args:
            catalog: Catalog holding the last synchronized custom profiles
            channel: Commit channel for writing the edited list
            resyncCallback: Called after a successful commit
        """
        self._catalog = catalog
        self._channel = channel
        self._resyncCallback = resyncCallback
        self._session: EditSession = IDLE
        self.editingChanged: EventStream[Profile | None] = EventStream('editing profile')

    def setResyncCallback(self, callback: Callable[[], None]) -> None:
        """
        Set the callback run after a successful commit.

        Args:
            callback: Usually the facade's resync()
        """
        self._resyncCallback = callback

    # ================================================================================
    # Session
    # ================================================================================

    def beginEdit(self, name: str | None) -> bool:
        """
        Check out a custom profile for editing.

        Any uncommitted session is discarded without confirmation.

        Args:
            name: Custom profile name, or None to clear the session

        Returns:
            True if a session was started, False if the session is now idle
        """
        if isinstance(self._session, EditingSession) and self.hasChanges():
            logger.warning(
                f"Discarding uncommitted changes to '{self._session.workingCopy.name}'"
            )

        index = self._catalog.indexOfCustom(name) if name is not None else -1
        if index == -1:
            if name is not None:
                logger.info(f"Cannot edit '{name}': not a custom profile")
            self._clear()
            return False

        workingCopy = self._catalog.getCustomAt(index)
        self._session = EditingSession(index=index, workingCopy=workingCopy)
        logger.debug(f"Editing profile '{name}' | index={index}")
        self.editingChanged.publish(workingCopy)
        return True

    def getSession(self) -> EditSession:
        """Current session variant."""
        return self._session

    def isEditing(self) -> bool:
        """True while a profile is checked out."""
        return isinstance(self._session, EditingSession)

    def getWorkingCopy(self) -> Profile | None:
        """
        The live working copy.

        Returns:
            The session's own Profile object (mutate it to edit), None if idle
        """
        if isinstance(self._session, EditingSession):
            return self._session.workingCopy
        return None

    def getStagedIndex(self) -> int:
        """Custom list index being edited, -1 if idle or the entry was deleted."""
        if isinstance(self._session, EditingSession):
            return self._session.index
        return -1

    def customProfileRemoved(self, index: int) -> None:
        """
        Keep the staged index on the same entry after a custom profile is deleted.

        Args:
            index: Position the deleted profile had in the custom list
        """
        if not isinstance(self._session, EditingSession):
            return

        if index < self._session.index:
            self._session.index -= 1
        elif index == self._session.index:
            logger.warning(
                f"Profile '{self._session.workingCopy.name}' was deleted while being edited"
            )
            self._session.index = REMOVED_INDEX

    # ================================================================================
    # Change Detection
    # ================================================================================

    def hasChanges(self) -> bool:
        """
        Compare the working copy with the last synchronized profile.

        Returns:
            True if any field differs (or the staged entry no longer exists),
            False if equal or idle
        """
        if not isinstance(self._session, EditingSession):
            return False

        savedProfile = self._catalog.getCustomAt(self._session.index)
        if savedProfile is None:
            return True

        return self._session.workingCopy != savedProfile

    # ================================================================================
    # Commit
    # ================================================================================

    def commit(self) -> bool:
        """
        Write the working copy back through the commit channel.

        If the staged entry was deleted since the edit began, the working copy
        is appended as a new custom profile unless its name is taken by then.

        Returns:
            True if committed; False if idle, unchanged, the name is taken,
            or the channel failed

        Raises:
            PersistenceWriteError: If the payload cannot be staged; the
                session is left intact
        """
        if not isinstance(self._session, EditingSession):
            logger.debug("Nothing to commit: no profile is being edited")
            return False

        if not self.hasChanges():
            logger.debug("Nothing to commit: working copy is unchanged")
            return False

        session = self._session
        newProfiles = self._catalog.getCustomProfiles()
        if 0 <= session.index < len(newProfiles):
            newProfiles[session.index] = copyConfig(session.workingCopy)
        elif self._catalog.profileExists(session.workingCopy.name):
            logger.warning(
                f"Edited profile '{session.workingCopy.name}' was removed and its "
                f"name is now taken, not committing"
            )
            return False
        else:
            # Staged entry was deleted meanwhile; the edit re-creates it
            newProfiles.append(copyConfig(session.workingCopy))

        result = self._channel.commitProfiles(newProfiles)
        if not result:
            logger.warning(
                f"Commit of '{session.workingCopy.name}' failed, keeping working copy"
            )
            return False

        logger.info(f"Committed profile '{session.workingCopy.name}'")
        self._clear()
        if self._resyncCallback is not None:
            self._resyncCallback()
        return True

    # ================================================================================
    # Private Methods
    # ================================================================================

    def _clear(self) -> None:
        self._session = IDLE
        self.editingChanged.publish(None)
