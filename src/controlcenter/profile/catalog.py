################################################################################
# File Name: catalog.py
# Purpose/Description: ProfileCatalog holding default and custom profiles
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
ProfileCatalog class for the profile subpackage.

Holds the immutable built-in profiles and a read cache of the persisted custom
profiles. The custom cache is only refreshed through replaceCustomProfiles(),
which the synchronization facade calls from resync(). Every getter hands out
deep copies.

Usage:
    from controlcenter.profile.catalog import ProfileCatalog

    catalog = ProfileCatalog()
    catalog.replaceCustomProfiles(handler.readCustomProfilesNoThrow())

    profile = catalog.findByName('Default')
    if profile is None:
        ...
"""

import logging

from common.copy_utils import copyConfig

from .defaults import getBuiltinProfiles
from .types import (
    DEFAULT_DESCRIPTION,
    GROUP_TYPES,
    PROFILE_FIELD_DEFAULTS,
    Profile,
)

logger = logging.getLogger(__name__)


class ProfileCatalog:
    """
    Read cache over default and custom profiles.

    Defaults always come first, in declaration order, followed by the custom
    profiles in persisted order.

    Example:
        catalog = ProfileCatalog()
        names = [p.name for p in catalog.getAllProfiles()]
    """

    def __init__(
        self,
        defaultProfiles: list[Profile] | None = None,
        customProfiles: list[Profile] | None = None
    ):
        """
        Initialize the catalog.

        Args:
            defaultProfiles: Built-in profiles (defaults to the shipped set)
            customProfiles: Initial custom profiles (defaults to none)
        """
        if defaultProfiles is None:
            defaultProfiles = getBuiltinProfiles()

        self._defaultProfiles: list[Profile] = copyConfig(defaultProfiles)
        for profile in self._defaultProfiles:
            self.fillDefaults(profile)

        self._customProfiles: list[Profile] = copyConfig(customProfiles or [])

    # ================================================================================
    # Cache Refresh
    # ================================================================================

    def replaceCustomProfiles(self, profiles: list[Profile]) -> None:
        """
        Replace the cached custom profiles.

        Args:
            profiles: Freshly read custom profiles
        """
        self._customProfiles = copyConfig(profiles)
        logger.debug(f"Custom profile cache refreshed | count={len(profiles)}")

    # ================================================================================
    # Enumeration
    # ================================================================================

    def getDefaultProfiles(self) -> list[Profile]:
        """Deep copies of the built-in profiles in declaration order."""
        return copyConfig(self._defaultProfiles)

    def getCustomProfiles(self) -> list[Profile]:
        """Deep copies of the custom profiles in persisted order."""
        return copyConfig(self._customProfiles)

    def getAllProfiles(self) -> list[Profile]:
        """Defaults followed by customs, deep copied."""
        return copyConfig(self._defaultProfiles + self._customProfiles)

    def getProfileNames(self) -> list[str]:
        """Names of all profiles in enumeration order."""
        return [p.name for p in self._defaultProfiles + self._customProfiles]

    # ================================================================================
    # Lookup
    # ================================================================================

    def findByName(self, name: str) -> Profile | None:
        """
        Look up a profile by exact, case-sensitive name.

        Args:
            name: Profile name

        Returns:
            Deep copy of the profile, or None if no profile has that name
        """
        for profile in self._defaultProfiles + self._customProfiles:
            if profile.name == name:
                return copyConfig(profile)
        return None

    def findCustomByName(self, name: str) -> Profile | None:
        """
        Look up a custom profile by exact name.

        Args:
            name: Profile name

        Returns:
            Deep copy of the custom profile, or None if not a custom profile
        """
        index = self.indexOfCustom(name)
        if index == -1:
            return None
        return copyConfig(self._customProfiles[index])

    def indexOfCustom(self, name: str) -> int:
        """
        Position of a custom profile in persisted order.

        Args:
            name: Profile name

        Returns:
            Index of the first match, -1 if absent
        """
        for index, profile in enumerate(self._customProfiles):
            if profile.name == name:
                return index
        return -1

    def getCustomAt(self, index: int) -> Profile | None:
        """Deep copy of the custom profile at index, None if out of range."""
        if 0 <= index < len(self._customProfiles):
            return copyConfig(self._customProfiles[index])
        return None

    def isCustomProfile(self, name: str) -> bool:
        """True if name belongs to a custom profile."""
        return self.indexOfCustom(name) != -1

    def isDefaultProfile(self, name: str) -> bool:
        """True if name belongs to a built-in profile."""
        return any(p.name == name for p in self._defaultProfiles)

    def profileExists(self, name: str) -> bool:
        """True if name is taken by a default or custom profile."""
        return self.isDefaultProfile(name) or self.isCustomProfile(name)

    # ================================================================================
    # Defaults
    # ================================================================================

    @staticmethod
    def fillDefaults(profile: Profile) -> Profile:
        """
        Set every unset field of a profile to its canonical default.

        Mutates the profile in place. Fields that already hold a value are
        left untouched; a missing parameter group is recreated.

        Args:
            profile: Profile to complete

        Returns:
            The same profile object, for chaining
        """
        if profile.description is None:
            profile.description = DEFAULT_DESCRIPTION

        for groupName, groupType in GROUP_TYPES.items():
            group = getattr(profile, groupName, None)
            if group is None:
                group = groupType()
                setattr(profile, groupName, group)

            for fieldName, defaultValue in PROFILE_FIELD_DEFAULTS[groupName].items():
                if getattr(group, fieldName) is None:
                    setattr(group, fieldName, copyConfig(defaultValue))

        return profile
