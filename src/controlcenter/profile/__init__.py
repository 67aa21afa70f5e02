################################################################################
# File Name: __init__.py
# Purpose/Description: Profile subpackage for device-behavior profiles
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
Profile Subpackage.

This subpackage contains the profile data model and catalog:
- Profile dataclass and its parameter groups
- Canonical field defaults and the built-in profiles
- ProfileCatalog for enumeration, lookup and default filling

Usage:
    from controlcenter.profile import Profile, ProfileCatalog

    catalog = ProfileCatalog()
    profile = catalog.findByName('Default')
"""

from .catalog import ProfileCatalog
from .defaults import (
    COOL_PROFILE_NAME,
    DEFAULT_PROFILE_NAME,
    POWERSAVE_PROFILE_NAME,
    getBuiltinProfiles,
)
from .types import (
    CPU_UNRESTRICTED,
    GROUP_TYPES,
    PROFILE_FIELD_DEFAULTS,
    CpuSettings,
    DisplaySettings,
    FanSettings,
    Profile,
    WebcamSettings,
)

__all__ = [
    # Dataclasses
    'Profile',
    'DisplaySettings',
    'CpuSettings',
    'WebcamSettings',
    'FanSettings',
    # Constants
    'CPU_UNRESTRICTED',
    'GROUP_TYPES',
    'PROFILE_FIELD_DEFAULTS',
    'DEFAULT_PROFILE_NAME',
    'COOL_PROFILE_NAME',
    'POWERSAVE_PROFILE_NAME',
    # Catalog
    'ProfileCatalog',
    'getBuiltinProfiles',
]
