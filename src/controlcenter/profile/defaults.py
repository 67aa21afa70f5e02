################################################################################
# File Name: defaults.py
# Purpose/Description: Built-in default profiles shipped with the application
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
Built-in default profiles.

Declaration order is the enumeration order shown to the user. Built-ins only
set the fields that distinguish them; ProfileCatalog fills the rest.
"""

from .types import (
    CpuSettings,
    DisplaySettings,
    FanSettings,
    Profile,
)

DEFAULT_PROFILE_NAME = 'Default'
COOL_PROFILE_NAME = 'Cool and breezy'
POWERSAVE_PROFILE_NAME = 'Powersave extreme'


def getBuiltinProfiles() -> list[Profile]:
    """
    Build fresh instances of the built-in profiles.

    Returns:
        New list of new Profile objects, in declaration order
    """
    return [
        Profile(
            name=DEFAULT_PROFILE_NAME,
            description='Balanced settings for everyday use',
        ),
        Profile(
            name=COOL_PROFILE_NAME,
            description='Lower clocks and quieter fans',
            cpu=CpuSettings(
                governor='powersave',
                energyPerformancePreference='balance_power',
                noTurbo=False,
            ),
            fan=FanSettings(
                fanProfile='Quiet',
            ),
        ),
        Profile(
            name=POWERSAVE_PROFILE_NAME,
            description='Maximum battery life',
            display=DisplaySettings(
                brightness=60,
                useBrightness=True,
            ),
            cpu=CpuSettings(
                scalingMaxFrequency=1200000,
                governor='powersave',
                energyPerformancePreference='power',
                noTurbo=True,
            ),
            fan=FanSettings(
                fanProfile='Silent',
            ),
        ),
    ]
