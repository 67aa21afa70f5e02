################################################################################
# File Name: types.py
# Purpose/Description: Type definitions for global settings
# Author: Control Center Team
# Creation Date: 2026-10-17
# Copyright: (c) 2026 Control Center Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-17    | CC Team       | Initial implementation
# 2026-10-18    | CC Team       | Keep unmodelled keys on write
# ================================================================================
################################################################################

"""
Type definitions for the settings subpackage.

Contains:
- Settings dataclass holding the state-to-profile map and global switches
- Built-in operating state identifiers

This module has no dependencies on other project modules (only stdlib).
"""

from dataclasses import dataclass, field
from typing import Any

# ================================================================================
# Constants
# ================================================================================

# Built-in operating states; custom trigger ids are plain strings as well
STATE_POWER_AC = 'power_ac'
STATE_POWER_BATTERY = 'power_bat'

DEFAULT_STATE_PROFILE = 'Default'

SETTINGS_KEYS = ('stateMap', 'cpuSettingsEnabled', 'fanControlEnabled')


def getDefaultStateMap() -> dict[str, str]:
    """Fresh state map assigning the default profile to every built-in state."""
    return {
        STATE_POWER_AC: DEFAULT_STATE_PROFILE,
        STATE_POWER_BATTERY: DEFAULT_STATE_PROFILE,
    }


# ================================================================================
# Settings Dataclass
# ================================================================================

@dataclass
class Settings:
    """
    Global settings record.

    Attributes:
        stateMap: Operating state id mapped to the name of the assigned profile
        cpuSettingsEnabled: Let the daemon apply CPU parameters
        fanControlEnabled: Let the daemon apply fan parameters
        extra: Keys the file carries that are not modelled, preserved on write
    """

    stateMap: dict[str, str] = field(default_factory=getDefaultStateMap)
    cpuSettingsEnabled: bool = True
    fanControlEnabled: bool = True
    extra: dict[str, Any] = field(default_factory=dict)

    def toDict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        data = dict(self.extra)
        data.update({
            'stateMap': dict(self.stateMap),
            'cpuSettingsEnabled': self.cpuSettingsEnabled,
            'fanControlEnabled': self.fanControlEnabled,
        })
        return data

    @classmethod
    def fromDict(cls, data: dict[str, Any]) -> 'Settings':
        """
        Create Settings from dictionary.

        Missing keys take their defaults; unknown keys are kept in extra.

        Args:
            data: Dictionary with settings data

        Returns:
            Settings instance

        Raises:
            ValueError: If data or its state map is not an object
        """
        if not isinstance(data, dict):
            raise ValueError(f"Settings must be an object, got {type(data).__name__}")

        stateMap = data.get('stateMap')
        if stateMap is None:
            stateMap = getDefaultStateMap()
        elif not isinstance(stateMap, dict):
            raise ValueError("Settings stateMap must be an object")

        return cls(
            stateMap=dict(stateMap),
            cpuSettingsEnabled=data.get('cpuSettingsEnabled', True),
            fanControlEnabled=data.get('fanControlEnabled', True),
            extra={k: v for k, v in data.items() if k not in SETTINGS_KEYS},
        )
