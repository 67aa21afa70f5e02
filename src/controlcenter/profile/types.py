################################################################################
# File Name: types.py
# Purpose/Description: Type definitions for device-behavior profiles
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
Type definitions for the profile subpackage.

Contains:
- Parameter group dataclasses (display, cpu, webcam, fan)
- Profile dataclass bundling the groups under a unique name
- Canonical per-field default values

A field set to None is "unset"; ProfileCatalog.fillDefaults() replaces it with
the canonical default. Keys the files carry but this module does not model
are kept in each object's `extra` mapping and written back unchanged.
Equality is structural and recursive, which is what the edit staging area
relies on for change detection.

This module has no dependencies on other project modules (only stdlib).
"""

from dataclasses import dataclass, field, fields
from typing import Any

# ================================================================================
# Constants
# ================================================================================

# Scaling frequencies / core count of -1 mean "leave at hardware limits"
CPU_UNRESTRICTED = -1

PROFILE_FIELD_DEFAULTS: dict[str, dict[str, Any]] = {
    'display': {
        'brightness': 100,
        'useBrightness': False,
    },
    'cpu': {
        'onlineCores': CPU_UNRESTRICTED,
        'scalingMinFrequency': CPU_UNRESTRICTED,
        'scalingMaxFrequency': CPU_UNRESTRICTED,
        'governor': 'powersave',
        'energyPerformancePreference': 'balance_performance',
        'noTurbo': False,
    },
    'webcam': {
        'status': True,
        'useStatus': False,
    },
    'fan': {
        'useControl': True,
        'fanProfile': 'Balanced',
        'minimumFanspeed': 0,
        'offsetFanspeed': 0,
    },
}

DEFAULT_DESCRIPTION = ''


# ================================================================================
# Parameter Groups
# ================================================================================

@dataclass
class DisplaySettings:
    """Display backlight parameters."""

    brightness: int | None = None
    useBrightness: bool | None = None
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class CpuSettings:
    """
    CPU power parameters.

    Attributes:
        onlineCores: Number of cores kept online (-1 for all)
        scalingMinFrequency: Minimum scaling frequency in kHz (-1 for hardware minimum)
        scalingMaxFrequency: Maximum scaling frequency in kHz (-1 for hardware maximum)
        governor: cpufreq governor name
        energyPerformancePreference: Intel/AMD EPP hint
        noTurbo: Disable turbo boost
        extra: Unmodelled keys, preserved on write
    """

    onlineCores: int | None = None
    scalingMinFrequency: int | None = None
    scalingMaxFrequency: int | None = None
    governor: str | None = None
    energyPerformancePreference: str | None = None
    noTurbo: bool | None = None
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class WebcamSettings:
    """Webcam power switch parameters."""

    status: bool | None = None
    useStatus: bool | None = None
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class FanSettings:
    """
    Fan control parameters.

    The daemon turns these into an actual fan curve; only the parameters are
    modelled here.

    Attributes:
        useControl: Let the daemon drive the fans
        fanProfile: Name of the fan curve preset
        minimumFanspeed: Lower bound of fan speed in percent
        offsetFanspeed: Offset added to the curve in percent
        extra: Unmodelled keys, preserved on write
    """

    useControl: bool | None = None
    fanProfile: str | None = None
    minimumFanspeed: int | None = None
    offsetFanspeed: int | None = None
    extra: dict[str, Any] = field(default_factory=dict)


GROUP_TYPES: dict[str, type] = {
    'display': DisplaySettings,
    'cpu': CpuSettings,
    'webcam': WebcamSettings,
    'fan': FanSettings,
}

EXTRA_FIELD = 'extra'

PROFILE_KEYS = ('name', 'description', *GROUP_TYPES)


def groupToDict(group: Any) -> dict[str, Any]:
    """Parameter group as a dictionary, unmodelled keys first."""
    data = dict(group.extra)
    for f in fields(group):
        if f.name != EXTRA_FIELD:
            data[f.name] = getattr(group, f.name)
    return data


def groupFromDict(groupType: type, data: dict[str, Any]) -> Any:
    """Build a parameter group, keeping keys it does not model in extra."""
    modelled = {f.name for f in fields(groupType)} - {EXTRA_FIELD}
    known = {k: v for k, v in data.items() if k in modelled}
    extra = {k: v for k, v in data.items() if k not in modelled}
    return groupType(**known, extra=extra)


# ================================================================================
# Profile Dataclass
# ================================================================================

@dataclass
class Profile:
    """
    Named bundle of hardware-behavior parameters.

    Attributes:
        name: Unique name across default and custom profiles
        description: Optional free text
        display: Display parameters
        cpu: CPU power parameters
        webcam: Webcam parameters
        fan: Fan control parameters
        extra: Unmodelled top-level keys, preserved on write
    """

    name: str
    description: str | None = None
    display: DisplaySettings = field(default_factory=DisplaySettings)
    cpu: CpuSettings = field(default_factory=CpuSettings)
    webcam: WebcamSettings = field(default_factory=WebcamSettings)
    fan: FanSettings = field(default_factory=FanSettings)
    extra: dict[str, Any] = field(default_factory=dict)

    def toDict(self) -> dict[str, Any]:
        """
        Convert profile to a JSON-compatible dictionary.

        Returns:
            Dictionary representation of the profile
        """
        data = dict(self.extra)
        data['name'] = self.name
        data['description'] = self.description
        for groupName in GROUP_TYPES:
            data[groupName] = groupToDict(getattr(self, groupName))
        return data

    @classmethod
    def fromDict(cls, data: dict[str, Any]) -> 'Profile':
        """
        Create Profile from dictionary.

        Unknown keys are kept in extra and missing keys stay unset.

        Args:
            data: Dictionary with profile data

        Returns:
            Profile instance

        Raises:
            ValueError: If data is not a dict or has no usable name
        """
        if not isinstance(data, dict):
            raise ValueError(f"Profile entry must be an object, got {type(data).__name__}")

        name = data.get('name')
        if not isinstance(name, str) or not name:
            raise ValueError("Profile entry has no name")

        groups = {}
        for groupName, groupType in GROUP_TYPES.items():
            groupData = data.get(groupName) or {}
            if not isinstance(groupData, dict):
                raise ValueError(f"Profile '{name}' has malformed '{groupName}' section")
            groups[groupName] = groupFromDict(groupType, groupData)

        return cls(
            name=name,
            description=data.get('description'),
            **groups,
            extra={k: v for k, v in data.items() if k not in PROFILE_KEYS},
        )
