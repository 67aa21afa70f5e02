################################################################################
# File Name: validation.py
# Purpose/Description: Structural validation of staged settings/profile payloads
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
Payload validation for the privileged helper.

The helper runs as root on a file an unprivileged process wrote, so every
staged payload is checked before it replaces an authoritative file. All
problems are collected and reported together.

State-map values are not checked against existing profiles: a dangling
reference left by deleting a custom profile must not block unrelated writes.

Usage:
    from controlcenter.persistence.validation import validateProfiles

    validateProfiles(profiles, reservedNames={'Default'})
"""

import logging
from collections.abc import Iterable

from ..profile.types import Profile
from ..settings.types import Settings
from .exceptions import PayloadValidationError

logger = logging.getLogger(__name__)

# (group, field) -> inclusive (low, high)
PERCENT_RANGES: dict[tuple[str, str], tuple[int, int]] = {
    ('display', 'brightness'): (0, 100),
    ('fan', 'minimumFanspeed'): (0, 100),
    ('fan', 'offsetFanspeed'): (-100, 100),
}

INT_FIELDS: dict[str, tuple[str, ...]] = {
    'display': ('brightness',),
    'cpu': ('onlineCores', 'scalingMinFrequency', 'scalingMaxFrequency'),
    'fan': ('minimumFanspeed', 'offsetFanspeed'),
}

BOOL_FIELDS: dict[str, tuple[str, ...]] = {
    'display': ('useBrightness',),
    'cpu': ('noTurbo',),
    'webcam': ('status', 'useStatus'),
    'fan': ('useControl',),
}


def validateSettings(settings: Settings) -> None:
    """
    Validate a settings payload.

    Args:
        settings: Decoded settings

    Raises:
        PayloadValidationError: If any problem is found
    """
    problems = []

    for stateId, profileName in settings.stateMap.items():
        if not isinstance(stateId, str) or not stateId:
            problems.append(f"state id {stateId!r} is not a non-empty string")
        if not isinstance(profileName, str) or not profileName:
            problems.append(f"state '{stateId}' maps to {profileName!r}, not a profile name")

    for flag in ('cpuSettingsEnabled', 'fanControlEnabled'):
        if not isinstance(getattr(settings, flag), bool):
            problems.append(f"{flag} must be a boolean")

    _raiseIfProblems('settings', problems)


def validateProfiles(
    profiles: list[Profile],
    reservedNames: Iterable[str] = ()
) -> None:
    """
    Validate a custom profile list.

    Args:
        profiles: Decoded custom profiles
        reservedNames: Names custom profiles may not use (the built-ins)

    Raises:
        PayloadValidationError: If any problem is found
    """
    problems = []
    reserved = set(reservedNames)
    seen: set[str] = set()

    for index, profile in enumerate(profiles):
        label = f"profile #{index} '{profile.name}'"

        if not isinstance(profile.name, str) or not profile.name.strip():
            problems.append(f"profile #{index} has an empty name")
        elif profile.name in reserved:
            problems.append(f"{label} uses a built-in profile name")
        elif profile.name in seen:
            problems.append(f"{label} is a duplicate name")
        seen.add(profile.name)

        problems.extend(_validateFields(label, profile))

    _raiseIfProblems('profiles', problems)


def _validateFields(label: str, profile: Profile) -> list[str]:
    """Type and range checks for the parameter groups of one profile."""
    problems = []

    for groupName, fieldNames in INT_FIELDS.items():
        group = getattr(profile, groupName)
        for fieldName in fieldNames:
            value = getattr(group, fieldName)
            if value is None:
                continue
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int):
                problems.append(f"{label}: {groupName}.{fieldName} must be an integer")
                continue
            bounds = PERCENT_RANGES.get((groupName, fieldName))
            if bounds and not bounds[0] <= value <= bounds[1]:
                problems.append(
                    f"{label}: {groupName}.{fieldName}={value} outside {bounds[0]}..{bounds[1]}"
                )

    for groupName, fieldNames in BOOL_FIELDS.items():
        group = getattr(profile, groupName)
        for fieldName in fieldNames:
            value = getattr(group, fieldName)
            if value is not None and not isinstance(value, bool):
                problems.append(f"{label}: {groupName}.{fieldName} must be a boolean")

    return problems


def _raiseIfProblems(kind: str, problems: list[str]) -> None:
    if not problems:
        return
    for problem in problems:
        logger.warning(f"Rejected {kind} payload: {problem}")
    raise PayloadValidationError(
        f"Invalid {kind} payload: {len(problems)} problem(s)",
        problems=problems,
        details={'kind': kind},
    )
