################################################################################
# File Name: __init__.py
# Purpose/Description: Settings subpackage for global settings
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
Settings Subpackage.

This subpackage contains the global settings model:
- Settings dataclass with the state-to-profile map
- SettingsModel read cache with copy-modify-replace changes

Usage:
    from controlcenter.settings import Settings, SettingsModel
"""

from .model import SettingsModel
from .types import (
    DEFAULT_STATE_PROFILE,
    STATE_POWER_AC,
    STATE_POWER_BATTERY,
    Settings,
    getDefaultStateMap,
)

__all__ = [
    'Settings',
    'SettingsModel',
    'STATE_POWER_AC',
    'STATE_POWER_BATTERY',
    'DEFAULT_STATE_PROFILE',
    'getDefaultStateMap',
]
