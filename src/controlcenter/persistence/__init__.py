################################################################################
# File Name: __init__.py
# Purpose/Description: Persistence subpackage for state files
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
Persistence Subpackage.

This subpackage reads and writes the settings, custom profiles and autosave
files:
- ConfigHandler with strict and NoThrow reads and atomic writes
- Payload validation used by the privileged helper
- Autosave dataclass

Usage:
    from controlcenter.persistence import ConfigHandler

    handler = ConfigHandler(settingsPath, profilesPath, autosavePath)
    settings = handler.readSettingsNoThrow()
"""

from .exceptions import (
    PayloadValidationError,
    PersistenceReadError,
    PersistenceWriteError,
)
from .handler import ConfigHandler
from .types import DEFAULT_FILE_MODE, Autosave
from .validation import validateProfiles, validateSettings

__all__ = [
    'ConfigHandler',
    'Autosave',
    'DEFAULT_FILE_MODE',
    'PersistenceReadError',
    'PersistenceWriteError',
    'PayloadValidationError',
    'validateSettings',
    'validateProfiles',
]
