################################################################################
# File Name: types.py
# Purpose/Description: Type definitions for the persistence layer
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
Type definitions for the persistence subpackage.

Contains:
- Autosave dataclass for daemon-maintained runtime values
- File mode and encoding constants
"""

from dataclasses import dataclass
from typing import Any

DEFAULT_FILE_MODE = 0o644
FILE_ENCODING = 'utf-8'
JSON_INDENT = 2

DEFAULT_AUTOSAVE_BRIGHTNESS = 100


@dataclass
class Autosave:
    """
    Values the daemon saves on its own between sessions.

    Attributes:
        displayBrightness: Last display brightness in percent
    """

    displayBrightness: int = DEFAULT_AUTOSAVE_BRIGHTNESS

    def toDict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        return {'displayBrightness': self.displayBrightness}

    @classmethod
    def fromDict(cls, data: dict[str, Any]) -> 'Autosave':
        """
        Create Autosave from dictionary.

        Raises:
            ValueError: If data is not an object
        """
        if not isinstance(data, dict):
            raise ValueError(f"Autosave must be an object, got {type(data).__name__}")
        return cls(
            displayBrightness=int(data.get('displayBrightness', DEFAULT_AUTOSAVE_BRIGHTNESS)),
        )
