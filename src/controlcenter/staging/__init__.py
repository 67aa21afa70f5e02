################################################################################
# File Name: __init__.py
# Purpose/Description: Staging subpackage for custom profile edits
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
Staging Subpackage.

This subpackage holds the single in-flight profile edit:
- IdleSession / EditingSession session variants
- EditStagingArea with value-based change detection and commit

Usage:
    from controlcenter.staging import EditStagingArea
"""

from .area import EditStagingArea
from .types import IDLE, EditingSession, EditSession, IdleSession

__all__ = [
    'EditStagingArea',
    'EditSession',
    'EditingSession',
    'IdleSession',
    'IDLE',
]
