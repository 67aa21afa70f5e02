################################################################################
# File Name: __init__.py
# Purpose/Description: Sync subpackage, front-end facade over settings and profiles
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
Sync Subpackage.

This subpackage contains:
- ConfigSyncService facade with resync and observers
- Factory functions building the service from configuration

Usage:
    from controlcenter.sync import createConfigSyncServiceFromConfig
"""

from .helpers import createConfigHandlerFromConfig, createConfigSyncServiceFromConfig
from .service import ConfigSyncService

__all__ = [
    'ConfigSyncService',
    'createConfigHandlerFromConfig',
    'createConfigSyncServiceFromConfig',
]
