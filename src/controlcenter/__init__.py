################################################################################
# File Name: __init__.py
# Purpose/Description: Control Center configuration synchronization package
# Author: Control Center Team
# Creation Date: 2026-10-17
# Copyright: (c) 2026 Control Center Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-17    | CC Team       | Initial package creation
# ================================================================================
################################################################################
"""
Control Center configuration synchronization.

Keeps the front-end's view of hardware profiles and per-state settings in
step with the authoritative files owned by the privileged daemon.

Subpackages:
- profile: Profile types, built-in profiles and the catalog
- settings: Settings record and read cache
- persistence: File reads/writes and payload validation
- staging: Single in-flight profile edit
- commit: Commit channels and the privileged helper invocation
- sync: ConfigSyncService facade
- config: Application configuration
- daemon: controlcenterd helper entry point

Usage:
    from controlcenter.config import loadAppConfig
    from controlcenter.sync import createConfigSyncServiceFromConfig

    service = createConfigSyncServiceFromConfig(loadAppConfig())
"""

__version__ = '1.0.0'
