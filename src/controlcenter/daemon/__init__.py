################################################################################
# File Name: __init__.py
# Purpose/Description: Daemon subpackage, privileged helper side of commits
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
Daemon Subpackage.

This subpackage contains the privileged side of a commit:
- applyNewSettings / applyNewProfiles adopting staged payloads
- requestDaemonReload signalling the running daemon
- The controlcenterd command-line entry point (daemon.main)

Usage:
    from controlcenter.daemon import applyNewSettings
"""

from .helper import applyNewProfiles, applyNewSettings, requestDaemonReload

__all__ = [
    'applyNewSettings',
    'applyNewProfiles',
    'requestDaemonReload',
]
