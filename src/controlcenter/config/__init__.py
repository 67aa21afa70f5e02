################################################################################
# File Name: __init__.py
# Purpose/Description: Application configuration subpackage
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
Application configuration subpackage.

Locations of state files, staging files and the privileged helper, loaded
from an optional JSON file with environment placeholder support.

Usage:
    from controlcenter.config import loadAppConfig, getConfigValue

    config = loadAppConfig('/etc/controlcenter/config.json')
"""

from .exceptions import AppConfigError
from .loader import (
    getConfigValue,
    getFileMode,
    loadAppConfig,
    validateAppConfig,
)
from .types import (
    APP_DEFAULTS,
    DEFAULT_CONFIG_PATH,
    ENVIRONMENT_DEVELOPMENT,
    ENVIRONMENT_PRODUCTION,
)

__all__ = [
    'AppConfigError',
    'loadAppConfig',
    'validateAppConfig',
    'getConfigValue',
    'getFileMode',
    'APP_DEFAULTS',
    'DEFAULT_CONFIG_PATH',
    'ENVIRONMENT_PRODUCTION',
    'ENVIRONMENT_DEVELOPMENT',
]
