################################################################################
# File Name: __init__.py
# Purpose/Description: Common utilities package initialization
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
Common utilities package.

This package provides shared functionality used across the application:
- Configuration validation and defaults
- Environment placeholder resolution
- Logging configuration
- Error classification and handling
- Observer streams for change notifications
- Deep-clone helper for ownership hand-offs

Usage:
    from common.config_validator import ConfigValidator
    from common.env_loader import loadConfigWithEnv
    from common.logging_config import getLogger
    from common.error_handler import PersistenceError
    from common.events import EventStream
"""

from .config_validator import ConfigValidator
from .copy_utils import copyConfig
from .env_loader import loadConfigWithEnv
from .error_handler import (
    ConfigurationError,
    PersistenceError,
    PrivilegeError,
    ValidationError,
    handleError,
)
from .events import EventStream
from .logging_config import getLogger, setupLogging

__all__ = [
    'ConfigValidator',
    'copyConfig',
    'loadConfigWithEnv',
    'getLogger',
    'setupLogging',
    'ConfigurationError',
    'PersistenceError',
    'PrivilegeError',
    'ValidationError',
    'handleError',
    'EventStream',
]
