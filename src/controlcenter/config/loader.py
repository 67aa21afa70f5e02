################################################################################
# File Name: loader.py
# Purpose/Description: Application configuration loading and validation
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
Application configuration loader.

Loads the optional JSON config file, resolves ${VAR} placeholders, applies
defaults and checks value types. Both the front-end and the privileged helper
load the same file so they agree on file locations.

Usage:
    from controlcenter.config.loader import loadAppConfig, getConfigValue

    config = loadAppConfig('/etc/controlcenter/config.json')
    settingsFile = getConfigValue(config, 'paths.settingsFile')
"""

import json
import logging
from pathlib import Path
from typing import Any

from common.config_validator import (
    ConfigValidationError,
    ConfigValidator,
    getNestedValue,
)
from common.env_loader import loadConfigWithEnv, loadEnvFile

from .exceptions import AppConfigError
from .types import (
    APP_DEFAULTS,
    OPTIONAL_NUMBER_KEYS,
    OPTIONAL_STRING_KEYS,
    STRING_KEYS,
    VALID_ENVIRONMENTS,
)

logger = logging.getLogger(__name__)


def loadAppConfig(
    configPath: str | None = None,
    envPath: str | None = None
) -> dict[str, Any]:
    """
    Load and validate the application configuration.

    A missing config file is not an error: every key has a default.

    Args:
        configPath: Path to the JSON config file, None for defaults only
        envPath: Optional .env file for placeholder resolution

    Returns:
        Validated configuration dictionary

    Raises:
        AppConfigError: If the file is malformed or values are invalid
    """
    rawConfig: dict[str, Any] = {}

    if configPath is not None and Path(configPath).exists():
        try:
            rawConfig = loadConfigWithEnv(configPath, envPath)
        except json.JSONDecodeError as e:
            raise AppConfigError(
                f"Invalid JSON in configuration file {configPath}: {e}",
                details={'path': configPath}
            ) from e
        except OSError as e:
            raise AppConfigError(
                f"Cannot read configuration file {configPath}: {e}",
                details={'path': configPath}
            ) from e

        if not isinstance(rawConfig, dict):
            raise AppConfigError(
                f"Configuration file {configPath} must contain an object",
                details={'path': configPath}
            )
    else:
        if configPath is not None:
            logger.warning(f"Configuration file not found, using defaults: {configPath}")
        loadEnvFile(envPath)

    return validateAppConfig(rawConfig)


def validateAppConfig(config: dict[str, Any]) -> dict[str, Any]:
    """
    Apply defaults and check value types.

    Args:
        config: Raw configuration dictionary (modified in place)

    Returns:
        Validated configuration

    Raises:
        AppConfigError: If any value has the wrong type
    """
    validator = ConfigValidator(defaults=APP_DEFAULTS)

    try:
        config = validator.validate(config)
    except ConfigValidationError as e:
        raise AppConfigError(str(e), invalidFields=e.missingFields) from e

    invalidFields = [
        key for key in STRING_KEYS
        if not validator.validateField(config, key, str)
    ]
    invalidFields.extend(
        key for key in OPTIONAL_NUMBER_KEYS
        if not validator.validateField(config, key, (int, float), allowNone=True)
    )
    invalidFields.extend(
        key for key in OPTIONAL_STRING_KEYS
        if not validator.validateField(config, key, str, allowNone=True)
    )

    environment = getNestedValue(config, 'application.environment')
    if environment not in VALID_ENVIRONMENTS and 'application.environment' not in invalidFields:
        invalidFields.append('application.environment')

    if 'paths.fileMode' not in invalidFields:
        try:
            int(getNestedValue(config, 'paths.fileMode'), 8)
        except ValueError:
            invalidFields.append('paths.fileMode')

    if invalidFields:
        raise AppConfigError(
            f"Invalid configuration values: {', '.join(invalidFields)}",
            invalidFields=invalidFields
        )

    logger.debug("Application configuration validated")
    return config


def getConfigValue(config: dict[str, Any], key: str, default: Any = None) -> Any:
    """
    Read a dot-notation key from a validated configuration.

    Args:
        config: Validated configuration
        key: Dot-notation key (e.g., 'paths.settingsFile')
        default: Returned when the key is absent

    Returns:
        Configured value or default
    """
    value = getNestedValue(config, key)
    return default if value is None else value


def getFileMode(config: dict[str, Any]) -> int:
    """Permission bits for written state files, parsed from octal text."""
    return int(getConfigValue(config, 'paths.fileMode', '0644'), 8)
