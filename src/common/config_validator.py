################################################################################
# File Name: config_validator.py
# Purpose/Description: Configuration validation with required fields and defaults
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
Configuration validation module.

Provides validation of configuration dictionaries with:
- Required field checking
- Default value application
- Nested configuration support via dot notation
- Clear error messages for missing/invalid fields

Usage:
    from common.config_validator import ConfigValidator

    validator = ConfigValidator(defaults=APP_DEFAULTS)
    config = validator.validate(rawConfig)
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, message: str, missingFields: list[str] | None = None):
        super().__init__(message)
        self.missingFields = missingFields or []


class ConfigValidator:
    """
    Validates configuration dictionaries.

    Provides methods to:
    - Check for required fields
    - Apply default values
    - Validate field types
    - Return fully validated configuration

    Attributes:
        requiredKeys: List of required configuration keys (dot notation)
        defaults: Dictionary of default values for optional fields
    """

    def __init__(
        self,
        requiredKeys: list[str] | None = None,
        defaults: dict[str, Any] | None = None
    ):
        """
        Initialize the validator.

        Args:
            requiredKeys: List of required keys in dot notation (e.g., 'paths.settingsFile')
            defaults: Dictionary of default values in dot notation
        """
        self.requiredKeys = requiredKeys or []
        self.defaults = defaults or {}

    def validate(self, config: dict[str, Any]) -> dict[str, Any]:
        """
        Validate and enhance configuration.

        Performs:
        1. Required field validation
        2. Default value application
        3. Returns validated configuration

        Args:
            config: Raw configuration dictionary

        Returns:
            Validated configuration with defaults applied

        Raises:
            ConfigValidationError: If required fields are missing
        """
        missingFields = self._validateRequired(config)
        if missingFields:
            fieldList = ', '.join(missingFields)
            raise ConfigValidationError(
                f"Missing required configuration fields: {fieldList}",
                missingFields=missingFields
            )

        config = self._applyDefaults(config)

        logger.debug("Configuration validated successfully")
        return config

    def _validateRequired(self, config: dict[str, Any]) -> list[str]:
        """
        Check for required configuration fields.

        Args:
            config: Configuration dictionary to check

        Returns:
            List of missing field names (empty if all present)
        """
        missingFields = []

        for key in self.requiredKeys:
            if not getNestedValue(config, key):
                missingFields.append(key)

        return missingFields

    def _applyDefaults(self, config: dict[str, Any]) -> dict[str, Any]:
        """
        Apply default values for missing optional fields.

        Args:
            config: Configuration dictionary

        Returns:
            Configuration with defaults applied
        """
        for key, defaultValue in self.defaults.items():
            if getNestedValue(config, key) is None:
                setNestedValue(config, key, defaultValue)
                logger.debug(f"Applied default for {key}: {defaultValue}")

        return config

    def validateField(
        self,
        config: dict[str, Any],
        key: str,
        expectedType: type | tuple[type, ...],
        allowNone: bool = False
    ) -> bool:
        """
        Validate a specific field's type.

        Args:
            config: Configuration dictionary
            key: Dot-notation key to validate
            expectedType: Expected Python type (or tuple of types)
            allowNone: Whether None is acceptable

        Returns:
            True if valid, False otherwise
        """
        value = getNestedValue(config, key)

        if value is None:
            return allowNone

        return isinstance(value, expectedType)


def getNestedValue(config: dict[str, Any], key: str) -> Any:
    """
    Get a value from nested dictionary using dot notation.

    Args:
        config: Configuration dictionary
        key: Dot-notation key (e.g., 'paths.settingsFile')

    Returns:
        Value if found, None otherwise
    """
    value: Any = config

    for k in key.split('.'):
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return None

    return value


def setNestedValue(config: dict[str, Any], key: str, value: Any) -> None:
    """
    Set a value in nested dictionary using dot notation.

    Args:
        config: Configuration dictionary to modify
        key: Dot-notation key (e.g., 'paths.settingsFile')
        value: Value to set
    """
    keys = key.split('.')
    current = config

    for k in keys[:-1]:
        if not isinstance(current.get(k), dict):
            current[k] = {}
        current = current[k]

    current[keys[-1]] = value
