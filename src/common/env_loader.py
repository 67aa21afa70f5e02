################################################################################
# File Name: env_loader.py
# Purpose/Description: Environment file loading and config placeholder resolution
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
Environment loading module.

Lets packagers and developers relocate state files and the helper executable
without editing the config file:
- Loads environment variables from an optional .env file
- Resolves ${VAR_NAME} placeholders in configuration values
- Supports default values: ${VAR_NAME:default}

Usage:
    from common.env_loader import loadConfigWithEnv

    config = loadConfigWithEnv('/etc/controlcenter/config.json')
"""

import json
import logging
import os
import re
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Pattern to match ${VAR_NAME} or ${VAR_NAME:default}
PLACEHOLDER_PATTERN = re.compile(r'\$\{([^}:]+)(?::([^}]*))?\}')


def loadEnvFile(envPath: str | None = None) -> dict[str, str]:
    """
    Load environment variables from .env file.

    Args:
        envPath: Path to .env file. Defaults to .env in current directory.

    Returns:
        Dictionary of loaded variable names mapped to their values

    Note:
        Does not override existing environment variables.
    """
    if envPath is None:
        envPath = '.env'

    loadedVars: dict[str, str] = {}
    envFile = Path(envPath)

    if not envFile.exists():
        logger.debug(f".env file not found at {envPath}")
        return loadedVars

    try:
        with open(envFile, 'r', encoding='utf-8') as f:
            for lineNum, line in enumerate(f, 1):
                line = line.strip()

                if not line or line.startswith('#'):
                    continue

                if '=' not in line:
                    logger.warning(f"Invalid line {lineNum} in .env: missing '='")
                    continue

                key, _, value = line.partition('=')
                key = key.strip()
                value = value.strip()

                if value and value[0] in ('"', "'") and value[-1] == value[0]:
                    value = value[1:-1]

                if key not in os.environ:
                    os.environ[key] = value
                    loadedVars[key] = value

        logger.info(f"Loaded {len(loadedVars)} variables from {envPath}")

    except OSError as e:
        logger.error(f"Error loading .env file: {e}")

    return loadedVars


def resolvePlaceholders(config: Any) -> Any:
    """
    Recursively resolve ${VAR_NAME} placeholders in configuration.

    Args:
        config: Configuration value (dict, list, str, or other)

    Returns:
        Configuration with placeholders resolved
    """
    if isinstance(config, dict):
        return {key: resolvePlaceholders(value) for key, value in config.items()}

    elif isinstance(config, list):
        return [resolvePlaceholders(item) for item in config]

    elif isinstance(config, str):
        return _resolveString(config)

    else:
        return config


def _resolveString(value: str) -> str:
    """
    Resolve placeholders in a string value.

    Args:
        value: String potentially containing ${VAR} placeholders

    Returns:
        String with placeholders resolved; unresolvable placeholders are kept
    """
    def replacer(match: re.Match) -> str:
        varName = match.group(1)
        defaultValue = match.group(2)

        envValue = os.environ.get(varName)

        if envValue is not None:
            logger.debug(f"Resolved {varName} from environment")
            return envValue
        elif defaultValue is not None:
            logger.debug(f"Using default for {varName}")
            return defaultValue
        else:
            logger.warning(f"Environment variable {varName} not set and no default")
            return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replacer, value)


def loadConfigWithEnv(
    configPath: str,
    envPath: str | None = None
) -> dict[str, Any]:
    """
    Load a JSON configuration file and resolve all placeholders.

    Args:
        configPath: Path to configuration JSON file
        envPath: Optional path to .env file

    Returns:
        Configuration dictionary with placeholders resolved

    Raises:
        FileNotFoundError: If config file doesn't exist
        json.JSONDecodeError: If config file is invalid JSON
    """
    loadEnvFile(envPath)

    configFile = Path(configPath)
    if not configFile.exists():
        raise FileNotFoundError(f"Configuration file not found: {configPath}")

    logger.info(f"Loading configuration from {configPath}")

    with open(configFile, 'r', encoding='utf-8') as f:
        config = json.load(f)

    return resolvePlaceholders(config)
