################################################################################
# File Name: conftest.py
# Purpose/Description: Pytest fixtures and configuration
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
Pytest configuration and shared fixtures.

Fixtures defined here are available to all test files automatically.

Usage:
    def test_something(service, handler):
        # service is resynced from files seeded under tmp_path
        pass
"""

import json
import os
import sys
from collections.abc import Generator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

# Add src to path for imports
srcPath = Path(__file__).parent.parent / 'src'
if str(srcPath) not in sys.path:
    sys.path.insert(0, str(srcPath))

from controlcenter.commit.channel import DirectCommitChannel
from controlcenter.commit.types import ExecResult
from controlcenter.persistence.handler import ConfigHandler
from controlcenter.profile.types import FanSettings, Profile
from controlcenter.settings.types import Settings
from controlcenter.sync.service import ConfigSyncService


# ================================================================================
# State File Fixtures
# ================================================================================

@pytest.fixture
def statePaths(tmp_path: Path) -> dict[str, Path]:
    """
    Provide authoritative state file locations under a temp directory.

    Returns:
        Dictionary with settings, profiles and autosave paths
    """
    stateDir = tmp_path / 'etc'
    return {
        'settings': stateDir / 'settings.json',
        'profiles': stateDir / 'profiles.json',
        'autosave': stateDir / 'autosave.json',
    }


@pytest.fixture
def handler(statePaths: dict[str, Path]) -> ConfigHandler:
    """ConfigHandler pointed at the temp state files."""
    return ConfigHandler(
        settingsPath=statePaths['settings'],
        profilesPath=statePaths['profiles'],
        autosavePath=statePaths['autosave'],
    )


@pytest.fixture
def directChannel(handler: ConfigHandler) -> DirectCommitChannel:
    """In-process commit channel writing the temp state files."""
    return DirectCommitChannel(handler)


# ================================================================================
# Profile and Settings Fixtures
# ================================================================================

@pytest.fixture
def customProfiles() -> list[Profile]:
    """
    Provide two custom profiles.

    Returns:
        'Performance' (minimum fan speed 50) and 'Quiet'
    """
    return [
        Profile(
            name='Performance',
            description='Full power',
            fan=FanSettings(useControl=True, fanProfile='Overboost', minimumFanspeed=50),
        ),
        Profile(
            name='Quiet',
            fan=FanSettings(fanProfile='Silent', minimumFanspeed=0),
        ),
    ]


@pytest.fixture
def seededSettings() -> Settings:
    """Settings with one state mapped to a custom name and one to a default."""
    return Settings(stateMap={'power_ac': 'Default', 'battery': 'Balanced'})


@pytest.fixture
def seededHandler(
    handler: ConfigHandler,
    customProfiles: list[Profile],
    seededSettings: Settings
) -> ConfigHandler:
    """Handler whose authoritative files already hold settings and profiles."""
    handler.writeSettings(seededSettings, handler.settingsPath)
    handler.writeProfiles(customProfiles, handler.profilesPath)
    return handler


@pytest.fixture
def service(
    seededHandler: ConfigHandler,
    directChannel: DirectCommitChannel
) -> ConfigSyncService:
    """ConfigSyncService resynced from the seeded files."""
    return ConfigSyncService(seededHandler, directChannel)


# ================================================================================
# Command Execution Fixtures
# ================================================================================

@pytest.fixture
def mockExecutor() -> MagicMock:
    """
    Provide a mock CommandExecutor that succeeds by default.

    Returns:
        MagicMock with runSync returning an empty successful ExecResult
    """
    executor = MagicMock()
    executor.runSync.return_value = ExecResult(data=b'')
    return executor


# ================================================================================
# Configuration Fixtures
# ================================================================================

@pytest.fixture
def sampleAppConfig(statePaths: dict[str, Path], tmp_path: Path) -> dict[str, Any]:
    """
    Provide an application configuration pointing at temp files.

    Returns:
        Configuration dictionary in the config file's nested layout
    """
    return {
        'application': {
            'environment': 'production'
        },
        'paths': {
            'settingsFile': str(statePaths['settings']),
            'profilesFile': str(statePaths['profiles']),
            'autosaveFile': str(statePaths['autosave']),
            'tmpSettingsFile': str(tmp_path / 'tmpccsettings'),
            'tmpProfilesFile': str(tmp_path / 'tmpccprofiles'),
            'fileMode': '0600'
        },
        'daemon': {
            'execPath': '/opt/controlcenter/controlcenterd',
            'pidFile': str(tmp_path / 'controlcenterd.pid')
        },
        'privilege': {
            'escalationCommand': 'pkexec'
        }
    }


@pytest.fixture
def tempConfigFile(tmp_path: Path, sampleAppConfig: dict[str, Any]) -> Path:
    """
    Create temporary config file for testing.

    Returns:
        Path to temporary config file
    """
    configFile = tmp_path / 'config.json'
    with open(configFile, 'w') as f:
        json.dump(sampleAppConfig, f)

    return configFile


# ================================================================================
# Environment Fixtures
# ================================================================================

@pytest.fixture
def cleanEnv() -> Generator[None, None, None]:
    """
    Ensure clean environment with no test variables.

    Removes test variables before test, restores after.
    """
    varsToRemove = ['CC_STATE_DIR', 'CC_DAEMON', 'TEST_VAR']

    saved = {}
    for var in varsToRemove:
        saved[var] = os.environ.pop(var, None)

    yield

    for var in varsToRemove:
        os.environ.pop(var, None)
        if saved[var] is not None:
            os.environ[var] = saved[var]


# ================================================================================
# Pytest Configuration
# ================================================================================

def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
