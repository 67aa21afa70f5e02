################################################################################
# File Name: types.py
# Purpose/Description: Application configuration constants and defaults
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
Application configuration constants.

Default locations of the authoritative state files, the fixed staging files
and the privileged helper, in dot notation for ConfigValidator.
"""

from typing import Any

# =============================================================================
# Environments
# =============================================================================

ENVIRONMENT_PRODUCTION = 'production'
ENVIRONMENT_DEVELOPMENT = 'development'

VALID_ENVIRONMENTS = [ENVIRONMENT_PRODUCTION, ENVIRONMENT_DEVELOPMENT]

# =============================================================================
# Paths
# =============================================================================

DEFAULT_CONFIG_PATH = '/etc/controlcenter/config.json'

DEFAULT_SETTINGS_FILE = '/etc/controlcenter/settings.json'
DEFAULT_PROFILES_FILE = '/etc/controlcenter/profiles.json'
DEFAULT_AUTOSAVE_FILE = '/etc/controlcenter/autosave.json'

# Fixed, shared staging files; concurrent front-ends race on these
DEFAULT_TMP_SETTINGS_FILE = '/tmp/tmpccsettings'
DEFAULT_TMP_PROFILES_FILE = '/tmp/tmpccprofiles'

DEFAULT_DAEMON_EXEC = '/usr/bin/controlcenterd'
DEFAULT_DEV_DAEMON_EXEC = 'dist/controlcenterd'
DEFAULT_DAEMON_PID_FILE = '/run/controlcenterd.pid'

DEFAULT_ESCALATION_COMMAND = 'pkexec'

# =============================================================================
# Defaults
# =============================================================================

APP_DEFAULTS: dict[str, Any] = {
    # Application
    'application.name': 'Control Center',
    'application.environment': ENVIRONMENT_PRODUCTION,

    # State files
    'paths.settingsFile': DEFAULT_SETTINGS_FILE,
    'paths.profilesFile': DEFAULT_PROFILES_FILE,
    'paths.autosaveFile': DEFAULT_AUTOSAVE_FILE,
    'paths.tmpSettingsFile': DEFAULT_TMP_SETTINGS_FILE,
    'paths.tmpProfilesFile': DEFAULT_TMP_PROFILES_FILE,
    'paths.fileMode': '0644',

    # Privileged helper
    'daemon.execPath': DEFAULT_DAEMON_EXEC,
    'daemon.devExecPath': DEFAULT_DEV_DAEMON_EXEC,
    'daemon.pidFile': DEFAULT_DAEMON_PID_FILE,
    'privilege.escalationCommand': DEFAULT_ESCALATION_COMMAND,

    # Logging
    'logging.level': 'INFO',
}

# Keys whose value must be a string once defaults are applied
STRING_KEYS = [
    'application.environment',
    'paths.settingsFile',
    'paths.profilesFile',
    'paths.autosaveFile',
    'paths.tmpSettingsFile',
    'paths.tmpProfilesFile',
    'paths.fileMode',
    'daemon.execPath',
    'daemon.devExecPath',
    'daemon.pidFile',
    'privilege.escalationCommand',
    'logging.level',
]

# Optional keys with no default
OPTIONAL_NUMBER_KEYS = [
    'daemon.commandTimeoutSeconds',
]

OPTIONAL_STRING_KEYS = [
    'logging.file',
]
