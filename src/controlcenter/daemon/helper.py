################################################################################
# File Name: helper.py
# Purpose/Description: Privileged adoption of staged settings/profile payloads
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
Privileged helper operations.

Runs inside `controlcenterd --new-settings|--new-profiles <path>` started
through the escalation wrapper. Each operation reads the staged file strictly,
validates it, atomically replaces the authoritative file and asks the running
daemon to reload.

Re-applying the same payload is harmless, so a caller that saw a failure after
the file was already replaced can simply retry.

Usage:
    from controlcenter.daemon.helper import applyNewSettings, requestDaemonReload

    applyNewSettings(handler, '/tmp/tmpccsettings')
    requestDaemonReload('/run/controlcenterd.pid')
"""

import logging
import os
import signal
from collections.abc import Iterable
from pathlib import Path

from ..persistence.handler import ConfigHandler
from ..persistence.validation import validateProfiles, validateSettings
from ..profile.defaults import getBuiltinProfiles
from ..profile.types import Profile
from ..settings.types import Settings

logger = logging.getLogger(__name__)


def applyNewSettings(handler: ConfigHandler, stagedPath: str | Path) -> Settings:
    """
    Adopt a staged settings file.

    Args:
        handler: ConfigHandler owning the authoritative files
        stagedPath: File written by the front-end

    Returns:
        The settings now in effect

    Raises:
        PersistenceReadError: If the staged file is missing or malformed
        PayloadValidationError: If the payload is rejected
        PersistenceWriteError: If the authoritative file cannot be replaced
    """
    settings = handler.readSettings(stagedPath)
    validateSettings(settings)
    handler.writeSettings(settings, handler.settingsPath)

    logger.info(f"Adopted new settings | from={stagedPath} | to={handler.settingsPath}")
    return settings


def applyNewProfiles(
    handler: ConfigHandler,
    stagedPath: str | Path,
    reservedNames: Iterable[str] | None = None
) -> list[Profile]:
    """
    Adopt a staged custom profile list.

    Args:
        handler: ConfigHandler owning the authoritative files
        stagedPath: File written by the front-end
        reservedNames: Names custom profiles may not use (defaults to built-ins)

    Returns:
        The custom profiles now in effect

    Raises:
        PersistenceReadError: If the staged file is missing or malformed
        PayloadValidationError: If the payload is rejected
        PersistenceWriteError: If the authoritative file cannot be replaced
    """
    if reservedNames is None:
        reservedNames = [p.name for p in getBuiltinProfiles()]

    profiles = handler.readCustomProfiles(stagedPath)
    validateProfiles(profiles, reservedNames)
    handler.writeProfiles(profiles, handler.profilesPath)

    logger.info(
        f"Adopted {len(profiles)} custom profile(s) | from={stagedPath} "
        f"| to={handler.profilesPath}"
    )
    return profiles


def requestDaemonReload(pidFile: str | Path) -> bool:
    """
    Send SIGHUP to the running daemon so it re-reads its state files.

    A missing, unreadable or stale pid file is not an error: the daemon reads
    the files on its next start anyway.

    Args:
        pidFile: File holding the daemon's process id

    Returns:
        True if the signal was delivered
    """
    try:
        pid = int(Path(pidFile).read_text().strip())
    except FileNotFoundError:
        logger.debug(f"No daemon pid file at {pidFile}, skipping reload")
        return False
    except (OSError, ValueError) as e:
        logger.warning(f"Cannot read daemon pid file {pidFile}: {e}")
        return False

    if pid <= 0 or pid == os.getpid():
        logger.debug(f"Ignoring pid {pid} from {pidFile}")
        return False

    try:
        os.kill(pid, signal.SIGHUP)
    except ProcessLookupError:
        logger.debug(f"Stale daemon pid file {pidFile} (pid {pid})")
        return False
    except PermissionError as e:
        logger.warning(f"Not allowed to signal daemon pid {pid}: {e}")
        return False

    logger.info(f"Requested daemon reload | pid={pid}")
    return True
