################################################################################
# File Name: handler.py
# Purpose/Description: ConfigHandler reading and atomically writing state files
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
ConfigHandler class for the persistence subpackage.

Reads and writes the settings, custom profiles and autosave records as JSON.

Reads come in two flavours:
- strict (readSettings, readCustomProfiles, readAutosave) raise
  PersistenceReadError on a missing, unreadable or malformed file
- NoThrow (readSettingsNoThrow, ...) log the failure and return a safe default,
  so callers never branch on "file doesn't exist yet"

Writes go to a caller-supplied path through a temp file in the same directory
followed by os.replace(), so a concurrently reading daemon never sees a
partial file. Any write failure raises PersistenceWriteError.

Usage:
    from controlcenter.persistence.handler import ConfigHandler

    handler = ConfigHandler(
        '/etc/controlcenter/settings.json',
        '/etc/controlcenter/profiles.json',
        '/etc/controlcenter/autosave.json',
    )
    settings = handler.readSettingsNoThrow()
    handler.writeSettings(settings, '/tmp/tmpccsettings')
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, TypeVar

from common.copy_utils import copyConfig

from ..profile.types import Profile
from ..settings.types import Settings
from .exceptions import PersistenceReadError, PersistenceWriteError
from .types import (
    DEFAULT_FILE_MODE,
    FILE_ENCODING,
    JSON_INDENT,
    Autosave,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')


class ConfigHandler:
    """
    Reads and writes the authoritative state files.

    Attributes:
        settingsPath: Authoritative settings file
        profilesPath: Authoritative custom profiles file
        autosavePath: Authoritative autosave file
        fileMode: Permission bits applied to written files

    Example:
        handler = ConfigHandler(settingsPath, profilesPath, autosavePath)
        profiles = handler.readCustomProfilesNoThrow()
    """

    def __init__(
        self,
        settingsPath: str | Path,
        profilesPath: str | Path,
        autosavePath: str | Path,
        fileMode: int = DEFAULT_FILE_MODE
    ):
        """
        Initialize the handler.

        Args:
            settingsPath: Authoritative settings file
            profilesPath: Authoritative custom profiles file
            autosavePath: Authoritative autosave file
            fileMode: Permission bits for written files
        """
        self.settingsPath = Path(settingsPath)
        self.profilesPath = Path(profilesPath)
        self.autosavePath = Path(autosavePath)
        self.fileMode = fileMode

    # ================================================================================
    # Strict Reads
    # ================================================================================

    def readSettings(self, path: str | Path | None = None) -> Settings:
        """
        Read a settings file.

        Args:
            path: File to read (defaults to the authoritative settings file)

        Returns:
            Settings instance

        Raises:
            PersistenceReadError: If the file is missing, unreadable or malformed
        """
        filePath = Path(path) if path is not None else self.settingsPath
        data = self._readJson(filePath)
        return self._decode(filePath, lambda: Settings.fromDict(data))

    def readCustomProfiles(self, path: str | Path | None = None) -> list[Profile]:
        """
        Read a custom profiles file.

        Args:
            path: File to read (defaults to the authoritative profiles file)

        Returns:
            Profiles in persisted order

        Raises:
            PersistenceReadError: If the file is missing, unreadable or malformed
        """
        filePath = Path(path) if path is not None else self.profilesPath
        data = self._readJson(filePath)

        def decode() -> list[Profile]:
            if not isinstance(data, list):
                raise ValueError(f"Profiles must be a list, got {type(data).__name__}")
            return [Profile.fromDict(entry) for entry in data]

        return self._decode(filePath, decode)

    def readAutosave(self, path: str | Path | None = None) -> Autosave:
        """
        Read an autosave file.

        Args:
            path: File to read (defaults to the authoritative autosave file)

        Returns:
            Autosave instance

        Raises:
            PersistenceReadError: If the file is missing, unreadable or malformed
        """
        filePath = Path(path) if path is not None else self.autosavePath
        data = self._readJson(filePath)
        return self._decode(filePath, lambda: Autosave.fromDict(data))

    # ================================================================================
    # NoThrow Reads
    # ================================================================================

    def readSettingsNoThrow(self) -> Settings:
        """Authoritative settings, or default settings if they can't be read."""
        try:
            return self.readSettings()
        except PersistenceReadError as e:
            logger.warning(f"Using default settings: {e}")
            return Settings()

    def readCustomProfilesNoThrow(self) -> list[Profile]:
        """Authoritative custom profiles, or an empty list if they can't be read."""
        try:
            return self.readCustomProfiles()
        except PersistenceReadError as e:
            logger.warning(f"Using empty custom profile list: {e}")
            return []

    def readAutosaveNoThrow(self) -> Autosave:
        """Authoritative autosave record, or defaults if it can't be read."""
        try:
            return self.readAutosave()
        except PersistenceReadError as e:
            logger.warning(f"Using default autosave values: {e}")
            return Autosave()

    # ================================================================================
    # Writes
    # ================================================================================

    def writeSettings(self, settings: Settings, path: str | Path) -> None:
        """
        Atomically write settings.

        Args:
            settings: Settings to write
            path: Destination file

        Raises:
            PersistenceWriteError: If the file can't be written
        """
        self._writeJson(Path(path), settings.toDict())

    def writeProfiles(self, profiles: list[Profile], path: str | Path) -> None:
        """
        Atomically write a custom profile list.

        Args:
            profiles: Profiles in the order to persist
            path: Destination file

        Raises:
            PersistenceWriteError: If the file can't be written
        """
        self._writeJson(Path(path), [profile.toDict() for profile in profiles])

    def writeAutosave(self, autosave: Autosave, path: str | Path) -> None:
        """
        Atomically write the autosave record.

        Raises:
            PersistenceWriteError: If the file can't be written
        """
        self._writeJson(Path(path), autosave.toDict())

    # ================================================================================
    # Copying
    # ================================================================================

    @staticmethod
    def copyConfig(value: T) -> T:
        """Deep copy of a settings/profile object or list."""
        return copyConfig(value)

    # ================================================================================
    # Private Methods
    # ================================================================================

    def _readJson(self, filePath: Path) -> Any:
        """
        Load and parse a JSON file.

        Raises:
            PersistenceReadError: On any OS or decode failure
        """
        try:
            with open(filePath, 'r', encoding=FILE_ENCODING) as f:
                return json.load(f)
        except FileNotFoundError as e:
            raise PersistenceReadError(
                f"File not found: {filePath}",
                details={'path': str(filePath)}
            ) from e
        except (OSError, ValueError) as e:
            raise PersistenceReadError(
                f"Failed to read {filePath}: {e}",
                details={'path': str(filePath), 'error': str(e)}
            ) from e

    def _decode(self, filePath: Path, decoder: Any) -> Any:
        """
        Run a decoder, converting structural errors to PersistenceReadError.
        """
        try:
            return decoder()
        except (ValueError, TypeError, KeyError) as e:
            raise PersistenceReadError(
                f"Malformed content in {filePath}: {e}",
                details={'path': str(filePath), 'error': str(e)}
            ) from e

    def _writeJson(self, filePath: Path, data: Any) -> None:
        """
        Write JSON through a sibling temp file and an atomic rename.

        Raises:
            PersistenceWriteError: On any OS or encode failure
        """
        tmpName: str | None = None
        try:
            filePath.parent.mkdir(parents=True, exist_ok=True)
            content = json.dumps(data, indent=JSON_INDENT)

            fd, tmpName = tempfile.mkstemp(
                dir=filePath.parent,
                prefix=f'.{filePath.name}.',
                suffix='.tmp'
            )
            with os.fdopen(fd, 'w', encoding=FILE_ENCODING) as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())

            os.chmod(tmpName, self.fileMode)
            os.replace(tmpName, filePath)
            tmpName = None
            logger.debug(f"Wrote {filePath}")

        except (OSError, TypeError, ValueError) as e:
            raise PersistenceWriteError(
                f"Failed to write {filePath}: {e}",
                details={'path': str(filePath), 'error': str(e)}
            ) from e

        finally:
            if tmpName is not None and os.path.exists(tmpName):
                os.unlink(tmpName)
