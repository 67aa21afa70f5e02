################################################################################
# File Name: test_config_sync_service.py
# Purpose/Description: Tests for the ConfigSyncService facade
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
Tests for the sync subpackage.

Most tests run against a DirectCommitChannel so commits really land in the
temp authoritative files and resync() reads them back.

Run with:
    pytest tests/test_config_sync_service.py -v
"""

import json
import os
import stat
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

srcPath = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(srcPath))

from controlcenter.commit import CommandExecutionError, ExecResult, PayloadKind
from controlcenter.config import validateAppConfig
from controlcenter.persistence import Autosave
from controlcenter.profile import DEFAULT_PROFILE_NAME, ProfileCatalog
from controlcenter.profile.types import Profile
from controlcenter.settings.types import Settings
from controlcenter.sync import ConfigSyncService, createConfigSyncServiceFromConfig


# ================================================================================
# Resync and Observers
# ================================================================================

class TestResync:
    """Tests for cache refresh and the settings stream."""

    def test_constructor_resyncsFromFiles(self, service: ConfigSyncService):
        """
        Given: Seeded authoritative files
        When: The service is constructed
        Then: Settings and custom profiles reflect the files
        """
        assert service.getSettings().stateMap == {'power_ac': 'Default', 'battery': 'Balanced'}
        assert [p.name for p in service.getCustomProfiles()] == ['Performance', 'Quiet']

    def test_constructor_missingFiles_usesDefaults(self, handler, directChannel):
        """
        Given: No authoritative files
        When: The service is constructed
        Then: Default settings, no custom profiles, default autosave
        """
        service = ConfigSyncService(handler, directChannel)

        assert service.getSettings() == Settings()
        assert service.getCustomProfiles() == []
        assert service.getAutosave() == Autosave()

    def test_resync_externalChange_isPickedUp(self, service, seededHandler):
        """
        Given: Daemon rewrites the profiles file on its own
        When: resync() is called
        Then: The new profile list is visible
        """
        seededHandler.writeProfiles([Profile(name='Fresh')], seededHandler.profilesPath)

        service.resync()

        assert [p.name for p in service.getCustomProfiles()] == ['Fresh']

    def test_resync_readsAutosave(self, service, seededHandler):
        """
        Given: Autosave file written by the daemon
        When: resync() is called
        Then: getAutosave() returns its values
        """
        seededHandler.writeAutosave(Autosave(displayBrightness=35), seededHandler.autosavePath)

        service.resync()

        assert service.getAutosave().displayBrightness == 35

    def test_resync_publishesOncePerCall(self, service: ConfigSyncService):
        """
        Given: Settings subscriber
        When: resync() is called twice
        Then: Subscriber receives two settings copies
        """
        received = []
        service.observeSettings(received.append)

        service.resync()
        service.resync()

        assert len(received) == 2
        assert received[0] == service.getSettings()

    def test_observeSettings_unsubscribe_stopsDelivery(self, service: ConfigSyncService):
        """
        Given: Settings subscriber that has unsubscribed
        When: resync() is called
        Then: Subscriber is not called
        """
        callback = MagicMock()
        unsubscribe = service.observeSettings(callback)

        unsubscribe()
        service.resync()

        callback.assert_not_called()

    def test_observeSettings_publishedValueIsCopy(self, service: ConfigSyncService):
        """
        Given: Subscriber mutating what it receives
        When: resync() publishes
        Then: The service cache is unaffected
        """
        service.observeSettings(lambda s: s.stateMap.clear())

        service.resync()

        assert service.getSettings().stateMap['battery'] == 'Balanced'


# ================================================================================
# Settings Changes
# ================================================================================

class TestSetActiveProfile:
    """Tests for setActiveProfile()."""

    def test_setActiveProfile_quietOnBattery_changesOnlyThatState(self, service, directChannel):
        """
        Given: Settings with battery mapped to 'Balanced'
        When: setActiveProfile('Quiet', 'battery') is called
        Then: Committed map has battery='Quiet', other entries unchanged
        """
        result = service.setActiveProfile('Quiet', 'battery')

        assert result is True
        kind, committed = directChannel.commits[-1]
        assert kind == PayloadKind.SETTINGS
        assert committed.stateMap == {'power_ac': 'Default', 'battery': 'Quiet'}

    def test_setActiveProfile_success_resyncsCache(self, service, directChannel):
        """
        Given: Successful settings commit
        When: getSettings() is called afterwards
        Then: Returns settings structurally equal to the committed ones
        """
        service.setActiveProfile(DEFAULT_PROFILE_NAME, 'battery')

        assert service.getSettings() == directChannel.commits[-1][1]

    def test_setActiveProfile_unknownProfile_returnsFalseWithoutCommit(
        self, service, directChannel
    ):
        """
        Given: Name that is neither default nor custom
        When: setActiveProfile() is called
        Then: Returns False and nothing is committed
        """
        assert service.setActiveProfile('Nope', 'battery') is False
        assert directChannel.commits == []

    def test_setActiveProfile_commitFails_keepsCache(self, service, directChannel):
        """
        Given: Channel that fails the next commit
        When: setActiveProfile() is called
        Then: Returns False and cached settings are unchanged
        """
        directChannel.failNext = True

        assert service.setActiveProfile('Quiet', 'battery') is False
        assert service.getSettings().stateMap['battery'] == 'Balanced'


# ================================================================================
# Profile Changes
# ================================================================================

class TestCopyProfile:
    """Tests for copyProfile()."""

    def test_copyProfile_newName_appendsExactlyOne(self, service: ConfigSyncService):
        """
        Given: Two custom profiles
        When: copyProfile('Performance', 'Gaming') is called
        Then: One profile is appended with the source's parameters
        """
        assert service.copyProfile('Performance', 'Gaming') is True

        customs = service.getCustomProfiles()
        assert [p.name for p in customs] == ['Performance', 'Quiet', 'Gaming']
        assert customs[2].fan == customs[0].fan
        assert customs[2].description == customs[0].description

    def test_copyProfile_fromDefault_copiesFilledProfile(self, service: ConfigSyncService):
        """
        Given: Built-in source profile
        When: copyProfile() is called
        Then: New custom profile has every parameter of the built-in
        """
        service.copyProfile('Powersave extreme', 'My powersave')

        copied = service.getCustomProfileByName('My powersave')
        original = service.getProfileByName('Powersave extreme')
        assert copied.cpu == original.cpu
        assert copied.display == original.display

    @pytest.mark.parametrize('newName', ['Quiet', DEFAULT_PROFILE_NAME, '', '   '])
    def test_copyProfile_takenOrEmptyName_returnsFalseWithoutCommit(
        self, service, directChannel, newName
    ):
        """
        Given: New name already used or empty
        When: copyProfile() is called
        Then: Returns False and nothing is committed
        """
        assert service.copyProfile('Performance', newName) is False
        assert directChannel.commits == []
        assert len(service.getCustomProfiles()) == 2

    def test_copyProfile_missingSource_returnsFalse(self, service, directChannel):
        """
        Given: Source name that doesn't exist
        When: copyProfile() is called
        Then: Returns False and nothing is committed
        """
        assert service.copyProfile('Nope', 'Gaming') is False
        assert directChannel.commits == []


class TestDeleteCustomProfile:
    """Tests for deleteCustomProfile()."""

    def test_deleteCustomProfile_present_removesExactlyOne(self, service: ConfigSyncService):
        """
        Given: Two custom profiles
        When: deleteCustomProfile('Performance') is called
        Then: Only 'Quiet' remains
        """
        assert service.deleteCustomProfile('Performance') is True
        assert [p.name for p in service.getCustomProfiles()] == ['Quiet']

    def test_deleteCustomProfile_absent_isNoOp(self, service, directChannel):
        """
        Given: Name not among the custom profiles
        When: deleteCustomProfile() is called
        Then: Returns False and nothing is committed
        """
        assert service.deleteCustomProfile('Gaming') is False
        assert directChannel.commits == []

    def test_deleteCustomProfile_defaultProfile_refused(self, service, directChannel):
        """
        Given: Built-in profile name
        When: deleteCustomProfile() is called
        Then: Returns False and the built-in is still listed
        """
        assert service.deleteCustomProfile(DEFAULT_PROFILE_NAME) is False
        assert service.getProfileByName(DEFAULT_PROFILE_NAME) is not None
        assert directChannel.commits == []

    def test_deleteCustomProfile_referencedByStateMap_leavesDanglingName(self, service):
        """
        Given: 'Quiet' assigned to the battery state
        When: 'Quiet' is deleted
        Then: Delete succeeds and the state map still names it
        """
        service.setActiveProfile('Quiet', 'battery')

        assert service.deleteCustomProfile('Quiet') is True
        assert service.getSettings().stateMap['battery'] == 'Quiet'
        assert service.getProfileByName('Quiet') is None

    def test_deleteCustomProfile_commitFails_keepsProfile(self, service, directChannel):
        """
        Given: Channel failing the next commit
        When: deleteCustomProfile() is called
        Then: Returns False and the profile is still listed
        """
        directChannel.failNext = True

        assert service.deleteCustomProfile('Quiet') is False
        assert service.getCustomProfileByName('Quiet') is not None


class TestPkexecWriteCustomProfiles:
    """Tests for the raw custom list commit."""

    def test_pkexecWriteCustomProfiles_replacesList(self, service, customProfiles):
        """
        Given: A reordered custom list
        When: pkexecWriteCustomProfiles() is called
        Then: The new order is persisted and resynced
        """
        reordered = list(reversed(customProfiles))

        assert service.pkexecWriteCustomProfiles(reordered) is True
        assert [p.name for p in service.getCustomProfiles()] == ['Quiet', 'Performance']


# ================================================================================
# Editing Session
# ================================================================================

class TestEditingThroughFacade:
    """Tests for the editing session delegated to the staging area."""

    def test_editPerformanceScenario_commitsAndResyncs(self, service, seededHandler):
        """
        Given: 'Performance' with minimum fan speed 50
        When: Checked out, set to 80, and written
        Then: Changes are detected, committed to disk, and cleared afterwards
        """
        assert service.setCurrentEditingProfile('Performance') is True
        assert service.editProfileChanges() is False

        service.getCurrentEditingProfile().fan.minimumFanspeed = 80
        assert service.editProfileChanges() is True

        assert service.writeCurrentEditingProfile() is True
        assert service.editProfileChanges() is False
        assert service.getCurrentEditingProfile() is None
        assert service.getCustomProfileByName('Performance').fan.minimumFanspeed == 80
        assert seededHandler.readCustomProfiles()[0].fan.minimumFanspeed == 80

    def test_observeEditingProfile_receivesCopyThenNone(self, service: ConfigSyncService):
        """
        Given: Editing subscriber
        When: A profile is checked out, changed and committed
        Then: Subscriber receives the working copy, then None
        """
        received = []
        service.observeEditingProfile(received.append)

        service.setCurrentEditingProfile('Quiet')
        service.getCurrentEditingProfile().description = 'Library'
        service.writeCurrentEditingProfile()

        assert len(received) == 2
        assert received[0].name == 'Quiet'
        assert received[1] is None

    def test_writeCurrentEditingProfile_commitFails_sessionIntact(self, service, directChannel):
        """
        Given: Changed working copy and a failing channel
        When: writeCurrentEditingProfile() is called
        Then: Returns False, changes remain and the saved profile is unchanged
        """
        service.setCurrentEditingProfile('Performance')
        service.getCurrentEditingProfile().fan.minimumFanspeed = 80
        directChannel.failNext = True

        assert service.writeCurrentEditingProfile() is False
        assert service.editProfileChanges() is True
        assert service.getCurrentEditingProfile().fan.minimumFanspeed == 80
        assert service.getCustomProfileByName('Performance').fan.minimumFanspeed == 50

    def test_writeCurrentEditingProfile_success_publishesSettings(self, service):
        """
        Given: Settings subscriber and a changed working copy
        When: writeCurrentEditingProfile() succeeds
        Then: Settings stream fires once for the resync
        """
        received = []
        service.observeSettings(received.append)
        service.setCurrentEditingProfile('Quiet')
        service.getCurrentEditingProfile().fan.offsetFanspeed = 5

        service.writeCurrentEditingProfile()

        assert len(received) == 1

    def test_writeCurrentEditingProfile_afterDeletingEditedProfile_recreatesIt(
        self, service, seededHandler
    ):
        """
        Given: 'Quiet' checked out with fan speed set to 80
        When: 'Quiet' is deleted and the edit is written
        Then: The edit is committed as a new entry at the end of the list
        """
        service.setCurrentEditingProfile('Quiet')
        service.getCurrentEditingProfile().fan.minimumFanspeed = 80

        assert service.deleteCustomProfile('Quiet') is True
        assert service.editProfileChanges() is True
        assert service.writeCurrentEditingProfile() is True

        saved = seededHandler.readCustomProfiles()
        assert [p.name for p in saved] == ['Performance', 'Quiet']
        assert saved[1].fan.minimumFanspeed == 80

    def test_writeCurrentEditingProfile_afterDeletingEarlierProfile_updatesSameProfile(
        self, service, seededHandler
    ):
        """
        Given: 'Quiet' checked out at index 1
        When: 'Performance' is deleted and the edited 'Quiet' is written
        Then: 'Quiet' is updated in place and nothing else is overwritten
        """
        service.setCurrentEditingProfile('Quiet')

        assert service.deleteCustomProfile('Performance') is True
        assert service.editProfileChanges() is False

        service.getCurrentEditingProfile().fan.minimumFanspeed = 80
        assert service.writeCurrentEditingProfile() is True

        saved = seededHandler.readCustomProfiles()
        assert [p.name for p in saved] == ['Quiet']
        assert saved[0].fan.minimumFanspeed == 80

    def test_setCurrentEditingProfile_none_clears(self, service: ConfigSyncService):
        """
        Given: Editing session
        When: setCurrentEditingProfile(None) is called
        Then: No profile is being edited
        """
        service.setCurrentEditingProfile('Quiet')

        assert service.setCurrentEditingProfile(None) is False
        assert service.getCurrentEditingProfile() is None


# ================================================================================
# Unmodelled Keys
# ================================================================================

class TestUnmodelledKeys:
    """Tests that keys written by the daemon survive front-end rewrites."""

    def test_rewrites_keepUnmodelledKeysOnDisk(self, handler, directChannel, statePaths):
        """
        Given: profiles.json with an 'odmProfile' key and settings.json with 'shutdownTime'
        When: A profile is copied and then assigned to a state
        Then: Both keys are still in the files afterwards
        """
        statePaths['profiles'].parent.mkdir(parents=True, exist_ok=True)
        statePaths['profiles'].write_text(json.dumps([{
            'name': 'A',
            'odmProfile': {'name': 'performance'},
            'fan': {'minimumFanspeed': 30, 'customFanCurve': [[50, 20], [80, 60]]},
        }]))
        statePaths['settings'].write_text(json.dumps({
            'stateMap': {'power_ac': 'A'},
            'shutdownTime': '23:30',
        }))
        service = ConfigSyncService(handler, directChannel)

        assert service.copyProfile('A', 'B') is True
        assert service.setActiveProfile('B', 'power_bat') is True

        profiles = json.loads(statePaths['profiles'].read_text())
        assert [p['name'] for p in profiles] == ['A', 'B']
        for entry in profiles:
            assert entry['odmProfile'] == {'name': 'performance'}
            assert entry['fan']['customFanCurve'] == [[50, 20], [80, 60]]
        settings = json.loads(statePaths['settings'].read_text())
        assert settings['shutdownTime'] == '23:30'
        assert settings['stateMap'] == {'power_ac': 'A', 'power_bat': 'B'}

    def test_editCommit_keepsUnmodelledKeysOfEditedProfile(
        self, handler, directChannel, statePaths
    ):
        """
        Given: Custom profile carrying an unmodelled key
        When: It is edited and written
        Then: The key is still present in the file
        """
        statePaths['profiles'].parent.mkdir(parents=True, exist_ok=True)
        statePaths['profiles'].write_text(json.dumps([{'name': 'A', 'odmProfile': 'quiet'}]))
        service = ConfigSyncService(handler, directChannel)

        service.setCurrentEditingProfile('A')
        service.getCurrentEditingProfile().fan.minimumFanspeed = 40

        assert service.writeCurrentEditingProfile() is True
        profiles = json.loads(statePaths['profiles'].read_text())
        assert profiles[0]['odmProfile'] == 'quiet'
        assert profiles[0]['fan']['minimumFanspeed'] == 40


# ================================================================================
# Dependency Injection and Factory
# ================================================================================

class TestConstruction:
    """Tests for service construction."""

    def test_constructor_injectedCatalog_isUsed(self, handler, directChannel):
        """
        Given: Catalog whose only built-in profile is a bare one
        When: The service is constructed with it
        Then: Default profiles come from the injected catalog, filled
        """
        catalog = ProfileCatalog(defaultProfiles=[Profile(name='Only')])

        service = ConfigSyncService(handler, directChannel, catalog=catalog)

        assert [p.name for p in service.getDefaultProfiles()] == ['Only']
        assert service.getAllProfiles()[0].fan.fanProfile == 'Balanced'

    def test_createConfigSyncServiceFromConfig_commitsThroughHelper(
        self, sampleAppConfig, mockExecutor, tmp_path
    ):
        """
        Given: Configuration and a successful mock executor
        When: setActiveProfile() is called on the created service
        Then: Payload is staged with the configured mode and the helper invoked
        """
        config = validateAppConfig(sampleAppConfig)
        service = createConfigSyncServiceFromConfig(config, executor=mockExecutor)

        assert service.setActiveProfile('Default', 'battery') is True

        stagedPath = tmp_path / 'tmpccsettings'
        assert json.loads(stagedPath.read_text())['stateMap']['battery'] == 'Default'
        assert stat.S_IMODE(os.stat(stagedPath).st_mode) == 0o600
        command = mockExecutor.runSync.call_args[0][0]
        assert command == [
            'pkexec', '/opt/controlcenter/controlcenterd', '--new-settings', str(stagedPath)
        ]

    def test_createConfigSyncServiceFromConfig_privilegeDenied_returnsFalse(
        self, sampleAppConfig, mockExecutor
    ):
        """
        Given: Executor reporting pkexec exit 126
        When: copyProfile() is called
        Then: Returns False and the custom list is unchanged
        """
        mockExecutor.runSync.return_value = ExecResult(
            error=CommandExecutionError('Not authorized', exitCode=126)
        )
        service = createConfigSyncServiceFromConfig(
            validateAppConfig(sampleAppConfig), executor=mockExecutor
        )

        assert service.copyProfile('Default', 'Gaming') is False
        assert service.getCustomProfiles() == []
