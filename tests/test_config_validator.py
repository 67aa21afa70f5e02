################################################################################
# File Name: test_config_validator.py
# Purpose/Description: Tests for configuration validation
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
Tests for the config_validator module.

Run with:
    pytest tests/test_config_validator.py -v
"""

import sys
from pathlib import Path

import pytest

srcPath = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(srcPath))

from common.config_validator import (
    ConfigValidationError,
    ConfigValidator,
    getNestedValue,
    setNestedValue,
)


class TestConfigValidator:
    """Tests for ConfigValidator class."""

    def test_validate_missingRequiredField_raisesWithFieldList(self):
        """
        Given: Config missing a required key
        When: validate() is called
        Then: Raises ConfigValidationError naming the key
        """
        validator = ConfigValidator(requiredKeys=['paths.settingsFile', 'daemon.execPath'])
        config = {'paths': {'settingsFile': '/etc/cc/settings.json'}}

        with pytest.raises(ConfigValidationError) as excInfo:
            validator.validate(config)

        assert excInfo.value.missingFields == ['daemon.execPath']

    def test_validate_missingOptionalField_appliesDefault(self):
        """
        Given: Config without an optional key that has a default
        When: validate() is called
        Then: Default is applied at the nested location
        """
        validator = ConfigValidator(defaults={'privilege.escalationCommand': 'pkexec'})

        result = validator.validate({})

        assert result == {'privilege': {'escalationCommand': 'pkexec'}}

    def test_validate_existingValue_notOverwritten(self):
        """
        Given: Config that sets a key which also has a default
        When: validate() is called
        Then: Configured value is kept
        """
        validator = ConfigValidator(defaults={'logging.level': 'INFO'})

        result = validator.validate({'logging': {'level': 'DEBUG'}})

        assert result['logging']['level'] == 'DEBUG'

    def test_validateField_wrongType_returnsFalse(self):
        """
        Given: Config value of the wrong type
        When: validateField() is called
        Then: Returns False
        """
        validator = ConfigValidator()
        config = {'daemon': {'execPath': 42}}

        assert validator.validateField(config, 'daemon.execPath', str) is False

    def test_validateField_noneAllowed_returnsTrue(self):
        """
        Given: Absent optional value and allowNone=True
        When: validateField() is called
        Then: Returns True
        """
        validator = ConfigValidator()

        assert validator.validateField({}, 'logging.file', str, allowNone=True) is True
        assert validator.validateField({}, 'logging.file', str) is False


class TestNestedValues:
    """Tests for dot-notation helpers."""

    def test_getNestedValue_missingIntermediate_returnsNone(self):
        """
        Given: Key whose parent section is not a dict
        When: getNestedValue() is called
        Then: Returns None
        """
        config = {'paths': 'not a section'}

        assert getNestedValue(config, 'paths.settingsFile') is None

    def test_setNestedValue_createsIntermediateSections(self):
        """
        Given: Empty config
        When: setNestedValue() sets a deep key
        Then: Intermediate dicts are created
        """
        config: dict = {}

        setNestedValue(config, 'a.b.c', 1)

        assert config == {'a': {'b': {'c': 1}}}
