################################################################################
# File Name: types.py
# Purpose/Description: Editing session states for the edit staging area
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
Type definitions for the staging subpackage.

An editing session is either IdleSession or EditingSession. Dirtiness is not
a state: it is recomputed from the working copy on demand.
"""

from dataclasses import dataclass

from ..profile.types import Profile


@dataclass(frozen=True)
class IdleSession:
    """No profile checked out."""


@dataclass
class EditingSession:
    """
    One custom profile checked out for editing.

    Attributes:
        index: Position of the profile in the custom list when checked out
        workingCopy: Private deep copy callers mutate freely
    """

    index: int
    workingCopy: Profile


EditSession = IdleSession | EditingSession

IDLE = IdleSession()
