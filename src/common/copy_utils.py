################################################################################
# File Name: copy_utils.py
# Purpose/Description: Deep-clone helper for ownership hand-offs
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
Deep-clone helper.

Every object that crosses an ownership boundary (cache to caller, caller to
commit channel) goes through copyConfig() so nested parameter groups are
never shared.
"""

import copy
from typing import TypeVar

T = TypeVar('T')


def copyConfig(value: T) -> T:
    """
    Return a fully independent copy of a config object.

    Args:
        value: Settings, Profile, list of profiles, or plain data

    Returns:
        Deep copy of value
    """
    return copy.deepcopy(value)
