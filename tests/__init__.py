################################################################################
# File Name: __init__.py
# Purpose/Description: Test package initialization
# Author: Control Center Team
# Creation Date: 2026-10-17
# Copyright: (c) 2026 Control Center Project. All rights reserved.
################################################################################

"""
Test package for Control Center.

Run tests with:
    pytest tests/
    pytest tests/ -m "not integration"
"""
