################################################################################
# File Name: __init__.py
# Purpose/Description: Test package initialization
# Author: Michael Cornelison
# Creation Date: 2026-10-19
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
################################################################################

"""
Test package for microtest.

Run tests with:
    pytest tests/
    python tests/run_tests_microtest.py
"""
