################################################################################
# File Name: helpers.py
# Purpose/Description: Factory and configuration helpers for microtest
# Author: Michael Cornelison
# Creation Date: 2026-10-19
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-19    | M. Cornelison | Initial implementation
# ================================================================================
################################################################################
"""
Helper functions for microtest.

Provides factory functions and configuration utilities:
- getMicrotestConfig: Extract the microtest section with defaults applied
- validateMicrotestConfig: Check the microtest section for invalid values
- createLedgerFromConfig: Factory function to create a TestLedger
- createRecorderFromConfig: Factory function to create a TestRecorder

Configuration section (all keys optional):
    {
        "microtest": {
            "outputMode": "showOnlyFailing",
            "maxTestCases": 99,
            "maxComparisonsPerTestCase": 99
        }
    }
"""

from typing import Any

from common.config_validator import ConfigValidator
from common.error_handler import ConfigurationError

from .ledger import TestLedger
from .recorder import TestRecorder
from .types import (
    MAX_NUM_COMPARISONS_PER_TEST_CASE,
    MAX_NUM_TEST_CASES,
    OutputMode,
)


def getMicrotestConfig(config: dict[str, Any]) -> dict[str, Any]:
    """
    Extract microtest configuration from config.

    Args:
        config: Configuration dictionary

    Returns:
        Dictionary with microtest settings:
        - outputMode: Output mode name
        - maxTestCases: Test case capacity
        - maxComparisonsPerTestCase: Comparison capacity per test case
    """
    section = config.get('microtest', {}) or {}
    return {
        'outputMode': section.get('outputMode', OutputMode.SHOW_ALL.value),
        'maxTestCases': section.get('maxTestCases', MAX_NUM_TEST_CASES),
        'maxComparisonsPerTestCase': section.get(
            'maxComparisonsPerTestCase',
            MAX_NUM_COMPARISONS_PER_TEST_CASE
        ),
    }


def validateMicrotestConfig(config: dict[str, Any]) -> list[str]:
    """
    Validate microtest configuration values.

    An unknown output mode is not an error; it falls back to showAll.

    Args:
        config: Configuration dictionary

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []
    settings = getMicrotestConfig(config)
    validator = ConfigValidator()

    limits = {
        'maxTestCases': MAX_NUM_TEST_CASES,
        'maxComparisonsPerTestCase': MAX_NUM_COMPARISONS_PER_TEST_CASE,
    }
    for key, limit in limits.items():
        value = settings[key]
        if not validator.validateField({'microtest': settings}, f'microtest.{key}', int):
            errors.append(f"microtest.{key} must be an integer, got {value!r}")
        elif not 1 <= value <= limit:
            errors.append(f"microtest.{key} must be between 1 and {limit}, got {value}")

    return errors


def createLedgerFromConfig(config: dict[str, Any]) -> TestLedger:
    """
    Create a TestLedger from configuration.

    Args:
        config: Configuration dictionary

    Returns:
        Configured, initialized TestLedger

    Raises:
        ConfigurationError: If the microtest section is invalid
    """
    errors = validateMicrotestConfig(config)
    if errors:
        raise ConfigurationError(
            "Invalid microtest configuration",
            details={'errors': errors}
        )

    settings = getMicrotestConfig(config)
    ledger = TestLedger(
        maxTestCases=settings['maxTestCases'],
        maxComparisonsPerTestCase=settings['maxComparisonsPerTestCase'],
    )
    ledger.configureOutputMode(settings['outputMode'])
    return ledger


def createRecorderFromConfig(config: dict[str, Any]) -> TestRecorder:
    """
    Create a TestRecorder from configuration.

    Args:
        config: Configuration dictionary

    Returns:
        Configured TestRecorder

    Example:
        config = loadConfigFile('microtest_config.json')
        recorder = createRecorderFromConfig(config)
        recorder.startNextTestCase('first case')
    """
    return TestRecorder(createLedgerFromConfig(config))
