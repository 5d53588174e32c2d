################################################################################
# File Name: conftest.py
# Purpose/Description: Pytest fixtures and configuration
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
Pytest configuration and shared fixtures.

Fixtures defined here are available to all test files automatically.

Usage:
    def test_something(recorder, sampleConfig):
        # recorder and sampleConfig are automatically injected
        pass
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Generator

import pytest

# Add src to path for imports
srcPath = Path(__file__).parent.parent / 'src'
if str(srcPath) not in sys.path:
    sys.path.insert(0, str(srcPath))

from microtest import TestLedger, TestRecorder

# Environment variables touched by the configuration tests
TEST_ENV_VARS = [
    'MICROTEST_OUTPUT_MODE',
    'MICROTEST_LOG_LEVEL',
    'MICROTEST_LOG_FILE',
    'TEST_VAR',
]


# ================================================================================
# Framework Fixtures
# ================================================================================

@pytest.fixture
def ledger() -> TestLedger:
    """
    Provide a fresh ledger with default capacities.

    Returns:
        Initialized TestLedger
    """
    return TestLedger()


@pytest.fixture
def recorder() -> TestRecorder:
    """
    Provide a fresh recorder with default capacities.

    Returns:
        Initialized TestRecorder
    """
    return TestRecorder()


@pytest.fixture
def additionRecorder(recorder: TestRecorder) -> TestRecorder:
    """
    Provide a recorder holding one test case with one passing and one failing comparison.

    Returns:
        TestRecorder after the 'addition' scenario
    """
    recorder.startNextTestCase('addition')
    recorder.assertEqualsUInt32(4, 4)
    recorder.assertEqualsUInt32(4, 5)
    return recorder


# ================================================================================
# Configuration Fixtures
# ================================================================================

@pytest.fixture
def sampleConfig() -> Dict[str, Any]:
    """
    Provide sample configuration for tests.

    Returns:
        Dictionary with test configuration values
    """
    return {
        'logging': {
            'level': 'DEBUG'
        },
        'microtest': {
            'outputMode': 'showOnlyFailing',
            'maxTestCases': 10,
            'maxComparisonsPerTestCase': 5
        }
    }


@pytest.fixture
def minimalConfig() -> Dict[str, Any]:
    """
    Provide minimal configuration for testing defaults.

    Returns:
        Dictionary with minimal configuration
    """
    return {
        'logging': {
            'level': 'WARNING'
        }
    }


@pytest.fixture
def invalidConfig() -> Dict[str, Any]:
    """
    Provide configuration with out-of-range capacities.

    Returns:
        Dictionary with invalid microtest settings
    """
    return {
        'microtest': {
            'maxTestCases': 500,
            'maxComparisonsPerTestCase': 'many'
        }
    }


# ================================================================================
# Environment Fixtures
# ================================================================================

@pytest.fixture
def cleanEnv() -> Generator[None, None, None]:
    """
    Ensure clean environment with no test variables.

    Removes test variables before the test and restores the original
    environment afterwards, including variables a test loaded itself.
    """
    saved = {var: os.environ.pop(var, None) for var in TEST_ENV_VARS}

    yield

    for var, value in saved.items():
        if value is None:
            os.environ.pop(var, None)
        else:
            os.environ[var] = value


# ================================================================================
# File System Fixtures
# ================================================================================

@pytest.fixture
def tempConfigFile(tmp_path: Path, sampleConfig: Dict[str, Any]) -> Path:
    """
    Create temporary config file for testing.

    Args:
        tmp_path: Pytest temp directory fixture
        sampleConfig: Sample configuration fixture

    Returns:
        Path to temporary config file
    """
    configFile = tmp_path / 'config.json'
    with open(configFile, 'w') as f:
        json.dump(sampleConfig, f)

    return configFile


@pytest.fixture
def tempEnvFile(tmp_path: Path) -> Path:
    """
    Create temporary .env file for testing.

    Args:
        tmp_path: Pytest temp directory fixture

    Returns:
        Path to temporary .env file
    """
    envFile = tmp_path / '.env'
    envFile.write_text(
        'MICROTEST_OUTPUT_MODE=showOnlyFailing\n'
        'MICROTEST_LOG_LEVEL=WARNING\n'
    )

    return envFile


# ================================================================================
# Utility Fixtures
# ================================================================================

@pytest.fixture
def restoreRootLogger() -> Generator[None, None, None]:
    """
    Restore root logger handlers and level after a test reconfigures logging.

    setupLogging() replaces the root handlers, so tests that call it (directly
    or through main()) use this fixture.
    """
    rootLogger = logging.getLogger()
    savedHandlers = rootLogger.handlers[:]
    savedLevel = rootLogger.level

    yield

    for handler in rootLogger.handlers:
        if handler not in savedHandlers:
            handler.close()
    rootLogger.handlers[:] = savedHandlers
    rootLogger.setLevel(savedLevel)


@pytest.fixture
def assertNoLogs(caplog: pytest.LogCaptureFixture) -> Generator[None, None, None]:
    """
    Assert that no error logs were emitted during test.

    Usage:
        def test_something(assertNoLogs):
            # Test code here
            # Will fail if any ERROR logs are emitted
    """
    yield

    errors = [r for r in caplog.records if r.levelname == 'ERROR']
    assert len(errors) == 0, f"Unexpected error logs: {[r.message for r in errors]}"


# ================================================================================
# Pytest Configuration
# ================================================================================

def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
