################################################################################
# File Name: __init__.py
# Purpose/Description: microtest package for recording and reporting unit tests
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
microtest Package.

A small, self-hosted unit test recording and reporting framework for
environments without a full test runner:
- Test ledger with bounded capacity (TestLedger)
- Recording API for host test code (TestRecorder)
- Exact and approximate comparators (unsigned 32-bit ints, single floats)
- Textual pass/fail report (renderResults, showResults)
- Exception classes (MicrotestError and subclasses)
- Helper functions (factory and config utilities)

Usage:
    from microtest import TestRecorder

    recorder = TestRecorder()
    recorder.startNextTestCase('addition')
    recorder.assertEqualsUInt32(4, 2 + 2)
    recorder.showResults()
"""

# Comparators
from .comparators import (
    ComparisonOutcome,
    absFloat32,
    evaluateFloat32,
    evaluateUInt32,
    toFloat32,
    toUInt32,
)

# Exceptions
from .exceptions import (
    CapacityExceededError,
    DescriptionTooLongError,
    MicrotestError,
    OperandRangeError,
)

# Helpers
from .helpers import (
    createLedgerFromConfig,
    createRecorderFromConfig,
    getMicrotestConfig,
    validateMicrotestConfig,
)

# Ledger, recorder and reporter
from .ledger import TestLedger
from .recorder import EXIT_FAILED, EXIT_PASSED, TestRecorder
from .reporter import renderResults, showResults

# Types
from .types import (
    MAX_COMPARISON_FIELD_LENGTH,
    MAX_NUM_COMPARISONS_PER_TEST_CASE,
    MAX_NUM_TEST_CASES,
    MAX_TEST_DESCRIPTION_LENGTH,
    UINT32_MAX,
    Comparison,
    LedgerStats,
    OutputMode,
    TestCase,
)

__version__ = '1.0.0'

__all__ = [
    # Types - Enums
    'OutputMode',
    # Types - Dataclasses
    'Comparison',
    'TestCase',
    'LedgerStats',
    # Types - Constants
    'MAX_NUM_TEST_CASES',
    'MAX_NUM_COMPARISONS_PER_TEST_CASE',
    'MAX_TEST_DESCRIPTION_LENGTH',
    'MAX_COMPARISON_FIELD_LENGTH',
    'UINT32_MAX',
    # Exceptions
    'MicrotestError',
    'CapacityExceededError',
    'DescriptionTooLongError',
    'OperandRangeError',
    # Comparators
    'ComparisonOutcome',
    'evaluateUInt32',
    'evaluateFloat32',
    'absFloat32',
    'toUInt32',
    'toFloat32',
    # Ledger, recorder and reporter
    'TestLedger',
    'TestRecorder',
    'EXIT_PASSED',
    'EXIT_FAILED',
    'renderResults',
    'showResults',
    # Helpers
    'createLedgerFromConfig',
    'createRecorderFromConfig',
    'getMicrotestConfig',
    'validateMicrotestConfig',
    '__version__',
]
