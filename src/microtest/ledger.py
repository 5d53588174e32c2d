################################################################################
# File Name: ledger.py
# Purpose/Description: Capacity-checked store of test cases and comparisons
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
Test ledger module.

The ledger holds everything recorded during one test run:
- Ordered test cases, each holding ordered comparisons
- Run-wide counters (comparisons, passing, failing)
- The report output mode
- A single pending description slot for the next comparison

Capacities are bounded. Operations that would exceed a bound raise
CapacityExceededError before changing any state, so a comparison is either
fully recorded or not recorded at all.

Usage:
    ledger = TestLedger()
    ledger.startNextTestCase('addition')
    ledger.setNextComparisonDescription('2 + 2')
    ledger.commitComparison('0x4', '0x4', True)
"""

import logging
from typing import Any, List, Optional, Tuple

from common.error_handler import ConfigurationError

from .exceptions import CapacityExceededError
from .formatting import checkDescription
from .types import (
    MAX_NUM_COMPARISONS_PER_TEST_CASE,
    MAX_NUM_TEST_CASES,
    Comparison,
    LedgerStats,
    OutputMode,
    TestCase,
)

logger = logging.getLogger(__name__)


class TestLedger:
    """
    In-memory record of one test run.

    A ledger is an explicit object owned by its caller; independent runs use
    independent ledgers. It is not thread-safe.

    Attributes:
        maxTestCases: Maximum number of test cases in a run
        maxComparisonsPerTestCase: Maximum number of comparisons per test case
        outputMode: Report output mode
        currentCaseIndex: Number of the active test case (0 before the first)
        totalComparisons: Number of comparisons recorded in the run
        totalPassing: Number of passing comparisons
        totalFailing: Number of failing comparisons
    """

    # Keep pytest from collecting this class when imported into test modules
    __test__ = False

    def __init__(
        self,
        maxTestCases: int = MAX_NUM_TEST_CASES,
        maxComparisonsPerTestCase: int = MAX_NUM_COMPARISONS_PER_TEST_CASE
    ):
        """
        Initialize an empty ledger.

        Args:
            maxTestCases: Test case capacity, between 1 and MAX_NUM_TEST_CASES
            maxComparisonsPerTestCase: Comparison capacity per test case,
                between 1 and MAX_NUM_COMPARISONS_PER_TEST_CASE

        Raises:
            ConfigurationError: If a capacity is outside its allowed range
        """
        self.maxTestCases = _checkCapacity(
            'maxTestCases', maxTestCases, MAX_NUM_TEST_CASES
        )
        self.maxComparisonsPerTestCase = _checkCapacity(
            'maxComparisonsPerTestCase',
            maxComparisonsPerTestCase,
            MAX_NUM_COMPARISONS_PER_TEST_CASE
        )
        self.outputMode = OutputMode.SHOW_ALL

        self._cases: List[TestCase] = []
        self._pendingDescription: Optional[str] = None
        self.currentCaseIndex = 0
        self.totalComparisons = 0
        self.totalPassing = 0
        self.totalFailing = 0

    # ================================================================================
    # Run Lifecycle
    # ================================================================================

    def initialize(self) -> None:
        """
        Reset the ledger for a new run.

        Discards all test cases, counters and any pending description.
        The output mode is kept. Safe to call more than once.
        """
        self._cases = []
        self._pendingDescription = None
        self.currentCaseIndex = 0
        self.totalComparisons = 0
        self.totalPassing = 0
        self.totalFailing = 0
        logger.debug("Ledger initialized")

    def configureOutputMode(self, mode: Any) -> OutputMode:
        """
        Set the report output mode.

        Unrecognized modes fall back to SHOW_ALL with a warning.

        Args:
            mode: OutputMode or its string value

        Returns:
            The output mode now in effect
        """
        resolved = OutputMode.fromValue(mode)

        recognized = isinstance(mode, OutputMode) or (
            isinstance(mode, str) and resolved.value.lower() == mode.strip().lower()
        )
        if not recognized:
            logger.warning(f"Invalid output mode {mode!r}, defaulting to {resolved.value}")

        self.outputMode = resolved
        return resolved

    # ================================================================================
    # Recording
    # ================================================================================

    def startNextTestCase(self, description: str) -> TestCase:
        """
        Start the next test case.

        Clears any pending comparison description.

        Args:
            description: Test case label

        Returns:
            The new, empty test case

        Raises:
            CapacityExceededError: If the test case limit is already reached
            DescriptionTooLongError: If description is too long
        """
        checkDescription(description)

        if self.currentCaseIndex >= self.maxTestCases:
            logger.error(f"Test case limit of {self.maxTestCases} reached")
            raise CapacityExceededError(
                "Test case limit reached",
                details={'limit': self.maxTestCases, 'description': description}
            )

        self.currentCaseIndex += 1
        testCase = TestCase(number=self.currentCaseIndex, description=description)
        self._cases.append(testCase)
        self._pendingDescription = None

        logger.debug(f"Started test case {testCase.number}: {description}")
        return testCase

    def setNextComparisonDescription(self, description: str) -> None:
        """
        Stage a description for the next comparison in the current test case.

        A later call replaces a description that has not been used yet.

        Args:
            description: Comparison label

        Raises:
            CapacityExceededError: If no test case has been started
            DescriptionTooLongError: If description is too long
        """
        checkDescription(description)
        self._requireCurrentCase()
        self._pendingDescription = description

    def commitComparison(self, expected: str, actual: str, passed: bool) -> Comparison:
        """
        Record a comparison outcome in the current test case.

        Consumes the pending description (empty if none was staged) and
        updates the counters.

        Args:
            expected: Representation of the expected value
            actual: Representation of the actual value
            passed: Whether the comparison passed

        Returns:
            The recorded comparison

        Raises:
            CapacityExceededError: If no test case has been started or the
                current test case is full
        """
        testCase = self._requireCurrentCase()

        if testCase.comparisonCount >= self.maxComparisonsPerTestCase:
            logger.error(
                f"Comparison limit of {self.maxComparisonsPerTestCase} reached "
                f"in test case {testCase.number}"
            )
            raise CapacityExceededError(
                "Comparison limit reached",
                details={
                    'testCase': testCase.number,
                    'limit': self.maxComparisonsPerTestCase,
                }
            )

        comparison = Comparison(
            description=self._pendingDescription or '',
            expected=expected,
            actual=actual,
            passed=bool(passed),
        )
        self._pendingDescription = None

        testCase.comparisons.append(comparison)
        self.totalComparisons += 1
        if comparison.passed:
            self.totalPassing += 1
        else:
            self.totalFailing += 1

        logger.debug(
            f"Comparison {testCase.number}.{testCase.comparisonCount} "
            f"{'PASS' if comparison.passed else 'FAIL'}: "
            f"expected={expected} actual={actual}"
        )
        return comparison

    def _requireCurrentCase(self) -> TestCase:
        """Return the active test case, raising if none has been started."""
        if self.currentCaseIndex == 0:
            logger.error("No active test case")
            raise CapacityExceededError(
                "No active test case; start a test case before recording",
                details={'currentCaseIndex': self.currentCaseIndex}
            )
        return self._cases[self.currentCaseIndex - 1]

    # ================================================================================
    # Queries
    # ================================================================================

    @property
    def cases(self) -> Tuple[TestCase, ...]:
        """Active test cases in ascending order."""
        return tuple(self._cases)

    @property
    def currentCase(self) -> Optional[TestCase]:
        """The test case receiving comparisons, or None before the first."""
        if self.currentCaseIndex == 0:
            return None
        return self._cases[self.currentCaseIndex - 1]

    @property
    def pendingDescription(self) -> Optional[str]:
        """Description staged for the next comparison, if any."""
        return self._pendingDescription

    def getStats(self) -> LedgerStats:
        """Get a snapshot of the run counters."""
        return LedgerStats(
            testCaseCount=self.currentCaseIndex,
            totalComparisons=self.totalComparisons,
            totalPassing=self.totalPassing,
            totalFailing=self.totalFailing,
        )

    def hasFailures(self) -> bool:
        """Check whether any comparison failed."""
        return self.totalFailing > 0


def _checkCapacity(name: str, value: Any, limit: int) -> int:
    """Validate a configured capacity against its hard limit."""
    if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= limit:
        raise ConfigurationError(
            f"{name} must be an integer between 1 and {limit}",
            details={'field': name, 'value': value}
        )
    return value
