################################################################################
# File Name: recorder.py
# Purpose/Description: Public recording API for host test code
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
Test recorder module.

TestRecorder is the object host test code talks to. It owns a TestLedger,
runs comparators and commits their outcomes, and renders the report.

Usage:
    from microtest import TestRecorder, OutputMode

    recorder = TestRecorder()
    recorder.configureOutputMode(OutputMode.SHOW_ONLY_FAILING)

    recorder.startNextTestCase('addition')
    recorder.setNextComparisonDescription('2 + 2')
    recorder.assertEqualsUInt32(4, add(2, 2))

    recorder.startNextTestCase('scaling')
    recorder.assertEqualsFloat32(0.5, scale(1.0), 0.0001)

    recorder.showResults()
    sys.exit(recorder.exitCode())
"""

import logging
from typing import Any, Optional, TextIO

from common.logging_config import logWithContext

from .comparators import ComparisonOutcome, evaluateFloat32, evaluateUInt32
from .ledger import TestLedger
from .reporter import renderResults, showResults
from .types import LedgerStats, OutputMode, TestCase

logger = logging.getLogger(__name__)

EXIT_PASSED = 0
EXIT_FAILED = 2


class TestRecorder:
    """
    Records test cases and comparisons for one test run.

    Comparators return their boolean result so host code can branch on it;
    a failing comparison is recorded, never raised.

    Attributes:
        ledger: The ledger this recorder writes into
    """

    # Keep pytest from collecting this class when imported into test modules
    __test__ = False

    def __init__(self, ledger: Optional[TestLedger] = None):
        """
        Initialize the recorder.

        Args:
            ledger: Ledger to record into (a new default ledger if None)
        """
        self.ledger = ledger if ledger is not None else TestLedger()

    def initialize(self) -> None:
        """Reset the run; must precede reuse of a recorder for a new run."""
        self.ledger.initialize()

    def configureOutputMode(self, mode: Any) -> OutputMode:
        """
        Set the report output mode.

        Args:
            mode: OutputMode or its string value; anything else means SHOW_ALL

        Returns:
            The output mode now in effect
        """
        return self.ledger.configureOutputMode(mode)

    def startNextTestCase(self, description: str) -> TestCase:
        """
        Start the next test case.

        Args:
            description: Test case label (at most 32 characters)

        Returns:
            The new test case

        Raises:
            CapacityExceededError: If the test case limit is reached
            DescriptionTooLongError: If description is too long
        """
        return self.ledger.startNextTestCase(description)

    def setNextComparisonDescription(self, description: str) -> None:
        """
        Label the next comparison of the current test case.

        Args:
            description: Comparison label (at most 32 characters)

        Raises:
            CapacityExceededError: If no test case has been started
            DescriptionTooLongError: If description is too long
        """
        self.ledger.setNextComparisonDescription(description)

    def assertEqualsUInt32(self, expected: int, actual: int) -> bool:
        """
        Compare two unsigned 32-bit integers and record the result.

        Args:
            expected: Expected value
            actual: Actual value

        Returns:
            True if the values are identical

        Raises:
            OperandRangeError: If an operand is not an unsigned 32-bit integer
            CapacityExceededError: If the comparison cannot be recorded
        """
        return self._commit(evaluateUInt32(expected, actual))

    def assertEqualsFloat32(self, expected: float, actual: float, epsilon: float) -> bool:
        """
        Compare two single precision floats and record the result.

        Args:
            expected: Expected value
            actual: Actual value
            epsilon: abs(expected - actual) must be strictly below this to pass

        Returns:
            True if the values are within epsilon of each other

        Raises:
            OperandRangeError: If an operand is not a real number
            CapacityExceededError: If the comparison cannot be recorded
        """
        return self._commit(evaluateFloat32(expected, actual, epsilon))

    def _commit(self, outcome: ComparisonOutcome) -> bool:
        """Commit an evaluated outcome and return its result."""
        self.ledger.commitComparison(outcome.expected, outcome.actual, outcome.passed)
        return outcome.passed

    def renderResults(self) -> str:
        """Render the report as text."""
        return renderResults(self.ledger)

    def showResults(self, stream: Optional[TextIO] = None) -> None:
        """
        Write the report to a stream and log the run summary.

        Args:
            stream: Output stream (default: standard output)
        """
        showResults(self.ledger, stream)

        stats = self.getStats()
        logWithContext(
            logger,
            'info' if stats.passed else 'warning',
            f"Test run {'PASSED' if stats.passed else 'FAILED'}",
            **stats.toDict()
        )

    def getStats(self) -> LedgerStats:
        """Get a snapshot of the run counters."""
        return self.ledger.getStats()

    def hasFailures(self) -> bool:
        """Check whether any comparison failed."""
        return self.ledger.hasFailures()

    def exitCode(self) -> int:
        """Process exit code for the run: 0 when passed, 2 when failed."""
        return EXIT_FAILED if self.hasFailures() else EXIT_PASSED
