################################################################################
# File Name: reporter.py
# Purpose/Description: Textual pass/fail report rendering for a test ledger
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
Report rendering module.

Renders a read-only view of a TestLedger as text:
- Per test case: header and one line per comparison (subject to output mode)
- Per test case: a summary line (always)
- Final block: case count, comparison count, passing, failing, verdict

Rendering never modifies the ledger; rendering twice without new
comparisons produces identical text.

Usage:
    from microtest.reporter import showResults

    showResults(ledger)              # writes to stdout
    text = renderResults(ledger)     # returns the report
"""

import sys
from typing import List, Optional, TextIO

from .ledger import TestLedger
from .types import OutputMode, TestCase

PASS_TEXT = 'PASS'
FAIL_TEXT = 'FAIL'


def _passFail(passed: bool) -> str:
    return PASS_TEXT if passed else FAIL_TEXT


def _renderCaseDetail(testCase: TestCase) -> List[str]:
    """Render the header and comparison lines of a test case."""
    lines = [
        f"\n\n--| Test Case {testCase.number:2d}: {testCase.description:<32} "
        f"--- expected --------- actual --------- result ---\n\n"
    ]

    for number, comparison in enumerate(testCase.comparisons, 1):
        lines.append(
            f"#{testCase.number:02d}.{number:02d}: {comparison.description:<38} "
            f"{comparison.expected:>16} {comparison.actual:>16} "
            f"{_passFail(comparison.passed):>16}\n"
        )

    return lines


def _renderCaseSummary(testCase: TestCase) -> str:
    """Render the one-line summary of a test case."""
    return (
        f"\n--| Summary of test case {testCase.number:2d}: "
        f"{testCase.passingCount:45d}/{testCase.comparisonCount:2d} passed "
        f"{_passFail(testCase.passed):>12}\n"
    )


def _renderFinalResults(ledger: TestLedger) -> List[str]:
    """Render the run-wide result block."""
    stats = ledger.getStats()
    return [
        "\n\n----- Final Test Results -----\n------------------------------\n",
        f"---| Num test cases:  {stats.testCaseCount}\n",
        f"---| Num comparisons: {stats.totalComparisons}\n",
        "---|\n",
        f"---| Passing tests: {stats.totalPassing}\n",
        f"---| Failing tests: {stats.totalFailing}\n",
        f"\n---| Test {'PASSED' if stats.passed else 'FAILED'}\n\n",
    ]


def renderResults(ledger: TestLedger) -> str:
    """
    Render the test report for a ledger.

    Comparison lines of a test case are included when the output mode is
    SHOW_ALL or the test case has at least one failing comparison.

    Args:
        ledger: Ledger to render

    Returns:
        Report text
    """
    parts: List[str] = []

    for testCase in ledger.cases:
        if ledger.outputMode == OutputMode.SHOW_ALL or testCase.failingCount > 0:
            parts.extend(_renderCaseDetail(testCase))
        parts.append(_renderCaseSummary(testCase))

    parts.extend(_renderFinalResults(ledger))
    return ''.join(parts)


def showResults(ledger: TestLedger, stream: Optional[TextIO] = None) -> None:
    """
    Write the test report for a ledger to a stream.

    Args:
        ledger: Ledger to render
        stream: Output stream (default: standard output)
    """
    stream = stream if stream is not None else sys.stdout
    stream.write(renderResults(ledger))
    stream.flush()
