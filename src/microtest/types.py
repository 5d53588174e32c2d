################################################################################
# File Name: types.py
# Purpose/Description: Type definitions for the test ledger
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
Type definitions for the microtest framework.

Contains constants, enums and dataclasses used by the ledger, recorder and
reporter:
- OutputMode: Report filter (show all or only failing test cases)
- Comparison: A single recorded expected-vs-actual check
- TestCase: A named group of comparisons
- LedgerStats: Snapshot of the run counters

These types have no dependencies on other project modules.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


# ================================================================================
# Constants
# ================================================================================

MAX_NUM_TEST_CASES = 99
MAX_NUM_COMPARISONS_PER_TEST_CASE = 99

# Longest accepted test case or comparison description
MAX_TEST_DESCRIPTION_LENGTH = 32

# Longest expected/actual representation stored in a comparison
MAX_COMPARISON_FIELD_LENGTH = 16

UINT32_MAX = 0xFFFFFFFF


# ================================================================================
# Enums
# ================================================================================

class OutputMode(Enum):
    """
    Report output mode.

    Modes:
        SHOW_ALL: Every comparison of every test case is shown
        SHOW_ONLY_FAILING: Comparisons are shown only for failing test cases
    """
    SHOW_ALL = 'showAll'
    SHOW_ONLY_FAILING = 'showOnlyFailing'

    @classmethod
    def fromValue(cls, value: Any) -> 'OutputMode':
        """
        Convert a mode or mode name to an OutputMode.

        Unrecognized values fall back to SHOW_ALL.

        Args:
            value: OutputMode instance or its string value (case-insensitive)

        Returns:
            Matching OutputMode, or SHOW_ALL
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for mode in cls:
                if mode.value.lower() == value.strip().lower():
                    return mode
        return cls.SHOW_ALL


# ================================================================================
# Data Classes
# ================================================================================

@dataclass(frozen=True)
class Comparison:
    """
    A single recorded comparison.

    Attributes:
        description: Label staged before the comparison ('' if none)
        expected: Bounded text representation of the expected value
        actual: Bounded text representation of the actual value
        passed: Whether the comparison passed
    """
    description: str
    expected: str
    actual: str
    passed: bool

    def toDict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            'description': self.description,
            'expected': self.expected,
            'actual': self.actual,
            'passed': self.passed,
        }


@dataclass
class TestCase:
    """
    A named group of comparisons.

    Attributes:
        number: 1-based position of the test case in the run
        description: Test case label
        comparisons: Recorded comparisons in commit order
    """
    # Keep pytest from collecting this class when imported into test modules
    __test__ = False

    number: int
    description: str
    comparisons: List[Comparison] = field(default_factory=list)

    @property
    def comparisonCount(self) -> int:
        return len(self.comparisons)

    @property
    def failingCount(self) -> int:
        return sum(1 for comparison in self.comparisons if not comparison.passed)

    @property
    def passingCount(self) -> int:
        return self.comparisonCount - self.failingCount

    @property
    def passed(self) -> bool:
        """A test case passes when none of its comparisons failed."""
        return self.failingCount == 0

    def toDict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            'number': self.number,
            'description': self.description,
            'comparisonCount': self.comparisonCount,
            'failingCount': self.failingCount,
            'passed': self.passed,
            'comparisons': [comparison.toDict() for comparison in self.comparisons],
        }


@dataclass(frozen=True)
class LedgerStats:
    """
    Snapshot of the counters of a test run.

    Attributes:
        testCaseCount: Number of test cases started
        totalComparisons: Number of comparisons recorded
        totalPassing: Number of passing comparisons
        totalFailing: Number of failing comparisons
    """
    testCaseCount: int = 0
    totalComparisons: int = 0
    totalPassing: int = 0
    totalFailing: int = 0

    @property
    def passed(self) -> bool:
        return self.totalFailing == 0

    def toDict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            'testCaseCount': self.testCaseCount,
            'totalComparisons': self.totalComparisons,
            'totalPassing': self.totalPassing,
            'totalFailing': self.totalFailing,
            'passed': self.passed,
        }
