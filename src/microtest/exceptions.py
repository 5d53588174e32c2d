################################################################################
# File Name: exceptions.py
# Purpose/Description: Exception classes for the microtest framework
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
Exception classes for microtest.

Contains the framework-level errors a host must handle:
- MicrotestError: Base exception for all framework errors
- CapacityExceededError: A test case or comparison limit was reached
- DescriptionTooLongError: A description exceeds the length bound
- OperandRangeError: A comparator operand is not of a supported type/range

Failed comparisons are never exceptions; they are recorded outcomes.
"""

from typing import Any, Dict, Optional

from common.error_handler import BaseError, DataError, ErrorCategory


class MicrotestError(BaseError):
    """
    Base exception for microtest errors.

    Attributes:
        message: Human-readable error message
        details: Dictionary with additional error context

    Example:
        raise MicrotestError(
            "Ledger is in an unexpected state",
            details={'currentCaseIndex': 3}
        )
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class CapacityExceededError(MicrotestError):
    """
    A fixed capacity of the ledger was reached.

    Raised when starting a test case beyond the case limit, committing a
    comparison beyond the per-case limit, or recording with no active test
    case.

    Example:
        raise CapacityExceededError(
            "Test case limit reached",
            details={'limit': 99}
        )
    """
    category = ErrorCategory.CAPACITY


class DescriptionTooLongError(MicrotestError, DataError):
    """
    A test case or comparison description exceeds the length bound.

    Example:
        raise DescriptionTooLongError(
            "Description too long",
            details={'length': 40, 'limit': 32}
        )
    """


class OperandRangeError(MicrotestError, DataError):
    """
    A comparator operand is outside its supported type or range.

    Example:
        raise OperandRangeError(
            "Operand is not an unsigned 32-bit integer",
            details={'operand': 'expected', 'value': -1}
        )
    """
