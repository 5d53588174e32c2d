################################################################################
# File Name: comparators.py
# Purpose/Description: Exact and approximate equality evaluation
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
Comparator functions.

Pure evaluation of the two supported comparisons:
- evaluateUInt32: exact equality of unsigned 32-bit integers
- evaluateFloat32: epsilon-bounded equality of single precision floats

Each evaluation returns a ComparisonOutcome holding the result and the
bounded text representations of both operands. Nothing is recorded here;
the recorder commits outcomes into the ledger.

Operand types other than these two must be reduced by the caller, e.g. a
signed value can be compared as `value & 0xFFFFFFFF`.
"""

import math
import numbers
import struct
from dataclasses import dataclass

from .exceptions import OperandRangeError
from .formatting import formatFloat32, formatUInt32
from .types import UINT32_MAX


@dataclass(frozen=True)
class ComparisonOutcome:
    """
    Result of evaluating a comparison.

    Attributes:
        passed: Whether the comparison passed
        expected: Bounded representation of the expected operand
        actual: Bounded representation of the actual operand
    """
    passed: bool
    expected: str
    actual: str


# ================================================================================
# Operand Conversion
# ================================================================================

def toUInt32(value: numbers.Integral, operand: str = 'value') -> int:
    """
    Check that value is an unsigned 32-bit integer.

    Args:
        value: Integer operand
        operand: Operand name used in error details

    Returns:
        The value as a plain int

    Raises:
        OperandRangeError: If value is not an integer in [0, 0xFFFFFFFF]
    """
    if not isinstance(value, numbers.Integral):
        raise OperandRangeError(
            f"Operand '{operand}' is not an integer",
            details={'operand': operand, 'type': type(value).__name__}
        )

    value = int(value)
    if not 0 <= value <= UINT32_MAX:
        raise OperandRangeError(
            f"Operand '{operand}' is outside the unsigned 32-bit range",
            details={'operand': operand, 'value': value}
        )

    return value


def toFloat32(value: numbers.Real, operand: str = 'value') -> float:
    """
    Round a real number to the nearest single precision value.

    Magnitudes beyond the single precision range become infinities.

    Args:
        value: Real operand
        operand: Operand name used in error details

    Returns:
        The value rounded to single precision

    Raises:
        OperandRangeError: If value is not a real number
    """
    if not isinstance(value, numbers.Real):
        raise OperandRangeError(
            f"Operand '{operand}' is not a real number",
            details={'operand': operand, 'type': type(value).__name__}
        )

    # Integers too large for a double overflow in float() itself
    try:
        return struct.unpack('<f', struct.pack('<f', float(value)))[0]
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def absFloat32(x: float) -> float:
    """Absolute value decided by sign alone."""
    return x if x > 0.0 else x * -1.0


# ================================================================================
# Evaluation
# ================================================================================

def evaluateUInt32(expected: int, actual: int) -> ComparisonOutcome:
    """
    Evaluate exact equality of two unsigned 32-bit integers.

    Args:
        expected: Expected value
        actual: Actual value

    Returns:
        ComparisonOutcome with both operands formatted as hex

    Raises:
        OperandRangeError: If an operand is not an unsigned 32-bit integer
    """
    expected = toUInt32(expected, 'expected')
    actual = toUInt32(actual, 'actual')

    return ComparisonOutcome(
        passed=expected == actual,
        expected=formatUInt32(expected),
        actual=formatUInt32(actual),
    )


def evaluateFloat32(expected: float, actual: float, epsilon: float) -> ComparisonOutcome:
    """
    Evaluate approximate equality of two single precision floats.

    The comparison passes iff abs(expected - actual) < epsilon. A difference
    exactly equal to epsilon fails. NaN operands always fail.

    Args:
        expected: Expected value
        actual: Actual value
        epsilon: Exclusive upper bound of the allowed difference

    Returns:
        ComparisonOutcome with both operands formatted as float literals

    Raises:
        OperandRangeError: If an operand or epsilon is not a real number
    """
    expected = toFloat32(expected, 'expected')
    actual = toFloat32(actual, 'actual')
    epsilon = toFloat32(epsilon, 'epsilon')

    diff = toFloat32(expected - actual)

    return ComparisonOutcome(
        passed=absFloat32(diff) < epsilon,
        expected=formatFloat32(expected),
        actual=formatFloat32(actual),
    )
