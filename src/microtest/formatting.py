################################################################################
# File Name: formatting.py
# Purpose/Description: Bounded text formatting for ledger records
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
Bounded text formatting.

Every string stored in the ledger has a fixed maximum length:
- Descriptions are checked and rejected when too long
- Value representations are truncated to the field length

Usage:
    from microtest.formatting import formatUInt32, formatFloat32

    formatUInt32(255)      # '0xff'
    formatFloat32(1.5)     # '1.500000f'
"""

import logging

from .exceptions import DescriptionTooLongError
from .types import MAX_COMPARISON_FIELD_LENGTH, MAX_TEST_DESCRIPTION_LENGTH

logger = logging.getLogger(__name__)


def boundedText(text: str, maxLength: int = MAX_COMPARISON_FIELD_LENGTH) -> str:
    """
    Limit text to maxLength characters.

    Text that does not fit is cut at the limit.

    Args:
        text: Text to bound
        maxLength: Maximum number of characters kept

    Returns:
        Text of at most maxLength characters
    """
    if len(text) <= maxLength:
        return text

    logger.debug(f"Truncated '{text}' to {maxLength} characters")
    return text[:maxLength]


def checkDescription(
    description: str,
    maxLength: int = MAX_TEST_DESCRIPTION_LENGTH
) -> str:
    """
    Validate a test case or comparison description.

    Args:
        description: Description text
        maxLength: Longest accepted description

    Returns:
        The unchanged description

    Raises:
        TypeError: If description is not a string
        DescriptionTooLongError: If description exceeds maxLength
    """
    if not isinstance(description, str):
        raise TypeError(
            f"Description must be a string, got {type(description).__name__}"
        )

    if len(description) > maxLength:
        raise DescriptionTooLongError(
            f"Description exceeds {maxLength} characters",
            details={
                'description': description,
                'length': len(description),
                'limit': maxLength,
            }
        )

    return description


def formatUInt32(value: int) -> str:
    """Format an unsigned integer as lowercase hex with a 0x prefix."""
    return boundedText(f'0x{value:x}')


def formatFloat32(value: float) -> str:
    """Format a float with six decimals and an 'f' suffix, e.g. '1.000000f'."""
    return boundedText(f'{value:f}f')
