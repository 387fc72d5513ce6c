"""Encoded size calculation utilities.

This module provides functions to calculate the encoded size of a sequence
without actually encoding it. Every function accepts either the sequence
itself or its length.
"""

from __future__ import annotations

from typing import Sized, Union

from ..codec.layout import PackingLayout

SequenceOrCount = Union[Sized, int]


def _layout(numbers_or_count: SequenceOrCount) -> PackingLayout:
    if isinstance(numbers_or_count, int):
        count = numbers_or_count
    else:
        count = len(numbers_or_count)
    return PackingLayout.for_count(count)


def encoded_size(numbers_or_count: SequenceOrCount) -> int:
    """Calculate the encoded size in bytes.

    Args:
        numbers_or_count: Sequence to encode, or its length

    Returns:
        Size in bytes: 0 for an empty sequence, else ``2 + ceil(9 * count / 8)``

    Raises:
        CountOverflowError: If count exceeds 65535

    Example:
        >>> encoded_size([1] * 300)
        340
    """
    return _layout(numbers_or_count).total_bytes


def encoded_bits(numbers_or_count: SequenceOrCount) -> int:
    """Calculate the encoded size in bits, header included, padding excluded.

    Example:
        >>> encoded_bits(2)
        34  # 16 header bits + 2 * 9 bits
    """
    return _layout(numbers_or_count).total_bits


def payload_size(numbers_or_count: SequenceOrCount) -> int:
    """Calculate the payload size in bytes (header excluded)."""
    return _layout(numbers_or_count).payload_bytes


def text_size(numbers_or_count: SequenceOrCount, *, padded: bool = True) -> int:
    """Calculate the length of the base64 text produced by serialize().

    Args:
        numbers_or_count: Sequence to encode, or its length
        padded: If False, exclude trailing ``=`` padding characters

    Returns:
        Number of characters
    """
    num_bytes = _layout(numbers_or_count).total_bytes
    if padded:
        return 4 * ((num_bytes + 2) // 3)
    return (num_bytes * 8 + 5) // 6
