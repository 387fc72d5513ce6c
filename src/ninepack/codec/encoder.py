"""Compact binary encoder for small-integer sequences.

This module provides the encode() function that packs an ordered sequence of
integers into a 2-byte count header followed by 9-bit big-endian fields.
"""

from __future__ import annotations

import logging
import struct
from typing import Iterable, Optional

from ..exceptions import EncodeError, RangeTruncationError
from .bitpack import BitPacker
from .layout import HEADER_FORMAT, MAX_VALUE, VALUE_BITS, VALUE_MASK, RangeMode, check_count

logger = logging.getLogger(__name__)


def encode(
    numbers: Optional[Iterable[int]],
    *,
    mode: RangeMode | str = RangeMode.TRUNCATE,
) -> bytes:
    """Encode a sequence of integers to compact binary format.

    Values are written in sequence order, each as 9 bits (most significant bit
    first), after a big-endian uint16 holding the number of values. The payload
    is zero-padded to a whole byte.

    Args:
        numbers: Integers to encode; ``None`` or empty yields ``b""``
        mode: Range handling for values outside [0, 511]. ``"truncate"``
            (default) keeps the low 9 bits, ``"strict"`` raises.

    Returns:
        Encoded buffer; empty (no header at all) for an empty sequence

    Raises:
        CountOverflowError: If there are more than 65535 values
        RangeTruncationError: If mode is strict and a value is out of range
        EncodeError: If an item is not an integer

    Examples:
        ```python
        from ninepack import encode

        encode([5])           # b"\\x00\\x01\\x02\\x80"
        encode([])            # b""
        encode([512])         # truncated to 0
        encode([512], mode="strict")  # raises RangeTruncationError
        ```
    """
    range_mode = RangeMode.coerce(mode)

    if numbers is None:
        return b""
    values = list(numbers)
    if not values:
        return b""

    count = check_count(len(values))

    packer = BitPacker()
    packer.write_bytes(struct.pack(HEADER_FORMAT, count))

    truncated = 0
    for index, value in enumerate(values):
        field, was_truncated = _field_value(index, value, range_mode)
        packer.write_uint(field, VALUE_BITS)
        truncated += was_truncated

    if truncated:
        logger.debug("Truncated %d of %d values to their low %d bits", truncated, count, VALUE_BITS)

    return packer.to_bytes()


def _field_value(index: int, value: object, mode: RangeMode) -> tuple[int, bool]:
    """Return the 9-bit field value for one item and whether it was truncated.

    Raises:
        EncodeError: If value is not an integer
        RangeTruncationError: If mode is strict and value is out of range
    """
    # bool is an int subclass but never a meaningful value here
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodeError(f"Value at index {index}: expected int, got {type(value).__name__}")

    if 0 <= value <= MAX_VALUE:
        return value, False

    if mode is RangeMode.STRICT:
        raise RangeTruncationError(index, value, MAX_VALUE)

    return value & VALUE_MASK, True
