"""Exception hierarchy for ninepack.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from NinepackError for easy catching of any ninepack-specific error.
"""

from __future__ import annotations


class NinepackError(Exception):
    """Base exception for all ninepack errors."""

    pass


class EncodeError(NinepackError):
    """Raised when encoding a sequence fails.

    Examples:
        - Item is not an integer
        - Sequence too long for the 16-bit count header
        - Value outside [0, 511] in strict mode
    """

    pass


class CountOverflowError(EncodeError, OverflowError):
    """Raised when a sequence has more items than the count header can hold."""

    def __init__(self, count: int, max_count: int) -> None:
        self.count = count
        self.max_count = max_count
        super().__init__(
            f"Sequence length {count} exceeds the header limit of {max_count} values"
        )


class RangeTruncationError(EncodeError, ValueError):
    """Raised in strict mode when a value does not fit in 9 bits.

    In the default truncating mode the value is reduced to its low 9 bits instead.
    """

    def __init__(self, index: int, value: int, max_value: int) -> None:
        self.index = index
        self.value = value
        self.max_value = max_value
        super().__init__(
            f"Value {value} at index {index} out of bounds [0, {max_value}]"
        )


class DecodeError(NinepackError):
    """Raised when decoding binary data or text fails.

    Examples:
        - Buffer too short to hold the count header
        - Payload shorter than the header count demands (strict mode)
        - Text that is not valid base64
    """

    pass


class TruncatedBufferError(DecodeError):
    """Raised when a buffer is too short to contain the 2-byte count header."""

    pass


class InsufficientPayloadError(DecodeError):
    """Raised in strict mode when the payload holds fewer values than the header declares."""

    def __init__(self, expected: int, decoded: int) -> None:
        self.expected = expected
        self.decoded = decoded
        super().__init__(
            f"Header declares {expected} values but payload only holds {decoded}"
        )
