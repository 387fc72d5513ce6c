"""Wire layout of an encoded buffer.

An encoded buffer is a 2-byte big-endian count header followed by the
payload: every value packed into 9 bits, most significant bit first, with
the last byte zero-padded. The empty sequence is encoded as zero bytes.

    [0..2)   count, uint16, big-endian      (absent if the sequence is empty)
    [2..end) payload, ceil(9 * count / 8) bytes
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import CountOverflowError

VALUE_BITS = 9
MAX_VALUE = (1 << VALUE_BITS) - 1  # 511
VALUE_MASK = MAX_VALUE

HEADER_FORMAT = ">H"
HEADER_BYTES = 2
MAX_COUNT = (1 << (HEADER_BYTES * 8)) - 1  # 65535


class RangeMode(str, enum.Enum):
    """How the encoder treats values outside [0, 511].

    TRUNCATE keeps the low 9 bits of the value. STRICT raises
    RangeTruncationError.
    """

    TRUNCATE = "truncate"
    STRICT = "strict"

    @classmethod
    def coerce(cls, mode: RangeMode | str) -> RangeMode:
        """Accept either a RangeMode or its string value.

        Raises:
            ValueError: If mode is not a known mode name
        """
        try:
            return cls(mode)
        except ValueError as err:
            valid = ", ".join(repr(m.value) for m in cls)
            raise ValueError(f"Invalid range mode: {mode!r}. Must be one of {valid}") from err


def check_count(count: int) -> int:
    """Validate a sequence length against the header width.

    Raises:
        ValueError: If count is negative
        CountOverflowError: If count does not fit in the 16-bit header
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if count > MAX_COUNT:
        raise CountOverflowError(count, MAX_COUNT)
    return count


class PackingLayout(BaseModel):
    """Size breakdown of the buffer that encodes ``count`` values.

    Example:
        >>> layout = PackingLayout.for_count(2)
        >>> layout.payload_bits, layout.padding_bits, layout.total_bytes
        (18, 6, 5)
    """

    model_config = ConfigDict(frozen=True)

    count: int = Field(ge=0, le=MAX_COUNT)
    header_bytes: int = Field(ge=0)
    payload_bits: int = Field(ge=0)
    padding_bits: int = Field(ge=0, le=7)
    payload_bytes: int = Field(ge=0)

    @property
    def total_bytes(self) -> int:
        """Header plus payload size in bytes."""
        return self.header_bytes + self.payload_bytes

    @property
    def total_bits(self) -> int:
        """Header plus payload size in bits, excluding padding."""
        return self.header_bytes * 8 + self.payload_bits

    @classmethod
    def for_count(cls, count: int) -> PackingLayout:
        """Compute the layout for a sequence of ``count`` values.

        Raises:
            ValueError: If count is negative
            CountOverflowError: If count exceeds 65535
        """
        check_count(count)

        if count == 0:
            return cls(count=0, header_bytes=0, payload_bits=0, padding_bits=0, payload_bytes=0)

        payload_bits = count * VALUE_BITS
        padding_bits = (8 - payload_bits % 8) % 8
        return cls(
            count=count,
            header_bytes=HEADER_BYTES,
            payload_bits=payload_bits,
            padding_bits=padding_bits,
            payload_bytes=(payload_bits + padding_bits) // 8,
        )

    @classmethod
    def values_in_payload(cls, payload_bytes: int) -> int:
        """Return how many whole 9-bit values fit in ``payload_bytes`` bytes."""
        return (payload_bytes * 8) // VALUE_BITS
