"""Compact binary decoder for small-integer sequences.

This module provides the decode() function that converts a buffer produced by
encode() back to the ordered list of integers.
"""

from __future__ import annotations

import logging
import struct
from typing import Optional, Union

from ..exceptions import InsufficientPayloadError, TruncatedBufferError
from .bitpack import BitUnpacker
from .layout import HEADER_BYTES, HEADER_FORMAT, VALUE_BITS, PackingLayout

logger = logging.getLogger(__name__)

BufferLike = Union[bytes, bytearray, memoryview]


def decode(data: Optional[BufferLike], *, strict: bool = False) -> list[int]:
    """Decode compact binary data to a list of integers.

    The first two bytes hold the number of values (big-endian uint16); the
    remaining bytes are read as consecutive 9-bit fields. If the payload runs
    out before the declared count is reached, decoding stops and the values
    read so far are returned.

    Args:
        data: Encoded buffer; ``None`` or empty yields ``[]``
        strict: If True, a payload that holds fewer values than the header
            declares raises instead of returning a short list

    Returns:
        Decoded integers, in encoding order

    Raises:
        TruncatedBufferError: If the buffer is too short to hold the header
        InsufficientPayloadError: If strict and the payload is too short

    Examples:
        ```python
        from ninepack import decode

        decode(b"\\x00\\x01\\x02\\x80")  # [5]
        decode(b"")                     # []
        decode(b"\\x00\\x02\\x02\\x80")  # [5], second value is missing
        ```
    """
    if not data:
        return []

    if len(data) < HEADER_BYTES:
        raise TruncatedBufferError(
            f"Buffer too short for count header: need {HEADER_BYTES} bytes, got {len(data)}"
        )

    (count,) = struct.unpack(HEADER_FORMAT, bytes(data[:HEADER_BYTES]))
    payload = data[HEADER_BYTES:]
    available = PackingLayout.values_in_payload(len(payload))

    if available < count:
        if strict:
            raise InsufficientPayloadError(count, available)
        logger.debug(
            "Payload holds %d of %d declared values, returning short sequence",
            available,
            count,
        )

    unpacker = BitUnpacker(payload)
    return [unpacker.read_uint(VALUE_BITS) for _ in range(min(count, available))]
