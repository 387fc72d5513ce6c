"""Printable text transport for encoded buffers.

This module layers base64 on top of the byte codec so packed sequences can be
carried in text-only channels (URLs, JSON strings, query parameters).
"""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Iterable, Optional

from ..codec import decode, encode
from ..codec.layout import RangeMode
from ..exceptions import DecodeError

logger = logging.getLogger(__name__)


def to_text(data: bytes, *, urlsafe: bool = False) -> str:
    """Convert an encoded buffer to base64 text.

    Args:
        data: Bytes to convert
        urlsafe: If True, use the URL-safe alphabet (``-`` and ``_``)

    Returns:
        ASCII base64 text
    """
    encoded = base64.urlsafe_b64encode(data) if urlsafe else base64.b64encode(data)
    return encoded.decode("ascii")


def from_text(text: str, *, urlsafe: bool = False) -> bytes:
    """Convert base64 text back to bytes.

    Args:
        text: Base64 text
        urlsafe: If True, expect the URL-safe alphabet

    Returns:
        Decoded bytes

    ASCII whitespace (line wrapping) is ignored and missing ``=`` padding is
    restored.

    Raises:
        DecodeError: If text is not valid base64
    """
    try:
        raw = b"".join(text.encode("ascii").split())
        if urlsafe:
            raw = raw.translate(bytes.maketrans(b"-_", b"+/"))
        if len(raw.rstrip(b"=")) % 4 == 1:
            raise DecodeError(f"Invalid base64 text: {len(raw.rstrip(b'='))} data characters")
        raw += b"=" * (-len(raw) % 4)
        return base64.b64decode(raw, validate=True)
    except (binascii.Error, UnicodeEncodeError) as err:
        raise DecodeError(f"Invalid base64 text: {err}") from err


def serialize(
    numbers: Optional[Iterable[int]],
    *,
    mode: RangeMode | str = RangeMode.TRUNCATE,
    urlsafe: bool = False,
) -> str:
    """Encode integers and return the buffer as base64 text.

    Args:
        numbers: Integers to encode; ``None`` or empty yields ``""``
        mode: Range handling passed to encode()
        urlsafe: If True, use the URL-safe alphabet

    Returns:
        Base64 text

    Raises:
        CountOverflowError: If there are more than 65535 values
        RangeTruncationError: If mode is strict and a value is out of range

    Example:
        >>> serialize([5])
        'AAECgA=='
    """
    data = encode(numbers, mode=mode)
    text = to_text(data, urlsafe=urlsafe)
    logger.debug("Serialized %d bytes to %d characters", len(data), len(text))
    return text


def deserialize(text: Optional[str], *, strict: bool = False, urlsafe: bool = False) -> list[int]:
    """Decode base64 text produced by serialize().

    Args:
        text: Base64 text; ``None`` or empty yields ``[]``
        strict: Passed to decode()
        urlsafe: If True, expect the URL-safe alphabet

    Returns:
        Decoded integers

    Raises:
        DecodeError: If text is not valid base64 or the buffer is malformed

    Example:
        >>> deserialize("AAECgA==")
        [5]
    """
    if not text:
        return []
    return decode(from_text(text, urlsafe=urlsafe), strict=strict)
