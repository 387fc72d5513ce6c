"""ninepack: 9-bit integer packing codec

A Python library that packs ordered sequences of small integers (0-511) into a
2-byte count header followed by fixed-width 9-bit fields, and carries the
result as base64 text. Built for sending integer lists through text-only
channels in far fewer characters than comma-separated decimals.

Key Features:
- Deterministic, bit-exact wire layout
- Explicit truncating and strict range modes
- Defensive decoding of short payloads
- Base64 text transport and size comparison harness

Quick Start:
    >>> from ninepack import decode, encode, serialize, deserialize
    >>>
    >>> data = encode([5, 17, 300])
    >>> decode(data)
    [5, 17, 300]
    >>> text = serialize([5])
    >>> text
    'AAECgA=='
    >>> deserialize(text)
    [5]
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import MAX_COUNT, MAX_VALUE, VALUE_BITS, PackingLayout, RangeMode, decode, encode
from .compare import ComparisonReport, compare, format_report, naive_serialization
from .exceptions import (
    CountOverflowError,
    DecodeError,
    EncodeError,
    InsufficientPayloadError,
    NinepackError,
    RangeTruncationError,
    TruncatedBufferError,
)
from .transport import deserialize, from_text, serialize, to_text
from .utils import encoded_bits, encoded_size, payload_size, text_size

__all__ = [
    # Core API
    "encode",
    "decode",
    "RangeMode",
    "PackingLayout",
    "MAX_COUNT",
    "MAX_VALUE",
    "VALUE_BITS",
    # Exceptions
    "NinepackError",
    "EncodeError",
    "CountOverflowError",
    "RangeTruncationError",
    "DecodeError",
    "TruncatedBufferError",
    "InsufficientPayloadError",
    # Text transport
    "serialize",
    "deserialize",
    "to_text",
    "from_text",
    # Sizing
    "encoded_size",
    "encoded_bits",
    "payload_size",
    "text_size",
    # Comparison
    "ComparisonReport",
    "compare",
    "format_report",
    "naive_serialization",
    # Version
    "__version__",
]
