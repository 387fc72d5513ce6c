"""Compact binary codec for ninepack.

This module provides encoding and decoding of small-integer sequences as a
count header followed by fixed-width 9-bit fields.
"""

from __future__ import annotations

from .decoder import decode
from .encoder import encode
from .layout import MAX_COUNT, MAX_VALUE, VALUE_BITS, PackingLayout, RangeMode

__all__ = [
    "encode",
    "decode",
    "PackingLayout",
    "RangeMode",
    "MAX_COUNT",
    "MAX_VALUE",
    "VALUE_BITS",
]
