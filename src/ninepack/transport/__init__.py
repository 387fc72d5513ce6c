"""Text transport for ninepack buffers.

This module provides base64 conversion of encoded buffers.
"""

from __future__ import annotations

from .text import deserialize, from_text, serialize, to_text

__all__ = [
    "serialize",
    "deserialize",
    "to_text",
    "from_text",
]
