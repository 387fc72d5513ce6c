"""Utility functions for ninepack.

This module provides size calculation without encoding.
"""

from __future__ import annotations

from .sizing import encoded_bits, encoded_size, payload_size, text_size

__all__ = [
    "encoded_size",
    "encoded_bits",
    "payload_size",
    "text_size",
]
