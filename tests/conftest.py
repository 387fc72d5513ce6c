"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_numbers() -> list[int]:
    """Sample sequence spanning the full 9-bit range."""
    return [0, 1, 5, 42, 255, 256, 300, 510, 511]


@pytest.fixture
def single_five_buffer() -> bytes:
    """Encoding of [5]: count header 1, then 000000101 padded to two bytes."""
    return b"\x00\x01\x02\x80"
