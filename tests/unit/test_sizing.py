"""Unit tests for layout and size calculation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ninepack import (
    CountOverflowError,
    PackingLayout,
    encode,
    encoded_bits,
    encoded_size,
    payload_size,
    serialize,
    text_size,
)


class TestPackingLayout:
    """Test PackingLayout arithmetic."""

    def test_empty(self) -> None:
        """Test the empty sequence has no header."""
        layout = PackingLayout.for_count(0)
        assert layout.header_bytes == 0
        assert layout.total_bytes == 0
        assert layout.total_bits == 0

    def test_single(self) -> None:
        """Test one value: 9 bits plus 7 padding bits."""
        layout = PackingLayout.for_count(1)
        assert layout.header_bytes == 2
        assert layout.payload_bits == 9
        assert layout.padding_bits == 7
        assert layout.payload_bytes == 2
        assert layout.total_bytes == 4

    def test_byte_aligned(self) -> None:
        """Test eight values fill exactly nine bytes."""
        layout = PackingLayout.for_count(8)
        assert layout.padding_bits == 0
        assert layout.payload_bytes == 9

    @pytest.mark.parametrize("count", [1, 2, 7, 8, 9, 100, 300, 65535])
    def test_matches_encoder(self, count: int) -> None:
        """Test the layout agrees with the real encoder output."""
        assert PackingLayout.for_count(count).total_bytes == len(encode([0] * count))

    def test_overflow(self) -> None:
        """Test counts above the header limit."""
        with pytest.raises(CountOverflowError):
            PackingLayout.for_count(65536)

    def test_negative(self) -> None:
        """Test negative counts."""
        with pytest.raises(ValueError, match=">= 0"):
            PackingLayout.for_count(-1)

    def test_frozen(self) -> None:
        """Test layouts are immutable."""
        layout = PackingLayout.for_count(3)
        with pytest.raises(ValidationError):
            layout.count = 4  # type: ignore[misc]

    def test_values_in_payload(self) -> None:
        """Test how many whole values fit in a payload."""
        assert PackingLayout.values_in_payload(0) == 0
        assert PackingLayout.values_in_payload(1) == 0
        assert PackingLayout.values_in_payload(2) == 1
        assert PackingLayout.values_in_payload(9) == 8


class TestSizing:
    """Test sizing helpers."""

    def test_encoded_size_sequence(self) -> None:
        """Test size from a sequence."""
        assert encoded_size([]) == 0
        assert encoded_size([5]) == 4
        assert encoded_size([1] * 300) == 340

    def test_encoded_size_count(self) -> None:
        """Test size from a count."""
        assert encoded_size(300) == 340

    def test_encoded_bits(self) -> None:
        """Test bit count excludes padding."""
        assert encoded_bits(2) == 16 + 18
        assert encoded_bits([]) == 0

    def test_payload_size(self) -> None:
        """Test payload size excludes the header."""
        assert payload_size(300) == 338
        assert payload_size(0) == 0

    def test_text_size(self) -> None:
        """Test base64 length prediction."""
        assert text_size([5]) == len(serialize([5]))
        assert text_size(300) == len(serialize([1] * 300))
        assert text_size(1, padded=False) == len(serialize([5]).rstrip("="))
        assert text_size(0) == 0

    def test_overflow(self) -> None:
        """Test sizing rejects impossible counts."""
        with pytest.raises(CountOverflowError):
            encoded_size(70000)
