"""Bit-level packing and unpacking utilities.

This module provides low-level bit manipulation for fixed-width integer packing.
Bits are accumulated with shift/mask arithmetic straight into a byte buffer;
all operations are deterministic and big-endian (most significant bit first).
"""

from __future__ import annotations

MAX_FIELD_BITS = 64


def _check_width(num_bits: int) -> None:
    if num_bits < 1 or num_bits > MAX_FIELD_BITS:
        raise ValueError(f"num_bits must be 1-{MAX_FIELD_BITS}, got {num_bits}")


class BitPacker:
    """Packs values bit-by-bit into a byte buffer.

    Completed bytes are flushed into a ``bytearray``; bits that do not yet fill
    a byte wait in an integer accumulator.

    Example:
        >>> packer = BitPacker()
        >>> packer.write_uint(5, num_bits=9)
        >>> packer.to_bytes()
        b'\\x02\\x80'
    """

    def __init__(self) -> None:
        """Initialize an empty bit packer."""
        self._buffer = bytearray()
        self._acc = 0  # pending bits, right-aligned
        self._acc_bits = 0  # number of pending bits (always < 8 between writes)

    def write_uint(self, value: int, num_bits: int) -> None:
        """Write an unsigned integer using the specified number of bits.

        Args:
            value: Unsigned integer value to write (must be >= 0)
            num_bits: Number of bits to use for encoding (1-64)

        Raises:
            ValueError: If value is negative or doesn't fit in num_bits
        """
        if value < 0:
            raise ValueError(f"write_uint requires non-negative value, got {value}")
        _check_width(num_bits)

        max_value = (1 << num_bits) - 1
        if value > max_value:
            raise ValueError(f"Value {value} requires more than {num_bits} bits (max: {max_value})")

        self._push(value, num_bits)

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes.

        Args:
            data: Bytes to write
        """
        if self._acc_bits == 0:
            self._buffer.extend(data)
            return
        for byte in data:
            self._push(byte, 8)

    def bit_length(self) -> int:
        """Return the current number of bits written."""
        return len(self._buffer) * 8 + self._acc_bits

    def to_bytes(self) -> bytes:
        """Convert the bit buffer to bytes.

        If the number of bits is not a multiple of 8, the last byte
        is padded with zeros on the right (LSB side).

        Returns:
            Packed bytes
        """
        if self._acc_bits == 0:
            return bytes(self._buffer)
        padding = 8 - self._acc_bits
        return bytes(self._buffer) + bytes([(self._acc << padding) & 0xFF])

    def _push(self, value: int, num_bits: int) -> None:
        self._acc = (self._acc << num_bits) | value
        self._acc_bits += num_bits

        while self._acc_bits >= 8:
            self._acc_bits -= 8
            self._buffer.append((self._acc >> self._acc_bits) & 0xFF)

        self._acc &= (1 << self._acc_bits) - 1


class BitUnpacker:
    """Unpacks values bit-by-bit from a byte buffer.

    Example:
        >>> unpacker = BitUnpacker(b"\\x02\\x80")
        >>> unpacker.read_uint(9)
        5
        >>> unpacker.bits_remaining()
        7
    """

    def __init__(self, data: bytes) -> None:
        """Initialize a bit unpacker with the given data.

        Args:
            data: Byte buffer to unpack (bytes, bytearray or memoryview)
        """
        self._data = bytes(data)
        self._total_bits = len(self._data) * 8
        self._position = 0

    def read_uint(self, num_bits: int) -> int:
        """Read an unsigned integer of the specified bit width.

        Args:
            num_bits: Number of bits to read (1-64)

        Returns:
            Unsigned integer value

        Raises:
            ValueError: If num_bits is out of range
            IndexError: If not enough bits are available
        """
        _check_width(num_bits)

        if self._position + num_bits > self._total_bits:
            raise IndexError(
                f"Not enough bits: need {num_bits}, have {self.bits_remaining()}"
            )

        # Slice only the bytes spanned by [position, position + num_bits)
        first = self._position // 8
        last = (self._position + num_bits - 1) // 8
        chunk = int.from_bytes(self._data[first : last + 1], "big")
        trailing = (last + 1) * 8 - (self._position + num_bits)

        self._position += num_bits
        return (chunk >> trailing) & ((1 << num_bits) - 1)

    def bits_remaining(self) -> int:
        """Return the number of bits remaining in the buffer."""
        return self._total_bits - self._position
