#!/usr/bin/env python3
"""Basic usage example for ninepack.

This example demonstrates:
1. Packing a list of integers to bytes
2. Unpacking and verifying the result
3. Carrying the bytes as base64 text
4. Truncating vs strict range handling
"""

from ninepack import (
    PackingLayout,
    RangeTruncationError,
    decode,
    deserialize,
    encode,
    serialize,
)


def main() -> None:
    """Run basic usage example."""
    print("=" * 60)
    print("ninepack Basic Usage Example")
    print("=" * 60)
    print()

    numbers = [5, 17, 42, 255, 300, 511]
    print(f"Original values: {numbers}")
    print()

    # Pack to bytes
    data = encode(numbers)
    layout = PackingLayout.for_count(len(numbers))
    print(f"Encoded size: {len(data)} bytes")
    print(f"  header:  {layout.header_bytes} bytes")
    print(f"  payload: {layout.payload_bits} bits + {layout.padding_bits} padding bits")
    print(f"Hex: {data.hex()}")
    print()

    # Unpack
    decoded = decode(data)
    print(f"Decoded values: {decoded}")
    print(f"Round trip OK: {decoded == numbers}")
    print()

    # Text transport
    text = serialize(numbers)
    print(f"Base64 text: {text!r} ({len(text)} characters)")
    print(f"Comma text:  {','.join(map(str, numbers))!r}")
    print(f"From text:   {deserialize(text)}")
    print()

    # Range handling
    print("Range handling:")
    print(f"  encode([600]) decodes to {decode(encode([600]))} (low 9 bits kept)")
    try:
        encode([600], mode="strict")
    except RangeTruncationError as e:
        print(f"  strict mode: {e}")


if __name__ == "__main__":
    main()
