#!/usr/bin/env python3
"""Basic usage example for base2048.

This example demonstrates:
1. Encoding bytes to base2048 text
2. Decoding back to bytes
3. Calculating sizes ahead of time
4. Handling malformed input
"""

from __future__ import annotations

import base64

from base2048 import (
    DecodeError,
    decode,
    decode_string,
    encode,
    encode_string,
    encoded_length,
    final_symbol_kind,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("base2048 Basic Usage Example")
    print("=" * 60)
    print()

    payload = bytes(range(32))

    # Size the output before encoding
    print("1. Sizing a 32-byte payload...")
    print(f"   Symbols needed: {encoded_length(payload)}")
    print(f"   Final symbol: {final_symbol_kind(payload)}")
    print()

    print("2. Encoding...")
    text = encode(payload)
    print(f"   base2048: {text}")
    print(f"   {len(text)} symbols vs {len(base64.b64encode(payload))} base64 characters")
    print()

    print("3. Decoding...")
    restored = decode(text)
    print(f"   Round-trip OK: {restored == payload}")
    print()

    print("4. Text helpers...")
    message = encode_string("Hello, world!")
    print(f"   {message} -> {decode_string(message)!r}")
    print()

    print("5. Malformed input...")
    try:
        decode(text + "!")
    except DecodeError as e:
        print(f"   DecodeError: {e}")


if __name__ == "__main__":
    main()
