"""Byte-to-symbol encoder.

This module provides the encode() function that packs a byte buffer into a
string of 11-bit symbols.
"""

from __future__ import annotations

from ..alphabet.tables import ENC_TABLE, TAIL, TAIL_BITS
from .bitpack import SymbolPacker


def encode(data: bytes) -> str:
    """Encode bytes to a base2048 string.

    Every full 11-bit group becomes one main alphabet symbol. A final partial
    group of 1-3 bits becomes a tail symbol; a final partial group of 4-10 bits
    becomes the main symbol at its (unpadded) value. Encoding never fails.

    Args:
        data: Bytes to encode (any bytes-like object or iterable of 0-255 ints)

    Returns:
        Encoded string of ceil(8 * len(data) / 11) symbols

    Example:
        >>> encode(b"")
        ''
        >>> len(encode(b"\\xff"))
        1
    """
    packer = SymbolPacker()
    symbols: list[str] = []

    for byte in data:
        value = packer.push_byte(byte)
        if value is not None:
            symbols.append(ENC_TABLE[value])

    final = packer.flush()
    if final is not None:
        value, num_bits = final
        symbols.append(TAIL[value] if num_bits <= TAIL_BITS else ENC_TABLE[value])

    return "".join(symbols)
