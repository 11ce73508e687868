"""Symbol-to-byte decoder.

This module provides the decode() function that unpacks a base2048 string back
to bytes, validating every symbol on the way.
"""

from __future__ import annotations

import logging

from ..alphabet.tables import BITS_PER_SYMBOL, DEC_TABLE, MAX_CODEPOINT, TAIL, TERMINATORS
from ..exceptions import DecodeError
from .bitpack import ByteUnpacker

logger = logging.getLogger(__name__)


def _reject(message: str) -> DecodeError:
    logger.debug("Rejecting input: %s", message)
    return DecodeError(message)


def decode(text: str) -> bytes:
    """Decode a base2048 string to bytes.

    Only the position of a symbol tells whether it is the final one; the
    final data symbol contributes just the bits needed to end on a byte
    boundary, and a tail symbol contributes exactly the bits the current byte
    still owes.

    Args:
        text: Encoded string

    Returns:
        Decoded bytes

    Raises:
        DecodeError: If a symbol is outside the alphabet, a tail symbol is not
            last, or the final symbol carries bits the encoder never sets

    Example:
        >>> from base2048 import encode
        >>> decode(encode(b"hello"))
        b'hello'
    """
    unpacker = ByteUnpacker()
    residue = 0
    last = len(text) - 1

    for i, c in enumerate(text):
        # Padding bits the final symbol would carry if it were this one
        residue = (residue + BITS_PER_SYMBOL) % 8

        codepoint = ord(c)
        if codepoint > MAX_CODEPOINT:
            raise _reject(f"Invalid character {i}: [{codepoint}]")

        if codepoint in TERMINATORS:
            if i < last:
                raise _reject(
                    f"Unexpected character {i + 1}: [{text[i + 1]}] "
                    f"after termination sequence {i}: [{c}]"
                )
            if c not in TAIL:
                raise _reject(f"Invalid termination character {i}: [{c}]")

            index = TAIL.index(c)
            need = unpacker.bits_owed()
            if index >= 1 << need:
                raise _reject(f"Invalid tail character {i}: [{c}]")

            unpacker.push_bits(index, need)
            continue

        value = DEC_TABLE[codepoint]
        if value is None:
            raise _reject(f"Invalid character {i}: [{codepoint}]")

        num_bits = BITS_PER_SYMBOL if i < last else BITS_PER_SYMBOL - residue
        if value >> num_bits:
            raise _reject(f"Invalid final character {i}: [{c}]")

        unpacker.push_bits(value, num_bits)

    return unpacker.to_bytes()
