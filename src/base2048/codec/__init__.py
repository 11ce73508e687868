"""11-bit binary-to-text codec for base2048.

This module provides encoding and decoding between byte buffers and strings of
symbols from the 2048-entry main alphabet and the 8-entry tail alphabet.
"""

from __future__ import annotations

from .bitpack import ByteUnpacker, SymbolPacker
from .decoder import decode
from .encoder import encode
from .text import decode_string, encode_string

__all__ = [
    "encode",
    "decode",
    "encode_string",
    "decode_string",
    "SymbolPacker",
    "ByteUnpacker",
]
