"""base2048: 11-bit Binary-to-Text Codec

A Python library that maps arbitrary bytes to a string of printable Unicode
symbols at 11 bits per symbol, and back. Each symbol is drawn from a fixed
2048-entry main alphabet; a final remainder of 1-3 bits is carried by one of 8
tail symbols that may only close a string.

Key Features:
- Dense text encoding (11 bits per code point, vs 6 for base64)
- Exact inversion with strict validation of malformed input
- Pydantic-validated alphabet tables built once at import time
- Size calculation without encoding

Quick Start:
    >>> from base2048 import encode, decode
    >>>
    >>> text = encode(b"Hello, world!")
    >>> len(text)
    10
    >>> decode(text)
    b'Hello, world!'
"""

from __future__ import annotations

from .alphabet import DEC_TABLE, ENC_TABLE, MAX_CODEPOINT, TAIL, Alphabet
from .codec import decode, decode_string, encode, encode_string
from .exceptions import AlphabetError, Base2048Error, DecodeError
from .utils import decoded_length, encoded_length, final_symbol_kind

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "encode_string",
    "decode_string",
    # Alphabet
    "Alphabet",
    "ENC_TABLE",
    "DEC_TABLE",
    "TAIL",
    "MAX_CODEPOINT",
    # Exceptions
    "Base2048Error",
    "AlphabetError",
    "DecodeError",
    # Sizing
    "encoded_length",
    "decoded_length",
    "final_symbol_kind",
    # Version
    "__version__",
]
