"""Alphabet tables for base2048.

This module exposes the fixed main and tail alphabets, the decoder's reverse
lookup table, and the Alphabet model that validates them.
"""

from __future__ import annotations

from .model import Alphabet
from .tables import (
    ALPHABET_SIZE,
    BITS_PER_SYMBOL,
    DEC_TABLE,
    DEFAULT_ALPHABET,
    ENC_TABLE,
    MAX_CODEPOINT,
    TAIL,
    TAIL_BITS,
    TAIL_SIZE,
    TERMINATOR,
    TERMINATORS,
)

__all__ = [
    "Alphabet",
    "DEFAULT_ALPHABET",
    # Tables
    "ENC_TABLE",
    "DEC_TABLE",
    "TAIL",
    "TERMINATORS",
    "TERMINATOR",
    "MAX_CODEPOINT",
    # Radix
    "ALPHABET_SIZE",
    "TAIL_SIZE",
    "BITS_PER_SYMBOL",
    "TAIL_BITS",
]
