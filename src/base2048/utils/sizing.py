"""Encoded size calculation utilities.

This module provides functions to calculate encoded and decoded sizes without
actually running the codec.
"""

from __future__ import annotations

from typing import Literal

from ..alphabet.tables import BITS_PER_SYMBOL, TAIL_BITS, TERMINATORS

FinalSymbol = Literal["none", "tail", "main"]


def _byte_count(data_or_size: bytes | int) -> int:
    if isinstance(data_or_size, int):
        if data_or_size < 0:
            raise ValueError(f"Size must be non-negative, got {data_or_size}")
        return data_or_size
    return len(data_or_size)


def encoded_length(data_or_size: bytes | int) -> int:
    """Calculate the number of symbols encode() produces.

    Args:
        data_or_size: Byte buffer, or its length in bytes

    Returns:
        Symbol count, ceil(8 * n / 11)

    Raises:
        ValueError: If a negative size is given

    Example:
        >>> encoded_length(b"\\xff")
        1
        >>> encoded_length(11)
        8
    """
    total_bits = _byte_count(data_or_size) * 8
    return (total_bits + BITS_PER_SYMBOL - 1) // BITS_PER_SYMBOL


def final_symbol_kind(data_or_size: bytes | int) -> FinalSymbol:
    """Tell which alphabet the last encoded symbol is drawn from.

    Args:
        data_or_size: Byte buffer, or its length in bytes

    Returns:
        "none" if the data ends on an 11-bit boundary (no partial symbol),
        "tail" for a 1-3 bit remainder, "main" for a 4-10 bit remainder

    Raises:
        ValueError: If a negative size is given
    """
    remainder = (_byte_count(data_or_size) * 8) % BITS_PER_SYMBOL
    if remainder == 0:
        return "none"
    if remainder <= TAIL_BITS:
        return "tail"
    return "main"


def decoded_length(text_or_size: str | int) -> int:
    """Calculate the number of bytes decode() produces for a valid string.

    A string of k symbols ending in a data symbol carries floor(11k / 8) bytes.
    One ending in a tail symbol carries the full 11-bit groups before it plus
    the byte the tail symbol completes.

    Args:
        text_or_size: Encoded string, or its symbol count (assumed to end in a
            data symbol)

    Returns:
        Decoded size in bytes

    Raises:
        ValueError: If a negative size is given
    """
    if isinstance(text_or_size, int):
        if text_or_size < 0:
            raise ValueError(f"Size must be non-negative, got {text_or_size}")
        num_symbols = text_or_size
        ends_with_tail = False
    else:
        num_symbols = len(text_or_size)
        ends_with_tail = num_symbols > 0 and ord(text_or_size[-1]) in TERMINATORS

    if num_symbols == 0:
        return 0

    if ends_with_tail:
        full_bits = (num_symbols - 1) * BITS_PER_SYMBOL
        return max(1, (full_bits + 7) // 8)

    return (num_symbols * BITS_PER_SYMBOL) // 8
