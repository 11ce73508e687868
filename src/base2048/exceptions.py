"""Exception hierarchy for base2048.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from Base2048Error for easy catching of any base2048-specific error.
"""

from __future__ import annotations


class Base2048Error(Exception):
    """Base exception for all base2048 errors."""

    pass


class AlphabetError(Base2048Error):
    """Raised when an alphabet definition cannot back the codec.

    Examples:
        - Main alphabet does not hold exactly 2048 symbols
        - Tail alphabet does not hold exactly 8 symbols
        - A symbol is not a single code point, or appears twice
        - Main and tail alphabets share a symbol
    """

    pass


class DecodeError(Base2048Error):
    """Raised when decoding a symbol string fails.

    The message always names the offending position and character.

    Examples:
        - Code point outside the alphabet
        - Terminator symbol before the last position
        - Tail symbol carrying more bits than the stream owes
        - Final data symbol carrying bits the encoder never sets
    """

    pass
