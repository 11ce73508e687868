"""Alphabet definition and validation.

An alphabet is the pair of symbol sequences the codec maps bits onto: a main
alphabet of 2048 symbols (one per 11-bit value) and a tail alphabet of 8
symbols that may only close a string. This module validates a candidate pair
with Pydantic and derives the reverse lookup table the decoder needs.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from ..exceptions import AlphabetError

logger = logging.getLogger(__name__)

ALPHABET_SIZE = 2048
TAIL_SIZE = 8

# Reverse-table marker for tail symbols; outside the 11-bit value range
TERMINATOR = 0xFFFF


def _check_symbols(symbols: tuple[str, ...], expected: int, label: str) -> tuple[str, ...]:
    """Check symbol count, width and uniqueness for one alphabet.

    Args:
        symbols: Candidate symbols
        expected: Required number of symbols
        label: Alphabet name used in error messages

    Returns:
        The unchanged symbols

    Raises:
        ValueError: If any check fails
    """
    if len(symbols) != expected:
        raise ValueError(f"{label} alphabet must hold {expected} symbols, got {len(symbols)}")

    for index, symbol in enumerate(symbols):
        if len(symbol) != 1:
            raise ValueError(
                f"{label} symbol {index} must be a single code point, got {symbol!r}"
            )

    if len(set(symbols)) != expected:
        raise ValueError(f"{label} alphabet contains duplicate symbols")

    return symbols


class Alphabet(BaseModel):
    """Validated main and tail alphabets.

    Example:
        >>> alphabet = Alphabet.from_ranges([(0x0100, 0x08FF)], "01234567")
        >>> alphabet.symbols[0]
        'Ā'
        >>> alphabet.reverse_table()[ord("3")] == TERMINATOR
        True

    Attributes:
        symbols: Main alphabet, index = 11-bit value
        tail: Tail alphabet, index = value 0-7
    """

    model_config = ConfigDict(
        # Tables are shared process-wide and must never change
        frozen=True,
        extra="forbid",
    )

    symbols: tuple[str, ...]
    tail: tuple[str, ...]

    @field_validator("symbols")
    @classmethod
    def validate_symbols(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return _check_symbols(value, ALPHABET_SIZE, "Main")

    @field_validator("tail")
    @classmethod
    def validate_tail(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return _check_symbols(value, TAIL_SIZE, "Tail")

    @model_validator(mode="after")
    def validate_disjoint(self) -> Alphabet:
        shared = set(self.symbols) & set(self.tail)
        if shared:
            listed = ", ".join(sorted(shared))
            raise ValueError(f"Main and tail alphabets share symbols: {listed}")
        return self

    @property
    def max_codepoint(self) -> int:
        """Highest code point used by either alphabet."""
        return max(ord(symbol) for symbol in self.symbols + self.tail)

    def reverse_table(self) -> tuple[int | None, ...]:
        """Build the code point lookup table used by the decoder.

        Returns:
            Tuple indexed by code point (0 to max_codepoint). Each entry is the
            symbol's 11-bit value, TERMINATOR for tail symbols, or None for
            code points outside both alphabets.
        """
        table: list[int | None] = [None] * (self.max_codepoint + 1)
        for value, symbol in enumerate(self.symbols):
            table[ord(symbol)] = value
        for symbol in self.tail:
            table[ord(symbol)] = TERMINATOR
        return tuple(table)

    def terminators(self) -> frozenset[int]:
        """Return the code points of the tail alphabet."""
        return frozenset(ord(symbol) for symbol in self.tail)

    @classmethod
    def from_ranges(cls, ranges: Iterable[tuple[int, int]], tail: Iterable[str]) -> Alphabet:
        """Build an alphabet from inclusive code point ranges.

        Args:
            ranges: (first, last) code point pairs, in value order
            tail: The 8 tail symbols, in value order

        Returns:
            Validated alphabet

        Raises:
            AlphabetError: If the resulting alphabets violate any invariant
        """
        symbols = tuple(chr(cp) for first, last in ranges for cp in range(first, last + 1))
        try:
            alphabet = cls(symbols=symbols, tail=tuple(tail))
        except ValidationError as e:
            raise AlphabetError(f"Invalid alphabet: {e}") from e

        logger.debug(
            "Built alphabet: %d symbols, %d tail symbols, max code point %d",
            len(alphabet.symbols),
            len(alphabet.tail),
            alphabet.max_codepoint,
        )
        return alphabet
