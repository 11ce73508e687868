"""Tests for alphabet tables and the Alphabet model."""

from __future__ import annotations

import unicodedata

import pytest
from pydantic import ValidationError

from base2048 import AlphabetError, decode, encode
from base2048.alphabet import (
    DEC_TABLE,
    DEFAULT_ALPHABET,
    ENC_TABLE,
    MAX_CODEPOINT,
    TAIL,
    TERMINATOR,
    TERMINATORS,
    Alphabet,
)

TEST_RANGES = [(0x0100, 0x08FF)]  # 2048 code points
TEST_TAIL = "01234567"


class TestDefaultTables:
    """Test the built-in tables."""

    def test_sizes(self) -> None:
        """Test table sizes."""
        assert len(ENC_TABLE) == 2048
        assert len(set(ENC_TABLE)) == 2048
        assert len(TAIL) == 8
        assert len(set(TAIL)) == 8

    def test_max_codepoint(self) -> None:
        """Test the reverse table covers code points up to 4339."""
        assert MAX_CODEPOINT == 4339
        assert len(DEC_TABLE) == MAX_CODEPOINT + 1
        assert ord(ENC_TABLE[-1]) == MAX_CODEPOINT

    def test_endpoints(self) -> None:
        """Test the first and last main symbols."""
        assert ENC_TABLE[0] == "\u00a1"
        assert ENC_TABLE[2047] == "\u10f3"

    def test_tail_symbols(self) -> None:
        """Test the tail alphabet is the Tibetan mark sequence."""
        assert [ord(symbol) for symbol in TAIL] == [
            0x0F0D,
            0x0F0E,
            0x0F0F,
            0x0F10,
            0x0F11,
            0x0F06,
            0x0F08,
            0x0F12,
        ]

    def test_forward_and_reverse_are_inverses(self) -> None:
        """Test DEC_TABLE maps each main symbol back to its index."""
        for value, symbol in enumerate(ENC_TABLE):
            assert DEC_TABLE[ord(symbol)] == value

    def test_tail_resolves_to_terminator(self) -> None:
        """Test every tail symbol is flagged as a terminator."""
        for symbol in TAIL:
            assert DEC_TABLE[ord(symbol)] == TERMINATOR
            assert ord(symbol) in TERMINATORS

        assert TERMINATORS == frozenset(ord(symbol) for symbol in TAIL)

    def test_everything_else_unmapped(self) -> None:
        """Test only the 2056 alphabet code points are mapped."""
        mapped = [entry for entry in DEC_TABLE if entry is not None]
        assert len(mapped) == 2048 + 8

    def test_main_values_fit_eleven_bits(self) -> None:
        """Test the terminator sentinel cannot collide with a value."""
        values = {entry for entry in DEC_TABLE if entry is not None and entry != TERMINATOR}
        assert values == set(range(2048))

    def test_symbols_printable(self) -> None:
        """Test every symbol is a printable, non-whitespace character."""
        for symbol in ENC_TABLE + TAIL:
            assert symbol.isprintable()
            assert not symbol.isspace()

    def test_symbols_stable_under_nfc(self) -> None:
        """Test NFC normalization leaves every symbol unchanged."""
        changed = [
            hex(ord(symbol))
            for symbol in ENC_TABLE + TAIL
            if unicodedata.normalize("NFC", symbol) != symbol
        ]
        assert changed == []

    def test_symbols_not_combining(self) -> None:
        """Test no symbol is a combining mark."""
        marks = [
            (hex(ord(symbol)), unicodedata.category(symbol))
            for symbol in ENC_TABLE + TAIL
            if unicodedata.category(symbol).startswith("M")
        ]
        assert marks == []

    def test_decode_after_nfc(self) -> None:
        """Test encoded text survives NFC normalization of the whole string."""
        payload = bytes(range(256)) * 4
        text = encode(payload)

        assert decode(unicodedata.normalize("NFC", text)) == payload

    def test_devanagari_nukta_letters_excluded(self) -> None:
        """Test letters NFC rewrites as base plus nukta are not symbols."""
        for codepoint in range(0x0958, 0x0960):
            assert DEC_TABLE[codepoint] is None
        assert DEC_TABLE[0x0711] is None

    def test_default_alphabet_frozen(self) -> None:
        """Test the shared alphabet cannot be modified."""
        with pytest.raises(ValidationError):
            DEFAULT_ALPHABET.tail = tuple(TEST_TAIL)  # type: ignore[misc]


class TestAlphabetModel:
    """Test Alphabet validation."""

    def test_from_ranges(self) -> None:
        """Test building an alphabet from ranges."""
        alphabet = Alphabet.from_ranges(TEST_RANGES, TEST_TAIL)

        assert alphabet.symbols[0] == "\u0100"
        assert alphabet.symbols[-1] == "\u08ff"
        assert alphabet.tail == tuple(TEST_TAIL)
        assert alphabet.max_codepoint == 0x08FF

    def test_reverse_table(self) -> None:
        """Test the reverse table of a custom alphabet."""
        alphabet = Alphabet.from_ranges(TEST_RANGES, TEST_TAIL)
        table = alphabet.reverse_table()

        assert table[0x0100] == 0
        assert table[0x08FF] == 2047
        assert table[ord("5")] == TERMINATOR
        assert table[ord("A")] is None
        assert alphabet.terminators() == frozenset(ord(c) for c in TEST_TAIL)

    def test_main_too_small(self) -> None:
        """Test a main alphabet with fewer than 2048 symbols."""
        with pytest.raises(AlphabetError, match="2048"):
            Alphabet.from_ranges([(0x0100, 0x08FE)], TEST_TAIL)

    def test_main_duplicates(self) -> None:
        """Test a main alphabet listing a symbol twice."""
        with pytest.raises(AlphabetError, match="duplicate"):
            Alphabet.from_ranges([(0x0100, 0x08FE), (0x0100, 0x0100)], TEST_TAIL)

    def test_tail_wrong_size(self) -> None:
        """Test a tail alphabet without exactly 8 symbols."""
        with pytest.raises(AlphabetError, match="8 symbols"):
            Alphabet.from_ranges(TEST_RANGES, "0123456")

    def test_overlapping_alphabets(self) -> None:
        """Test a tail symbol that is also a main symbol."""
        with pytest.raises(AlphabetError, match="share symbols"):
            Alphabet.from_ranges(TEST_RANGES, "0123456\u0100")

    def test_multi_character_symbol(self) -> None:
        """Test symbols must be single code points."""
        symbols = tuple(chr(cp) for cp in range(0x0100, 0x0900))
        with pytest.raises(ValidationError, match="single code point"):
            Alphabet(symbols=symbols, tail=("ab", "1", "2", "3", "4", "5", "6", "7"))

    def test_extra_fields_forbidden(self) -> None:
        """Test unknown fields are rejected."""
        symbols = tuple(chr(cp) for cp in range(0x0100, 0x0900))
        with pytest.raises(ValidationError):
            Alphabet(symbols=symbols, tail=tuple(TEST_TAIL), radix=12)  # type: ignore[call-arg]
