"""Fixed alphabet tables for the 11-bit codec.

The tables are built once at import time and are immutable for the lifetime of
the process. The main alphabet is assembled from contiguous runs of printable,
non-combining code points that NFC normalization leaves unchanged, in ascending
order, ending exactly at U+10F3.
"""

from __future__ import annotations

from .model import ALPHABET_SIZE, TAIL_SIZE, TERMINATOR, Alphabet

BITS_PER_SYMBOL = 11
TAIL_BITS = 3

MAIN_RANGES: tuple[tuple[int, int], ...] = (
    # Latin-1 signs (soft hyphen U+00AD excluded) and letters
    (0x00A1, 0x00AC),
    (0x00AE, 0x00BF),
    (0x00C0, 0x00D6),
    (0x00D8, 0x00F6),
    # Latin Extended-A/B, IPA, spacing modifiers
    (0x00F8, 0x02AF),
    # Greek
    (0x0388, 0x038A),
    (0x038E, 0x03A1),
    (0x03A3, 0x03FF),
    # Cyrillic and supplement
    (0x0400, 0x0482),
    (0x048A, 0x052F),
    # Armenian
    (0x0531, 0x0556),
    (0x0561, 0x0587),
    # Hebrew
    (0x05D0, 0x05EA),
    # Arabic
    (0x0620, 0x064A),
    (0x0671, 0x06D3),
    (0x06EE, 0x06EF),
    (0x06FA, 0x06FC),
    # Syriac (superscript alaph U+0711 is a combining mark), Arabic Supplement,
    # Thaana, NKo, Samaritan, Mandaic
    (0x0710, 0x0710),
    (0x0712, 0x072F),
    (0x0750, 0x075E),
    (0x0780, 0x07A5),
    (0x07CA, 0x07EA),
    (0x0800, 0x0815),
    (0x0840, 0x0858),
    # Devanagari (nukta letters U+0958-U+095F decompose under NFC)
    (0x0904, 0x0939),
    (0x0960, 0x0961),
    (0x0972, 0x097F),
    # Bengali
    (0x0985, 0x098C),
    (0x098F, 0x0990),
    (0x0993, 0x09A8),
    (0x09AA, 0x09B0),
    (0x09B6, 0x09B9),
    # Gurmukhi
    (0x0A05, 0x0A0A),
    (0x0A13, 0x0A28),
    # Gujarati
    (0x0A85, 0x0A8D),
    (0x0A8F, 0x0A91),
    (0x0A93, 0x0AA8),
    (0x0AAA, 0x0AB0),
    (0x0AB5, 0x0AB9),
    # Oriya
    (0x0B05, 0x0B0C),
    (0x0B13, 0x0B28),
    (0x0B2A, 0x0B30),
    # Tamil
    (0x0B85, 0x0B8A),
    (0x0B8E, 0x0B90),
    (0x0B92, 0x0B95),
    (0x0B99, 0x0B9A),
    (0x0B9C, 0x0B9C),
    (0x0B9E, 0x0B9F),
    (0x0BA3, 0x0BA4),
    (0x0BA8, 0x0BAA),
    (0x0BAE, 0x0BB9),
    # Telugu
    (0x0C05, 0x0C0C),
    (0x0C0E, 0x0C10),
    (0x0C12, 0x0C28),
    (0x0C2A, 0x0C33),
    (0x0C35, 0x0C39),
    # Kannada
    (0x0C85, 0x0C8C),
    (0x0C8E, 0x0C90),
    (0x0C92, 0x0CA8),
    (0x0CAA, 0x0CB3),
    (0x0CB5, 0x0CB9),
    # Malayalam
    (0x0D05, 0x0D0C),
    (0x0D0E, 0x0D10),
    (0x0D12, 0x0D3A),
    # Sinhala
    (0x0D85, 0x0D96),
    (0x0D9A, 0x0DB1),
    (0x0DB3, 0x0DBB),
    (0x0DC0, 0x0DC6),
    # Thai letters and digits
    (0x0E01, 0x0E30),
    (0x0E50, 0x0E59),
    # Tibetan digits and letters, skipping the NFC composition exclusions
    (0x0F20, 0x0F29),
    (0x0F40, 0x0F42),
    (0x0F44, 0x0F47),
    (0x0F49, 0x0F4C),
    (0x0F4E, 0x0F51),
    (0x0F53, 0x0F56),
    (0x0F58, 0x0F5B),
    (0x0F5D, 0x0F68),
    (0x0F6A, 0x0F6C),
    # Myanmar
    (0x1000, 0x102A),
    (0x1050, 0x1055),
    # Georgian
    (0x10A0, 0x10C5),
    (0x10D0, 0x10F3),
)

# Tibetan marks; value order, not code point order
TAIL_SYMBOLS: tuple[str, ...] = (
    "།",
    "༎",
    "༏",
    "༐",
    "༑",
    "༆",
    "༈",
    "༒",
)

DEFAULT_ALPHABET = Alphabet.from_ranges(MAIN_RANGES, TAIL_SYMBOLS)

ENC_TABLE: tuple[str, ...] = DEFAULT_ALPHABET.symbols
TAIL: tuple[str, ...] = DEFAULT_ALPHABET.tail
DEC_TABLE: tuple[int | None, ...] = DEFAULT_ALPHABET.reverse_table()
TERMINATORS: frozenset[int] = DEFAULT_ALPHABET.terminators()
MAX_CODEPOINT: int = DEFAULT_ALPHABET.max_codepoint

__all__ = [
    "ALPHABET_SIZE",
    "BITS_PER_SYMBOL",
    "DEC_TABLE",
    "DEFAULT_ALPHABET",
    "ENC_TABLE",
    "MAIN_RANGES",
    "MAX_CODEPOINT",
    "TAIL",
    "TAIL_BITS",
    "TAIL_SIZE",
    "TAIL_SYMBOLS",
    "TERMINATOR",
    "TERMINATORS",
]
