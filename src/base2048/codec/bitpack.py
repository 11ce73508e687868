"""Bit accumulators for the 11-bit codec.

Encoding and decoding buffer bits toward different boundaries: the encoder
collects bits until an 11-bit symbol value is complete, the decoder collects
bits until an 8-bit byte is complete. Each direction gets its own accumulator
so the two bounds never mix. All operations are big-endian.
"""

from __future__ import annotations

from ..alphabet.tables import BITS_PER_SYMBOL


class SymbolPacker:
    """Packs bytes into 11-bit symbol values.

    Between bytes the packer holds 0-10 buffered bits, the head of the next
    symbol value.

    Example:
        >>> packer = SymbolPacker()
        >>> packer.push_byte(0xFF) is None
        True
        >>> packer.push_byte(0x00)
        2040
        >>> packer.flush()
        (0, 5)
    """

    def __init__(self) -> None:
        """Initialize an empty symbol packer."""
        self._stage = 0
        self._remaining = 0

    def push_byte(self, byte: int) -> int | None:
        """Feed one byte into the accumulator.

        Args:
            byte: Byte value (0-255)

        Returns:
            The completed 11-bit value if this byte finished one, else None
        """
        need = BITS_PER_SYMBOL - self._remaining

        if need <= 8:
            # Byte completes a group; its unused low bits stay buffered
            leftover = 8 - need
            value = (self._stage << need) | (byte >> leftover)
            self._stage = byte & ((1 << leftover) - 1)
            self._remaining = leftover
            return value

        self._stage = (self._stage << 8) | byte
        self._remaining += 8
        return None

    def flush(self) -> tuple[int, int] | None:
        """Drain the final partial group.

        Returns:
            (value, bit_count) of the buffered bits, or None if the input ended
            exactly on an 11-bit boundary
        """
        if self._remaining == 0:
            return None

        result = (self._stage, self._remaining)
        self._stage = 0
        self._remaining = 0
        return result

    def bits_remaining(self) -> int:
        """Return the number of buffered bits (0-10)."""
        return self._remaining


class ByteUnpacker:
    """Unpacks symbol bit groups into bytes.

    Between pushes the unpacker holds 0-8 buffered bits. Whole bytes are
    flushed to the output as soon as more than 8 bits are buffered.

    Example:
        >>> unpacker = ByteUnpacker()
        >>> unpacker.push_bits(2040, 11)
        >>> unpacker.push_bits(0, 5)
        >>> unpacker.to_bytes()
        b'\\xff\\x00'
    """

    def __init__(self) -> None:
        """Initialize an empty byte unpacker."""
        self._stage = 0
        self._remaining = 0
        self._output = bytearray()

    def bits_owed(self) -> int:
        """Return how many bits are still needed to complete the current byte."""
        return 8 - self._remaining

    def push_bits(self, value: int, num_bits: int) -> None:
        """Append the low num_bits of value to the bit stream.

        Args:
            value: Bits to append (must fit in num_bits)
            num_bits: Number of bits contributed (0-11)
        """
        self._remaining += num_bits
        self._stage = (self._stage << num_bits) | value

        while self._remaining > 8:
            self._remaining -= 8
            self._output.append(self._stage >> self._remaining)
            self._stage &= (1 << self._remaining) - 1

    def to_bytes(self) -> bytes:
        """Return the unpacked bytes.

        The last byte stays buffered until here, since a full 8-bit buffer is
        only flushed once more bits arrive.

        Returns:
            Unpacked bytes
        """
        result = bytearray(self._output)
        if self._remaining > 0:
            result.append(self._stage >> (8 - self._remaining))
        return bytes(result)
