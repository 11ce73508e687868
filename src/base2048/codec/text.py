"""Text convenience wrappers around encode() and decode()."""

from __future__ import annotations

from ..exceptions import DecodeError
from .decoder import decode
from .encoder import encode


def encode_string(text: str, encoding: str = "utf-8") -> str:
    """Encode a text string to base2048.

    Args:
        text: Text to encode
        encoding: Character encoding used to turn text into bytes

    Returns:
        Encoded string
    """
    return encode(text.encode(encoding))


def decode_string(text: str, encoding: str = "utf-8") -> str:
    """Decode a base2048 string back to the text it was built from.

    Args:
        text: Encoded string
        encoding: Character encoding of the decoded bytes

    Returns:
        Decoded text

    Raises:
        DecodeError: If the symbols are malformed or the bytes are not valid
            in the given encoding
    """
    data = decode(text)
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise DecodeError(f"Decoded bytes are not valid {encoding}: {e}") from e
