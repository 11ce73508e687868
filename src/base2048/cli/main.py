"""Main CLI entry point for base2048."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..codec import decode, encode
from ..exceptions import DecodeError

logger = logging.getLogger(__name__)


def _read_input(source: str) -> bytes:
    """Read raw input from a file path, or stdin for '-'."""
    if source == "-":
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def _wrap(text: str, width: int) -> str:
    if width <= 0:
        return text
    return "\n".join(text[i : i + width] for i in range(0, len(text), width))


def run_encode(source: str, wrap: int = 0) -> int:
    """Encode a file (or stdin) and print the symbols.

    Args:
        source: Input file path, or '-' for stdin
        wrap: Symbols per output line (0 disables wrapping)

    Returns:
        Exit code
    """
    data = _read_input(source)
    logger.debug("Encoding %d bytes from %s", len(data), source)
    text = _wrap(encode(data), wrap)
    sys.stdout.buffer.write(text.encode("utf-8") + b"\n")
    sys.stdout.buffer.flush()
    return 0


def run_decode(source: str) -> int:
    """Decode a file (or stdin) of symbols and write the raw bytes to stdout.

    Whitespace in the input is ignored, so wrapped output decodes as-is.

    Args:
        source: Input file path, or '-' for stdin

    Returns:
        Exit code
    """
    raw = _read_input(source)
    text = "".join(raw.decode("utf-8").split())
    logger.debug("Decoding %d symbols from %s", len(text), source)
    data = decode(text)
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()
    return 0


def main() -> int:
    """Main entry point for the base2048 CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="base2048: 11-bit Binary-to-Text Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  base2048 --encode photo.jpg > photo.txt     Encode a file
  base2048 --encode - --wrap 64 < data.bin    Encode stdin, 64 symbols per line
  base2048 --decode photo.txt > photo.jpg     Decode a file
  base2048 --version                          Show version
        """,
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--encode",
        metavar="FILE",
        type=str,
        help="Encode FILE ('-' for stdin) and print the symbols",
    )
    mode.add_argument(
        "--decode",
        metavar="FILE",
        type=str,
        help="Decode FILE ('-' for stdin) and write the bytes to stdout",
    )

    parser.add_argument(
        "--wrap",
        metavar="N",
        type=int,
        default=0,
        help="Insert a newline every N symbols when encoding (default: no wrapping)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"base2048 {__version__}",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    source = args.encode if args.encode is not None else args.decode
    if source is None:
        # If no command specified, show help
        parser.print_help()
        return 0

    if source != "-" and not Path(source).is_file():
        print(f"Error: File not found: {source}", file=sys.stderr)
        return 1

    try:
        if args.encode is not None:
            return run_encode(source, wrap=args.wrap)
        return run_decode(source)
    except DecodeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading {source}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
