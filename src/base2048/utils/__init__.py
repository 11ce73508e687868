"""Utility functions for base2048.

This module provides encoded and decoded size calculation.
"""

from __future__ import annotations

from .sizing import decoded_length, encoded_length, final_symbol_kind

__all__ = [
    "encoded_length",
    "decoded_length",
    "final_symbol_kind",
]
