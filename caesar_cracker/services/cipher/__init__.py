"""Shift cipher transform."""

from caesar_cracker.services.cipher.transform import (
    ALPHABET_SIZE,
    decode,
    encode,
    ensure_ascii,
    inverse_key,
    is_ascii_text,
    normalize_key,
    shift_symbol,
    shift_text,
)

__all__ = [
    "ALPHABET_SIZE",
    "decode",
    "encode",
    "ensure_ascii",
    "inverse_key",
    "is_ascii_text",
    "normalize_key",
    "shift_symbol",
    "shift_text",
]
