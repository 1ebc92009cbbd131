"""
Shift transform over the 128-symbol ASCII alphabet.

Every symbol maps to (symbol + shift) mod 128. Attacks report the shift that
turns ciphertext back into plaintext, so a message encoded with key k is
recovered with key (128 - k) mod 128.
"""

from caesar_cracker.core.exceptions import InvalidCiphertextError, InvalidKeyError

ALPHABET_SIZE = 128


def shift_symbol(code: int, shift: int) -> int:
    """Shift a single symbol code; codes must lie in [0, 128)."""
    return (code + shift) % ALPHABET_SIZE


def shift_text(text: str, shift: int) -> str:
    """Apply the shift to every character of ``text``."""
    return "".join(chr(shift_symbol(ord(char), shift)) for char in text)


def normalize_key(key: int | str) -> int:
    """Parse a key and reduce it into [0, 128). Negative keys are allowed."""
    try:
        return int(key) % ALPHABET_SIZE
    except (TypeError, ValueError):
        raise InvalidKeyError(key) from None


def inverse_key(key: int) -> int:
    """Return the key that undoes a shift by ``key``."""
    return (-key) % ALPHABET_SIZE


def encode(plaintext: str, key: int) -> str:
    """Encrypt plaintext with the given key."""
    return shift_text(plaintext, normalize_key(key))


def decode(ciphertext: str, key: int) -> str:
    """Decrypt ciphertext that was encrypted with ``key``."""
    return shift_text(ciphertext, inverse_key(normalize_key(key)))


def is_ascii_text(text: str) -> bool:
    return all(ord(char) < ALPHABET_SIZE for char in text)


def ensure_ascii(text: str) -> str:
    """
    Validate that text only uses the 128-symbol alphabet.

    Raises:
        InvalidCiphertextError: naming the first offending character
    """
    for position, char in enumerate(text):
        if ord(char) >= ALPHABET_SIZE:
            raise InvalidCiphertextError(position, char)
    return text
