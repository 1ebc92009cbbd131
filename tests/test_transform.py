"""Tests for the shift transform."""

import string

import pytest

from caesar_cracker.core.exceptions import InvalidCiphertextError, InvalidKeyError
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


class TestShiftTransform:
    """Test suite for the 128-symbol shift transform."""

    @pytest.fixture
    def sample_text(self):
        return "The quick brown fox jumps over the lazy dog.\nIt's 9 o'clock!\t~"

    def test_encode_decode_roundtrip(self, sample_text):
        """Decoding with the encoding key restores the text for every key."""
        for key in range(ALPHABET_SIZE):
            assert decode(encode(sample_text, key), key) == sample_text

    def test_roundtrip_all_symbols(self):
        """Every symbol of the alphabet survives a round trip."""
        text = "".join(chr(code) for code in range(ALPHABET_SIZE))
        for key in (1, 27, 64, 127):
            assert decode(encode(text, key), key) == text

    def test_hello_with_key_27(self):
        """Shifting by 27 and then by 101 (-27 mod 128) restores the text."""
        ciphertext = shift_text("hello", 27)

        assert ciphertext != "hello"
        assert shift_text(ciphertext, 101) == "hello"

    def test_known_ciphertext_with_key_66(self):
        assert shift_text("&#**-H", 66) == "hello\n"

    def test_encode_equals_decode_with_inverse(self, sample_text):
        """Encoding with k equals decoding with (128 - k) mod 128."""
        for key in (0, 3, 27, 101):
            assert encode(sample_text, key) == decode(sample_text, (ALPHABET_SIZE - key) % ALPHABET_SIZE)

    def test_shift_symbol_wraps(self):
        assert shift_symbol(127, 1) == 0
        assert shift_symbol(72, 66) == 10
        assert shift_symbol(0, 0) == 0

    def test_inverse_key(self):
        assert inverse_key(0) == 0
        assert inverse_key(27) == 101
        assert inverse_key(1) == 127

    def test_normalize_key(self):
        """Keys are reduced modulo 128."""
        assert normalize_key(5) == 5
        assert normalize_key(-1) == 127
        assert normalize_key(128) == 0
        assert normalize_key("300") == 44

    def test_normalize_key_rejects_garbage(self):
        with pytest.raises(InvalidKeyError):
            normalize_key("abc")
        with pytest.raises(InvalidKeyError):
            normalize_key(None)

    def test_ascii_validation(self):
        assert is_ascii_text(string.printable)
        assert not is_ascii_text("café")
        assert ensure_ascii("plain") == "plain"

    def test_ensure_ascii_reports_position(self):
        with pytest.raises(InvalidCiphertextError) as exc_info:
            ensure_ascii("héllo")

        assert exc_info.value.details["position"] == 1
        assert exc_info.value.details["symbol"] == "é"
