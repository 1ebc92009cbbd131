"""Ciphertext-only key recovery for the 128-symbol ASCII shift cipher."""

__version__ = "0.1.0"
