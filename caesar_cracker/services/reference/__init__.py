"""Reference model: wordlists and the ASCII frequency table."""

from caesar_cracker.services.reference.frequencies import ASCII_FREQUENCIES
from caesar_cracker.services.reference.wordlist import WordSet, load_wordset, open_wordlist

__all__ = [
    "ASCII_FREQUENCIES",
    "WordSet",
    "load_wordset",
    "open_wordlist",
]
