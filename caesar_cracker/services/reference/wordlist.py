import logging
from importlib import resources
from typing import IO, AnyStr

from caesar_cracker.core.exceptions import WordlistUnavailableError
from caesar_cracker.services.cipher.transform import is_ascii_text
from caesar_cracker.services.preprocessing.streams import iter_lines

logger = logging.getLogger(__name__)

WordSet = frozenset[str]

BUNDLED_WORDLIST = "popular_words.txt"


def load_wordset(stream: IO[AnyStr]) -> WordSet:
    """
    Load a newline-delimited wordlist.

    Entries are compared verbatim against lowercased tokens, so the list
    must already be lowercase. Blank lines are skipped, and so are entries
    outside the ASCII alphabet since no decoded token can equal them.

    Raises:
        OSError, ValueError: if the stream cannot be read
    """
    return frozenset(word for word in iter_lines(stream) if is_ascii_text(word))


def open_wordlist(path: str | None = None) -> IO[str]:
    """
    Open a wordlist file, or the bundled list when ``path`` is None.

    Raises:
        WordlistUnavailableError: if ``path`` cannot be opened
    """
    if path is None:
        logger.debug("Using bundled wordlist %s", BUNDLED_WORDLIST)
        source = resources.files("caesar_cracker.data").joinpath(BUNDLED_WORDLIST)
        return source.open("r", encoding="utf-8", errors="replace")

    try:
        return open(path, encoding="utf-8", errors="replace")
    except OSError as e:
        raise WordlistUnavailableError(path, e.strerror or str(e)) from e
