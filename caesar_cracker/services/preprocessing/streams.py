"""
Sequential readers for ciphertext and wordlist streams.

Streams are read exactly once, front to back, in fixed-size chunks. Both
binary streams (``read`` returns ``bytes``) and text streams (``read``
returns ``str``) are accepted.
"""

from collections.abc import Iterator
from typing import IO, AnyStr

DEFAULT_CHUNK_SIZE = 4096

# Errors a file object raises when it is closed, write-only or undecodable.
STREAM_ERRORS: tuple[type[Exception], ...] = (OSError, ValueError)


def iter_symbol_chunks(
    stream: IO[AnyStr],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Iterator[tuple[int, ...]]:
    """
    Yield the stream's symbol codes in chunks until end-of-stream.

    Raises:
        OSError, ValueError: if the stream cannot be read
    """
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            return
        if isinstance(chunk, str):
            yield tuple(map(ord, chunk))
        else:
            yield tuple(chunk)


def iter_lines(stream: IO[AnyStr]) -> Iterator[str]:
    """
    Yield stripped, non-empty lines of a newline-delimited stream.

    Undecodable bytes become U+FFFD rather than failing the whole read.
    """
    for raw in stream:
        line = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
        line = line.strip()
        if line:
            yield line
