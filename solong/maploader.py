"""Reading ``.ber`` map files from disk into rows of text."""

from __future__ import annotations

import os
from itertools import islice
from typing import IO, Iterator

MAP_SUFFIX = ".ber"
DEFAULT_BUFFER_SIZE = 10


class MapError(Exception):
    """Raised when a map cannot be read or is not a valid map."""

    def __init__(self, message: str = "you have error in your map") -> None:
        super().__init__(message)


class MapNameError(MapError):
    """Raised when a map file name does not contain ``.ber``."""

    def __init__(self, message: str = "Name map invalid !!!") -> None:
        super().__init__(message)


def check_map_name(path: str | os.PathLike[str]) -> None:
    """Raise :class:`MapNameError` unless ``.ber`` appears in ``path``."""
    if MAP_SUFFIX not in os.fspath(path):
        raise MapNameError()


def iter_lines(
    stream: IO[str], buffer_size: int = DEFAULT_BUFFER_SIZE
) -> Iterator[str]:
    """Yield lines of ``stream``, reading ``buffer_size`` characters at a time.

    Every line keeps its terminating newline except a final unterminated one.
    An empty stream yields nothing.
    """
    if buffer_size < 1:
        raise ValueError("buffer_size must be at least 1")
    pending = ""
    while True:
        chunk = stream.read(buffer_size)
        if not chunk:
            break
        pending += chunk
        while (cut := pending.find("\n")) != -1:
            yield pending[: cut + 1]
            pending = pending[cut + 1 :]
    if pending:
        yield pending


def measure_map(text: str) -> tuple[int, int]:
    """Return ``(width, height)`` of a map given as its full text.

    The width is the length of the first line. The height is the number of
    newlines plus one, or zero for an empty text.
    """
    if not text:
        return 0, 0
    width = len(text.split("\n", 1)[0])
    height = text.count("\n") + 1
    return width, height


def _open_map(path: str | os.PathLike[str]) -> IO[str]:
    try:
        return open(path, encoding="utf-8", newline="")
    except OSError as exc:
        raise MapError("Check your .ber file !!!") from exc


def load_map(path: str | os.PathLike[str]) -> tuple[list[str], int, int]:
    """Read the map at ``path``; return ``(lines, width, height)``.

    The name is checked first. Lines keep their newlines; at most ``height``
    of them are returned, so a map ending in a newline yields fewer lines
    than its height.
    """
    check_map_name(path)
    with _open_map(path) as stream:
        text = stream.read()
    width, height = measure_map(text)
    with _open_map(path) as stream:
        lines = list(islice(iter_lines(stream), height))
    return lines, width, height