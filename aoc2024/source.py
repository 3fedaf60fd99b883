"""
Input file access for the puzzle solvers.

Every solver opens its input exactly once through `open_source` so the
handle is released on all exit paths. I/O problems are reported as one of
two error kinds: the file could not be opened, or a read failed part way.
Bytes that are not valid UTF-8 are not an I/O problem; they survive as
surrogates and simply fail integer parsing on their line.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator, List, Union

PathLike = Union[str, Path]


class InputError(OSError):
    """Base class for input failures. Carries the offending path."""

    def __init__(self, message: str, path: PathLike):
        super().__init__(message)
        self.path = Path(path)


class InputOpenError(InputError):
    """Raised when the input file cannot be opened."""
    pass


class InputReadError(InputError):
    """Raised when reading the input fails mid-stream."""
    pass


@contextmanager
def open_source(path: PathLike) -> Iterator[IO[str]]:
    """
    Open a text input for reading.

    Lines end at "\\n" only; a stray "\\r" stays inside its line.

    Args:
        path: Path to the puzzle input

    Raises:
        InputOpenError: If the file is missing, unreadable or a directory
    """
    path = Path(path)
    try:
        handle = path.open("r", encoding="utf-8", errors="surrogateescape", newline="\n")
    except OSError as e:
        raise InputOpenError(f"error opening file {path}: {e}", path) from e
    with handle:
        yield handle


def iter_lines(handle: IO[str], path: PathLike) -> Iterator[str]:
    """
    Yield lines from an open handle, translating read failures.

    Raises:
        InputReadError: On an OS-level read error
    """
    try:
        for line in handle:
            yield line
    except OSError as e:
        raise InputReadError(f"error reading file {path}: {e}", path) from e


def text_lines(text: str) -> List[str]:
    """Split in-memory text into lines the same way a file is read."""
    lines = text.split("\n")
    # A trailing newline ends the last line rather than starting a new one
    if lines[-1] == "":
        lines.pop()
    return lines


def rewind(handle: IO[str], path: PathLike) -> None:
    """Seek back to the start of the input for another pass."""
    try:
        handle.seek(0)
    except OSError as e:
        raise InputReadError(f"error rewinding file {path}: {e}", path) from e
