"""
Low-level readers for the process-information filesystem.

Everything here raises OSError on filesystem failures and leaves reporting to
the caller (see procview.reader).
"""

import codecs
import os
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TextIO

# Fields of /proc/<pid>/status shown by the process inspector, in kernel order
STATUS_FIELDS = (
    "Name",
    "Umask",
    "State",
    "Tgid",
    "Ngid",
    "Pid",
    "PPid",
    "TracerPid",
    "Uid",
    "Gid",
)
STATUS_PREFIXES = tuple(f"{field}:" for field in STATUS_FIELDS)

_ASCII_DIGITS = frozenset("0123456789")


class InvalidPidError(ValueError):
    """Raised when a process identifier is not a plain decimal number."""


def is_number(text: str | None) -> bool:
    """
    Check whether text is a non-empty run of ASCII decimal digits.

    Signs, whitespace and non-ASCII digits are rejected, so "-5", "+5", " 5"
    and "" are all False.
    """
    if not text:
        return False
    return all(char in _ASCII_DIGITS for char in text)


def parse_pid(text: str | None) -> int:
    """
    Convert a raw token into a process id.

    Raises:
        InvalidPidError: If the token is not accepted by is_number() or has
            too many digits to convert.
    """
    if not is_number(text):
        raise InvalidPidError(f"invalid process id: {text!r}")
    try:
        return int(text)
    except ValueError:
        # Beyond the interpreter's digit limit for str -> int conversion
        raise InvalidPidError(f"invalid process id: {text[:20]!r}... ({len(text)} digits)") from None


def has_prefix(*prefixes: str) -> Callable[[str], bool]:
    """Build a line predicate matching any of the given prefixes."""

    def matches(line: str) -> bool:
        return line.startswith(prefixes)

    return matches


def describe_error(exc: OSError) -> str:
    """Short human-readable reason for an OSError, like perror() prints."""
    return exc.strerror or str(exc)


class LineSelection:
    """
    Lazy, restartable sequence of lines from a text file.

    Every iteration reopens the file, yields the lines accepted by the
    predicate (newlines kept) and stops once ``limit`` lines have been
    yielded. With ``max_line_length`` set, longer lines are yielded in pieces
    of at most that many characters and each piece counts toward the limit.
    The file is closed when iteration finishes or is abandoned.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        predicate: Callable[[str], bool] | None = None,
        limit: int | None = None,
        max_line_length: int | None = None,
    ) -> None:
        if limit is not None and limit < 0:
            raise ValueError("limit must not be negative")
        if max_line_length is not None and max_line_length <= 0:
            raise ValueError("max_line_length must be positive")
        self._path = Path(path)
        self._predicate = predicate
        self._limit = limit
        self._max_line_length = max_line_length

    def __iter__(self) -> Iterator[str]:
        if self._limit == 0:
            return
        size = self._max_line_length or -1
        yielded = 0
        # newline="" keeps "\r\n" intact so lines are echoed verbatim
        with open(self._path, encoding="utf-8", errors="replace", newline="") as handle:
            while True:
                line = handle.readline(size)
                if not line:
                    break
                if self._predicate is not None and not self._predicate(line):
                    continue
                yield line
                yielded += 1
                if self._limit is not None and yielded >= self._limit:
                    break


def stream_cmdline(path: str | os.PathLike[str], stream: TextIO, chunk_size: int = 1024) -> int:
    """
    Copy a NUL-separated command line to a text stream.

    The file is read in chunks of ``chunk_size`` bytes. Each NUL becomes a
    space and each chunk is written as soon as it is read. Multi-byte
    characters split between chunks are held back until complete.

    Returns:
        Number of bytes read.
    """
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    total = 0
    fd = os.open(path, os.O_RDONLY)
    try:
        while True:
            chunk = os.read(fd, chunk_size)
            if not chunk:
                break
            total += len(chunk)
            stream.write(decoder.decode(chunk.replace(b"\0", b" ")))
        stream.write(decoder.decode(b"", final=True))
    finally:
        os.close(fd)
    return total


def copy_raw(path: str | os.PathLike[str], out_fd: int, chunk_size: int = 1024) -> int:
    """
    Copy a file to a descriptor with plain read()/write() calls.

    No decoding and no line handling: the bytes written are exactly the bytes
    read. Short writes are retried until the chunk is out.

    Returns:
        Number of bytes copied.
    """
    total = 0
    fd = os.open(path, os.O_RDONLY)
    try:
        while True:
            chunk = os.read(fd, chunk_size)
            if not chunk:
                break
            _write_all(out_fd, chunk)
            total += len(chunk)
    finally:
        os.close(fd)
    return total


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
