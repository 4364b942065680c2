"""Reverse copy engine — writes a file's bytes to another file in reverse order.

The source is read backward in windows of at most ``buffer_size`` bytes,
starting at its end. Each window is reversed inside the working buffer and
appended to the destination, so windows come out last-first and bytes inside
every window come out last-first: the destination ends up as the exact
byte-order reversal of the source while memory stays bounded by one buffer.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Union

from .exceptions import InvalidArgumentError, IOFailureError, SourceNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 1024

PathArg = Union[str, "os.PathLike[str]"]

_INVALID_ARGUMENTS = (
    "Paths to source and destination files must not be blank "
    "and buffer size must be greater than 0."
)


@dataclass
class ReverseCopyResult:
    source: str
    destination: str
    bytes_copied: int
    chunk_count: int
    buffer_size: int


def reverse_in_place(buffer: bytearray, length: int) -> None:
    """Reverse the first ``length`` bytes of ``buffer`` in place.

    Bytes at ``length`` and beyond are left untouched. A full buffer goes
    through ``bytearray.reverse()``; a shorter prefix is swapped pairwise
    from both ends so no temporary copy is made.
    """
    if length < 0 or length > len(buffer):
        raise InvalidArgumentError(
            f"length must be between 0 and {len(buffer)}, got {length}"
        )
    if length < 2:
        return
    if length == len(buffer):
        buffer.reverse()
        return
    i, j = 0, length - 1
    while i < j:
        buffer[i], buffer[j] = buffer[j], buffer[i]
        i += 1
        j -= 1


def _validate(src: PathArg, dst: PathArg, buffer_size: int) -> None:
    if not os.fspath(src).strip() or not os.fspath(dst).strip():
        raise InvalidArgumentError(_INVALID_ARGUMENTS)
    if isinstance(buffer_size, bool) or not isinstance(buffer_size, int) or buffer_size < 1:
        raise InvalidArgumentError(_INVALID_ARGUMENTS)
    if _is_same_file(src, dst):
        raise InvalidArgumentError(
            f"Source and destination must be different files: {os.fspath(src)}"
        )


def _is_same_file(src: PathArg, dst: PathArg) -> bool:
    try:
        if Path(src).resolve() == Path(dst).resolve():
            return True
        return os.path.samefile(src, dst)
    except (OSError, ValueError):
        # Either side missing or not a valid path; open() reports it.
        return False


def _open_source(src: PathArg) -> BinaryIO:
    try:
        return open(src, "rb")
    except FileNotFoundError as e:
        raise SourceNotFoundError(f"No such source file exists: {os.fspath(src)}") from e
    except (OSError, ValueError) as e:
        raise IOFailureError(f"Cannot open source file {os.fspath(src)}: {e}") from e


def _open_destination(dst: PathArg) -> BinaryIO:
    try:
        return open(dst, "wb")
    except (OSError, ValueError) as e:
        raise IOFailureError(f"Cannot open destination file {os.fspath(dst)}: {e}") from e


def _read_exactly(source: BinaryIO, view: memoryview) -> None:
    filled = 0
    while filled < len(view):
        count = source.readinto(view[filled:])
        if not count:
            raise IOFailureError(
                f"Unexpected end of source file: wanted {len(view)} bytes, got {filled}"
            )
        filled += count


def copy_reversed(
    src: PathArg,
    dst: PathArg,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> ReverseCopyResult:
    """Copy ``src`` to ``dst`` with the overall byte order reversed.

    ``dst`` is created if absent and truncated if present. On a failure
    after the destination was opened, whatever was already written stays
    in place.

    Raises:
        InvalidArgumentError: blank path, buffer size below 1, or both
            paths denoting the same file. Nothing is opened. The same-file
            check comes first, so ``src == dst`` is rejected here even
            when ``src`` does not exist.
        SourceNotFoundError: ``src`` does not exist. ``dst`` is not touched.
        IOFailureError: any other I/O failure, including a path the OS
            cannot represent (embedded NUL byte); the original exception is
            kept as ``__cause__``.
    """
    _validate(src, dst, buffer_size)

    buffer = bytearray(buffer_size)
    chunk_count = 0
    try:
        with _open_source(src) as source, _open_destination(dst) as destination:
            source_length = source.seek(0, os.SEEK_END)
            logger.info(
                f"Reverse copy {os.fspath(src)} -> {os.fspath(dst)} "
                f"({source_length} bytes, buffer {buffer_size})"
            )
            cursor = source_length
            with memoryview(buffer) as view:
                while cursor > 0:
                    chunk_size = min(buffer_size, cursor)
                    cursor -= chunk_size
                    source.seek(cursor)
                    _read_exactly(source, view[:chunk_size])
                    reverse_in_place(buffer, chunk_size)
                    destination.write(view[:chunk_size])
                    chunk_count += 1
                    logger.debug(f"chunk #{chunk_count}: offset={cursor} size={chunk_size}")
    except OSError as e:
        raise IOFailureError(f"Unexpected I/O error occurred: {e}") from e

    logger.info(f"Wrote {source_length} bytes in {chunk_count} chunks to {os.fspath(dst)}")
    return ReverseCopyResult(
        source=os.fspath(src),
        destination=os.fspath(dst),
        bytes_copied=source_length,
        chunk_count=chunk_count,
        buffer_size=buffer_size,
    )
