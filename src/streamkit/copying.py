"""File copy helpers: byte-by-byte, single block, buffered block and line-by-line."""

from __future__ import annotations

import io
import logging
from pathlib import Path

from streamkit.text import resolve_encoding
from streamkit.validation import validate_paths

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = io.DEFAULT_BUFFER_SIZE


def byte_copy(source_path: Path | str, destination_path: Path | str) -> int:
    """
    Copy source to destination one byte at a time.

    Destination is created or truncated. Returns the number of bytes in the
    destination after the copy.
    """
    source, destination = validate_paths(source_path, destination_path)
    with open(source, "rb") as src, open(destination, "wb") as dst:
        while True:
            byte = src.read(1)
            if not byte:
                break
            dst.write(byte)
        written = dst.tell()
    logger.debug("byte_copy %s -> %s: %d bytes", source, destination, written)
    return written


def _read_block(source: Path) -> tuple[bytearray, int]:
    """Read the whole file into one buffer sized to its length."""
    with open(source, "rb") as src:
        size = src.seek(0, io.SEEK_END)
        src.seek(0)
        buffer = bytearray(size)
        read = src.readinto(buffer) or 0
    return buffer, read


def block_copy(source_path: Path | str, destination_path: Path | str) -> int:
    """Read the whole source into a single buffer and write it out in one call. Returns bytes read."""
    source, destination = validate_paths(source_path, destination_path)
    buffer, read = _read_block(source)
    with open(destination, "wb") as dst:
        dst.write(memoryview(buffer)[:read])
    logger.debug("block_copy %s -> %s: %d bytes", source, destination, read)
    return read


def buffered_block_copy(
    source_path: Path | str,
    destination_path: Path | str,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> int:
    """
    Like block_copy, but the destination is a BufferedWriter over a raw FileIO sink.

    The buffering layer is transparent: the return value (bytes read) and the
    destination contents are the same as for block_copy.
    """
    if not isinstance(buffer_size, int) or isinstance(buffer_size, bool) or buffer_size <= 0:
        raise ValueError(f"buffer_size must be a positive integer, got {buffer_size!r}.")
    source, destination = validate_paths(source_path, destination_path)
    buffer, read = _read_block(source)
    with io.BufferedWriter(io.FileIO(destination, "w"), buffer_size=buffer_size) as dst:
        dst.write(memoryview(buffer)[:read])
    logger.debug(
        "buffered_block_copy %s -> %s: %d bytes (buffer %d)",
        source,
        destination,
        read,
        buffer_size,
    )
    return read


def line_copy(
    source_path: Path | str,
    destination_path: Path | str,
    encoding: str = "utf-8",
) -> int:
    """
    Copy a text file line by line. Returns the number of lines processed.

    Every line but the last is written with a line separator; the last one never
    is. A source that ends in a separator has a trailing empty line, which is
    counted, so "a\\nb\\n" is 3 lines and "a\\nb" is 2. An empty file is 0 lines.
    """
    source, destination = validate_paths(source_path, destination_path)
    codec = resolve_encoding(encoding)
    count = 0
    ends_with_separator = False
    with open(source, "r", encoding=codec, newline=None) as src, open(
        destination, "w", encoding=codec
    ) as dst:
        for raw in src:
            if count:
                dst.write("\n")
            ends_with_separator = raw.endswith("\n")
            dst.write(raw[:-1] if ends_with_separator else raw)
            count += 1
        if ends_with_separator:
            # Trailing empty line: previous line gets its separator, the empty one adds nothing.
            dst.write("\n")
            count += 1
    logger.debug("line_copy %s -> %s: %d lines", source, destination, count)
    return count
