"""Wrap a file in a decompression stream (gzip, deflate or none)."""

from __future__ import annotations

import gzip
import io
import logging
import zlib
from enum import Enum
from pathlib import Path
from typing import BinaryIO

from streamkit.validation import validate_source

logger = logging.getLogger(__name__)

_READ_CHUNK = 64 * 1024


class DecompressionMethod(Enum):
    """Compression applied to a source file."""

    NONE = "none"
    DEFLATE = "deflate"
    GZIP = "gzip"


def coerce_method(value: DecompressionMethod | str) -> DecompressionMethod:
    """Accept a DecompressionMethod or its value/name string (case-insensitive)."""
    if isinstance(value, DecompressionMethod):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        for method in DecompressionMethod:
            if key in (method.value, method.name.lower()):
                return method
    raise ValueError(
        f"Unknown decompression method: {value!r}. "
        f"Expected one of: {', '.join(m.value for m in DecompressionMethod)}."
    )


class _DeflateReader(io.RawIOBase):
    """
    Raw reader that inflates a deflate stream from an underlying binary file.

    Accepts raw deflate (no header) and zlib-wrapped data; the format is picked
    from the first two bytes. Closing the reader closes the file.
    """

    def __init__(self, fileobj: BinaryIO) -> None:
        super().__init__()
        self._fileobj = fileobj
        head = fileobj.read(2)
        self._decompressor = zlib.decompressobj(
            zlib.MAX_WBITS if _looks_like_zlib(head) else -zlib.MAX_WBITS
        )
        self._pending = self._decompressor.decompress(head) if head else b""
        self._offset = 0
        self._eof = not head

    def readable(self) -> bool:
        return True

    def _inflate(self, size: int) -> bytes:
        """Next piece of output, at most size bytes except for the final flush."""
        d = self._decompressor
        if d.unconsumed_tail:
            return d.decompress(d.unconsumed_tail, size)
        if d.eof:
            self._eof = True
            return b""
        chunk = self._fileobj.read(_READ_CHUNK)
        if not chunk:
            self._eof = True
            return d.flush()
        return d.decompress(chunk, size)

    def readinto(self, b) -> int:
        view = memoryview(b).cast("B")
        if not len(view):
            return 0
        while self._offset >= len(self._pending) and not self._eof:
            self._pending = self._inflate(len(view))
            self._offset = 0
        n = min(len(view), len(self._pending) - self._offset)
        view[:n] = self._pending[self._offset : self._offset + n]
        self._offset += n
        return n

    def close(self) -> None:
        if not self.closed:
            try:
                self._fileobj.close()
            finally:
                super().close()


def _looks_like_zlib(head: bytes) -> bool:
    """True if head is a valid zlib header (CM=8, FCHECK ok)."""
    if len(head) < 2:
        return False
    cmf, flg = head[0], head[1]
    return cmf & 0x0F == 8 and (cmf << 8 | flg) % 31 == 0


def decompress_stream(
    source_path: Path | str,
    method: DecompressionMethod | str,
) -> BinaryIO:
    """
    Open source_path and wrap it according to method.

    GZIP -> gzip.GzipFile, DEFLATE -> buffered inflating reader, NONE -> the raw
    file object. The caller owns the returned stream; closing it closes the file.
    """
    source = validate_source(source_path)
    method = coerce_method(method)
    f = open(source, "rb")
    try:
        if method is DecompressionMethod.GZIP:
            stream: BinaryIO = _GzipFile(fileobj=f, mode="rb")
        elif method is DecompressionMethod.DEFLATE:
            stream = io.BufferedReader(_DeflateReader(f))
        else:
            stream = f
    except BaseException:
        f.close()
        raise
    logger.debug("decompress_stream %s (%s)", source, method.value)
    return stream


class _GzipFile(gzip.GzipFile):
    """GzipFile that also closes the file object it was given."""

    def close(self) -> None:
        fileobj = self.fileobj
        try:
            super().close()
        finally:
            if fileobj is not None:
                fileobj.close()
