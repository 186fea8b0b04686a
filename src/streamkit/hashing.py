"""Stream and file digests (any hashlib algorithm), uppercase hex."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import BinaryIO

from streamkit.validation import validate_source

logger = logging.getLogger(__name__)

HASH_CHUNK_SIZE = 64 * 1024
DEFAULT_ALGORITHM = "SHA256"


def resolve_algorithm(name: str | None) -> str:
    """
    Map an algorithm identifier to its hashlib name.

    Case-insensitive; accepts 'MD5', 'SHA1', 'SHA256', 'SHA-256', 'sha3_256', etc.
    Raises ValueError for blank or unknown names and for variable-length (shake) digests.
    """
    if name is None or not name.strip():
        raise ValueError("hash_algorithm_name cannot be None, empty or whitespace.")
    key = name.strip().lower()
    for candidate in (key, key.replace("-", ""), key.replace("-", "_")):
        try:
            hasher = hashlib.new(candidate)
        except (ValueError, TypeError):
            continue
        if hasher.digest_size == 0:
            raise ValueError(f"Variable-length digest is not supported: {name!r}.")
        return hasher.name
    raise ValueError(f"Unsupported hash algorithm: {name!r}.")


def calculate_hash(stream: BinaryIO, hash_algorithm_name: str) -> str:
    """
    Digest of the remaining content of stream, as uppercase hex with no separators.

    The stream is read to EOF from its current position and left open.
    """
    hasher = hashlib.new(resolve_algorithm(hash_algorithm_name))
    for chunk in iter(lambda: stream.read(HASH_CHUNK_SIZE), b""):
        hasher.update(chunk)
    return hasher.hexdigest().upper()


def file_hash(source_path: Path | str, hash_algorithm_name: str = DEFAULT_ALGORITHM) -> str:
    """Digest of a file's contents. Binary-safe (reads raw bytes)."""
    source = validate_source(source_path)
    with open(source, "rb") as f:
        digest = calculate_hash(f, hash_algorithm_name)
    logger.debug("file_hash %s (%s): %s", source, hash_algorithm_name, digest)
    return digest

