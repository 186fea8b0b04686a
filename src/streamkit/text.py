"""Reading text stored in a (possibly non-Unicode) encoding."""

from __future__ import annotations

import codecs
import logging
from pathlib import Path

from streamkit.validation import validate_source

logger = logging.getLogger(__name__)


def resolve_encoding(name: str | None) -> str:
    """
    Return the canonical codec name for name (e.g. 'Windows-1251' -> 'cp1251').

    Raises ValueError for blank or unknown names and for bytes-to-bytes codecs
    such as 'base64' that cannot decode to text.
    """
    if name is None or not name.strip():
        raise ValueError("encoding cannot be None, empty or whitespace.")
    try:
        info = codecs.lookup(name.strip())
    except LookupError as e:
        raise ValueError(f"Unsupported encoding: {name!r}.") from e
    # Same flag open() checks before accepting a codec.
    if not getattr(info, "_is_text_encoding", True):
        raise ValueError(f"Not a text encoding: {name!r}.")
    return info.name


def read_encoded_text(source_path: Path | str, encoding: str) -> str:
    """Read the whole file decoded with encoding. Line endings are returned untouched."""
    source = validate_source(source_path)
    codec = resolve_encoding(encoding)
    with open(source, "r", encoding=codec, newline="") as f:
        text = f.read()
    logger.debug("read_encoded_text %s (%s): %d chars", source, codec, len(text))
    return text
