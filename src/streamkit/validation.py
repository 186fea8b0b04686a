"""Input validation shared by every path-based operation."""

from __future__ import annotations

import os
from pathlib import Path, PurePath


def _is_blank(value: Path | str | None) -> bool:
    if value is None:
        return True
    # Path("") normalises to ".", so str() alone would not see it as empty
    if isinstance(value, PurePath):
        return value == PurePath("") or not str(value).strip()
    return not str(value).strip()


def validate_source(source_path: Path | str | None) -> Path:
    """
    Check that source_path is non-blank and names an existing file.

    Raises ValueError for a None/empty/whitespace path, FileNotFoundError when the
    file does not exist (directories do not count). Returns the path as a Path.
    """
    if _is_blank(source_path):
        raise ValueError("source_path cannot be None, empty or whitespace.")
    path = Path(source_path)
    if not path.is_file():
        raise FileNotFoundError(f"File '{source_path}' not found. Parameter name: source_path.")
    return path


def validate_paths(
    source_path: Path | str | None,
    destination_path: Path | str | None,
) -> tuple[Path, Path]:
    """
    Validate a source/destination pair. The destination does not have to exist,
    but must not be the source file itself.
    """
    source = validate_source(source_path)
    if _is_blank(destination_path):
        raise ValueError("destination_path cannot be None, empty or whitespace.")
    destination = Path(destination_path)
    if destination.exists() and os.path.samefile(source, destination):
        raise ValueError(f"destination_path '{destination_path}' is the same file as source_path.")
    return source, destination
