"""Unit tests for encoded text reading and encoding resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from streamkit.text import read_encoded_text, resolve_encoding

TEXT = "Привет, мир!\nВторая строка: ёжик"


@pytest.mark.parametrize("encoding", ["cp1251", "koi8-r", "utf-16", "utf-8", "iso8859-5"])
def test_read_encoded_text_round_trip(encoding: str, tmp_path: Path) -> None:
    """Text encoded in a codec reads back as the original str."""
    f = tmp_path / "legacy.txt"
    f.write_bytes(TEXT.encode(encoding))
    assert read_encoded_text(f, encoding) == TEXT


def test_read_encoded_text_keeps_line_endings(tmp_path: Path) -> None:
    """CRLF in the file is returned unchanged."""
    f = tmp_path / "crlf.txt"
    f.write_bytes("первая\r\nвторая\r\n".encode("cp1251"))
    assert read_encoded_text(str(f), "windows-1251") == "первая\r\nвторая\r\n"


def test_read_encoded_text_empty_file(tmp_path: Path) -> None:
    """Empty file decodes to an empty string."""
    f = tmp_path / "empty.txt"
    f.write_bytes(b"")
    assert read_encoded_text(f, "cp1251") == ""


@pytest.mark.parametrize("blank", ["", "  "])
def test_read_encoded_text_blank_source(blank: str) -> None:
    """Blank source path is an invalid argument."""
    with pytest.raises(ValueError, match="source_path"):
        read_encoded_text(blank, "utf-8")


def test_read_encoded_text_missing_source(tmp_path: Path) -> None:
    """Missing source raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        read_encoded_text(tmp_path / "missing.txt", "utf-8")


@pytest.mark.parametrize("encoding", [None, "", "   ", "no-such-encoding", "base64"])
def test_read_encoded_text_bad_encoding(encoding, tmp_path: Path) -> None:
    """Blank, unknown and bytes-to-bytes codecs raise ValueError."""
    f = tmp_path / "a.txt"
    f.write_text("abc")
    with pytest.raises(ValueError):
        read_encoded_text(f, encoding)


def test_read_encoded_text_undecodable_bytes_propagate(tmp_path: Path) -> None:
    """Bytes invalid for the codec surface as UnicodeDecodeError."""
    f = tmp_path / "bad.txt"
    f.write_bytes(b"\xff\xfe\xfd")
    with pytest.raises(UnicodeDecodeError):
        read_encoded_text(f, "ascii")


def test_resolve_encoding_canonical_names() -> None:
    """Aliases resolve to Python's canonical codec names."""
    assert resolve_encoding("Windows-1251") == "cp1251"
    assert resolve_encoding(" UTF8 ") == "utf-8"
    assert resolve_encoding("KOI8-R") == "koi8-r"
