"""Integration tests: streamkit read."""

from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import patch

import pytest

from streamkit.commands.read_cmd import run as read_run


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path):
    with patch("streamkit.config._global_config_dir", return_value=tmp_path / "home" / ".streamkit"):
        yield


def test_read_prints_decoded_text(tmp_path: Path) -> None:
    """Decoded text is written to stdout unchanged."""
    f = tmp_path / "legacy.txt"
    f.write_bytes("Здравствуй".encode("koi8-r"))
    buf = io.StringIO()
    with patch("streamkit.commands.read_cmd.sys.stdout", buf):
        read_run(type("Args", (), {"source": str(f), "encoding": "koi8-r"})())
    assert buf.getvalue() == "Здравствуй"


def test_read_default_encoding_from_config(tmp_path: Path) -> None:
    """Without --encoding the text.encoding config value is used."""
    f = tmp_path / "utf8.txt"
    f.write_text("café", encoding="utf-8")
    buf = io.StringIO()
    with patch("streamkit.commands.read_cmd.sys.stdout", buf):
        read_run(type("Args", (), {"source": str(f), "encoding": None})())
    assert buf.getvalue() == "café"


def test_read_unknown_encoding_exits(tmp_path: Path) -> None:
    """Unknown encoding prints an error and exits 1."""
    f = tmp_path / "a.txt"
    f.write_text("a")
    err = io.StringIO()
    with patch("streamkit.commands.read_cmd.sys.stderr", err):
        with pytest.raises(SystemExit) as exc:
            read_run(type("Args", (), {"source": str(f), "encoding": "klingon"})())
    assert exc.value.code == 1
    assert "Unsupported encoding" in err.getvalue()
