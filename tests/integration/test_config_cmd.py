"""Integration tests: streamkit config --show / --set."""

from __future__ import annotations

import io
import json
from pathlib import Path
from unittest.mock import patch

import pytest

from streamkit.commands.config_cmd import run as config_run


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path):
    config_dir = tmp_path / "home" / ".streamkit"
    with patch("streamkit.config._global_config_dir", return_value=config_dir):
        yield config_dir


def _args(show=False, set_key=None):
    return type("Args", (), {"show": show, "set_key": set_key})()


def _show() -> dict:
    buf = io.StringIO()
    with patch("streamkit.commands.config_cmd.sys.stdout", buf):
        config_run(_args(show=True))
    out = buf.getvalue()
    start = out.find("{")
    assert start >= 0, "Expected JSON in config output"
    return json.loads(out[start:])


def test_config_show_defaults() -> None:
    """--show prints the merged defaults as JSON."""
    data = _show()
    assert data["hash"]["algorithm"] == "SHA256"
    assert data["copy"]["mode"] == "block"


def test_config_set_writes_global_file(isolated_config: Path) -> None:
    """--set decodes JSON values and writes only the set keys to the global file."""
    with patch("streamkit.commands.config_cmd.sys.stdout", io.StringIO()):
        config_run(_args(set_key="hash.algorithm=MD5"))
        config_run(_args(set_key="copy.buffer_size=4096"))
    saved = json.loads((isolated_config / "config.json").read_text(encoding="utf-8"))
    assert saved == {"hash": {"algorithm": "MD5"}, "copy": {"buffer_size": 4096}}
    data = _show()
    assert data["hash"]["algorithm"] == "MD5"
    assert data["copy"]["buffer_size"] == 4096
    assert data["copy"]["mode"] == "block"


@pytest.mark.parametrize("set_key", ["no-equals", "=value"])
def test_config_set_invalid_exits(set_key: str) -> None:
    """Missing "=" or an empty key exits with status 1."""
    with patch("streamkit.commands.config_cmd.sys.stderr", io.StringIO()):
        with pytest.raises(SystemExit) as exc:
            config_run(_args(set_key=set_key))
    assert exc.value.code == 1


def test_config_requires_an_action() -> None:
    """Without --show or --set the command exits with status 1."""
    with patch("streamkit.commands.config_cmd.sys.stderr", io.StringIO()):
        with pytest.raises(SystemExit):
            config_run(_args())


def test_config_set_plain_string_and_nested_override(isolated_config: Path) -> None:
    """Unquoted strings are kept as text; a scalar in the way of a section is replaced by a dict."""
    save_path = isolated_config / "config.json"
    isolated_config.mkdir(parents=True)
    save_path.write_text(json.dumps({"text": "oops"}), encoding="utf-8")
    with patch("streamkit.commands.config_cmd.sys.stdout", io.StringIO()):
        config_run(_args(set_key="text.encoding=cp1251"))
    assert json.loads(save_path.read_text(encoding="utf-8")) == {"text": {"encoding": "cp1251"}}
