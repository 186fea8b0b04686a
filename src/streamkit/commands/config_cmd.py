"""Show or edit configuration (CLI command)."""

from __future__ import annotations

import json
import sys
from argparse import Namespace
from typing import Any

from streamkit.config import _load_json, global_config_path, load_config, save_config


def _apply_setting(config: dict[str, Any], dotted_key: str, raw_value: str) -> Any:
    """
    Store raw_value under dotted_key (e.g. "copy.buffer_size") in config and return it.

    JSON literals are decoded ("4096" -> 4096, "true" -> True); anything else is kept
    as a string, so "hash.algorithm=MD5" needs no quoting.
    """
    *sections, leaf = dotted_key.split(".")
    node = config
    for section in sections:
        child = node.get(section)
        if not isinstance(child, dict):
            child = node[section] = {}
        node = child
    try:
        value = json.loads(raw_value)
    except json.JSONDecodeError:
        value = raw_value.strip()
    node[leaf] = value
    return value


def run(args: Namespace) -> None:
    """Run the config command: show merged settings or set a value in the global config."""
    show = getattr(args, "show", False)
    set_key = getattr(args, "set_key", None)

    if not show and not set_key:
        print("Error: specify --show or --set KEY=VALUE.", file=sys.stderr)
        sys.exit(1)

    target_path = global_config_path()

    if set_key:
        if "=" not in set_key:
            print("Error: --set requires KEY=VALUE (e.g. hash.algorithm=MD5).", file=sys.stderr)
            sys.exit(1)
        key_str, _, value_str = set_key.partition("=")
        key_str = key_str.strip()
        if not key_str:
            print("Error: empty key in KEY=VALUE.", file=sys.stderr)
            sys.exit(1)
        existing = _load_json(target_path) or {}
        value = _apply_setting(existing, key_str, value_str)
        save_config(target_path, existing)
        print(f"Set {key_str} = {json.dumps(value)} in {target_path.as_posix()}.")

    if show:
        print(f"# Config: defaults + {target_path.as_posix()}")
        print(json.dumps(load_config(), indent=2))
