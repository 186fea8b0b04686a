"""Copy a file with one of the copy strategies."""

from __future__ import annotations

import sys
from argparse import Namespace

from streamkit.config import load_config
from streamkit.copying import (
    DEFAULT_BUFFER_SIZE,
    block_copy,
    buffered_block_copy,
    byte_copy,
    line_copy,
)


def run(args: Namespace) -> None:
    """Run the copy command; --mode, --buffer-size and --encoding fall back to config."""
    config = load_config()
    copy_cfg = config.get("copy") or {}
    mode = getattr(args, "mode", None) or copy_cfg.get("mode") or "block"
    buffer_size = getattr(args, "buffer_size", None)
    if buffer_size is None:
        buffer_size = copy_cfg.get("buffer_size") or DEFAULT_BUFFER_SIZE
    encoding = getattr(args, "encoding", None) or (config.get("text") or {}).get("encoding") or "utf-8"

    try:
        if mode == "byte":
            count = byte_copy(args.source, args.destination)
        elif mode == "block":
            count = block_copy(args.source, args.destination)
        elif mode == "buffered":
            count = buffered_block_copy(args.source, args.destination, buffer_size=buffer_size)
        elif mode == "line":
            count = line_copy(args.source, args.destination, encoding=encoding)
        else:
            print(f"Error: unknown copy mode {mode!r}.", file=sys.stderr)
            sys.exit(1)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    unit = "line" if mode == "line" else "byte"
    print(f"Copied {count} {unit}{'' if count == 1 else 's'}.")
