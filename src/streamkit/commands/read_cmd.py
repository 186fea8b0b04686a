"""Print a file decoded from a given encoding."""

from __future__ import annotations

import sys
from argparse import Namespace

from streamkit.config import load_config
from streamkit.text import read_encoded_text


def run(args: Namespace) -> None:
    encoding = getattr(args, "encoding", None) or (load_config().get("text") or {}).get("encoding")
    try:
        text = read_encoded_text(args.source, encoding)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    sys.stdout.write(text)
