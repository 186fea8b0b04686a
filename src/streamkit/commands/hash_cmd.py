"""Print digests of files."""

from __future__ import annotations

import sys
from argparse import Namespace

from streamkit.config import load_config
from streamkit.hashing import file_hash, resolve_algorithm


def run(args: Namespace) -> None:
    """Run the hash command: one "DIGEST  path" line per file, in argument order."""
    algorithm = getattr(args, "algorithm", None) or (load_config().get("hash") or {}).get("algorithm")
    try:
        resolve_algorithm(algorithm)
        for path in args.paths:
            print(f"{file_hash(path, algorithm)}  {path}")
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
