"""Decompress a file to another file or stdout."""

from __future__ import annotations

import logging
import shutil
import sys
import zlib
from argparse import Namespace

from streamkit.compression import decompress_stream
from streamkit.config import load_config

logger = logging.getLogger(__name__)


def run(args: Namespace) -> None:
    """Run the decompress command: stream the decompressed bytes to --output or stdout."""
    method = getattr(args, "method", None) or (load_config().get("compression") or {}).get("method") or "none"
    output = getattr(args, "output", None)

    try:
        with decompress_stream(args.source, method) as stream:
            if output is not None:
                with open(output, "wb") as out:
                    shutil.copyfileobj(stream, out)
                logger.info("Decompressed %s to %s", args.source, output)
            else:
                shutil.copyfileobj(stream, sys.stdout.buffer)
                sys.stdout.buffer.flush()
    except (ValueError, OSError, EOFError, zlib.error) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
