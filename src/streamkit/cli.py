"""CLI entry point: argument parsing and subcommand dispatch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from streamkit import __version__
from streamkit.compression import DecompressionMethod
from streamkit.config import COPY_MODES, load_config


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure the streamkit logger: level from --verbose/--quiet or config, console
    handler, optional file handler from config.
    """
    config = load_config()
    log_cfg = config.get("logging") or {}
    if verbose:
        level_name = "DEBUG"
    elif quiet:
        level_name = "ERROR"
    else:
        level_name = (log_cfg.get("level") or "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    root = logging.getLogger("streamkit")
    root.setLevel(level)
    if not root.handlers:
        fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(fmt)
        root.addHandler(console)
        log_file = log_cfg.get("file")
        if log_file:
            try:
                fh = logging.FileHandler(Path(log_file).expanduser(), encoding="utf-8")
            except OSError as e:
                root.warning("Cannot open log file %s: %s", log_file, e)
            else:
                fh.setFormatter(fmt)
                root.addHandler(fh)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="streamkit",
        description="File copy, encoded text, decompression and hashing utilities.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    log_group = parser.add_mutually_exclusive_group()
    log_group.add_argument("-v", "--verbose", action="store_true", help="Verbose (DEBUG) output.")
    log_group.add_argument("-q", "--quiet", action="store_true", help="Quiet (errors only).")

    # Same flags on subparsers so "streamkit copy a b -v" works. SUPPRESS defaults keep the
    # subparser from resetting a flag already given before the subcommand.
    global_flags = argparse.ArgumentParser(add_help=False)
    global_flags.add_argument(
        "-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="Verbose (DEBUG) output."
    )
    global_flags.add_argument(
        "-q", "--quiet", action="store_true", default=argparse.SUPPRESS, help="Quiet (errors only)."
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    # copy
    p_copy = subparsers.add_parser("copy", help="Copy a file.", parents=[global_flags])
    p_copy.add_argument("source", help="Source file.")
    p_copy.add_argument("destination", help="Destination file (created or overwritten).")
    p_copy.add_argument("--mode", choices=COPY_MODES, help="Copy strategy (default from config: copy.mode).")
    p_copy.add_argument("--buffer-size", type=int, help="Write buffer size for --mode buffered.")
    p_copy.add_argument("--encoding", help="Text encoding for --mode line.")
    p_copy.set_defaults(run="copy")

    # read
    p_read = subparsers.add_parser("read", help="Print a file decoded from the given encoding.", parents=[global_flags])
    p_read.add_argument("source", help="Source file.")
    p_read.add_argument("--encoding", "-e", help="Source encoding (e.g. cp1251, koi8-r, utf-16).")
    p_read.set_defaults(run="read")

    # decompress
    p_decompress = subparsers.add_parser("decompress", help="Decompress a file.", parents=[global_flags])
    p_decompress.add_argument("source", help="Compressed file.")
    p_decompress.add_argument(
        "--method",
        choices=[m.value for m in DecompressionMethod],
        help="Compression method (default from config: compression.method).",
    )
    p_decompress.add_argument("--output", "-o", type=Path, help="Output file (default: stdout).")
    p_decompress.set_defaults(run="decompress")

    # hash
    p_hash = subparsers.add_parser("hash", help="Print digests of files.", parents=[global_flags])
    p_hash.add_argument("paths", nargs="+", help="Files to hash.")
    p_hash.add_argument("--algorithm", "-a", help="Digest algorithm (e.g. MD5, SHA1, SHA256).")
    p_hash.set_defaults(run="hash")

    # config
    p_config = subparsers.add_parser("config", help="Show or edit configuration.", parents=[global_flags])
    p_config.add_argument("--show", action="store_true", help="Display current settings.")
    p_config.add_argument("--set", dest="set_key", metavar="KEY=VALUE", help="Set a configuration value.")
    p_config.set_defaults(run="config")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=getattr(args, "verbose", False),
        quiet=getattr(args, "quiet", False),
    )
    run = getattr(args, "run", None)

    if run == "copy":
        from streamkit.commands.copy_cmd import run as cmd_run
    elif run == "read":
        from streamkit.commands.read_cmd import run as cmd_run
    elif run == "decompress":
        from streamkit.commands.decompress_cmd import run as cmd_run
    elif run == "hash":
        from streamkit.commands.hash_cmd import run as cmd_run
    elif run == "config":
        from streamkit.commands.config_cmd import run as cmd_run
    else:
        parser.print_help()
        sys.exit(0)

    cmd_run(args)


if __name__ == "__main__":
    main()
