"""Command-line front end for the file helpers."""

import argparse
import os
import sys
from typing import List, Optional

from .file import (
    basename,
    find_files,
    read_file_or_die,
    write_string_to_file_or_die,
)
from .utils.config import load_config
from .utils.logging import setup_logging

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _write_lines(lines):
    out = sys.stdout.buffer
    for line in lines:
        out.write(os.fsencode(line) + b"\n")
    out.flush()


def cmd_cat(args, config):
    out = sys.stdout.buffer
    out.write(read_file_or_die(args.path))
    out.flush()


def cmd_write(args, config):
    atomic = args.atomic or config.file_ops.atomic_writes
    write_string_to_file_or_die(sys.stdin.buffer.read(), args.path, atomic=atomic)


def cmd_basename(args, config):
    _write_lines(basename(p) for p in args.paths)


def cmd_find(args, config):
    files = []
    for directory in args.directories:
        find_files(directory, files)
    if args.sort:
        files.sort()
    _write_lines(files)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fileutils",
        description="Read, write and find files, exiting on any I/O error"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to config file"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Override logging level"
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Directory for JSON log files"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    cat = subparsers.add_parser("cat", help="Print a file's contents")
    cat.add_argument("path")
    cat.set_defaults(func=cmd_cat)

    write = subparsers.add_parser("write", help="Write stdin to a file")
    write.add_argument("path")
    write.add_argument(
        "--atomic",
        action="store_true",
        help="Replace the file via a temporary file and rename"
    )
    write.set_defaults(func=cmd_write)

    base = subparsers.add_parser("basename", help="Print the final path component")
    base.add_argument("paths", nargs="+")
    base.set_defaults(func=cmd_basename)

    find = subparsers.add_parser("find", help="List regular files recursively")
    find.add_argument("directories", nargs="+")
    find.add_argument(
        "--sort",
        action="store_true",
        help="Sort the combined output"
    )
    find.set_defaults(func=cmd_find)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    log_dir = args.log_dir or config.logs_path
    setup_logging(
        log_dir=log_dir,
        level=args.log_level or config.logging.level,
        console=config.logging.console,
        json_file=config.logging.json_file
    )

    args.func(args, config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
