"""Whole-file read/write, basename and recursive file discovery."""

from .file_utils import (
    basename,
    find_files,
    iter_files,
    read_file_or_die,
    write_string_to_file_or_die,
)

__all__ = [
    "basename",
    "find_files",
    "iter_files",
    "read_file_or_die",
    "write_string_to_file_or_die",
]
