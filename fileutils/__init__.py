"""fileutils - crash-on-failure filesystem helpers."""

__version__ = "0.1.0"

from .file import (
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
