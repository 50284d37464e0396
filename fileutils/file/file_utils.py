"""Utility functions for dealing with files.

Every I/O helper here terminates the process on failure (see
:func:`fileutils.utils.errors.die`). Only ``basename`` is pure.
"""

import os
import stat
import uuid
from typing import Iterator, List, Optional, Union

from ..utils.errors import die
from ..utils.logging import get_logger

PathType = Union[str, bytes, os.PathLike]

logger = get_logger(__name__)


def read_file_or_die(path: PathType) -> bytes:
    """Return the contents of the file at the given path, crashing on failure."""
    path = os.fspath(path)
    try:
        with open(path, 'rb') as f:
            data = f.read()
    except OSError as e:
        die("read", path, e)

    logger.log_io("read", path, len(data))
    return data


def write_string_to_file_or_die(
    data: Union[bytes, bytearray, memoryview, str],
    path: PathType,
    atomic: bool = False
) -> None:
    """Write the supplied data to the given path, crashing on failure.

    An existing file is truncated and replaced; missing parent directories
    are a failure. ``str`` data is encoded as UTF-8.

    Args:
        data: Bytes to write
        path: Destination path
        atomic: Write to a temporary file next to ``path`` and rename it into
            place, so readers see either the old or the new contents
            (a symlink at ``path`` is followed; the link itself is kept)
    """
    path = os.fspath(path)
    if isinstance(data, str):
        data = data.encode('utf-8')

    if atomic:
        _write_atomically(data, path)
    else:
        try:
            with open(path, 'wb') as f:
                f.write(data)
        except OSError as e:
            die("write", path, e)

    logger.log_io("write", path, len(data))


def _write_atomically(data: bytes, path: PathType) -> None:
    target = os.path.realpath(path)
    directory, name = os.path.split(target)
    if isinstance(target, bytes):
        tmp_path = os.path.join(directory, b'.' + name + b'.' + uuid.uuid4().hex.encode())
    else:
        tmp_path = os.path.join(directory, f'.{name}.{uuid.uuid4().hex}')

    try:
        existing_mode = stat.S_IMODE(os.stat(target).st_mode)
    except FileNotFoundError:
        existing_mode = None
    except OSError as e:
        die("write", path, e)

    # O_EXCL with 0o666 lets the kernel apply the umask, as open() would.
    try:
        fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o666)
    except OSError as e:
        die("write", path, e)

    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        if existing_mode is not None:
            os.chmod(tmp_path, existing_mode)
        os.replace(tmp_path, target)
    except OSError as e:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass
        die("write", path, e)


def basename(path: PathType) -> Union[str, bytes]:
    """Strip an optional directory name from the supplied path, returning only
    the file name.

    Purely lexical: everything after the last ``/``. A path ending in ``/``
    yields an empty name.
    """
    path = os.fspath(path)
    sep = b'/' if isinstance(path, bytes) else '/'
    return path.rpartition(sep)[2]


def iter_files(directory: PathType) -> Iterator[Union[str, bytes]]:
    """Yield every regular file beneath ``directory``, crashing on failure.

    Pre-order in ``os.scandir`` order: a subdirectory is walked completely
    when its entry is reached. Symbolic links, devices, sockets and FIFOs are
    skipped, and links are never followed.
    """
    directory = os.fspath(directory)
    sep = b'/' if isinstance(directory, bytes) else '/'

    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                path = directory + sep + entry.name
                if entry.is_file(follow_symlinks=False):
                    yield path
                elif entry.is_dir(follow_symlinks=False):
                    yield from iter_files(path)
    except OSError as e:
        die("find", directory, e)


def find_files(directory: PathType, files: Optional[List] = None) -> List:
    """Recursively find all regular files in the supplied directory.

    Paths are appended to ``files`` (a new list when omitted), keeping
    whatever it already holds, and the list is returned.
    """
    if files is None:
        files = []

    before = len(files)
    files.extend(iter_files(directory))
    logger.log_io("find", os.fspath(directory), len(files) - before)
    return files
