"""
Path Validation
===============

Checks run on the image path before any bytes are read.

    - validate_filetype: extension allow-list, case-insensitive
    - validate_filepath: path is non-empty and names an existing regular file
"""

import logging
import os
import stat
from typing import Iterable

from pixel_probe.errors import (
    EmptyPathError,
    IsDirectoryError,
    NotFoundError,
    UnsupportedTypeError,
)


logger = logging.getLogger(__name__)


DEFAULT_EXTENSIONS = (".jpg", ".jpeg", ".png")


def file_extension(path: str) -> str:
    """
    Return the suffix from the last dot of the file name, dot included.

    Unlike os.path.splitext, a name that is only an extension still has
    one: ".png" -> ".png". A name without a dot gives "".
    """
    name = os.path.basename(path)
    i = name.rfind(".")
    return name[i:] if i >= 0 else ""


def validate_filetype(path: str, allowed_extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> None:
    """
    Check that the path's extension is one of the allowed extensions.

    Only the final suffix is considered ("a.tar.png" -> ".png"). The case of
    both the path and the allow-list entries is ignored.

    Args:
        path: File path to check
        allowed_extensions: Extensions including the leading dot

    Raises:
        UnsupportedTypeError: If the extension is not allowed
    """
    allowed = tuple(allowed_extensions)
    ext = file_extension(path)

    if ext.casefold() in {e.casefold() for e in allowed}:
        return

    logger.debug(f"Rejected extension {ext!r} for {path}")
    raise UnsupportedTypeError(ext, allowed)


def validate_filepath(path: str) -> None:
    """
    Check that the path names an existing file.

    Args:
        path: File path to check

    Raises:
        EmptyPathError: If path is empty
        NotFoundError: If the path does not exist, cannot be stat'ed,
            or is not a regular file
        IsDirectoryError: If the path is a directory
    """
    if not path:
        raise EmptyPathError()

    try:
        st = os.stat(path)
    except OSError as e:
        # missing, permission denied, broken symlink, etc.
        raise NotFoundError(path, e.strerror or str(e)) from e

    if stat.S_ISDIR(st.st_mode):
        raise IsDirectoryError(path)
    if not stat.S_ISREG(st.st_mode):
        raise NotFoundError(path, "not a regular file")

    logger.debug(f"Validated {path} ({st.st_size} bytes)")
