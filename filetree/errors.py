# -*- coding: utf-8 -*-
"""Error types for filetree."""

import errno
import os

import fs as pyfs


class FileTreeError(IOError):
    """Filesystem failure while creating a root or shard directory.

    Carries ``errno``, ``strerror`` and ``filename`` of the underlying
    operating system error when one is available.
    """


# pyfilesystem2 raises some errors without keeping the OS error around.
# Order matters, subclasses come before their bases.
ERRNO_MAP = (
    (pyfs.errors.DirectoryExpected, errno.ENOTDIR),
    (pyfs.errors.FileExpected, errno.EISDIR),
    (pyfs.errors.ResourceNotFound, errno.ENOENT),
    (pyfs.errors.PermissionDenied, errno.EACCES),
    (pyfs.errors.InsufficientStorage, errno.ENOSPC),
)


def _errno_for(error: pyfs.errors.FSError, path: str):
    cause = getattr(error, "exc", None)
    if isinstance(cause, OSError) and cause.errno is not None:
        return cause.errno

    for error_type, code in ERRNO_MAP:
        if isinstance(error, error_type):
            return code

    if isinstance(error, pyfs.errors.CreateFailed):
        # OSFS only fails this way when the root isn't a directory.
        return errno.ENOTDIR if os.path.exists(path) else errno.ENOENT

    return None


def as_io_error(error: pyfs.errors.FSError, path: str) -> FileTreeError:
    """Convert a pyfilesystem2 error into a :class:`FileTreeError`.

    The caller is expected to ``raise as_io_error(exc, path) from exc`` so
    the original error stays attached as ``__cause__``.
    """
    code = _errno_for(error, path)
    if code is not None:
        return FileTreeError(code, os.strerror(code), path)
    return FileTreeError("{0}: {1}".format(path, error))
