# -*- coding: utf-8 -*-
"""Root directories for file trees.

A :class:`RootHandle` is either a :class:`TemporaryRoot`, which owns a fresh
temporary directory and removes it when closed, or a :class:`PersistentRoot`,
which points at a caller managed directory that is never removed.
"""

import logging
import os
import tempfile
import uuid
from typing import Optional, Union

import fs as pyfs
from fs.osfs import OSFS
from fs.tempfs import TempFS

from .errors import as_io_error

logger = logging.getLogger(__name__)

#: Tag appended to the names of temporary roots.
TEMP_IDENTIFIER = "file_tree"


class RootHandle(object):
    """Base class for the two kinds of root.

    Attributes:
        fs: The pyfilesystem2 filesystem rooted at :attr:`path`.
        path (str): Absolute system path of the root directory.
    """

    persistent = False

    def __init__(self, filesystem: pyfs.base.FS):
        self.fs = filesystem
        self._path = os.path.normpath(filesystem.getsyspath("/"))

    @property
    def path(self) -> str:
        return self._path

    @property
    def closed(self) -> bool:
        return self.fs.isclosed()

    def close(self) -> None:
        """Release the underlying filesystem."""
        self.fs.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __repr__(self):
        return "{0}({1!r})".format(self.__class__.__name__, self.path)


class TemporaryRoot(RootHandle):
    """Root backed by a new temporary directory which is deleted, with all
    of its contents, on :meth:`close`.

    Args:
        temp_dir (str, optional): Directory to create the root in. Defaults to
            the system temporary directory.
        identifier (str, optional): Tag appended to the directory name.
            TempFS passes it to ``mkdtemp`` as the suffix, so names look
            like ``tmpXXXXXXXXfile_tree``.

    Raises:
        IOError: If the temporary directory can't be created.
    """

    def __init__(self,
                 temp_dir: Optional[str] = None,
                 identifier: str = TEMP_IDENTIFIER):
        # TempFS calls mkdtemp directly so OS errors propagate unchanged.
        # Cleaning happens in close() only, never from FS.__del__.
        super(TemporaryRoot, self).__init__(
            TempFS(identifier=identifier,
                   temp_dir=temp_dir,
                   auto_clean=False,
                   ignore_clean_errors=False))
        logger.debug("Created temporary root %s", self.path)

    def close(self) -> None:
        """Delete the root directory and everything below it. A root that
        was already removed by someone else counts as deleted.

        Raises:
            IOError: If the directory can't be removed.
        """
        if self.closed:
            return

        if os.path.isdir(self.path):
            logger.debug("Removing temporary root %s", self.path)
            try:
                self.fs.clean()
            except pyfs.errors.OperationFailed as exc:
                raise as_io_error(exc, self.path) from exc
        else:
            logger.debug("Temporary root %s is already gone", self.path)

        self.fs.close()


class PersistentRoot(RootHandle):
    """Root backed by a caller supplied directory. Nothing under it is
    removed by this package.

    Args:
        path (str): Root directory.
        create (bool, optional): Create `path` if it doesn't exist. Defaults
            to ``True``.

    Raises:
        IOError: If `path` doesn't exist and `create` is ``False``, or if it
            can't be created.
    """

    persistent = True

    def __init__(self, path: str, create: bool = True):
        try:
            filesystem = OSFS(path, create=create)
        except pyfs.errors.CreateFailed as exc:
            raise as_io_error(exc, path) from exc

        super(PersistentRoot, self).__init__(filesystem)
        logger.debug("Opened persistent root %s", self.path)


def unique_persistent_path(base: Optional[str] = None) -> str:
    """Return a new directory path under `base`, or the system temporary
    directory, that no other tree has been given.
    """
    base = base or tempfile.gettempdir()
    return os.path.join(base, "{0}-{1}".format(TEMP_IDENTIFIER,
                                               uuid.uuid4().hex))


def load_root(root: Union[RootHandle, str]) -> RootHandle:
    """Return a :class:`RootHandle` for `root`. Handles are returned as is and
    plain paths become a :class:`PersistentRoot`.
    """
    if isinstance(root, RootHandle):
        return root
    return PersistentRoot(root)
