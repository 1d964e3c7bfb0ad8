"""Module for FileTree class."""

import logging
from typing import Iterable, Optional, Union

import fs as pyfs
from fs.permissions import Permissions

from . import utils as u
from .errors import as_io_error
from .root import (PersistentRoot, RootHandle, TemporaryRoot, load_root,
                   unique_persistent_path)

logger = logging.getLogger(__name__)


class FileTree(object):
    """Directory structure suitable for storing large numbers of files.

    Slots for new files are handed out by :meth:`get_new_file`. Subdirectories
    are created as needed so that no directory holds more than 1,000 entries.
    The tree never creates the files themselves.

    Trees rooted in a :class:`TemporaryRoot` delete the root and everything in
    it on :meth:`close`, so use the tree as a context manager or close it
    explicitly.

    Attributes:
        root (RootHandle): Handle of the root directory.
        dmode (int, optional): Directory mode permission to set for
            subdirectories. Defaults to ``0o755`` which allows owner/group to
            read/write and everyone else to read and everyone to execute.
    """

    def __init__(self,
                 root: Union[RootHandle, str],
                 dmode: Optional[int] = 0o755):
        self.root = load_root(root)
        self.fs = self.root.fs
        self.dmode = dmode
        self._counter = 0

    @classmethod
    def new(cls, persistent: bool = False, dmode: Optional[int] = 0o755):
        """Create a tree in the system temporary directory.

        If `persistent` is ``False`` the root is a new temporary directory
        that is deleted on :meth:`close`. Otherwise the root is a new,
        uniquely named directory that is kept.

        Raises:
            IOError: If the root directory can't be created.
        """
        if persistent:
            return cls(PersistentRoot(unique_persistent_path()), dmode=dmode)
        return cls(TemporaryRoot(), dmode=dmode)

    @classmethod
    def new_in(cls,
               path: str,
               persistent: bool = False,
               dmode: Optional[int] = 0o755):
        """Create a tree under `path`.

        If `persistent` is ``False`` the root is a new temporary directory
        inside `path` that is deleted on :meth:`close`. Otherwise `path` itself
        is the root and is kept.

        Raises:
            IOError: If the root directory can't be created.
        """
        if persistent:
            return cls(PersistentRoot(path), dmode=dmode)
        return cls(TemporaryRoot(temp_dir=path), dmode=dmode)

    @classmethod
    def from_existing(cls, path: str, dmode: Optional[int] = 0o755):
        """Resume allocating in a tree built by an earlier instance.

        The counter starts from ``0`` again; slots whose files already exist
        are skipped by :meth:`get_new_file`.

        Raises:
            IOError: If `path` doesn't exist.
        """
        return cls(PersistentRoot(path, create=False), dmode=dmode)

    @property
    def counter(self) -> int:
        """Counter value the next allocation starts from."""
        return self._counter

    @property
    def persistent(self) -> bool:
        return self.root.persistent

    def get_new_file(self) -> str:
        """Return the absolute path of an unused slot in the tree. The parent
        directories of the path exist, the file itself is not created.

        Returns:
            str: Path that did not exist when this method returned.

        Raises:
            IOError: If a shard directory can't be created.
        """
        while True:
            uid = u.to_uid(self._counter)
            self._counter += 1
            relpath = u.uid_to_relpath(uid)

            self._makedirs(pyfs.path.dirname(relpath))

            if not self.fs.exists(relpath):
                break

            logger.debug("Skipping %s, it already exists", relpath)

        path = self.fs.getsyspath(relpath)
        logger.debug("Allocated %s", path)
        return path

    def get_root(self) -> str:
        """Return the root path of the tree."""
        return self.root.path

    def files(self) -> Iterable[str]:
        """Return generator that yields the absolute paths of all leaf files
        in the tree ordered by their counter. Anything that isn't laid out
        like a leaf is ignored.
        """
        leaves = []
        for path in self.fs.walk.files():
            try:
                leaves.append((u.unshard(path), path))
            except ValueError:
                continue

        for _, path in sorted(leaves):
            yield self.fs.getsyspath(path)

    def close(self) -> None:
        """Release the root. Temporary roots are deleted."""
        self.root.close()

    def _makedirs(self, dir_path: str) -> None:
        """Physically create the folder path on disk."""
        try:
            # this is creating a directory, so we use dmode here.
            perms = Permissions.create(self.dmode)
            self.fs.makedirs(dir_path, permissions=perms, recreate=True)

        except pyfs.errors.FSError as exc:
            raise as_io_error(exc, self.fs.getsyspath(dir_path)) from exc

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __repr__(self):
        return "{0}({1!r}, counter={2})".format(self.__class__.__name__,
                                                self.root, self._counter)
