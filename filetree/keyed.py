"""Module for KeyedFileTree class."""

import logging
from typing import Dict, List, Mapping, Optional, Union

from .filetree import FileTree
from .root import RootHandle
from .utils import issubdir

logger = logging.getLogger(__name__)


class KeyedFileTree(object):
    """File tree that hands out one slot per key.

    The first :meth:`get` for a key allocates a new slot from an internal
    :class:`FileTree`; later calls return the same path. The key to path
    mapping can be saved with :meth:`get_existing_files` and restored with
    :meth:`from_existing`.

    Attributes:
        tree (FileTree): Tree that slots are allocated from.
    """

    def __init__(self,
                 root: Union[FileTree, RootHandle, str],
                 existing: Optional[Mapping[str, str]] = None,
                 dmode: Optional[int] = 0o755):
        if isinstance(root, FileTree):
            self.tree = root
        else:
            self.tree = FileTree(root, dmode=dmode)
        self._files = dict(existing or {})

    @classmethod
    def new(cls, persistent: bool = False, dmode: Optional[int] = 0o755):
        """Create an empty keyed tree. See :meth:`FileTree.new`."""
        return cls(FileTree.new(persistent, dmode=dmode))

    @classmethod
    def new_in(cls,
               path: str,
               persistent: bool = False,
               dmode: Optional[int] = 0o755):
        """Create an empty keyed tree under `path`. See
        :meth:`FileTree.new_in`.
        """
        return cls(FileTree.new_in(path, persistent, dmode=dmode))

    @classmethod
    def from_existing(cls,
                      path: str,
                      existing: Mapping[str, str],
                      dmode: Optional[int] = 0o755):
        """Restore a keyed tree from its root and a mapping previously
        returned by :meth:`get_existing_files`.

        The mapping is trusted as is: files it refers to are not checked.
        New slots skip files that exist on disk, so they don't collide with
        restored paths whose files were created.

        Raises:
            IOError: If `path` doesn't exist.
        """
        keyed = cls(FileTree.from_existing(path, dmode=dmode), existing)

        root = keyed.get_root()
        for key, file_path in keyed._files.items():
            if not issubdir(file_path, root):
                logger.warning("Restored key %r points outside of %s: %s",
                               key, root, file_path)

        logger.debug("Restored %d keys in %s", len(keyed._files), root)
        return keyed

    def get(self, key: str) -> str:
        """Return the path for `key`, allocating a new slot the first time
        `key` is seen.

        Raises:
            IOError: If a new slot is needed and its directory can't be
                created.
        """
        path = self._files.get(key)
        if path is None:
            path = self.tree.get_new_file()
            self._files[key] = path
            logger.debug("Assigned %r to %s", key, path)
        return path

    def get_existing_files(self) -> Dict[str, str]:
        """Return a copy of the key to path mapping."""
        return dict(self._files)

    def get_root(self) -> str:
        """Return the root path of the tree."""
        return self.tree.get_root()

    def keys(self) -> List[str]:
        """Return the known keys in the order they were first seen."""
        return list(self._files)

    def close(self) -> None:
        """Release the root. Temporary roots are deleted."""
        self.tree.close()

    def __contains__(self, key: str) -> bool:
        return key in self._files

    def __len__(self) -> int:
        return len(self._files)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __repr__(self):
        return "{0}({1!r}, keys={2})".format(self.__class__.__name__,
                                             self.tree.root, len(self._files))
