# -*- coding: utf-8 -*-
"""filetree creates directory structures suitable for storing large numbers of
files. Paths are handed out under a three level shard hierarchy so that no
directory ever holds more than 1,000 entries.

Typical use cases for this kind of system are ones where:

- A large number of files has to be kept on disk (e.g. blob stores, caches).
- File names don't matter, or are tracked by key elsewhere.
- Scratch storage should disappear once the process is done with it.
"""

from .__meta__ import (
    __title__,
    __summary__,
    __url__,
    __version__,
    __author__,
    __email__,
    __license__,
)

from .errors import FileTreeError
from .filetree import FileTree
from .keyed import KeyedFileTree
from .root import PersistentRoot, RootHandle, TemporaryRoot


__all__ = (
    "FileTree",
    "FileTreeError",
    "KeyedFileTree",
    "PersistentRoot",
    "RootHandle",
    "TemporaryRoot",
)
