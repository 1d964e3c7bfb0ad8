# -*- coding: utf-8 -*-


"""
common utils for filetree
"""


import os
from typing import List

#: Number of digits in a leaf filename.
UID_WIDTH = 12

#: Number of shard directories between the root and a leaf file.
SHARD_DEPTH = 3

#: Characters per shard directory name. Bounds every directory to
#: ``10 ** SHARD_WIDTH`` entries.
SHARD_WIDTH = 3

MAX_COUNTER = 10 ** UID_WIDTH - 1


def compact(items):
    """Return only truthy elements of `items`."""
    return [item for item in items if item]


def issubdir(subpath, path):
    """Return whether `subpath` is a sub-directory of `path`."""
    # Append os.sep so that paths like /usr/var2/log doesn't match /usr/var.
    path = os.path.realpath(path) + os.sep
    subpath = os.path.realpath(subpath)
    return subpath.startswith(path)


def to_uid(counter: int) -> str:
    """Render `counter` as the zero padded leaf filename.

    Raises:
        ValueError: If `counter` is negative or does not fit in
            :data:`UID_WIDTH` digits.
    """
    if counter < 0 or counter > MAX_COUNTER:
        raise ValueError("Counter {0!r} is outside of [0, {1}]".format(
            counter, MAX_COUNTER))
    return "{0:0{1}d}".format(counter, UID_WIDTH)


def shard(uid: str,
          depth: int = SHARD_DEPTH,
          width: int = SHARD_WIDTH) -> List[str]:
    # This creates a list of `depth` number of tokens with width
    # `width` from the first part of the uid. Unlike a hash address the
    # leaf keeps the full uid, so the remainder is not part of the list.
    return compact([uid[i * width:width * (i + 1)] for i in range(depth)])


def uid_to_relpath(uid: str) -> str:
    """Build the path of the leaf file for `uid` relative to the tree root,
    using ``/`` separators.
    """
    return "/".join(shard(uid) + [uid])


def unshard(path: str) -> int:
    """Return the counter a leaf `path` was allocated from.

    `path` may be absolute or relative to the root and may use either ``/``
    or :data:`os.sep` separators. Only the leaf and its shard directories are
    inspected.

    Raises:
        ValueError: If `path` doesn't look like a leaf of a file tree.
    """
    parts = compact(path.replace(os.sep, "/").split("/"))
    if len(parts) < SHARD_DEPTH + 1:
        raise ValueError("Cannot unshard path {0!r}".format(path))

    uid = parts[-1]
    if len(uid) != UID_WIDTH or not uid.isdigit():
        raise ValueError("Cannot unshard path {0!r}. {1!r} is not a {2} digit "
                         "leaf name".format(path, uid, UID_WIDTH))

    if parts[-SHARD_DEPTH - 1:-1] != shard(uid):
        raise ValueError("Cannot unshard path {0!r}. Shard directories don't "
                         "match the leaf name".format(path))

    return int(uid)
