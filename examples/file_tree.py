"""Allocate two slots from a temporary file tree."""

import os

from filetree import FileTree


def main():
    with FileTree.new() as tree:
        first = tree.get_new_file()
        assert first == os.path.join(tree.get_root(), "000", "000", "000",
                                     "000000000000")

        second = tree.get_new_file()
        assert second == os.path.join(tree.get_root(), "000", "000", "000",
                                      "000000000001")
        print(first)
        print(second)


if __name__ == "__main__":
    main()
