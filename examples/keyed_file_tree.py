"""Allocate slots by key from a temporary keyed file tree."""

from filetree import KeyedFileTree


def main():
    with KeyedFileTree.new() as tree:
        first = tree.get("key1")
        second = tree.get("key2")

        assert first != second
        assert tree.get("key1") == first
        print(tree.get_existing_files())


if __name__ == "__main__":
    main()
