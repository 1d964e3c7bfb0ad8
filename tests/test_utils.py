# -*- coding: utf-8 -*-

import os

import pytest

from filetree import utils as u


@pytest.mark.parametrize(
    "counter,expected",
    [
        (0, "000000000000"),
        (1, "000000000001"),
        (1000, "000000001000"),
        (123456789012, "123456789012"),
        (u.MAX_COUNTER, "999999999999"),
    ],
)
def test_to_uid(counter, expected):
    assert u.to_uid(counter) == expected


@pytest.mark.parametrize("counter", [-1, u.MAX_COUNTER + 1])
def test_to_uid_out_of_range(counter):
    with pytest.raises(ValueError):
        u.to_uid(counter)


@pytest.mark.parametrize(
    "uid,expected",
    [
        ("000000000000", ["000", "000", "000"]),
        ("000000001000", ["000", "000", "001"]),
        ("123456789012", ["123", "456", "789"]),
    ],
)
def test_shard(uid, expected):
    assert u.shard(uid) == expected


def test_shard_depth_width():
    assert u.shard("0123456789", depth=2, width=2) == ["01", "23"]


@pytest.mark.parametrize(
    "uid,expected",
    [
        ("000000000000", "000/000/000/000000000000"),
        ("000000001000", "000/000/001/000000001000"),
        ("999999999999", "999/999/999/999999999999"),
    ],
)
def test_uid_to_relpath(uid, expected):
    assert u.uid_to_relpath(uid) == expected


@pytest.mark.parametrize("counter", [0, 7, 999, 1000, 1001, 999999, 10 ** 9])
def test_unshard(counter):
    relpath = u.uid_to_relpath(u.to_uid(counter))
    assert u.unshard(relpath) == counter
    assert u.unshard(os.path.join(os.sep, "root", *relpath.split("/"))) == \
        counter


@pytest.mark.parametrize(
    "path",
    [
        "000000000000",
        "000/000/000000000000",
        "000/000/000/abc",
        "000/000/000/00000000000",
        "000/000/001/000000000000",
    ],
)
def test_unshard_error(path):
    with pytest.raises(ValueError):
        u.unshard(path)


def test_issubdir(testpath):
    sub = testpath.mkdir("sub")
    sibling = str(testpath) + "2"

    assert u.issubdir(str(sub), str(testpath))
    assert not u.issubdir(sibling, str(testpath))
    assert not u.issubdir(str(testpath), str(sub))


def test_compact():
    assert u.compact(["a", "", None, "b"]) == ["a", "b"]
