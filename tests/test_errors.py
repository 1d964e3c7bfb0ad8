# -*- coding: utf-8 -*-

import errno
import os

import fs as pyfs
import pytest

from filetree.errors import FileTreeError, as_io_error


@pytest.mark.parametrize(
    "error,code",
    [
        (pyfs.errors.DirectoryExpected("a"), errno.ENOTDIR),
        (pyfs.errors.FileExpected("a"), errno.EISDIR),
        (pyfs.errors.ResourceNotFound("a"), errno.ENOENT),
        (pyfs.errors.PermissionDenied("a"), errno.EACCES),
        (pyfs.errors.InsufficientStorage("a"), errno.ENOSPC),
    ],
)
def test_as_io_error_errno(error, code):
    result = as_io_error(error, "/root/a")

    assert isinstance(result, IOError)
    assert result.errno == code
    assert result.strerror == os.strerror(code)
    assert result.filename == "/root/a"


def test_as_io_error_keeps_os_errno():
    cause = OSError(errno.ENAMETOOLONG, "File name too long")
    error = pyfs.errors.OperationFailed("a", exc=cause)

    assert as_io_error(error, "/root/a").errno == errno.ENAMETOOLONG


def test_as_io_error_create_failed(testpath):
    missing = str(testpath.join("missing"))
    error = pyfs.errors.CreateFailed("root path does not exist")

    assert as_io_error(error, missing).errno == errno.ENOENT


def test_as_io_error_unknown():
    result = as_io_error(pyfs.errors.FSError("boom"), "/root/a")

    assert isinstance(result, FileTreeError)
    assert result.errno is None
    assert "boom" in str(result)
