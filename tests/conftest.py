# -*- coding: utf-8 -*-

import tempfile

import pytest


@pytest.fixture(autouse=True)
def systemp(tmpdir, monkeypatch):
    """Point the system temporary directory at a per test directory so trees
    created with ``new`` don't leak into the real one.
    """
    path = tmpdir.mkdir("systemp")
    monkeypatch.setattr(tempfile, "tempdir", str(path))
    return path


@pytest.fixture
def testpath(tmpdir):
    return tmpdir.mkdir("filetree")
