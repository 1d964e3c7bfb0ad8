# -*- coding: utf-8 -*-
"""Define project metadata
"""

__title__ = "filetree"
__summary__ = "Sharded directory trees for storing large numbers of files."
__url__ = ""

__version__ = "0.2.0"

# fs still imports pkg_resources, which newer setuptools releases drop.
__install_requires__ = ["fs>=2.4.16", "setuptools<81"]
__tests_require__ = ["pytest", "tox"]

__author__ = "Filetree Contributors"
__email__ = "filetree@users.noreply.github.com"

__license__ = "MIT License"
