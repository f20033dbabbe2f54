# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import vledits


def test_pkg_exports():
    for name in vledits.__all__:
        assert getattr(vledits, name) is not None


def test_version_info():
    from vledits._version import __version__, version_info
    assert __version__.startswith("%d.%d" % (version_info.major, version_info.minor))
    assert version_info.releaselevel == "final"
