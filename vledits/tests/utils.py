# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from vledits import patch, diff
from vledits.diff_format import validate_diff


def check_diff_and_patch(a, b):
    "Check that patch(a, diff(a,b)) reproduces b."
    d = diff(a, b)
    validate_diff(d, deep=True)
    assert patch(a, d) == b


def check_symmetric_diff_and_patch(a, b):
    "Check that patch(a, diff(a,b)) reproduces b and vice versa."
    check_diff_and_patch(a, b)
    check_diff_and_patch(b, a)


def assert_unchanged(func, *args, **kwargs):
    """Call func with args and check that none of the args were modified.

    Returns the result of the call.
    """
    before = copy.deepcopy(args)
    result = func(*args, **kwargs)
    assert args == before
    return result
