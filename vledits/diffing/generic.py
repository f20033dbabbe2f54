# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import MappingDiffBuilder, validate_diff

from .config import DiffConfig

__all__ = ["diff"]


def diff(a, b, path="", config=None):
    "Compute the diff of two json-like dicts."

    if config is None:
        config = DiffConfig()

    if isinstance(a, dict) and isinstance(b, dict):
        d = diff_dicts(a, b, path=path, config=config)
    else:
        raise RuntimeError("Can currently only diff dict objects, got %s and %s." % (
            type(a).__name__, type(b).__name__))

    validate_diff(d)

    return d


def diff_dicts(a, b, path="", config=None):
    """Compute diff of two dicts with configurable behaviour.

    Keys only in a are removed, keys only in b are added.
    Values for keys in both a and b are recursed into if they are
    both dicts and not configured as atomic, otherwise they are
    replaced when they compare unequal.
    """
    if config is None:
        config = DiffConfig()

    if not isinstance(a, dict) or not isinstance(b, dict):
        raise TypeError('Arguments to diff_dicts need to be dicts, got %r and %r' % (a, b))
    akeys = set(a.keys())
    bkeys = set(b.keys())

    di = MappingDiffBuilder()

    # Sorting keys in loops to get a deterministic diff result
    for key in sorted(akeys - bkeys):
        di.remove(key)

    for key in sorted(akeys & bkeys):
        avalue = a[key]
        bvalue = b[key]
        subpath = "/".join((path, key))
        if type(avalue) is type(bvalue) and not config.is_atomic(avalue, path=subpath):
            dd = diff_dicts(avalue, bvalue, path=subpath, config=config)
            if dd:
                di.patch(key, dd)
        elif avalue != bvalue:
            di.replace(key, bvalue)

    for key in sorted(bkeys - akeys):
        di.add(key, b[key])

    return di.validated()
