# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from .diff_format import DiffOp, VLDiffFormatError


__all__ = ["patch"]


def patch_dict(obj, diff):
    """Apply a mapping diff to the dict obj, returning a new dict.

    Raises VLDiffFormatError when an entry does not fit obj, like
    adding an existing key or touching a key twice.
    """
    newobj = {}
    touched = set()

    for e in diff:
        op, key = e.op, e.key
        if not isinstance(key, str):
            raise VLDiffFormatError("Dict keys must be strings, got {!r}.".format(key))
        if key in touched:
            raise VLDiffFormatError("Multiple diff entries for key {!r}.".format(key))
        touched.add(key)

        if op == DiffOp.ADD:
            if key in obj:
                raise VLDiffFormatError("Cannot add existing key {!r}.".format(key))
            newobj[key] = copy.deepcopy(e.value)
        elif op == DiffOp.REMOVE:
            pass
        elif key not in obj:
            raise VLDiffFormatError("Cannot {} missing key {!r}.".format(op, key))
        elif op == DiffOp.REPLACE:
            newobj[key] = copy.deepcopy(e.value)
        elif op == DiffOp.PATCH:
            newobj[key] = patch(obj[key], e.diff)
        else:
            raise VLDiffFormatError("Invalid op {}.".format(op))

    # Keys not mentioned in the diff are kept
    for key in obj:
        if key not in touched:
            newobj[key] = copy.deepcopy(obj[key])

    return newobj


def patch(obj, diff):
    """Produce a patched version of obj with given hierarchical diff.

    A valid input object is any dict with string keys, holding leaf
    values or arbitrarily nested dicts. The input is never modified,
    values are copied into the result.
    """
    if isinstance(obj, dict):
        return patch_dict(obj, diff)
    else:
        raise ValueError("Invalid object type to patch: {}".format(type(obj).__name__))
