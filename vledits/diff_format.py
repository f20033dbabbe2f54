# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import VLDiffFormatError


class DiffEntry(dict):
    """Minimal class providing attribute access to diff entry keys.

    Entries stay plain dicts so they can be dumped to json as is.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


class DiffOp:
    "Collection of valid values for the action field in diff entries."
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    PATCH = "patch"


def op_add(key, value):
    "Create a diff entry to add value at key."
    return DiffEntry(op=DiffOp.ADD, key=key, value=value)

def op_remove(key):
    "Create a diff entry to remove value at key."
    return DiffEntry(op=DiffOp.REMOVE, key=key)

def op_replace(key, value):
    "Create a diff entry to replace value at key with given value."
    return DiffEntry(op=DiffOp.REPLACE, key=key, value=value)

def op_patch(key, diff):
    "Create a diff entry to patch value at key with diff."
    assert diff is not None, "Patch op needs a diff sequence"
    return DiffEntry(op=DiffOp.PATCH, key=key, diff=diff)


class MappingDiffBuilder(object):

    # Valid values for the action field in mapping diff entries
    OPS = (
        DiffOp.ADD,
        DiffOp.REMOVE,
        DiffOp.REPLACE,
        DiffOp.PATCH,
        )

    def __init__(self):
        self._diff = {}

    def validated(self):
        return sorted(self._diff.values(), key=lambda x: x.key)

    def append(self, entry):
        # Simplifies some algorithms
        if entry is None:
            return

        # Typechecking (just for internal consistency checking)
        assert isinstance(entry, DiffEntry)
        assert "op" in entry
        assert entry.op in MappingDiffBuilder.OPS
        assert "key" in entry
        assert entry.key not in self._diff

        self._diff[entry.key] = entry

    def add(self, key, value):
        self.append(op_add(key, value))

    def remove(self, key):
        self.append(op_remove(key))

    def replace(self, key, value):
        self.append(op_replace(key, value))

    def patch(self, key, diff):
        if diff:
            self.append(op_patch(key, diff))


def validate_diff(diff, deep=False):
    """Check whether a diff (list of diff entries) is well formed.

    Raises a VLDiffFormatError if not well formed.
    """
    if not isinstance(diff, list):
        raise VLDiffFormatError("Diff must be a list.")
    for e in diff:
        validate_diff_entry(e, deep=deep)


def validate_diff_entry(e, deep=False):
    """Check that e is a well formed diff entry.

    Raises a VLDiffFormatError if not well formed.
    """
    if not isinstance(e, DiffEntry):
        raise VLDiffFormatError("Diff entry '{}' is not a diff type.".format(e))

    op = e.get("op")
    key = e.get("key")
    if not isinstance(key, str):
        msg = "Invalid diff entry key '{}' of type '{}'. Expecting str."
        raise VLDiffFormatError(msg.format(key, type(key)))

    if op in (DiffOp.ADD, DiffOp.REPLACE):
        if "value" not in e:
            raise VLDiffFormatError("{} entry for key '{}' has no value.".format(op, key))
    elif op == DiffOp.REMOVE:
        pass  # no argument
    elif op == DiffOp.PATCH:
        # Only recurse on request, patch entries can nest deeply
        if deep:
            validate_diff(e.diff, deep=deep)
    else:
        raise VLDiffFormatError("Unknown diff op '{}'.".format(op))
