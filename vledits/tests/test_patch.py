# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from vledits import patch
from vledits.diff_format import op_patch, op_add, op_remove, op_replace, DiffEntry
from vledits.log import VLDiffFormatError


def test_patch_dict():
    # Test +, single item insertion
    assert patch({}, [op_add("d", 4)]) == {"d": 4}
    assert patch({"a": 1}, [op_add("d", 4)]) == {"a": 1, "d": 4}

    # Test -, single item deletion
    assert patch({"a": 1}, [op_remove("a")]) == {}
    assert patch({"a": 1, "b": 2}, [op_remove("a")]) == {"b": 2}

    # Test :, single item replace
    assert patch({"a": 1, "b": 2}, [op_replace("a", 3)]) == {"a": 3, "b": 2}
    assert patch({"a": 1, "b": 2}, [op_replace("a", 3), op_replace("b", 5)]) == {"a": 3, "b": 5}

    # Test !, item patch
    subdiff = [op_patch("x", [op_replace("field", "a")])]
    assert patch({"encoding": {"x": {"field": "b", "type": "ordinal"}}, "mark": "bar"},
                 [op_patch("encoding", subdiff)]) == {
                     "encoding": {"x": {"field": "a", "type": "ordinal"}}, "mark": "bar"}


def test_patch_does_not_modify_input():
    spec = {"mark": "bar", "encoding": {"x": {"field": "b"}, "y": {"field": "c"}}}
    patched = patch(spec, [op_patch("encoding", [op_patch("x", [op_replace("field", "a")])])])
    assert spec == {"mark": "bar", "encoding": {"x": {"field": "b"}, "y": {"field": "c"}}}
    # Untouched values are copies, not shared with the input
    assert patched["encoding"]["y"] == spec["encoding"]["y"]
    assert patched["encoding"]["y"] is not spec["encoding"]["y"]


def test_patch_added_values_are_copied():
    value = {"field": "b"}
    patched = patch({}, [op_add("y", value)])
    value["field"] = "c"
    assert patched == {"y": {"field": "b"}}


def test_patch_missing_key():
    with pytest.raises(VLDiffFormatError):
        patch({"encoding": {}}, [op_patch("encoding", [op_patch("x", [op_replace("field", "a")])])])


def test_patch_invalid_op():
    with pytest.raises(VLDiffFormatError):
        patch({"a": 1}, [DiffEntry(op="move", key="a")])


def test_patch_invalid_type():
    with pytest.raises(ValueError):
        patch(["a"], [op_add("b", 1)])


def test_patch_conflicting_entries():
    with pytest.raises(VLDiffFormatError):
        patch({"mark": "bar"}, [op_add("mark", "point")])
    with pytest.raises(VLDiffFormatError):
        patch({"mark": "bar"}, [op_remove("mark"), op_replace("mark", "point")])
    with pytest.raises(VLDiffFormatError):
        patch({}, [op_replace("mark", "point")])
