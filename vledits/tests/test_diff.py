# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from vledits import diff
from vledits.diff_format import op_patch, op_add, op_replace, op_remove
from vledits.diffing.config import DiffConfig

from .utils import check_symmetric_diff_and_patch


def test_diff_and_patch():
    # Note: check_symmetric_diff_and_patch handles (a,b) and (b,a),
    # simplifying the number of cases to cover in here.

    # Empty
    check_symmetric_diff_and_patch({}, {})

    # One-sided content/empty
    check_symmetric_diff_and_patch({"mark": "bar"}, {})

    # One-sided content/empty multilevel
    mda = {"mark": "bar", "encoding": {"x": {"field": "a"}}}
    check_symmetric_diff_and_patch(mda, {})

    # Partial delete
    mda = {"mark": "bar", "encoding": {"x": {"field": "a"}, "y": {"field": "b"}}}
    mdb = {"mark": "bar", "encoding": {"x": {"field": "a"}}}
    check_symmetric_diff_and_patch(mda, mdb)

    # Two-level modification
    mda = {"mark": "point", "encoding": {"x": {"field": "a", "type": "ordinal"}}}
    mdb = {"mark": "bar", "encoding": {"x": {"field": "b", "type": "ordinal"}}}
    check_symmetric_diff_and_patch(mda, mdb)

    # Leaf type changes
    mda = {"mark": "bar", "data": {"values": [1, 2, 3]}}
    mdb = {"mark": {"type": "bar"}, "data": {"values": [1, 2]}}
    check_symmetric_diff_and_patch(mda, mdb)


def test_diff_paths_are_sorted():
    mda = {"deleted": 1, "modparent": {"mod": 21}, "mix": {"del": 31, "mod": 32, "unchanged": 123}}
    mdb = {"added": 7,   "modparent": {"mod": 22}, "mix": {"add": 42, "mod": 37, "unchanged": 123}}
    assert diff(mda, mdb) == [
        op_add("added", 7),
        op_remove("deleted"),
        op_patch("mix", [
            op_add("add", 42),
            op_remove("del"),
            op_replace("mod", 37),
            ]),
        op_patch("modparent", [
            op_replace("mod", 22)
            ]),
        ]


def test_diff_lists_are_atomic():
    a = {"data": {"values": [1, 2, 3]}}
    b = {"data": {"values": [1, 2, 4]}}
    assert diff(a, b) == [op_patch("data", [op_replace("values", [1, 2, 4])])]


def test_diff_atomic_paths():
    a = {"data": {"url": "cars.json"}}
    b = {"data": {"url": "movies.json"}}
    config = DiffConfig(atomic_paths={"/data": True})
    assert diff(a, b, config=config) == [op_replace("data", {"url": "movies.json"})]


def test_diff_equal_is_empty():
    spec = {"mark": "bar", "encoding": {"x": {"field": "a"}}}
    assert diff(spec, dict(spec)) == []


def test_diff_requires_dicts():
    with pytest.raises(RuntimeError):
        diff([1, 2], [1, 3])
    with pytest.raises(RuntimeError):
        diff("point", "bar")
