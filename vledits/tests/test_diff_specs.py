# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from vledits import diff_specs, apply_modification, Modification

from .utils import assert_unchanged


def test_diff_specs_example_pair(source_spec, borrowee_spec):
    modifications = assert_unchanged(diff_specs, source_spec, borrowee_spec)
    assert all(isinstance(m, Modification) for m in modifications)
    assert [(m.category, m.name) for m in modifications] == [
        ("mark", "POINT_BAR"),
        ("encoding", "MODIFY_X"),
        ("encoding", "MODIFY_X"),
        ("encoding", "ADD_Y"),
    ]
    assert [m.readable_name for m in modifications] == [
        "Mark style: Bar", "x field name", None, "y variable"]


def test_replay_reaches_target(source_spec, borrowee_spec):
    spec = source_spec
    for m in diff_specs(source_spec, borrowee_spec):
        spec = apply_modification(spec, m)
    assert spec["mark"] == "bar"
    assert spec["encoding"]["y"] == {"field": "b", "type": "quantitative"}
    assert spec["encoding"]["x"]["field"] == "a"
    # The type change has no readable name but is applied all the same
    assert spec["encoding"]["x"]["type"] == "ordinal"
    # Data is not part of any modification
    assert spec["data"] == {"url": "data/cars.json"}


def test_diff_specs_flattens_in_order():
    def fake_transition(source, target):
        return {
            "mark": [{"name": "POINT_BAR", "detail": {"after": "BAR"}}],
            "cost": 4.0,
            "encoding": [
                {"name": "REMOVE_COLOR", "detail": {}},
                {"name": "ADD_Y", "detail": {}},
            ],
            "note": "not a list of edits",
            "transformation": [{"name": "FILTER"}],
            "meta": {"version": 2},
        }
    modifications = diff_specs({}, {}, transition=fake_transition)
    assert [(m.category, m.name, m.readable_name) for m in modifications] == [
        ("mark", "POINT_BAR", "Mark style: Bar"),
        ("encoding", "REMOVE_COLOR", None),
        ("encoding", "ADD_Y", "y variable"),
        ("transformation", "FILTER", None),
    ]


def test_diff_specs_copies_inputs_for_transition():
    def destructive_transition(source, target):
        source.clear()
        target["mark"] = "broken"
        return {"mark": []}
    source = {"mark": "point"}
    target = {"mark": "bar"}
    assert diff_specs(source, target, transition=destructive_transition) == []
    assert source == {"mark": "point"}
    assert target == {"mark": "bar"}


def test_diff_specs_identical(source_spec):
    assert diff_specs(source_spec, source_spec) == []


def test_diff_specs_unknown_edits_still_apply(source_spec):
    target = {"mark": "point", "encoding": {
        "x": {"field": "Horsepower", "type": "quantitative", "aggregate": "mean"}}}
    modifications = diff_specs(source_spec, target)
    assert [(m.category, m.name, m.readable_name) for m in modifications] == [
        ("transformation", "AGGREGATE", None)]
    assert apply_modification(source_spec, modifications[0]) == source_spec
