# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from vledits import (
    ModificationRule, Modification, default_rules,
    apply_modification, diff_specs, get_readable_name,
    )
from vledits.diff_format import op_patch, op_remove
from vledits.rules import AddYRule, MarkStyleRule, ModifyXRule, ModificationRules


class RemoveChannelRule(ModificationRule):
    category = "encoding"

    def describe(self, modification):
        return "remove %s" % modification.detail["channel"]

    def diff(self, spec, modification, config):
        return [op_patch("encoding", [op_remove(modification.detail["channel"])])]


def test_default_rules_lookup():
    assert isinstance(default_rules.lookup({"category": "mark", "name": "POINT_BAR"}), MarkStyleRule)
    assert isinstance(default_rules.lookup({"category": "encoding", "name": "ADD_Y"}), AddYRule)
    assert isinstance(default_rules.lookup({"category": "encoding", "name": "MODIFY_X"}), ModifyXRule)
    assert default_rules.lookup({"category": "encoding", "name": "ADD_X"}) is None
    assert default_rules.lookup({"category": "transformation", "name": "BIN"}) is None


def test_copy_is_independent():
    rules = default_rules.copy()
    assert isinstance(rules, ModificationRules)
    rules.register(RemoveChannelRule())
    assert ("encoding", None) in rules
    assert ("encoding", None) not in default_rules


def test_category_fall_back_rule():
    rules = default_rules.copy()
    rules.register(RemoveChannelRule())
    m = Modification(category="encoding", name="REMOVE_COLOR", detail={"channel": "color"})
    spec = {"encoding": {"x": {"field": "a"}, "color": {"field": "c"}}}

    assert get_readable_name(m, rules=rules) == "remove color"
    assert apply_modification(spec, m, rules=rules) == {"encoding": {"x": {"field": "a"}}}
    # Exact matches take precedence over the category fall back
    assert get_readable_name(Modification(category="encoding", name="ADD_Y"), rules=rules) == "y variable"
    # Default rules are untouched
    assert get_readable_name(m) is None
    assert apply_modification(spec, m) == spec


def test_custom_rules_in_diff_specs():
    rules = default_rules.copy()
    rules.register(RemoveChannelRule())
    source = {"mark": "bar", "encoding": {"x": {"field": "a"}, "color": {"field": "c"}}}
    target = {"mark": "bar", "encoding": {"x": {"field": "a"}}}
    modifications = diff_specs(source, target, rules=rules)
    assert [m.readable_name for m in modifications] == ["remove color"]
    assert apply_modification(source, modifications[0], rules=rules) == target


def test_base_rule_is_a_no_op():
    rule = ModificationRule()
    spec = {"mark": "bar"}
    assert rule.describe(Modification(category="mark")) is None
    result = rule.apply(spec, Modification(category="mark"), None)
    assert result == spec
    assert result is not spec
