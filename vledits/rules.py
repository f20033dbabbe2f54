# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Rules mapping modifications to readable names and spec changes.

Each rule handles one (category, name) pair, or every name of a category
when registered with name None. A rule can describe a modification with
a short label for display, and express the modification as a diff
against a chart spec, which is then applied with `patch`.

To support a new kind of modification, subclass ModificationRule and
register an instance on a copy of `default_rules`:

    rules = default_rules.copy()
    rules.register(MyRule())
    apply_modification(spec, modification, rules=rules)
"""

from .diff_format import op_add, op_patch, op_remove, op_replace
from .log import InvalidModificationError
from .patching import patch


class ApplyConfig:
    """Settings used when applying modifications to a spec"""

    def __init__(self, *, add_y_field="b", add_y_type="quantitative"):
        self.add_y_field = add_y_field
        self.add_y_type = add_y_type

    def default_y(self):
        "The channel definition added by an ADD_Y modification."
        return {"field": self.add_y_field, "type": self.add_y_type}


def _detail(modification):
    detail = modification.get("detail")
    return detail if isinstance(detail, dict) else {}


def _require(modification, key):
    detail = modification.get("detail")
    if not isinstance(detail, dict) or key not in detail:
        raise InvalidModificationError(
            "%s/%s modification needs detail.%s, got %r" % (
                modification.get("category"), modification.get("name"), key, detail))
    return detail[key]


def _set_key(obj, key, value):
    "Diff entry setting key of obj to value, whether or not it exists yet."
    if key in obj:
        return op_replace(key, value)
    return op_add(key, value)


class ModificationRule(object):
    """Base class for modification rules.

    Subclasses set `category` and `name` and override `describe`
    and `diff`.
    """
    category = None
    name = None

    def describe(self, modification):
        "Return a readable name for modification, or None."
        return None

    def diff(self, spec, modification, config):
        "Return the diff that applies modification to spec."
        return []

    def apply(self, spec, modification, config):
        "Return a new spec with modification applied, spec is left as is."
        return patch(spec, self.diff(spec, modification, config))


class MarkStyleRule(ModificationRule):
    category = "mark"

    def describe(self, modification):
        after = _detail(modification).get("after")
        if not isinstance(after, str):
            return None
        return "Mark style: " + after[:1].upper() + after[1:].lower()

    def diff(self, spec, modification, config):
        after = _require(modification, "after")
        if not isinstance(after, str):
            raise InvalidModificationError(
                "Mark style must be a string, got %r" % (after,))
        return [_set_key(spec, "mark", after.lower())]


class AddYRule(ModificationRule):
    category = "encoding"
    name = "ADD_Y"

    def describe(self, modification):
        return "y variable"

    def diff(self, spec, modification, config):
        y = config.default_y()
        encoding = spec.get("encoding")
        if not isinstance(encoding, dict):
            return [_set_key(spec, "encoding", {"y": y})]
        return [op_patch("encoding", [_set_key(encoding, "y", y)])]


class ModifyXRule(ModificationRule):
    category = "encoding"
    name = "MODIFY_X"

    def describe(self, modification):
        if _detail(modification).get("what") == "field":
            return "x field name"
        return None

    def diff(self, spec, modification, config):
        what = _require(modification, "what")
        if not isinstance(what, str):
            raise InvalidModificationError(
                "MODIFY_X detail.what must name a channel property, got %r" % (what,))
        after = _require(modification, "after")
        encoding = spec.get("encoding")
        x = encoding.get("x") if isinstance(encoding, dict) else None
        if not isinstance(x, dict):
            raise InvalidModificationError(
                "Cannot modify x channel of a spec without encoding.x")
        if after is None:
            if what not in x:
                return []
            entry = op_remove(what)
        else:
            entry = _set_key(x, what, after)
        return [op_patch("encoding", [op_patch("x", [entry])])]


class ModificationRules(dict):
    """Rules keyed by (category, name).

    A rule stored under (category, None) is the fall back for every
    name in that category.
    """

    def register(self, rule):
        self[(rule.category, rule.name)] = rule
        return rule

    def lookup(self, modification):
        category = modification.get("category")
        rule = self.get((category, modification.get("name")))
        if rule is None:
            rule = self.get((category, None))
        return rule

    def copy(self):
        return ModificationRules(self)


default_rules = ModificationRules()
default_rules.register(MarkStyleRule())
default_rules.register(AddYRule())
default_rules.register(ModifyXRule())
