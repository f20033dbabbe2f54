# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Computing, naming and applying modifications of chart specs.

A modification is one atomic edit that moves a source spec toward a
target spec, e.g. changing the mark style or adding a y channel.
Modifications are computed by a transition function (see
vledits.diffing.transition), named for display, and applied one at a
time to produce successive spec states. None of the functions here
modify their arguments.
"""

import copy
import io
import json

from .diff_format import DiffEntry
from .diffing import transition as default_transition
from .log import InvalidModificationError, debug
from .rules import ApplyConfig, default_rules
from .validation import validate_modifications

__all__ = [
    "Modification", "diff_specs", "get_readable_name",
    "apply_modification", "apply_modifications",
    ]


class Modification(DiffEntry):
    """A single edit of a chart spec.

    Keys are `category` ("mark", "encoding" or "transformation"),
    `name` (e.g. "ADD_Y"), `detail` (name specific payload) and
    `readable_name` (display label, or None).
    """
    pass


def get_readable_name(modification, rules=None):
    """Return a short display label for modification.

    Returns None when no rule knows the modification.
    """
    if rules is None:
        rules = default_rules
    rule = rules.lookup(modification)
    if rule is None:
        return None
    return rule.describe(modification)


def diff_specs(source, target, transition=None, rules=None):
    """Compute the modifications needed to transform source into target.

    The transition function maps two specs to a dict from category
    to a list of raw edits. Entries that are not lists (like a total
    cost) are skipped. The result is flat, ordered by category and then
    by the order of edits within each category.
    """
    if transition is None:
        transition = default_transition

    # The transition function is free to edit the specs it is given
    trans = transition(copy.deepcopy(source), copy.deepcopy(target))

    modifications = []
    for category, edits in trans.items():
        if not hasattr(edits, "__len__") or isinstance(edits, (str, dict)):
            debug("Skipping transition entry %r", category)
            continue
        for edit in edits:
            modification = Modification(edit, category=category)
            modification.readable_name = get_readable_name(modification, rules)
            modifications.append(modification)
    return modifications


def apply_modification(spec, modification, config=None, rules=None):
    """Return a new spec with a single modification applied.

    Modifications without a matching rule leave the spec unchanged.
    Raises an InvalidModificationError when a rule matches but the
    modification does not fit the spec, e.g. modifying the x channel
    of a spec without one.
    """
    if config is None:
        config = ApplyConfig()
    if rules is None:
        rules = default_rules

    rule = rules.lookup(modification)
    if rule is None:
        debug("No rule for %s/%s modification, leaving spec as is",
              modification.get("category"), modification.get("name"))
        return copy.deepcopy(spec)
    return rule.apply(copy.deepcopy(spec), modification, config)


def apply_modifications(spec, modifications, config=None, rules=None):
    "Apply modifications to spec in order, returning the final spec."
    spec = copy.deepcopy(spec)
    for modification in modifications:
        spec = apply_modification(spec, modification, config=config, rules=rules)
    return spec


def to_modifications(records):
    "Convert a list of dicts (e.g. loaded from json) to Modification objects."
    return [Modification(r) for r in records]


def read_modifications(f):
    """Read and validate a json list of modifications.

    f is a filename or a file-like object.
    """
    try:
        if isinstance(f, str):
            with io.open(f, encoding="utf8") as fo:
                records = json.load(fo)
        else:
            records = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidModificationError("Modifications are not valid json: %s" % e)
    validate_modifications(records)
    return to_modifications(records)
