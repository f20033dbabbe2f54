# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Tools for turning the diff of two chart specs into categorized edits.

A chart spec is a Vega-Lite style dict with `mark`, `encoding` and `data`
entries. The generic dict diff tells us which parts changed, the functions
here translate those changes into named edits grouped by category:

    {
        "mark": [{"name": "POINT_BAR", "detail": {...}, "cost": 0.1}],
        "transformation": [...],
        "encoding": [...],
        "cost": 3.1,
    }

The "cost" entry is not a list of edits, consumers should skip it.
"""

from ..diff_format import DiffOp
from ..log import debug

from .config import DiffConfig
from .generic import diff

__all__ = ["transition"]


# Channel properties that change what is encoded
ENCODING_PROPS = ("field", "type")

# Channel properties that transform the encoded data
TRANSFORM_PROPS = ("aggregate", "bin", "timeUnit", "sort", "scale")

EDIT_COSTS = {
    "mark": 0.1,
    "transformation": 0.5,
    "encoding": 1.0,
}


chart_config = DiffConfig(
    atomic_paths={
        "/mark": True,
        "/data": True,
    }
)


def _edit(category, name, detail):
    return {"name": name, "detail": detail, "cost": EDIT_COSTS[category]}


def _mark_type(spec):
    mark = spec.get("mark")
    if isinstance(mark, dict):
        mark = mark.get("type")
    return mark


def _channels(spec):
    encoding = spec.get("encoding")
    return encoding if isinstance(encoding, dict) else {}


def diff_marks(source, target):
    "List the mark edits between two specs, at most one."
    before = _mark_type(source)
    after = _mark_type(target)
    if after is None or before == after:
        return []
    before = before.upper() if before else None
    after = after.upper()
    name = "%s_%s" % (before or "NONE", after)
    return [_edit("mark", name, {"before": before, "after": after})]


def diff_encodings(source, target):
    """List the encoding and transformation edits between two specs.

    Returns a tuple (encoding_edits, transformation_edits), each ordered
    by channel name and then by property name.
    """
    a = _channels(source)
    b = _channels(target)
    encoding = []
    transformation = []

    for e in diff(a, b, path="/encoding", config=chart_config):
        channel = e.key
        CH = channel.upper()
        if e.op == DiffOp.ADD:
            encoding.append(_edit("encoding", "ADD_" + CH,
                                  {"channel": channel, "after": e.value}))
        elif e.op == DiffOp.REMOVE:
            encoding.append(_edit("encoding", "REMOVE_" + CH,
                                  {"channel": channel, "before": a[channel]}))
        elif e.op == DiffOp.REPLACE:
            # Channel definition is not a dict on one side
            encoding.append(_edit("encoding", "REMOVE_" + CH,
                                  {"channel": channel, "before": a[channel]}))
            encoding.append(_edit("encoding", "ADD_" + CH,
                                  {"channel": channel, "after": e.value}))
        elif e.op == DiffOp.PATCH:
            for pe in e.diff:
                prop = pe.key
                before = a[channel].get(prop)
                after = b[channel].get(prop)
                if prop in ENCODING_PROPS:
                    encoding.append(_edit("encoding", "MODIFY_" + CH,
                                          {"what": prop, "before": before, "after": after}))
                elif prop in TRANSFORM_PROPS:
                    transformation.append(_edit("transformation", prop.upper(),
                                                {"channel": channel, "before": before, "after": after}))
                else:
                    debug("Ignoring change to channel property %s/%s", channel, prop)

    return encoding, transformation


def transition(source, target):
    """Compute the categorized edits that take source to target.

    Both specs are only read. Changes outside of mark and encoding
    (e.g. to data) have no edit and are skipped.
    """
    if not (isinstance(source, dict) and isinstance(target, dict)):
        raise TypeError("Expected chart specs to be dicts, got %r and %r" % (source, target))

    for e in diff(source, target, config=chart_config):
        if e.key not in ("mark", "encoding"):
            debug("No edit for change to /%s", e.key)

    mark = diff_marks(source, target)
    encoding, transformation = diff_encodings(source, target)

    edits = {
        "mark": mark,
        "transformation": transformation,
        "encoding": encoding,
    }
    edits["cost"] = sum(e["cost"] for category in edits.values() for e in category)
    return edits
