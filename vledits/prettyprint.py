# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pprint
import sys

import colorama


# Indentation offset in pretty-print
IND = "  "

# Lists that format shorter than this are printed on one line
MAXWIDTH = 78


# ANSI escapes by role, used when colors are enabled
COLORS = {
    'KEEP': '',
    'REMOVE': colorama.Fore.RED,
    'ADD': colorama.Fore.GREEN,
    'INFO': colorama.Fore.BLUE + colorama.Style.BRIGHT,
    'RESET': colorama.Style.RESET_ALL,
}

col_const = {
    True: COLORS,
    False: {role: '' for role in COLORS},
}


class PrettyPrintConfig:
    """Where to print, and whether to use color.

    The color roles KEEP, REMOVE, ADD, INFO and RESET are available as
    attributes, and are empty strings when use_color is False.
    """

    def __init__(self, out=sys.stdout, use_color=True):
        self.out = out
        self.use_color = use_color

    def __getattr__(self, name):
        if name in COLORS:
            return col_const[bool(self.use_color)][name]
        raise AttributeError(name)

DefaultConfig = PrettyPrintConfig()


def format_value(v):
    "Format simple value for printing."
    if isinstance(v, str):
        return v
    return pprint.pformat(v)


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    """Print `k: v` on one line for simple values.

    Dicts and lists go on the following lines, indented one step.
    """
    if isinstance(v, (dict, list)):
        config.out.write("%s%s:\n" % (prefix, k))
        if isinstance(v, dict):
            pretty_print_dict(v, (), prefix + IND, config)
        else:
            pretty_print_list(v, prefix + IND, config)
    else:
        config.out.write("%s%s: %s\n" % (prefix, k, format_value(v)))


def pretty_print_list(li, prefix="", config=DefaultConfig):
    "Print a short list on one line, otherwise one item[i] per element."
    formatted = pprint.pformat(li)
    if "\n" in formatted or len(formatted) >= MAXWIDTH - len(prefix):
        for i, v in enumerate(li):
            pretty_print_item("item[%d]" % i, v, prefix, config)
    else:
        config.out.write(prefix + formatted + "\n")


def pretty_print_dict(d, exclude_keys=(), prefix="", config=DefaultConfig):
    """Print a dict as indented `key: value` lines, sorted by key

        mark: bar
        encoding:
          x:
            field: a

    Keys in exclude_keys are skipped.
    """
    for k in sorted(k for k in d if k not in exclude_keys):
        pretty_print_item(k, d[k], prefix, config)


def pretty_print_header(msg, config):
    config.out.write("%s%s%s\n" % (config.INFO, msg, config.RESET))


def pretty_print_spec(spec, prefix="", config=DefaultConfig):
    "Pretty-print a chart spec, an empty spec prints as {}."
    if not spec:
        config.out.write("%s{}\n" % prefix)
    else:
        pretty_print_dict(spec, (), prefix, config)


def pretty_print_modification(modification, config=DefaultConfig):
    """Pretty-print a modification and its readable name

    Unnamed modifications are shown as "(unnamed)".
    """
    label = modification.get("readable_name")
    if label is None:
        label = "(unnamed)"
    pretty_print_header('Modification: "%s"' % label, config)
    pretty_print_dict(modification, ("readable_name",), IND, config)


modifications_header = """\
vldiff {afn} {bfn}
--- {afn}
+++ {bfn}
"""

def pretty_print_modifications(afn, bfn, modifications, config=DefaultConfig):
    """Pretty-print the modifications between two chart specs

    Parameters
    ----------

    afn: str
        Filename of the source spec
    bfn: str
        Filename of the target spec
    modifications: list
        The modifications that transform source into target
    config: PrettyPrintConfig
        Config object determining where and how output is printed
    """
    if modifications:
        config.out.write(modifications_header.format(afn=afn, bfn=bfn))
    for i, modification in enumerate(modifications):
        color = config.ADD if modification.get("readable_name") else config.KEEP
        config.out.write("%s[%d] %s/%s%s\n" % (
            color, i, modification.get("category"), modification.get("name"),
            config.RESET))
        pretty_print_modification(modification, config)
        config.out.write("\n")


def pretty_print_step(modification, after, config=DefaultConfig):
    "Pretty-print one step of replaying modifications against a spec."
    pretty_print_modification(modification, config)
    config.out.write("\n")
    pretty_print_header("New spec:", config)
    pretty_print_spec(after, IND, config)
    config.out.write("\n")
