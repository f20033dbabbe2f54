# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

"""Replay the modifications between two example chart specs.

Computes the modifications that take SOURCE to BORROWEE, then applies
them one by one to SOURCE, printing the readable name and the new spec
at each step. This is a sanity check that what the modifications are
called matches what applying them does.
"""

import sys

from .args import (
    add_generic_args, add_apply_args, add_prettyprint_args,
    apply_config_from_args, prettyprint_config_from_args, ConfigBackedParser,
    )
from .modifications import apply_modification, diff_specs
from .prettyprint import (
    DefaultConfig, pretty_print_header, pretty_print_spec, pretty_print_step, IND,
    )
from .utils import setup_std_streams, PrintWriter


_description = "Replay the modifications between two example chart specs."


# The chart spec a user is working on
SOURCE = {
    "data": {"url": "data/cars.json"},
    "mark": "point",
    "encoding": {
        "x": {"field": "Horsepower", "type": "quantitative"},
    },
}

# The chart spec we are borrowing from
BORROWEE = {
    "data": {
        "values": [
            {"a": "A", "b": 28}, {"a": "B", "b": 55}, {"a": "C", "b": 43},
            {"a": "D", "b": 91}, {"a": "E", "b": 81}, {"a": "F", "b": 53},
            {"a": "G", "b": 19}, {"a": "H", "b": 87}, {"a": "I", "b": 52},
        ]
    },
    "mark": "bar",
    "encoding": {
        "x": {"field": "a", "type": "ordinal"},
        "y": {"field": "b", "type": "quantitative"},
    },
}


def run_demo(config=DefaultConfig, apply_config=None, source=SOURCE, borrowee=BORROWEE):
    """Diff source and borrowee, then replay the modifications on source.

    Returns the spec after the last modification.
    """
    modifications = diff_specs(source, borrowee)
    spec = source

    pretty_print_header("Before:", config)
    pretty_print_spec(spec, IND, config)
    config.out.write("\n")
    for modification in modifications:
        spec = apply_modification(spec, modification, config=apply_config)
        pretty_print_step(modification, spec, config)
    return spec


def main_demo(args):
    run_demo(
        config=prettyprint_config_from_args(args, out=PrintWriter()),
        apply_config=apply_config_from_args(args),
    )
    return 0


def _build_arg_parser(prog='vldemo'):
    """Creates an argument parser for the vldemo command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_apply_args(parser)
    add_prettyprint_args(parser)
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_demo(arguments)


if __name__ == "__main__":
    sys.exit(main())
