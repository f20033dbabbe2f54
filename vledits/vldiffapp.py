# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from .args import (
    add_generic_args, add_filename_args, add_prettyprint_args,
    ConfigBackedParser, prettyprint_config_from_args,
    )
from .log import InvalidSpecError, error
from .modifications import diff_specs
from .prettyprint import pretty_print_modifications
from .utils import (
    find_missing_file, read_spec, setup_std_streams, write_json, PrintWriter,
    )


_description = "Compute the modifications that transform one chart spec into another."


def main_diff(args):
    """Main handler of diff CLI"""
    source = args.source
    target = args.target
    output = getattr(args, 'out', None)

    missing = find_missing_file((source, target))
    if missing:
        print("Missing file {}".format(missing))
        return 1

    try:
        a = read_spec(source)
        b = read_spec(target)
    except InvalidSpecError as e:
        error("Could not read chart specs: %s", e)
        return 1

    modifications = diff_specs(a, b)

    if output:
        write_json(modifications, output)
    else:
        config = prettyprint_config_from_args(args, out=PrintWriter())
        pretty_print_modifications(source, target, modifications, config)

    return 0


def _build_arg_parser(prog='vldiff'):
    """Creates an argument parser for the vldiff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["source", "target"])
    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the modifications are written to this file as json. "
             "Otherwise they are printed to the terminal.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
