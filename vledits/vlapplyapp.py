# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from .args import (
    add_generic_args, add_filename_args, add_apply_args, add_prettyprint_args,
    apply_config_from_args, prettyprint_config_from_args, ConfigBackedParser,
    )
from .log import InvalidModificationError, InvalidSpecError, error
from .modifications import apply_modifications, read_modifications
from .prettyprint import pretty_print_spec
from .utils import (
    find_missing_file, read_spec, setup_std_streams, write_json, PrintWriter,
    )


_description = "Apply modifications from vldiff to a chart spec."


def main_apply(args):
    spec_filename = args.spec
    modifications_filename = args.modifications
    output_filename = args.output

    missing = find_missing_file((spec_filename, modifications_filename))
    if missing:
        print("Missing file {}".format(missing))
        return 1

    try:
        before = read_spec(spec_filename)
        modifications = read_modifications(modifications_filename)
        after = apply_modifications(
            before, modifications, config=apply_config_from_args(args))
    except (InvalidSpecError, InvalidModificationError) as e:
        error("Could not apply modifications: %s", e)
        return 1

    if output_filename:
        write_json(after, output_filename)
    else:
        config = prettyprint_config_from_args(args, out=PrintWriter())
        pretty_print_spec(after, config=config)

    return 0


def _build_arg_parser(prog='vlapply'):
    """Creates an argument parser for the vlapply command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_apply_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["spec", "modifications"])
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the modified spec is written "
             "to this file. Otherwise it is printed to the "
             "terminal.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_apply(arguments)


if __name__ == "__main__":
    sys.exit(main())
