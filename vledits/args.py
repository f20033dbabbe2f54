# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import build_config, entrypoint_configurables
from .log import init_logging, set_vledits_log_level


LOG_LEVELS = ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL')


class ConfigBackedParser(argparse.ArgumentParser):
    """Argument parser taking its defaults from the vledits config files.

    The entrypoint is the first word of `prog`. Parsers for unknown
    entrypoints keep their own defaults.
    """

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        if entrypoint in entrypoint_configurables:
            self.set_defaults(**build_config(entrypoint))
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # Set up logging here, as __call__ only runs if the option is given
        init_logging(level=getattr(logging, default or 'INFO'))
        set_vledits_log_level(getattr(logging, default or 'INFO'))
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        set_vledits_log_level(getattr(logging, values))


def printable_config(config):
    "Config values as json strings, with empty groups shown as {}."
    printable = {}
    for key, value in config.items():
        if isinstance(value, dict):
            printable[key] = printable_config(value) or '{}'
        else:
            printable[key] = json.dumps(value)
    return printable


def print_effective_config(entrypoint, out=None):
    "Print the config values in effect for entrypoint, grouped under its class name."
    from .prettyprint import pretty_print_dict, PrettyPrintConfig
    if out is None:
        out = sys.stderr
    group = entrypoint_configurables[entrypoint].__name__
    values = printable_config(build_config(entrypoint, True))
    pretty_print_dict({group: values}, config=PrettyPrintConfig(out=out, use_color=False))


class ConfigHelpAction(argparse.Action):
    "Print the effective config of the parser's entrypoint and exit."

    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        print_effective_config(parser.prog)
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all vledits commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=LOG_LEVELS,
        help="set the log level by name.",
        action=LogLevelAction,
    )


filename_help = {
    "source": "The source chart spec filename.",
    "target": "The target chart spec filename.",
    "spec": "The chart spec filename to apply modifications to.",
    "modifications": "The modifications filename, output from vldiff --out.",
    }


def add_filename_args(parser, names):
    """Add a positional filename argument for each of names.

    The help text comes from `filename_help`.
    """
    for name in names:
        parser.add_argument(name, help=filename_help[name])


def add_apply_args(parser):
    """Adds a set of arguments for commands that apply modifications.
    """
    parser.add_argument(
        '--add-y-field',
        default='b',
        help="the field of the y channel added by an ADD_Y modification.")
    parser.add_argument(
        '--add-y-type',
        default='quantitative',
        choices=('quantitative', 'ordinal', 'nominal', 'temporal'),
        help="the type of the y channel added by an ADD_Y modification.")


def add_prettyprint_args(parser):
    """Adds --color/--no-color, stored as `use_color`.
    """
    color = parser.add_mutually_exclusive_group()
    color.add_argument(
        '--color',
        dest='use_color',
        action="store_true",
        help="use ANSI color code escapes for text output")
    color.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        help="print plain text, without ANSI color code escapes")
    parser.set_defaults(use_color=True)


def prettyprint_config_from_args(arguments, **kwargs):
    "Build a PrettyPrintConfig from parsed arguments, kwargs are passed on."
    from .prettyprint import PrettyPrintConfig
    kwargs.setdefault('use_color', getattr(arguments, 'use_color', True))
    return PrettyPrintConfig(**kwargs)


def apply_config_from_args(arguments):
    "Build an ApplyConfig from parsed arguments."
    from .rules import ApplyConfig
    defaults = ApplyConfig()
    return ApplyConfig(
        add_y_field=getattr(arguments, 'add_y_field', defaults.add_y_field),
        add_y_type=getattr(arguments, 'add_y_type', defaults.add_y_type),
    )
