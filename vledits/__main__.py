# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import importlib
import sys

from ._version import __version__

# Command name -> module holding its main(args)
COMMANDS = {
    "diff": "vledits.vldiffapp",
    "apply": "vledits.vlapplyapp",
    "demo": "vledits.vldemoapp",
}

HELP_MESSAGE_VERBOSE = ("Usage: vledits COMMAND [OPTIONS]\n\n"
                        "COMMANDS: %s\n"
                        "OPTIONS: -h, --version, --config\n\n"
                        "Examples: vledits --version\n"
                        "          vledits diff source.vl.json target.vl.json\n"
                        "          vledits apply source.vl.json modifications.json\n"
                        "          vledits demo\n" % ", ".join(COMMANDS))


def list_config():
    "Print the effective config of every command to stderr."
    from .args import print_effective_config
    from .config import entrypoint_configurables
    print('All available config options, and their current values:\n',
          file=sys.stderr)
    for entrypoint in entrypoint_configurables:
        print_effective_config(entrypoint)
        print('', file=sys.stderr)


def main_dispatch(args=None):
    if args is None:
        args = sys.argv[1:]
    if not args:
        sys.exit("Option missing.\n\n%s" % HELP_MESSAGE_VERBOSE)

    cmd, args = args[0], args[1:]
    if cmd in COMMANDS:
        return importlib.import_module(COMMANDS[cmd]).main(args)
    elif cmd == '--version':
        sys.exit(__version__)
    elif cmd in ('-h', '--help'):
        sys.exit(HELP_MESSAGE_VERBOSE)
    elif cmd == '--config':
        list_config()
        sys.exit(1)
    sys.exit("Unrecognized command '%s'\n\n%s" % (cmd, HELP_MESSAGE_VERBOSE))


if __name__ == "__main__":
    # This is triggered by "python -m vledits <args>"
    sys.exit(main_dispatch())
