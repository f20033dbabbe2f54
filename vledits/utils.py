# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os
import sys

from .log import InvalidSpecError
from .validation import validate_spec

if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'


def read_spec(f):
    """Read, validate and return a chart spec.

    Parameters:
        f:  The filename, or the null filename ("/dev/null" on *nix,
            "nul" on Windows) which gives an empty spec. A file-like
            object is also accepted.

    Raises InvalidSpecError if the json is not a chart spec.
    """
    if f == EXPLICIT_MISSING_FILE:
        return {}
    try:
        if isinstance(f, str):
            with io.open(f, encoding='utf-8') as fo:
                spec = json.load(fo)
        else:
            spec = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidSpecError("Chart spec is not valid json: %s" % e)
    validate_spec(spec)
    return spec


def write_json(obj, filename):
    with io.open(filename, "w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2, separators=(",", ": "))


def find_missing_file(filenames):
    "Return the first of filenames that does not exist, if any."
    for fn in filenames:
        if fn != EXPLICIT_MISSING_FILE and not os.path.exists(fn):
            return fn
    return None


def setup_std_streams():
    """Setup sys.stdout/err for the command line apps

    - Unencodable characters are escaped instead of raising errors,
      unless PYTHONIOENCODING says otherwise.
    - enables colorama for ANSI escapes on Windows
    """
    if not os.getenv('PYTHONIOENCODING'):
        for name in ('stdout', 'stderr'):
            stream = getattr(sys, name)
            # captured or redirected output is left alone
            if stream is getattr(sys, '__%s__' % name) and hasattr(stream, 'reconfigure'):
                stream.reconfigure(errors='backslashreplace')
    # colorama wraps the streams, so it goes last
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()


class PrintWriter:
    """File-like object writing through print().

    Output of the apps goes through this so that pytest's capsys,
    which replaces sys.stdout, sees it.
    """

    def write(self, text):
        print(text, end="")
