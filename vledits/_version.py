# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import re
from collections import namedtuple

VersionInfo = namedtuple("VersionInfo", ["major", "minor", "micro", "releaselevel", "serial"])

_specifier_ = {"a": "alpha", "b": "beta", "rc": "candidate", "": "final"}

__version__ = "0.3.0"

_parsed = re.match(
    r"^(?P<major>\d+)\.(?P<minor>\d+)\.(?P<micro>\d+)((?P<releaselevel>[A-z]+)(?P<serial>\d+))?$",
    __version__,
).groupdict()

version_info = VersionInfo(
    int(_parsed["major"]),
    int(_parsed["minor"]),
    int(_parsed["micro"]),
    _specifier_.get(_parsed["releaselevel"] or "", _parsed["releaselevel"]),
    _parsed["serial"] or "",
)
