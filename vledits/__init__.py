# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff, transition
from .patching import patch
from .modifications import (
    Modification, diff_specs, get_readable_name,
    apply_modification, apply_modifications,
    )
from .rules import ApplyConfig, ModificationRule, default_rules


__all__ = [
    "__version__",
    "diff", "transition", "patch",
    "Modification", "diff_specs", "get_readable_name",
    "apply_modification", "apply_modifications",
    "ApplyConfig", "ModificationRule", "default_rules",
    ]
