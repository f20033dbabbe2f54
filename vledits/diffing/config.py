# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.


class DiffConfig:
    """Set of configs to pass around while diffing"""

    def __init__(self, *, atomic_paths=None):
        self._atomic_paths = atomic_paths or {}

    def is_atomic(self, x, path=None):
        "Return True for values that diff should treat as a single atomic value."
        try:
            return self._atomic_paths[path]
        except KeyError:
            return not isinstance(x, dict)
