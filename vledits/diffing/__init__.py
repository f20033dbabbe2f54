# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .generic import diff
from .charts import transition

__all__ = ["diff", "transition"]
