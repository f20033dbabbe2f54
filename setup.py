#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

VLEDITS_PATH = HERE / "vledits"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(VLEDITS_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name="vledits",
      version=VERSION,
      description="Compute, name and apply modifications between Vega-Lite chart specs",
      long_description=LONG_DESCRIPTION,
      long_description_content_type="text/markdown",
      license="BSD-3-Clause",
      packages=find_packages(exclude=["vledits.tests"]),
      package_data={"vledits": ["*.schema.json"]},
      python_requires=">=3.8",
      install_requires=[
          "colorama",
          "jsonschema",
          "jupyter_core",
          "traitlets>=5",
      ],
      extras_require={
          "test": [
              "pytest>=6.0",
          ],
      },
      entry_points={
          "console_scripts": [
              "vledits = vledits.__main__:main_dispatch",
              "vldiff = vledits.vldiffapp:main",
              "vlapply = vledits.vlapplyapp:main",
              "vldemo = vledits.vldemoapp:main",
          ],
      },
    )
