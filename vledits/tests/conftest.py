# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
import io
import json
import os

from jsonschema import Draft4Validator as Validator
from pytest import fixture

from vledits.validation import schema_dir
from vledits.vldemoapp import SOURCE, BORROWEE


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def source_spec():
    return copy.deepcopy(SOURCE)


@fixture
def borrowee_spec():
    return copy.deepcopy(BORROWEE)


@fixture
def json_schema_modifications(request):
    schema_path = os.path.join(schema_dir, 'modification_format.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def modification_validator(request, json_schema_modifications):
    return Validator(json_schema_modifications)


@fixture
def isolated_config(tmpdir, monkeypatch):
    """Run in an empty directory, with no jupyter config on path."""
    monkeypatch.setenv('JUPYTER_CONFIG_DIR', str(tmpdir.join('jupyter')))
    monkeypatch.setenv('JUPYTER_CONFIG_PATH', '')
    monkeypatch.setenv('JUPYTER_NO_CONFIG', '1')
    with tmpdir.as_cwd():
        yield tmpdir
