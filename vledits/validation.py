# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os
from functools import lru_cache

from jsonschema import Draft4Validator as Validator
from jsonschema import ValidationError

from .log import InvalidModificationError, InvalidSpecError


schema_dir = os.path.abspath(os.path.dirname(__file__))


@lru_cache(maxsize=None)
def get_validator(name):
    "Return a validator for one of the json schemas shipped with vledits."
    schema_path = os.path.join(schema_dir, name + '.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema = json.load(f)
    Validator.check_schema(schema)
    return Validator(schema)


def validate_modifications(modifications):
    """Check that modifications is a list of well formed modification records.

    Raises an InvalidModificationError if not.
    """
    try:
        get_validator('modification_format').validate(modifications)
    except ValidationError as e:
        raise InvalidModificationError(
            "Invalid modification list at %s: %s" % (
                "/".join(str(p) for p in e.absolute_path) or "/", e.message))


def validate_spec(spec):
    """Check the parts of a chart spec that vledits reads.

    Raises an InvalidSpecError if they are malformed.
    """
    try:
        get_validator('chart_spec').validate(spec)
    except ValidationError as e:
        raise InvalidSpecError(
            "Invalid chart spec at %s: %s" % (
                "/".join(str(p) for p in e.absolute_path) or "/", e.message))
