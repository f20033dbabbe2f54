# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Human answers to paired chart comparisons.

A triplet holds two chart variants and `compared_result`, the sign of
the side known to be preferred: -1 for left and 1 for right. Users
answer with the side they pick, and an answer is wrong when it picks
the other side.

Triplets are normally found by id in a primary store. Older triplets
only exist in a csv export, which is used as a fall back.
"""

import copy
import csv
import io

from .log import debug, warning


class Triplet(object):
    def __init__(self, id, left=None, right=None, compared_result=None):
        self.id = id
        self.left = left
        self.right = right
        self.compared_result = compared_result

    def __eq__(self, other):
        return isinstance(other, Triplet) and vars(self) == vars(other)

    def __repr__(self):
        return "Triplet(id=%r, compared_result=%r)" % (self.id, self.compared_result)


class User(object):
    def __init__(self, id, name=None):
        self.id = id
        self.name = name


class HumanAnswer(object):
    """One user's choice ("left" or "right") for a triplet."""

    def __init__(self, id, answer, triplet_id, user_id=None, triplet=None, user=None):
        self.id = id
        self.answer = answer
        self.triplet_id = triplet_id
        self.user_id = user_id
        self.triplet = triplet
        self.user = user

    @property
    def wrong(self):
        "Whether the chosen side disagrees with the triplet's compared result."
        if self.triplet is None:
            return False
        result = self.triplet.compared_result
        if self.answer == "left" and result == 1:
            return True
        elif self.answer == "right" and result == -1:
            return True
        return False

    def __repr__(self):
        return "HumanAnswer(id=%r, answer=%r, triplet_id=%r)" % (
            self.id, self.answer, self.triplet_id)


class DictTripletStore(object):
    "Triplets kept in memory, keyed by id."

    def __init__(self, triplets=()):
        self._triplets = {t.id: t for t in triplets}

    def add(self, triplet):
        self._triplets[triplet.id] = triplet

    def find_by_id(self, triplet_id):
        return self._triplets.get(triplet_id)


def _parse_result(value):
    value = (value or "").strip()
    if not value:
        return None
    return int(value)


class CsvTripletStore(object):
    """Triplets read from a csv file with header id,left,right,compared_result.

    The file is read on first lookup. Ids are compared as strings.
    """

    def __init__(self, filename):
        self.filename = filename
        self._triplets = None

    def _load(self):
        triplets = {}
        with io.open(self.filename, encoding="utf-8", newline="") as f:
            for row in csv.DictReader(f):
                triplets[row["id"]] = Triplet(
                    row["id"],
                    left=row.get("left") or None,
                    right=row.get("right") or None,
                    compared_result=_parse_result(row.get("compared_result")),
                )
        debug("Loaded %d triplets from %s", len(triplets), self.filename)
        return triplets

    def find_by_id(self, triplet_id):
        if self._triplets is None:
            self._triplets = self._load()
        return self._triplets.get(str(triplet_id))


class TripletResolver(object):
    "Looks triplets up in a primary store, then in a secondary store on a miss."

    def __init__(self, primary, secondary=None):
        self.primary = primary
        self.secondary = secondary

    def resolve(self, triplet_id):
        triplet = self.primary.find_by_id(triplet_id)
        if triplet is None and self.secondary is not None:
            triplet = self.secondary.find_by_id(triplet_id)
        if triplet is None:
            warning("Triplet %r not found in any store", triplet_id)
        return triplet


def all_with_csv_triplets(answers, resolver):
    """Return copies of answers with missing triplets filled in by resolver.

    Answers whose triplet cannot be found are kept with triplet None.
    """
    resolved = []
    for answer in answers:
        answer = copy.copy(answer)
        if answer.triplet is None:
            answer.triplet = resolver.resolve(answer.triplet_id)
        resolved.append(answer)
    return resolved
