# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
import operator

from .diff_format import DiffOp
from .log import MyersDiffFormatError


__all__ = ["patch"]


def patch(obj, diff, compare=operator.__eq__):
    """Apply a line-by-line diff to the sequence obj.

    The diff is replayed in lockstep with obj: matches and deletions
    consume the next element of obj, insertions take their value from the diff.
    Returns the patched sequence as a new list.
    """
    # The patched sequence to build and return
    newobj = []
    # Index into obj, the next item to take
    take = 0
    n = len(obj)
    for e in diff:
        op = e.op
        if op == DiffOp.INSERT:
            newobj.append(e.value)
            continue
        elif op not in (DiffOp.MATCH, DiffOp.DELETE):
            raise MyersDiffFormatError("Invalid op {}.".format(op))

        if take >= n:
            raise MyersDiffFormatError(
                "Diff entry '{}' runs past the end of the sequence.".format(op))
        if not compare(obj[take], e.value):
            raise MyersDiffFormatError(
                "Diff entry '{}' expected {!r} at index {}, found {!r}.".format(
                    op, e.value, take, obj[take]))
        if op == DiffOp.MATCH:
            newobj.append(copy.deepcopy(obj[take]))
        take += 1

    if take != n:
        raise MyersDiffFormatError(
            "Diff does not account for the last {} elements of the sequence.".format(n - take))
    return newobj
