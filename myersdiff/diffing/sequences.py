# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import operator

from ..diff_format import DiffOp, op_match, op_insert, op_delete
from .myers import shortest_edit_script
from ..utils import split_lines

__all__ = ["script_to_entries", "diff_sequence", "diff_lines"]


def script_to_entries(script, A, B):
    """Attach the elements of A and B to the ops of an edit script.

    Returns a list of diff entries, one per op in script.
    """
    diff = []
    # i, j = how many elements we have consumed from A and B
    i = 0
    j = 0
    for op in script:
        if op == DiffOp.INSERT:
            diff.append(op_insert(B[j]))
            j += 1
        elif op == DiffOp.DELETE:
            diff.append(op_delete(A[i]))
            i += 1
        elif op == DiffOp.MATCH:
            # A[i] and B[j] compare equal, report the old one
            diff.append(op_match(A[i]))
            i += 1
            j += 1
        else:
            raise RuntimeError("Unknown op {}".format(op))
    return diff


def diff_sequence(a, b, compare=operator.__eq__):
    """Compute a line-by-line diff of two sequences.

    I.e. elements are only compared as a whole, there is no diffing within elements.
    """
    script = shortest_edit_script(a, b, compare)
    return script_to_entries(script, a, b)


def diff_lines(a, b):
    """Do a line-wise diff of two strings.

    Lines are split as in utils.split_lines, on line feeds only. Line endings
    are not part of the compared lines.
    """
    assert isinstance(a, str) and isinstance(b, str), (
        'Arguments need to be string types. Got %r and %r' % (a, b))
    return diff_sequence(split_lines(a), split_lines(b))
