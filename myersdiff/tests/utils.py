# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from myersdiff import patch, diff
from myersdiff.diff_format import DiffOp, is_valid_diff


def replay_script(script, A, B):
    """Rebuild B by walking an edit script in lockstep over A and B.

    Checks on the way that matched elements are equal.
    """
    result = []
    i = j = 0
    for op in script:
        if op == DiffOp.MATCH:
            assert A[i] == B[j]
            result.append(A[i])
            i += 1
            j += 1
        elif op == DiffOp.INSERT:
            result.append(B[j])
            j += 1
        else:
            assert op == DiffOp.DELETE
            i += 1
    assert i == len(A)
    assert j == len(B)
    return result


def check_diff_and_patch(a, b):
    "Check that patch(a, diff(a,b)) reproduces b."
    d = diff(a, b)
    assert is_valid_diff(d)
    assert patch(a, d) == b


def check_symmetric_diff_and_patch(a, b):
    "Check that patch(a, diff(a,b)) reproduces b and vice versa."
    check_diff_and_patch(a, b)
    check_diff_and_patch(b, a)
