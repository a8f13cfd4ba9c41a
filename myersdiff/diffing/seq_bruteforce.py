# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""
Expensive O(NM) dynamic programming reference, used to cross-check the
Myers diff on small inputs.
"""

import operator

from ..diff_format import op_match, op_insert, op_delete

__all__ = ["bruteforce_cost_table", "bruteforce_edit_distance", "diff_sequence_bruteforce"]


def bruteforce_cost_table(A, B, compare=operator.__eq__):
    """Table C where C[i][j] is the fewest inserts and deletes turning A[i:] into B[j:]."""
    N, M = len(A), len(B)
    C = [[0]*(M+1) for i in range(N+1)]
    for i in range(N, -1, -1):
        for j in range(M, -1, -1):
            if i == N or j == M:
                C[i][j] = (N - i) + (M - j)
            elif compare(A[i], B[j]):
                C[i][j] = C[i+1][j+1]
            else:
                C[i][j] = 1 + min(C[i+1][j], C[i][j+1])
    return C


def bruteforce_edit_distance(A, B, compare=operator.__eq__):
    "Length of the shortest insert/delete-only edit script turning A into B."
    return bruteforce_cost_table(A, B, compare)[0][0]


def diff_sequence_bruteforce(A, B, compare=operator.__eq__):
    """Compute a minimal diff of A and B by walking the cost table forward.

    Deletes are preferred over inserts when both are optimal.
    """
    C = bruteforce_cost_table(A, B, compare)
    N, M = len(A), len(B)
    diff = []
    i = j = 0
    while i < N or j < M:
        if i < N and j < M and compare(A[i], B[j]):
            diff.append(op_match(A[i]))
            i += 1
            j += 1
        elif i < N and (j == M or C[i+1][j] <= C[i][j+1]):
            diff.append(op_delete(A[i]))
            i += 1
        else:
            diff.append(op_insert(B[j]))
            j += 1
    return diff
