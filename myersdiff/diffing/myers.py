# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""
The greedy shortest edit script algorithm from Fig. 2 of Myers' article
"An O(ND) Difference Algorithm and Its Variations" (1986), with the
search history kept so that the path itself can be recovered.

Coordinates: x, y = edit graph vertex coordinates, meaning how many
elements of A and B respectively have been consumed. Diagonal k = x - y.

A trace is the list of frontiers V_0, ..., V_D, where V_d[d + k] holds the
x coordinate at the end of the furthest reaching d-path on diagonal k.
Each level is its own list of 2d + 1 slots offset by d, rather than one
shared array offset by N + M.
Keeping every frontier costs O(D^2) memory, which for inputs without any
common elements is quadratic in N + M.
"""

import operator

from ..diff_format import DiffOp
from ..log import debug

__all__ = [
    "shortest_edit_trace", "backtrack_edit_script",
    "shortest_edit_script", "edit_distance",
    ]


def alloc_V_array(d):
    # Diagonals -d..d, V[d + k] for diagonal k.
    # Not initializing V with zeros, if the algorithms access uninitialized values that's a bug
    return [None] * (2*d + 1)


def comes_from_above(V, d, k):
    """Whether the furthest reaching d-path on diagonal k extends the (d-1)-path on k+1.

    V is the frontier of level d-1. Coming from diagonal k+1 keeps x and
    increments y, i.e. the edit is an insertion. Ties are resolved toward
    diagonal k-1, a deletion; only a strictly further reaching path on k+1 wins.

    Shared by the forward search and the backtrack, which must agree exactly.
    """
    V0 = d - 1
    return k == -d or (k != d and V[V0+k-1] < V[V0+k+1])


def shortest_edit_trace(A, B, compare=operator.__eq__):
    """Run the greedy forward search of the edit graph of A and B.

    Returns the trace, a list of frontiers for d = 0..D, where D is the
    length of the shortest edit script. The trace is empty when both
    A and B are empty.
    """
    N, M = len(A), len(B)
    MAX = N + M
    trace = []
    if MAX == 0:
        return trace

    # Level 0 has a single diagonal, the common prefix of A and B
    x = 0
    while x < N and x < M and compare(A[x], B[x]):
        x += 1
    trace.append([x])
    if x == N and x == M:
        debug("Sequences are equal, no edits needed")
        return trace

    for D in range(1, MAX+1):
        Vprev = trace[-1]
        V = alloc_V_array(D)
        trace.append(V)
        for k in range(-D, D+1, 2):
            if comes_from_above(Vprev, D, k):
                # Coming from diagonal k+1, the diagonal above k, so keeping x
                x = Vprev[D-1+k+1]
            else:
                # Coming from diagonal k-1, the diagonal to the left of k, so incrementing x
                x = Vprev[D-1+k-1] + 1
            y = x - k
            # Follow the snake along the k-diagonal
            while x < N and y < M and compare(A[x], B[y]):
                x += 1
                y += 1
            # Store x coordinate at end of snake for this k-line
            V[D+k] = x
            if x == N and y == M:
                debug("Found shortest edit script with %d edits", D)
                return trace
    raise RuntimeError("Shortest edit script length exceeds {}.".format(MAX))


def edit_distance(trace):
    "Return the length D of the shortest edit script a trace was searched for."
    return max(len(trace) - 1, 0)


def backtrack_edit_script(A, B, trace):
    """Recover the edit script from a trace made by shortest_edit_trace(A, B).

    Walks from (N, M) back to (0, 0), one level of the trace at a time,
    and returns the list of DiffOp values in forward order. Consuming one
    element of A for each DELETE and MATCH, and one element of B for each
    INSERT and MATCH, transforms A into B.
    """
    if not trace:
        return []
    N, M = len(A), len(B)
    script = []
    x, y = N, M
    for d in range(len(trace) - 1, 0, -1):
        V = trace[d-1]
        k = x - y
        if comes_from_above(V, d, k):
            prev_k = k + 1
        else:
            prev_k = k - 1
        prev_x = V[d-1+prev_k]
        assert prev_x is not None, "trace is missing diagonal %d at level %d" % (prev_k, d-1)
        prev_y = prev_x - prev_k

        # Walk back along the snake
        while x > prev_x and y > prev_y:
            script.append(DiffOp.MATCH)
            x -= 1
            y -= 1

        if x == prev_x:
            script.append(DiffOp.INSERT)
        else:
            script.append(DiffOp.DELETE)

        x, y = prev_x, prev_y

    # Common prefix found before the first edit
    script.extend([DiffOp.MATCH] * trace[0][0])

    script.reverse()
    return script


def shortest_edit_script(A, B, compare=operator.__eq__):
    """Compute the shortest edit script transforming A into B using Myers' O(ND) algorithm.

    Returns a list of DiffOp values, see backtrack_edit_script.
    """
    trace = shortest_edit_trace(A, B, compare)
    return backtrack_edit_script(A, B, trace)
