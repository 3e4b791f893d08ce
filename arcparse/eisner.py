# -*- coding: utf-8 -*-

"""
Eisner's algorithm: exact search for the best projective dependency tree.

The chart covers positions 0..n of the score matrix, position 0 being ROOT. Four kinds of
span are kept for every (s, t) with s < t, in arrays indexed by (s, t, direction):

* incomplete RIGHT: the arc s -> t plus everything between s and t
* incomplete LEFT: the arc t -> s plus everything between s and t
* complete RIGHT: a finished subtree spanning s..t, headed at s
* complete LEFT: a finished subtree spanning s..t, headed at t

Spans are filled by increasing width in O(n^3) time, and a parallel table of split points lets
the winning tree be read back out in O(n). ROOT may take only a single child, so the arc from
ROOT is only ever built over an empty left part.

Reference: Eisner, J. (1996). Three new probabilistic models for dependency parsing: An
exploration. In Proceedings of COLING 1996.
"""

from typing import List, Optional, Sequence

import numpy as np

from arcparse.scoring import ScoringFunction, score_matrix
from arcparse.tokens import Token
from arcparse.trees import DependencyTree

__author__ = 'ArcParse Contributors'
__all__ = [
    'LEFT',
    'RIGHT',
    'decode',
    'eisner_tree',
]


LEFT = 0
"""Direction index for spans headed at their right end."""
RIGHT = 1
"""Direction index for spans headed at their left end."""

_COMPLETE = 0
_INCOMPLETE = 1


def decode(matrix: Sequence[Sequence[float]]) -> List[Optional[int]]:
    """Find the best single-rooted projective tree over a score matrix.

    Args:
        matrix: A square matrix with matrix[h, d] the score of the arc h -> d. Position 0 is
            ROOT.

    Returns:
        The head position of every position, with None for ROOT itself. When two splits of a
        span score the same, the one with the narrower left part wins.
    """
    scores = np.asarray(matrix, dtype=float)
    size = len(scores)
    heads = [None] * size  # type: List[Optional[int]]
    if size < 2:
        return heads

    complete = np.full((size, size, 2), -np.inf)
    incomplete = np.full((size, size, 2), -np.inf)
    complete_split = np.full((size, size, 2), -1, dtype=int)
    incomplete_split = np.full((size, size, 2), -1, dtype=int)
    complete[np.arange(size), np.arange(size), :] = 0.0

    for width in range(1, size):
        for s in range(size - width):
            t = s + width

            # Incomplete spans: two facing complete halves joined by a new arc between the ends.
            # Splits r run from s to t - 1, except that ROOT only joins over an empty left part.
            stop = t if s else 1
            totals = complete[s, s:stop, RIGHT] + complete[s + 1:stop + 1, t, LEFT]
            r = int(np.argmax(totals))
            incomplete[s, t, RIGHT] = totals[r] + scores[s, t]
            incomplete_split[s, t, RIGHT] = s + r
            if s:
                incomplete[s, t, LEFT] = totals[r] + scores[t, s]
                incomplete_split[s, t, LEFT] = s + r

            # Complete spans headed at t: a complete part, then an incomplete part ending at t.
            if s:
                totals = complete[s, s:t, LEFT] + incomplete[s:t, t, LEFT]
                r = int(np.argmax(totals))
                complete[s, t, LEFT] = totals[r]
                complete_split[s, t, LEFT] = s + r

            # Complete spans headed at s: an incomplete part from s, then a complete part.
            totals = incomplete[s, s + 1:t + 1, RIGHT] + complete[s + 1:t + 1, t, RIGHT]
            r = int(np.argmax(totals))
            complete[s, t, RIGHT] = totals[r]
            complete_split[s, t, RIGHT] = s + 1 + r

    pending = [(0, size - 1, _COMPLETE, RIGHT)]
    while pending:
        s, t, kind, direction = pending.pop()
        if s == t:
            continue
        if kind == _INCOMPLETE:
            r = int(incomplete_split[s, t, direction])
            if direction == RIGHT:
                heads[t] = s
            else:
                heads[s] = t
            pending.append((s, r, _COMPLETE, RIGHT))
            pending.append((r + 1, t, _COMPLETE, LEFT))
        else:
            r = int(complete_split[s, t, direction])
            if direction == RIGHT:
                pending.append((s, r, _INCOMPLETE, RIGHT))
                pending.append((r, t, _COMPLETE, RIGHT))
            else:
                pending.append((s, r, _COMPLETE, LEFT))
                pending.append((r, t, _INCOMPLETE, LEFT))
    return heads


def eisner_tree(tokens: Sequence[Token], scorer: ScoringFunction = None) -> DependencyTree:
    """Parse a normalized token sequence into its best projective dependency tree."""
    matrix = score_matrix(tokens, scorer)
    return DependencyTree.from_decoded(decode(matrix), matrix)
