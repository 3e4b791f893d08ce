# -*- coding: utf-8 -*-

"""
Greedy arc-standard transition parsing.

The parser state is a stack of positions (starting with ROOT), a cursor into the remaining input,
and the arcs built so far. Three transitions are available:

* SHIFT moves the next input token onto the stack.
* LEFT-ARC attaches the second stack item to the top item and removes it. The second item may not
  be ROOT.
* RIGHT-ARC attaches the top stack item to the second item and removes it.

At each step every legal transition is valued by the score of the arc it would build; SHIFT is
valued by the best arc that would then be possible between the shifted token and the current
top of the stack. The highest value wins, with ties broken in the order RIGHT-ARC, LEFT-ARC,
SHIFT. Each token is shifted once and reduced at most once, so a sentence of n tokens takes at
most 2n transitions. Decisions are local, so the result is not guaranteed to be the best tree.

Reference: Nivre, J. (2008). Algorithms for deterministic incremental dependency parsing.
Computational Linguistics, 34(4), 513-553.
"""

from typing import List, NamedTuple, Optional, Sequence

import numpy as np

from arcparse.scoring import ScoringFunction, score_matrix
from arcparse.tokens import Token
from arcparse.trees import DependencyTree

__author__ = 'ArcParse Contributors'
__all__ = [
    'SHIFT',
    'LEFT_ARC',
    'RIGHT_ARC',
    'Transition',
    'transitions',
    'decode',
    'arc_standard_tree',
]


SHIFT = 'SHIFT'
LEFT_ARC = 'LEFT-ARC'
RIGHT_ARC = 'RIGHT-ARC'

# Earlier entries win ties.
_PRIORITY = (RIGHT_ARC, LEFT_ARC, SHIFT)

Transition = NamedTuple('Transition', [('action', str), ('head', Optional[int]),
                                       ('dependent', Optional[int]), ('value', float)])


def _shift_value(scores: np.ndarray, top: int, front: int) -> float:
    if top:
        return float(max(scores[top, front], scores[front, top]))
    return float(scores[top, front])


def transitions(matrix: Sequence[Sequence[float]]) -> List[Transition]:
    """Run the transition system over a score matrix (position 0 being ROOT) and return the
    transitions taken, in order. Arc transitions record the arc built; SHIFT records none."""
    scores = np.asarray(matrix, dtype=float)
    size = len(scores)
    stack = [0]
    cursor = 1
    taken = []  # type: List[Transition]
    while cursor < size or len(stack) > 1:
        candidates = {}
        if len(stack) > 1:
            top, second = stack[-1], stack[-2]
            candidates[RIGHT_ARC] = (second, top, float(scores[second, top]))
            if second:
                candidates[LEFT_ARC] = (top, second, float(scores[top, second]))
        if cursor < size:
            candidates[SHIFT] = (None, None, _shift_value(scores, stack[-1], cursor))

        best_action, best_value = None, -np.inf
        for action in _PRIORITY:
            if action in candidates and candidates[action][2] > best_value:
                best_action, best_value = action, candidates[action][2]
        if best_action is None:
            # Only unscorable arcs remain; leave the rest unattached.
            break

        head, dependent, value = candidates[best_action]
        taken.append(Transition(best_action, head, dependent, value))
        if best_action == SHIFT:
            stack.append(cursor)
            cursor += 1
        elif best_action == LEFT_ARC:
            del stack[-2]
        else:
            stack.pop()
    return taken


def decode(matrix: Sequence[Sequence[float]]) -> List[Optional[int]]:
    """Greedily build a tree over a score matrix. Returns the head position of every position,
    None for ROOT and for any token left unattached."""
    heads = [None] * len(matrix)  # type: List[Optional[int]]
    for transition in transitions(matrix):
        if transition.action != SHIFT:
            heads[transition.dependent] = transition.head
    return heads


def arc_standard_tree(tokens: Sequence[Token], scorer: ScoringFunction = None) -> DependencyTree:
    """Parse a normalized token sequence with the greedy arc-standard transition system."""
    matrix = score_matrix(tokens, scorer)
    return DependencyTree.from_decoded(decode(matrix), matrix)
