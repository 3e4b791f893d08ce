# -*- coding: utf-8 -*-

"""
The Chu-Liu/Edmonds algorithm: exact search for the maximum spanning arborescence.

Unlike Eisner's algorithm, the search ranges over every spanning arborescence of the complete
candidate graph, so crossing (non-projective) arcs are produced whenever they score best.

Each round picks the best incoming arc of every node. If that is acyclic it is the answer.
Otherwise the first cycle found scanning nodes left to right is contracted into one node of a
new, smaller integer-indexed graph, whose entering arcs are rescored relative to the cycle arcs
they would displace. The smaller graph is solved recursively and the cycle is then expanded
again, breaking it at the node the chosen entering arc actually reaches.

Reference: Chu, Y. J., & Liu, T. H. (1965). On the shortest arborescence of a directed graph.
Science Sinica, 14, 1396-1400. Edmonds, J. (1967). Optimum branchings. Journal of Research of
the National Bureau of Standards, 71B, 233-240.
"""

from typing import List, Optional, Sequence

import numpy as np
from sortedcontainers import SortedSet

from arcparse.scoring import ScoringFunction, score_matrix
from arcparse.tokens import Token
from arcparse.trees import DependencyTree

__author__ = 'ArcParse Contributors'
__all__ = [
    'find_cycle',
    'max_arborescence',
    'decode',
    'chu_liu_edmonds_tree',
]


def _best_heads(scores: np.ndarray) -> List[Optional[int]]:
    """Greedily pick the best-scoring incoming arc of every non-root node. Ties go to the lower
    head position."""
    candidates = scores.copy()
    np.fill_diagonal(candidates, -np.inf)
    heads = [None]  # type: List[Optional[int]]
    heads.extend(int(head) for head in np.argmax(candidates[:, 1:], axis=0))
    return heads


def find_cycle(heads: Sequence[Optional[int]]) -> Optional[SortedSet]:
    """Return the nodes of the first cycle met when following head links from each node in
    turn, lowest position first, or None if the head links are acyclic."""
    finished = set()
    for start in range(len(heads)):
        path = []
        on_path = set()
        current = start
        while current is not None and current not in finished and current not in on_path:
            path.append(current)
            on_path.add(current)
            current = heads[current]
        if current is not None and current in on_path:
            return SortedSet(path[path.index(current):])
        finished.update(path)
    return None


def max_arborescence(matrix: Sequence[Sequence[float]]) -> List[Optional[int]]:
    """Find the maximum spanning arborescence rooted at position 0.

    Args:
        matrix: A square matrix with matrix[h, d] the score of the arc h -> d. Arcs scored
            negative infinity are absent. Every node other than 0 must have at least one
            finite incoming arc.

    Returns:
        The head position of every position, with None for position 0.
    """
    scores = np.asarray(matrix, dtype=float)
    heads = _best_heads(scores)
    cycle = find_cycle(heads)
    if cycle is None:
        return heads

    # Number the contracted graph: nodes outside the cycle keep their relative order and the
    # cycle becomes a single node at the end.
    members = list(cycle)
    outside = [node for node in range(len(scores)) if node not in cycle]
    contracted = len(outside)
    rows = np.arange(contracted)

    sub_scores = np.full((contracted + 1, contracted + 1), -np.inf)
    sub_scores[:contracted, :contracted] = scores[np.ix_(outside, outside)]
    np.fill_diagonal(sub_scores, -np.inf)

    # An arc into the cycle replaces the cycle arc into the same node, so it is worth its own
    # score less the score of the arc it displaces.
    displaced = scores[[heads[member] for member in members], members]
    gains = scores[np.ix_(outside, members)] - displaced
    targets = np.argmax(gains, axis=1)
    sub_scores[:contracted, contracted] = gains[rows, targets]
    entering = [members[target] for target in targets]

    departures = scores[np.ix_(members, outside)]
    sources = np.argmax(departures, axis=0)
    sub_scores[contracted, :contracted] = departures[sources, rows]
    sub_scores[contracted, 0] = -np.inf
    leaving = [members[source] for source in sources]

    sub_heads = max_arborescence(sub_scores)

    # Expand: arcs between outside nodes carry over, arcs out of the cycle go back to the cycle
    # node they came from, and the one arc into the cycle breaks it at its target.
    result = list(heads)
    for new_dependent, dependent in enumerate(outside):
        if new_dependent == 0:
            continue
        new_head = sub_heads[new_dependent]
        if new_head == contracted:
            result[dependent] = leaving[new_dependent]
        else:
            result[dependent] = outside[new_head]
    new_head = sub_heads[contracted]
    result[entering[new_head]] = outside[new_head]
    return result


def _total(scores: np.ndarray, heads: Sequence[Optional[int]]) -> float:
    dependents = [dependent for dependent, head in enumerate(heads) if head is not None]
    return float(scores[[heads[dependent] for dependent in dependents], dependents].sum())


def decode(matrix: Sequence[Sequence[float]]) -> List[Optional[int]]:
    """Find the best spanning arborescence over a score matrix in which ROOT, at position 0,
    has exactly one child.

    If the unconstrained optimum already gives ROOT a single child it is returned as is.
    Otherwise the search is repeated once for every candidate child, with all other arcs out of
    ROOT removed, and the best result is kept, preferring the lowest-positioned child on ties.
    """
    scores = np.asarray(matrix, dtype=float)
    size = len(scores)
    if size < 2:
        return [None] * size
    heads = max_arborescence(scores)
    if heads.count(0) <= 1:
        return heads

    best, best_heads = -np.inf, heads
    for child in range(1, size):
        restricted = scores.copy()
        restricted[0, 1:] = -np.inf
        restricted[0, child] = scores[0, child]
        candidate = max_arborescence(restricted)
        total = _total(scores, candidate)
        if total > best:
            best, best_heads = total, candidate
    return best_heads


def chu_liu_edmonds_tree(tokens: Sequence[Token], scorer: ScoringFunction = None) -> DependencyTree:
    """Parse a normalized token sequence into its maximum spanning dependency tree."""
    matrix = score_matrix(tokens, scorer)
    return DependencyTree.from_decoded(decode(matrix), matrix)
