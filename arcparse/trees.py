# -*- coding: utf-8 -*-

"""
Dependency tree head assignments.

A dependency tree is stored as a flat head assignment: for each token index, the index of its
head, ROOT_INDEX for a token attached directly to ROOT, or None for a token the (greedy)
algorithm left unattached. Arc scores are kept alongside in a parallel sequence. This is the
internal representation every algorithm produces; the graphs module turns it into display nodes
and edges.
"""

from typing import Iterator, List, Optional, Sequence, Tuple

from arcparse.tokens import ROOT_INDEX, Arc

__author__ = 'ArcParse Contributors'
__all__ = [
    'arcs_cross',
    'DependencyTree',
]


def arcs_cross(first: Tuple[int, int], second: Tuple[int, int]) -> bool:
    """Return whether two (head, dependent) arcs cross when drawn above the sentence. ROOT is laid
    out at its virtual index, to the left of every token."""
    left1, right1 = sorted(first)
    left2, right2 = sorted(second)
    return left1 < left2 < right1 < right2 or left2 < left1 < right2 < right1


class DependencyTree:
    """An immutable head assignment over the tokens of one sentence."""

    @classmethod
    def from_arcs(cls, size: int, arcs: Sequence[Arc]) -> 'DependencyTree':
        """Build a tree over a sentence of the given size from a collection of arcs. Tokens no arc
        points to are left unattached."""
        heads = [None] * size  # type: List[Optional[int]]
        scores = [0.0] * size
        for arc in arcs:
            heads[arc.dependent] = arc.head
            scores[arc.dependent] = arc.score
        return cls(heads, scores)

    @classmethod
    def from_decoded(cls, decoded_heads: Sequence[Optional[int]],
                     matrix: Sequence[Sequence[float]]) -> 'DependencyTree':
        """Build a tree from heads decoded over a score matrix, where position 0 is ROOT and
        position k + 1 is the token at index k. The entry for position 0 is ignored."""
        heads = []  # type: List[Optional[int]]
        scores = []  # type: List[float]
        for position in range(1, len(decoded_heads)):
            head = decoded_heads[position]
            if head is None:
                heads.append(None)
                scores.append(0.0)
            else:
                heads.append(head - 1)
                scores.append(matrix[head][position])
        return cls(heads, scores)

    def __init__(self, heads: Sequence[Optional[int]], scores: Sequence[float]):
        if len(heads) != len(scores):
            raise ValueError("Heads and scores must have the same length.", len(heads), len(scores))
        self._heads = tuple(heads)
        self._scores = tuple(float(score) for score in scores)

    @property
    def heads(self) -> Tuple[Optional[int], ...]:
        """The head of each token, by token index."""
        return self._heads

    @property
    def scores(self) -> Tuple[float, ...]:
        """The score of each token's incoming arc, by token index."""
        return self._scores

    @property
    def total_score(self) -> float:
        """The sum of the scores of all attached arcs."""
        return sum(score for head, score in zip(self._heads, self._scores) if head is not None)

    def __len__(self) -> int:
        return len(self._heads)

    def __eq__(self, other: 'DependencyTree') -> bool:
        if not isinstance(other, DependencyTree):
            return NotImplemented
        return self._heads == other._heads and self._scores == other._scores

    def __ne__(self, other: 'DependencyTree') -> bool:
        if not isinstance(other, DependencyTree):
            return NotImplemented
        return not self == other

    def __hash__(self) -> int:
        return hash((self._heads, self._scores))

    def __repr__(self) -> str:
        return type(self).__name__ + "(" + repr(list(self._heads)) + ", " + repr(list(self._scores)) + ")"

    def __iter__(self) -> Iterator[Arc]:
        return self.arcs()

    def arcs(self) -> Iterator[Arc]:
        """Iterate over the attached arcs in dependent order."""
        for dependent, (head, score) in enumerate(zip(self._heads, self._scores)):
            if head is not None:
                yield Arc(head, dependent, score)

    def root_children(self) -> List[int]:
        """The indices of the tokens attached directly to ROOT."""
        return [dependent for dependent, head in enumerate(self._heads) if head == ROOT_INDEX]

    def is_complete(self) -> bool:
        """Whether every token has a head."""
        return all(head is not None for head in self._heads)

    def is_well_formed(self) -> bool:
        """Whether every token is attached and following head links from any token reaches ROOT
        without revisiting a token."""
        if not self.is_complete():
            return False
        for start in range(len(self._heads)):
            visited = set()
            current = start
            while current != ROOT_INDEX:
                if current in visited or not 0 <= current < len(self._heads):
                    return False
                visited.add(current)
                current = self._heads[current]
        return True

    def crossing_arcs(self) -> List[Tuple[Arc, Arc]]:
        """Every pair of attached arcs that cross each other."""
        arcs = list(self.arcs())
        return [(first, second)
                for position, first in enumerate(arcs)
                for second in arcs[position + 1:]
                if arcs_cross((first.head, first.dependent), (second.head, second.dependent))]

    def is_projective(self) -> bool:
        """Whether no two arcs cross."""
        return not self.crossing_arcs()
