# -*- coding: utf-8 -*-

"""Arc scoring: the fixed affinity table shared by all parsing algorithms."""

import math
from typing import Callable, Dict, Mapping, Optional, Sequence, Tuple, TYPE_CHECKING

import numpy as np

from arcparse.tokens import ROOT_POS, Token

if TYPE_CHECKING:
    from arcparse.config import ScorerConfig

__author__ = 'ArcParse Contributors'
__all__ = [
    'ScoringFunction',
    'ScoreMatrix',
    'DEFAULT_AFFINITIES',
    'DEFAULT_ROOT_AFFINITIES',
    'DEFAULT_BASELINE',
    'DEFAULT_ROOT_BASELINE',
    'DEFAULT_DISTANCE_DECAY',
    'ArcScorer',
    'DEFAULT_SCORER',
    'score_matrix',
]


ScoringFunction = Callable[[str, str, int], float]
ScoreMatrix = np.ndarray

# Affinities are (left, right) pairs: the first applies when the dependent precedes its head, the
# second when it follows.
DEFAULT_AFFINITIES = {
    'Verb': {
        'Noun': (0.9, 0.85),
        'Pronoun': (0.9, 0.8),
        'Adverb': (0.8, 0.8),
        'Adjective': (0.5, 0.7),
        'Preposition': (0.55, 0.7),
        'Conjunction': (0.45, 0.6),
        'Verb': (0.4, 0.6),
        'Determiner': (0.2, 0.2),
        'Punctuation': (0.3, 0.5),
    },
    'Noun': {
        'Determiner': (0.95, 0.1),
        'Adjective': (0.85, 0.4),
        'Preposition': (0.75, 0.5),
        'Conjunction': (0.6, 0.3),
        'Noun': (0.5, 0.4),
        'Verb': (0.2, 0.4),
        'Pronoun': (0.3, 0.3),
        'Punctuation': (0.2, 0.3),
    },
    'Pronoun': {
        'Preposition': (0.5, 0.3),
        'Adjective': (0.3, 0.3),
        'Determiner': (0.3, 0.1),
    },
    'Adjective': {
        'Adverb': (0.7, 0.4),
        'Preposition': (0.2, 0.4),
        'Noun': (0.2, 0.3),
        'Conjunction': (0.3, 0.2),
    },
    'Adverb': {
        'Adverb': (0.5, 0.3),
    },
    'Preposition': {
        'Noun': (0.1, 0.3),
        'Determiner': (0.1, 0.2),
    },
}  # type: Dict[str, Dict[str, Tuple[float, float]]]

DEFAULT_ROOT_AFFINITIES = {
    'Verb': 0.5,
    'Noun': 0.25,
    'Pronoun': 0.2,
    'Adjective': 0.15,
}  # type: Dict[str, float]

DEFAULT_BASELINE = 0.1
DEFAULT_ROOT_BASELINE = 0.05
DEFAULT_DISTANCE_DECAY = 5.0


class ArcScorer:
    """
    Pure, total scoring function for candidate dependency arcs.

    A scorer maps a (head tag, dependent tag, directional distance) triple to a positive real
    compatibility score. The distance is the dependent's index minus the head's index, so a
    negative distance means the dependent precedes its head. Token-to-token scores are the tag
    pair's affinity for that side, damped by exp(-|distance| / decay) so that nearer attachments
    win when all else is equal. Arcs out of ROOT are scored from a separate, lower table and are
    not damped, since ROOT has no surface position.

    Pairs the table does not mention receive a small positive baseline, which keeps the candidate
    graph complete. Scorers never change after construction, and calling one is safe from any
    number of threads.
    """

    def __init__(self, affinities: Mapping[str, Mapping[str, Tuple[float, float]]] = None,
                 root_affinities: Mapping[str, float] = None,
                 baseline: float = DEFAULT_BASELINE,
                 root_baseline: float = DEFAULT_ROOT_BASELINE,
                 distance_decay: float = DEFAULT_DISTANCE_DECAY):
        if affinities is None:
            affinities = DEFAULT_AFFINITIES
        if root_affinities is None:
            root_affinities = DEFAULT_ROOT_AFFINITIES
        if distance_decay <= 0:
            raise ValueError("Distance decay must be positive.", distance_decay)
        if baseline <= 0 or root_baseline <= 0:
            raise ValueError("Baseline scores must be positive.", baseline, root_baseline)
        self._affinities = {
            head_pos: {dep_pos: (float(left), float(right))
                       for dep_pos, (left, right) in dependents.items()}
            for head_pos, dependents in affinities.items()
        }
        for dependents in self._affinities.values():
            for pair in dependents.values():
                if min(pair) <= 0:
                    raise ValueError("Affinities must be positive.", pair)
        self._root_affinities = {dep_pos: float(value) for dep_pos, value in root_affinities.items()}
        if any(value <= 0 for value in self._root_affinities.values()):
            raise ValueError("Root affinities must be positive.", self._root_affinities)
        self._baseline = float(baseline)
        self._root_baseline = float(root_baseline)
        self._distance_decay = float(distance_decay)

    @classmethod
    def from_config(cls, config_info: 'ScorerConfig') -> 'ArcScorer':
        """Create a scorer from the settings loaded from a configuration file."""
        return cls(config_info.affinities, config_info.root_affinities, config_info.baseline,
                   config_info.root_baseline, config_info.distance_decay)

    @property
    def baseline(self) -> float:
        """The affinity of token pairs the table does not mention."""
        return self._baseline

    @property
    def root_baseline(self) -> float:
        """The score of arcs from ROOT to tags the root table does not mention."""
        return self._root_baseline

    @property
    def distance_decay(self) -> float:
        """The length scale of the locality penalty."""
        return self._distance_decay

    def affinity(self, head_pos: str, dep_pos: str, distance: int) -> float:
        """The undamped affinity of the tag pair for the side of the head the dependent is on."""
        if head_pos == ROOT_POS:
            return self._root_affinities.get(dep_pos, self._root_baseline)
        pair = self._affinities.get(head_pos, {}).get(dep_pos)
        if pair is None:
            return self._baseline
        left, right = pair
        return left if distance < 0 else right

    def distance_penalty(self, distance: int) -> float:
        """A multiplier in (0, 1] that shrinks as the distance grows in either direction."""
        return math.exp(-abs(distance) / self._distance_decay)

    def score(self, head_pos: str, dep_pos: str, distance: int) -> float:
        """Score the arc from a head with the given tag to a dependent with the given tag."""
        if head_pos == ROOT_POS:
            return self.affinity(head_pos, dep_pos, distance)
        return self.affinity(head_pos, dep_pos, distance) * self.distance_penalty(distance)

    __call__ = score

    def __repr__(self) -> str:
        return '%s(baseline=%r, root_baseline=%r, distance_decay=%r)' % (
            type(self).__name__, self._baseline, self._root_baseline, self._distance_decay)


DEFAULT_SCORER = ArcScorer()


def score_matrix(tokens: Sequence[Token], scorer: Optional[ScoringFunction] = None) -> ScoreMatrix:
    """
    Precompute the score of every candidate arc of a sentence.

    Row and column 0 stand for ROOT and row/column k + 1 for the token at index k, so that
    matrix[h, d] is the score of the arc from h to d. Arcs into ROOT and self-loops are scored
    negative infinity, which no algorithm will ever select.
    """
    if scorer is None:
        scorer = DEFAULT_SCORER
    size = len(tokens) + 1
    tags = [ROOT_POS] + [token.pos for token in tokens]
    matrix = np.full((size, size), -np.inf)
    for head in range(size):
        for dependent in range(1, size):
            if head != dependent:
                matrix[head, dependent] = float(scorer(tags[head], tags[dependent], dependent - head))
    return matrix
