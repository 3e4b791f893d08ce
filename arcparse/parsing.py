# -*- coding: utf-8 -*-

"""
Public parsing entry points.

Every entry point accepts an ordered list of tokens, each a {'text': ..., 'pos': ...} mapping,
a Token, or a (text, pos) pair, and returns a ParseResult. None, an empty list, or anything that
is not a list at all yields the empty result; parsing never raises.
"""

import logging
from typing import Any, Callable, Dict, List, Sequence

from arcparse.arc_standard import arc_standard_tree
from arcparse.chu_liu_edmonds import chu_liu_edmonds_tree
from arcparse.eisner import eisner_tree
from arcparse.graphs import EMPTY_RESULT, ParseResult, build_parse_result
from arcparse.scoring import ScoringFunction
from arcparse.tokens import Token, normalize_tokens
from arcparse.trees import DependencyTree

__author__ = 'ArcParse Contributors'
__all__ = [
    'EISNER',
    'CHU_LIU_EDMONDS',
    'ARC_STANDARD',
    'DEFAULT_ALGORITHM',
    'TreeFunction',
    'ALGORITHMS',
    'available_algorithms',
    'resolve_algorithm',
    'eisner_parse',
    'chu_liu_edmonds_parse',
    'arc_standard_parse',
    'parse',
    'Parser',
]


LOGGER = logging.getLogger(__name__)

EISNER = 'eisner'
CHU_LIU_EDMONDS = 'chu-liu'
ARC_STANDARD = 'arc-standard'
DEFAULT_ALGORITHM = EISNER

TreeFunction = Callable[[Sequence[Token], ScoringFunction], DependencyTree]

ALGORITHMS = {
    EISNER: eisner_tree,
    CHU_LIU_EDMONDS: chu_liu_edmonds_tree,
    ARC_STANDARD: arc_standard_tree,
}  # type: Dict[str, TreeFunction]

_ALIASES = {
    'chu-liu-edmonds': CHU_LIU_EDMONDS,
    'chuliu': CHU_LIU_EDMONDS,
    'edmonds': CHU_LIU_EDMONDS,
    'mst': CHU_LIU_EDMONDS,
    'arcstandard': ARC_STANDARD,
    'transition': ARC_STANDARD,
}


def available_algorithms() -> List[str]:
    return list(ALGORITHMS)


def resolve_algorithm(name: Any) -> str:
    """Return the canonical name of an algorithm. Unknown names resolve to the default algorithm,
    with a warning."""
    if isinstance(name, str):
        key = name.strip().lower().replace('_', '-')
        key = _ALIASES.get(key, key)
        if key in ALGORITHMS:
            return key
    LOGGER.warning("Unknown parsing algorithm %r; using %s.", name, DEFAULT_ALGORITHM)
    return DEFAULT_ALGORITHM


def _run(tree_function: TreeFunction, tokens: Any, scorer: ScoringFunction) -> ParseResult:
    normalized = normalize_tokens(tokens)
    if not normalized:
        return EMPTY_RESULT
    tree = tree_function(normalized, scorer)
    return build_parse_result(normalized, tree)


def eisner_parse(tokens: Any, scorer: ScoringFunction = None) -> ParseResult:
    """Parse with Eisner's algorithm: the best projective tree, with exactly one arc per token."""
    return _run(eisner_tree, tokens, scorer)


def chu_liu_edmonds_parse(tokens: Any, scorer: ScoringFunction = None) -> ParseResult:
    """Parse with the Chu-Liu/Edmonds algorithm: the best tree, crossing arcs allowed, with
    exactly one arc per token."""
    return _run(chu_liu_edmonds_tree, tokens, scorer)


def arc_standard_parse(tokens: Any, scorer: ScoringFunction = None) -> ParseResult:
    """Parse with the greedy arc-standard transition system. At most one arc per token."""
    return _run(arc_standard_tree, tokens, scorer)


def parse(tokens: Any, algorithm: str = DEFAULT_ALGORITHM,
          scorer: ScoringFunction = None) -> ParseResult:
    """Parse with the named algorithm."""
    return _run(ALGORITHMS[resolve_algorithm(algorithm)], tokens, scorer)


class Parser:
    """A parsing algorithm bound to a scorer."""

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM, scorer: ScoringFunction = None):
        self._algorithm = resolve_algorithm(algorithm)
        self._scorer = scorer

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def scorer(self) -> ScoringFunction:
        return self._scorer

    def parse_tree(self, tokens: Any) -> DependencyTree:
        """Parse into a bare head assignment, without building display nodes."""
        normalized = normalize_tokens(tokens)
        if not normalized:
            return DependencyTree((), ())
        return ALGORITHMS[self._algorithm](normalized, self._scorer)

    def parse(self, tokens: Any) -> ParseResult:
        return _run(ALGORITHMS[self._algorithm], tokens, self._scorer)

    __call__ = parse
