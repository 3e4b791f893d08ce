# -*- coding: utf-8 -*-

"""Batchwise parsing of many sentences."""

import logging
from typing import Any, Callable, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from arcparse.graphs import Edge, Node, ParseResult
from arcparse.parsing import DEFAULT_ALGORITHM, Parser
from arcparse.scoring import ScoringFunction
from arcparse.tokenization import tokenize_tagged
from arcparse.tokens import normalize_tokens

__author__ = 'ArcParse Contributors'
__all__ = [
    'DEFAULT_MAX_SAMPLES',
    'DEFAULT_CHUNK_SIZE',
    'SampleResult',
    'BatchResult',
    'ProgressCallback',
    'parse_batch',
]


LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_SAMPLES = 1000
DEFAULT_CHUNK_SIZE = 50

SampleResult = NamedTuple('SampleResult', [('sentence', str), ('result', ParseResult)])
ProgressCallback = Callable[[int], None]


class BatchResult:
    """The parses of a batch of samples. The nodes and edges are those of the first parse."""

    def __init__(self, results: Iterable[SampleResult] = (), algorithm: str = DEFAULT_ALGORITHM):
        self._results = tuple(results)
        self._algorithm = algorithm

    @property
    def results(self) -> Tuple[SampleResult, ...]:
        return self._results

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def total_processed(self) -> int:
        return len(self._results)

    @property
    def sentences(self) -> List[str]:
        return [sample.sentence for sample in self._results]

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return self._results[0].result.nodes if self._results else ()

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._results[0].result.edges if self._results else ()

    def __len__(self) -> int:
        return len(self._results)

    def __bool__(self) -> bool:
        return bool(self._results)

    def __repr__(self) -> str:
        return '%s(%d results, algorithm=%r)' % (type(self).__name__, len(self._results),
                                                 self._algorithm)


def _prepare_sample(sample: Any) -> Optional[Tuple[str, Any]]:
    if isinstance(sample, str):
        tokens = tokenize_tagged(sample)
    else:
        tokens = normalize_tokens(sample)
    if not tokens:
        return None
    return ' '.join(token.text for token in tokens), tokens


def parse_batch(samples: Sequence[Any], algorithm: str = DEFAULT_ALGORITHM,
                max_samples: int = DEFAULT_MAX_SAMPLES,
                on_progress: ProgressCallback = None,
                chunk_size: int = DEFAULT_CHUNK_SIZE,
                scorer: ScoringFunction = None) -> BatchResult:
    """
    Parse up to max_samples samples, each a token list or a tagged string, in chunks.

    Samples with no tokens are skipped. After every chunk but the last, on_progress receives the
    percentage of samples handled so far; it receives 100 once everything is done. Since parses
    are independent of each other, callers with very large batches may split them up and run the
    pieces concurrently.
    """
    parser = Parser(algorithm, scorer)
    if not samples or not isinstance(samples, (list, tuple)):
        return BatchResult((), parser.algorithm)
    chunk_size = max(1, chunk_size)
    selected = samples[:max(0, max_samples)]
    results = []
    for start in range(0, len(selected), chunk_size):
        for sample in selected[start:start + chunk_size]:
            prepared = _prepare_sample(sample)
            if prepared is None:
                continue
            sentence, tokens = prepared
            results.append(SampleResult(sentence, parser.parse(tokens)))
        LOGGER.info("Parsed %d of %d samples with %s.", min(start + chunk_size, len(selected)),
                    len(selected), parser.algorithm)
        if on_progress is not None and start + chunk_size < len(selected):
            on_progress(min(100, int(100 * (start + chunk_size) / len(selected) + 0.5)))
    if on_progress is not None:
        on_progress(100)
    return BatchResult(results, parser.algorithm)
