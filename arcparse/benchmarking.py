"""
arcparse.benchmarking: Benchmarking of parser accuracy against gold head assignments

A benchmark file holds one sample per line: a tagged sentence ('The/Determiner cat/Noun'), a tab,
and the gold head of every token as a space-separated list of 0-based token indices, with -1
standing for ROOT. Blank lines and lines starting with '#' are ignored.
"""

from typing import Callable, Iterator, List, Mapping, NamedTuple, Optional, Sequence, Tuple, Union

from sortedcontainers import SortedDict

from arcparse.exceptions import BenchmarkError, BenchmarkSyntaxError
from arcparse.parsing import Parser
from arcparse.tokenization import tokenize_tagged
from arcparse.tokens import ROOT_INDEX

__author__ = 'ArcParse Contributors'
__all__ = [
    'Heads',
    'Failure',
    'Benchmark',
    'attachment_score',
]


Heads = Tuple[Optional[int], ...]
Failure = NamedTuple('Failure', [('input', str), ('output', Heads), ('target', Heads)])
ParseFunction = Callable[[str], Heads]


def attachment_score(output: Sequence[Optional[int]], target: Sequence[Optional[int]]) -> int:
    """Count the tokens whose predicted head matches the gold head."""
    return sum(1 for predicted, gold in zip(output, target) if predicted == gold)


def _parse_heads(field: str, token_count: int) -> Heads:
    try:
        heads = tuple(int(value) for value in field.split())
    except ValueError as exc:
        raise BenchmarkError("Heads must be whole numbers.", field) from exc
    if len(heads) != token_count:
        raise BenchmarkError("Expected %d heads, found %d." % (token_count, len(heads)), field,
                             token_count, len(heads))
    for dependent, head in enumerate(heads):
        if head == dependent or not ROOT_INDEX <= head < token_count:
            raise BenchmarkError("Token %d has an invalid head %d." % (dependent, head), field)
    return heads


class Benchmark:

    @classmethod
    def load(cls, file_path: str) -> 'Benchmark':
        samples = {}
        with open(file_path, encoding='utf-8') as benchmark_file:
            for lineno, raw_line in enumerate(benchmark_file, 1):
                line = raw_line.strip()
                if not line or line.startswith('#'):
                    continue
                input_val, separator, output_val = line.partition('\t')
                if not separator:
                    raise BenchmarkSyntaxError("Expected a tab between the sentence and its heads.",
                                               file_path, lineno, 1, raw_line)
                try:
                    heads = _parse_heads(output_val, len(tokenize_tagged(input_val)))
                except BenchmarkError as exc:
                    raise exc.located(file_path, lineno, len(input_val) + 2, raw_line) from exc
                samples[input_val.strip()] = heads
        return cls(samples)

    def __init__(self, samples: Mapping[str, Sequence[int]] = None):
        self._samples = SortedDict()
        if samples:
            for input_val, heads in samples.items():
                self._samples[input_val] = tuple(heads)

    @property
    def samples(self) -> SortedDict:
        return self._samples

    def __len__(self) -> int:
        return len(self._samples)

    def add(self, input_val: str, heads: Sequence[int]) -> None:
        self._samples[input_val] = _parse_heads(' '.join(str(head) for head in heads),
                                                len(tokenize_tagged(input_val)))

    def save(self, file_path: str) -> None:
        with open(file_path, 'w', encoding='utf-8') as save_file:
            for input_val, heads in self._samples.items():
                save_file.write(input_val + '\t' + ' '.join(str(head) for head in heads) + '\n')

    @staticmethod
    def _as_function(parser: Union[Parser, str, ParseFunction]) -> ParseFunction:
        if isinstance(parser, str):
            parser = Parser(parser)
        if isinstance(parser, Parser):
            bound = parser

            def function(input_val: str) -> Heads:
                return bound.parse_tree(tokenize_tagged(input_val)).heads

            return function
        return parser

    def test(self, parser: Union[Parser, str, ParseFunction],
             callback: Callable[[str, Heads, Heads], None] = None) -> Iterator[Failure]:
        """Parse every sample, yielding those whose heads do not all match."""
        function = self._as_function(parser)
        for input_val, target in self._samples.items():
            output_val = tuple(function(input_val))
            if output_val != target:
                yield Failure(input_val, output_val, target)
            if callback:
                callback(input_val, output_val, target)

    def score(self, parser: Union[Parser, str, ParseFunction]) -> float:
        """The unlabeled attachment score: the fraction of all tokens given the gold head."""
        return self.test_and_score(parser)[1]

    def test_and_score(self, parser: Union[Parser, str, ParseFunction],
                       callback: Callable[[str, Heads, Heads], None] = None) \
            -> Tuple[List[Failure], float]:
        failures = []
        if not self._samples:
            return failures, 0.0
        function = self._as_function(parser)
        correct = 0
        total = 0
        for input_val, target in self._samples.items():
            output_val = tuple(function(input_val))
            correct += attachment_score(output_val, target)
            total += len(target)
            if output_val != target:
                failures.append(Failure(input_val, output_val, target))
            if callback:
                callback(input_val, output_val, target)
        return failures, (correct / total if total else 0.0)
