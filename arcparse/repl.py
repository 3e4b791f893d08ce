import cmd
import os
from typing import Optional

from arcparse.benchmarking import Benchmark
from arcparse.config import ScorerConfig
from arcparse.exceptions import BenchmarkError, ConfigError
from arcparse.labels import all_labels, describe_label
from arcparse.parsing import DEFAULT_ALGORITHM, Parser, available_algorithms, resolve_algorithm
from arcparse.scoring import ArcScorer
from arcparse.tokenization import tokenize_tagged

__author__ = 'ArcParse Contributors'
__all__ = [
    'ParserCmd',
    'repl',
]


class ParserCmd(cmd.Cmd):
    """Interactive shell for parsing tagged text, e.g. 'The/Determiner cat/Noun sleeps/Verb'."""

    def __init__(self, algorithm: str = None, scorer: ArcScorer = None, stdin=None, stdout=None):
        cmd.Cmd.__init__(self, stdin=stdin, stdout=stdout)
        self.prompt = '% '
        self._scorer = scorer
        self._parser = Parser(algorithm or DEFAULT_ALGORITHM, scorer)
        self._last_result = None

    @property
    def parser(self) -> Parser:
        return self._parser

    @property
    def last_result(self):
        return self._last_result

    def _print(self, *items) -> None:
        print(*items, file=self.stdout)

    def postcmd(self, stop, line):
        # Each command's output ends with one blank separator line.
        self._print('')
        return stop

    def emptyline(self):
        # A blank line is a no-op; cmd.Cmd would otherwise re-run the last command.
        return None

    def default(self, line):
        # Anything that isn't a command is read as tagged text to parse.
        return self.do_parse(line)

    def do_quit(self, line):
        """Exit the parser shell."""
        if line:
            self._print("'quit' command does not accept arguments.")
            return None
        return True

    def do_exit(self, line):
        """Alias for quit."""
        return self.do_quit(line)

    def do_EOF(self, line):
        """Exit on end of input."""
        return True

    def do_cls(self, line):
        """Clear the terminal."""
        os.system('cls' if os.name == 'nt' else 'clear')

    def do_algorithm(self, line):
        """Show or set the parsing algorithm: algorithm [eisner|chu-liu|arc-standard]"""
        line = line.strip()
        if line:
            self._parser = Parser(resolve_algorithm(line), self._scorer)
        self._print("Algorithm: " + self._parser.algorithm)
        self._print("Available: " + ', '.join(available_algorithms()))

    def do_config(self, line):
        """Load arc scoring settings from an INI file: config <path>"""
        path = line.strip()
        if not path:
            self._print("Usage: config <path>")
            return
        try:
            self._scorer = ArcScorer.from_config(ScorerConfig(path))
        except (OSError, ConfigError, ValueError) as exc:
            self._print("Could not load scoring configuration: " + str(exc))
            return
        self._parser = Parser(self._parser.algorithm, self._scorer)
        self._print("Loaded scoring configuration from " + path)

    def do_parse(self, line):
        """Parse a tagged sentence: parse The/Determiner cat/Noun sleeps/Verb"""
        tokens = tokenize_tagged(line)
        if not tokens:
            self._print("Nothing to parse.")
            return
        self._last_result = self._parser.parse(tokens)
        self._print(self._last_result)

    def do_compare(self, line):
        """Parse a tagged sentence with every algorithm."""
        tokens = tokenize_tagged(line)
        if not tokens:
            self._print("Nothing to parse.")
            return
        for algorithm in available_algorithms():
            result = Parser(algorithm, self._scorer).parse(tokens)
            total = sum(edge.weight for edge in result.edges)
            self._print('%s (%d arcs, total score %.3f):' % (algorithm, len(result.edges), total))
            self._print(result)
            self._print('')

    def do_label(self, line):
        """Describe a dependency label: label nsubj"""
        label = line.strip()
        if not label:
            self._print(', '.join(all_labels()))
            return
        info = describe_label(label)
        self._print('%s (%s) %s' % (label, info.display_name, info.color_hex))
        self._print(info.description)
        self._print('Example: ' + info.example)

    def do_benchmark(self, line):
        """Score the current parser against a benchmark file: benchmark <path>"""
        path = line.strip()
        if not path:
            self._print("Usage: benchmark <path>")
            return
        try:
            benchmark = Benchmark.load(path)
        except (OSError, BenchmarkError) as exc:
            self._print("Could not load benchmark: " + str(exc))
            return
        if not benchmark.samples:
            self._print("No benchmarking samples.")
            return
        failures, score = benchmark.test_and_score(self._parser)
        for failure in failures:
            self._print(failure.input)
            self._print('  parsed: ' + ' '.join(str(head) for head in failure.output))
            self._print('  gold:   ' + ' '.join(str(head) for head in failure.target))
        self._print("Samples Evaluated: " + str(len(benchmark)))
        self._print("Exact Matches: " + str(len(benchmark) - len(failures)))
        self._print("Attachment Score: " + str(round(100 * score, 1)) + "%")


def repl(algorithm: Optional[str] = None, scorer: ArcScorer = None):
    parser_cmd = ParserCmd(algorithm, scorer)
    print('')
    parser_cmd.cmdloop()
