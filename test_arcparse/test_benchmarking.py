"""Test suite for benchmarking parser accuracy."""

import os
import shutil
import tempfile
from unittest import TestCase

import pytest

from arcparse.benchmarking import Benchmark, Failure, attachment_score
from arcparse.exceptions import BenchmarkError, BenchmarkSyntaxError
from arcparse.parsing import Parser


BENCHMARK = """\
# Gold heads, -1 for ROOT
The/Determiner cat/Noun sleeps/Verb\t1 2 -1

dog/Noun barks/Verb\t-1 0
"""


class TestBenchmark(TestCase):

    def setUp(self):
        self.directory = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.directory)

    def write(self, text: str) -> str:
        path = os.path.join(self.directory, 'gold.txt')
        with open(path, 'w', encoding='utf-8') as benchmark_file:
            benchmark_file.write(text)
        return path

    def test_load_and_score(self):
        benchmark = Benchmark.load(self.write(BENCHMARK))
        self.assertEqual(len(benchmark), 2)
        self.assertEqual(benchmark.samples['The/Determiner cat/Noun sleeps/Verb'], (1, 2, -1))

        failures, score = benchmark.test_and_score('eisner')
        self.assertEqual(failures, [Failure('dog/Noun barks/Verb', (1, -1), (-1, 0))])
        self.assertAlmostEqual(score, 0.6)
        self.assertAlmostEqual(benchmark.score(Parser('chu-liu')), 0.6)
        self.assertEqual(list(benchmark.test('arc-standard')), failures)

    def test_callback_and_function(self):
        benchmark = Benchmark({'dog/Noun barks/Verb': (-1, 0)})
        seen = []
        failures, score = benchmark.test_and_score(lambda text: (-1, 0),
                                                   lambda *args: seen.append(args))
        self.assertEqual(failures, [])
        self.assertEqual(score, 1.0)
        self.assertEqual(seen, [('dog/Noun barks/Verb', (-1, 0), (-1, 0))])

    def test_empty(self):
        self.assertEqual(Benchmark().test_and_score('eisner'), ([], 0.0))
        self.assertEqual(Benchmark.load(self.write('# nothing\n')).score('eisner'), 0.0)

    def test_add_and_save(self):
        benchmark = Benchmark()
        benchmark.add('Birds/Noun fly/Verb', [1, -1])
        with self.assertRaises(BenchmarkError) as context:
            benchmark.add('Birds/Noun fly/Verb', [1])
        self.assertEqual((context.exception.expected, context.exception.found), (2, 1))
        with self.assertRaises(BenchmarkError):
            benchmark.add('Birds/Noun fly/Verb', [0, -1])
        path = os.path.join(self.directory, 'saved.txt')
        benchmark.save(path)
        with open(path, encoding='utf-8') as saved_file:
            self.assertEqual(saved_file.read(), 'Birds/Noun fly/Verb\t1 -1\n')
        self.assertEqual(Benchmark.load(path).samples, benchmark.samples)

    def test_syntax_errors(self):
        for text, lineno in (('The/Determiner cat/Noun 1 -1\n', 1),
                             ('# ok\na/Noun b/Verb\t1\n', 2),
                             ('a/Noun b/Verb\tx -1\n', 1),
                             ('a/Noun b/Verb\t1 5\n', 1)):
            with self.assertRaises(BenchmarkSyntaxError) as context:
                Benchmark.load(self.write(text))
            self.assertEqual(context.exception.lineno, lineno)
            self.assertTrue(context.exception.filename.endswith('gold.txt'))
            self.assertIsInstance(context.exception, BenchmarkError)
            self.assertIsInstance(context.exception, SyntaxError)


def test_attachment_score():
    assert attachment_score((1, 2, -1), (1, 2, -1)) == 3
    assert attachment_score((1, -1, None), (1, 2, -1)) == 1
    assert attachment_score((), ()) == 0


def test_located_error_keeps_heads_details():
    error = BenchmarkError("Expected 2 heads, found 1.", '1', 2, 1)
    assert error.args == ("Expected 2 heads, found 1.", '1')
    assert str(error) == "Expected 2 heads, found 1."

    located = error.located('gold.txt', 3, 15, 'a/Noun b/Verb\t1\n')
    assert isinstance(located, BenchmarkSyntaxError)
    assert (located.filename, located.lineno, located.offset) == ('gold.txt', 3, 15)
    assert located.text == 'a/Noun b/Verb\t1\n'
    assert (located.heads_field, located.expected, located.found) == ('1', 2, 1)
    assert str(located) == "Expected 2 heads, found 1. (gold.txt, line 3)"
    assert repr(located) == "BenchmarkSyntaxError('Expected 2 heads, found 1.', 'gold.txt', 3)"


def test_load_reports_heads_field(tmp_path):
    path = tmp_path / 'gold.txt'
    path.write_text('a/Noun b/Verb\t1 0 -1\n', encoding='utf-8')
    with pytest.raises(BenchmarkSyntaxError) as info:
        Benchmark.load(str(path))
    assert info.value.heads_field == '1 0 -1'
    assert (info.value.expected, info.value.found) == (2, 3)
    assert info.value.offset == len('a/Noun b/Verb') + 2
    assert isinstance(info.value.__cause__, BenchmarkError)
