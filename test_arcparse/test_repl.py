"""Test suite for the interactive parser shell."""

import io
import os
import shutil
import tempfile
from unittest import TestCase

from arcparse.parsing import ARC_STANDARD, CHU_LIU_EDMONDS, EISNER
from arcparse.repl import ParserCmd


class TestParserCmd(TestCase):

    def setUp(self):
        self.output = io.StringIO()
        self.shell = ParserCmd(stdout=self.output)
        self.directory = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.directory)

    def run_command(self, line: str):
        self.output.seek(0)
        self.output.truncate()
        stop = self.shell.onecmd(line)
        return stop, self.output.getvalue()

    def test_parse(self):
        stop, text = self.run_command('parse The/Determiner cat/Noun sleeps/Verb')
        self.assertFalse(stop)
        self.assertIn('sleeps -nsubj-> cat', text)
        self.assertIn('ROOT -ROOT-> sleeps', text)
        self.assertEqual(len(self.shell.last_result.edges), 3)

        # Unrecognized commands are parsed as sentences.
        stop, text = self.run_command('Dogs/Noun bark/Verb')
        self.assertFalse(stop)
        self.assertIn('bark -nsubj-> Dogs', text)

        _, text = self.run_command('parse')
        self.assertIn('Nothing to parse.', text)

    def test_algorithm(self):
        self.assertEqual(self.shell.parser.algorithm, EISNER)
        _, text = self.run_command('algorithm chu-liu-edmonds')
        self.assertEqual(self.shell.parser.algorithm, CHU_LIU_EDMONDS)
        self.assertIn('Algorithm: chu-liu', text)
        _, text = self.run_command('algorithm')
        self.assertIn(ARC_STANDARD, text)

    def test_compare(self):
        _, text = self.run_command('compare The/Determiner cat/Noun sleeps/Verb')
        for algorithm in (EISNER, CHU_LIU_EDMONDS, ARC_STANDARD):
            self.assertIn(algorithm + ' (3 arcs', text)

    def test_label(self):
        _, text = self.run_command('label nsubj')
        self.assertIn('Nominal Subject', text)
        _, text = self.run_command('label')
        self.assertIn('nsubj', text)
        self.assertIn('punct', text)

    def test_config(self):
        path = os.path.join(self.directory, 'scoring.ini')
        with open(path, 'w', encoding='utf-8') as config_file:
            config_file.write('[Root Affinities]\nNoun = 3.0\n')
        _, text = self.run_command('config ' + path)
        self.assertIn('Loaded', text)
        _, text = self.run_command('parse Dogs/Noun bark/Verb')
        self.assertIn('ROOT -ROOT-> Dogs', text)

        _, text = self.run_command('config ' + os.path.join(self.directory, 'missing.ini'))
        self.assertIn('Could not load scoring configuration', text)

    def test_benchmark(self):
        path = os.path.join(self.directory, 'gold.txt')
        with open(path, 'w', encoding='utf-8') as benchmark_file:
            benchmark_file.write('The/Determiner cat/Noun sleeps/Verb\t1 2 -1\n')
        _, text = self.run_command('benchmark ' + path)
        self.assertIn('Attachment Score: 100.0%', text)

        with open(path, 'w', encoding='utf-8') as benchmark_file:
            benchmark_file.write('no tab here\n')
        _, text = self.run_command('benchmark ' + path)
        self.assertIn('Could not load benchmark', text)

    def test_quit(self):
        self.assertTrue(self.shell.onecmd('quit'))
        self.assertTrue(self.shell.onecmd('exit'))
        self.assertTrue(self.shell.onecmd('EOF'))
        self.assertFalse(self.shell.onecmd('quit now'))

    def test_blank_lines(self):
        self.shell.onecmd('parse Dogs/Noun bark/Verb')
        previous = self.shell.last_result
        stop, text = self.run_command('')
        self.assertIsNone(stop)
        self.assertEqual(text, '')
        self.assertIs(self.shell.last_result, previous)

        self.assertTrue(self.shell.postcmd(True, 'quit'))
        self.assertEqual(self.output.getvalue(), '\n')
