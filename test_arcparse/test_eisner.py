"""Test suite for Eisner's algorithm."""

import itertools
import math
import random
from unittest import TestCase

import numpy as np

from arcparse import eisner
from arcparse.tokens import COARSE_TAGS, Token
from arcparse.trees import DependencyTree, arcs_cross


def iter_trees(size, projective_only=False):
    """Enumerate every single-rooted tree over positions 1..size - 1, position 0 being ROOT."""
    for choice in itertools.product(range(size), repeat=size - 1):
        heads = (None,) + choice
        if any(head == position for position, head in enumerate(heads)):
            continue
        if heads.count(0) != 1:
            continue
        if not all(_reaches_root(heads, position) for position in range(1, size)):
            continue
        if projective_only:
            arcs = [(heads[position], position) for position in range(1, size)]
            if any(arcs_cross(first, second) for first, second in itertools.combinations(arcs, 2)):
                continue
        yield heads


def _reaches_root(heads, position):
    seen = set()
    while position != 0:
        if position in seen:
            return False
        seen.add(position)
        position = heads[position]
    return True


def total(matrix, heads):
    return sum(matrix[head][position] for position, head in enumerate(heads) if head is not None)


def random_matrix(rng, size):
    matrix = [[-math.inf] * size for _ in range(size)]
    for head in range(size):
        for dependent in range(1, size):
            if head != dependent:
                matrix[head][dependent] = round(rng.uniform(0.1, 1.0), 3)
    return matrix


class TestEisner(TestCase):

    def test_empty_and_single(self):
        self.assertEqual(eisner.decode([[-math.inf]]), [None])
        self.assertEqual(eisner.decode([[-math.inf, 0.3], [-math.inf, -math.inf]]), [None, 0])

    def test_simple_sentence(self):
        tokens = [Token('The', 'Determiner', 0), Token('cat', 'Noun', 1),
                  Token('sleeps', 'Verb', 2)]
        tree = eisner.eisner_tree(tokens)
        self.assertEqual(tree.heads, (1, 2, -1))
        self.assertTrue(tree.is_well_formed())

    def test_matches_exhaustive_projective_search(self):
        rng = random.Random(1234)
        for size in range(2, 6):
            for _ in range(15):
                matrix = random_matrix(rng, size)
                heads = eisner.decode(matrix)
                best = max(total(matrix, candidate)
                           for candidate in iter_trees(size, projective_only=True))
                self.assertAlmostEqual(total(matrix, heads), best)
                tree = DependencyTree.from_decoded(heads, matrix)
                self.assertTrue(tree.is_well_formed())
                self.assertTrue(tree.is_projective())
                self.assertEqual(len(tree.root_children()), 1)

    def test_projective_on_random_sentences(self):
        rng = random.Random(99)
        tags = sorted(COARSE_TAGS)
        for length in range(1, 12):
            tokens = [Token('w%d' % index, rng.choice(tags), index) for index in range(length)]
            tree = eisner.eisner_tree(tokens)
            self.assertEqual(len(list(tree.arcs())), length)
            self.assertTrue(tree.is_well_formed())
            self.assertTrue(tree.is_projective())
            self.assertEqual(len(tree.root_children()), 1)

    def test_ties_prefer_narrower_left_split(self):
        # Every arc scores the same, so every split ties and the narrowest left parts win.
        size = 4
        matrix = [[-math.inf if dependent in (0, head) else 1.0 for dependent in range(size)]
                  for head in range(size)]
        self.assertEqual(eisner.decode(matrix), eisner.decode(matrix))
        self.assertEqual(eisner.decode(matrix), [None, 0, 1, 2])

    def test_array_input(self):
        rng = random.Random(5)
        matrix = random_matrix(rng, 6)
        heads = eisner.decode(np.array(matrix))
        self.assertEqual(heads, eisner.decode(matrix))
        self.assertTrue(all(type(head) is int for head in heads[1:]))
