"""Test suite for greedy arc-standard transition parsing."""

import math
import random
from unittest import TestCase

import numpy as np

from arcparse import arc_standard
from arcparse.arc_standard import LEFT_ARC, RIGHT_ARC, SHIFT, transitions
from arcparse.parsing import arc_standard_parse
from arcparse.scoring import score_matrix
from arcparse.tokens import COARSE_TAGS, Token


NEG = -math.inf


class TestArcStandard(TestCase):

    def test_simple_sentence(self):
        tokens = [Token('The', 'Determiner', 0), Token('cat', 'Noun', 1),
                  Token('sleeps', 'Verb', 2)]
        taken = transitions(score_matrix(tokens))
        self.assertEqual([transition.action for transition in taken],
                         [SHIFT, SHIFT, LEFT_ARC, SHIFT, LEFT_ARC, RIGHT_ARC])
        self.assertEqual([(transition.head, transition.dependent) for transition in taken
                          if transition.action != SHIFT],
                         [(2, 1), (3, 2), (0, 3)])
        tree = arc_standard.arc_standard_tree(tokens)
        self.assertEqual(tree.heads, (1, 2, -1))

    def test_single_token(self):
        taken = transitions([[NEG, 0.25], [NEG, NEG]])
        self.assertEqual([transition.action for transition in taken], [SHIFT, RIGHT_ARC])
        result = arc_standard_parse([{'text': 'Hello', 'pos': 'Noun'}])
        self.assertEqual(len(result.edges), 1)
        self.assertEqual(result.edges[0].source, 'ROOT')

    def test_transition_bound_and_edge_count(self):
        rng = random.Random(11)
        tags = sorted(COARSE_TAGS)
        for length in range(1, 15):
            tokens = [Token('w%d' % index, rng.choice(tags), index) for index in range(length)]
            taken = transitions(score_matrix(tokens))
            self.assertLessEqual(len(taken), 2 * length)
            self.assertEqual(sum(1 for transition in taken if transition.action == SHIFT), length)
            result = arc_standard_parse(tokens)
            self.assertGreater(len(result.edges), 0)
            self.assertLessEqual(len(result.edges), length)
            targets = [edge.target for edge in result.edges]
            self.assertEqual(len(targets), len(set(targets)))

    def test_root_is_never_a_dependent(self):
        # LEFT-ARC would be the best move if ROOT could be reduced.
        matrix = [
            [NEG, 0.1, 0.1],
            [NEG, NEG, 0.1],
            [NEG, 0.1, NEG],
        ]
        matrix[1][0] = 100.0
        taken = transitions(matrix)
        self.assertTrue(all(transition.dependent != 0 for transition in taken))

    def test_ties_prefer_right_arc(self):
        matrix = [
            [NEG, 1.0, 1.0],
            [NEG, NEG, 1.0],
            [NEG, 1.0, NEG],
        ]
        taken = transitions(matrix)
        # With [ROOT, 1] on the stack, RIGHT-ARC and SHIFT tie and RIGHT-ARC wins.
        self.assertEqual(taken[1].action, RIGHT_ARC)
        self.assertEqual((taken[1].head, taken[1].dependent), (0, 1))

    def test_unscorable_arcs_left_unattached(self):
        matrix = [
            [NEG, NEG, NEG],
            [NEG, NEG, NEG],
            [NEG, NEG, NEG],
        ]
        self.assertEqual(transitions(matrix), [])
        self.assertEqual(arc_standard.decode(matrix), [None, None, None])

    def test_deterministic(self):
        tokens = [('I', 'Pronoun'), ('saw', 'Verb'), ('the', 'Determiner'), ('old', 'Adjective'),
                  ('man', 'Noun'), ('with', 'Preposition'), ('a', 'Determiner'),
                  ('telescope', 'Noun')]
        self.assertEqual(arc_standard_parse(tokens), arc_standard_parse(tokens))

    def test_array_input(self):
        tokens = [Token('Dogs', 'Noun', 0), Token('bark', 'Verb', 1)]
        matrix = score_matrix(tokens)
        self.assertIsInstance(matrix, np.ndarray)
        self.assertEqual(transitions(matrix), transitions(matrix.tolist()))
        self.assertTrue(all(type(transition.value) is float for transition in transitions(matrix)))
