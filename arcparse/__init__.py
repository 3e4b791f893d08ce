# -*- coding: utf-8 -*-

"""
ArcParse
========
Deterministic dependency parsing over part-of-speech tagged sentences.

MIT License (http://opensource.org/licenses/MIT)

ArcParse connects every word of a pre-tagged sentence to exactly one governing head, or to a
synthetic ROOT, using one of three interchangeable algorithms: Eisner's dynamic program over span
intervals for exact projective trees, the Chu-Liu/Edmonds maximum spanning arborescence search for
exact non-projective trees, and a greedy arc-standard transition system. All three draw their arc
scores from the same fixed affinity table over coarse part-of-speech tags, so their outputs are
directly comparable. Parses come back as labeled node/edge graphs ready for display.
"""


__author__ = 'ArcParse Contributors'
__copyright__ = "Copyright (c) 2026, ArcParse Contributors"
__credits__ = ['ArcParse Contributors']
__license__ = 'MIT'
__version__ = '1.0'
__maintainer__ = 'ArcParse Contributors'
__email__ = 'arcparse@users.noreply.github.com'
__status__ = 'Production'

__all__ = [
    '__author__',
    '__copyright__',
    '__credits__',
    '__license__',
    '__version__',
    '__maintainer__',
    '__email__',
    '__status__',
]
