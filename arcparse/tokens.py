# -*- coding: utf-8 -*-

"""Token, arc, and ROOT data types shared by every parsing algorithm."""

import logging
from typing import NamedTuple, Tuple, Any, Mapping, Optional

__author__ = 'ArcParse Contributors'
__all__ = [
    'ROOT_INDEX',
    'ROOT_ID',
    'ROOT_POS',
    'UNKNOWN_POS',
    'COARSE_TAGS',
    'Token',
    'Arc',
    'normalize_pos',
    'normalize_token',
    'normalize_tokens',
]


LOGGER = logging.getLogger(__name__)

ROOT_INDEX = -1
ROOT_ID = 'ROOT'
ROOT_POS = 'ROOT'
UNKNOWN_POS = 'Unknown'

COARSE_TAGS = frozenset([
    'Noun',
    'Verb',
    'Adjective',
    'Adverb',
    'Determiner',
    'Pronoun',
    'Preposition',
    'Conjunction',
    'Punctuation',
    UNKNOWN_POS,
])

# Universal Dependencies and a few common spellings, mapped onto the coarse tag set.
_TAG_ALIASES = {
    'noun': 'Noun',
    'propn': 'Noun',
    'verb': 'Verb',
    'aux': 'Verb',
    'adj': 'Adjective',
    'adv': 'Adverb',
    'det': 'Determiner',
    'pron': 'Pronoun',
    'adp': 'Preposition',
    'prep': 'Preposition',
    'cconj': 'Conjunction',
    'sconj': 'Conjunction',
    'conj': 'Conjunction',
    'punct': 'Punctuation',
}
_TAG_ALIASES.update((tag.lower(), tag) for tag in COARSE_TAGS)


Token = NamedTuple('Token', [('text', str), ('pos', str), ('index', int)])
Token.__doc__ = """An immutable tagged word at a 0-based position in its sentence."""

Arc = NamedTuple('Arc', [('head', int), ('dependent', int), ('score', float)])
Arc.__doc__ = """A directed, scored head -> dependent relation. A head of ROOT_INDEX is the ROOT."""


def normalize_pos(tag: Any) -> str:
    """Map a part-of-speech tag onto the coarse tag set. Anything unrecognized becomes Unknown."""
    if not isinstance(tag, str):
        return UNKNOWN_POS
    return _TAG_ALIASES.get(tag.strip().lower(), UNKNOWN_POS)


def _split_raw_token(raw: Any) -> Tuple[Any, Any]:
    if isinstance(raw, str):
        return raw, UNKNOWN_POS
    if isinstance(raw, Token):
        return raw.text, raw.pos
    if isinstance(raw, Mapping):
        return raw.get('text'), raw.get('pos')
    if isinstance(raw, (tuple, list)) and len(raw) == 2:
        return raw[0], raw[1]
    return None, None


def normalize_token(raw: Any, index: int) -> Token:
    """Build a Token from a mapping, a Token, a (text, pos) pair, or a bare untagged word.

    A token whose text is not a string keeps a string rendering of that text but is demoted to
    the Unknown tag, and a missing tag also becomes Unknown, so that one bad token never prevents
    the rest of the sentence from being parsed.
    """
    text, pos = _split_raw_token(raw)
    if not isinstance(text, str):
        LOGGER.debug("Token %d has non-string text %r; tagging it as %s.", index, text, UNKNOWN_POS)
        return Token('' if text is None else str(text), UNKNOWN_POS, index)
    normalized = normalize_pos(pos)
    if normalized == UNKNOWN_POS and pos != UNKNOWN_POS:
        LOGGER.debug("Token %d (%r) has unrecognized tag %r.", index, text, pos)
    return Token(text, normalized, index)


def normalize_tokens(raw_tokens: Any) -> Optional[Tuple[Token, ...]]:
    """Convert caller input into a tuple of Tokens, reindexed by position.

    Returns None when the input is not a list or tuple at all, which callers treat the same way as
    an empty sentence.
    """
    if raw_tokens is None:
        return None
    if not isinstance(raw_tokens, (list, tuple)):
        LOGGER.warning("Expected a list of tokens, got %s; treating it as empty.",
                       type(raw_tokens).__name__)
        return None
    return tuple(normalize_token(raw, index) for index, raw in enumerate(raw_tokens))
