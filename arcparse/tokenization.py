# -*- coding: utf-8 -*-

"""Reading and writing tagged text of the form 'The/Determiner cat/Noun sleeps/Verb'."""

from typing import Iterable, Tuple

from arcparse.tokens import UNKNOWN_POS, Token, normalize_pos

__author__ = 'ArcParse Contributors'
__all__ = [
    'TAG_SEPARATOR',
    'tokenize_tagged',
    'format_tagged',
]


TAG_SEPARATOR = '/'


def tokenize_tagged(text: str) -> Tuple[Token, ...]:
    """Split whitespace-separated word/Tag pairs into tokens. The tag follows the last separator,
    so words may themselves contain one ('and/or/Conjunction'). Words without a tag are
    Unknown."""
    tokens = []
    for index, item in enumerate(text.split()):
        word, separator, tag = item.rpartition(TAG_SEPARATOR)
        if not separator or not word:
            tokens.append(Token(item, UNKNOWN_POS, index))
        else:
            tokens.append(Token(word, normalize_pos(tag), index))
    return tuple(tokens)


def format_tagged(tokens: Iterable[Token]) -> str:
    """The inverse of tokenize_tagged, for tokens whose words contain no whitespace."""
    return ' '.join(token.text + TAG_SEPARATOR + token.pos for token in tokens)
