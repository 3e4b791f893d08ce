# -*- coding: utf-8 -*-

"""
Dependency relation labels.

Two concerns live here. The label registry documents the Universal Dependencies relation labels
(plus ROOT) for display: a readable name, a description, an example, and a color. The label
heuristic names the relation of an arc from the tags at its ends and the side of the head the
dependent is on. Labeling is a separate stage from arc selection; the parsers never consult it.

Reference: Universal Dependencies v2 guidelines, https://universaldependencies.org/u/dep/
"""

from typing import List, NamedTuple

from arcparse.tokens import ROOT_POS

__author__ = 'ArcParse Contributors'
__all__ = [
    'LabelInfo',
    'DEFAULT_COLOR',
    'DEPENDENCY_LABELS',
    'describe_label',
    'get_label_color',
    'all_labels',
    'assign_label',
]


LabelInfo = NamedTuple('LabelInfo', [('display_name', str), ('description', str),
                                     ('example', str), ('color_hex', str)])

DEFAULT_COLOR = '#95A5A6'

DEPENDENCY_LABELS = {
    # Core dependents of clausal predicates
    'nsubj': LabelInfo(
        'Nominal Subject',
        'A nominal subject is a noun phrase which is the syntactic subject of a clause. The '
        'subject typically performs the action described by the verb.',
        'The cat [nsubj] sleeps.',
        '#FF6B6B'),
    'nsubj:pass': LabelInfo(
        'Passive Nominal Subject',
        'A passive nominal subject is a noun phrase which is the syntactic subject of a passive '
        'clause.',
        'The ball was caught [nsubj:pass] by John.',
        '#FF8787'),
    'obj': LabelInfo(
        'Direct Object',
        'The direct object of a verb is the noun phrase that denotes the entity acted upon.',
        'She reads the book [obj].',
        '#4ECDC4'),
    'iobj': LabelInfo(
        'Indirect Object',
        'The indirect object of a verb is the noun phrase that denotes the recipient or '
        'beneficiary of the action.',
        'She gave him [iobj] a gift.',
        '#45B7D1'),
    'csubj': LabelInfo(
        'Clausal Subject',
        'A clausal subject is a clause which is the syntactic subject of another clause.',
        'What she said [csubj] makes sense.',
        '#FF9F9F'),
    'ccomp': LabelInfo(
        'Clausal Complement',
        'A clausal complement is a dependent clause that is a core argument.',
        'He says [ccomp] that you like to swim.',
        '#96CEB4'),
    'xcomp': LabelInfo(
        'Open Clausal Complement',
        'An open clausal complement is a predicative or clausal complement without its own '
        'subject.',
        'She wants to go [xcomp].',
        '#88D8B0'),

    # Non-core dependents of clausal predicates
    'obl': LabelInfo(
        'Oblique Nominal',
        'An oblique nominal is a noun phrase that functions as a non-core argument or adjunct.',
        'She lives in Paris [obl].',
        '#FFEAA7'),
    'vocative': LabelInfo(
        'Vocative',
        'The vocative relation is used to mark a dialogue participant addressed in text.',
        'John [vocative], come here!',
        '#DFE6E9'),
    'expl': LabelInfo(
        'Expletive',
        'An expletive is a word that fills the syntactic position of subject or object but has '
        'no semantic content.',
        'There [expl] is a problem.',
        '#B2BEC3'),
    'dislocated': LabelInfo(
        'Dislocated',
        'The dislocated relation is used for fronted or postposed elements that are not core '
        'arguments.',
        'John [dislocated], I saw him yesterday.',
        '#A29BFE'),
    'advcl': LabelInfo(
        'Adverbial Clause Modifier',
        'An adverbial clause modifier is a clause which modifies a verb or other predicate.',
        'She left when he arrived [advcl].',
        '#FD79A8'),
    'advmod': LabelInfo(
        'Adverbial Modifier',
        'An adverbial modifier is a word that modifies a verb or other predicate.',
        'He runs very [advmod] fast.',
        '#FDCB6E'),
    'discourse': LabelInfo(
        'Discourse Element',
        'Discourse elements are interjections and other particles that are not clearly linked '
        'to the structure of the sentence.',
        'Well [discourse], that was unexpected.',
        '#E17055'),
    'aux': LabelInfo(
        'Auxiliary',
        'An auxiliary is a function word that accompanies the main verb of a verb phrase.',
        'She has [aux] gone.',
        '#74B9FF'),
    'aux:pass': LabelInfo(
        'Passive Auxiliary',
        'A passive auxiliary is an auxiliary used in a passive construction.',
        'The book was [aux:pass] read.',
        '#A29BFE'),
    'cop': LabelInfo(
        'Copula',
        'A copula is a linking verb that links a subject to its complement.',
        'She is [cop] happy.',
        '#6C5CE7'),
    'mark': LabelInfo(
        'Marker',
        'A marker is a word that introduces a finite clause subordinate to another clause.',
        'She says that [mark] you are right.',
        '#00B894'),

    # Nominal dependents
    'nmod': LabelInfo(
        'Nominal Modifier',
        'A nominal modifier is a nominal dependent of another noun or noun phrase.',
        'The office of the chair [nmod].',
        '#00CEC9'),
    'appos': LabelInfo(
        'Appositional Modifier',
        'An appositional modifier is a nominal that is in apposition to another nominal.',
        'Sam, my brother [appos], arrived.',
        '#81ECEC'),
    'nummod': LabelInfo(
        'Numeric Modifier',
        'A numeric modifier is a numeral that modifies a noun.',
        'I have three [nummod] cats.',
        '#55EFC4'),
    'acl': LabelInfo(
        'Clausal Modifier of Noun',
        'A clausal modifier of a noun is a clause that modifies a noun.',
        'The man who left [acl] was my friend.',
        '#00D2D3'),
    'amod': LabelInfo(
        'Adjectival Modifier',
        'An adjectival modifier is an adjective or adjective phrase that modifies a noun.',
        'The big [amod] house.',
        '#FEA47F'),
    'det': LabelInfo(
        'Determiner',
        'A determiner is a word that modifies a noun or noun phrase and expresses definiteness, '
        'quantity, or other characteristics.',
        'The [det] book is interesting.',
        '#F8B195'),
    'clf': LabelInfo(
        'Classifier',
        'A classifier is a word that appears in various languages to classify the noun by its '
        'shape or function.',
        'Three head [clf] of cattle.',
        '#C44569'),
    'case': LabelInfo(
        'Case Marking',
        'Case marking is typically a preposition or postposition that marks the relationship of '
        'a nominal to another word.',
        'He lives in [case] Paris.',
        '#F8EFBA'),

    # Coordination
    'conj': LabelInfo(
        'Conjunct',
        'A conjunct is the relation between two elements connected by a coordinating '
        'conjunction.',
        'Bill is honest and [conj] reliable.',
        '#58B19F'),
    'cc': LabelInfo(
        'Coordinating Conjunction',
        'A coordinating conjunction is a word that links words or larger constituents without '
        'subordinating one to the other.',
        'Bill is honest and [cc] reliable.',
        '#2C7873'),

    # Multiword expressions
    'fixed': LabelInfo(
        'Fixed Multiword Expression',
        'A fixed multiword expression is a group of words that together function as a single '
        'unit.',
        'As well as [fixed].',
        '#D6A2E8'),
    'flat': LabelInfo(
        'Flat Multiword Expression',
        'A flat multiword expression is used for names and other expressions where the internal '
        'structure is not clear.',
        'New York [flat] City.',
        '#B8E994'),
    'compound': LabelInfo(
        'Compound',
        'A compound is a word that combines with another word to form a single semantic unit.',
        'Phone book [compound].',
        '#78E08F'),

    # Loose joining relations
    'list': LabelInfo(
        'List',
        'The list relation is used for items in a list.',
        'Ingredients: 1. flour [list] 2. sugar [list].',
        '#B8B8B8'),
    'parataxis': LabelInfo(
        'Parataxis',
        'Parataxis is a relation between two clauses that are loosely connected.',
        'The dog barked; the cat meowed [parataxis].',
        '#95A5A6'),
    'orphan': LabelInfo(
        'Orphan',
        'The orphan relation is used for words that appear in coordination structures but lack '
        'an overt coordinator.',
        'Mary won silver and John bronze [orphan].',
        '#7F8C8D'),
    'goeswith': LabelInfo(
        'Goes With',
        'The goeswith relation is used for words that are split across tokens.',
        'He under [goeswith] stands the problem.',
        '#34495E'),
    'reparandum': LabelInfo(
        'Reparandum',
        'A reparandum is an overridden or repeated word in speech.',
        'Go to the righ- [reparandum] left.',
        '#2C3E50'),

    # Special
    'punct': LabelInfo(
        'Punctuation',
        'This is used for punctuation marks.',
        'Hello [punct] .',
        '#636E72'),
    'ROOT': LabelInfo(
        'Root',
        'The root of a sentence is the main verb or predicate that governs the entire sentence '
        'structure.',
        'ROOT -> The cat sleeps [ROOT].',
        '#2D3436'),
    'dep': LabelInfo(
        'Unspecified Dependency',
        'A dependency that cannot be determined with certainty.',
        'Various unclear relationships.',
        DEFAULT_COLOR),
}


def describe_label(label: str) -> LabelInfo:
    """Look up the display information for a relation label. Unrecognized labels get a generic
    entry that names the label itself."""
    info = DEPENDENCY_LABELS.get(label)
    if info is not None:
        return info
    return LabelInfo(str(label), 'Unknown dependency relation.', 'N/A', DEFAULT_COLOR)


def get_label_color(label: str) -> str:
    return describe_label(label).color_hex


def all_labels() -> List[str]:
    return list(DEPENDENCY_LABELS)


_NOMINALS = frozenset(['Noun', 'Pronoun'])


def assign_label(head_pos: str, dep_pos: str, relative_position: int) -> str:
    """
    Name the relation of an arc.

    The label depends only on the head's tag, the dependent's tag, and the dependent's position
    relative to its head (negative when the dependent comes first), so that the same arc gets
    the same label whichever algorithm built it.
    """
    if head_pos == ROOT_POS:
        return 'ROOT'
    before = relative_position < 0
    if dep_pos == 'Punctuation':
        return 'punct'
    if dep_pos == 'Determiner':
        return 'det'
    if dep_pos == 'Conjunction':
        return 'cc'
    if dep_pos == 'Adverb':
        return 'advmod'
    if dep_pos == 'Adjective':
        if head_pos in _NOMINALS:
            return 'amod'
        if head_pos == 'Verb':
            return 'xcomp'
        return 'dep'
    if dep_pos == 'Preposition':
        if head_pos in _NOMINALS:
            return 'case' if before else 'nmod'
        if head_pos == 'Verb':
            return 'obl'
        return 'dep'
    if dep_pos in _NOMINALS:
        if head_pos == 'Verb':
            return 'nsubj' if before else 'obj'
        if head_pos in _NOMINALS:
            return 'compound' if before else 'nmod'
        if head_pos == 'Preposition':
            return 'obl'
        return 'dep'
    if dep_pos == 'Verb':
        if head_pos == 'Verb':
            return 'aux' if before else 'xcomp'
        if head_pos in _NOMINALS:
            return 'acl'
        return 'dep'
    return 'dep'
