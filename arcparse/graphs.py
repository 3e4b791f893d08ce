# -*- coding: utf-8 -*-

"""
Display graphs of dependency parses
"""

from typing import NamedTuple, Sequence, Tuple, Optional, Dict, Any, Iterable

try:
    from graphviz import Digraph
except ImportError:
    Digraph = None

from arcparse.labels import assign_label, get_label_color
from arcparse.tokens import ROOT_ID, ROOT_INDEX, ROOT_POS, Token
from arcparse.trees import DependencyTree

__author__ = 'ArcParse Contributors'
__all__ = [
    'Node',
    'Edge',
    'ParseResult',
    'EMPTY_RESULT',
    'node_id',
    'build_parse_result',
]


Node = NamedTuple('Node', [('id', str), ('label', str), ('pos', str), ('value', int)])
Edge = NamedTuple('Edge', [('source', str), ('target', str), ('label', str), ('weight', float),
                           ('color', str)])

ROOT_NODE = Node(ROOT_ID, ROOT_ID, ROOT_POS, 2)


def node_id(token: Token) -> str:
    """The display id of a token's node: its text and index, joined by an underscore."""
    return '%s_%d' % (token.text, token.index)


class ParseResult:
    """The externally visible form of a parse: display nodes, ROOT first, and labeled edges."""

    def __init__(self, nodes: Iterable[Node] = (), edges: Iterable[Edge] = ()):
        self._nodes = tuple(nodes)
        self._edges = tuple(edges)

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return self._nodes

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    def __bool__(self) -> bool:
        return bool(self._nodes)

    def __eq__(self, other: 'ParseResult') -> bool:
        if not isinstance(other, ParseResult):
            return NotImplemented
        return self._nodes == other._nodes and self._edges == other._edges

    def __ne__(self, other: 'ParseResult') -> bool:
        if not isinstance(other, ParseResult):
            return NotImplemented
        return not self == other

    def __hash__(self) -> int:
        return hash((self._nodes, self._edges))

    def __repr__(self) -> str:
        return type(self).__name__ + "(" + repr(self._nodes) + ", " + repr(self._edges) + ")"

    def __str__(self) -> str:
        labels = {node.id: node.label for node in self._nodes}
        lines = []
        for edge in self._edges:
            lines.append('%s -%s-> %s (%.3f)' % (labels.get(edge.source, edge.source), edge.label,
                                                 labels.get(edge.target, edge.target), edge.weight))
        return '\n'.join(lines)

    def get_head(self, target: str) -> Optional[str]:
        """Get the id of the head node of the node with the given id, if it is attached."""
        for edge in self._edges:
            if edge.target == target:
                return edge.source
        return None

    def to_json(self) -> Dict[str, Any]:
        """Returns a JSON-serializable data structure that represents the contents of the graph."""
        return {
            'nodes': [node._asdict() for node in self._nodes],
            'edges': [edge._asdict() for edge in self._edges],
        }

    @classmethod
    def from_json(cls, json_data: Dict[str, Any]) -> 'ParseResult':
        """Constructs a ParseResult from a JSON-serializable data structure produced by
        ParseResult.to_json()."""
        return cls((Node(**node) for node in json_data.get('nodes', ())),
                   (Edge(**edge) for edge in json_data.get('edges', ())))

    def visualize(self, gv_graph: 'Digraph' = None) -> 'Digraph':
        """Draw the parse into a graphviz digraph, creating one if none is given."""
        if gv_graph is None:
            if Digraph is None:
                raise ImportError("Visualization requires the graphviz package. Install it with: "
                                  "pip install \"arcparse[viz]\"")
            gv_graph = Digraph()
        for node in self._nodes:
            if node.id == ROOT_ID:
                gv_graph.node(node.id, ROOT_ID, shape='doublecircle')
            else:
                gv_graph.node(node.id, '%s\n%s' % (node.label, node.pos))
        for edge in self._edges:
            gv_graph.edge(edge.source, edge.target, label=edge.label, color=edge.color)
        return gv_graph


EMPTY_RESULT = ParseResult()


def build_parse_result(tokens: Sequence[Token], tree: DependencyTree) -> ParseResult:
    """Convert a head assignment over the given tokens into display nodes and labeled edges."""
    if not tokens:
        return EMPTY_RESULT
    nodes = [ROOT_NODE]
    nodes.extend(Node(node_id(token), token.text, token.pos, 1) for token in tokens)
    edges = []
    for arc in tree.arcs():
        dependent = tokens[arc.dependent]
        if arc.head == ROOT_INDEX:
            source, head_pos = ROOT_ID, ROOT_POS
        else:
            head = tokens[arc.head]
            source, head_pos = node_id(head), head.pos
        label = assign_label(head_pos, dependent.pos, arc.dependent - arc.head)
        edges.append(Edge(source, node_id(dependent), label, arc.score, get_label_color(label)))
    return ParseResult(nodes, edges)
