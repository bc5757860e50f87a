"""
RDF terms after the rdf.js.org Data Model, with the couple of tweaks rdflib.js
expects (notably a placeholder value on the default graph).

Terms are immutable tuples compared by content, and never equal across kinds:

    >>> NamedNode('https://example.org/#me') == NamedNode('https://example.org/#me')
    True
    >>> NamedNode('x') == Variable('x')
    False
    >>> NamedNode('x').equals(None)
    False

A literal gets its datatype from how it is made:

    >>> Literal('chat').datatype == XSD_STRING
    True
    >>> Literal('chat', 'fr').datatype == RDF_LANGSTRING
    True
    >>> Literal('1', NamedNode(f'{XSD}integer')).language
    ''

Every default graph is the same node:

    >>> DefaultGraph('urn:x-local:graph').equals(DefaultGraph())
    True

Quads take the default graph unless told otherwise:

    >>> s, p, o, g = Quad(BlankNode('b0'), NamedNode(f'{RDF}type'), NamedNode('urn:x:T'))
    >>> g.termType
    'DefaultGraph'

And any term has a stable string key:

    >>> term_id(Literal('chat', 'fr'))
    '"chat"@fr'
    >>> term_id(Quad(BlankNode('b0'), NamedNode('urn:x:p'), Literal('1')))
    '<<_:b0 <urn:x:p> "1">>'
"""

from __future__ import annotations

from typing import Literal as Exactly
from typing import Iterable, NamedTuple

type TermType = Exactly['NamedNode', 'Literal', 'Variable', 'BlankNode', 'DefaultGraph', 'Quad']
NAMED_NODE: TermType = 'NamedNode'
LITERAL: TermType = 'Literal'
VARIABLE: TermType = 'Variable'
BLANK_NODE: TermType = 'BlankNode'
DEFAULT_GRAPH: TermType = 'DefaultGraph'
QUAD: TermType = 'Quad'

type Term = ValueTerm | Quad
type ValueTerm = NamedNode | Literal | Variable | BlankNode | DefaultGraph

type Subject = BlankNode | NamedNode
type Predicate = NamedNode
type Object = BlankNode | NamedNode | Literal
type Graph = BlankNode | NamedNode | DefaultGraph

# What rdflib.js names its default graph.
DEFAULT_GRAPH_VALUE = 'chrome:theSession'


def _same(self, other: object) -> bool:
    if not isinstance(other, tuple):
        return NotImplemented
    return type(self) is type(other) and tuple.__eq__(self, other)


def _not_same(self, other: object) -> bool:
    same = self.__eq__(other)
    return same if same is NotImplemented else not same


def _hash(self) -> int:
    return hash((self.termType, *self))


def _equals(self, other: Term | None) -> bool:
    return other is not None and self == other


def _structural[T: type](cls: T) -> T:
    # A NamedTuple cannot take a mixin base, so the shared methods are set
    # here. Plain tuple comparison would let NamedNode('x') equal Variable('x').
    for name, method in (
        ('__eq__', _same),
        ('__ne__', _not_same),
        ('__hash__', _hash),
        ('equals', _equals),
    ):
        if name not in vars(cls):
            setattr(cls, name, method)
    return cls


@_structural
class NamedNode(NamedTuple):
    value: str

    termType = NAMED_NODE


@_structural
class BlankNode(NamedTuple):
    """
    A blank node with a local label. Labels are meant to come from
    ``DataFactory.blankNode``, which is what keeps them from colliding.
    """

    value: str

    termType = BLANK_NODE


def _blank_node(label: str) -> BlankNode:
    # For DataFactory only: the labels it passes are its own or vetted.
    return BlankNode(label)


@_structural
class Variable(NamedTuple):
    value: str

    termType = VARIABLE


@_structural
class DefaultGraph(NamedTuple):
    value: str = DEFAULT_GRAPH_VALUE

    termType = DEFAULT_GRAPH

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, tuple):
            return NotImplemented
        return isinstance(other, DefaultGraph)

    def __hash__(self) -> int:
        return hash(DEFAULT_GRAPH)


class _LiteralFields(NamedTuple):
    value: str
    language: str
    datatype: NamedNode


@_structural
class Literal(_LiteralFields):
    """
    A literal is either a language-tagged string (with datatype
    ``rdf:langString``) or a typed value (``xsd:string`` unless given). The
    second argument picks which:

        >>> Literal('x')
        Literal(value='x', language='', datatype=NamedNode(value='http://www.w3.org/2001/XMLSchema#string'))
        >>> Literal('x', 'en').language
        'en'
        >>> Literal('x', '').datatype == XSD_STRING
        True
        >>> Literal('x', 1)
        Traceback (most recent call last):
        ...
        TypeError: Literal language or datatype must be a str or a NamedNode, got 1

    Replacing fields goes through the same rules, so a language always
    brings ``rdf:langString`` with it:

        >>> Literal('x', NamedNode(f'{XSD}integer'))._replace(language='en').datatype == RDF_LANGSTRING
        True
    """

    __slots__ = ()

    termType = LITERAL

    def __new__(cls, value: str, tag: str | NamedNode | None = None) -> Literal:
        match tag:
            case None | '':
                return super().__new__(cls, value, '', XSD_STRING)
            case NamedNode():
                return super().__new__(cls, value, '', tag)
            case str():
                return super().__new__(cls, value, tag, RDF_LANGSTRING)

        raise TypeError(
            f"Literal language or datatype must be a str or a NamedNode, got {tag!r}"
        )

    def __getnewargs__(self) -> tuple[str, str | NamedNode]:
        return (self.value, self.language or self.datatype)

    @classmethod
    def _make(cls, iterable: Iterable) -> Literal:
        # Also serves _replace.
        value, language, datatype = iterable
        if not isinstance(datatype, NamedNode):
            raise TypeError(f"Literal datatype must be a NamedNode, got {datatype!r}")
        return cls(value, language or datatype)


class _QuadFields(NamedTuple):
    subject: Subject
    predicate: Predicate
    object: Object
    graph: Graph


@_structural
class Quad(_QuadFields):
    __slots__ = ()

    termType = QUAD

    def __new__(
        cls,
        subject: Subject,
        predicate: Predicate,
        object: Object,
        graph: Graph | None = None,
    ) -> Quad:
        if graph is None:
            graph = DefaultGraph()

        _check_position('subject', subject, (BlankNode, NamedNode))
        _check_position('predicate', predicate, (NamedNode,))
        _check_position('object', object, (BlankNode, NamedNode, Literal))
        _check_position('graph', graph, (BlankNode, NamedNode, DefaultGraph))

        return super().__new__(cls, subject, predicate, object, graph)

    @classmethod
    def _make(cls, iterable: Iterable) -> Quad:
        subject, predicate, object, graph = iterable
        return cls(subject, predicate, object, graph)


def _check_position(position: str, term: object, kinds: tuple[type, ...]) -> None:
    if not isinstance(term, kinds):
        allowed = ' or '.join(kind.__name__ for kind in kinds)
        raise TypeError(f"Quad {position} must be a {allowed}, got {term!r}")


RDF = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
RDF_LANGSTRING = NamedNode(f"{RDF}langString")

XSD = "http://www.w3.org/2001/XMLSchema#"
XSD_STRING = NamedNode(f"{XSD}string")


def is_named_node(term: object) -> bool:
    return isinstance(term, NamedNode)


def is_blank_node(term: object) -> bool:
    return isinstance(term, BlankNode)


def is_literal(term: object) -> bool:
    return isinstance(term, Literal)


def is_variable(term: object) -> bool:
    return isinstance(term, Variable)


def is_default_graph(term: object) -> bool:
    return isinstance(term, DefaultGraph)


def is_quad(term: object) -> bool:
    return isinstance(term, Quad)


_ESCAPES = str.maketrans({
    '\\': '\\\\',
    '"': '\\"',
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
})

# Names, IRIs and tags end at a space or '>', so those may not appear raw.
_NAME_ESCAPES = str.maketrans({
    '\\': '\\u005C',
    ' ': '\\u0020',
    '<': '\\u003C',
    '>': '\\u003E',
})


def _name(string: str) -> str:
    return string.translate(_NAME_ESCAPES)


def term_id(term: Term) -> str:
    """
    A string key for ``term``, built from its content only, so equal terms
    give equal keys. Quads nest as ``<<s p o g>>``, leaving out a default
    graph.
    """
    match term:
        case NamedNode(iri):
            return f"<{_name(iri)}>"
        case BlankNode(label):
            return f"_:{_name(label)}"
        case Literal(lexical, language, datatype):
            quoted = f'"{lexical.translate(_ESCAPES)}"'
            if language:
                return f"{quoted}@{_name(language)}"
            if datatype == XSD_STRING:
                return quoted
            return f"{quoted}^^<{_name(datatype.value)}>"
        case Variable(name):
            return f"?{_name(name)}"
        case DefaultGraph():
            return ''
        case Quad(s, p, o, g):
            parts = [term_id(s), term_id(p), term_id(o)]
            if not isinstance(g, DefaultGraph):
                parts.append(term_id(g))
            return f"<<{' '.join(parts)}>>"

    raise TypeError(f"Not an RDF term: {term!r}")
