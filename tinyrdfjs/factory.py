"""
The rdf.js ``DataFactory``. Method names follow the rdf.js interface so the
factory can be handed to code written against it.

    >>> factory = create()
    >>> factory.blankNode()
    BlankNode(value='2')
    >>> factory.blankNode()
    BlankNode(value='3')
    >>> factory.blankNode('b0')
    BlankNode(value='b0')

Labels that look like IRI fragments would be confused with named nodes, so
they are replaced by a generated one:

    >>> factory.blankNode('https://example.org/#it')
    BlankNode(value='4')

    >>> factory.literal('chat', 'fr').datatype == RDF_LANGSTRING
    True
    >>> factory.quad(factory.blankNode('b0'), factory.namedNode('urn:x:p'),
    ...              factory.literal('1')).graph == factory.defaultGraph()
    True
"""

from __future__ import annotations

from threading import Lock

from .terms import (RDF_LANGSTRING, BlankNode, DefaultGraph, Graph, Literal,
                    NamedNode, Object, Predicate, Quad, Subject, Term,
                    Variable, _blank_node, term_id)
from .utils import log

DEFAULT_BNODE_START = 1

_DIGITS = '0123456789abcdefghijklmnopqrstuvwxyz'


def to_base36(number: int) -> str:
    """
    >>> to_base36(0)
    '0'
    >>> to_base36(35)
    'z'
    >>> to_base36(36)
    '10'
    >>> to_base36(-71)
    '-1z'
    >>> int(to_base36(2 ** 100), 36) == 2 ** 100
    True
    """
    if number < 0:
        return f"-{to_base36(-number)}"

    digits = []
    while True:
        number, digit = divmod(number, 36)
        digits.append(_DIGITS[digit])
        if number == 0:
            break

    return ''.join(reversed(digits))


class DataFactory:
    """
    Makes terms. Each factory owns a blank node counter, so labels it
    generates never repeat; two factories started from the same value can
    still hand out the same labels.
    """

    _bnode_counter: int
    _bnode_lock: Lock

    def __init__(self, bnode_start: int = DEFAULT_BNODE_START):
        self._bnode_counter = bnode_start
        self._bnode_lock = Lock()
        log.debug("data factory created", bnode_start=bnode_start)

    def _new_bnode_id(self) -> str:
        with self._bnode_lock:
            self._bnode_counter += 1
            count = self._bnode_counter
        return to_base36(count)

    def skip_to(self, count: int) -> None:
        """
        Move the blank node counter up to ``count``, e.g. past labels already
        used in a loaded store. It never moves back.
        """
        with self._bnode_lock:
            if count <= self._bnode_counter:
                return
            self._bnode_counter = count
        log.debug("blank node counter advanced", count=count)

    def namedNode(self, value: str) -> NamedNode:
        return NamedNode(value)

    def literal(self, value: str, language_or_datatype: str | NamedNode | None = None) -> Literal:
        return Literal(value, language_or_datatype)

    def variable(self, name: str) -> Variable:
        return Variable(name)

    def blankNode(self, label: str | None = None) -> BlankNode:
        if label is None:
            return _blank_node(self._new_bnode_id())

        if '#' in label:
            bnode_id = self._new_bnode_id()
            log.debug("blank node label replaced", label=label, replacement=bnode_id)
            return _blank_node(bnode_id)

        return _blank_node(label)

    def quad(
        self,
        subject: Subject,
        predicate: Predicate,
        object: Object,
        graph: Graph | None = None,
    ) -> Quad:
        if graph is None:
            graph = self.defaultGraph()
        return Quad(subject, predicate, object, graph)

    def defaultGraph(self) -> DefaultGraph:
        return DefaultGraph()

    def id(self, term: Term) -> str:
        return term_id(term)


def create() -> DataFactory:
    return DataFactory(DEFAULT_BNODE_START)
