"""
tinyrdfjs: the rdf.js.org Data Model as immutable Python values.

Terms are made through a ``DataFactory``:

    >>> from tinyrdfjs import create
    >>> factory = create()
    >>> factory.namedNode('https://example.org/#me').termType
    'NamedNode'
"""

__version__ = "0.1.0"

from .factory import DEFAULT_BNODE_START, DataFactory, create, to_base36
from .terms import (BLANK_NODE, DEFAULT_GRAPH, DEFAULT_GRAPH_VALUE, LITERAL,
                    NAMED_NODE, QUAD, RDF, RDF_LANGSTRING, VARIABLE, XSD,
                    XSD_STRING, BlankNode, DefaultGraph, Graph, Literal,
                    NamedNode, Object, Predicate, Quad, Subject, Term,
                    TermType, ValueTerm, Variable, is_blank_node,
                    is_default_graph, is_literal, is_named_node, is_quad,
                    is_variable, term_id)

__all__ = [
    "__version__",

    # Term types
    "TermType",
    "NAMED_NODE",
    "LITERAL",
    "VARIABLE",
    "BLANK_NODE",
    "DEFAULT_GRAPH",
    "QUAD",

    # Terms
    "Term",
    "ValueTerm",
    "NamedNode",
    "Literal",
    "BlankNode",
    "Variable",
    "DefaultGraph",
    "Quad",
    "Subject",
    "Predicate",
    "Object",
    "Graph",

    # Constants
    "RDF",
    "RDF_LANGSTRING",
    "XSD",
    "XSD_STRING",
    "DEFAULT_GRAPH_VALUE",

    # Helpers
    "is_named_node",
    "is_blank_node",
    "is_literal",
    "is_variable",
    "is_default_graph",
    "is_quad",
    "term_id",

    # Factory
    "DataFactory",
    "DEFAULT_BNODE_START",
    "create",
    "to_base36",
]
