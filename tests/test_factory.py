"""
Tests for the data factory.
Run with: python -m pytest tests/ -v
"""

import logging
import re
from concurrent.futures import ThreadPoolExecutor

import pytest

import tinyrdfjs.factory as factory_module
from tinyrdfjs import (
    DEFAULT_BNODE_START,
    RDF_LANGSTRING,
    XSD,
    XSD_STRING,
    BlankNode,
    DataFactory,
    DefaultGraph,
    Literal,
    NamedNode,
    Quad,
    Variable,
    create,
    to_base36,
)

BASE36 = re.compile(r'^[0-9a-z]+$')


@pytest.fixture
def factory():
    return create()


class TestBlankNodes:
    """Label generation and passthrough."""

    def test_generated_labels_are_distinct(self, factory):
        labels = [factory.blankNode().value for _ in range(2000)]
        assert len(set(labels)) == len(labels)

    def test_generated_labels_increase(self, factory):
        counts = [int(factory.blankNode().value, 36) for _ in range(100)]
        assert counts == sorted(counts)
        assert counts[0] == DEFAULT_BNODE_START + 1
        assert counts[-1] == DEFAULT_BNODE_START + 100

    def test_generated_labels_are_base36(self, factory):
        for _ in range(100):
            assert BASE36.match(factory.blankNode().value)

    def test_first_labels(self, factory):
        assert factory.blankNode() == BlankNode("2")
        assert factory.blankNode() == BlankNode("3")

    def test_minted_through_package_helper(self, factory, monkeypatch):
        minted = []

        def record(label):
            minted.append(label)
            return BlankNode(label)

        monkeypatch.setattr(factory_module, "_blank_node", record)
        factory.blankNode()
        factory.blankNode("plain")
        factory.blankNode("a#b")
        assert minted == ["2", "plain", "3"]

    def test_passthrough(self, factory):
        assert factory.blankNode("plainLabel").value == "plainLabel"
        assert factory.blankNode("").value == ""

    def test_fragment_label_is_replaced(self, factory):
        bnode = factory.blankNode("foo#bar")
        assert bnode.value != "foo#bar"
        assert bnode.value == "2"
        assert factory.blankNode() == BlankNode("3")

    def test_passthrough_does_not_advance(self, factory):
        factory.blankNode("a")
        factory.blankNode("b")
        assert factory.blankNode() == BlankNode("2")

    def test_start_value(self):
        factory = DataFactory(35)
        assert factory.blankNode().value == "10"

    def test_large_counter(self):
        factory = DataFactory(2 ** 70)
        assert int(factory.blankNode().value, 36) == 2 ** 70 + 1

    def test_factories_are_independent(self):
        a, b = create(), create()
        assert a.blankNode() == b.blankNode()

    def test_skip_to(self, factory):
        factory.skip_to(100)
        assert factory.blankNode().value == to_base36(101)

    def test_skip_to_never_goes_back(self, factory):
        for _ in range(10):
            factory.blankNode()
        factory.skip_to(3)
        assert int(factory.blankNode().value, 36) == DEFAULT_BNODE_START + 11

    def test_threads_do_not_share_labels(self, factory):
        def mint(_):
            return [factory.blankNode().value for _ in range(500)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            labels = [label for batch in pool.map(mint, range(8)) for label in batch]

        assert len(set(labels)) == 8 * 500

    def test_replacement_is_logged(self, factory, caplog):
        with caplog.at_level(logging.DEBUG, logger="tinyrdfjs"):
            factory.blankNode("foo#bar")
        assert "foo#bar" in caplog.text


class TestConstructors:
    """The remaining rdf.js factory methods."""

    def test_named_node(self, factory):
        node = factory.namedNode("https://example.org/#me")
        assert node == NamedNode("https://example.org/#me")

    def test_named_node_is_not_validated(self, factory):
        assert factory.namedNode("not an iri").value == "not an iri"

    def test_literal_forms(self, factory):
        plain = factory.literal("x")
        assert (plain.language, plain.datatype) == ("", XSD_STRING)

        tagged = factory.literal("x", "en")
        assert (tagged.language, tagged.datatype) == ("en", RDF_LANGSTRING)

        xsd_int = factory.namedNode(f"{XSD}integer")
        typed = factory.literal("1", xsd_int)
        assert (typed.language, typed.datatype) == ("", xsd_int)

    def test_literal_rejects_other_tags(self, factory):
        with pytest.raises(TypeError):
            factory.literal("x", 1)

    def test_variable(self, factory):
        assert factory.variable("x") == Variable("x")

    def test_default_graph(self, factory):
        graph = factory.defaultGraph()
        assert isinstance(graph, DefaultGraph)
        assert graph.value == "chrome:theSession"

    def test_quad_without_graph(self, factory):
        s = factory.blankNode()
        p = factory.namedNode("urn:x:p")
        o = factory.literal("o")
        q = factory.quad(s, p, o)
        assert isinstance(q.graph, DefaultGraph)
        assert (q.subject, q.predicate, q.object) == (s, p, o)

    def test_quad_with_graph(self, factory):
        g = factory.namedNode("urn:x:g")
        q = factory.quad(factory.namedNode("urn:x:s"), factory.namedNode("urn:x:p"),
                         factory.namedNode("urn:x:o"), g)
        assert q.graph is g

    def test_quad_equality(self, factory):
        def make(o):
            return factory.quad(factory.namedNode("urn:x:s"), factory.namedNode("urn:x:p"), o)

        assert make(factory.literal("o")).equals(make(factory.literal("o")))
        assert not make(factory.literal("o")).equals(make(factory.literal("o", "en")))

    def test_quad_typing(self, factory):
        with pytest.raises(TypeError):
            factory.quad(factory.literal("s"), factory.namedNode("urn:x:p"), factory.literal("o"))


class TestId:
    """Keys for associative structures."""

    def test_idempotent(self, factory):
        lit = factory.literal("x", "en")
        assert factory.id(lit) == factory.id(lit)
        assert factory.id(lit) == factory.id(Literal("x", "en"))

    def test_quads(self, factory):
        def make():
            return factory.quad(BlankNode("b"), NamedNode("urn:x:p"), Literal("1"))

        assert factory.id(make()) == factory.id(make())
        assert isinstance(make(), Quad)

    def test_keys_a_dict(self, factory):
        data = {factory.id(factory.namedNode("urn:x:a")): "my data"}
        assert data[factory.id(NamedNode("urn:x:a"))] == "my data"

    def test_default_graphs_share_an_id(self, factory):
        assert factory.id(DefaultGraph("other")) == factory.id(factory.defaultGraph())


class TestBase36:

    def test_digits(self):
        assert to_base36(0) == "0"
        assert to_base36(9) == "9"
        assert to_base36(10) == "a"
        assert to_base36(35) == "z"
        assert to_base36(36) == "10"
        assert to_base36(36 ** 3) == "1000"

    def test_matches_int_parsing(self):
        for n in (1, 37, 1295, 1296, 123456789, 2 ** 64 + 3):
            assert int(to_base36(n), 36) == n
