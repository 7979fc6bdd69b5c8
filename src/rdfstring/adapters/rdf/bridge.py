"""Conversion between rdfstring terms and rdflib nodes.

rdflib has no counterpart for directional language strings or for quads
used as terms; converting those raises ``UnsupportedTermError``. The
default graph maps to rdflib's ``DATASET_DEFAULT_GRAPH_ID``. Literal values
keep their lexical form; rdflib never normalizes them here.

Example:
    from rdflib import Dataset
    from rdfstring.adapters.rdf import dataset_to_string_quads, string_to_rdflib

    string_to_rdflib("<http://example.org>")  # URIRef('http://example.org')

    for record in dataset_to_string_quads(dataset):
        print(record.subject, record.predicate, record.object, record.graph)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from rdflib import BNode, Dataset, URIRef
from rdflib import Literal as RdfLiteral
from rdflib.graph import DATASET_DEFAULT_GRAPH_ID
from rdflib.term import Node
from rdflib.term import Variable as RdfVariable

from rdfstring.core.decoder import string_to_term
from rdfstring.core.encoder import term_to_string
from rdfstring.core.errors import MissingCapabilityError, UnsupportedTermError
from rdfstring.core.factory import DataFactory, get_default_factory, supports_variables
from rdfstring.core.model import StringQuad
from rdfstring.core.quads import quad_to_string_quad, string_quad_to_quad
from rdfstring.core.vocabulary import XSD_STRING

RdfQuad = tuple[Node, Node, Node, Node]


def to_rdflib(term: Any) -> Node:
    """Convert a term to the equivalent rdflib node.

    Args:
        term: A term with a ``term_type`` attribute

    Returns:
        URIRef, BNode, Variable or Literal; the default graph becomes
        ``DATASET_DEFAULT_GRAPH_ID``

    Raises:
        UnsupportedTermError: For quads, directional literals and non-terms
    """
    term_type = getattr(term, "term_type", None)
    if term_type == "NamedNode":
        return URIRef(term.value)
    if term_type == "BlankNode":
        return BNode(term.value)
    if term_type == "Variable":
        return RdfVariable(term.value)
    if term_type == "DefaultGraph":
        return DATASET_DEFAULT_GRAPH_ID
    if term_type == "Literal":
        if term.direction:
            raise UnsupportedTermError(term, "rdflib has no base direction")
        if term.language:
            return RdfLiteral(term.value, lang=term.language, normalize=False)
        datatype = term.datatype.value
        if datatype == XSD_STRING:
            return RdfLiteral(term.value, normalize=False)
        return RdfLiteral(term.value, datatype=URIRef(datatype), normalize=False)
    if term_type == "Quad":
        raise UnsupportedTermError(term, "rdflib has no quad terms")
    raise UnsupportedTermError(term)


def from_rdflib(node: Node | None, data_factory: DataFactory | None = None) -> Any:
    """Convert an rdflib node to a term built by the data factory.

    ``None`` and ``DATASET_DEFAULT_GRAPH_ID`` become the default graph.
    Plain rdflib literals get the ``xsd:string`` datatype.
    """
    if data_factory is None:
        data_factory = get_default_factory()

    if node is None or node == DATASET_DEFAULT_GRAPH_ID:
        return data_factory.default_graph()
    if isinstance(node, URIRef):
        return data_factory.named_node(str(node))
    if isinstance(node, BNode):
        return data_factory.blank_node(str(node))
    if isinstance(node, RdfVariable):
        if not supports_variables(data_factory):
            raise MissingCapabilityError(node.n3(), "variable")
        return data_factory.variable(str(node))  # type: ignore[attr-defined]
    if isinstance(node, RdfLiteral):
        if node.language:
            return data_factory.literal(str(node), language=node.language.lower())
        datatype = str(node.datatype) if node.datatype is not None else XSD_STRING
        return data_factory.literal(str(node), data_factory.named_node(datatype))
    raise UnsupportedTermError(node)


def quad_to_rdflib(quad: Any) -> RdfQuad:
    """Convert a quad to an rdflib ``(s, p, o, g)`` tuple."""
    return (
        to_rdflib(quad.subject),
        to_rdflib(quad.predicate),
        to_rdflib(quad.object),
        to_rdflib(quad.graph),
    )


def quad_from_rdflib(
    quad: tuple[Node, ...],
    data_factory: DataFactory | None = None,
) -> Any:
    """Convert an rdflib triple or quad tuple to a quad.

    The graph position may be missing, None, an identifier or a Graph.
    """
    if data_factory is None:
        data_factory = get_default_factory()
    if len(quad) not in (3, 4):
        raise ValueError(f"Expected a triple or quad, got {len(quad)} components")
    graph = quad[3] if len(quad) == 4 else None
    graph = getattr(graph, "identifier", graph)
    return data_factory.quad(
        from_rdflib(quad[0], data_factory),
        from_rdflib(quad[1], data_factory),
        from_rdflib(quad[2], data_factory),
        from_rdflib(graph, data_factory),
    )


def string_to_rdflib(value: str | None) -> Node:
    """Decode a string-encoded term straight to an rdflib node."""
    return to_rdflib(string_to_term(value))


def rdflib_to_string(node: Node | None) -> str:
    """Encode an rdflib node in the string term encoding."""
    return term_to_string(from_rdflib(node)) or ""


def dataset_to_string_quads(dataset: Dataset) -> Iterator[StringQuad]:
    """Yield every quad of an rdflib Dataset as a StringQuad."""
    for quad in dataset.quads((None, None, None, None)):
        yield quad_to_string_quad(quad_from_rdflib(quad))


def string_quads_to_dataset(
    records: Iterable[StringQuad | dict[str, str]],
    dataset: Dataset | None = None,
) -> Dataset:
    """Decode string quads and add them to an rdflib Dataset.

    Quads in the default graph are added to the dataset's default graph.
    """
    if dataset is None:
        dataset = Dataset()
    for record in records:
        subject, predicate, obj, graph = quad_to_rdflib(string_quad_to_quad(record))
        if graph == DATASET_DEFAULT_GRAPH_ID:
            dataset.add((subject, predicate, obj))
        else:
            dataset.add((subject, predicate, obj, graph))
    return dataset
