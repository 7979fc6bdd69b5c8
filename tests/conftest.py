"""Global pytest configuration and fixtures."""

from __future__ import annotations

import pytest

from rdfstring.core.factory import TermFactory
from rdfstring.core.model import Literal, NamedNode, Quad


@pytest.fixture
def factory() -> TermFactory:
    """A fresh default data factory."""
    return TermFactory()


@pytest.fixture
def triple() -> Quad:
    """The ``<ex:s> <ex:p> <ex:o>`` triple in the default graph."""
    return Quad(
        subject=NamedNode(value="ex:s"),
        predicate=NamedNode(value="ex:p"),
        object=NamedNode(value="ex:o"),
    )


@pytest.fixture
def example_quad() -> Quad:
    """A quad with a literal object in a named graph."""
    return Quad(
        subject=NamedNode(value="http://example.org"),
        predicate=NamedNode(value="http://example.org/p"),
        object=Literal(value="literal"),
        graph=NamedNode(value="http://example.org/graph"),
    )
