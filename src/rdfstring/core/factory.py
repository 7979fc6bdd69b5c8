"""Term construction for the decoder.

The decoder never instantiates terms itself. It calls a data factory, so
callers can decode into their own term classes by passing any object that
implements ``DataFactory``. Building variables is optional: factories that
also implement ``VariableFactory`` can decode ``?name`` strings.

Example:
    from rdfstring.core.factory import TermFactory

    factory = TermFactory()
    node = factory.named_node("http://example.org/s")
    label = factory.literal("chat", language="fr")
"""

from __future__ import annotations

import itertools
from typing import Any, Protocol, runtime_checkable

from rdfstring.core.model import (
    DEFAULT_GRAPH,
    BlankNode,
    DefaultGraph,
    Literal,
    NamedNode,
    Quad,
    Term,
    Variable,
)


@runtime_checkable
class DataFactory(Protocol):
    """Constructors the decoder needs, one per term kind."""

    def named_node(self, value: str) -> Any: ...

    def blank_node(self, value: str | None = None) -> Any: ...

    def literal(
        self,
        value: str,
        datatype: Any | None = None,
        language: str = "",
        direction: str = "",
    ) -> Any: ...

    def default_graph(self) -> Any: ...

    def quad(
        self,
        subject: Any,
        predicate: Any,
        object: Any,
        graph: Any | None = None,
    ) -> Any: ...


@runtime_checkable
class VariableFactory(Protocol):
    """Optional capability for factories that can build variables."""

    def variable(self, value: str) -> Any: ...


def supports_variables(data_factory: Any) -> bool:
    """Return whether the factory can construct variables."""
    return isinstance(data_factory, VariableFactory) and callable(data_factory.variable)


class TermFactory:
    """Default factory producing ``rdfstring.core.model`` terms.

    Blank nodes created without a label get fresh labels ``b0``, ``b1``, ...
    scoped to the factory instance.
    """

    def __init__(self) -> None:
        self._blank_ids = itertools.count()

    def named_node(self, value: str) -> NamedNode:
        return NamedNode(value=value)

    def blank_node(self, value: str | None = None) -> BlankNode:
        if value is None:
            value = f"b{next(self._blank_ids)}"
        return BlankNode(value=value)

    def literal(
        self,
        value: str,
        datatype: NamedNode | None = None,
        language: str = "",
        direction: str = "",
    ) -> Literal:
        """Create a literal.

        With a language the datatype is ignored and derived from the
        language and direction; otherwise it defaults to ``xsd:string``.
        """
        if language:
            return Literal(value=value, language=language, direction=direction)
        return Literal(value=value, datatype=datatype)

    def variable(self, value: str) -> Variable:
        return Variable(value=value)

    def default_graph(self) -> DefaultGraph:
        return DEFAULT_GRAPH

    def quad(
        self,
        subject: Term,
        predicate: Term,
        object: Term,
        graph: Term | None = None,
    ) -> Quad:
        return Quad(
            subject=subject,
            predicate=predicate,
            object=object,
            graph=graph if graph is not None else DEFAULT_GRAPH,
        )


_default_factory: TermFactory | None = None


def get_default_factory() -> TermFactory:
    """Return the shared default factory (created on first use)."""
    global _default_factory
    if _default_factory is None:
        _default_factory = TermFactory()
    return _default_factory
