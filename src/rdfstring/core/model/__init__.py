"""RDF term data model.

Terms are immutable Pydantic v2 models compared by value. The term kinds
form a closed union discriminated on ``term_type`` (``termType`` in JSON),
so a ``Quad`` can nest any other term, including further quads.
"""

from pydantic import BaseModel


class TermModel(BaseModel):
    """Base model for terms and string quads.

    Models are frozen so terms behave as hashable value objects; the codec
    never mutates a term after construction.
    """

    model_config = {
        "extra": "forbid",
        "frozen": True,
        "populate_by_name": True,
    }


# TermModel must be defined before the modules that subclass it
# ruff: noqa: E402
from rdfstring.core.model.string_quad import StringQuad
from rdfstring.core.model.terms import (
    DEFAULT_GRAPH,
    BlankNode,
    DefaultGraph,
    Literal,
    NamedNode,
    Quad,
    Term,
    TermAdapter,
    Variable,
)

__all__ = [
    "TermModel",
    # Terms
    "Term",
    "TermAdapter",
    "NamedNode",
    "BlankNode",
    "Variable",
    "DefaultGraph",
    "DEFAULT_GRAPH",
    "Literal",
    "Quad",
    # String form
    "StringQuad",
]
