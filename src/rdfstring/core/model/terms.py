"""Term kinds: named nodes, blank nodes, variables, literals, the default
graph, and quads usable as terms (RDF-star style nesting).
"""

from __future__ import annotations

import typing
from typing import Annotated, Any, Union

from pydantic import Discriminator, Field, Tag, TypeAdapter, model_validator

from rdfstring.core.model import TermModel
from rdfstring.core.vocabulary import (
    RDF_DIR_LANG_STRING,
    RDF_LANG_STRING,
    XSD_STRING,
)


class NamedNode(TermModel):
    """A resource named by an IRI."""

    term_type: typing.Literal["NamedNode"] = Field(default="NamedNode", alias="termType")
    value: str


class BlankNode(TermModel):
    """An anonymous resource identified by a local label."""

    term_type: typing.Literal["BlankNode"] = Field(default="BlankNode", alias="termType")
    value: str


class Variable(TermModel):
    """A query variable."""

    term_type: typing.Literal["Variable"] = Field(default="Variable", alias="termType")
    value: str


class DefaultGraph(TermModel):
    """The unnamed graph. Its value is always the empty string."""

    term_type: typing.Literal["DefaultGraph"] = Field(default="DefaultGraph", alias="termType")
    value: typing.Literal[""] = ""


DEFAULT_GRAPH = DefaultGraph()


class Literal(TermModel):
    """A data value with a datatype and an optional language and direction.

    When no datatype is given it is derived from the other fields:
    ``xsd:string`` for plain literals, ``rdf:langString`` when a language is
    set and ``rdf:dirLangString`` when a direction is set as well.
    """

    term_type: typing.Literal["Literal"] = Field(default="Literal", alias="termType")
    value: str
    datatype: NamedNode
    language: str = ""
    direction: typing.Literal["", "ltr", "rtl"] = ""

    @model_validator(mode="before")
    @classmethod
    def _default_datatype(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("datatype") is not None:
            return data
        if data.get("language"):
            iri = RDF_DIR_LANG_STRING if data.get("direction") else RDF_LANG_STRING
        else:
            iri = XSD_STRING
        return {**data, "datatype": NamedNode(value=iri)}

    @model_validator(mode="after")
    def _check_language_fields(self) -> Literal:
        if self.direction and not self.language:
            raise ValueError("a base direction requires a language")
        if self.language:
            if "--" in self.language or any(char in self.language for char in '@"'):
                raise ValueError(f"invalid language tag {self.language!r}")
            expected = RDF_DIR_LANG_STRING if self.direction else RDF_LANG_STRING
            if self.datatype.value != expected:
                raise ValueError(f"a language-tagged literal must have datatype {expected}")
        elif self.datatype.value in (RDF_LANG_STRING, RDF_DIR_LANG_STRING):
            raise ValueError(f"datatype {self.datatype.value} requires a language")
        return self


class Quad(TermModel):
    """A subject-predicate-object statement in a graph.

    Quads are terms themselves, so any component may be another quad.
    """

    term_type: typing.Literal["Quad"] = Field(default="Quad", alias="termType")
    subject: Term
    predicate: Term
    object: Term
    graph: Term = DEFAULT_GRAPH


def _term_tag(value: Any) -> str | None:
    """Read the discriminator from raw JSON data or a term instance."""
    if isinstance(value, dict):
        return value.get("termType", value.get("term_type"))
    return getattr(value, "term_type", None)


Term = Annotated[
    Union[
        Annotated[NamedNode, Tag("NamedNode")],
        Annotated[BlankNode, Tag("BlankNode")],
        Annotated[Variable, Tag("Variable")],
        Annotated[DefaultGraph, Tag("DefaultGraph")],
        Annotated[Literal, Tag("Literal")],
        Annotated[Quad, Tag("Quad")],
    ],
    Discriminator(_term_tag),
]

Quad.model_rebuild()

# Validates any term from plain data, e.g. parsed JSON
TermAdapter: TypeAdapter[Term] = TypeAdapter(Term)
