"""Conversion between quads and string quads.

Example:
    from rdfstring.core.quads import quad_to_string_quad, string_quad_to_quad

    string_quad = quad_to_string_quad(quad)
    string_quad.graph  # '' for the default graph
    quad = string_quad_to_quad({"subject": "<ex:s>", "predicate": "<ex:p>", "object": '"o"'})
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rdfstring.core.decoder import string_to_term
from rdfstring.core.encoder import term_to_string
from rdfstring.core.factory import DataFactory, get_default_factory
from rdfstring.core.model import StringQuad


def quad_to_string_quad(quad: Any) -> StringQuad:
    """Encode each component of a quad.

    The graph field is always set; it is the empty string for the default graph.
    """
    return StringQuad(
        subject=term_to_string(quad.subject),
        predicate=term_to_string(quad.predicate),
        object=term_to_string(quad.object),
        graph=term_to_string(quad.graph),
    )


def string_quad_to_quad(
    string_quad: StringQuad | Mapping[str, str],
    data_factory: DataFactory | None = None,
) -> Any:
    """Decode each field of a string quad and build a quad.

    Args:
        string_quad: A StringQuad, or a mapping with subject, predicate,
            object and an optional graph key
        data_factory: Factory used to construct the terms

    Returns:
        The quad built by the data factory; a missing graph is the default graph
    """
    if not isinstance(string_quad, StringQuad):
        string_quad = StringQuad.model_validate(string_quad)
    if data_factory is None:
        data_factory = get_default_factory()
    return data_factory.quad(
        string_to_term(string_quad.subject, data_factory),
        string_to_term(string_quad.predicate, data_factory),
        string_to_term(string_quad.object, data_factory),
        string_to_term(string_quad.graph, data_factory),
    )
