"""Core term codec: encoding, decoding, escaping and the term model."""

from rdfstring.core.decoder import split_nested_quad, string_to_term
from rdfstring.core.encoder import term_to_string
from rdfstring.core.escaping import escape_iri, escape_string, unescape_string
from rdfstring.core.factory import (
    DataFactory,
    TermFactory,
    VariableFactory,
    get_default_factory,
    supports_variables,
)
from rdfstring.core.literals import (
    LiteralParts,
    get_literal_direction,
    get_literal_language,
    get_literal_type,
    get_literal_value,
    parse_literal,
)
from rdfstring.core.quads import quad_to_string_quad, string_quad_to_quad

__all__ = [
    # Codec
    "term_to_string",
    "string_to_term",
    "split_nested_quad",
    "quad_to_string_quad",
    "string_quad_to_quad",
    # Literals
    "LiteralParts",
    "parse_literal",
    "get_literal_value",
    "get_literal_type",
    "get_literal_language",
    "get_literal_direction",
    # Escaping
    "escape_iri",
    "escape_string",
    "unescape_string",
    # Factories
    "DataFactory",
    "VariableFactory",
    "TermFactory",
    "get_default_factory",
    "supports_variables",
]
