"""rdfstring: string encoding of RDF terms and quads.

Converts between structured RDF terms (named nodes, blank nodes, variables,
literals, the default graph and nested quads) and a compact single-line
string form.

Example:
    from rdfstring import string_to_term, term_to_string

    term = string_to_term('"abc"@en--ltr')
    term.language, term.direction  # ('en', 'ltr')
    term_to_string(term)  # '"abc"@en--ltr'
"""

from rdfstring.core import (
    DataFactory,
    LiteralParts,
    TermFactory,
    VariableFactory,
    escape_iri,
    escape_string,
    get_default_factory,
    get_literal_direction,
    get_literal_language,
    get_literal_type,
    get_literal_value,
    parse_literal,
    quad_to_string_quad,
    split_nested_quad,
    string_quad_to_quad,
    string_to_term,
    supports_variables,
    term_to_string,
    unescape_string,
)
from rdfstring.core.errors import (
    InvalidDirectionError,
    InvalidIriError,
    InvalidLiteralError,
    MissingCapabilityError,
    NestedQuadArityError,
    NestedQuadSyntaxError,
    TermSyntaxError,
    UnbalancedTagError,
    UnsupportedTermError,
)
from rdfstring.core.model import (
    DEFAULT_GRAPH,
    BlankNode,
    DefaultGraph,
    Literal,
    NamedNode,
    Quad,
    StringQuad,
    Term,
    Variable,
)

__version__ = "0.1.0"

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
    # Terms
    "Term",
    "NamedNode",
    "BlankNode",
    "Variable",
    "DefaultGraph",
    "DEFAULT_GRAPH",
    "Literal",
    "Quad",
    "StringQuad",
    # Factories
    "DataFactory",
    "VariableFactory",
    "TermFactory",
    "get_default_factory",
    "supports_variables",
    # Errors
    "TermSyntaxError",
    "InvalidLiteralError",
    "InvalidDirectionError",
    "InvalidIriError",
    "NestedQuadSyntaxError",
    "UnbalancedTagError",
    "NestedQuadArityError",
    "MissingCapabilityError",
    "UnsupportedTermError",
]
